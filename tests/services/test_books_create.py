"""POST /books — verifies creation, schema rejection, and duplicate handling.

Invariants:
    - Valid payload → 201 with {"book": ...} equal to the input
    - Missing required fields → 400 and no row persisted
    - Duplicate isbn → 409, existing row untouched
    - Unparseable or out-of-range bodies → 400, never a 500
"""


async def test_create_returns_201_with_book(client, new_book_payload):
    res = await client.post("/books", json=new_book_payload)
    assert res.status_code == 201
    assert res.json()["book"] == new_book_payload


async def test_created_book_is_readable_by_isbn(client, new_book_payload):
    await client.post("/books", json=new_book_payload)

    res = await client.get(f"/books/{new_book_payload['isbn']}")
    assert res.status_code == 200
    assert res.json()["book"] == new_book_payload


async def test_create_without_required_data_returns_400(client, seed_book, count_books):
    res = await client.post("/books", json={
        "isbn": "0583864053",
        "author": "Barack Obama",
        "publisher": "Crown Publishing Group",
        "year": 2000,
    })
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert "'amazon_url' is a required property" in error["details"]
    assert "'pages' is a required property" in error["details"]
    assert await count_books() == 1


async def test_create_with_empty_body_returns_400(client, count_books):
    res = await client.post("/books", content=b"")
    assert res.status_code == 400
    assert len(res.json()["error"]["details"]) == 8
    assert await count_books() == 0


async def test_create_with_malformed_json_returns_400(client):
    res = await client.post(
        "/books", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["details"] == ["Request body must be valid JSON"]


async def test_create_with_string_pages_returns_400(client, new_book_payload, fetch_book):
    new_book_payload["pages"] = "768"
    res = await client.post("/books", json=new_book_payload)
    assert res.status_code == 400
    assert res.json()["error"]["details"] == ["pages: '768' is not of type 'integer'"]
    assert await fetch_book(new_book_payload["isbn"]) is None


async def test_create_duplicate_isbn_returns_409(client, seed_book, fetch_book):
    duplicate = dict(seed_book, title="Another Title")
    res = await client.post("/books", json=duplicate)
    assert res.status_code == 409
    error = res.json()["error"]
    assert error["code"] == "BOOK_CONFLICT"
    assert error["context"]["isbn"] == seed_book["isbn"]
    stored = await fetch_book(seed_book["isbn"])
    assert stored["title"] == "Becoming"


async def test_create_with_deeply_nested_body_returns_400(client, count_books):
    res = await client.post(
        "/books", content=b"[" * 100_000 + b"]" * 100_000,
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["details"] == ["Request body must be valid JSON"]
    assert await count_books() == 0


async def test_create_with_pages_beyond_column_range_returns_400(
    client, new_book_payload, fetch_book,
):
    new_book_payload["pages"] = 10**20
    res = await client.post("/books", json=new_book_payload)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert await fetch_book(new_book_payload["isbn"]) is None


async def test_create_with_overlong_isbn_returns_400(client, new_book_payload, count_books):
    new_book_payload["isbn"] = "9" * 33
    res = await client.post("/books", json=new_book_payload)
    assert res.status_code == 400
    assert await count_books() == 0


async def test_create_with_float_year_returns_400(client, new_book_payload, fetch_book):
    new_book_payload["year"] = 2020.0
    res = await client.post("/books", json=new_book_payload)
    assert res.status_code == 400
    assert res.json()["error"]["details"] == ["year: 2020.0 is not of type 'integer'"]
    assert await fetch_book(new_book_payload["isbn"]) is None
