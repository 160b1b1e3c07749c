"""DELETE /books/{isbn} — removal and the 404 for unknown keys."""


async def test_delete_returns_message(client, seed_book):
    res = await client.delete(f"/books/{seed_book['isbn']}")
    assert res.status_code == 200
    assert res.json() == {"message": "Book deleted"}


async def test_deleted_book_is_gone(client, seed_book, fetch_book):
    await client.delete(f"/books/{seed_book['isbn']}")

    res = await client.get(f"/books/{seed_book['isbn']}")
    assert res.status_code == 404
    assert await fetch_book(seed_book["isbn"]) is None


async def test_delete_unknown_isbn_returns_404(client, seed_book, count_books):
    res = await client.delete("/books/0000000000")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "BOOK_NOT_FOUND"
    assert await count_books() == 1
