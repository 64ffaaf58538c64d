def test_create_and_list_items_of_each_type(client):
    book = client.post(
        "/api/v1/items",
        json={"type": "book", "name": "JPA BOOK", "price": 10000, "stockQuantity": 5, "author": "kim", "isbn": "123"},
    )
    album = client.post(
        "/api/v1/items",
        json={"type": "album", "name": "ALBUM", "price": 15000, "stockQuantity": 3, "artist": "iu"},
    )
    movie = client.post(
        "/api/v1/items",
        json={"type": "movie", "name": "MOVIE", "price": 9000, "stock_quantity": 1, "director": "bong"},
    )

    assert [book.status_code, album.status_code, movie.status_code] == [200, 200, 200]

    items = client.get("/api/v1/items").json()
    assert items == [
        {"id": book.json()["id"], "type": "book", "name": "JPA BOOK", "price": 10000, "stockQuantity": 5},
        {"id": album.json()["id"], "type": "album", "name": "ALBUM", "price": 15000, "stockQuantity": 3},
        {"id": movie.json()["id"], "type": "movie", "name": "MOVIE", "price": 9000, "stockQuantity": 1},
    ]


def test_create_item_requires_known_type(client):
    response = client.post(
        "/api/v1/items",
        json={"type": "poster", "name": "X", "price": 1, "stockQuantity": 1},
    )

    assert response.status_code == 422


def test_create_item_rejects_negative_stock(client):
    response = client.post(
        "/api/v1/items",
        json={"type": "book", "name": "X", "price": 1, "stockQuantity": -1},
    )

    assert response.status_code == 422


def test_update_item(client):
    item_id = client.post(
        "/api/v1/items",
        json={"type": "book", "name": "old", "price": 1, "stockQuantity": 1},
    ).json()["id"]

    response = client.put(
        f"/api/v1/items/{item_id}",
        json={"name": "new", "price": 2, "stockQuantity": 7},
    )

    assert response.status_code == 200
    assert response.json() == {"id": item_id, "type": "book", "name": "new", "price": 2, "stockQuantity": 7}


def test_update_unknown_item_returns_not_found(client):
    response = client.put("/api/v1/items/404", json={"name": "x", "price": 1, "stockQuantity": 1})

    assert response.status_code == 404
