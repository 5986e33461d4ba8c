# tests/http_api/conftest.py
import pytest


@pytest.fixture
def genre_id(auth_client):
    resp = auth_client.post("/genre", json={"name": "Fantasy"})
    return resp.json()["data"]["id"]


@pytest.fixture
def create_book(auth_client, genre_id):
    """Factory fixture posting a book; returns the new id."""

    def _create(title="The Hobbit", price=25.5, stock=10, **extra):
        payload = {
            "title": title,
            "writer": extra.get("writer", "J. R. R. Tolkien"),
            "publisher": extra.get("publisher", "Allen & Unwin"),
            "publication_year": extra.get("publication_year", 1937),
            "price": price,
            "stock_quantity": stock,
            "genre_id": extra.get("genre_id", genre_id),
        }
        resp = auth_client.post("/books", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]["id"]

    return _create
