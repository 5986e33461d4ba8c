# tests/http_api/test_transactions.py
import pytest


@pytest.fixture
def books(create_book):
    """Book A (stock 5, price 1000) and Book B (stock 2, price 500)."""
    return create_book(title="Book A", price=1000, stock=5), create_book(title="Book B", price=500, stock=2)


def _order(client, *lines):
    return client.post(
        "/transactions",
        json={"items": [{"book_id": book_id, "quantity": qty} for book_id, qty in lines]},
    )


def test_place_order_then_run_out(auth_client, books):
    book_a, book_b = books

    resp = _order(auth_client, (book_a, 3), (book_b, 2))

    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Transaction created successfully"
    assert body["data"]["total_quantity"] == 5
    assert body["data"]["total_price"] == 4000
    assert auth_client.get(f"/books/{book_a}").json()["data"]["stock_quantity"] == 2
    assert auth_client.get(f"/books/{book_b}").json()["data"]["stock_quantity"] == 0

    resp = _order(auth_client, (book_b, 1))

    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["message"].startswith(f"Insufficient stock for book {book_b}")
    assert body["data"]["book_id"] == book_b
    assert body["data"]["shortfall"] == 1


def test_unknown_book(auth_client, books):
    missing = "00000000-0000-0000-0000-000000000000"

    resp = _order(auth_client, (missing, 1))

    assert resp.status_code == 400
    assert resp.json()["message"] == f"Book {missing} not found or deleted"


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"items": []},
        {"items": [{"book_id": "nope", "quantity": 1}]},
        {"items": [{"book_id": "00000000-0000-0000-0000-000000000000", "quantity": 0}]},
        {"items": [{"book_id": "00000000-0000-0000-0000-000000000000", "quantity": "2"}]},
        {"items": [{"book_id": "00000000-0000-0000-0000-000000000000", "quantity": 1.0}]},
    ],
)
def test_invalid_body(auth_client, payload):
    resp = auth_client.post("/transactions", json=payload)

    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid body"


def test_list_and_detail(auth_client, books):
    book_a, book_b = books
    first = _order(auth_client, (book_a, 1)).json()["data"]["transaction_id"]
    second = _order(auth_client, (book_b, 2), (book_a, 1)).json()["data"]["transaction_id"]

    resp = auth_client.get("/transactions", params={"limit": 1})
    body = resp.json()
    assert body["message"] == "Get all transactions successfully"
    assert len(body["data"]) == 1
    assert body["meta"]["total"] == 2
    assert body["meta"]["total_pages"] == 2
    assert body["meta"]["next_page"] == 2

    rows = auth_client.get("/transactions", params={"orderById": "asc"}).json()["data"]
    assert {r["id"]: (r["amount"], r["price"]) for r in rows} == {
        first: (1, 1000),
        second: (3, 2000),
    }

    resp = auth_client.get(f"/transactions/{second}")
    assert resp.status_code == 200
    detail = resp.json()["data"]
    assert detail["total_price"] == 2000
    assert [(i["book_id"], i["quantity"], i["subtotal"]) for i in detail["items"]] == [
        (book_b, 2, 1000),
        (book_a, 1, 1000),
    ]


def test_unknown_transaction(auth_client):
    resp = auth_client.get("/transactions/00000000-0000-0000-0000-000000000000")

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Transaction not found", "data": {
        "order_id": "00000000-0000-0000-0000-000000000000",
    }}


def test_statistics(auth_client, books, create_book):
    book_a, book_b = books
    horror = auth_client.post("/genre", json={"name": "Horror"}).json()["data"]["id"]
    book_c = create_book(title="Book C", price=100, stock=5, genre_id=horror)

    empty = auth_client.get("/transactions/statistics").json()["data"]
    assert empty == {
        "total_transactions": 0,
        "average_nominal_per_transaction": 0,
        "most_sold_genre": None,
        "least_sold_genre": None,
    }

    _order(auth_client, (book_a, 1), (book_b, 1))
    _order(auth_client, (book_c, 2))

    resp = auth_client.get("/transactions/statistics")
    assert resp.status_code == 200
    stats = resp.json()["data"]
    assert stats["total_transactions"] == 2
    assert stats["average_nominal_per_transaction"] == 850
    # One order each: the tie resolves by name
    assert stats["most_sold_genre"] == "Fantasy"
    assert stats["least_sold_genre"] == "Fantasy"
