"""
HTTP tests for shops, pizzas and beverages routes.
"""
from __future__ import annotations

from pizzahub.repositories import json_storage
from conftest import SEED, read_db


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.text == "OK"
    assert resp.headers["content-type"].startswith("text/plain")


def test_cors_allows_any_origin(client):
    resp = client.get("/api/pizzas", headers={"Origin": "http://example.test"})
    assert resp.headers.get("access-control-allow-origin") == "*"


def test_list_shops_and_get_shop(client):
    resp = client.get("/api/pizzahub")
    assert resp.status_code == 200
    assert resp.json() == SEED["pizzahub"]

    resp = client.get("/api/pizzahub/2")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Riverside"


def test_get_unknown_shop_is_404(client):
    resp = client.get("/api/pizzahub/999")
    assert resp.status_code == 404
    assert resp.json() == {"message": "PizzaHub not found"}


def test_list_pizzas_for_shop_is_idempotent(client):
    first = client.get("/api/pizzahub/1/pizzas")
    second = client.get("/api/pizzahub/1/pizzas")
    assert first.status_code == 200
    assert [p["id"] for p in first.json()] == ["p1", "p2"]
    assert first.json() == second.json()
    assert client.get("/api/pizzahub/unknown/pizzas").json() == []


def test_create_pizza_then_read_back(client, data_file):
    resp = client.post("/api/pizzahub/2/pizzas", json={"type": "veg", "name": "Quattro Formaggi"})
    assert resp.status_code == 201
    pizza = resp.json()
    assert pizza["id"].startswith("p")
    assert pizza["id"] not in {p["id"] for p in SEED["pizzas"]}
    assert pizza == {"id": pizza["id"], "shopId": "2", "type": "veg", "name": "Quattro Formaggi"}

    assert client.get(f"/api/pizzas/{pizza['id']}").json() == pizza
    assert pizza in client.get("/api/pizzahub/2/pizzas").json()
    assert len(read_db(data_file)["pizzas"]) == len(SEED["pizzas"]) + 1


def test_rapid_creates_get_distinct_ids(client):
    ids = {client.post("/api/pizzahub/1/pizzas", json={"type": "veg", "name": f"n{i}"}).json()["id"] for i in range(10)}
    assert len(ids) == 10


def test_create_pizza_requires_type_and_name(client, data_file):
    before = data_file.read_text(encoding="utf-8")
    for body in ({"name": "NoType"}, {"type": "veg"}, {"type": "", "name": "x"}, None):
        resp = client.post("/api/pizzahub/1/pizzas", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"message": "type and name are required"}
    assert data_file.read_text(encoding="utf-8") == before


def test_invalid_json_body_is_400(client):
    resp = client.post(
        "/api/pizzahub/1/pizzas",
        content=b"{broken",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"message": "Invalid request body"}


def test_non_object_body_is_400(client, data_file):
    before = data_file.read_text(encoding="utf-8")
    resp = client.post("/api/pizzahub/1/pizzas", json=[{"type": "veg", "name": "x"}])
    assert resp.status_code == 400
    assert resp.json() == {"message": "Invalid request body"}
    assert data_file.read_text(encoding="utf-8") == before


def test_patch_pizza_preserves_untouched_fields(client, data_file):
    resp = client.patch("/api/pizzas/p1", json={"type": "vegan", "crust": "thin"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Pizza updated successfully"
    assert body["pizza"] == {"id": "p1", "shopId": "1", "type": "vegan", "name": "Margherita", "crust": "thin"}
    assert read_db(data_file)["pizzas"][0] == body["pizza"]


def test_patch_cannot_change_id(client):
    resp = client.patch("/api/pizzas/p1", json={"id": "other"})
    assert resp.json()["pizza"]["id"] == "p1"
    assert client.get("/api/pizzas/p1").status_code == 200


def test_patch_unknown_pizza_is_404(client):
    resp = client.patch("/api/pizzas/nope", json={"type": "vegan"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Pizza not found"}


def test_delete_pizza_removes_exactly_one(client, data_file):
    resp = client.delete("/api/pizzas/p2")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Pizza p2 deleted"}
    db = read_db(data_file)
    assert len(db["pizzas"]) == len(SEED["pizzas"]) - 1
    assert client.get("/api/pizzas/p2").status_code == 404
    # soft references are kept
    assert any(b["pizzaId"] == "p2" for b in db["beverages"])


def test_delete_unknown_pizza_does_not_write(client, monkeypatch):
    calls = []
    monkeypatch.setattr(json_storage, "save", lambda db, path=None: calls.append(db) or True)
    resp = client.delete("/api/pizzas/unknown-id")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Pizza not found"}
    assert calls == []


def test_beverages_list_and_create(client, data_file):
    assert client.get("/api/pizzas/p1/beverages").json() == [{"id": "b1", "pizzaId": "p1", "name": "Lemonade"}]
    assert client.get("/api/pizzas/p3/beverages").json() == []

    resp = client.post("/api/pizzas/p3/beverages", json={"name": "Iced Tea"})
    assert resp.status_code == 201
    bev = resp.json()
    assert bev["id"].startswith("b") and bev["pizzaId"] == "p3" and bev["name"] == "Iced Tea"
    assert client.get("/api/pizzas/p3/beverages").json() == [bev]


def test_beverage_requires_name(client, data_file):
    resp = client.post("/api/pizzas/p1/beverages", json={})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Beverage name required"}
    assert len(read_db(data_file)["beverages"]) == len(SEED["beverages"])


def test_broken_store_serves_empty_collections(client, data_file):
    data_file.write_text("garbage", encoding="utf-8")
    assert client.get("/api/pizzas").json() == []
    assert client.get("/api/pizzahub/1").status_code == 404


def test_unknown_route_uses_message_shape(client):
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert "message" in resp.json()
