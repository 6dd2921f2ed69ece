# tests/test_products.py
from app.models.product import Product


# -------- Create / read --------


def test_create_then_get_round_trips_all_fields(client, product_payload):
    created = client.post("/product", json=product_payload)
    assert created.status_code == 201
    body = created.json()
    assert isinstance(body["id"], int)

    fetched = client.get(f"/product/{body['id']}")
    assert fetched.status_code == 200
    product = fetched.json()

    for key, value in product_payload.items():
        assert product[key] == value, key
    assert product["dimensions"]["depth"] == 28.01
    assert product["tags"] == ["beauty", "mascara"]


def test_create_defaults_missing_fields(client):
    resp = client.post("/product", json={"title": "Bare"})
    assert resp.status_code == 201
    body = resp.json()

    assert body["title"] == "Bare"
    assert body["price"] is None
    assert body["brand"] is None
    assert body["tags"] == []
    assert body["images"] == []
    assert body["dimensions"] == {}
    assert body["meta"] == {}


def test_create_null_json_fields_become_empty(client):
    resp = client.post("/product", json={"title": "Nulls", "tags": None, "meta": None})
    assert resp.status_code == 201
    assert resp.json()["tags"] == []
    assert resp.json()["meta"] == {}


def test_create_ignores_client_supplied_id(client, seed):
    existing = seed(Product(title="First"))

    resp = client.post("/product", json={"id": existing.id, "title": "Second"})
    assert resp.status_code == 201
    assert resp.json()["id"] != existing.id


def test_get_missing_product_is_404(client):
    resp = client.get("/product/9999")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Product not found"}


def test_get_non_positive_id_is_400(client):
    assert client.get("/product/0").status_code == 400
    resp = client.get("/product/abc")
    assert resp.status_code == 400
    assert "error" in resp.json()


# -------- Replace (PUT) --------


def test_put_overwrites_every_column(client, seed, product_payload):
    product = seed(Product(**product_payload))

    resp = client.put(f"/product/{product.id}", json={"title": "Renamed", "price": 12.5})
    assert resp.status_code == 200
    body = resp.json()

    assert body["id"] == product.id
    assert body["title"] == "Renamed"
    assert body["price"] == 12.5
    assert body["brand"] is None
    assert body["tags"] == []
    assert body["dimensions"] == {}


def test_put_missing_product_is_404(client, product_payload):
    resp = client.put("/product/4242", json=product_payload)
    assert resp.status_code == 404
    assert resp.json() == {"error": "Product not found"}


# -------- Partial update (PATCH) --------


def test_patch_updates_only_supplied_fields(client, seed, product_payload):
    product = seed(Product(**product_payload))

    resp = client.patch(
        f"/product/{product.id}",
        json={"price": 19.99, "tags": ["beauty", "sale"]},
    )
    assert resp.status_code == 200
    body = resp.json()

    assert body["price"] == 19.99
    assert body["tags"] == ["beauty", "sale"]
    assert body["title"] == product_payload["title"]
    assert body["dimensions"] == product_payload["dimensions"]

    again = client.get(f"/product/{product.id}").json()
    assert again["tags"] == ["beauty", "sale"]
    assert again["brand"] == "Essence"


def test_patch_missing_product_is_404(client):
    resp = client.patch("/product/4242", json={"price": 1})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Product not found"}


def test_patch_empty_body_is_400(client, seed):
    product = seed(Product(title="Untouched"))

    resp = client.patch(f"/product/{product.id}", json={})
    assert resp.status_code == 400
    assert resp.json() == {"error": "No fields provided for update"}


def test_patch_absent_body_is_400(client, seed):
    product = seed(Product(title="Untouched"))

    resp = client.patch(f"/product/{product.id}")
    assert resp.status_code == 400
    assert resp.json() == {"error": "No fields provided for update"}


def test_patch_empty_body_checked_before_lookup(client):
    assert client.patch("/product/4242", json={}).status_code == 400


def test_patch_unknown_field_is_400(client, seed):
    product = seed(Product(title="Untouched"))

    resp = client.patch(f"/product/{product.id}", json={"colour": "red"})
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_patch_cannot_change_id(client, seed):
    product = seed(Product(title="Pinned"))

    resp = client.patch(f"/product/{product.id}", json={"id": product.id + 100})
    assert resp.status_code == 400
    assert client.get(f"/product/{product.id}").status_code == 200


# -------- Delete --------


def test_delete_returns_product_then_get_is_404(client, seed, product_payload):
    product = seed(Product(**product_payload))

    resp = client.delete(f"/product/{product.id}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Product deleted"
    assert body["product"]["id"] == product.id
    assert body["product"]["tags"] == product_payload["tags"]

    assert client.get(f"/product/{product.id}").status_code == 404


def test_delete_missing_product_is_404(client):
    resp = client.delete("/product/4242")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Product not found"}


def test_null_on_sale_flag_means_not_on_sale(client, seed):
    created = client.post("/product", json={"title": "Flagless", "isOnSale": None})
    assert created.status_code == 201
    assert created.json()["isOnSale"] is False

    product = seed(Product(title="On sale", isOnSale=True))
    patched = client.patch(f"/product/{product.id}", json={"isOnSale": None})
    assert patched.status_code == 200
    assert patched.json()["isOnSale"] is False

    replaced = client.put(f"/product/{product.id}", json={"title": "Again", "isOnSale": None})
    assert replaced.status_code == 200
    assert replaced.json()["isOnSale"] is False
