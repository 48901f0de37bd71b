# =============================================================================
# tests/test_api.py - Endpoint Tests
# =============================================================================
# Exercises every route through FastAPI's TestClient, including the ordering
# of authentication before validation on mutating routes.
# =============================================================================


# =============================================================================
# Root and Health
# =============================================================================

class TestRoot:
    """Tests for the welcome and health endpoints."""

    def test_welcome(self, client):
        resp = client.get("/")

        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Welcome to the Product API!"
        assert body["endpoints"]["products"] == "/api/products"
        assert body["endpoints"]["stats"] == "/api/products/stats"

    def test_health(self, client):
        resp = client.get("/api/health")

        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"
        assert resp.json()["productCount"] == 5

    def test_liveness(self, client):
        resp = client.get("/api/health/live")

        assert resp.status_code == 200
        assert resp.json()["status"] == "alive"


# =============================================================================
# Read Endpoints
# =============================================================================

class TestListProducts:
    """Tests for GET /api/products."""

    def test_list_all(self, client):
        resp = client.get("/api/products")

        assert resp.status_code == 200
        body = resp.json()
        assert len(body["data"]) == 5
        assert body["pagination"] == {"total": 5, "page": 1, "limit": 10, "totalPages": 1}
        assert body["data"][0]["inStock"] is True

    def test_filter_by_category(self, client):
        resp = client.get("/api/products", params={"category": "kitchen"})

        names = [p["name"] for p in resp.json()["data"]]
        assert names == ["Coffee Maker", "Water Bottle"]

    def test_filter_out_of_stock(self, client):
        resp = client.get("/api/products", params={"inStock": "false"})

        data = resp.json()["data"]
        assert len(data) == 1
        assert data[0]["name"] == "Coffee Maker"

    def test_pagination(self, client):
        resp = client.get("/api/products", params={"limit": 2, "page": 2})

        body = resp.json()
        assert [p["id"] for p in body["data"]] == ["3", "4"]
        assert body["pagination"]["totalPages"] == 3
        assert body["pagination"]["page"] == 2
        assert body["pagination"]["limit"] == 2

    def test_page_out_of_range(self, client):
        resp = client.get("/api/products", params={"page": 50})

        assert resp.status_code == 200
        assert resp.json()["data"] == []

    def test_zero_limit_rejected(self, client):
        resp = client.get("/api/products", params={"limit": 0})

        assert resp.status_code == 400
        assert resp.json()["error"]["name"] == "ValidationError"
        assert "limit" in resp.json()["error"]["message"]

    def test_non_numeric_page_rejected(self, client):
        resp = client.get("/api/products", params={"page": "abc"})

        assert resp.status_code == 400
        assert resp.json()["error"]["name"] == "ValidationError"

    def test_bad_in_stock_rejected(self, client):
        resp = client.get("/api/products", params={"inStock": "maybe"})

        assert resp.status_code == 400
        assert resp.json()["error"]["message"] == "inStock must be either 'true' or 'false'"


class TestSearch:
    """Tests for GET /api/products/search."""

    def test_search_laptop(self, client):
        resp = client.get("/api/products/search", params={"q": "laptop"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["query"] == "laptop"
        assert body["count"] == 1
        assert body["data"][0]["name"] == "Laptop"

    def test_search_requires_query(self, client):
        resp = client.get("/api/products/search")

        error = resp.json()["error"]
        assert resp.status_code == 400
        assert error["name"] == "ValidationError"
        assert error["message"] == 'Search query parameter "q" is required'


class TestStats:
    """Tests for GET /api/products/stats."""

    def test_seed_stats(self, client):
        resp = client.get("/api/products/stats")

        assert resp.status_code == 200
        assert resp.json() == {
            "totalProducts": 5,
            "inStock": 4,
            "outOfStock": 1,
            "byCategory": {"electronics": 2, "kitchen": 2, "furniture": 1},
            "averagePrice": 465,
            "totalValue": 2325,
        }

    def test_empty_store_stats(self, client, auth_headers):
        for product_id in ["1", "2", "3", "4", "5"]:
            client.delete(f"/api/products/{product_id}", headers=auth_headers)

        resp = client.get("/api/products/stats")

        assert resp.status_code == 200
        assert resp.json()["averagePrice"] == 0
        assert resp.json()["totalValue"] == 0


class TestGetProduct:
    """Tests for GET /api/products/{id}."""

    def test_get_existing(self, client):
        resp = client.get("/api/products/4")

        assert resp.status_code == 200
        assert resp.json()["name"] == "Desk Chair"

    def test_wire_shape_matches_record(self, client):
        body = client.get("/api/products/1").json()

        assert list(body) == ["id", "name", "description", "price", "category", "inStock"]
        assert body["price"] == 1200
        assert type(body["price"]) is int

    def test_get_missing(self, client):
        resp = client.get("/api/products/nonexistent")

        assert resp.status_code == 404
        assert resp.json()["error"]["name"] == "NotFoundError"
        assert resp.json()["error"]["message"] == "Product with id nonexistent not found"


# =============================================================================
# Mutating Endpoints
# =============================================================================

class TestCreateProduct:
    """Tests for POST /api/products."""

    def test_create(self, client, store, auth_headers, valid_payload):
        before = {p.id for p in store.list_all()}

        resp = client.post("/api/products", json=valid_payload, headers=auth_headers)

        assert resp.status_code == 201
        body = resp.json()
        assert body["message"] == "Product created successfully"
        assert body["data"]["id"]
        assert body["data"]["id"] not in before
        assert body["data"]["name"] == "Standing Desk"
        assert body["data"]["category"] == "furniture"
        assert len(store) == 6

    def test_create_then_fetch_round_trip(self, client, auth_headers, valid_payload):
        created = client.post("/api/products", json=valid_payload, headers=auth_headers).json()["data"]

        fetched = client.get(f"/api/products/{created['id']}")

        assert fetched.status_code == 200
        assert fetched.json() == created

    def test_negative_price(self, client, store, auth_headers, valid_payload):
        valid_payload["price"] = -10

        resp = client.post("/api/products", json=valid_payload, headers=auth_headers)

        assert resp.status_code == 400
        assert resp.json()["error"]["name"] == "ValidationError"
        assert "Price" in resp.json()["error"]["message"]
        assert len(store) == 5

    def test_oversized_integer_price(self, client, store, auth_headers, valid_payload):
        valid_payload["price"] = 10 ** 400

        resp = client.post("/api/products", json=valid_payload, headers=auth_headers)

        assert resp.status_code == 400
        assert resp.json()["error"]["name"] == "ValidationError"
        assert "Price" in resp.json()["error"]["message"]
        assert len(store) == 5

    def test_integer_past_json_digit_limit(self, client, store, auth_headers):
        body = b'{"name": "Lamp", "price": ' + b"9" * 5000 + b"}"

        resp = client.post(
            "/api/products",
            content=body,
            headers={**auth_headers, "content-type": "application/json"},
        )

        assert resp.status_code == 400
        assert resp.json()["error"]["name"] == "ValidationError"
        assert len(store) == 5

    def test_all_field_errors_reported(self, client, auth_headers):
        resp = client.post("/api/products", json={}, headers=auth_headers)

        message = resp.json()["error"]["message"]
        assert resp.status_code == 400
        for field in ("Name", "Description", "Price", "Category", "inStock"):
            assert field in message

    def test_malformed_json(self, client, auth_headers):
        resp = client.post(
            "/api/products",
            content=b"{not json",
            headers={**auth_headers, "content-type": "application/json"},
        )

        assert resp.status_code == 400
        assert resp.json()["error"]["message"] == "Request body must be a JSON object"

    def test_array_body_rejected(self, client, auth_headers):
        resp = client.post("/api/products", json=[1, 2], headers=auth_headers)

        assert resp.status_code == 400
        assert resp.json()["error"]["name"] == "ValidationError"

    def test_missing_api_key(self, client, store, valid_payload):
        resp = client.post("/api/products", json=valid_payload)

        assert resp.status_code == 401
        assert resp.json()["error"]["name"] == "AuthenticationError"
        assert resp.json()["error"]["message"] == "API key is required"
        assert len(store) == 5

    def test_wrong_api_key(self, client, valid_payload):
        resp = client.post("/api/products", json=valid_payload, headers={"x-api-key": "nope"})

        assert resp.status_code == 401
        assert resp.json()["error"]["message"] == "Invalid API key"

    def test_auth_checked_before_validation(self, client):
        resp = client.post("/api/products", json={"price": -1})

        assert resp.status_code == 401


class TestUpdateProduct:
    """Tests for PUT /api/products/{id}."""

    def test_update_keeps_path_id(self, client, auth_headers, valid_payload):
        valid_payload["id"] = "not-this-one"

        resp = client.put("/api/products/2", json=valid_payload, headers=auth_headers)

        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Product updated successfully"
        assert body["data"]["id"] == "2"
        assert client.get("/api/products/2").json()["name"] == "Standing Desk"

    def test_update_replaces_every_field(self, client, auth_headers):
        payload = {
            "name": "Phone",
            "description": "Refurbished",
            "price": 0,
            "category": "Refurb",
            "inStock": False,
        }

        resp = client.put("/api/products/2", json=payload, headers=auth_headers)

        assert resp.json()["data"] == {**payload, "id": "2", "category": "refurb"}

    def test_update_missing(self, client, auth_headers, valid_payload):
        resp = client.put("/api/products/missing", json=valid_payload, headers=auth_headers)

        assert resp.status_code == 404
        assert resp.json()["error"]["name"] == "NotFoundError"

    def test_update_requires_key(self, client, valid_payload):
        resp = client.put("/api/products/2", json=valid_payload)

        assert resp.status_code == 401
        assert resp.json()["error"]["message"] == "API key is required"


class TestDeleteProduct:
    """Tests for DELETE /api/products/{id}."""

    def test_delete(self, client, store, auth_headers):
        resp = client.delete("/api/products/1", headers=auth_headers)

        assert resp.status_code == 200
        assert resp.json()["message"] == "Product deleted successfully"
        assert resp.json()["data"]["name"] == "Laptop"
        assert len(store) == 4
        assert client.get("/api/products/1").status_code == 404

    def test_delete_missing_leaves_store_unchanged(self, client, store, auth_headers):
        resp = client.delete("/api/products/missing", headers=auth_headers)

        assert resp.status_code == 404
        assert resp.json()["error"]["name"] == "NotFoundError"
        assert len(store) == 5

    def test_delete_wrong_key(self, client, store):
        resp = client.delete("/api/products/1", headers={"x-api-key": "wrong"})

        assert resp.status_code == 401
        assert resp.json()["error"]["message"] == "Invalid API key"
        assert len(store) == 5
