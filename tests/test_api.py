"""
HTTP tests through FastAPI's TestClient
"""
import pytest

from sdui_service.models.schemas.core import Mode


class TestUiConfigEndpoint:

    def test_home_descriptor(self, client):
        response = client.get("/api/ui-config")
        assert response.status_code == 200
        body = response.json()
        assert body["screen_id"] == "home"
        assert body["metadata"]["mode"] == "flash_sale"
        assert set(body) == {"screen_id", "layout_type", "theme", "components", "navigation", "metadata"}

    def test_mode_and_timestamp_headers(self, client):
        response = client.get("/api/ui-config", params={"screen": "/cart"})
        body = response.json()
        assert response.headers["X-UI-Mode"] == body["metadata"]["mode"]
        assert response.headers["X-Generated-At"] == body["metadata"]["timestamp"] == "2025-06-02T12:47:37Z"

    @pytest.mark.parametrize("screen, screen_id", [
        ("/", "home"),
        ("", "home"),
        ("home", "home"),
        ("/cart", "cart"),
        ("/profile", "profile"),
        ("/search", "search"),
        ("/favorites", "favorites"),
        ("/does-not-exist", "home"),
    ])
    def test_screen_routing(self, client, screen, screen_id):
        response = client.get("/api/ui-config", params={"screen": screen})
        assert response.status_code == 200
        assert response.json()["screen_id"] == screen_id

    def test_product_screen(self, client):
        body = client.get("/api/ui-config", params={"screen": "/product", "id": "prod_5"}).json()
        info = next(c for c in body["components"] if c["id"] == "product-info")
        titles = [child["props"].get("title") for child in info["children"]]
        assert "Oxford Dress Shoes" in titles
        assert "$189.99" in titles
        assert body["navigation"]["title"] == "Product Details"

    def test_forced_mode(self, client, force_mode):
        force_mode("evening")
        response = client.get("/api/ui-config")
        assert response.headers["X-UI-Mode"] == "evening"
        labels = [item["label"] for item in response.json()["navigation"]["bottom_nav"]]
        assert labels == ["Discover", "Saved", "You"]

    def test_user_header_does_not_change_descriptor(self, client):
        anonymous = client.get("/api/ui-config").json()
        known = client.get("/api/ui-config", headers={"X-User-ID": "user-42"}).json()
        assert anonymous == known

    def test_correlation_id_is_echoed(self, client):
        response = client.get("/api/ui-config", headers={"X-Correlation-ID": "corr-123"})
        assert response.headers["X-Correlation-ID"] == "corr-123"

    def test_correlation_id_generated(self, client):
        assert client.get("/api/ui-config").headers["X-Correlation-ID"]


class TestProductsEndpoint:

    def test_known_product_without_discount(self, client):
        body = client.get("/api/products/prod_1").json()
        assert body == {
            "id": "prod_1",
            "name": "Premium Leather Jacket",
            "price": 299.99,
            "image_url": "https://images.unsplash.com/photo-1551028719-00167b16eac5",
            "description": "Handcrafted Italian leather",
        }

    def test_discount_included_when_present(self, client):
        assert client.get("/api/products/prod_8").json()["discount"] == 40

    def test_list_products(self, client):
        body = client.get("/api/products").json()
        assert len(body) == 8
        assert body[0]["id"] == "prod_1"
        assert "discount" not in body[0]
        assert body[-1]["discount"] == 40

    def test_unknown_product_sentinel(self, client):
        response = client.get("/api/products/nope")
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == "nope"
        assert body["name"] == "Unknown Product"
        assert body["description"] == "Product not found"


class TestAnalyticsEndpoint:

    def test_accepts_json_object(self, client):
        response = client.post("/api/analytics", json={"event": "tap", "target": "buy-button"})
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    @pytest.mark.parametrize("body", ["not json", "{\"event\": ", "[1, 2, 3]", "\"tap\"", ""])
    def test_rejects_malformed_or_non_object(self, client, body):
        response = client.post(
            "/api/analytics",
            content=body,
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400

    def test_stats_count_recorded_events(self, client):
        assert client.get("/api/analytics/stats").json() == {"total_events": 0, "events": {}}
        client.post("/api/analytics", json={"event": "tap"})
        client.post("/api/analytics", json={"event": "tap"})
        client.post("/api/analytics", json={"type": "impression"})
        assert client.get("/api/analytics/stats").json() == {
            "total_events": 3,
            "events": {"tap": 2, "impression": 1},
        }

    def test_other_methods_not_allowed(self, client):
        assert client.get("/api/analytics").status_code == 405
        assert client.put("/api/analytics", json={}).status_code == 405


class TestHealthEndpoints:

    def test_health(self, client):
        body = client.get("/health").json()
        assert set(body) == {"status", "timestamp", "mode"}
        assert body["status"] == "healthy"
        assert body["mode"] in {mode.value for mode in Mode}

    def test_liveness(self, client):
        assert client.get("/health/live").json()["status"] == "alive"

    def test_readiness(self, client):
        response = client.get("/health/ready")
        assert response.status_code == 200
        body = response.json()
        assert body["ready"] is True
        assert set(body["dependencies"]) == {"theme_palette", "home_routines", "product_catalog"}
        assert body["dependencies"]["theme_palette"]["message"] == "7/7 modes covered"


class TestComponentsEndpoint:

    def test_vocabulary(self, client):
        body = client.get("/api/components").json()
        assert {"header", "product_grid", "countdown_timer", "avatar"} <= set(body["components"])
        assert set(body["containers"]) == {"container", "row"}

    def test_single_component(self, client):
        response = client.get("/api/components/banner")
        assert response.status_code == 200
        assert response.json()["name"] == "banner"

    def test_unknown_component(self, client):
        assert client.get("/api/components/carousel-3d").status_code == 404

    def test_export_is_attachment(self, client):
        response = client.get("/api/components/export")
        assert "attachment" in response.headers["Content-Disposition"]


def test_root(client):
    body = client.get("/").json()
    assert body["status"] == "running"
    assert body["api"]["ui_config"].startswith("GET /api/ui-config")
