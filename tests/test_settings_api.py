"""Site settings endpoints under /api/settings."""

from app.schemas.site_settings import DEFAULT_CATEGORIES

ADMIN_HEADERS = {"x-admin-key": "test-admin-key"}


class TestReadSettings:
    def test_defaults_without_row(self, client) -> None:
        """No stored row yet: defaults are returned and nothing is created."""
        response = client.get("/api/settings")
        assert response.status_code == 200
        body = response.json()["settings"]
        assert body["categories"] == DEFAULT_CATEGORIES
        assert body["site_name"] == "테크매니아"


class TestUpdateSettings:
    def test_requires_admin_key(self, client) -> None:
        response = client.put("/api/settings", json={"site_name": "x"})
        assert response.status_code == 401

    def test_first_put_creates_row(self, client) -> None:
        """Fields missing on the first write get fallback values."""
        response = client.put("/api/settings", json={"site_name": "새 블로그"}, headers=ADMIN_HEADERS)
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Settings created"
        assert body["settings"]["site_name"] == "새 블로그"
        assert body["settings"]["categories"] == ["기타"]
        assert body["settings"]["site_description"] == ""

    def test_second_put_updates_row(self, client) -> None:
        client.put("/api/settings", json={"site_name": "A"}, headers=ADMIN_HEADERS)
        response = client.put(
            "/api/settings", json={"categories": ["테니스 원리", "기타"]}, headers=ADMIN_HEADERS
        )
        body = response.json()
        assert body["message"] == "Settings updated"
        assert body["settings"]["site_name"] == "A"
        assert body["settings"]["categories"] == ["테니스 원리", "기타"]

        assert client.get("/api/settings").json()["settings"]["categories"] == ["테니스 원리", "기타"]

    def test_empty_update(self, client) -> None:
        response = client.put("/api/settings", json={}, headers=ADMIN_HEADERS)
        assert response.status_code == 400

    def test_categories_feed_new_post_draft(self, client) -> None:
        client.put("/api/settings", json={"categories": ["라켓"]}, headers=ADMIN_HEADERS)
        draft = client.get("/api/posts/new", headers=ADMIN_HEADERS).json()
        assert draft["categories"] == ["라켓"]
