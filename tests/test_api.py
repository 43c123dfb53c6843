"""Tests for API endpoints."""
import pytest
from fastapi.testclient import TestClient
from sokoban_generator.config import get_settings
from sokoban_generator.main import app
from sokoban_generator.models.schemas import ErrorResponse


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


class TestRootEndpoint:
    """Tests for root endpoint."""

    def test_root_returns_info(self, client):
        """Test root endpoint returns API info."""
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert "name" in data
        assert "version" in data
        assert "endpoints" in data


class TestHealthEndpoint:
    """Tests for health endpoint."""

    def test_health_check(self, client):
        """Test health endpoint returns healthy status."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"


class TestGenerateEndpoint:
    """Tests for generate endpoint."""

    def test_generate_basic(self, client):
        """Test basic level generation."""
        response = client.post("/api/generate", json={"height": 1, "width": 1, "boxes": 1, "seed": 5})

        assert response.status_code == 200
        data = response.json()
        assert data["height"] == 5
        assert data["width"] == 5
        assert data["box_count"] == 1
        assert data["seed"] == 5
        assert len(data["rows"]) == 5
        assert data["text"] == "".join(row + "\n" for row in data["rows"])
        assert data["encoded"].count("|") == 4

    def test_generate_contains_entities(self, client):
        """Test that the level has one player and the requested boxes."""
        response = client.post("/api/generate", json={"height": 2, "width": 2, "boxes": 2, "seed": 12})

        text = response.json()["text"]
        assert text.count("@") + text.count("+") == 1
        assert text.count("$") + text.count("*") == 2

    def test_generate_is_reproducible(self, client):
        """Test that the same seed returns the same level."""
        payload = {"height": 1, "width": 2, "boxes": 1, "seed": 77}

        first = client.post("/api/generate", json=payload).json()
        second = client.post("/api/generate", json=payload).json()

        assert first["rows"] == second["rows"]

    def test_generate_too_large(self, client):
        """Test that oversized levels are refused."""
        limit = get_settings().max_room_rows
        response = client.post("/api/generate", json={"height": limit + 1, "width": 1, "boxes": 1})

        assert response.status_code == 400
        assert f"limited to {limit}x" in ErrorResponse(**response.json()).detail

    def test_generate_too_many_boxes(self, client):
        """Test that the box limit is enforced."""
        limit = get_settings().max_boxes
        response = client.post("/api/generate", json={"height": 1, "width": 1, "boxes": limit + 1})

        assert response.status_code == 400

    @pytest.mark.parametrize("seed", [4, 5, 12])
    def test_generate_at_configured_maximum(self, client, seed):
        """Test that the largest accepted request completes."""
        settings = get_settings()
        payload = {
            "height": settings.max_room_rows,
            "width": settings.max_room_cols,
            "boxes": settings.max_boxes,
            "seed": seed,
        }

        response = client.post("/api/generate", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["height"] == settings.max_room_rows * 3 + 2
        assert data["width"] == settings.max_room_cols * 3 + 2
        assert data["box_count"] == settings.max_boxes

    def test_generate_invalid_boxes(self, client):
        """Test that zero boxes fail validation."""
        response = client.post("/api/generate", json={"height": 1, "width": 1, "boxes": 0})

        assert response.status_code == 422  # Validation error


class TestValidateEndpoint:
    """Tests for validate endpoint."""

    def test_validate_passing_layout(self, client):
        """Test a layout that meets every requirement."""
        response = client.post("/api/validate", json={"rows": ["---", "-#-", "---"], "box_count": 1})

        assert response.status_code == 200
        data = response.json()
        assert data["passed"] is True
        assert all(data["checks"].values())

    def test_validate_failing_layout(self, client):
        """Test a layout with separated floors."""
        response = client.post("/api/validate", json={"rows": ["-#-", "-#-", "-#-"], "box_count": 1})

        data = response.json()
        assert data["passed"] is False
        assert data["checks"]["connected"] is False

    def test_validate_unknown_glyph(self, client):
        """Test that unknown glyphs are rejected."""
        response = client.post("/api/validate", json={"rows": ["-x-"]})

        assert response.status_code == 400
        assert "Unknown glyph" in ErrorResponse(**response.json()).detail

    def test_validate_empty_request(self, client):
        """Test validating with missing rows."""
        response = client.post("/api/validate", json={})

        assert response.status_code == 422  # Validation error


class TestTemplatesEndpoint:
    """Tests for templates endpoint."""

    def test_list_templates(self, client):
        """Test that the whole catalogue is listed."""
        response = client.get("/api/templates")

        assert response.status_code == 200
        templates = response.json()["templates"]
        assert len(templates) == 17
        assert [t["index"] for t in templates] == list(range(17))
        assert all(len(t["rows"]) == 5 for t in templates)


class TestOpenApiSchema:
    """Tests for the published API schema."""

    @pytest.mark.parametrize("path", ["/api/generate", "/api/validate"])
    def test_error_response_declared(self, client, path):
        """Test that refused requests are documented with ErrorResponse."""
        schema = client.get("/openapi.json").json()

        error = schema["paths"][path]["post"]["responses"]["400"]
        ref = error["content"]["application/json"]["schema"]["$ref"]
        assert ref.endswith("/ErrorResponse")
