"""Tests for champion API routes."""

import pytest
from fastapi.testclient import TestClient
from src.api.main import app
from src.api.config import settings

client = TestClient(app)


class TestRootEndpoints:
    """Tests for root endpoints."""

    def test_root(self):
        """Test root endpoint."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["name"] == "TFT Champion API"

    def test_health(self):
        """Test health check endpoint."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestGetAatrox:
    """Tests for the sample champion route."""

    def test_get_aatrox(self):
        """Test Aatrox retrieval."""
        response = client.get("/champions/aatrox")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert '"name":"Aatrox"' in response.text
        assert '"cost":3' in response.text

    def test_items_order(self):
        """Test recommended items are returned in order."""
        data = client.get("/champions/aatrox").json()
        assert data["items"] == ["titanichydra", "phantomdancer", "dragonsclaw"]

    def test_nested_fields(self):
        """Test nested ability and stat fields use wire keys."""
        data = client.get("/champions/aatrox").json()
        assert data["class"] == ["Blademaster", "Gunslinger"]
        assert data["ability"]["manaCost"] == 100
        assert data["ability"]["stats"][0] == {"type": "Damage", "value": "350 / 575 / 850"}
        assert data["stats"]["offense"] == {
            "damage": 65,
            "attackSpeed": 0.65,
            "dps": 42,
            "range": 1,
        }
        assert data["stats"]["defense"] == {"health": 750, "armor": 25, "magicResist": 20}

    def test_repeated_requests_identical(self):
        """Test responses do not change between requests."""
        first = client.get("/champions/aatrox")
        second = client.get("/champions/aatrox")
        assert first.text == second.text


class TestCreateChampion:
    """Tests for the champion create route."""

    def test_create(self):
        """Test name and ability description are echoed back."""
        response = client.post(
            "/champions/create",
            json={"name": "Ahri", "ability": {"description": "Test"}},
        )
        assert response.status_code == 200
        assert response.text == "Name: Ahri, Ability Description: Test"
        assert response.headers["content-type"].startswith("text/plain")

    def test_create_empty_object(self):
        """Test empty payload yields empty fields."""
        response = client.post("/champions/create", json={})
        assert response.status_code == 200
        assert response.text == "Name: , Ability Description: "

    def test_create_full_champion(self):
        """Test posting an encoded champion."""
        aatrox = client.get("/champions/aatrox").content
        response = client.post("/champions/create", content=aatrox)
        assert response.status_code == 200
        assert response.text == (
            "Name: Aatrox, Ability Description: Aatrox cleaves the area in front "
            "of him, dealing damage to enemies inside it."
        )

    def test_create_malformed_json_tolerated(self):
        """Test invalid JSON is ignored."""
        response = client.post("/champions/create", content=b'{"name": ')
        assert response.status_code == 200
        assert response.text == "Name: , Ability Description: "

    def test_create_empty_body_tolerated(self):
        """Test missing body is ignored."""
        response = client.post("/champions/create")
        assert response.status_code == 200
        assert response.text == "Name: , Ability Description: "

    def test_create_type_mismatch_keeps_other_fields(self):
        """Test mistyped fields do not drop well-typed ones."""
        response = client.post(
            "/champions/create",
            json={"name": "Ahri", "cost": "three", "ability": {"description": "Charm"}},
        )
        assert response.status_code == 200
        assert response.text == "Name: Ahri, Ability Description: Charm"


    def test_create_trailing_data_ignored(self):
        """Test only the first JSON value in the body is read."""
        response = client.post(
            "/champions/create",
            content=b'{"name": "Ahri", "ability": {"description": "Charm"}}\n{"x": 1}',
        )
        assert response.status_code == 200
        assert response.text == "Name: Ahri, Ability Description: Charm"

    def test_create_other_methods_not_routed(self):
        """Test only POST is routed for champion creation."""
        response = client.get("/champions/create")
        assert response.status_code == 405

class TestStrictDecode:
    """Tests for the STRICT_DECODE setting."""

    @pytest.fixture(autouse=True)
    def strict(self, monkeypatch):
        monkeypatch.setattr(settings, "STRICT_DECODE", True)

    def test_malformed_rejected(self):
        """Test type mismatch returns 400."""
        response = client.post("/champions/create", json={"cost": "three"})
        assert response.status_code == 400
        data = response.json()
        assert data["status"] == "error"
        assert data["error"] == "Malformed champion payload"
        assert data["detail"].startswith("cost:")

    def test_invalid_json_rejected(self):
        """Test invalid JSON returns 400."""
        response = client.post("/champions/create", content=b"not json")
        assert response.status_code == 400

    def test_null_fields_accepted(self):
        """Test null fields are treated as absent."""
        response = client.post("/champions/create", json={"name": None, "ability": None})
        assert response.status_code == 200
        assert response.text == "Name: , Ability Description: "

    def test_trailing_data_accepted(self):
        """Test trailing data after the first value is not an error."""
        response = client.post("/champions/create", content=b'{"name": "Ahri"} {"x": 1}')
        assert response.status_code == 200
        assert response.text == "Name: Ahri, Ability Description: "

    def test_valid_payload_accepted(self):
        """Test well-formed payloads still succeed."""
        response = client.post("/champions/create", json={"name": "Ahri"})
        assert response.status_code == 200
        assert response.text == "Name: Ahri, Ability Description: "
