"""
End-to-end HTTP tests for the address API.

The real AddressService runs over the in-memory store with a scripted
origin; only the HTTP client is faked.

Dependencies: pytest, fastapi.testclient
System role: Verification of the HTTP contract over real service behavior
"""

import pytest
from fastapi.testclient import TestClient

from cep_api.api.deps.dependencies import get_address_service
from cep_api.api.main import create_app
from cep_api.application.services import AddressService


@pytest.fixture
def origin(fake_origin):
    return fake_origin


@pytest.fixture
def client(memory_store, origin):
    app = create_app()
    app.dependency_overrides[get_address_service] = lambda: AddressService(
        store=memory_store, origin=origin
    )
    return TestClient(app)


@pytest.fixture
def rio_payload(sample_address_data: dict) -> dict:
    return {k: v for k, v in sample_address_data.items() if v is not None}


class TestLookupFlow:
    """Test suite for GET /addresses/cep/{cep}."""

    def test_first_lookup_hits_origin_then_serves_locally(self, client, origin) -> None:
        # Act
        first = client.get("/api/v1/addresses/cep/01310100")
        second = client.get("/api/v1/addresses/cep/01310-100")

        # Assert
        assert first.status_code == 200
        assert second.status_code == 200
        assert first.json()["id"] == second.json()["id"]
        assert first.json()["city"] == "São Paulo"
        assert origin.calls == ["01310100"]

    def test_unknown_cep_is_404(self, client) -> None:
        response = client.get("/api/v1/addresses/cep/00000000")

        assert response.status_code == 404

    def test_malformed_cep_is_400(self, client, origin) -> None:
        response = client.get("/api/v1/addresses/cep/12ab5678")

        assert response.status_code == 400
        assert origin.calls == []


class TestCrudFlow:
    """Test suite for create/update/delete over HTTP."""

    def test_create_then_conflict(self, client, rio_payload: dict) -> None:
        created = client.post("/api/v1/addresses", json=rio_payload)
        duplicate = client.post("/api/v1/addresses", json=rio_payload)

        assert created.status_code == 201
        assert created.json()["postal_code"] == "20040002"
        assert created.json()["updated_at"] is None
        assert duplicate.status_code == 409

    def test_update_moves_record_to_new_code(self, client, rio_payload: dict) -> None:
        created = client.post("/api/v1/addresses", json=rio_payload).json()

        response = client.put(
            "/api/v1/addresses/20040002", json=dict(rio_payload, postal_code="20040099")
        )

        assert response.status_code == 200
        assert response.json()["id"] == created["id"]
        assert response.json()["updated_at"] is not None
        assert client.get("/api/v1/addresses/cep/20040099").status_code == 200
        assert client.get("/api/v1/addresses/cep/20040002").status_code == 404

    def test_update_onto_taken_code_is_409(self, client, rio_payload: dict) -> None:
        client.post("/api/v1/addresses", json=rio_payload)
        client.post("/api/v1/addresses", json=dict(rio_payload, postal_code="20031050"))

        response = client.put(
            "/api/v1/addresses/20040002", json=dict(rio_payload, postal_code="20031050")
        )

        assert response.status_code == 409

    def test_update_missing_is_404(self, client, rio_payload: dict) -> None:
        response = client.put("/api/v1/addresses/20040002", json=rio_payload)

        assert response.status_code == 404

    def test_delete_then_lookup_is_404(self, client, rio_payload: dict) -> None:
        client.post("/api/v1/addresses", json=rio_payload)

        deleted = client.delete("/api/v1/addresses/20040002")
        again = client.delete("/api/v1/addresses/20040002")

        assert deleted.status_code == 204
        assert again.status_code == 404
        assert client.get("/api/v1/addresses/cep/20040002").status_code == 404


class TestQueryFlow:
    """Test suite for paginated listings and searches."""

    @pytest.fixture(autouse=True)
    def populate(self, client, rio_payload: dict) -> None:
        client.post("/api/v1/addresses", json=rio_payload)
        client.post(
            "/api/v1/addresses",
            json=dict(rio_payload, postal_code="22070011", street="Avenida Atlantica", neighborhood="Copacabana"),
        )
        client.get("/api/v1/addresses/cep/01310100")

    def test_list_defaults(self, client) -> None:
        data = client.get("/api/v1/addresses").json()

        assert data["page"] == 0
        assert data["size"] == 20
        assert data["sort"] == "street"
        assert [a["street"] for a in data["content"]] == [
            "Avenida Atlantica",
            "Avenida Paulista",
            "Rua da Assembleia",
        ]

    def test_invalid_sort_field_is_400(self, client) -> None:
        response = client.get("/api/v1/addresses", params={"sort": "senha"})

        assert response.status_code == 400

    def test_zero_page_size_is_400(self, client) -> None:
        response = client.get("/api/v1/addresses", params={"size": 0})

        assert response.status_code == 400

    def test_search_by_state_and_neighborhood(self, client) -> None:
        by_state = client.get("/api/v1/addresses/state/rj").json()
        by_neighborhood = client.get(
            "/api/v1/addresses/neighborhood",
            params={"neighborhood": "copacabana", "city": "Rio de Janeiro"},
        ).json()

        assert by_state["total_elements"] == 2
        assert [a["postal_code"] for a in by_neighborhood["content"]] == ["22070011"]

    def test_search_by_city_and_count(self, client) -> None:
        by_city = client.get("/api/v1/addresses/city", params={"city": "rio de janeiro"}).json()
        count = client.get("/api/v1/addresses/city/count", params={"city": "Rio de Janeiro"}).json()

        assert by_city["total_elements"] == 2
        assert count["total"] == 2
