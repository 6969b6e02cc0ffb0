"""
Test suite for the address router.

The service is replaced by an AsyncMock through dependency_overrides, so
these tests cover request parsing, status codes and response shapes only.

Dependencies: pytest, fastapi.testclient
System role: Verification of the address HTTP contract
"""

import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from cep_api.api.main import create_app
from cep_api.api.deps.dependencies import get_address_service
from cep_api.core import AddressRecord, ErrorKind, Page, PageRequest, ServiceResult


NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_record(**overrides) -> AddressRecord:
    fields = dict(
        id=1,
        postal_code="01310100",
        street="Avenida Paulista",
        complement="de 612 a 1510 - lado par",
        neighborhood="Bela Vista",
        city="São Paulo",
        state_code="SP",
        region_code="3550308",
        tax_region_code="1004",
        area_code="11",
        finance_region_code="7107",
        created_at=NOW,
    )
    fields.update(overrides)
    return AddressRecord(**fields)


@pytest.fixture
def mock_address_service():
    return AsyncMock()


@pytest.fixture
def client(mock_address_service):
    app = create_app()
    app.dependency_overrides[get_address_service] = lambda: mock_address_service
    return TestClient(app)


def test_get_by_cep(client, mock_address_service):
    mock_address_service.resolve.return_value = ServiceResult.ok(make_record())

    response = client.get("/api/v1/addresses/cep/01310100")

    assert response.status_code == 200
    data = response.json()
    assert data["postal_code"] == "01310100"
    assert data["street"] == "Avenida Paulista"
    assert data["region_code"] == "3550308"
    assert data["updated_at"] is None
    mock_address_service.resolve.assert_awaited_once_with("01310100")


def test_get_by_cep_not_found(client, mock_address_service):
    mock_address_service.resolve.return_value = ServiceResult.fail(
        ErrorKind.NOT_FOUND, "Endereço não encontrado para o CEP: 00000000", postal_code="00000000"
    )

    response = client.get("/api/v1/addresses/cep/00000000")

    assert response.status_code == 404
    assert response.json()["detail"] == "Endereço não encontrado para o CEP: 00000000"


def test_get_by_cep_invalid(client, mock_address_service):
    mock_address_service.resolve.return_value = ServiceResult.fail(
        ErrorKind.VALIDATION, "CEP deve conter exatamente 8 dígitos numéricos", field="postal_code"
    )

    response = client.get("/api/v1/addresses/cep/123")

    assert response.status_code == 400
    assert "8 dígitos" in response.json()["detail"]


def test_unexpected_error_is_500(client, mock_address_service):
    mock_address_service.resolve.side_effect = RuntimeError("database is gone")

    response = client.get("/api/v1/addresses/cep/01310100")

    assert response.status_code == 500
    assert "database is gone" not in response.json()["detail"]


def test_list_addresses_passes_page_parameters(client, mock_address_service):
    request = PageRequest(page=1, size=1, sort="city", descending=True)
    mock_address_service.list_all.return_value = ServiceResult.ok(
        Page(items=[make_record()], request=request, total_elements=3)
    )

    response = client.get("/api/v1/addresses?page=1&size=1&sort=city&direction=desc")

    assert response.status_code == 200
    data = response.json()
    assert len(data["content"]) == 1
    assert data["page"] == 1
    assert data["size"] == 1
    assert data["sort"] == "city"
    assert data["total_elements"] == 3
    assert data["total_pages"] == 3
    assert data["first"] is False
    assert data["last"] is False
    assert data["has_next"] is True
    mock_address_service.list_all.assert_awaited_once_with(
        page=1, size=1, sort="city", descending=True
    )


def test_list_addresses_rejects_unknown_direction(client, mock_address_service):
    response = client.get("/api/v1/addresses?direction=sideways")

    assert response.status_code == 422
    mock_address_service.list_all.assert_not_called()


def test_search_by_street(client, mock_address_service):
    mock_address_service.search_by_street.return_value = ServiceResult.ok(
        Page(items=[make_record()], request=PageRequest(), total_elements=1)
    )

    response = client.get("/api/v1/addresses/street", params={"street": "Paulista"})

    assert response.status_code == 200
    assert response.json()["content"][0]["street"] == "Avenida Paulista"
    mock_address_service.search_by_street.assert_awaited_once_with(
        "Paulista", page=0, size=20, sort="street", descending=False
    )


def test_search_by_street_requires_term(client, mock_address_service):
    response = client.get("/api/v1/addresses/street")

    assert response.status_code == 422


def test_count_by_city(client, mock_address_service):
    mock_address_service.count_by_city.return_value = ServiceResult.ok(7)

    response = client.get("/api/v1/addresses/city/count", params={"city": "São Paulo"})

    assert response.status_code == 200
    assert response.json() == {"city": "São Paulo", "total": 7}


def test_create_address(client, mock_address_service):
    mock_address_service.create.return_value = ServiceResult.ok(make_record())
    payload = {
        "postal_code": "01310100",
        "street": "Avenida Paulista",
        "neighborhood": "Bela Vista",
        "city": "São Paulo",
        "state_code": "SP",
    }

    response = client.post("/api/v1/addresses", json=payload)

    assert response.status_code == 201
    assert response.json()["id"] == 1
    sent = mock_address_service.create.await_args.args[0]
    assert sent["postal_code"] == "01310100"
    assert sent["complement"] is None


def test_create_address_conflict(client, mock_address_service):
    mock_address_service.create.return_value = ServiceResult.fail(
        ErrorKind.CONFLICT, "CEP já cadastrado no sistema: 01310100", postal_code="01310100"
    )
    payload = {
        "postal_code": "01310100",
        "street": "Avenida Paulista",
        "neighborhood": "Bela Vista",
        "city": "São Paulo",
        "state_code": "SP",
    }

    response = client.post("/api/v1/addresses", json=payload)

    assert response.status_code == 409
    assert response.json()["detail"] == "CEP já cadastrado no sistema: 01310100"


@pytest.mark.parametrize(
    "field, value",
    [
        ("postal_code", "01310-100"),
        ("state_code", "sp"),
        ("street", ""),
        ("area_code", "1234"),
    ],
)
def test_create_address_invalid_payload(client, mock_address_service, field, value):
    payload = {
        "postal_code": "01310100",
        "street": "Avenida Paulista",
        "neighborhood": "Bela Vista",
        "city": "São Paulo",
        "state_code": "SP",
        field: value,
    }

    response = client.post("/api/v1/addresses", json=payload)

    assert response.status_code == 422
    mock_address_service.create.assert_not_called()


def test_update_address(client, mock_address_service):
    mock_address_service.update.return_value = ServiceResult.ok(
        make_record(street="Av. Paulista", updated_at=NOW)
    )
    payload = {
        "postal_code": "01310100",
        "street": "Av. Paulista",
        "neighborhood": "Bela Vista",
        "city": "São Paulo",
        "state_code": "SP",
    }

    response = client.put("/api/v1/addresses/01310100", json=payload)

    assert response.status_code == 200
    assert response.json()["street"] == "Av. Paulista"
    assert response.json()["updated_at"] is not None
    code, data = mock_address_service.update.await_args.args
    assert code == "01310100"
    assert data["street"] == "Av. Paulista"


def test_update_address_not_found(client, mock_address_service):
    mock_address_service.update.return_value = ServiceResult.fail(
        ErrorKind.NOT_FOUND, "Endereço não encontrado para o CEP: 99999999", postal_code="99999999"
    )
    payload = {
        "postal_code": "99999999",
        "street": "Rua",
        "neighborhood": "Centro",
        "city": "Curitiba",
        "state_code": "PR",
    }

    response = client.put("/api/v1/addresses/99999999", json=payload)

    assert response.status_code == 404


def test_delete_address(client, mock_address_service):
    mock_address_service.delete.return_value = ServiceResult.ok(None)

    response = client.delete("/api/v1/addresses/01310100")

    assert response.status_code == 204
    assert response.content == b""


def test_delete_address_not_found(client, mock_address_service):
    mock_address_service.delete.return_value = ServiceResult.fail(
        ErrorKind.NOT_FOUND, "Endereço não encontrado para o CEP: 01310100", postal_code="01310100"
    )

    response = client.delete("/api/v1/addresses/01310100")

    assert response.status_code == 404
