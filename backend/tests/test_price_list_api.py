"""
Tests for /api/pricelist endpoints.
"""

import json
import uuid

import pytest

from rest_api.services.domain import PriceListService

BASE = "/api/pricelist"


def _payload(**overrides):
    data = {
        "name": "Wholesale",
        "code": "WHL",
        "description": "Bulk buyers",
        "currency": "EUR",
        "is_default": False,
        "valid_from": "2024-01-01",
        "valid_to": "2024-12-31",
    }
    data.update(overrides)
    return data


class TestPriceListCreate:
    """POST /api/pricelist"""

    def test_create_returns_id(self, client, auth_headers):
        response = client.post(BASE, json=_payload(), headers=auth_headers)
        assert response.status_code == 200
        new_id = response.json()["id"]
        assert uuid.UUID(new_id)

        fetched = client.get(f"{BASE}/{new_id}", headers=auth_headers)
        assert fetched.status_code == 200
        data = fetched.json()
        assert data["id"] == new_id
        assert data["name"] == "Wholesale"
        assert data["currency"] == "EUR"
        assert data["valid_to"] == "2024-12-31"

    def test_id_in_body_is_ignored(self, client, auth_headers):
        supplied = str(uuid.uuid4())
        response = client.post(BASE, json=_payload(id=supplied), headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["id"] != supplied

    def test_defaults(self, client, auth_headers):
        response = client.post(
            BASE,
            json={"name": "Minimal", "code": "MIN", "valid_from": "2024-01-01"},
            headers=auth_headers,
        )
        data = client.get(f"{BASE}/{response.json()['id']}", headers=auth_headers).json()
        assert data["currency"] == "USD"
        assert data["is_default"] is False
        assert data["valid_to"] is None

    def test_missing_required_field(self, client, auth_headers):
        response = client.post(BASE, json={"code": "X"}, headers=auth_headers)
        assert response.status_code == 400
        assert isinstance(response.json()["detail"], list)

    def test_invalid_validity_range(self, client, auth_headers):
        response = client.post(BASE, json=_payload(valid_to="2023-01-01"), headers=auth_headers)
        assert response.status_code == 400


class TestPriceListRead:
    """GET /api/pricelist and /api/pricelist/{id}"""

    def test_get_missing_returns_null(self, client, auth_headers):
        response = client.get(f"{BASE}/{uuid.uuid4()}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() is None

    def test_get_malformed_id(self, client, auth_headers):
        response = client.get(f"{BASE}/not-a-uuid", headers=auth_headers)
        assert response.status_code == 400

    def test_list(self, client, auth_headers, seed_price_list):
        response = client.get(BASE, headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert [p["code"] for p in data] == ["RET"]
        assert response.headers["X-Total-Count"] == "1"

    def test_list_with_search_and_filters(self, client, auth_headers, seed_price_list):
        client.post(BASE, json=_payload(), headers=auth_headers)
        client.post(BASE, json=_payload(name="Staff", code="STF", description=None), headers=auth_headers)

        response = client.get(BASE, params={"searchTerm": "bulk"}, headers=auth_headers)
        assert [p["code"] for p in response.json()] == ["WHL"]

        filters = json.dumps([{"PropertyName": "description", "Operator": "Equal", "Value": None}])
        response = client.get(BASE, params={"filters": filters}, headers=auth_headers)
        assert [p["code"] for p in response.json()] == ["STF"]

        filters = json.dumps([{"propertyName": "isDefault", "operator": "Equal", "value": False}])
        response = client.get(
            BASE,
            params={"filters": filters, "sortField": "code", "sortOrder": "DESC"},
            headers=auth_headers,
        )
        assert [p["code"] for p in response.json()] == ["WHL", "STF", "RET"]
        assert response.headers["X-Total-Count"] == "3"

    def test_list_paging(self, client, auth_headers):
        for code in ("A1", "B2", "C3"):
            client.post(BASE, json=_payload(code=code), headers=auth_headers)

        response = client.get(
            BASE,
            params={"sortField": "code", "pageNumber": 2, "pageSize": 2},
            headers=auth_headers,
        )
        assert [p["code"] for p in response.json()] == ["C3"]
        assert response.headers["X-Total-Count"] == "3"

    @pytest.mark.parametrize(
        "params, detail",
        [
            ({"pageSize": 0}, "Page size invalid."),
            ({"pageNumber": 0}, "Page number invalid."),
        ],
    )
    def test_list_rejects_bad_paging(self, client, auth_headers, params, detail):
        response = client.get(BASE, params=params, headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["detail"] == detail

    def test_page_bounds_checked_before_service(self, client, auth_headers, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("service must not be called")

        monkeypatch.setattr(PriceListService, "get", fail)
        response = client.get(BASE, params={"pageNumber": -1}, headers=auth_headers)
        assert response.status_code == 400

    @pytest.mark.parametrize(
        "filters",
        [
            "not json",
            json.dumps([{"PropertyName": "colour", "Operator": "Equal", "Value": "red"}]),
            json.dumps([{"PropertyName": "name", "Operator": "Between", "Value": "a"}]),
            json.dumps([{"PropertyName": "valid_from", "Operator": "Contains", "Value": "2024"}]),
        ],
    )
    def test_list_rejects_bad_filters(self, client, auth_headers, filters):
        response = client.get(BASE, params={"filters": filters}, headers=auth_headers)
        assert response.status_code == 400


class TestPriceListUpdate:
    """PUT /api/pricelist/{id}"""

    def test_update(self, client, auth_headers, seed_price_list):
        body = _payload(id=str(seed_price_list.id), name="Retail 2025")
        response = client.put(f"{BASE}/{seed_price_list.id}", json=body, headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"status": True}

        data = client.get(f"{BASE}/{seed_price_list.id}", headers=auth_headers).json()
        assert data["name"] == "Retail 2025"
        assert data["code"] == "WHL"

    def test_update_mismatched_id(self, client, auth_headers, seed_price_list):
        body = _payload(id=str(uuid.uuid4()))
        response = client.put(f"{BASE}/{seed_price_list.id}", json=body, headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["detail"] == "Mismatched Id"

        data = client.get(f"{BASE}/{seed_price_list.id}", headers=auth_headers).json()
        assert data["name"] == "Retail"

    def test_update_missing(self, client, auth_headers):
        missing = str(uuid.uuid4())
        response = client.put(f"{BASE}/{missing}", json=_payload(id=missing), headers=auth_headers)
        assert response.status_code == 404


class TestPriceListPatch:
    """PATCH /api/pricelist/{id}"""

    def test_patch(self, client, auth_headers, seed_price_list):
        response = client.patch(
            f"{BASE}/{seed_price_list.id}",
            json=[
                {"op": "replace", "path": "/name", "value": "Retail EU"},
                {"op": "replace", "path": "/currency", "value": "EUR"},
                {"op": "remove", "path": "/description"},
            ],
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json() == {"status": True}

        data = client.get(f"{BASE}/{seed_price_list.id}", headers=auth_headers).json()
        assert data["name"] == "Retail EU"
        assert data["currency"] == "EUR"
        assert data["description"] is None

    def test_patch_missing_document(self, client, auth_headers, seed_price_list):
        response = client.patch(f"{BASE}/{seed_price_list.id}", headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["detail"] == "Patch document is missing."

    def test_patch_missing_entity(self, client, auth_headers):
        response = client.patch(
            f"{BASE}/{uuid.uuid4()}",
            json=[{"op": "replace", "path": "/name", "value": "x"}],
            headers=auth_headers,
        )
        assert response.status_code == 404

    @pytest.mark.parametrize(
        "operation",
        [
            {"op": "replace", "path": "/id", "value": "00000000-0000-0000-0000-000000000000"},
            {"op": "remove", "path": "/name"},
            {"op": "replace", "path": "/valid_from", "value": "soon"},
            {"op": "copy", "path": "/name", "value": "x"},
        ],
    )
    def test_patch_invalid_operation(self, client, auth_headers, seed_price_list, operation):
        response = client.patch(f"{BASE}/{seed_price_list.id}", json=[operation], headers=auth_headers)
        assert response.status_code == 400

    def test_patch_json_patch_content_type(self, client, auth_headers, seed_price_list):
        response = client.patch(
            f"{BASE}/{seed_price_list.id}",
            content=json.dumps([{"op": "replace", "path": "/code", "value": "RT"}]),
            headers={**auth_headers, "Content-Type": "application/json-patch+json"},
        )
        assert response.status_code == 200


class TestPriceListDelete:
    """DELETE /api/pricelist/{id}"""

    def test_delete(self, client, auth_headers, seed_price_list):
        response = client.delete(f"{BASE}/{seed_price_list.id}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"status": True}
        assert client.get(f"{BASE}/{seed_price_list.id}", headers=auth_headers).json() is None

    def test_delete_missing(self, client, auth_headers):
        response = client.delete(f"{BASE}/{uuid.uuid4()}", headers=auth_headers)
        assert response.status_code == 404


class TestUnhandledErrors:
    """Unexpected exceptions become a generic 500."""

    def test_unexpected_exception(self, unsafe_client, auth_headers, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("unexpected")

        monkeypatch.setattr(PriceListService, "get", boom)
        response = unsafe_client.get(BASE, headers=auth_headers)
        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}


class TestOpenApiDocument:
    """Error bodies are documented on every CRUD route."""

    def test_error_responses_reference_error_schema(self, client):
        document = client.get("/openapi.json").json()
        operation = document["paths"]["/api/pricelist/{entity_id}"]["delete"]
        for status in ("400", "401", "404", "500"):
            schema = operation["responses"][status]["content"]["application/json"]["schema"]
            assert schema["$ref"].endswith("/ErrorResponse")
