"""Integration tests for Product API endpoints.

Covers:
- CRUD operations via /api/products.
- Batched validation errors (400) and their counts.
- Not-found mapping (404).
- Response envelopes: ``data`` / ``errors`` / ``error``.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration

NOT_FOUND = "Producto no encontrado"


# ===========================================================================
# CREATE
# ===========================================================================


class TestProductCreate:
    def test_displays_validation_errors(self, api_client):
        response = api_client.post("/api/products", {}, format="json")
        assert response.status_code == 400
        assert "errors" in response.data
        assert len(response.data["errors"]) == 4

    def test_validates_price_greater_than_zero(self, api_client):
        response = api_client.post(
            "/api/products", {"name": "Xbox", "price": 0}, format="json"
        )
        assert response.status_code == 400
        assert len(response.data["errors"]) == 1
        assert response.data["errors"][0]["msg"] == "Precio no valido"

    def test_validates_price_is_number_and_greater_than_zero(self, api_client):
        response = api_client.post(
            "/api/products", {"name": "Xbox", "price": "Hola"}, format="json"
        )
        assert response.status_code == 400
        assert len(response.data["errors"]) == 2

    def test_creates_a_new_product(self, api_client):
        response = api_client.post(
            "/api/products", {"name": "Mouse - test", "price": 300}, format="json"
        )
        assert response.status_code == 201
        assert "data" in response.data
        assert "errors" not in response.data
        assert response.data["data"]["name"] == "Mouse - test"
        assert response.data["data"]["availability"] is True
        assert Product.objects.filter(id=response.data["data"]["id"]).exists()

    def test_price_rendered_as_json_number(self, api_client):
        response = api_client.post(
            "/api/products", {"name": "Teclado", "price": 49.9}, format="json"
        )
        assert response.status_code == 201
        assert response.json()["data"]["price"] == 49.9

    def test_trailing_slash_is_accepted(self, api_client):
        response = api_client.post(
            "/api/products/", {"name": "Mouse", "price": 10}, format="json"
        )
        assert response.status_code == 201

    def test_price_rounding_to_zero_is_rejected(self, api_client):
        response = api_client.post(
            "/api/products", {"name": "Chicle", "price": 0.001}, format="json"
        )
        assert response.status_code == 400
        assert response.data["errors"][0]["msg"] == "Precio no valido"
        assert not Product.objects.exists()

    def test_non_text_name_is_rejected(self, api_client):
        response = api_client.post(
            "/api/products", {"name": 123, "price": 10}, format="json"
        )
        assert response.status_code == 400
        assert response.data["errors"][0]["path"] == "name"

    def test_name_longer_than_column_is_rejected(self, api_client):
        response = api_client.post(
            "/api/products", {"name": "x" * 101, "price": 5}, format="json"
        )
        assert response.status_code == 400
        assert response.data["errors"][0]["path"] == "name"
        assert not Product.objects.exists()

    def test_boolean_price_reports_one_error(self, api_client):
        response = api_client.post(
            "/api/products", {"name": "Xbox", "price": True}, format="json"
        )
        assert response.status_code == 400
        assert [e["msg"] for e in response.data["errors"]] == ["Valor no valido"]

    def test_malformed_json_returns_400(self, api_client):
        response = api_client.post(
            "/api/products", data="{", content_type="application/json"
        )
        assert response.status_code == 400


# ===========================================================================
# LIST
# ===========================================================================


class TestProductList:
    def test_url_exists(self, api_client):
        response = api_client.get("/api/products")
        assert response.status_code != 404

    def test_json_response_with_products(self, api_client, sample_product):
        response = api_client.get("/api/products")
        assert response.status_code == 200
        assert response["Content-Type"].startswith("application/json")
        assert len(response.data["data"]) == 1
        assert response.data["data"][0]["id"] == sample_product.id
        assert "errors" not in response.data

    def test_empty_list(self, api_client):
        response = api_client.get("/api/products")
        assert response.data == {"data": []}


# ===========================================================================
# RETRIEVE
# ===========================================================================


class TestProductRetrieve:
    def test_404_for_non_existent_product(self, api_client):
        response = api_client.get("/api/products/2000")
        assert response.status_code == 404
        assert response.data == {"error": NOT_FOUND}

    def test_checks_a_valid_id_in_the_url(self, api_client):
        response = api_client.get("/api/products/not-valid")
        assert response.status_code == 400
        assert len(response.data["errors"]) == 1
        assert response.data["errors"][0]["msg"] == "Id no valido"

    def test_single_product(self, api_client, sample_product):
        response = api_client.get(f"/api/products/{sample_product.id}")
        assert response.status_code == 200
        assert response.data["data"]["name"] == "Monitor Curvo"

    def test_leading_zero_id_finds_the_product(self, api_client, sample_product):
        response = api_client.get(f"/api/products/0{sample_product.id}")
        assert response.status_code == 200
        assert response.data["data"]["id"] == sample_product.id

    def test_huge_id_is_not_found(self, api_client):
        response = api_client.get("/api/products/99999999999999999999999")
        assert response.status_code == 404


# ===========================================================================
# UPDATE
# ===========================================================================

VALID_UPDATE = {"name": "Monitor Curvo Test", "price": 100, "availability": True}


class TestProductUpdate:
    def test_checks_a_valid_id_in_the_url(self, api_client):
        response = api_client.put("/api/products/not-valid", VALID_UPDATE, format="json")
        assert response.status_code == 400
        assert len(response.data["errors"]) == 1
        assert response.data["errors"][0]["msg"] == "ID no valido"

    def test_displays_validation_errors(self, api_client, sample_product):
        response = api_client.put(f"/api/products/{sample_product.id}", {}, format="json")
        assert response.status_code == 400
        assert len(response.data["errors"]) == 5
        assert "data" not in response.data

    def test_validates_price_greater_than_zero(self, api_client, sample_product):
        response = api_client.put(
            f"/api/products/{sample_product.id}",
            {**VALID_UPDATE, "price": 0},
            format="json",
        )
        assert response.status_code == 400
        assert len(response.data["errors"]) == 1
        assert response.data["errors"][0]["msg"] == "Precio no valido"

    def test_validates_availability(self, api_client, sample_product):
        response = api_client.put(
            f"/api/products/{sample_product.id}",
            {**VALID_UPDATE, "availability": "maybe"},
            format="json",
        )
        assert response.status_code == 400
        assert response.data["errors"][0]["msg"] == "Valor para disponibilidad no valido"

    def test_404_for_non_existent_product(self, api_client):
        response = api_client.put("/api/products/4000", VALID_UPDATE, format="json")
        assert response.status_code == 404
        assert response.data["error"] == NOT_FOUND
        assert "data" not in response.data

    def test_updates_an_existing_product(self, api_client, sample_product):
        payload = {"name": "Monitor Curvo Test", "price": 100, "availability": False}
        response = api_client.put(
            f"/api/products/{sample_product.id}", payload, format="json"
        )
        assert response.status_code == 200
        body = response.json()
        assert "errors" not in body
        assert body["data"]["name"] == payload["name"]
        assert body["data"]["price"] == payload["price"]
        assert body["data"]["availability"] is payload["availability"]

        sample_product.refresh_from_db()
        assert sample_product.price == Decimal("100.00")
        assert sample_product.availability is False


# ===========================================================================
# PATCH (toggle availability)
# ===========================================================================


class TestProductToggleAvailability:
    def test_404_for_non_existent_product(self, api_client):
        response = api_client.patch("/api/products/2000")
        assert response.status_code == 404
        assert response.data["error"] == NOT_FOUND
        assert "data" not in response.data

    def test_checks_a_valid_id(self, api_client):
        response = api_client.patch("/api/products/not-valid")
        assert response.status_code == 400
        assert response.data["errors"][0]["msg"] == "ID no valido"

    def test_updates_the_product_availability(self, api_client, sample_product):
        response = api_client.patch(f"/api/products/{sample_product.id}")
        assert response.status_code == 200
        assert response.data["data"]["availability"] is False
        assert "error" not in response.data

    def test_two_patches_return_opposite_values(self, api_client, sample_product):
        first = api_client.patch(f"/api/products/{sample_product.id}")
        second = api_client.patch(f"/api/products/{sample_product.id}")
        assert first.status_code == second.status_code == 200
        assert first.data["data"]["availability"] is not second.data["data"]["availability"]
        sample_product.refresh_from_db()
        assert sample_product.availability is True

    def test_body_is_ignored(self, api_client, sample_product):
        response = api_client.patch(
            f"/api/products/{sample_product.id}",
            {"availability": True},
            format="json",
        )
        assert response.data["data"]["availability"] is False


# ===========================================================================
# DELETE
# ===========================================================================


class TestProductDestroy:
    def test_checks_a_valid_id(self, api_client):
        response = api_client.delete("/api/products/not-valid")
        assert response.status_code == 400
        assert response.data["errors"][0]["msg"] == "ID no valido"

    def test_404_for_non_existent_product(self, api_client):
        response = api_client.delete("/api/products/2000")
        assert response.status_code == 404
        assert response.data["error"] == NOT_FOUND

    def test_deletes_a_product(self, api_client, sample_product):
        response = api_client.delete(f"/api/products/{sample_product.id}")
        assert response.status_code == 200
        assert response.data["data"] == "Producto Eliminado"

        follow_up = api_client.get(f"/api/products/{sample_product.id}")
        assert follow_up.status_code == 404
        assert not Product.objects.filter(id=sample_product.id).exists()

    def test_leading_zero_id_deletes_the_product(self, api_client, sample_product):
        response = api_client.delete(f"/api/products/00{sample_product.id}")
        assert response.status_code == 200
        assert not Product.objects.filter(id=sample_product.id).exists()


class TestUnsupportedMethods:
    def test_put_on_collection_is_not_allowed(self, api_client):
        response = api_client.put("/api/products", VALID_UPDATE, format="json")
        assert response.status_code == 405
