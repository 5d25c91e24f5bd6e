"""
==============================================================================
API Integration Tests
==============================================================================

Tests for the product list and create endpoints.

==============================================================================
"""

import json
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import Application
from app.schemas.common import PROBLEM_TYPES


def with_changes(payload: dict, **changes) -> dict:
    updated = dict(payload)
    updated.update(changes)
    return updated


class TestListEndpoint:
    """Tests for GET /api/productlist."""

    def test_returns_seed_catalog(self, client: TestClient):
        """Test the seeded products are returned in insertion order."""
        response = client.get("/api/productlist")
        assert response.status_code == 200
        assert response.json() == [
            {
                "id": 1,
                "name": "Laptop",
                "price": 1200.5,
                "stock": 25,
                "category": {"id": 101, "name": "Electronics"},
            },
            {
                "id": 2,
                "name": "Headphones",
                "price": 50.0,
                "stock": 100,
                "category": {"id": 102, "name": "Accessories"},
            },
        ]

    def test_consecutive_reads_are_identical(self, client: TestClient):
        """Test two reads return byte-identical bodies."""
        first = client.get("/api/productlist")
        second = client.get("/api/productlist")
        assert first.content == second.content

    def test_body_is_indented_by_default(self, client: TestClient):
        """Test indented output when json_write_indented is on."""
        response = client.get("/api/productlist")
        assert response.text.startswith("[\n  {\n    \"id\": 1,")

    def test_seed_prices_keep_their_digits(self, client: TestClient):
        """Test prices are written as exact decimals, trailing zeros included."""
        response = client.get("/api/productlist")
        assert '"price": 1200.50,' in response.text
        assert '"price": 50.00,' in response.text

    def test_compact_output_when_indent_disabled(self):
        """Test settings handed to the factory control formatting."""
        settings = Settings(debug=False, json_write_indented=False)
        with TestClient(Application(settings).app) as compact_client:
            response = compact_client.get("/api/productlist")
        assert "\n" not in response.text
        assert response.text.startswith('[{"id":1,"name":"Laptop"')

    def test_ignores_query_parameters(self, client: TestClient):
        """Test no filtering or pagination is applied."""
        response = client.get("/api/productlist", params={"page": 2, "name": "Laptop"})
        assert response.status_code == 200
        assert len(response.json()) == 2


class TestCreateEndpoint:
    """Tests for POST /api/products with valid candidates."""

    def test_create_echoes_candidate(self, client: TestClient, valid_payload: dict):
        """Test 201 with the exact input echoed back."""
        response = client.post("/api/products", json=valid_payload)
        assert response.status_code == 201
        assert response.json() == valid_payload

    def test_create_sets_location(self, client: TestClient, valid_payload: dict):
        """Test location derived from the candidate id."""
        response = client.post("/api/products", json=valid_payload)
        assert response.headers["location"] == "/api/products/3"

    def test_create_does_not_change_catalog(self, client: TestClient, valid_payload: dict):
        """Test the accepted product is not added to the list."""
        before = client.get("/api/productlist")

        response = client.post("/api/products", json=valid_payload)
        assert response.status_code == 201

        after = client.get("/api/productlist")
        assert len(after.json()) == len(before.json()) == 2
        assert after.content == before.content

    def test_repeated_create_is_not_deduplicated(self, client: TestClient, valid_payload: dict):
        """Test the same id can be created twice."""
        first = client.post("/api/products", json=valid_payload)
        second = client.post("/api/products", json=valid_payload)
        assert first.status_code == second.status_code == 201

    def test_existing_catalog_id_is_accepted(self, client: TestClient, valid_payload: dict):
        """Test no uniqueness check against the catalog."""
        response = client.post("/api/products", json=with_changes(valid_payload, id=1))
        assert response.status_code == 201

    def test_field_names_are_case_insensitive(self, client: TestClient, valid_payload: dict):
        """Test Name, name and NAME bind to the same field."""
        response = client.post(
            "/api/products",
            json={
                "ID": 3,
                "Name": "Keyboard",
                "PRICE": 19.99,
                "stock": 10,
                "Category": {"Id": 101, "NAME": "Electronics"},
            }
        )
        assert response.status_code == 201
        assert response.json() == valid_payload

    def test_price_keeps_decimal_digits(self, client: TestClient, valid_payload: dict):
        """Test a price with cents is echoed with the same digits."""
        response = client.post(
            "/api/products",
            content='{"id": 3, "name": "Cable", "price": 0.10, "stock": 0, '
                    '"category": {"id": 5, "name": "Wires"}}',
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 201
        assert '"price": 0.10,' in response.text

    def test_large_price_is_echoed_exactly(self, client: TestClient):
        """Test a price beyond float precision is echoed digit for digit."""
        response = client.post(
            "/api/products",
            content='{"id": 3, "name": "Yacht", "price": 12345678901234567.89, "stock": 1, '
                    '"category": {"id": 5, "name": "Boats"}}',
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 201
        assert '"price": 12345678901234567.89,' in response.text
        price = json.loads(response.text, parse_float=Decimal)["price"]
        assert price == Decimal("12345678901234567.89")

    def test_largest_decimal_price_is_accepted(self, client: TestClient):
        """Test the largest 96-bit decimal binds and echoes."""
        response = client.post(
            "/api/products",
            content='{"id": 3, "name": "Ledger", "price": 79228162514264337593543950335, '
                    '"stock": 1, "category": {"id": 5, "name": "Finance"}}',
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 201
        assert '"price": 79228162514264337593543950335,' in response.text

    @pytest.mark.parametrize("name", ["ab", "x" * 100])
    def test_name_length_boundaries_are_valid(self, client: TestClient, valid_payload: dict, name: str):
        """Test names of length 2 and 100 are accepted."""
        response = client.post("/api/products", json=with_changes(valid_payload, name=name))
        assert response.status_code == 201

    def test_minimum_price_and_zero_stock_are_valid(self, client: TestClient, valid_payload: dict):
        """Test the lower bounds of price and stock."""
        response = client.post(
            "/api/products",
            json=with_changes(valid_payload, price=0.01, stock=0)
        )
        assert response.status_code == 201


class TestCreateValidation:
    """Tests for POST /api/products with invalid candidates."""

    @pytest.mark.parametrize(
        "changes, message",
        [
            ({"id": 0}, "Id must be a positive number"),
            ({"id": -4}, "Id must be a positive number"),
            ({"name": ""}, "Name is required"),
            ({"name": "   "}, "Name is required"),
            ({"name": None}, "Name is required"),
            ({"name": "A"}, "Name must be between 2 and 100 characters"),
            ({"name": "x" * 101}, "Name must be between 2 and 100 characters"),
            ({"price": 0}, "Price must be greater than 0"),
            ({"price": -5}, "Price must be greater than 0"),
            ({"price": 0.001}, "Price must be greater than 0"),
            ({"stock": -1}, "Stock cannot be negative"),
            ({"category": None}, "Category is required"),
            ({"category": {"id": 0, "name": "Electronics"}}, "Category Id must be a positive number"),
            ({"category": {"id": 101, "name": ""}}, "Category name is required"),
            ({"category": {"id": 101, "name": "E"}}, "Category name must be between 2 and 50 characters"),
            ({"category": {"id": 101, "name": "x" * 51}}, "Category name must be between 2 and 50 characters"),
        ]
    )
    def test_single_violation(self, client: TestClient, valid_payload: dict, changes: dict, message: str):
        """Test one violated rule yields exactly its message."""
        response = client.post("/api/products", json=with_changes(valid_payload, **changes))
        assert response.status_code == 400
        assert response.json()["errors"] == {"product": [message]}

    def test_missing_category_key(self, client: TestClient, valid_payload: dict):
        """Test an absent category is reported, not defaulted."""
        del valid_payload["category"]
        response = client.post("/api/products", json=valid_payload)
        assert response.status_code == 400
        assert response.json()["errors"]["product"] == ["Category is required"]

    def test_every_violation_is_reported(self, client: TestClient):
        """Test no short-circuiting across fields."""
        response = client.post(
            "/api/products",
            json={"id": 0, "name": "A", "price": -5, "stock": -1, "category": None}
        )
        assert response.status_code == 400
        assert response.json()["errors"]["product"] == [
            "Id must be a positive number",
            "Name must be between 2 and 100 characters",
            "Price must be greater than 0",
            "Stock cannot be negative",
            "Category is required",
        ]

    def test_empty_object_reports_every_required_field(self, client: TestClient):
        """Test missing fields decode to zero values and fail validation."""
        response = client.post("/api/products", json={})
        assert response.status_code == 400
        assert response.json()["errors"]["product"] == [
            "Id must be a positive number",
            "Name is required",
            "Price must be greater than 0",
            "Category is required",
        ]

    def test_problem_document_shape(self, client: TestClient, valid_payload: dict):
        """Test the validation problem envelope."""
        response = client.post("/api/products", json=with_changes(valid_payload, stock=-3))
        assert response.headers["content-type"] == "application/problem+json"
        assert response.json() == {
            "type": PROBLEM_TYPES[400],
            "title": "One or more validation errors occurred.",
            "status": 400,
            "errors": {"product": ["Stock cannot be negative"]},
        }

    def test_rejected_candidate_has_no_location(self, client: TestClient, valid_payload: dict):
        """Test a rejected candidate gets no location header."""
        response = client.post("/api/products", json=with_changes(valid_payload, id=0))
        assert "location" not in response.headers


class TestCors:
    """Tests for the open development CORS posture."""

    def test_simple_request_allows_any_origin(self, client: TestClient):
        """Test any origin is allowed on reads."""
        response = client.get("/api/productlist", headers={"Origin": "http://localhost:5173"})
        assert response.headers["access-control-allow-origin"] == "*"

    def test_preflight_allows_any_method_and_header(self, client: TestClient):
        """Test preflight for a POST with a custom header."""
        response = client.options(
            "/api/products",
            headers={
                "Origin": "https://client.example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "X-Client-Version",
            }
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "x-client-version" in response.headers["access-control-allow-headers"].lower()
