import pytest

from license_manager.extensions import db
from license_manager.models.purchase_request import PurchaseRequest
from license_manager.models.rda import Rda


class TestRda:
    def test_replace_all_with_license_link(self, client, admin_headers, make_license):
        lic = make_license(product="MATLAB")
        db.session.add(Rda(rda="OLD", product="x", year=2020, reseller=""))
        db.session.commit()

        res = client.post("/api/rda", json=[
            {"rda": "https://rda.test/1", "product": "MATLAB", "year": 2026, "reseller": "Acme Corp"},
            {"rda": "RDA-2", "product": "Unknown", "year": "2025", "license_id": None},
        ], headers=admin_headers)
        assert res.status_code == 200

        data = client.get("/api/rda", headers=admin_headers).get_json()["data"]
        assert [r["rda"] for r in data] == ["https://rda.test/1", "RDA-2"]
        assert data[0]["license_id"] == lic.id
        assert data[1]["license_id"] is None
        assert data[1]["year"] == 2025

    def test_explicit_license_id_wins(self, client, admin_headers, make_license):
        make_license(product="MATLAB")
        other = make_license(product="Origin")

        client.post("/api/rda", json=[
            {"rda": "R1", "product": "MATLAB", "year": 2026, "license_id": other.id},
        ], headers=admin_headers)

        assert Rda.query.one().license_id == other.id

    def test_ambiguous_product_is_left_unlinked(self, client, admin_headers, make_license):
        make_license(product="MATLAB")
        make_license(product="MATLAB")
        client.post("/api/rda", json=[{"rda": "R1", "product": "MATLAB", "year": 2026}], headers=admin_headers)
        assert Rda.query.one().license_id is None

    def test_duplicate_rda_is_conflict(self, client, admin_headers):
        res = client.post("/api/rda", json=[
            {"rda": "R1", "year": 2026}, {"rda": "R1", "year": 2026},
        ], headers=admin_headers)
        assert res.status_code == 409
        assert "Duplicate value for field: rda" in res.get_json()["message"]

    def test_year_is_required_not_defaulted(self, client, admin_headers):
        res = client.post("/api/rda", json=[{"rda": "R1", "year": "soon"}], headers=admin_headers)
        assert res.status_code == 400
        assert res.get_json()["message"] == "row 0: year must be an integer"


class TestPurchaseRequests:
    def test_create_then_update(self, client, admin_headers):
        res = client.post("/api/requests", json=[
            {"requester": "M. Rossi", "product": "MATLAB", "quantity": 3, "budget": "1200.50", "year": 2026},
        ], headers=admin_headers)
        assert res.get_json()["created"] == 1

        [row] = client.get("/api/requests", headers=admin_headers).get_json()["data"]
        assert row["budget"] == 1200.5

        res = client.post("/api/requests", json=[
            {"id": row["id"], "requester": "M. Rossi", "product": "MATLAB", "quantity": 4, "year": 2026},
            {"requester": "L. Bianchi", "product": "Origin", "quantity": 1, "year": 2027},
        ], headers=admin_headers)
        assert res.get_json() == {
            "success": True,
            "message": "Request data saved successfully to database",
            "created": 1,
            "updated": 1,
        }
        db.session.expire_all()
        assert db.session.get(PurchaseRequest, row["id"]).quantity == 4
        assert PurchaseRequest.query.count() == 2

    def test_unknown_id_is_404_and_nothing_saved(self, client, admin_headers):
        res = client.post("/api/requests", json=[
            {"requester": "A", "product": "P", "quantity": 1, "year": 2026},
            {"id": 555, "requester": "B", "product": "P", "quantity": 1, "year": 2026},
        ], headers=admin_headers)
        assert res.status_code == 404
        assert PurchaseRequest.query.count() == 0

    def test_nan_budget_rejected(self, client, admin_headers):
        res = client.post("/api/requests", json=[
            {"requester": "A", "product": "P", "quantity": 1, "budget": "NaN", "year": 2026},
        ], headers=admin_headers)
        assert res.status_code == 400
        assert res.get_json()["message"] == "row 0: budget must be a number"

    @pytest.mark.parametrize("budget, message", [
        ("1e30", "row 0: budget is too large"),
        (1e30, "row 0: budget is too large"),
        ("10000000000", "row 0: budget is too large"),
        ("12.345", "row 0: budget must have at most 2 decimal places"),
        ("-5", "row 0: budget must be >= 0"),
    ])
    def test_budget_outside_numeric_column_is_400(self, client, admin_headers, budget, message):
        res = client.post("/api/requests", json=[
            {"requester": "A", "product": "P", "quantity": 1, "budget": budget, "year": 2026},
        ], headers=admin_headers)
        assert res.status_code == 400
        assert res.get_json()["message"] == message
        assert PurchaseRequest.query.count() == 0

    def test_largest_budget_fits(self, client, admin_headers):
        res = client.post("/api/requests", json=[
            {"requester": "A", "product": "P", "quantity": 1, "budget": "9999999999.99", "year": 2026},
        ], headers=admin_headers)
        assert res.status_code == 200
        assert str(PurchaseRequest.query.one().budget) == "9999999999.99"

    def test_oversized_quantity_is_400(self, client, admin_headers):
        res = client.post("/api/requests", json=[
            {"requester": "A", "product": "P", "quantity": "9" * 5000, "year": 2026},
        ], headers=admin_headers)
        assert res.status_code == 400
        assert res.get_json()["message"] == "row 0: quantity is too large"
