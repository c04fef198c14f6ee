"""Route tests for /api/v1/productRecords and the per-product report."""

from datetime import date, timedelta

import pytest

BASE = "/api/v1/productRecords"


async def _create_product(client, code: str = "P-1", description: str = "apple"):
    response = await client.post(
        "/api/v1/products",
        json={
            "product_code": code,
            "description": description,
            "width": 1.5,
            "height": 2.0,
            "length": 3.0,
            "netweight": 10.0,
            "expiration_rate": 0.5,
            "recommended_freezing_temperature": -4.0,
            "freezing_rate": 1.2,
            "product_type_id": 1,
            "seller_id": 1,
        },
    )
    assert response.status_code == 201
    return response.json()


def _record(product_id: int, last_update_date: date) -> dict:
    return {
        "data": {
            "last_update_date": last_update_date.isoformat(),
            "purchase_price": 10.5,
            "sale_price": 15.25,
            "product_id": product_id,
        }
    }


@pytest.mark.integration
class TestProductRecordRoutes:
    async def test_create_and_get(self, client):
        product = await _create_product(client)
        yesterday = date.today() - timedelta(days=1)

        response = await client.post(BASE, json=_record(product["id"], yesterday))

        assert response.status_code == 201
        body = response.json()
        assert body["product_id"] == product["id"]
        assert body["last_update_date"] == yesterday.isoformat()

        fetched = await client.get(f"{BASE}/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["sale_price"] == pytest.approx(15.25)

    async def test_future_date_returns_400(self, client):
        product = await _create_product(client)
        next_year = date.today() + timedelta(days=365)

        response = await client.post(BASE, json=_record(product["id"], next_year))

        assert response.status_code == 400
        assert "exceeds the current system date" in response.json()["detail"]

    async def test_unknown_product_returns_409(self, client):
        response = await client.post(BASE, json=_record(999, date(2021, 4, 4)))

        assert response.status_code == 409
        assert response.json()["detail"] == "no product matches the specified id"

    async def test_missing_envelope_returns_422(self, client):
        response = await client.post(
            BASE,
            json=_record(1, date(2021, 4, 4))["data"],
        )
        assert response.status_code == 422

    async def test_get_unknown_returns_404(self, client):
        response = await client.get(f"{BASE}/5")
        assert response.status_code == 404


@pytest.mark.integration
class TestProductRecordsReportRoute:
    async def test_report_counts_records(self, client):
        apple = await _create_product(client, "P-1", "apple")
        pear = await _create_product(client, "P-2", "pear")
        for _ in range(2):
            await client.post(BASE, json=_record(apple["id"], date(2021, 4, 4)))

        response = await client.get("/api/v1/products/reportRecords")

        assert response.status_code == 200
        assert response.json() == [
            {"product_id": apple["id"], "description": "apple", "records_count": 2},
            {"product_id": pear["id"], "description": "pear", "records_count": 0},
        ]

    async def test_report_single_product(self, client):
        apple = await _create_product(client, "P-1", "apple")

        response = await client.get(
            "/api/v1/products/reportRecords", params={"id": apple["id"]}
        )

        assert response.status_code == 200
        assert response.json() == {
            "product_id": apple["id"],
            "description": "apple",
            "records_count": 0,
        }

    async def test_report_unknown_product_is_404(self, client):
        response = await client.get(
            "/api/v1/products/reportRecords", params={"id": 77}
        )
        assert response.status_code == 404
