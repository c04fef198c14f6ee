"""Route tests for sections, product batches, sellers and products."""

import pytest


def _section(number: int) -> dict:
    return {
        "section_number": number,
        "current_temperature": 4,
        "minimum_temperature": -2,
        "current_capacity": 50,
        "minimum_capacity": 10,
        "maximum_capacity": 200,
        "warehouse_id": 1,
        "product_type_id": 1,
    }


def _batch(batch_number: int, section_id: int, quantity: int) -> dict:
    return {
        "batch_number": batch_number,
        "current_quantity": quantity,
        "current_temperature": 3,
        "due_date": "2022-04-04",
        "initial_quantity": 30,
        "manufacturing_date": "2021-04-01",
        "manufacturing_hour": 10,
        "minimum_temperature": -5.5,
        "product_id": 1,
        "section_id": section_id,
    }


@pytest.mark.integration
class TestSectionRoutes:
    async def test_crud_cycle(self, client):
        created = await client.post("/api/v1/sections", json=_section(1))
        section = created.json()

        patched = await client.patch(
            f"/api/v1/sections/{section['id']}", json={"current_capacity": 75}
        )
        listed = await client.get("/api/v1/sections")
        deleted = await client.delete(f"/api/v1/sections/{section['id']}")

        assert created.status_code == 201
        assert patched.status_code == 200
        assert patched.json() == {**section, "current_capacity": 75}
        assert listed.json() == [{**section, "current_capacity": 75}]
        assert deleted.status_code == 204

    async def test_duplicate_section_number_returns_409(self, client):
        await client.post("/api/v1/sections", json=_section(1))
        response = await client.post("/api/v1/sections", json=_section(1))
        assert response.status_code == 409

    async def test_products_report(self, client):
        section = (await client.post("/api/v1/sections", json=_section(9))).json()
        await client.post("/api/v1/productBatches", json=_batch(1, section["id"], 5))
        await client.post("/api/v1/productBatches", json=_batch(2, section["id"], 7))

        all_rows = await client.get("/api/v1/sections/reportProducts")
        one_row = await client.get(
            "/api/v1/sections/reportProducts", params={"id": section["id"]}
        )

        expected = {
            "section_id": section["id"],
            "section_number": 9,
            "products_count": 12,
        }
        assert all_rows.status_code == 200
        assert all_rows.json() == [expected]
        assert one_row.json() == expected

    async def test_products_report_without_batches_is_404(self, client):
        section = (await client.post("/api/v1/sections", json=_section(9))).json()
        response = await client.get(
            "/api/v1/sections/reportProducts", params={"id": section["id"]}
        )
        assert response.status_code == 404


@pytest.mark.integration
class TestProductBatchRoutes:
    async def test_create_and_patch_keeps_dates(self, client):
        created = await client.post("/api/v1/productBatches", json=_batch(1, 1, 5))
        batch = created.json()

        patched = await client.patch(
            f"/api/v1/productBatches/{batch['id']}", json={"current_quantity": 2}
        )

        assert created.status_code == 201
        assert batch["due_date"] == "2022-04-04"
        assert patched.status_code == 200
        assert patched.json() == {**batch, "current_quantity": 2}

    async def test_duplicate_batch_number_returns_409(self, client):
        await client.post("/api/v1/productBatches", json=_batch(1, 1, 5))
        response = await client.post("/api/v1/productBatches", json=_batch(1, 1, 9))
        assert response.status_code == 409


@pytest.mark.integration
class TestSellerRoutes:
    async def test_patch_cid_collision_returns_409(self, client):
        payload = {
            "company_name": "Meli",
            "address": "Monroe 860",
            "telephone": "47470000",
            "locality_id": 1,
        }
        await client.post("/api/v1/sellers", json={**payload, "cid": 1})
        second = (
            await client.post("/api/v1/sellers", json={**payload, "cid": 2})
        ).json()

        response = await client.patch(
            f"/api/v1/sellers/{second['id']}", json={"cid": 1}
        )

        assert response.status_code == 409

    async def test_get_unknown_returns_404(self, client):
        response = await client.get("/api/v1/sellers/3")
        assert response.status_code == 404


@pytest.mark.integration
class TestProductRoutes:
    async def test_zero_float_rejected_on_create(self, client):
        response = await client.post(
            "/api/v1/products",
            json={
                "product_code": "P-1",
                "description": "apple",
                "width": 0.0,
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
        assert response.status_code == 422

    async def test_delete_unknown_returns_404(self, client):
        response = await client.delete("/api/v1/products/12")
        assert response.status_code == 404
