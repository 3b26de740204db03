"""API tests for master barang endpoints."""

from httpx import AsyncClient

from src.application.master_barang import MasterBarangController


class TestBrowseAPI:
    async def test_first_page(self, client: AsyncClient):
        response = await client.get("/api/barang")
        assert response.status_code == 200
        data = response.json()
        assert data["current_page"] == 1
        assert data["total_items"] == 5
        assert data["total_pages"] == 3
        assert data["start_index"] == 1
        assert data["end_index"] == 2
        assert data["page_numbers"] == [1, 2, 3]
        assert data["show_controls"] is True
        assert [item["code"] for item in data["items"]] == ["AMX001", "PCT001"]

    async def test_item_fields(self, client: AsyncClient):
        response = await client.post("/api/barang/page", json={"page": 3})
        item = response.json()["items"][0]
        assert item["code"] == "BTD001"
        assert item["active"] is False
        assert item["status_label"] == "Non-aktif"
        assert item["expiry"] == "2025-09-30"

    async def test_page_navigation(self, client: AsyncClient):
        assert (await client.post("/api/barang/page/next")).json()["current_page"] == 2
        assert (await client.post("/api/barang/page/next")).json()["current_page"] == 3
        last = (await client.post("/api/barang/page/next")).json()
        assert last["current_page"] == 3
        assert last["has_next_page"] is False
        assert (await client.post("/api/barang/page/previous")).json()["current_page"] == 2

    async def test_page_clamped(self, client: AsyncClient):
        response = await client.post("/api/barang/page", json={"page": 99})
        assert response.status_code == 200
        assert response.json()["current_page"] == 3
        response = await client.post("/api/barang/page", json={"page": -4})
        assert response.json()["current_page"] == 1

    async def test_search_resets_page(self, client: AsyncClient):
        await client.post("/api/barang/page", json={"page": 3})
        response = await client.put("/api/barang/search", json={"term": "500MG"})
        data = response.json()
        assert data["search_term"] == "500MG"
        assert data["current_page"] == 1
        assert data["total_items"] == 2
        assert data["show_controls"] is False

    async def test_search_no_match(self, client: AsyncClient):
        data = (await client.put("/api/barang/search", json={"term": "zzz"})).json()
        assert data["total_items"] == 0
        assert data["total_pages"] == 0
        assert data["start_index"] == 0
        assert data["end_index"] == 0
        assert data["items"] == []

    async def test_options(self, client: AsyncClient):
        data = (await client.get("/api/barang/options")).json()
        assert "Antibiotik" in data["categories"]
        assert "tablet" in data["units"]
        assert data["default_unit"] == "buah"


class TestCrudAPI:
    async def test_create(self, client: AsyncClient, controller: MasterBarangController):
        response = await client.post(
            "/api/barang",
            json={
                "code": "VTC001",
                "name": "Vitamin C 500mg",
                "category": "Vitamin",
                "batch_number": "B100",
                "expiry": "2027-03-01",
            },
        )
        assert response.status_code == 201
        data = response.json()
        assert data["id"] == "6"
        assert data["unit"] == "buah"
        assert data["minimum_stock"] == 0
        assert data["active"] is True
        assert data["expiry"] == "2027-03-01"
        assert controller.catalog_size == 6

        outcome = (await client.get("/api/barang/outcome")).json()
        assert outcome["success"] is True
        assert outcome["message"] == "Data barang berhasil ditambahkan"

    async def test_create_missing_fields(
        self, client: AsyncClient, controller: MasterBarangController
    ):
        response = await client.post("/api/barang", json={})
        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["path"] == "/api/barang"
        assert controller.catalog_size == 5

        outcome = (await client.get("/api/barang/outcome")).json()
        assert outcome["success"] is False
        assert outcome["title"] == "Error"

    async def test_create_bad_types(self, client: AsyncClient):
        response = await client.post(
            "/api/barang",
            json={
                "code": "X",
                "name": "X",
                "category": "X",
                "batch_number": "B",
                "minimum_stock": -1,
            },
        )
        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    async def test_get(self, client: AsyncClient):
        response = await client.get("/api/barang/3")
        assert response.status_code == 200
        assert response.json()["code"] == "CTM001"

    async def test_get_missing(self, client: AsyncClient):
        response = await client.get("/api/barang/nonexistent-id")
        assert response.status_code == 404
        assert response.json()["error_code"] == "RECORD_NOT_FOUND"

    async def test_update_partial(self, client: AsyncClient):
        response = await client.put("/api/barang/2", json={"minimum_stock": 250})
        assert response.status_code == 200
        data = response.json()
        assert data["minimum_stock"] == 250
        assert data["name"] == "Paracetamol 500mg"
        assert data["batch_number"] == "B002"

    async def test_update_missing(self, client: AsyncClient, controller: MasterBarangController):
        before = controller.window()
        response = await client.put("/api/barang/nonexistent-id", json={"name": "X"})
        assert response.status_code == 404
        assert response.json()["error_code"] == "RECORD_NOT_FOUND"
        assert controller.window() == before

    async def test_update_blank_required(self, client: AsyncClient):
        response = await client.put("/api/barang/1", json={"name": "  "})
        assert response.status_code == 400

    async def test_delete_idempotent(self, client: AsyncClient, controller: MasterBarangController):
        first = await client.delete("/api/barang/5")
        assert first.status_code == 200
        assert first.json()["message"] == "Data barang berhasil dihapus"
        second = await client.delete("/api/barang/5")
        assert second.status_code == 200
        assert controller.catalog_size == 4

    async def test_no_outcome_yet(self, client: AsyncClient):
        response = await client.get("/api/barang/outcome")
        assert response.status_code == 200
        assert response.json() is None
