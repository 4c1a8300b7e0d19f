"""HTTP-level tests for the v1 API."""

import pytest
from httpx import ASGITransport, AsyncClient

from farm_manager_api.app.main import create_app
from farm_manager_api.app.services.registry import ServiceRegistry, remote_backends

API = "/api/v1"


@pytest.mark.asyncio
class TestCrud:
    async def test_list_crops(self, client):
        response = await client.get(f"{API}/crops/")
        assert response.status_code == 200
        body = response.json()
        assert [crop["Id"] for crop in body] == [1, 2, 3, 4, 5]
        assert body[0]["plantedDate"] == "2024-03-01"

    async def test_create_crop(self, client):
        payload = {"name": "Corn", "variety": "Sweet", "plantedDate": "2024-04-01", "area": 12.5, "farmId": 1}
        response = await client.post(f"{API}/crops/", json=payload)
        assert response.status_code == 201
        created = response.json()
        assert created["Id"] == 6
        assert created["area"] == 12.5
        assert created["status"] == "planted"

        fetched = await client.get(f"{API}/crops/{created['Id']}")
        assert fetched.json() == created

    async def test_harvest_before_planting_is_rejected(self, client):
        payload = {"name": "Corn", "variety": "Sweet", "plantedDate": "2024-04-01",
                   "expectedHarvest": "2024-03-01", "area": 1, "farmId": 1}
        response = await client.post(f"{API}/crops/", json=payload)
        assert response.status_code == 422

    async def test_transaction_category_must_match_type(self, client):
        payload = {"type": "income", "category": "seeds", "amount": 10, "date": "2024-06-01"}
        response = await client.post(f"{API}/transactions/", json=payload)
        assert response.status_code == 422

    async def test_update_and_delete(self, client):
        response = await client.put(f"{API}/subtasks/2", json={"completed": True})
        assert response.status_code == 200
        assert response.json()["completed"] is True
        assert response.json()["taskId"] == 1

        response = await client.delete(f"{API}/subtasks/2")
        assert response.status_code == 204
        response = await client.delete(f"{API}/subtasks/2")
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    async def test_unknown_id_is_404(self, client):
        response = await client.put(
            f"{API}/crops/999",
            json={"name": "X", "variety": "Y", "plantedDate": "2024-01-01", "area": 1, "farmId": 1},
        )
        assert response.status_code == 404

    async def test_non_numeric_id_is_400(self, client):
        response = await client.get(f"{API}/farms/abc")
        assert response.status_code == 400
        assert response.json()["error"] == "invalid_argument"


@pytest.mark.asyncio
class TestEntityRoutes:
    async def test_farmer_search(self, client):
        response = await client.get(f"{API}/farmers/search", params={"q": "corn"})
        assert response.status_code == 200
        farmers = response.json()
        assert [f["Id"] for f in farmers] == [1]
        assert farmers[0]["primaryCrops"] == ["Corn", "Wheat"]
        assert farmers[0]["stats"]["totalFarms"] == 2

    async def test_complete_task(self, client):
        response = await client.post(f"{API}/tasks/3/complete")
        assert response.status_code == 200
        assert response.json()["completed"] is True
        assert response.json()["completedAt"]

        response = await client.post(f"{API}/tasks/3/complete", json={"completed": False})
        assert response.json()["completed"] is False
        assert response.json()["completedAt"] is None

    async def test_create_completed_task_stamps_completed_at(self, client):
        payload = {"title": "Harvest", "dueDate": "2024-07-01", "completed": True}
        response = await client.post(f"{API}/tasks/", json=payload)
        assert response.status_code == 201
        assert response.json()["completedAt"] is not None

    async def test_put_reopening_task_clears_completed_at(self, client):
        payload = {"title": "Fertilize", "dueDate": "2024-06-20T08:00:00Z", "priority": "medium", "completed": False}
        response = await client.put(f"{API}/tasks/2", json=payload)
        assert response.status_code == 200
        assert response.json()["completed"] is False
        assert response.json()["completedAt"] is None

    async def test_task_subtasks(self, client):
        response = await client.get(f"{API}/tasks/1/subtasks")
        assert [s["name"] for s in response.json()] == ["Open valves", "Log usage"]

    async def test_weather_current_and_forecast(self, client):
        current = await client.get(f"{API}/weather/current")
        assert current.status_code == 200
        assert current.json()["location"] == "Farm Location"

        forecast = await client.get(f"{API}/weather/forecast", params={"days": 2})
        assert len(forecast.json()["forecast"]) == 2

        too_many = await client.get(f"{API}/weather/forecast", params={"days": 30})
        assert too_many.status_code == 422

    async def test_dashboard(self, client):
        summary = await client.get(f"{API}/dashboard/summary")
        assert summary.status_code == 200
        assert summary.json()["totalCrops"] == 5

        finances = await client.get(f"{API}/dashboard/finances", params={"type": "income"})
        assert finances.status_code == 200
        body = finances.json()
        assert body["netProfit"] == 1350.0
        assert [t["Id"] for t in body["transactions"]] == [2]


@pytest.mark.asyncio
class TestRemoteErrors:
    @pytest.fixture
    def remote_app(self, records_client):
        return create_app(ServiceRegistry.from_backends(remote_backends(records_client)))

    async def test_partial_failure_is_502(self, remote_app, fake_session):
        fake_session.respond(
            {
                "success": True,
                "results": [
                    {"success": True, "data": {"Id": 1}},
                    {"success": False, "message": "duplicate"},
                    {"success": True, "data": {"Id": 3}},
                ],
            }
        )
        async with AsyncClient(transport=ASGITransport(app=remote_app), base_url="http://test") as http:
            response = await http.post(f"{API}/subtasks/", json={"name": "Check", "taskId": 1})
        assert response.status_code == 502
        assert response.json() == {
            "detail": "Failed to create 1 of 3 records: duplicate",
            "error": "partial_failure",
            "failed": 1,
            "total": 3,
        }

    async def test_missing_remote_record_is_404(self, remote_app, fake_session):
        fake_session.respond({"success": False, "message": "Record does not exist"})
        async with AsyncClient(transport=ASGITransport(app=remote_app), base_url="http://test") as http:
            response = await http.get(f"{API}/crops/42")
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    async def test_unreachable_backend_is_503(self, remote_app, fake_session, connection_error):
        fake_session.fail(connection_error)
        async with AsyncClient(transport=ASGITransport(app=remote_app), base_url="http://test") as http:
            response = await http.get(f"{API}/farms/")
        assert response.status_code == 503
        assert response.json()["error"] == "backend_unavailable"

    async def test_rejected_request_is_502(self, remote_app, fake_session):
        fake_session.respond({"success": False, "message": "Invalid project"})
        async with AsyncClient(transport=ASGITransport(app=remote_app), base_url="http://test") as http:
            response = await http.get(f"{API}/crops/")
        assert response.status_code == 502
        assert response.json()["detail"] == "Invalid project"
