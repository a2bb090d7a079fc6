import httpx


class TestGetEndpoints:
    async def test_success(self, api_client: httpx.AsyncClient):
        response = await api_client.get("/api")
        assert response.status_code == 200
        endpoints = response.json()["endpoints"]
        assert isinstance(endpoints, dict)
        assert "GET /api/articles" in endpoints
        assert "DELETE /api/comments/:comment_id" in endpoints

    async def test_invalid_method(self, api_client: httpx.AsyncClient):
        response = await api_client.post("/api")
        assert response.status_code == 405
        assert response.json() == {"msg": "Invalid Method"}


class TestUnknownRoute:
    async def test_route_not_found(self, api_client: httpx.AsyncClient):
        response = await api_client.get("/invalid_endpoint")
        assert response.status_code == 404
        assert response.json() == {"msg": "Route Not Found"}

    async def test_unknown_nested_route(self, api_client: httpx.AsyncClient):
        response = await api_client.get("/api/articles/1/likes")
        assert response.status_code == 404
        assert response.json()["msg"] == "Route Not Found"
