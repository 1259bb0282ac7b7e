"""Tests for the redirect handler."""

import asyncio

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Query


async def create(client, url, code):
    response = await client.post("/api/links", json={"url": url, "code": code})
    assert response.status_code == 201
    return response.json()


class TestRedirect:

    async def test_redirects_and_counts(self, client):
        await create(client, "https://example.com/target", "abc123")

        response = await client.get("/abc123")

        assert response.status_code == 302
        assert response.headers["location"] == "https://example.com/target"
        assert "no-store" in response.headers["cache-control"]

        data = (await client.get("/api/links/abc123")).json()
        assert data["total_clicks"] == 1
        assert data["last_clicked"] is not None

    async def test_each_visit_counts_once(self, client):
        await create(client, "https://example.com", "abc123")

        for _ in range(3):
            await client.get("/abc123")

        data = (await client.get("/api/links/abc123")).json()
        assert data["total_clicks"] == 3

    async def test_unknown_code(self, client):
        await create(client, "https://example.com", "abc123")

        response = await client.get("/zzz999")

        assert response.status_code == 404
        assert response.text == "Not found"
        assert "location" not in response.headers

        data = (await client.get("/api/links/abc123")).json()
        assert data["total_clicks"] == 0
        assert data["last_clicked"] is None

    async def test_code_is_case_sensitive(self, client):
        await create(client, "https://example.com", "abc123")

        response = await client.get("/ABC123")
        assert response.status_code == 404

    @pytest.mark.parametrize("path", ["/ab", "/abcdefghij", "/favicon.ico"])
    async def test_malformed_code(self, client, path):
        response = await client.get(path)
        assert response.status_code == 404

    async def test_fixed_routes_take_precedence(self, client):
        response = await client.get("/healthz")
        assert response.status_code == 200
        assert response.json()["ok"] is True

    async def test_store_error_is_server_error(self, client, monkeypatch):
        await create(client, "https://example.com", "abc123")

        def broken_update(self, *args, **kwargs):
            raise OperationalError("UPDATE links", {}, Exception("disk I/O error"))

        monkeypatch.setattr(Query, "update", broken_update)

        response = await client.get("/abc123")

        assert response.status_code == 500
        assert response.text == "Internal Server Error"

    async def test_full_lifecycle(self, client):
        created = await client.post("/api/links", json={"url": "https://example.com", "code": ""})
        assert created.status_code == 201
        code = created.json()["code"]
        assert len(code) == 6

        redirect = await client.get(f"/{code}")
        assert redirect.status_code == 302
        assert redirect.headers["location"] == "https://example.com"
        assert (await client.get(f"/api/links/{code}")).json()["total_clicks"] == 1

        assert (await client.delete(f"/api/links/{code}")).status_code == 204
        assert (await client.get(f"/api/links/{code}")).status_code == 404
        assert (await client.get(f"/{code}")).status_code == 404


class TestConcurrentRedirects:
    """Concurrent redirects to the same code each count exactly once."""

    async def test_concurrent_redirects(self, client):
        await create(client, "https://example.com/hot", "hot123")
        concurrency = 30

        responses = await asyncio.gather(
            *[client.get("/hot123") for _ in range(concurrency)],
            return_exceptions=True,
        )

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 302, f"Request {i}: status {r.status_code}"

        data = (await client.get("/api/links/hot123")).json()
        assert data["total_clicks"] == concurrency
