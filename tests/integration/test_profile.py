"""Tests for the authenticated profile endpoint."""

from httpx import AsyncClient

from sbs.auth.jwt import create_access_token
from tests.helpers import seed_user


class TestProfile:
    async def test_new_user_has_empty_record(self, authed_client: AsyncClient):
        response = await authed_client.get("/profile")
        assert response.status_code == 200
        assert response.json() == {"wins": 0, "losses": 0}

    async def test_returns_stored_counters(self, client: AsyncClient, db_session):
        user = await seed_user(db_session, "veteran", wins=42, losses=8)
        token = create_access_token(user.id)
        response = await client.get("/profile", headers={"Authorization": f"Bearer {token}"})
        assert response.json() == {"wins": 42, "losses": 8}

    async def test_missing_header_unauthorized(self, client: AsyncClient):
        response = await client.get("/profile")
        assert response.status_code == 401
        assert response.json()["detail"] == "Authorization header required"
        assert response.headers["www-authenticate"] == "Bearer"

    async def test_non_bearer_scheme_unauthorized(self, client: AsyncClient):
        response = await client.get("/profile", headers={"Authorization": "Basic YWxpY2U6cHc="})
        assert response.status_code == 401
        assert response.json()["detail"] == "Bearer token required"

    async def test_bare_token_unauthorized(self, client: AsyncClient):
        token = create_access_token(1)
        response = await client.get("/profile", headers={"Authorization": token})
        assert response.status_code == 401

    async def test_garbage_token_unauthorized(self, client: AsyncClient):
        response = await client.get("/profile", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token"

    async def test_unknown_user_is_internal_error(self, client: AsyncClient):
        token = create_access_token(999_999)
        response = await client.get("/profile", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 500
