"""Tests for username + password login."""

from datetime import datetime, timedelta, timezone

from httpx import AsyncClient

from sbs.auth.jwt import create_access_token, user_id_from_token
from tests.helpers import login, register


class TestLogin:
    async def test_login_returns_token(self, client: AsyncClient):
        await register(client, "alice", email="a@x.com", password="pw123456")
        response = await login(client, "alice", "pw123456")
        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"token"}
        assert isinstance(user_id_from_token(data["token"]), int)

    async def test_wrong_password_unauthorized(self, client: AsyncClient):
        await register(client, "alice", password="pw123456")
        response = await login(client, "alice", "wrong")
        assert response.status_code == 401
        assert response.json() == {"detail": "Invalid credentials"}

    async def test_unknown_user_indistinguishable(self, client: AsyncClient):
        await register(client, "alice", password="pw123456")
        wrong_password = await login(client, "alice", "wrong")
        unknown_user = await login(client, "mallory", "wrong")
        assert unknown_user.status_code == wrong_password.status_code == 401
        assert unknown_user.json() == wrong_password.json()

    async def test_missing_password_is_bad_request(self, client: AsyncClient):
        response = await client.post("/login", json={"username": "alice"})
        assert response.status_code == 400


class TestTokenLifetime:
    async def test_token_accepted_before_expiry(self, client: AsyncClient):
        await register(client, "alice")
        token = (await login(client, "alice")).json()["token"]
        response = await client.get("/profile", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200

    async def test_token_rejected_after_expiry(self, client: AsyncClient):
        await register(client, "alice")
        token = (await login(client, "alice")).json()["token"]
        user_id = user_id_from_token(token)
        expired = create_access_token(user_id, now=datetime.now(timezone.utc) - timedelta(hours=73))
        response = await client.get("/profile", headers={"Authorization": f"Bearer {expired}"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token"
