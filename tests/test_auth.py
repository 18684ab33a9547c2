"""Tests for session handling and the identity provider callback"""

from http.cookies import SimpleCookie

from jose import jwt

from consult_match.core.config import settings
from consult_match.core.security import create_access_token
from consult_match.models.user import UserStatusEnum


def identity_token(**claims) -> str:
    return jwt.encode(claims, settings.IDENTITY_PROVIDER_SECRET, algorithm=settings.JWT_ALGORITHM)


def session_cookie(response) -> str:
    cookie = SimpleCookie(response.headers["set-cookie"])
    return cookie[settings.SESSION_COOKIE_NAME].value


async def test_health(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "success"


async def test_auth_user_requires_session(client):
    response = await client.get("/api/auth/user")
    assert response.status_code == 401


async def test_invalid_session_token_is_rejected(client):
    response = await client.get("/api/auth/user", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


async def test_session_for_unknown_user_is_rejected(client):
    token = create_access_token({"sub": "missing-user"})
    response = await client.get("/api/auth/user", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


async def test_login_redirects_to_identity_provider(client):
    response = await client.get("/api/login")
    assert response.status_code in (302, 307)
    location = response.headers["location"]
    assert location.startswith(settings.IDENTITY_PROVIDER_URL)
    assert "redirect_uri=" in location


async def test_callback_rejects_bad_token(client):
    response = await client.get("/api/callback", params={"token": "garbage"})
    assert response.status_code == 401


async def test_callback_upserts_user_and_sets_cookie(client):
    token = identity_token(
        sub="idp-user-1",
        email="maria@example.com",
        first_name="Maria",
        last_name="Silva",
        email_verified=True,
    )
    response = await client.get("/api/callback", params={"token": token})
    assert response.status_code == 302
    session = session_cookie(response)
    assert session

    me = await client.get("/api/auth/user", headers={"Cookie": f"{settings.SESSION_COOKIE_NAME}={session}"})
    assert me.status_code == 200
    body = me.json()
    assert body["userId"] == "idp-user-1"
    assert body["email"] == "maria@example.com"
    assert body["role"] is None
    assert body["profile"] is None
    assert body["status"] == UserStatusEnum.active.value
    assert body["loginCount"] == 1


async def test_second_login_merges_claims(client):
    first = identity_token(sub="idp-user-2", email="joao@example.com", first_name="João")
    await client.get("/api/callback", params={"token": first})

    second = identity_token(sub="idp-user-2", email="joao@example.com", first_name="Joãozinho")
    response = await client.get("/api/callback", params={"token": second})
    session = session_cookie(response)

    me = await client.get("/api/auth/user", headers={"Cookie": f"{settings.SESSION_COOKIE_NAME}={session}"})
    body = me.json()
    assert body["firstName"] == "Joãozinho"
    assert body["loginCount"] == 2
    # Email 未驗證：維持 PENDING_VERIFICATION
    assert body["status"] == UserStatusEnum.pending_verification.value


async def test_suspended_user_is_forbidden(client, create_user):
    user = await create_user(status=UserStatusEnum.suspended)
    response = await client.get("/api/auth/user", headers=user.headers)
    assert response.status_code == 403


async def test_logout_clears_cookie(client):
    response = await client.get("/api/logout")
    assert response.status_code == 302
    assert settings.SESSION_COOKIE_NAME in response.headers.get("set-cookie", "")
