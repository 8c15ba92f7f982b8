# tests/core/test_security.py

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient
from jose import jwt

from museum_cms.core.config import settings
from museum_cms.core.security import create_token, verify_token


def test_create_then_verify_returns_subject():
    token = create_token("507f1f77bcf86cd799439011")
    claims = verify_token(token)
    assert claims is not None
    assert claims["sub"] == "507f1f77bcf86cd799439011"
    # 주체 식별자와 만료 시간 외의 클레임은 없습니다.
    assert set(claims) == {"sub", "exp"}


def test_token_expires_after_24_hours():
    issued_at = datetime.now(timezone.utc).timestamp()
    claims = jwt.get_unverified_claims(create_token("curator-1"))
    lifetime = claims["exp"] - issued_at
    assert settings.TOKEN_EXPIRE_HOURS == 24
    assert abs(lifetime - 24 * 3600) <= 5


def test_non_string_subject_is_stringified():
    claims = verify_token(create_token(42))
    assert claims["sub"] == "42"


def test_expired_token_is_rejected():
    token = create_token("curator-1", expires_delta=timedelta(seconds=-10))
    assert verify_token(token) is None


def test_token_without_expiry_is_rejected():
    unbounded = jwt.encode(
        {"sub": "curator-1"}, settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM
    )
    assert verify_token(unbounded) is None


def test_token_signed_with_other_secret_is_rejected():
    forged = jwt.encode({"sub": "intruder"}, "another-secret", algorithm=settings.ALGORITHM)
    assert verify_token(forged) is None


def test_tampered_payload_is_rejected():
    header, _, signature = create_token("curator-1").split(".")
    _, other_payload, _ = create_token("admin").split(".")
    assert verify_token(f"{header}.{other_payload}.{signature}") is None


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c", None, 12345])
def test_malformed_tokens_never_raise(token):
    assert verify_token(token) is None


@pytest.mark.asyncio
async def test_protected_route_requires_token(client: AsyncClient):
    response = await client.post("/api/v1/education-areas", json={"name": "Physics", "description": "Motion"})
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_protected_route_rejects_invalid_token(client: AsyncClient):
    client.headers["Authorization"] = "Bearer not-a-token"
    response = await client.delete("/api/v1/recommendations/00000000-0000-0000-0000-000000000000")
    assert response.status_code == 401
    assert response.json() == {"detail": "Could not validate credentials"}
