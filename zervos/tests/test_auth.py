"""Test password hashing, tokens and the auth routes."""

from __future__ import annotations

from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zervos.models import User
from zervos.config import settings
from zervos.security.passwords import hash_password, needs_rehash, parse_hash, verify_password
from zervos.services import auth_svc
from zervos.security.tokens import decode_token, issue_token


def test_password_roundtrip():
    stored = hash_password("s3cret", iterations=1000)
    assert stored.startswith("pbkdf2_sha256$1000$")
    assert verify_password("s3cret", stored)
    assert not verify_password("wrong", stored)


def test_verify_rejects_malformed_hash():
    assert not verify_password("s3cret", "not-a-hash")
    assert not verify_password("s3cret", "pbkdf2_sha256$abc$salt$digest")


def test_token_claims():
    claims = decode_token(issue_token(7, "a@b.com"))
    assert claims["userId"] == 7
    assert claims["email"] == "a@b.com"
    assert claims["exp"] - claims["iat"] == 7 * 24 * 3600


def test_expired_token_rejected():
    assert decode_token(issue_token(7, "a@b.com", expires_in=timedelta(seconds=-10))) is None


@pytest.mark.asyncio
async def test_signup_and_login(client: AsyncClient, db: AsyncSession):
    response = await client.post("/auth/signup", json={"name": "Ada", "email": "ada@test.com", "password": "pw"})
    assert response.status_code == 200
    assert response.json()["user"]["email"] == "ada@test.com"

    response = await client.post("/auth/login", json={"email": "ada@test.com", "password": "pw"})
    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert decode_token(body["token"])["email"] == "ada@test.com"

    stored = (await db.execute(select(User.session_token))).scalar_one()
    assert stored == body["token"]

    me = await client.get("/auth/me", headers={"Authorization": f"Bearer {body['token']}"})
    assert me.json()["user"]["email"] == "ada@test.com"


@pytest.mark.asyncio
async def test_signup_validation_and_conflict(client: AsyncClient):
    response = await client.post("/auth/signup", json={"email": "ada@test.com"})
    assert response.status_code == 400
    assert response.json() == {"error": "email and password required"}

    await client.post("/auth/signup", json={"email": "ada@test.com", "password": "pw"})
    response = await client.post("/auth/signup", json={"email": "ada@test.com", "password": "pw"})
    assert response.status_code == 409
    assert response.json() == {"error": "User already exists"}


@pytest.mark.asyncio
async def test_login_bad_credentials(client: AsyncClient):
    await client.post("/auth/signup", json={"email": "ada@test.com", "password": "pw"})
    response = await client.post("/auth/login", json={"email": "ada@test.com", "password": "nope"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}

    response = await client.post("/auth/login", json={"email": "ghost@test.com", "password": "pw"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me_requires_bearer(client: AsyncClient):
    response = await client.get("/auth/me", headers={"Authorization": "Token abc"})
    assert response.status_code == 401
    assert response.json() == {"error": "Missing token"}


def test_parse_hash_and_rehash_policy():
    weak = hash_password("s3cret", iterations=1000)
    parsed = parse_hash(weak)
    assert parsed.iterations == 1000
    assert len(parsed.salt) == 16
    assert needs_rehash(weak)
    assert needs_rehash("garbage")
    assert not needs_rehash(hash_password("s3cret"))


@pytest.mark.asyncio
async def test_login_upgrades_weak_hash(db: AsyncSession):
    db.add(User(email="old@test.com", password_hash=hash_password("pw", iterations=1000)))
    await db.commit()

    user, _token = await auth_svc.login(db, "old@test.com", "pw")

    assert parse_hash(user.password_hash).iterations == settings.password_hash_iterations
    assert verify_password("pw", user.password_hash)
