"""authenticate(): one success shape, three failure reasons, one client-facing 401."""
import dataclasses

import pytest

from app.core.auth import Identity, authenticate
from app.core.errors import AuthFailure


async def test_valid_credentials_resolve_that_user(test_db, alice, bob, basic_auth):
    header = basic_auth("a@x.com", "secret1")["Authorization"]

    identity = await authenticate(header, test_db)

    assert isinstance(identity, Identity)
    assert identity.id == alice.id
    assert identity.email_address == "a@x.com"
    assert identity.first_name == "Alice"


async def test_login_email_is_normalized(test_db, alice, basic_auth):
    header = basic_auth("  A@X.com ", "secret1")["Authorization"]

    identity = await authenticate(header, test_db)

    assert identity.id == alice.id


async def test_missing_header_is_no_credentials(test_db):
    assert await authenticate(None, test_db) is AuthFailure.NO_CREDENTIALS


async def test_unknown_email(test_db, alice, basic_auth):
    header = basic_auth("nobody@x.com", "secret1")["Authorization"]
    assert await authenticate(header, test_db) is AuthFailure.UNKNOWN_USER


async def test_wrong_password(test_db, alice, basic_auth):
    header = basic_auth("a@x.com", "wrong")["Authorization"]
    assert await authenticate(header, test_db) is AuthFailure.BAD_PASSWORD


async def test_identity_is_immutable(test_db, alice, basic_auth):
    identity = await authenticate(basic_auth("a@x.com", "secret1")["Authorization"], test_db)

    with pytest.raises(dataclasses.FrozenInstanceError):
        identity.id = 999


async def test_all_failures_share_one_response(client, alice, basic_auth):
    attempts = [
        {},
        {"Authorization": "Bearer token"},
        {"Authorization": "Basic %%%"},
        basic_auth("nobody@x.com", "secret1"),
        basic_auth("a@x.com", "wrong"),
    ]

    responses = [await client.get("/api/users", headers=h) for h in attempts]

    assert {r.status_code for r in responses} == {401}
    assert {r.content for r in responses} == {b'{"message":"Not Authorized"}'}
    assert all(r.headers["WWW-Authenticate"].startswith("Basic") for r in responses)


async def test_failure_reason_is_logged(client, alice, basic_auth, caplog):
    with caplog.at_level("WARNING", logger="app.core.auth"):
        await client.get("/api/users", headers=basic_auth("a@x.com", "wrong"))

    assert "bad_password" in caplog.text


async def test_unknown_email_still_spends_a_hash_check(test_db, alice, basic_auth, monkeypatch):
    calls = []
    monkeypatch.setattr("app.core.auth.dummy_verify", lambda: calls.append(True))

    unknown = await authenticate(basic_auth("nobody@x.com", "secret1")["Authorization"], test_db)
    known = await authenticate(basic_auth("a@x.com", "secret1")["Authorization"], test_db)

    assert unknown is AuthFailure.UNKNOWN_USER
    assert isinstance(known, Identity)
    assert calls == [True]
