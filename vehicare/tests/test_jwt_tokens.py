from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from conftest import FakeClock
from vehicare.domain.users.entities import User
from vehicare.infrastructure.auth.jwt_tokens import JwtTokenService, user_id_from

SECRET = "test-secret-key-that-is-long-enough-for-hs256"


@pytest.fixture()
def user() -> User:
    return User(
        id=7,
        email="jane@example.com",
        password_hash="hashed:secret1",
        first_name="Jane",
        last_name="Doe",
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
    )


def _service(**overrides) -> JwtTokenService:
    values = {"secret": SECRET, "issuer": "vehicare-api", "audience": "vehicare-clients"}
    values.update(overrides)
    return JwtTokenService(**values)


def test_issue_embeds_identity_claims(user: User) -> None:
    service = _service()

    claims = service.verify(service.issue(user))

    assert claims is not None
    assert claims["sub"] == "7"
    assert claims["userId"] == "7"
    assert claims["email"] == "jane@example.com"
    assert claims["given_name"] == "Jane"
    assert claims["family_name"] == "Doe"
    assert claims["iss"] == "vehicare-api"
    assert claims["aud"] == "vehicare-clients"
    assert claims["exp"] - claims["iat"] == 24 * 3600
    assert user_id_from(claims) == 7


def test_token_is_hs256(user: User) -> None:
    token = _service().issue(user)

    assert jwt.get_unverified_header(token)["alg"] == "HS256"


def test_expired_token_rejected(user: User) -> None:
    issued_long_ago = FakeClock(datetime.now(UTC) - timedelta(hours=25))
    token = _service(clock=issued_long_ago).issue(user)

    assert _service().verify(token) is None


def test_token_still_valid_within_lifetime(user: User) -> None:
    issued_recently = FakeClock(datetime.now(UTC) - timedelta(hours=23))
    token = _service(clock=issued_recently).issue(user)

    assert _service().verify(token) is not None


@pytest.mark.parametrize(
    "verifier_overrides",
    [
        {"secret": "another-secret-key-that-is-long-enough-too"},
        {"issuer": "someone-else"},
        {"audience": "other-clients"},
    ],
)
def test_mismatched_verifier_rejects(user: User, verifier_overrides: dict) -> None:
    token = _service().issue(user)

    assert _service(**verifier_overrides).verify(token) is None


def test_garbage_token_rejected() -> None:
    assert _service().verify("not.a.token") is None
    assert _service().verify("") is None


def test_user_id_from_handles_missing_or_bad_claims() -> None:
    assert user_id_from(None) is None
    assert user_id_from({}) is None
    assert user_id_from({"userId": "abc"}) is None
    assert user_id_from({"userId": "12"}) == 12
