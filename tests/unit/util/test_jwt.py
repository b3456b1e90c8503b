"""Unit tests for JWT helpers."""

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest

from projectlink.config import AuthSettings
from projectlink.util.jwt import JWTError, create_token, verify_token


@pytest.fixture
def settings():
    return AuthSettings(jwt_secret="test-secret")


def test_round_trip_carries_claims(settings):
    token = create_token("b3f1c1c2-3a4b-4c5d-8e9f-0a1b2c3d4e5f", True, settings)

    payload = verify_token(token, settings)

    assert payload.user_id == "b3f1c1c2-3a4b-4c5d-8e9f-0a1b2c3d4e5f"
    assert payload.is_admin is True


def test_wrong_secret_rejected(settings):
    token = create_token("user", False, AuthSettings(jwt_secret="other"))

    with pytest.raises(JWTError, match="Invalid token"):
        verify_token(token, settings)


def test_expired_token_rejected(settings):
    token = pyjwt.encode(
        {"sub": "user", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )

    with pytest.raises(JWTError, match="expired"):
        verify_token(token, settings)


def test_garbage_rejected(settings):
    with pytest.raises(JWTError):
        verify_token("not.a.token", settings)


def test_token_without_subject_rejected(settings):
    token = pyjwt.encode(
        {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )

    with pytest.raises(JWTError, match="Invalid token"):
        verify_token(token, settings)


def test_admin_claim_defaults_to_false(settings):
    token = pyjwt.encode(
        {"sub": "user", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )

    payload = verify_token(token, settings)

    assert payload.is_admin is False
    assert payload.issued_at is None
