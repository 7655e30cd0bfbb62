from datetime import datetime, timedelta, UTC

import pytest
from jose import jwt

from taskmanager.config import Settings
from taskmanager.services.tokens import TokenClaims, TokenService
from taskmanager.utils.errors import AuthenticationError, InvalidTokenError

SECRET = "unit-test-secret"


def test_issue_then_verify_round_trips_identity():
    tokens = TokenService(SECRET)
    token = tokens.issue(42, "a@example.com")
    assert tokens.verify(token) == TokenClaims(user_id=42, email="a@example.com")


def test_default_expiry_is_seven_days():
    tokens = TokenService(SECRET)
    claims = jwt.get_unverified_claims(tokens.issue(1, "a@example.com"))
    assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())


def test_expiry_comes_from_settings():
    tokens = TokenService.from_settings(Settings(secret_key=SECRET, access_token_expire_minutes=30))
    claims = jwt.get_unverified_claims(tokens.issue(1, "a@example.com"))
    assert claims["exp"] - claims["iat"] == 30 * 60


def test_expired_token_is_rejected():
    past = datetime.now(UTC) - timedelta(days=8)
    token = TokenService(SECRET, clock=lambda: past).issue(1, "a@example.com")
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).verify(token)


def test_wrong_secret_is_rejected_with_same_error_as_expiry():
    token = TokenService("other-secret").issue(1, "a@example.com")
    with pytest.raises(InvalidTokenError) as excinfo:
        TokenService(SECRET).verify(token)
    assert excinfo.value.message == "Invalid or expired token"
    assert isinstance(excinfo.value, AuthenticationError)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_token_is_rejected(token):
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).verify(token)


def test_token_without_identity_claims_is_rejected():
    exp = int((datetime.now(UTC) + timedelta(hours=1)).timestamp())
    token = jwt.encode({"sub": "someone", "exp": exp}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).verify(token)


def test_verify_checks_expiry_against_service_clock():
    issued_at = datetime(2030, 1, 1, tzinfo=UTC)
    token = TokenService(SECRET, clock=lambda: issued_at).issue(7, "c@example.com")

    just_before = TokenService(SECRET, clock=lambda: issued_at + timedelta(days=7, seconds=-1))
    assert just_before.verify(token) == TokenClaims(user_id=7, email="c@example.com")

    at_expiry = TokenService(SECRET, clock=lambda: issued_at + timedelta(days=7))
    with pytest.raises(InvalidTokenError):
        at_expiry.verify(token)


def test_old_token_still_valid_under_an_earlier_clock():
    past = datetime.now(UTC) - timedelta(days=30)
    tokens = TokenService(SECRET, clock=lambda: past)
    assert tokens.verify(tokens.issue(3, "d@example.com")).user_id == 3


def test_token_without_exp_is_rejected():
    token = jwt.encode({"userId": 1, "email": "a@example.com"}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).verify(token)
