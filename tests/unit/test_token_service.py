"""Tests for token issue and verification."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from core.domain.entities import User
from core.domain.enums import UserRole
from core.domain.exceptions import AuthorizationError
from core.infrastructure.security import TokenService

from tests.conftest import TEST_SECRET


USER = User(id=7, name="Jane", email="jane@cookies.test", role=UserRole.ADMIN)


def test_issue_and_verify(token_service):
    claims = token_service.verify(token_service.issue(USER))

    assert claims.id == 7
    assert claims.email == "jane@cookies.test"
    assert claims.role is UserRole.ADMIN
    assert claims.exp - claims.iat == 24 * 3600


def test_ttl_is_configurable():
    tokens = TokenService(secret=TEST_SECRET, ttl_hours=1)
    claims = tokens.verify(tokens.issue(USER))
    assert claims.exp - claims.iat == 3600


def test_token_does_not_carry_name(token_service):
    payload = jwt.decode(token_service.issue(USER), TEST_SECRET, algorithms=["HS256"])
    assert set(payload) == {"id", "email", "role", "iat", "exp"}


def test_wrong_secret_is_rejected(token_service):
    other = TokenService(secret="another-secret-0123456789abcdef0123")
    with pytest.raises(AuthorizationError):
        token_service.verify(other.issue(USER))


def test_expired_token_is_rejected(token_service):
    issued = datetime.now(timezone.utc) - timedelta(hours=25)
    with pytest.raises(AuthorizationError) as exc_info:
        token_service.verify(token_service.issue(USER, now=issued))
    assert exc_info.value.message == "Invalid or expired token"


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_token_is_rejected(token_service, token):
    with pytest.raises(AuthorizationError):
        token_service.verify(token)


def test_unknown_role_claim_is_rejected(token_service):
    now = int(datetime.now(timezone.utc).timestamp())
    forged = jwt.encode(
        {"id": 1, "email": "x@y.z", "role": "superuser", "iat": now, "exp": now + 60},
        TEST_SECRET,
        algorithm="HS256",
    )
    with pytest.raises(AuthorizationError):
        token_service.verify(forged)


def test_missing_claim_is_rejected(token_service):
    now = int(datetime.now(timezone.utc).timestamp())
    partial = jwt.encode({"id": 1, "exp": now + 60}, TEST_SECRET, algorithm="HS256")
    with pytest.raises(AuthorizationError):
        token_service.verify(partial)


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        TokenService(secret="")
