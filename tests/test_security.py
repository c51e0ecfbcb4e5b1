"""Tests for the session token codec."""
from datetime import timedelta

import jwt
import pytest

from src.server.security import AuthError, AuthErrorKind, issue_token, verify_token

SECRET = "unit-test-secret-0123456789abcdef-xyz"


def test_issue_then_verify_returns_claims():
    """발급 직후 검증하면 같은 id를 돌려받아야 함."""
    token = issue_token({"id": "u1", "loginMethod": "LOCAL"}, SECRET, 3600)

    claims = verify_token(token, SECRET)

    assert claims["id"] == "u1"
    assert claims["loginMethod"] == "LOCAL"
    assert claims["exp"] - claims["iat"] == 3600


def test_ttl_accepts_timedelta():
    token = issue_token({"id": "u1"}, SECRET, timedelta(minutes=5))
    claims = verify_token(token, SECRET)
    assert claims["exp"] - claims["iat"] == 300


def test_expired_token_is_rejected():
    """유효 기간이 지난 토큰은 claims 대신 EXPIRED 오류를 내야 함."""
    token = issue_token({"id": "u1"}, SECRET, timedelta(seconds=-10))

    with pytest.raises(AuthError) as exc_info:
        verify_token(token, SECRET)

    assert exc_info.value.kind is AuthErrorKind.EXPIRED


def test_wrong_secret_is_signature_invalid():
    token = issue_token({"id": "u1"}, SECRET, 3600)

    with pytest.raises(AuthError) as exc_info:
        verify_token(token, "another-secret-0123456789abcdef-xyz")

    assert exc_info.value.kind is AuthErrorKind.SIGNATURE_INVALID


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
def test_garbage_token_is_malformed(token):
    with pytest.raises(AuthError) as exc_info:
        verify_token(token, SECRET)

    assert exc_info.value.kind is AuthErrorKind.MALFORMED


def test_other_algorithm_is_rejected():
    """HS512로 서명된 토큰은 HS256 검증에서 통과하면 안 됨."""
    token = jwt.encode({"id": "u1"}, SECRET, algorithm="HS512")

    with pytest.raises(AuthError):
        verify_token(token, SECRET)


@pytest.mark.parametrize("secret", [None, ""])
def test_missing_secret_is_refused(secret):
    """서명 키가 없으면 발급도 검증도 하지 않아야 함."""
    with pytest.raises(ValueError):
        issue_token({"id": "u1"}, secret, 60)

    token = issue_token({"id": "u1"}, SECRET, 60)
    with pytest.raises(ValueError):
        verify_token(token, secret)
