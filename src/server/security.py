"""Session token codec.

회원 식별 정보를 담은 서명된 JWT(HS256)를 발급하고 검증합니다.
토큰은 서버에 저장되지 않으며 만료 시각(exp)이 지나면 더 이상 유효하지 않습니다.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, Optional, Union

import jwt
from jwt import DecodeError, ExpiredSignatureError, InvalidSignatureError, InvalidTokenError

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "HS256"


class AuthErrorKind(str, Enum):
    EXPIRED = "Expired"
    MALFORMED = "Malformed"
    SIGNATURE_INVALID = "SignatureInvalid"


class AuthError(Exception):
    """Raised when a session token cannot be verified."""

    def __init__(self, kind: AuthErrorKind, message: str = ""):
        super().__init__(message or kind.value)
        self.kind = kind


def issue_token(
    claims: Dict[str, Any],
    secret: Optional[str],
    ttl: Union[int, float, timedelta],
    *,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """Issue a signed token embedding ``claims`` and an expiry.

    Args:
        claims: 토큰에 담을 값 (id, nickname, loginMethod, kakaoAccessToken 등)
        secret: 서명 키
        ttl: 유효 기간 (초 단위 숫자 또는 timedelta)
        algorithm: 서명 알고리즘

    Returns:
        인코딩된 JWT 문자열

    Raises:
        ValueError: 서명 키가 설정되지 않은 경우
    """
    if not secret:
        raise ValueError("JWT secret is not configured")
    if not isinstance(ttl, timedelta):
        ttl = timedelta(seconds=ttl)

    now = datetime.now(timezone.utc)
    payload = {
        **claims,
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_token(
    token: str,
    secret: Optional[str],
    *,
    algorithm: str = DEFAULT_ALGORITHM,
) -> Dict[str, Any]:
    """Verify ``token`` and return its claims.

    Raises:
        AuthError: 만료(EXPIRED), 서명 불일치(SIGNATURE_INVALID),
            그 외 형식 오류(MALFORMED)
        ValueError: 서명 키가 설정되지 않은 경우
    """
    if not secret:
        raise ValueError("JWT secret is not configured")
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except ExpiredSignatureError as exc:
        raise AuthError(AuthErrorKind.EXPIRED, str(exc)) from exc
    except InvalidSignatureError as exc:
        raise AuthError(AuthErrorKind.SIGNATURE_INVALID, str(exc)) from exc
    except (DecodeError, InvalidTokenError) as exc:
        raise AuthError(AuthErrorKind.MALFORMED, str(exc)) from exc
