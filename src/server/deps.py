"""Dependency injection for FastAPI routes.

DB 세션, 설정, Bearer 토큰 인증을 라우트에 주입합니다.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.db.session import SessionLocal
from src.server.security import AuthError, verify_token
from src.server.settings import Settings, settings

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_settings() -> Settings:
    """앱 시작 시 생성된 설정 객체를 반환합니다."""
    return settings


def get_session_factory() -> Callable[[], Session]:
    return SessionLocal


def get_db(
    session_factory: Callable[[], Session] = Depends(get_session_factory),
) -> Iterator[Session]:
    """요청마다 독립적인 DB 세션을 제공합니다.

    커밋은 repository가 작업 단위로 수행하고,
    여기서는 예외 시 롤백과 세션 정리만 담당합니다.
    """
    db = session_factory()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    app_settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Authorization: Bearer 토큰을 검증하고 claims를 반환합니다.

    Raises:
        HTTPException: 404 - 토큰 없음, 만료, 서명 불일치, 형식 오류
            (클라이언트에는 실패 사유를 구분하지 않습니다)
        HTTPException: 500 - JWT_SECRET 미설정
    """
    if credentials is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Token not found")

    if not app_settings.JWT_SECRET:
        logger.error("JWT_SECRET is not configured; cannot verify tokens")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server Error")

    try:
        claims = verify_token(
            credentials.credentials,
            app_settings.JWT_SECRET,
            algorithm=app_settings.JWT_ALGORITHM,
        )
    except AuthError as exc:
        logger.warning("Token verification failed (%s): %s", exc.kind.value, exc)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invalid token") from exc

    if not claims.get("id"):
        logger.warning("Token payload missing member id")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invalid token")

    return claims
