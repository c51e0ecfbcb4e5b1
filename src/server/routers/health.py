"""Health check endpoints."""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.server.deps import get_db, get_settings
from src.server.settings import Settings

router = APIRouter()
logger = logging.getLogger(__name__)


def _database_ok(db: Session) -> bool:
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        logger.exception("DB connection check failed")
        return False


@router.get("/healthz")
async def health_check() -> Dict[str, str]:
    """Basic health check endpoint.

    Returns:
        Simple status response
    """
    return {"status": "ok"}


@router.get("/readyz")
def readiness_check(
    db: Session = Depends(get_db),
    app_settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Readiness check endpoint.

    Checks that the database answers and that login secrets are configured.

    Returns:
        Status response with readiness info
    """
    checks = {
        "database": _database_ok(db),
        "jwt_secret": bool(app_settings.JWT_SECRET),
        "kakao_client_id": bool(app_settings.KAKAO_CLIENT_ID),
    }

    ready = all(checks.values())

    return {
        "status": "ok" if ready else "not_ready",
        "checks": checks
    }


@router.get("/api/db-check", response_class=PlainTextResponse)
def db_check(db: Session = Depends(get_db)):
    """간단한 쿼리로 DB 연결을 확인합니다."""
    if _database_ok(db):
        return PlainTextResponse("DB Connected!", status_code=200)
    return PlainTextResponse("DB Connection Failed", status_code=500)
