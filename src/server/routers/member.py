"""Member endpoints: registration, password login and token lookup.

엔드포인트:
- POST /api/register: 회원가입 (로컬 또는 소셜)
- POST /api/login: 아이디/비밀번호 로그인 → accessToken 발급
- GET  /api/member: Bearer 토큰의 회원 ID 조회
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from src.models.member import KAKAO, LOCAL
from src.repositories.member_repo import member_repo
from src.server.deps import get_current_claims, get_db, get_settings
from src.server.schemas import (
    CreatedResponse,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MemberIdResponse,
    RegisterRequest,
)
from src.server.security import issue_token
from src.server.settings import Settings

router = APIRouter(prefix="/api", tags=["member"])
logger = logging.getLogger(__name__)

SOCIAL_PROVIDERS = {KAKAO}


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(message=message).model_dump(),
    )


@router.post(
    "/register",
    response_model=CreatedResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def register(body: RegisterRequest, db: Session = Depends(get_db)):
    """회원가입.

    로컬 계정은 비밀번호가 필수이고, 소셜 계정은 비밀번호 없이 제공자 태그만 받습니다.
    이미 존재하는 id는 Data Store의 unique 제약 위반으로 500을 반환합니다.
    """
    if body.social is None and not body.pwd:
        return _bad_request("Password is required")
    if body.social is not None:
        if body.social not in SOCIAL_PROVIDERS:
            return _bad_request("Unsupported social provider")
        if body.pwd is not None:
            return _bad_request("Social members cannot have a password")

    member = member_repo.create(
        db,
        member_id=body.id,
        nickname=body.nickname,
        pwd=body.pwd,
        social=body.social,
        profile_image=body.profile_image,
    )
    return CreatedResponse(message="Member registered", idx=member.idx)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={404: {"model": ErrorResponse}},
)
def login(
    body: LoginRequest,
    db: Session = Depends(get_db),
    app_settings: Settings = Depends(get_settings),
):
    """아이디/비밀번호로 로그인하고 1시간짜리 accessToken을 발급합니다."""
    if not app_settings.JWT_SECRET:
        logger.error("JWT_SECRET is not configured; refusing login")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(message="Server Error").model_dump(),
        )

    member = member_repo.authenticate(db, body.id, body.pwd)
    if member is None:
        logger.info("Login failed for %r", body.id[:50])
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ErrorResponse(message="Member not found").model_dump(),
        )

    token = issue_token(
        {"id": member.id, "nickname": member.nickname, "loginMethod": LOCAL},
        app_settings.JWT_SECRET,
        app_settings.ACCESS_TOKEN_EXPIRE_SECONDS,
        algorithm=app_settings.JWT_ALGORITHM,
    )
    logger.info("Member %s logged in", member.id)
    return LoginResponse(accessToken=token)


@router.get(
    "/member",
    response_model=MemberIdResponse,
    responses={404: {"model": ErrorResponse}},
)
def current_member(claims: Dict[str, Any] = Depends(get_current_claims)):
    """Bearer 토큰에 담긴 회원 ID를 반환합니다."""
    return MemberIdResponse(id=str(claims["id"]))
