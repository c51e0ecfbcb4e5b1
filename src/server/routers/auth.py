"""Kakao social login endpoints.

카카오 OAuth 로그인 흐름:
1. GET /auth/kakao: 카카오 로그인 페이지로 302 리다이렉트
2. GET /auth/kakao/callback?code=: 인가 코드 → 액세스 토큰 교환
3. 액세스 토큰으로 카카오 프로필 조회
4. 처음 로그인한 회원이면 자동 가입 (별도 task로 실행 후 완료를 기다림)
5. 세션 토큰을 accessToken 쿠키로 내려주고 클라이언트로 302 리다이렉트

실패(코드 누락, 토큰 교환/프로필 조회 실패, 가입 실패)는 모두
클라이언트의 로그인 실패 페이지로 리다이렉트합니다. 자동 재시도는 하지 않습니다.
"""
import asyncio
import logging
from typing import Callable, Optional

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from src.adapters import kakao
from src.background.tasks import register_social_member
from src.models.member import KAKAO, SocialProfile
from src.repositories.member_repo import member_repo
from src.server.deps import get_session_factory, get_settings
from src.server.security import issue_token
from src.server.settings import Settings

router = APIRouter(prefix="/auth/kakao", tags=["auth"])
logger = logging.getLogger(__name__)

SESSION_COOKIE = "accessToken"


def _failure(app_settings: Settings) -> RedirectResponse:
    return RedirectResponse(app_settings.CLIENT_LOGIN_FAILURE_URL, status_code=status.HTTP_302_FOUND)


def _member_exists(session_factory: Callable[[], Session], member_id: str) -> bool:
    with session_factory() as db:
        return member_repo.get_by_id(db, member_id) is not None


def _session_token(profile: SocialProfile, kakao_access_token: str, app_settings: Settings) -> str:
    return issue_token(
        {
            "id": profile.id,
            "nickname": profile.nickname,
            "profile_image": profile.profile_image,
            "loginMethod": KAKAO,
            "kakaoAccessToken": kakao_access_token,
        },
        app_settings.JWT_SECRET,
        app_settings.KAKAO_TOKEN_EXPIRE_SECONDS,
        algorithm=app_settings.JWT_ALGORITHM,
    )


@router.get("")
async def kakao_login(app_settings: Settings = Depends(get_settings)):
    """카카오 로그인 페이지로 리다이렉트합니다."""
    try:
        url = kakao.build_authorize_url(app_settings)
    except kakao.KakaoOAuthError as exc:
        logger.error("Kakao login unavailable: %s", exc)
        return _failure(app_settings)
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


@router.get("/callback")
async def kakao_callback(
    code: Optional[str] = None,
    error: Optional[str] = None,
    app_settings: Settings = Depends(get_settings),
    session_factory: Callable[[], Session] = Depends(get_session_factory),
):
    """카카오 OAuth 콜백을 처리합니다.

    Args:
        code: 카카오가 전달한 인가 코드 (동의 거부 시 없음)
        error: 카카오가 전달한 오류 코드 (동의 거부 등)

    Returns:
        성공 - accessToken 쿠키와 함께 CLIENT_URL로 302
        실패 - CLIENT_LOGIN_FAILURE_URL로 302
    """
    if error or not code:
        logger.warning("Kakao callback without code (error=%s)", error)
        return _failure(app_settings)

    if not app_settings.JWT_SECRET:
        logger.error("JWT_SECRET is not configured; cannot issue Kakao session")
        return _failure(app_settings)

    try:
        kakao_access_token = await kakao.exchange_code_for_token(code, app_settings)
        profile = await kakao.get_user_profile(kakao_access_token, app_settings)
    except kakao.KakaoOAuthError as exc:
        logger.warning("Kakao login failed: %s", exc)
        return _failure(app_settings)

    registration: Optional[asyncio.Task] = None
    try:
        if not await run_in_threadpool(_member_exists, session_factory, profile.member_id):
            logger.info("First Kakao login for %s, registering member", profile.member_id)
            registration = asyncio.create_task(
                run_in_threadpool(register_social_member, session_factory, profile)
            )

        token = _session_token(profile, kakao_access_token, app_settings)

        if registration is not None:
            await registration
    except Exception:
        logger.exception("Kakao member resolution failed for %s", profile.member_id)
        if registration is not None:
            # 가입 task가 끝날 때까지 기다리고 그 예외도 회수함
            await asyncio.gather(registration, return_exceptions=True)
        return _failure(app_settings)

    response = RedirectResponse(app_settings.CLIENT_URL, status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        SESSION_COOKIE,
        token,
        max_age=app_settings.KAKAO_TOKEN_EXPIRE_SECONDS,
        httponly=False,
        samesite="lax",
    )
    logger.info("Kakao member %s logged in", profile.member_id)
    return response
