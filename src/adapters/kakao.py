"""Kakao adapter for OAuth authentication.

카카오 OAuth 2.0 인증(인가 코드 → 액세스 토큰 → 사용자 정보)을 처리합니다.
"""
import logging
from typing import Any, Dict
from urllib.parse import urlencode

import httpx

from src.models.member import SocialProfile
from src.server.settings import Settings

logger = logging.getLogger(__name__)

KAKAO_AUTHORIZE_URL = "https://kauth.kakao.com/oauth/authorize"
KAKAO_TOKEN_URL = "https://kauth.kakao.com/oauth/token"
KAKAO_USERINFO_URL = "https://kapi.kakao.com/v2/user/me"


class KakaoOAuthError(RuntimeError):
    """Raised when Kakao rejects the exchange or cannot be reached."""


def build_authorize_url(settings: Settings) -> str:
    """카카오 로그인 페이지 URL을 만듭니다.

    OAuth 인증 플로우의 첫 번째 단계입니다.

    Raises:
        KakaoOAuthError: KAKAO_CLIENT_ID 미설정
    """
    if not settings.KAKAO_CLIENT_ID:
        raise KakaoOAuthError("KAKAO_CLIENT_ID is not configured.")

    query = urlencode({
        "client_id": settings.KAKAO_CLIENT_ID,
        "redirect_uri": settings.KAKAO_REDIRECT_URI,
        "response_type": "code",
    })
    return f"{KAKAO_AUTHORIZE_URL}?{query}"


async def exchange_code_for_token(code: str, settings: Settings) -> str:
    """카카오 OAuth code를 access token으로 교환합니다.

    OAuth 인증 플로우의 두 번째 단계입니다.
    사용자가 카카오에서 동의한 후 받은 code를 access token으로 교환합니다.

    Args:
        code: Kakao OAuth authorization code
        settings: 앱 설정 (client id, redirect uri 등)

    Returns:
        Access token 문자열

    Raises:
        KakaoOAuthError: 설정 누락, 2xx 외 응답, 네트워크 오류, 토큰 누락
    """
    if not settings.KAKAO_CLIENT_ID:
        raise KakaoOAuthError("KAKAO_CLIENT_ID is not configured.")

    form = {
        "grant_type": "authorization_code",
        "client_id": settings.KAKAO_CLIENT_ID,
        "redirect_uri": settings.KAKAO_REDIRECT_URI,
        "code": code,
    }
    if settings.KAKAO_CLIENT_SECRET:
        form["client_secret"] = settings.KAKAO_CLIENT_SECRET

    try:
        async with httpx.AsyncClient(timeout=settings.KAKAO_TIMEOUT) as client:
            response = await client.post(
                KAKAO_TOKEN_URL,
                headers={"Content-Type": "application/x-www-form-urlencoded;charset=utf-8"},
                data=form,
            )
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPStatusError as exc:
        logger.error(
            "Kakao token endpoint responded with status %s: %s",
            exc.response.status_code,
            exc.response.text[:500],
        )
        raise KakaoOAuthError(
            f"Kakao token exchange failed with status {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        logger.error("Kakao token exchange request failed: %s", exc)
        raise KakaoOAuthError("Kakao token exchange request failed") from exc

    access_token = data.get("access_token")
    if not access_token:
        logger.error("No access token in Kakao response: %s", data)
        raise KakaoOAuthError("Kakao token response missing access_token")

    logger.info("Successfully exchanged Kakao code for access token")
    return access_token


async def get_user_profile(access_token: str, settings: Settings) -> SocialProfile:
    """카카오 access token으로 사용자 프로필을 가져옵니다.

    Returns:
        SocialProfile (id, nickname, profile_image)

    Raises:
        KakaoOAuthError: API 호출 실패 또는 응답에 id 없음
    """
    try:
        async with httpx.AsyncClient(timeout=settings.KAKAO_TIMEOUT) as client:
            response = await client.get(
                KAKAO_USERINFO_URL,
                headers={"Authorization": f"Bearer {access_token}"},
            )
            response.raise_for_status()
            payload: Dict[str, Any] = response.json()
    except httpx.HTTPStatusError as exc:
        logger.error("Kakao profile endpoint responded with status %s", exc.response.status_code)
        raise KakaoOAuthError(
            f"Kakao profile fetch failed with status {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        logger.error("Kakao profile request failed: %s", exc)
        raise KakaoOAuthError("Kakao profile request failed") from exc

    if "id" not in payload:
        logger.error("Kakao profile response missing id: %s", payload)
        raise KakaoOAuthError("Kakao profile response missing id")

    profile = SocialProfile.from_kakao(payload)
    logger.info("Successfully fetched Kakao profile for %s", profile.id)
    return profile
