"""Member domain models.

게시판 회원 정보를 표현하는 모델입니다.
로컬 계정(아이디/비밀번호)과 카카오 소셜 계정을 함께 다룹니다.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

KAKAO = "KAKAO"
LOCAL = "LOCAL"


class SocialProfile(BaseModel):
    """소셜 로그인 제공자가 돌려준 사용자 프로필.

    Attributes:
        id: 제공자가 부여한 숫자 ID
        nickname: 표시 이름
        profile_image: 프로필 이미지 URL (optional)
        provider: 제공자 태그 (현재는 "KAKAO"만 사용)
    """
    id: int = Field(..., description="Provider user ID")
    nickname: str = Field(..., description="Display name")
    profile_image: Optional[str] = Field(None, description="Profile image URL")
    provider: str = KAKAO

    @property
    def member_id(self) -> str:
        """member.id 컬럼에 저장되는 문자열 ID."""
        return str(self.id)

    @classmethod
    def from_kakao(cls, payload: Dict[str, Any]) -> "SocialProfile":
        """Create a profile from the Kakao ``/v2/user/me`` payload.

        닉네임/프로필 이미지는 ``properties`` 또는 ``kakao_account.profile``
        중 값이 있는 쪽을 사용합니다.
        """
        properties = payload.get("properties") or {}
        account_profile = (payload.get("kakao_account") or {}).get("profile") or {}

        nickname = properties.get("nickname") or account_profile.get("nickname")
        profile_image = (
            properties.get("profile_image")
            or account_profile.get("profile_image_url")
        )

        return cls(
            id=payload["id"],
            nickname=nickname or f"kakao_{payload['id']}",
            profile_image=profile_image,
        )

