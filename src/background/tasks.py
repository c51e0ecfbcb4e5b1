"""Background tasks for social login.

백그라운드 작업:
1. register_social_member: 첫 소셜 로그인 회원 자동 가입

주의:
- 요청 세션(get_db)과 별개로 자체 DB 세션을 엽니다.
- 동시에 같은 회원이 두 번 로그인하면 두 번째 가입은 unique 제약에 걸리며,
  이 경우 이미 가입된 것으로 간주합니다.
"""
import logging
from typing import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.models.member import SocialProfile
from src.repositories.member_repo import member_repo

logger = logging.getLogger(__name__)


def register_social_member(session_factory: Callable[[], Session], profile: SocialProfile) -> bool:
    """소셜 프로필로 회원을 가입시킵니다.

    Args:
        session_factory: DB 세션 팩토리 (SessionLocal)
        profile: 카카오에서 받은 사용자 프로필

    Returns:
        새로 가입했으면 True, 이미 가입되어 있었으면 False

    Raises:
        SQLAlchemyError: 중복 가입 외의 DB 오류
    """
    with session_factory() as db:
        try:
            member_repo.create(
                db,
                member_id=profile.member_id,
                nickname=profile.nickname,
                pwd=None,
                social=profile.provider,
                profile_image=profile.profile_image,
            )
            return True
        except IntegrityError:
            if member_repo.get_by_id(db, profile.member_id) is None:
                raise
            logger.info("Member %s was registered concurrently", profile.member_id)
            return False
