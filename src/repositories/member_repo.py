"""Member repository backed by the relational Data Store."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash, generate_password_hash

from src.db.models import Member

logger = logging.getLogger(__name__)


class MemberRepository:
    """member 테이블 조회/생성을 담당합니다."""

    def get_by_id(self, db: Session, member_id: str) -> Optional[Member]:
        return db.scalars(select(Member).where(Member.id == member_id)).first()

    def create(
        self,
        db: Session,
        *,
        member_id: str,
        nickname: str,
        pwd: Optional[str] = None,
        social: Optional[str] = None,
        profile_image: Optional[str] = None,
    ) -> Member:
        """Insert a member and return it with its new ``idx``.

        비밀번호는 해시로만 저장합니다. 같은 id가 이미 있으면
        Data Store의 unique 제약 위반(IntegrityError)이 그대로 전파됩니다.

        Args:
            db: DB 세션
            member_id: 회원 ID
            nickname: 닉네임
            pwd: 평문 비밀번호 (소셜 계정은 None)
            social: 소셜 제공자 태그 (로컬 계정은 None)
            profile_image: 프로필 이미지 URL
        """
        member = Member(
            id=member_id,
            nickname=nickname,
            pwd=generate_password_hash(pwd) if pwd is not None else None,
            social=social,
            profile_image=profile_image,
        )
        db.add(member)
        try:
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info("Registered member %s (social=%s)", member_id, social)
        return member

    def authenticate(self, db: Session, member_id: str, pwd: str) -> Optional[Member]:
        """아이디/비밀번호가 일치하는 로컬 회원을 반환합니다. 불일치 시 None."""
        member = self.get_by_id(db, member_id)
        if member is None or member.pwd is None:
            return None
        if not check_password_hash(member.pwd, pwd):
            return None
        return member


# 전역 member repository 인스턴스
member_repo = MemberRepository()
