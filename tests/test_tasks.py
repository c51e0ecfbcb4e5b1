"""Tests for social member self-registration.

동시에 같은 카카오 회원이 처음 로그인하는 경우의 처리를 테스트합니다.
"""
from unittest.mock import patch

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from src.background.tasks import register_social_member
from src.db.models import Member
from src.db.session import SessionLocal
from src.models.member import SocialProfile
from src.repositories.member_repo import member_repo

from conftest import KAKAO_USER_ID


@pytest.fixture
def profile():
    return SocialProfile(
        id=KAKAO_USER_ID,
        nickname="KakaoUser",
        profile_image="https://k.kakaocdn.net/profile.jpg",
    )


def test_register_new_member(db_session, profile):
    assert register_social_member(SessionLocal, profile) is True

    stored = db_session.query(Member).filter_by(id=str(KAKAO_USER_ID)).one()
    assert stored.social == "KAKAO"
    assert stored.pwd is None


def test_register_already_registered_member(db_session, social_member, profile):
    """이미 다른 요청이 가입시킨 회원이면 성공으로 간주해야 함.

    Given: 같은 카카오 id의 회원이 이미 있고
    When: 자동 가입을 실행하면
    Then: unique 제약 위반을 삼키고 False를 반환, 회원은 한 명이어야 함
    """
    assert register_social_member(SessionLocal, profile) is False
    assert db_session.query(Member).filter_by(id=str(KAKAO_USER_ID)).count() == 1


def test_register_integrity_error_without_member_is_raised(db_session, profile):
    """회원이 없는데 난 IntegrityError는 중복 가입이 아니므로 전파되어야 함."""
    error = IntegrityError("INSERT INTO member", {}, Exception("NOT NULL constraint failed"))

    with patch.object(member_repo, "create", side_effect=error):
        with pytest.raises(IntegrityError):
            register_social_member(SessionLocal, profile)

    assert db_session.query(Member).count() == 0


def test_register_other_database_error_is_raised(profile):
    error = OperationalError("INSERT INTO member", {}, Exception("db down"))

    with patch.object(member_repo, "create", side_effect=error):
        with pytest.raises(OperationalError):
            register_social_member(SessionLocal, profile)
