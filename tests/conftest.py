"""Pytest configuration and fixtures.

이 모듈은 모든 테스트에서 공유되는 pytest fixture들을 정의합니다.

주요 Fixture:
- client: FastAPI 테스트 클라이언트
- db_session: 테스트용 DB 세션 (SQLite 인메모리)
- member / social_member / post: 미리 저장된 테스트 데이터
- auth_headers: 로컬 회원의 Bearer 토큰 헤더
- mock_kakao_api: 카카오 OAuth API mock
- without_jwt_secret: JWT_SECRET 미설정 환경

DB는 매 테스트마다 테이블을 새로 만들고 지우므로 테스트 간 데이터가 섞이지 않습니다.
"""
import os

# 앱 import 전에 테스트 환경변수를 설정해야 settings/engine에 반영됨
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-jwt-secret-0123456789abcdef-xyz"
os.environ["KAKAO_CLIENT_ID"] = "test-kakao-client-id"
os.environ["KAKAO_REDIRECT_URI"] = "http://localhost:8080/auth/kakao/callback"
os.environ["CLIENT_URL"] = "http://localhost:3000"
os.environ["CLIENT_LOGIN_FAILURE_URL"] = "http://localhost:3000/login"

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock, patch

from src.db.models import Post
from src.db.session import Base, SessionLocal, engine
from src.repositories.member_repo import member_repo
from src.server.main import app
from src.server.deps import get_settings
from src.server.security import issue_token
from src.server.settings import settings

TEST_PASSWORD = "pw1234!"

KAKAO_USER_ID = 4242424242


@pytest.fixture(autouse=True)
def _reset_database():
    """매 테스트마다 빈 테이블을 준비합니다."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """FastAPI 테스트 클라이언트를 생성합니다.

    Returns:
        FastAPI TestClient: HTTP 요청을 시뮬레이션할 수 있는 테스트 클라이언트

    설명:
        - 실제 HTTP 서버를 시작하지 않고 테스트
        - 리다이렉트는 따라가지 않음 (302 응답 자체를 검증하기 위해)
    """
    return TestClient(app, follow_redirects=False)


@pytest.fixture
def db_session():
    """테스트에서 직접 데이터를 넣고 확인할 때 쓰는 DB 세션."""
    with SessionLocal() as db:
        yield db


@pytest.fixture
def member(db_session):
    """아이디/비밀번호로 가입한 로컬 회원 (id=u1)."""
    return member_repo.create(
        db_session,
        member_id="u1",
        nickname="Tester",
        pwd=TEST_PASSWORD,
    )


@pytest.fixture
def member_password():
    """로컬 회원 u1의 평문 비밀번호."""
    return TEST_PASSWORD


@pytest.fixture
def social_member(db_session):
    """카카오로 가입한 소셜 회원."""
    return member_repo.create(
        db_session,
        member_id=str(KAKAO_USER_ID),
        nickname="KakaoUser",
        social="KAKAO",
    )


@pytest.fixture
def post(db_session, member):
    """회원 u1이 작성한 게시글."""
    item = Post(writer=member.id, title="Hello", content="First post")
    db_session.add(item)
    db_session.commit()
    return item


@pytest.fixture
def auth_headers(member):
    """로컬 회원의 Bearer 토큰 헤더."""
    token = issue_token(
        {"id": member.id, "loginMethod": "LOCAL"},
        settings.JWT_SECRET,
        settings.ACCESS_TOKEN_EXPIRE_SECONDS,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def without_jwt_secret():
    """JWT_SECRET 없이 배포된 상태로 라우트를 실행합니다."""
    app.dependency_overrides[get_settings] = lambda: settings.model_copy(
        update={"JWT_SECRET": None}
    )
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def mock_kakao_api():
    """카카오 OAuth API를 mocking합니다.

    Yields:
        AsyncMock: 카카오 API 응답을 시뮬레이션하는 mock 클라이언트

    설명:
        - 실제 카카오 API 호출 없이 테스트
        - POST /oauth/token: 액세스 토큰 반환
        - GET /v2/user/me: 사용자 정보 반환
    """
    with patch("httpx.AsyncClient") as mock_client:
        mock_instance = AsyncMock()

        # Mock access token response
        token_response = MagicMock()
        token_response.json.return_value = {
            "access_token": "kakao_test_token",
            "token_type": "bearer",
        }

        # Mock user info response
        user_response = MagicMock()
        user_response.json.return_value = {
            "id": KAKAO_USER_ID,
            "properties": {
                "nickname": "KakaoUser",
                "profile_image": "https://k.kakaocdn.net/profile.jpg",
            },
        }

        mock_instance.post = AsyncMock(return_value=token_response)
        mock_instance.get = AsyncMock(return_value=user_response)
        mock_instance.__aenter__ = AsyncMock(return_value=mock_instance)
        mock_instance.__aexit__ = AsyncMock(return_value=None)

        mock_client.return_value = mock_instance
        yield mock_instance
