"""Tests for application settings."""
from src.server.settings import Settings


def test_jwt_secret_has_no_default(monkeypatch):
    """환경변수가 없으면 JWT_SECRET은 None이어야 함 (공개된 기본 키 금지).

    Given: JWT_SECRET 환경변수와 .env 파일이 없고
    When: Settings를 생성하면
    Then: JWT_SECRET은 None이어야 함
    """
    monkeypatch.delenv("JWT_SECRET", raising=False)

    assert Settings(_env_file=None).JWT_SECRET is None


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "from-env-secret-0123456789abcdef")
    monkeypatch.setenv("KAKAO_TOKEN_EXPIRE_SECONDS", "900")

    loaded = Settings(_env_file=None)

    assert loaded.JWT_SECRET == "from-env-secret-0123456789abcdef"
    assert loaded.KAKAO_TOKEN_EXPIRE_SECONDS == 900
