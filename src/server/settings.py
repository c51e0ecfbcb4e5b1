"""Application settings loaded from environment variables."""
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application configuration settings.

    앱 시작 시 한 번만 생성되며 이후 변경할 수 없습니다(frozen).
    핸들러는 전역 변수 대신 ``get_settings`` 의존성으로 주입받아 사용합니다.
    """

    # Server Configuration
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "mysql+pymysql://root:@localhost:3306/board?charset=utf8mb4"
    SQL_ECHO: bool = False

    # CORS (프론트엔드 도메인)
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Session token (JWT)
    JWT_SECRET: Optional[str] = None
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_SECONDS: int = 3600
    KAKAO_TOKEN_EXPIRE_SECONDS: int = 1800

    # Kakao OAuth (소셜 로그인)
    KAKAO_CLIENT_ID: Optional[str] = None
    KAKAO_CLIENT_SECRET: Optional[str] = None
    KAKAO_REDIRECT_URI: str = "http://localhost:8080/auth/kakao/callback"
    KAKAO_TIMEOUT: float = 10.0

    # Client application
    CLIENT_URL: str = "http://localhost:3000"
    CLIENT_LOGIN_FAILURE_URL: str = "http://localhost:3000/login"

    class Config:
        env_file = ".env"
        case_sensitive = True
        frozen = True


settings = Settings()
