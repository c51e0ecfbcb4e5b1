"""SQLAlchemy engine and session factory.

DB 접속 주소는 settings.DATABASE_URL을 사용합니다.
운영은 MySQL(PyMySQL), 테스트는 SQLite 인메모리 DB를 사용합니다.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import declarative_base, sessionmaker

from src.server.settings import settings


def _engine_options(database_url: str) -> dict:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {"pool_pre_ping": True, "pool_recycle": 1800}

    # FastAPI는 동기 핸들러를 스레드풀에서 실행하므로 스레드 간 커넥션 공유 허용
    options = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        # 인메모리 DB는 커넥션마다 별도 DB가 생기므로 단일 커넥션을 재사용
        options["poolclass"] = StaticPool
    return options


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.SQL_ECHO,
    future=True,
    **_engine_options(settings.DATABASE_URL),
)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)

Base = declarative_base()
