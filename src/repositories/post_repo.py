"""Post repository backed by the relational Data Store."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from src.db.models import Member, Post
from src.server.validators import PAGE_SIZE


def _post_columns():
    return select(
        Post.idx,
        Member.nickname,
        Post.title,
        Post.content,
        Post.time,
        Post.reply_count,
    ).outerjoin(Member, Post.writer == Member.id)


class PostRepository:
    """post 테이블 조회/생성을 담당합니다."""

    def count(self, db: Session) -> int:
        return db.scalar(select(func.count()).select_from(Post)) or 0

    def list_page(self, db: Session, offset: int, limit: int = PAGE_SIZE) -> List[Dict[str, Any]]:
        """최신 글부터 ``offset``번째 행 이후 ``limit``개를 반환합니다."""
        stmt = _post_columns().order_by(Post.idx.desc()).offset(offset).limit(limit)
        return [dict(row) for row in db.execute(stmt).mappings()]

    def get(self, db: Session, idx: int) -> Optional[Dict[str, Any]]:
        row = db.execute(_post_columns().where(Post.idx == idx)).mappings().first()
        return dict(row) if row else None

    def create(self, db: Session, *, writer: str, title: str, content: str) -> int:
        post = Post(writer=writer, title=title, content=content)
        db.add(post)
        try:
            db.commit()
        except Exception:
            db.rollback()
            raise
        return post.idx


# 전역 post repository 인스턴스
post_repo = PostRepository()
