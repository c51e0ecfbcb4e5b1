"""Reply repository backed by the relational Data Store."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from src.db.models import Member, Post, Reply

logger = logging.getLogger(__name__)


class ReplyRepository:
    """reply 테이블과 post.reply_count 카운터를 함께 관리합니다."""

    def list_for_post(self, db: Session, post_idx: int) -> List[Dict[str, Any]]:
        stmt = (
            select(
                Reply.idx,
                Reply.post_idx,
                Reply.content,
                Reply.member_id,
                Member.nickname,
                Reply.time,
            )
            .outerjoin(Member, Reply.member_id == Member.id)
            .where(Reply.post_idx == post_idx)
            .order_by(Reply.idx.asc())
        )
        return [dict(row) for row in db.execute(stmt).mappings()]

    def create(self, db: Session, *, post_idx: int, content: str, member_id: str) -> Optional[int]:
        """댓글을 저장하고 게시글의 reply_count를 1 증가시킵니다.

        두 문장은 하나의 트랜잭션으로 커밋되며, 카운터는 SQL 쪽에서
        ``reply_count = reply_count + 1``로 증가시킵니다.

        Returns:
            새 댓글 번호. 대상 게시글이 없으면 None.
        """
        if db.get(Post, post_idx) is None:
            return None

        reply = Reply(post_idx=post_idx, content=content, member_id=member_id)
        try:
            db.add(reply)
            db.flush()
            db.execute(
                update(Post)
                .where(Post.idx == post_idx)
                .values(reply_count=Post.reply_count + 1)
            )
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info("Reply %s added to post %s", reply.idx, post_idx)
        return reply.idx


# 전역 reply repository 인스턴스
reply_repo = ReplyRepository()
