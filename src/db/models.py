"""ORM models for the board schema (member, post, reply)."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from src.db.session import Base


class Member(Base):
    __tablename__ = "member"

    idx = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(100), unique=True, nullable=False, index=True)
    nickname = Column(String(50), nullable=False)
    pwd = Column(String(255), nullable=True)            # 소셜 계정은 NULL
    profile_image = Column(String(500), nullable=True)
    social = Column(String(20), nullable=True)          # "KAKAO" 또는 NULL(로컬 계정)


class Post(Base):
    __tablename__ = "post"

    idx = Column(Integer, primary_key=True, autoincrement=True)
    writer = Column(String(100), ForeignKey("member.id"), nullable=False, index=True)
    title = Column(String(50), nullable=False)
    content = Column(Text, nullable=False)
    time = Column(DateTime, nullable=False, server_default=func.now())
    # 댓글 작성 시에만 증가하는 비정규화 카운터
    reply_count = Column(Integer, nullable=False, default=0, server_default="0")


class Reply(Base):
    __tablename__ = "reply"

    idx = Column(Integer, primary_key=True, autoincrement=True)
    post_idx = Column(Integer, ForeignKey("post.idx"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    member_id = Column(String(100), ForeignKey("member.id"), nullable=False)
    time = Column(DateTime, nullable=False, server_default=func.now())
