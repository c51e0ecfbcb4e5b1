"""Pydantic schemas for request/response models.

이 파일은 FastAPI 엔드포인트의 요청/응답 모델을 정의합니다.
모든 스키마는 Pydantic BaseModel을 상속받아 자동 검증 및 문서화를 지원합니다.
"""
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from src.server.validators import MAX_INT_VALUE


# ============================================================================
# 공통 응답
# ============================================================================

class ErrorResponse(BaseModel):
    """모든 실패 응답(400/404/500)이 사용하는 본문.

    Attributes:
        message: 사용자에게 보여줄 메시지 (내부 오류 정보는 포함하지 않음)
    """
    message: str


class CreatedResponse(BaseModel):
    """게시글/댓글/회원 생성 성공 응답.

    Attributes:
        message: 성공 메시지
        idx: 새로 생성된 행의 번호
    """
    message: str = "Successfully created"
    idx: int


# ============================================================================
# Board 관련 스키마
# ============================================================================

class PostCreate(BaseModel):
    """게시글 작성 요청.

    길이/꺾쇠 처리 규칙은 ``src.server.validators.valid_input``에서 검사합니다.
    """
    writer: str
    title: str
    content: str

    class Config:
        json_schema_extra = {
            "example": {
                "writer": "u1",
                "title": "첫 글입니다",
                "content": "안녕하세요",
            }
        }


class PostItem(BaseModel):
    """목록/상세 조회에 사용하는 게시글 정보.

    Attributes:
        idx: 게시글 번호
        nickname: 작성자 닉네임
        title: 제목
        content: 본문
        time: 작성 시각
        reply_count: 댓글 수
    """
    idx: int
    nickname: Optional[str] = None
    title: str
    content: str
    time: Optional[datetime] = None
    reply_count: int = 0

    class Config:
        from_attributes = True


class PostListResponse(BaseModel):
    posts: List[PostItem]
    totalCount: int


# ============================================================================
# Reply 관련 스키마
# ============================================================================

class ReplyCreate(BaseModel):
    post_idx: int = Field(..., ge=1, le=MAX_INT_VALUE)
    content: str
    member_id: str


class ReplyItem(BaseModel):
    idx: int
    post_idx: int
    content: str
    member_id: str
    nickname: Optional[str] = None
    time: Optional[datetime] = None

    class Config:
        from_attributes = True


class ReplyListResponse(BaseModel):
    replys: List[ReplyItem]


# ============================================================================
# Member & Auth 관련 스키마
# ============================================================================

class LoginRequest(BaseModel):
    id: str
    pwd: str


class LoginResponse(BaseModel):
    accessToken: str


class MemberIdResponse(BaseModel):
    id: str


class RegisterRequest(BaseModel):
    """회원가입 요청.

    로컬 계정은 ``pwd``가 있고 ``social``이 없으며,
    소셜 계정은 ``pwd``가 없고 ``social``이 있어야 합니다.

    Attributes:
        id: 회원 ID (고유)
        pwd: 비밀번호 (소셜 계정은 null)
        nickname: 닉네임
        social: 소셜 제공자 태그 ("KAKAO") 또는 null
        profile_image: 프로필 이미지 URL (optional)
    """
    id: str = Field(..., min_length=1, max_length=100)
    pwd: Optional[str] = None
    nickname: str = Field(..., min_length=1, max_length=50)
    social: Optional[str] = None
    profile_image: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "id": "k123",
                "pwd": None,
                "nickname": "Kim",
                "social": "KAKAO",
            }
        }
