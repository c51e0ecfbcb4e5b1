"""Reply endpoints.

엔드포인트:
- GET  /api/reply/{post_idx}: 게시글의 댓글 목록
- POST /api/reply: 댓글 작성 (게시글 reply_count 1 증가)
"""
import logging

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from src.repositories.reply_repo import reply_repo
from src.server.deps import get_db
from src.server.schemas import CreatedResponse, ErrorResponse, ReplyCreate, ReplyListResponse
from src.server.validators import MAX_INT_VALUE, valid_reply

router = APIRouter(prefix="/api/reply", tags=["reply"])
logger = logging.getLogger(__name__)


@router.get("/{post_idx}", response_model=ReplyListResponse)
def list_replies(
    post_idx: int = Path(..., ge=1, le=MAX_INT_VALUE),
    db: Session = Depends(get_db),
):
    return ReplyListResponse(replys=reply_repo.list_for_post(db, post_idx))


@router.post(
    "",
    response_model=CreatedResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def create_reply(body: ReplyCreate, db: Session = Depends(get_db)):
    """댓글을 작성합니다.

    Returns:
        200 - 새 댓글 번호
        400 - 내용이 비었거나 1000자 초과
        404 - 대상 게시글 없음
    """
    if not valid_reply(body.content):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(message="Invalid input").model_dump(),
        )

    idx = reply_repo.create(
        db,
        post_idx=body.post_idx,
        content=body.content,
        member_id=body.member_id,
    )
    if idx is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ErrorResponse(message="Post not found").model_dump(),
        )
    return CreatedResponse(message="Reply created", idx=idx)
