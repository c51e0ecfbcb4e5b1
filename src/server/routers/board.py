"""Board (post) endpoints.

엔드포인트:
- GET  /api/board?page=N: 게시글 목록 (페이지당 10개, 최신순)
- GET  /api/board/{idx}: 게시글 상세
- POST /api/board: 게시글 작성
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from src.repositories.post_repo import post_repo
from src.server.deps import get_db
from src.server.schemas import (
    CreatedResponse,
    ErrorResponse,
    PostCreate,
    PostItem,
    PostListResponse,
)
from src.server.validators import (
    MAX_INT_VALUE,
    page_offset,
    sanitize_title,
    sanitize_writer,
    valid_input,
)

router = APIRouter(prefix="/api/board", tags=["board"])
logger = logging.getLogger(__name__)


@router.get("", response_model=PostListResponse)
def list_posts(
    page: Optional[int] = Query(None, le=MAX_INT_VALUE),
    db: Session = Depends(get_db),
):
    """게시글 목록을 페이지 단위로 조회합니다.

    Args:
        page: 1부터 시작하는 페이지 번호 (없거나 0이면 1페이지)

    Returns:
        posts와 전체 게시글 수(totalCount)
    """
    offset = page_offset(page)
    logger.debug("Listing posts (page=%s, offset=%s)", page, offset)

    total = post_repo.count(db)
    posts = post_repo.list_page(db, offset)
    return PostListResponse(posts=posts, totalCount=total)


@router.get(
    "/{idx}",
    response_model=PostItem,
    responses={404: {"model": ErrorResponse}},
)
def get_post(
    idx: int = Path(..., ge=1, le=MAX_INT_VALUE),
    db: Session = Depends(get_db),
):
    post = post_repo.get(db, idx)
    if post is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ErrorResponse(message="Post not found").model_dump(),
        )
    return post


@router.post(
    "",
    response_model=CreatedResponse,
    responses={400: {"model": ErrorResponse}},
)
def create_post(body: PostCreate, db: Session = Depends(get_db)):
    """게시글을 작성합니다.

    검증을 통과하면 정제된 writer/title과 원문 content를 저장합니다.
    """
    if not valid_input(body.writer, body.title, body.content):
        logger.info("Rejected post from writer %r", body.writer[:50])
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(message="Invalid input").model_dump(),
        )

    idx = post_repo.create(
        db,
        writer=sanitize_writer(body.writer),
        title=sanitize_title(body.title),
        content=body.content,
    )
    logger.info("Post %s created", idx)
    return CreatedResponse(message="Post created", idx=idx)
