"""Input validation for board posts and replies."""
from typing import Any, Optional

PAGE_SIZE = 10

MAX_WRITER_LENGTH = 50
MAX_TITLE_LENGTH = 50
MAX_CONTENT_LENGTH = 1000

# INT 컬럼(idx)과 페이지 번호의 최대값
MAX_INT_VALUE = 2**31 - 1


def sanitize_writer(writer: str) -> str:
    """작성자에서 꺾쇠(<, >)를 제거하고 앞뒤 공백을 없앱니다."""
    return writer.replace("<", "").replace(">", "").strip()


def sanitize_title(title: str) -> str:
    """제목의 꺾쇠를 전각 유사 문자(﹤, ﹥)로 바꾸고 앞뒤 공백을 없앱니다."""
    return title.replace("<", "﹤").replace(">", "﹥").strip()


def _length_ok(value: Any, limit: int) -> bool:
    return isinstance(value, str) and 0 < len(value) <= limit


def valid_input(writer: Any, title: Any, content: Any) -> bool:
    """Return True when a post may be persisted.

    writer/title은 정제(sanitize)한 값으로 길이를 검사하고,
    content는 원문 그대로 1~1000자인지 검사합니다.
    """
    if not isinstance(writer, str) or not isinstance(title, str):
        return False

    return (
        _length_ok(sanitize_writer(writer), MAX_WRITER_LENGTH)
        and _length_ok(sanitize_title(title), MAX_TITLE_LENGTH)
        and _length_ok(content, MAX_CONTENT_LENGTH)
    )


def valid_reply(content: Any) -> bool:
    return _length_ok(content, MAX_CONTENT_LENGTH)


def page_offset(page: Optional[int]) -> int:
    """Convert a 1-based page number into a row offset.

    page가 없거나 0이면 1페이지로 취급하고, 음수는 1로 보정합니다.
    """
    page = page or 1
    return (max(page, 1) - 1) * PAGE_SIZE
