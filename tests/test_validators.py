"""Tests for post input validation and pagination."""
import pytest

from src.server.validators import (
    page_offset,
    sanitize_title,
    sanitize_writer,
    valid_input,
    valid_reply,
)


def test_sanitize_writer_strips_angle_brackets():
    assert sanitize_writer("  <b>kim</b>  ") == "bkim/b"


def test_sanitize_title_replaces_angle_brackets():
    assert sanitize_title(" <script> ") == "﹤script﹥"


def test_valid_input_accepts_normal_post():
    assert valid_input("u1", "title", "content") is True


@pytest.mark.parametrize(
    "writer, title, content",
    [
        ("", "title", "content"),
        ("u1", "", "content"),
        ("u1", "title", ""),
        ("<>", "title", "content"),      # 정제 후 빈 문자열
        ("   ", "title", "content"),
        ("w" * 51, "title", "content"),
        ("u1", "t" * 51, "content"),
        ("u1", "title", "c" * 1001),
        (None, "title", "content"),
        (123, "title", "content"),
        ("u1", "title", None),
    ],
)
def test_valid_input_rejects(writer, title, content):
    assert valid_input(writer, title, content) is False


def test_valid_input_boundaries():
    assert valid_input("w" * 50, "t" * 50, "c" * 1000) is True
    assert valid_input("w", "t", "c") is True


def test_valid_input_measures_sanitized_writer():
    """꺾쇠를 제거한 뒤의 길이로 검사해야 함."""
    assert valid_input("<" + "w" * 50 + ">", "title", "content") is True


def test_valid_reply():
    assert valid_reply("nice") is True
    assert valid_reply("") is False
    assert valid_reply("x" * 1001) is False


@pytest.mark.parametrize(
    "page, offset",
    [(None, 0), (0, 0), (1, 0), (2, 10), (3, 20), (-4, 0)],
)
def test_page_offset(page, offset):
    assert page_offset(page) == offset
