"""Tests for the rectangle list parser."""

import pytest

from rectgrid.engine.context import Rectangle
from rectgrid.formats.parser import (
    RectangleFormatError,
    load_rectangles,
    parse_input,
    parse_rectangles,
)


def test_parse_single(single_txt):
    rects = parse_rectangles(single_txt)
    assert rects == [Rectangle(id=0, top=0, left=0, bottom=10, right=10)]


def test_ids_follow_input_order(side_by_side_txt):
    rects = parse_rectangles(side_by_side_txt)
    assert [r.id for r in rects] == [0, 1]
    assert rects[1].left == 10
    assert rects[1].width == 10
    assert rects[1].height == 10


def test_any_whitespace_separates_tokens():
    rects = parse_rectangles("2 0 0 5 5\t\t1 1 3\n\n 4")
    assert len(rects) == 2
    assert rects[1] == Rectangle(id=1, top=1, left=1, bottom=3, right=4)


def test_negative_coordinates():
    rects = parse_rectangles("1\n-10 -5 0 5")
    assert rects[0].top == -10
    assert rects[0].height == 10


def test_zero_count(empty_txt):
    assert parse_rectangles(empty_txt) == []


def test_trailing_tokens_ignored():
    rects = parse_rectangles("1\n0 0 1 1\n99 99")
    assert len(rects) == 1


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   \n",
        "abc",
        "-1",
        "2\n0 0 10 10",
        "1\n0 0 ten 10",
        "1.5\n0 0 1 1",
        "1 0 0 1_0 10",
        "1 0 0 \uff11\uff10 10",
        f"1 0 0 {2**63} 10",
        f"1 {-(2**63) - 1} 0 1 1",
    ],
)
def test_malformed_input(text):
    with pytest.raises(RectangleFormatError):
        parse_rectangles(text)


def test_format_error_is_value_error():
    assert issubclass(RectangleFormatError, ValueError)


def test_parse_input_builds_context(mixed_txt):
    ctx = parse_input(mixed_txt)
    assert ctx.num_rectangles == 5
    assert ctx.rows == []


def test_load_rectangles(input_file, mixed_txt):
    ctx = load_rectangles(input_file(mixed_txt))
    assert ctx.num_rectangles == 5


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_rectangles(tmp_path / "missing.txt")


def test_int64_bounds_accepted():
    rects = parse_rectangles(f"1 {-(2**63)} 0 {2**63 - 1} 10")
    assert rects[0].top == -(2**63)
    assert rects[0].bottom == 2**63 - 1


def test_explicit_plus_sign_accepted():
    rects = parse_rectangles("1 +0 0 +5 5")
    assert rects[0].bottom == 5


def test_load_undecodable_file(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"1\n0 0 10 10 \xff\xfe\n")
    with pytest.raises(RectangleFormatError):
        load_rectangles(path)
