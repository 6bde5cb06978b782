import io

import pytest

from solong.lines import read_lines


def test_lines_keep_newlines():
    assert list(read_lines(io.StringIO("a\nb\nc"))) == ["a\n", "b\n", "c"]


def test_trailing_newline_gives_no_empty_line():
    assert list(read_lines(io.StringIO("a\nb\n"))) == ["a\n", "b\n"]


def test_empty_stream():
    assert list(read_lines(io.StringIO(""))) == []


def test_bytes_stream():
    assert list(read_lines(io.BytesIO(b"11\n10\n"))) == [b"11\n", b"10\n"]


@pytest.mark.parametrize("size", [1, 2, 3, 42, 1000])
def test_buffer_size_does_not_change_result(size):
    text = "1111\n1P01\n\n1CE1\n1111"
    assert "".join(read_lines(io.StringIO(text), size)) == text
    assert list(read_lines(io.StringIO(text), size)) == text.splitlines(keepends=True)


def test_reads_lazily():
    stream = io.StringIO("ab\ncd\n")
    lines = read_lines(stream, 1)
    assert next(lines) == "ab\n"
    assert stream.tell() == 3


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        list(read_lines(io.StringIO("a\n"), 0))