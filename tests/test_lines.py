import io

import pytest

from solong.lines import LineReader, read_lines


@pytest.mark.parametrize("size", [1, 3, 42, 1000])
def test_lines_keep_newlines(size):
    reader = LineReader(io.StringIO("a\nbb\nccc"), size)
    assert list(reader) == ["a\n", "bb\n", "ccc"]


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO("")).read_line() is None


def test_none_after_exhaustion():
    reader = LineReader(io.StringIO("x\n"))
    assert reader.read_line() == "x\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines():
    assert list(LineReader(io.StringIO("\n\n"), 1)) == ["\n", "\n"]


def test_lines_join_back_to_text():
    text = "111\n1P0\n1CE\n111\n"
    assert "".join(LineReader(io.StringIO(text), 2)) == text


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), 0)


def test_read_lines(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("111\n101\n111")
    assert read_lines(path) == ["111\n", "101\n", "111"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "absent.ber")