import pytest

from solong.strings import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strchr_finds_first_occurrence():
    text = "hello world"
    index = strchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[:index]


def test_strchr_missing_and_nul():
    assert strchr("abc", "z") is None
    assert strchr("abc", "\0") == len("abc")


def test_strchr_rejects_long_needle():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last_occurrence():
    text = "hello world"
    index = strrchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[index + 1 :]
    assert strrchr(text, "q") is None
    assert strrchr(text, "\0") == len(text)


def test_strncmp_equal_and_order():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("anything", "else", 0) == 0


def test_strncmp_shorter_string_sorts_first():
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_is_antisymmetric():
    pairs = [("apple", "apricot"), ("x", "y"), ("same", "same")]
    for a, b in pairs:
        assert strncmp(a, b, 10) == -strncmp(b, a, 10)


def test_strnstr_within_length():
    haystack = "foo bar baz"
    index = strnstr(haystack, "bar", len(haystack))
    assert haystack[index : index + 3] == "bar"
    assert strnstr(haystack, "bar", 6) is None
    assert strnstr(haystack, "", 0) == 0
    assert strnstr(haystack, "qux", 100) is None


def test_strlcpy_truncates_and_reports_source_length():
    assert strlcpy("hello", 3) == ("he", 5)
    assert strlcpy("hello", 10) == ("hello", 5)
    assert strlcpy("hello", 0) == ("", 5)


def test_strlcat_appends_within_size():
    result, total = strlcat("foo", "bar", 100)
    assert result == "foobar"
    assert total == len("foo") + len("bar")
    truncated, total = strlcat("foo", "bar", 5)
    assert len(truncated) == 4
    assert truncated.startswith("foo")
    assert total == len("foo") + len("bar")


def test_strlcat_small_size_leaves_destination():
    result, total = strlcat("foobar", "xy", 3)
    assert result == "foobar"
    assert total == len("xy") + 3


def test_strtrim_both_ends():
    assert strtrim("  \nhello\n  ", " \n") == "hello"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("", "x") == ""
    assert strtrim("abc", "") == "abc"


def test_strtrim_keeps_inner_characters():
    assert strtrim("1001\n", "\n") == "1001"
    assert strtrim("a  b", " ") == "a  b"


def test_substr_ranges():
    text = "hello world"
    assert substr(text, 6, 5) == "world"
    assert substr(text, 6, 100) == "world"
    assert substr(text, 100, 5) == ""
    assert substr(text, 0, 0) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_split_drops_empty_words():
    assert split("  hello   world  ", " ") == ["hello", "world"]
    assert split("", ",") == []
    assert split(",,,", ",") == []
    words = split("a,b,,c", ",")
    assert ",".join(words) == "a,b,c"


def test_split_requires_single_separator():
    with pytest.raises(ValueError):
        split("abc", "")


def test_strjoin_concatenates():
    first, second = "so", "long"
    joined = strjoin(first, second)
    assert joined.startswith(first) and joined.endswith(second)
    assert len(joined) == len(first) + len(second)


def test_strmapi_passes_index_and_char():
    seen = []

    def record(index, ch):
        seen.append((index, ch))
        return ch.upper()

    assert strmapi("abc", record) == "ABC"
    assert seen == [(0, "a"), (1, "b"), (2, "c")]


def test_striteri_replaces_where_func_returns_value():
    def odd_upper(index, ch):
        return ch.upper() if index % 2 else None

    result = striteri("abcd", odd_upper)
    assert result == "aBcD"
    assert striteri("keep", lambda i, c: None) == "keep"
    assert len(striteri("xyz", lambda i, c: c)) == len("xyz")