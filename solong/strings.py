"""String search, comparison, copying, trimming and splitting helpers."""

from __future__ import annotations

from collections.abc import Callable

_NUL = "\0"


def _single_char(ch: str, what: str = "character") -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single {what}, got {ch!r}")
    return ch


def strchr(text: str, ch: str) -> int | None:
    """Return the index of the first ``ch`` in ``text``, or None.

    Searching for the NUL character finds the end of the text, as in C.
    """
    _single_char(ch)
    if ch == _NUL and _NUL not in text:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, ch: str) -> int | None:
    """Return the index of the last ``ch`` in ``text``, or None.

    Searching for the NUL character finds the end of the text, as in C.
    """
    _single_char(ch)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns 0 when they match over that span, otherwise the difference of
    the codes of the first differing characters; the end of a string counts
    as code 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for index in range(n):
        a = ord(s1[index]) if index < len(s1) else 0
        b = ord(s2[index]) if index < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the index of the match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the NUL.

    Returns the copied text and the full length of ``src``. A size of 0
    copies nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have.
    When ``size`` does not exceed the length of ``dst``, ``dst`` is left as
    it is and the returned length is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strtrim(text: str, chars: str) -> str:
    """Remove characters found in ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    _single_char(sep, "separator character")
    return [word for word in text.split(sep) if word]


def strjoin(first: str, second: str) -> str:
    """Return the two strings joined end to end."""
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: str, func: Callable[[int, str], str | None]) -> str:
    """Call ``func(index, char)`` on each character in order.

    A character is replaced by what ``func`` returns; a return of None
    leaves it unchanged. The resulting string is returned.
    """
    result = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)