"""Text helpers shared by the scene and texture readers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_BLANKS = " \n\r\v\f\t"
_LLONG_MAX = 2**63 - 1


class CubError(Exception):
    """A fatal problem with the scene description or its inputs."""


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C helpers do.

    Leading blanks and one sign are accepted; parsing stops at the first
    non-digit.  A value too large for a 64-bit accumulator gives -1, or 0
    when negative.  The result is truncated to a 32-bit signed integer.
    """
    rest = text.lstrip(_BLANKS)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + ord(ch) - ord("0")
        if value > _LLONG_MAX:
            return 0 if negative else -1
    return _to_int32(-value if negative else value)


def rgb_component(text: str) -> int:
    """Parse one colour component: digits only, from 0 to 256."""
    if any(not "0" <= ch <= "9" for ch in text):
        raise CubError("put only 0 ~ 256 number in rgb")
    value = atoi(text)
    if not 0 <= value <= 256:
        raise CubError("out of rgb range")
    return value


def read_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield the newline-terminated lines of ``stream`` without the newline.

    A final fragment that has no terminating newline is not returned.
    """
    try:
        for raw in stream:
            if raw.endswith("\n"):
                yield raw[:-1]
    except OSError as exc:
        raise CubError("read error") from exc