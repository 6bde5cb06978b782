"""Reader for XPM pixmap images."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from solong.colors import lookup_color

# Pixel value stored for the transparent colour "None".
TRANSPARENT = 0xFF000000

_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_WORD = re.compile(r"[^ \t]+")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: row-major pixels as 0xAARRGGBB integers."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def find_substring(text: str, needle: str) -> int:
    """Return the position of ``needle`` in ``text``, or -1."""
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Return the first position of ``needle`` outside double quotes, or -1."""
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return _WORD.findall(text)


def _blank(text: str, start: int, end: int) -> str:
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C comments outside strings with spaces, keeping the length."""
    while (begin := find_unquoted(text, "/*")) != -1:
        close = text.find("*/", begin + 2)
        end = len(text) if close == -1 else close + 2
        text = _blank(text, begin, end)
    while (begin := find_unquoted(text, "//")) != -1:
        newline = text.find("\n", begin + 2)
        end = len(text) if newline == -1 else newline + 1
        text = _blank(text, begin, end)
    return text


def text_to_rgb(name: str, extra: str | None) -> int:
    """Turn an XPM colour specification into a 0xRRGGBB value.

    ``#hex`` values are read directly; otherwise ``name`` (joined with
    ``extra`` when given) is looked up among the named colours. Unknown
    names give 0 and ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name, 1)
        if match is None:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if extra is not None:
        name = f"{name} {extra}"
    color = lookup_color(name)
    return 0 if color is None else color


def _atoi(word: str) -> int:
    match = _INT_PREFIX.match(word)
    return int(match.group(1)) if match else 0


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from the sequence of XPM strings (header first)."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError("header values must be non-zero")

    direct = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if index >= len(words):
            raise XpmError(f"colour definition without a value: {line!r}")
        extra = words[index + 1] if index + 1 < len(words) else None
        rgb = text_to_rgb(words[index], extra)
        key = line[:cpp]
        if direct:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    pixels: list[int] = []
    for _ in range(height):
        line = next_line("pixel row")
        for x in range(width):
            color = colors.get(line[cpp * x:cpp * (x + 1)], 0)
            pixels.append(TRANSPARENT if color == -1 else color)
    return XpmImage(width, height, tuple(pixels))


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def parse_xpm(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm_lines(_quoted_strings(strip_comments(text)))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(text)