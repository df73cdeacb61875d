"""Reading XPM images into lists of 0xRRGGBB pixels."""

from typing import Dict, List, Tuple

from .constants import ERR_MLX_IMG
from .errors import CubError

_KEYS = ("c", "g", "g4", "m", "s")

_NAMED = {
    "black": 0x000000,
    "white": 0xFFFFFF,
    "red": 0xFF0000,
    "green": 0x00FF00,
    "blue": 0x0000FF,
    "yellow": 0xFFFF00,
    "cyan": 0x00FFFF,
    "magenta": 0xFF00FF,
    "gray": 0xBEBEBE,
    "grey": 0xBEBEBE,
}


def _strings(text: str) -> List[str]:
    """Return the quoted strings of the text, skipping C comments."""
    out: List[str] = []
    i = 0
    n = len(text)
    while i < n:
        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end < 0:
                raise ValueError("unterminated comment")
            i = end + 2
        elif text[i] == '"':
            j = i + 1
            buf = []
            while j < n and text[j] != '"':
                if text[j] == "\\" and j + 1 < n:
                    buf.append(text[j + 1])
                    j += 2
                else:
                    buf.append(text[j])
                    j += 1
            if j >= n:
                raise ValueError("unterminated string")
            out.append("".join(buf))
            i = j + 1
        else:
            i += 1
    return out


def _parse_color(value: str) -> int:
    name = value.strip().lower()
    if name == "none":
        return 0
    if name.startswith("#"):
        digits = name[1:]
        if not digits or len(digits) % 3 or any(c not in "0123456789abcdef" for c in digits):
            raise ValueError(f"bad colour {value!r}")
        k = len(digits) // 3
        parts = [int(digits[p * k:(p + 1) * k], 16) for p in range(3)]
        if k == 1:
            parts = [v * 17 for v in parts]
        else:
            parts = [v >> (4 * (k - 2)) for v in parts]
        return (parts[0] << 16) | (parts[1] << 8) | parts[2]
    compact = name.replace(" ", "")
    if compact in _NAMED:
        return _NAMED[compact]
    raise ValueError(f"unknown colour {value!r}")


def _color_entry(spec: str) -> int:
    tokens = spec.split()
    values: Dict[str, List[str]] = {}
    current = None
    for token in tokens:
        if token in _KEYS:
            current = token
            values[current] = []
        elif current is not None:
            values[current].append(token)
        else:
            raise ValueError(f"bad colour entry {spec!r}")
    for key in _KEYS:
        if values.get(key):
            return _parse_color(" ".join(values[key]))
    raise ValueError(f"colour entry without colour {spec!r}")


def parse_xpm(text: str) -> Tuple[int, int, List[int]]:
    """Parse XPM text; return width, height and row-major pixels.

    Transparent pixels read as 0. Raises ValueError on malformed input.
    """
    strings = _strings(text)
    if not strings:
        raise ValueError("no XPM data")
    header = strings[0].split()
    if len(header) < 4:
        raise ValueError("bad XPM header")
    try:
        width, height, ncolors, cpp = (int(v) for v in header[:4])
    except ValueError as exc:
        raise ValueError("bad XPM header") from exc
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise ValueError("bad XPM header")
    color_lines = strings[1:1 + ncolors]
    rows = strings[1 + ncolors:1 + ncolors + height]
    if len(color_lines) < ncolors or len(rows) < height:
        raise ValueError("truncated XPM data")
    palette = {line[:cpp]: _color_entry(line[cpp:]) for line in color_lines}
    pixels: List[int] = []
    for row in rows:
        if len(row) < width * cpp:
            raise ValueError("short XPM row")
        for col in range(width):
            key = row[col * cpp:(col + 1) * cpp]
            if key not in palette:
                raise ValueError(f"unknown pixel key {key!r}")
            pixels.append(palette[key])
    return width, height, pixels


def load_xpm(path: str) -> Tuple[int, int, List[int]]:
    """Read and parse an XPM file; raise CubError if it cannot be used."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return parse_xpm(handle.read())
    except (OSError, ValueError) as exc:
        raise CubError(ERR_MLX_IMG, 21) from exc