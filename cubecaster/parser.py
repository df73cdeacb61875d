"""Reading a .cub file into the game data: textures, colours and the map."""

from typing import List

from .constants import C_WALL, C_WHITE_S, ERR_RGB, ERR_TEXT
from .errors import CubError
from .model import GameData, TextureInfo

_DIRECTION_FIELDS = {
    "NO": "north",
    "SO": "south",
    "WE": "west",
    "EA": "east",
}


def is_white_space(c: str) -> bool:
    """Return True for a space, a tab or a newline."""
    return c in (" ", "\t", "\n") and c != ""


def _char_at(row: str, index: int) -> str:
    """Return the character at index, or '' past the end of the row."""
    return row[index] if 0 <= index < len(row) else ""


def _is_digit(c: str) -> bool:
    return len(c) == 1 and "0" <= c <= "9"


def read_file_lines(path: str) -> List[str]:
    """Return the lines of a file, each keeping its trailing newline."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise CubError(exc.strerror or str(exc), 3) from exc
    pieces = text.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def load_file(data: GameData, path: str) -> None:
    """Read the map file at path into the map details of data."""
    data.map_det.file = read_file_lines(path)
    data.map_det.path = path


def file_to_variable(data: GameData) -> None:
    """Parse texture paths, colours and the map from the loaded file lines.

    Raises CubError when a texture or colour line is malformed.
    """
    lines = data.map_det.file
    i = 0
    while i < len(lines):
        while i < len(lines) and lines[i].startswith("\n"):
            i += 1
        if i >= len(lines):
            return
        if _handle_line(data, i):
            return
        i += 1


def _handle_line(data: GameData, i: int) -> bool:
    """Handle one line of the file; return True once the map has been read."""
    row = data.map_det.file[i]
    j = 0
    while j < len(row) and is_white_space(row[j]):
        j += 1
    if not _is_digit(_char_at(row, j)):
        following = _char_at(row, j + 1)
        if following not in (C_WHITE_S, ""):
            parse_tex_dir(data.texture_det, row, j)
        else:
            parse_tex_color(data.texture_det, row, j)
        return False
    data.map_det.start_i_map = i
    create_map(data)
    return True


def create_map(data: GameData) -> None:
    """Build the map grid from the file, starting at the map's first line."""
    det = data.map_det
    lines = det.file
    end = det.start_i_map
    while end < len(lines):
        row = lines[end]
        j = 0
        while j < len(row) and is_white_space(row[j]):
            j += 1
        if _char_at(row, j) != C_WALL:
            break
        end += 1
    det.end_i_map = end
    det.height = end - det.start_i_map
    det.width = max((len(line) for line in lines[det.start_i_map:]), default=0)
    data.map = [
        list(line.split("\n", 1)[0]) for line in lines[det.start_i_map:end]
    ]
    spaces_to_wall(data.map)


def spaces_to_wall(map_rows: List[List[str]]) -> None:
    """Turn every space after a row's leading whitespace into a wall, in place."""
    for row in map_rows:
        j = 0
        while j < len(row) and is_white_space(row[j]):
            j += 1
        for k in range(j, len(row)):
            if row[k] == C_WHITE_S:
                row[k] = C_WALL


def _parse_text_path(row: str, start: int) -> str:
    while start < len(row) and is_white_space(row[start]):
        start += 1
    end = start
    while end < len(row) and not is_white_space(row[end]):
        end += 1
    return row[start:end]


def parse_tex_dir(texture: TextureInfo, row: str, i: int) -> None:
    """Store the texture path of a NO, SO, WE or EA line starting at index i.

    Raises CubError when the line is out of pattern or the direction repeats.
    """
    if _char_at(row, 2) != C_WHITE_S:
        raise CubError(ERR_TEXT, 1)
    field_name = _DIRECTION_FIELDS.get(row[i:i + 2])
    if field_name is None or getattr(texture, field_name) is not None:
        raise CubError(ERR_TEXT, 1)
    setattr(texture, field_name, _parse_text_path(row, i + 3))


def parse_tex_color(texture: TextureInfo, row: str, i: int) -> None:
    """Store the floor (F) or ceiling (C) colour of a line starting at index i.

    Raises CubError when the line is malformed or the colour repeats.
    """
    if _char_at(row, i + 1) != C_WHITE_S:
        raise CubError(ERR_RGB, 10)
    kind = _char_at(row, i)
    if kind == "C" and texture.ceiling is None:
        texture.ceiling = parse_rgb_color(row[i + 1:])
    elif kind == "F" and texture.floor is None:
        texture.floor = parse_rgb_color(row[i + 1:])
    else:
        raise CubError(ERR_RGB, 10)


def _atoi(text: str) -> int:
    stripped = text.lstrip(" \t\n\v\f\r")
    digits = ""
    for c in stripped:
        if not _is_digit(c):
            break
        digits += c
    return int(digits) if digits else 0


def _only_digits(text: str) -> bool:
    return all(c in (C_WHITE_S, "\n") or _is_digit(c) for c in text)


def parse_rgb_color(row: str) -> List[int]:
    """Parse three comma separated components; raise CubError if malformed."""
    parts = [part for part in row.split(",") if part]
    if len(parts) != 3 or not all(_only_digits(part) for part in parts):
        raise CubError(ERR_RGB, 10)
    return [_atoi(part) for part in parts]