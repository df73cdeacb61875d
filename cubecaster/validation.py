"""Checks on the parsed map file: extension, map shape, textures, moves."""

import os
from typing import Sequence

from .constants import (
    C_BACK_G,
    C_WALL,
    ERR_MAP7,
    ERR_MAP8,
    ERR_MAP_CHAR,
    ERR_MAP_DIR,
    ERR_MAP_LAST,
    ERR_PLA_POS,
    ERR_RGB_VAL,
    ERR_SING_PLAYER,
    ERR_TEXT_COL,
    ERR_TEXT_MAP,
    ERR_TEXT_PATH,
    VALID_CHAR_MAP,
    VALID_PLAYER_POS,
)
from .errors import CubError
from .model import GameData, MapInfo, TextureInfo
from .parser import is_white_space

_BLANKS = " \t\n\r\v\f"


def is_cub_file(name: str) -> bool:
    """Return True when the name ends in '.cub'."""
    return len(name) >= 4 and name[-4:] == ".cub"


def file_path_exists(path: str) -> bool:
    """Return True when the path can be opened for reading."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    os.close(fd)
    return True


def valid_map(data: GameData) -> None:
    """Validate the map and place the player on it.

    Raises CubError when the map is missing, open, holds invalid characters,
    is followed by other content, or has no single valid player.
    """
    data.player.dir = C_BACK_G
    if not data.map:
        raise CubError(ERR_MAP7, 7)
    if not is_map_surrounded(data) or not is_map_surrounded_vertically(data):
        raise CubError(ERR_MAP8, 8)
    _check_map_chars(data)
    if not _is_map_last_element(data.map_det):
        raise CubError(ERR_MAP_LAST, 16)
    _place_player(data)
    if data.player.dir == C_BACK_G:
        raise CubError(ERR_MAP_DIR, 17)


def is_map_surrounded(data: GameData) -> bool:
    """Check the outer rows and each row's ends are walls.

    Whitespace met on the way is turned into walls, in place.
    """
    last_row = data.map_det.height - 1
    for i, row in enumerate(data.map):
        col_size = len(row)
        j = 0
        while j < len(row):
            while j < len(row) and is_white_space(row[j]):
                row[j] = C_WALL
                j += 1
            c = row[j] if j < len(row) else ""
            if i == 0 and c != C_WALL:
                return False
            if i == last_row and c != C_WALL:
                return False
            if j == 0 and c != C_WALL:
                return False
            if j == col_size - 1 and c != C_WALL:
                return False
            if not c:
                break
            j += 1
    return True


def is_map_surrounded_vertically(data: GameData) -> bool:
    """Check that a cell with nothing above or below it is a wall."""
    rows = data.map
    last_row = data.map_det.height - 1
    for i, row in enumerate(rows):
        for j, c in enumerate(row):
            if c == C_WALL:
                continue
            if i > 0 and j >= len(rows[i - 1]):
                return False
            if i < last_row and i + 1 < len(rows) and j >= len(rows[i + 1]):
                return False
    return True


def pos_is_valid(data: GameData, map_rows: Sequence[Sequence[str]]) -> bool:
    """Return True when the rows above and below the player reach its column."""
    i = int(data.player.pos_y)
    j = int(data.player.pos_x)
    if i - 1 < 0 or i + 1 >= len(map_rows):
        return False
    return len(map_rows[i - 1]) >= j and len(map_rows[i + 1]) >= j


def validate_move(data: GameData, new_x: float, new_y: float) -> bool:
    """Move the player along each axis that stays inside the map.

    Returns True when the player moved along at least one axis.
    """
    moved = False
    if _is_valid_pos_in_map(data, new_x, data.player.pos_y):
        data.player.pos_x = new_x
        moved = True
    if _is_valid_pos_in_map(data, data.player.pos_x, new_y):
        data.player.pos_y = new_y
        moved = True
    return moved


def valid_texture(texture: TextureInfo) -> None:
    """Check textures and colours, then store the colours as hex values.

    Raises CubError for a missing texture or colour, an unreadable texture
    path, or a colour component outside 0..255.
    """
    paths = (texture.north, texture.south, texture.east, texture.west)
    if any(not path for path in paths):
        raise CubError(ERR_TEXT_MAP, 12)
    if not texture.ceiling or not texture.floor:
        raise CubError(ERR_TEXT_COL, 13)
    if not all(file_path_exists(path) for path in paths):
        raise CubError(ERR_TEXT_PATH, 14)
    if not _valid_rgb(texture.ceiling) or not _valid_rgb(texture.floor):
        raise CubError(ERR_RGB_VAL, 15)
    texture.hex_ceiling = rgb_to_hex(texture.ceiling)
    texture.hex_floor = rgb_to_hex(texture.floor)


def rgb_to_hex(rgb: Sequence[int]) -> int:
    """Pack red, green and blue components into one 0xRRGGBB integer."""
    r, g, b = rgb[0], rgb[1], rgb[2]
    return ((r & 0xFF) << 16) + ((g & 0xFF) << 8) + (b & 0xFF)


def _valid_rgb(rgb: Sequence[int]) -> bool:
    return all(0 <= value <= 255 for value in rgb[:3])


def _is_valid_pos_in_map(data: GameData, x: float, y: float) -> bool:
    if x < 0.25 or x >= data.map_det.width - 1.25:
        return False
    if y < 0.25 or y >= data.map_det.height - 0.25:
        return False
    return True


def _is_map_last_element(map_det: MapInfo) -> bool:
    return all(
        c in _BLANKS
        for line in map_det.file[map_det.end_i_map:]
        for c in line
    )


def _check_map_chars(data: GameData) -> None:
    data.player.dir = C_BACK_G
    for row in data.map:
        for c in row:
            if is_white_space(c):
                continue
            if c not in VALID_CHAR_MAP:
                raise CubError(ERR_MAP_CHAR, 10)
            if c in VALID_PLAYER_POS:
                if data.player.dir != C_BACK_G:
                    raise CubError(ERR_SING_PLAYER, 11)
                data.player.dir = c
    return None


def _place_player(data: GameData) -> None:
    for i, row in enumerate(data.map):
        for j, c in enumerate(row):
            if c in VALID_PLAYER_POS:
                data.player.pos_x = j + 0.5
                data.player.pos_y = i + 0.5
                row[j] = C_BACK_G
    if data.player.dir == C_BACK_G or not pos_is_valid(data, data.map):
        raise CubError(ERR_PLA_POS, 1)