"""Readable dump of the main game structures."""

import sys
from typing import List, Optional, TextIO

from .model import GameData, Player, Ray, TextureInfo


def _text(value: Optional[str]) -> str:
    return "(null)" if value is None else value


def _rgb(rgb: Optional[List[int]]) -> str:
    if rgb is None:
        return "(null)"
    return ", ".join(str(v) for v in rgb[:3])


def _texture_lines(t: TextureInfo) -> List[str]:
    return [
        "",
        "****Texture****",
        f"North Path: {_text(t.north)}",
        f"South Path: {_text(t.south)}",
        f"East Path: {_text(t.east)}",
        f"West Path: {_text(t.west)}",
        f"floor: {_rgb(t.floor)}",
        f"ceil: {_rgb(t.ceiling)}",
        f"hex_floor: {t.hex_floor}",
        f"hex_ceiling: {t.hex_ceiling}",
        f"index: {int(t.index)}",
        f"step: {t.step:f}",
    ]


def _player_lines(p: Player) -> List[str]:
    return [
        "",
        "****Player****",
        f"dir: {p.dir}",
        f"pos_x: {p.pos_x:f}",
        f"pos_y: {p.pos_y:f}",
        f"dir_x: {p.dir_x:f}",
        f"dir_y: {p.dir_y:f}",
        f"plane_x: {p.plane_x:f}",
        f"plane_y: {p.plane_y:f}",
        f"move_x: {p.move_x}",
        f"move_y: {p.move_y}",
        f"has_moved: {p.has_moved}",
        f"rotate: {p.rotate}",
    ]


def _ray_lines(r: Ray) -> List[str]:
    return [
        "",
        "****Ray****",
        f"multiplier: {r.multiplier:f}",
        f"dir_x: {r.dir_x:f}",
        f"dir_y: {r.dir_y:f}",
        f"map_x: {r.map_x}",
        f"map_y: {r.map_y}",
        f"step_x: {r.step_x}",
        f"step_y: {r.step_y}",
        f"side_dist_x:{r.side_dist_x:f}",
        f"side_dist_y:{r.side_dist_y:f}",
        f"delta_dist_x: {r.delta_dist_x:f}",
        f"delta_dist_y: {r.delta_dist_y:f}",
        f"perp_dist: {r.perp_dist:f}",
        f"wall_x: {r.wall_x:f}",
        f"hit_side: {int(r.hit_side)}",
        f"line_height: {r.line_height}",
        f"draw_start: {r.draw_start}",
        f"draw_end: {r.draw_end}",
    ]


def format_debug(data: GameData) -> str:
    """Return the texture, player and ray state as text."""
    lines = (
        _texture_lines(data.texture_det)
        + _player_lines(data.player)
        + _ray_lines(data.ray)
    )
    return "\n".join(lines) + "\n"


def debug(data: GameData, stream: Optional[TextIO] = None) -> None:
    """Write the texture, player and ray state to a stream (stdout by default)."""
    out = sys.stdout if stream is None else stream
    out.write(format_debug(data))