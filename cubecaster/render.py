"""Frame rendering: wall textures, ceiling, floor and the minimap."""

from typing import List

from .constants import (
    C_WALL,
    COLOR_BORDER_MINIMAP,
    COLOR_PLAYER,
    ERR_MLX_IMG,
    HEIGHT,
    TEX_SIZE,
    WIDTH,
    TextureIndex,
)
from .engine import calc_dda, calculate_line_height, perform_dda, setup_raycast_info
from .errors import CubError
from .model import GameData, Ray
from .xpm import load_xpm

_DARKEN_MASK = 8355711
_MINIMAP_SCALE = 5


class Frame:
    """A screen-sized grid of 0xRRGGBB pixels, stored row by row."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = width
        self.height = height
        self.pixels: List[int] = [0] * (width * height)

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; positions outside the frame are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color

    def to_bytes(self) -> bytes:
        """Return the pixels as packed RGB bytes, three per pixel."""
        raw = b"".join((p & 0xFFFFFF).to_bytes(4, "big") for p in self.pixels)
        out = bytearray(len(self.pixels) * 3)
        out[0::3] = raw[1::4]
        out[1::3] = raw[2::4]
        out[2::3] = raw[3::4]
        return bytes(out)


def texture_index(ray: Ray) -> TextureIndex:
    """Return the wall face the ray hit."""
    if not ray.hit_side:
        return TextureIndex.WEST if ray.dir_x < 0 else TextureIndex.EAST
    return TextureIndex.SOUTH if ray.dir_y > 0 else TextureIndex.NORTH


def load_texture(path: str, size: int) -> List[int]:
    """Load an XPM file as a size-by-size block of pixels; missing ones are 0."""
    width, height, pixels = load_xpm(path)
    return [
        pixels[y * width + x] if x < width and y < height else 0
        for y in range(size)
        for x in range(size)
    ]


def setup_textures(data: GameData) -> None:
    """Load the four wall textures in north, south, east, west order."""
    data.texture_det.size = TEX_SIZE
    textures = []
    for index in TextureIndex:
        path = data.texture_det.path_for(index)
        if path is None:
            raise CubError(ERR_MLX_IMG, 21)
        textures.append(load_texture(path, data.texture_det.size))
    data.textures = textures


def new_texture_pixels() -> List[List[int]]:
    """Return a blank screen-sized grid of texture pixels."""
    return [[0] * WIDTH for _ in range(HEIGHT)]


def update_text_pixels(
    data: GameData, texture_pixels: List[List[int]], ray: Ray, x: int
) -> None:
    """Draw the textured wall stripe of column x into texture_pixels.

    North and east faces are drawn darker.
    """
    tex = data.texture_det
    tex.index = texture_index(ray)
    tex.x = int(ray.wall_x * tex.size)
    if (not ray.hit_side and ray.dir_x < 0) or (ray.hit_side and ray.dir_y > 0):
        tex.x = tex.size - tex.x - 1
    if ray.line_height <= 0:
        return
    tex.step = 1.0 * tex.size / ray.line_height
    tex.pos = (ray.draw_start - HEIGHT // 2 + ray.line_height // 2) * tex.step
    texture = data.textures[tex.index]
    darken = tex.index in (TextureIndex.NORTH, TextureIndex.EAST)
    for y in range(ray.draw_start, ray.draw_end):
        tex.y = int(tex.pos) & (tex.size - 1)
        tex.pos += tex.step
        color = texture[tex.size * tex.y + tex.x]
        if darken:
            color = (color >> 1) & _DARKEN_MASK
        if color > 0:
            texture_pixels[y][x] = color


def _square(frame: Frame, x: int, y: int, color: int) -> None:
    for i in range(_MINIMAP_SCALE):
        for j in range(_MINIMAP_SCALE):
            frame.set_pixel(x + i + 10, y + j + 10, color)


def _minimap(data: GameData, frame: Frame) -> None:
    for y in range(data.map_det.height):
        row = data.map[y] if y < len(data.map) else []
        for x in range(data.map_det.width):
            if x < len(row) and row[x] == C_WALL:
                _square(frame, x * _MINIMAP_SCALE, y * _MINIMAP_SCALE, COLOR_BORDER_MINIMAP)
    _square(
        frame,
        int(data.player.pos_x * _MINIMAP_SCALE - 2),
        int(data.player.pos_y * _MINIMAP_SCALE - 2),
        COLOR_PLAYER,
    )


def render_frame(data: GameData) -> Frame:
    """Cast every column, then compose walls, ceiling, floor and minimap."""
    texture_pixels = new_texture_pixels()
    data.texture_pixels = texture_pixels
    for x in range(WIDTH):
        setup_raycast_info(x, data.ray, data.player)
        calc_dda(data.ray, data.player)
        perform_dda(data, data.ray)
        calculate_line_height(data.ray, data.player)
        update_text_pixels(data, texture_pixels, data.ray, x)
    frame = Frame()
    ceiling = data.texture_det.hex_ceiling
    floor = data.texture_det.hex_floor
    color = 0
    for y, row in enumerate(texture_pixels):
        base = y * WIDTH
        for x, value in enumerate(row):
            if value > 0:
                color = value
            elif y < HEIGHT // 2:
                color = ceiling
            elif y < HEIGHT - 1:
                color = floor
            frame.pixels[base + x] = color
    _minimap(data, frame)
    return frame