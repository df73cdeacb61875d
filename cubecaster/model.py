"""State of a game: textures, map, player and ray."""

from dataclasses import dataclass, field
from typing import List, Optional

from .constants import TEX_SIZE, TextureIndex


@dataclass
class TextureInfo:
    """Texture paths and colours from the map file, and wall-texture state."""

    north: Optional[str] = None
    south: Optional[str] = None
    west: Optional[str] = None
    east: Optional[str] = None
    floor: Optional[List[int]] = None
    ceiling: Optional[List[int]] = None
    hex_floor: int = 0
    hex_ceiling: int = 0
    size: int = TEX_SIZE
    index: TextureIndex = TextureIndex.NORTH
    step: float = 0.0
    pos: float = 0.0
    x: int = 0
    y: int = 0

    def path_for(self, index: TextureIndex) -> Optional[str]:
        """Return the texture path for a wall face."""
        return {
            TextureIndex.NORTH: self.north,
            TextureIndex.SOUTH: self.south,
            TextureIndex.EAST: self.east,
            TextureIndex.WEST: self.west,
        }[TextureIndex(index)]


@dataclass
class MapInfo:
    """The lines of the map file and where the map lies in it."""

    path: str = ""
    file: List[str] = field(default_factory=list)
    height: int = 0
    width: int = 0
    start_i_map: int = 0
    end_i_map: int = 0

    @property
    def lines_file(self) -> int:
        return len(self.file)


@dataclass
class Player:
    """Position, facing direction and camera plane of the player."""

    dir: str = ""
    pos_x: float = 0.0
    pos_y: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    has_moved: int = 0
    move_x: int = 0
    move_y: int = 0
    rotate: int = 0


@dataclass
class Ray:
    """State of one ray cast through a screen column."""

    multiplier: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    step_x: int = 0
    step_y: int = 0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    delta_dist_x: float = 0.0
    delta_dist_y: float = 0.0
    perp_dist: float = 0.0
    wall_x: float = 0.0
    hit_side: bool = False
    line_height: int = 0
    draw_start: int = 0
    draw_end: int = 0


@dataclass
class GameData:
    """Everything a running game holds."""

    map: List[List[str]] = field(default_factory=list)
    ray: Ray = field(default_factory=Ray)
    map_det: MapInfo = field(default_factory=MapInfo)
    texture_det: TextureInfo = field(default_factory=TextureInfo)
    player: Player = field(default_factory=Player)
    texture_pixels: List[List[int]] = field(default_factory=list)
    textures: List[List[int]] = field(default_factory=list)

    @property
    def map_lines(self) -> List[str]:
        """The map rows as strings."""
        return ["".join(row) for row in self.map]