"""Player movement and the DDA ray caster."""

import math
from typing import Tuple

from .constants import C_WALL, HEIGHT, MOVE_SPEED, WIDTH
from .model import GameData, Player, Ray

_PLANE = 0.66


def set_player_direction(player: Player) -> None:
    """Point the direction vector and camera plane to the player's N, S, E or W."""
    if player.dir == "S":
        player.dir_y = 1.0
        player.plane_x = -_PLANE
    elif player.dir == "N":
        player.dir_y = -1.0
        player.plane_x = _PLANE
    elif player.dir == "W":
        player.dir_x = -1.0
        player.plane_y = -_PLANE
    elif player.dir == "E":
        player.dir_x = 1.0
        player.plane_y = _PLANE


def rotate(x: float, y: float, angle: float) -> Tuple[float, float]:
    """Return the vector (x, y) rotated by angle radians."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return x * cos_a - y * sin_a, x * sin_a + y * cos_a


def rotate_player(player: Player, angle: float) -> None:
    """Rotate the player's direction and camera plane by angle radians."""
    player.dir_x, player.dir_y = rotate(player.dir_x, player.dir_y, angle)
    player.plane_x, player.plane_y = rotate(player.plane_x, player.plane_y, angle)


def _cell(data: GameData, row: int, col: int) -> str:
    if 0 <= row < len(data.map) and 0 <= col < len(data.map[row]):
        return data.map[row][col]
    return ""


def move(data: GameData, dx: float, dy: float) -> bool:
    """Step the player by (dx, dy) scaled by the move speed.

    Returns False, leaving the player in place, when the step would leave
    the map or enter a wall.
    """
    new_x = data.player.pos_x + dx * MOVE_SPEED
    new_y = data.player.pos_y + dy * MOVE_SPEED
    if (
        new_x < 0
        or new_x >= data.map_det.width
        or new_y < 0
        or new_y >= data.map_det.height
        or _cell(data, int(new_y), int(new_x)) == C_WALL
    ):
        return False
    data.player.pos_x = new_x
    data.player.pos_y = new_y
    return True


def setup_raycast_info(x: int, ray: Ray, player: Player) -> None:
    """Set up the ray for screen column x."""
    ray.multiplier = 2 * x / float(WIDTH) - 1
    ray.dir_x = player.dir_x + player.plane_x * ray.multiplier
    ray.dir_y = player.dir_y + player.plane_y * ray.multiplier
    ray.map_x = int(player.pos_x)
    ray.map_y = int(player.pos_y)
    ray.delta_dist_x = abs(1 / ray.dir_x) if ray.dir_x != 0 else math.inf
    ray.delta_dist_y = abs(1 / ray.dir_y) if ray.dir_y != 0 else math.inf


def calc_dda(ray: Ray, player: Player) -> None:
    """Compute the step direction and the initial side distances."""
    if ray.dir_x < 0:
        ray.step_x = -1
        ray.side_dist_x = (player.pos_x - ray.map_x) * ray.delta_dist_x
    else:
        ray.step_x = 1
        ray.side_dist_x = (ray.map_x + 1.0 - player.pos_x) * ray.delta_dist_x
    if ray.dir_y < 0:
        ray.step_y = -1
        ray.side_dist_y = (player.pos_y - ray.map_y) * ray.delta_dist_y
    else:
        ray.step_y = 1
        ray.side_dist_y = (ray.map_y + 1.0 - player.pos_y) * ray.delta_dist_y


def perform_dda(data: GameData, ray: Ray) -> None:
    """Walk the ray square by square until it hits a wall or leaves the map."""
    rows = len(data.map)
    width = max([data.map_det.width] + [len(row) for row in data.map])
    while True:
        if ray.side_dist_x < ray.side_dist_y:
            ray.side_dist_x += ray.delta_dist_x
            ray.map_x += ray.step_x
            ray.hit_side = False
        else:
            ray.side_dist_y += ray.delta_dist_y
            ray.map_y += ray.step_y
            ray.hit_side = True
        if ray.map_y < 0 or ray.map_x < 0:
            break
        if ray.map_y >= rows or ray.map_x >= width:
            break
        if _cell(data, ray.map_y, ray.map_x) == C_WALL:
            break


def calculate_line_height(ray: Ray, player: Player) -> None:
    """Compute the wall distance, the stripe to draw and where the wall was hit."""
    if not ray.hit_side:
        ray.perp_dist = ray.side_dist_x - ray.delta_dist_x
    else:
        ray.perp_dist = ray.side_dist_y - ray.delta_dist_y
    if ray.perp_dist > 0 and math.isfinite(ray.perp_dist):
        ray.line_height = int(HEIGHT / ray.perp_dist)
    elif ray.perp_dist > 0:
        ray.line_height = 0
    else:
        ray.line_height = 2 ** 31 - 1
    half = ray.line_height // 2
    ray.draw_start = max(-half + HEIGHT // 2, 0)
    ray.draw_end = min(half + HEIGHT // 2, HEIGHT - 1)
    if not ray.hit_side:
        ray.wall_x = player.pos_y + ray.perp_dist * ray.dir_y
    else:
        ray.wall_x = player.pos_x + ray.perp_dist * ray.dir_x
    ray.wall_x -= math.floor(ray.wall_x)