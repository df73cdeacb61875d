"""Loading a map file and running the game window."""

import sys
from enum import Enum
from typing import List, Optional

from .constants import (
    ERR_ARGS,
    ERR_CUB,
    ERR_MLX_INIT,
    ERR_MLX_WIN,
    HEIGHT,
    ROTSPEED,
    TITLE,
    WIDTH,
)
from .engine import move, rotate_player, set_player_direction
from .errors import CubError, report_error
from .model import GameData
from .parser import file_to_variable, load_file
from .render import render_frame, setup_textures
from .validation import is_cub_file, valid_map, valid_texture

# Errors that end the program with their own status rather than a plain failure.
_EXIT_WITH_STATUS = frozenset({3, 20, 21})

_FRAMES_PER_SECOND = 60


class Action(Enum):
    """What a key press asks the game to do."""

    QUIT = "quit"
    FORWARD = "forward"
    BACKWARD = "backward"
    STRAFE_LEFT = "strafe_left"
    STRAFE_RIGHT = "strafe_right"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"


def load_game(path: str) -> GameData:
    """Read, validate and prepare the game described by a .cub file.

    Raises CubError when the file name, its content or a texture is invalid.
    """
    if not is_cub_file(path):
        raise CubError(ERR_CUB, 4)
    data = GameData()
    load_file(data, path)
    file_to_variable(data)
    valid_map(data)
    valid_texture(data.texture_det)
    setup_textures(data)
    set_player_direction(data.player)
    return data


def handle_action(data: GameData, action: Action) -> bool:
    """Apply one action to the player; return False when the game should end."""
    player = data.player
    if action is Action.QUIT:
        return False
    if action is Action.FORWARD:
        move(data, player.dir_x, player.dir_y)
    elif action is Action.BACKWARD:
        move(data, -player.dir_x, -player.dir_y)
    elif action is Action.STRAFE_LEFT:
        move(data, -player.plane_x, -player.plane_y)
    elif action is Action.STRAFE_RIGHT:
        move(data, player.plane_x, player.plane_y)
    elif action is Action.TURN_LEFT:
        rotate_player(player, -ROTSPEED)
    elif action is Action.TURN_RIGHT:
        rotate_player(player, ROTSPEED)
    return True


def handle_mouse(data: GameData, x: int) -> bool:
    """Turn the player toward the side of the screen the mouse moved to.

    Returns True when the player turned and the pointer should be re-centred.
    """
    centre = WIDTH // 2
    if x < centre:
        rotate_player(data.player, -ROTSPEED)
        return True
    if x > centre:
        rotate_player(data.player, ROTSPEED)
        return True
    return False


def run(data: GameData) -> int:
    """Open the game window and play until it is closed; return the exit status."""
    import pygame

    key_actions = {
        pygame.K_ESCAPE: Action.QUIT,
        pygame.K_w: Action.FORWARD,
        pygame.K_s: Action.BACKWARD,
        pygame.K_a: Action.STRAFE_LEFT,
        pygame.K_d: Action.STRAFE_RIGHT,
        pygame.K_LEFT: Action.TURN_LEFT,
        pygame.K_RIGHT: Action.TURN_RIGHT,
    }
    try:
        pygame.display.init()
    except pygame.error as exc:
        raise CubError(ERR_MLX_INIT, 1) from exc
    try:
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error as exc:
            raise CubError(ERR_MLX_WIN, 1) from exc
        pygame.display.set_caption(TITLE)
        pygame.key.set_repeat(1, 16)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    action = key_actions.get(event.key)
                    if action is not None and not handle_action(data, action):
                        running = False
                elif event.type == pygame.MOUSEMOTION:
                    if handle_mouse(data, event.pos[0]):
                        pygame.mouse.set_pos((WIDTH // 2, HEIGHT // 2))
            if not running:
                break
            frame = render_frame(data)
            surface = pygame.image.frombuffer(
                frame.to_bytes(), (frame.width, frame.height), "RGB"
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(_FRAMES_PER_SECOND)
    finally:
        pygame.quit()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Start the game on the map file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return report_error(CubError(ERR_ARGS, 1))
    try:
        data = load_game(args[0])
    except CubError as error:
        status = report_error(error)
        return status if status in _EXIT_WITH_STATUS else 1
    try:
        return run(data)
    except CubError as error:
        status = report_error(error)
        return status if status in _EXIT_WITH_STATUS else 1


if __name__ == "__main__":
    sys.exit(main())