"""Map symbols, screen geometry, colours, speeds and error messages."""

from enum import IntEnum

C_WALL = "1"
C_BACK_G = "0"
C_WHITE_S = " "

VALID_CHAR_MAP = "01NSEW"
VALID_PLAYER_POS = "NSEW"

ERR_ARGS = "Invalid call. Must be: cubecaster <map_path/map.cub>"
ERR_MALC = "Problems in memory allocation!"
ERR_CUB = "Error File. Expected .cub extension!"
ERR_MAP = "Invalid map!"
ERR_MAP7 = "Invalid map! Verify the specification in PDF Subject"
ERR_MAP8 = "Map not surrounded by walls"
ERR_MAP_LAST = "Map must to be the last element in file."
ERR_MAP_DIR = "Map with no player direction set."
ERR_RGB = "Invalid RGB color format to Floor/Ceiling"
ERR_MAP9 = "Map with invalid character. Check Subject for more details."
ERR_TEXT = "Texture out of pattern. Check Subject for more details."
ERR_TEXT_MAP = "Texture not found in file."
ERR_TEXT_COL = "Color not found in file."
ERR_TEXT_PATH = "Error in Texture. Invalid path."
ERR_RGB_VAL = "Invalid RGB Value. Check the file passed by param."
ERR_PLA_POS = "Invalid Player position"
ERR_MAP_CHAR = "Character invalid in map."
ERR_SING_PLAYER = "Map error. Just one player allowed."
ERR_MLX_IMG = "New image error. Check the graphics framework"
ERR_MLX_WIN = "New window error. Check the graphics framework"
ERR_MLX_INIT = "Graphics init error. Check the graphics framework"

WIDTH = 640
HEIGHT = 480

BITS_PER_BYTE = 8
TITLE = "Cubecaster"

# Wall textures are square bitmaps of this many pixels per side.
TEX_SIZE = 64

COLOR_MINIMAP = 0x000000
COLOR_BORDER_MINIMAP = 0xFFFFFF
COLOR_PLAYER = 0x0000FF

MOVE_SPEED = 0.05
ROTSPEED = 0.05


class TextureIndex(IntEnum):
    """Which wall face a texture belongs to."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3