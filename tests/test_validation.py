import pytest

from cubecaster.constants import (
    ERR_MAP7,
    ERR_MAP8,
    ERR_MAP_CHAR,
    ERR_MAP_LAST,
    ERR_PLA_POS,
    ERR_RGB_VAL,
    ERR_SING_PLAYER,
    ERR_TEXT_COL,
    ERR_TEXT_MAP,
    ERR_TEXT_PATH,
)
from cubecaster.errors import CubError
from cubecaster.model import GameData, TextureInfo
from cubecaster.parser import file_to_variable, load_file
from cubecaster.validation import (
    file_path_exists,
    is_cub_file,
    is_map_surrounded,
    is_map_surrounded_vertically,
    pos_is_valid,
    rgb_to_hex,
    valid_map,
    valid_texture,
    validate_move,
)

CUB = """NO ./n.xpm
SO ./s.xpm
WE ./w.xpm
EA ./e.xpm

F 220,100,0
C 225,30,0

1111111
1000001
100N001
1111111
"""


def make_data(rows, trailing=()):
    data = GameData()
    data.map = [list(r) for r in rows]
    data.map_det.height = len(rows)
    data.map_det.width = max((len(r) for r in rows), default=0)
    data.map_det.file = [r + "\n" for r in rows] + list(trailing)
    data.map_det.start_i_map = 0
    data.map_det.end_i_map = len(rows)
    return data


def make_texture(tmp_path, floor=(220, 100, 0), ceiling=(225, 30, 0)):
    paths = []
    for name in ("n", "s", "e", "w"):
        p = tmp_path / f"{name}.xpm"
        p.write_text("texture")
        paths.append(str(p))
    return TextureInfo(
        north=paths[0],
        south=paths[1],
        east=paths[2],
        west=paths[3],
        floor=list(floor),
        ceiling=list(ceiling),
    )


@pytest.mark.parametrize(
    "name,expected",
    [
        ("map.cub", True),
        ("maps/a.cub", True),
        (".cub", True),
        ("cub", False),
        ("map.cube", False),
        ("map.CUB", False),
        ("mapcub", False),
    ],
)
def test_is_cub_file(name, expected):
    assert is_cub_file(name) is expected


def test_file_path_exists(tmp_path):
    existing = tmp_path / "wall.xpm"
    existing.write_text("x")
    assert file_path_exists(str(existing)) is True
    assert file_path_exists(str(tmp_path / "missing.xpm")) is False


def test_valid_map_from_parsed_file(tmp_path):
    path = tmp_path / "level.cub"
    path.write_text(CUB)
    data = GameData()
    load_file(data, str(path))
    file_to_variable(data)
    valid_map(data)
    assert data.player.dir == "N"
    assert data.player.pos_x == 3.5
    assert data.player.pos_y == 2.5
    assert data.map[2][3] == "0"


def test_valid_map_empty_map():
    data = GameData()
    with pytest.raises(CubError) as exc:
        valid_map(data)
    assert exc.value.status == 7
    assert exc.value.message == ERR_MAP7


def test_valid_map_open_wall():
    data = make_data(["1111111", "1000N00", "1111111"])
    with pytest.raises(CubError) as exc:
        valid_map(data)
    assert exc.value.status == 8
    assert exc.value.message == ERR_MAP8


def test_valid_map_invalid_character():
    data = make_data(["1111111", "10X0N01", "1111111"])
    with pytest.raises(CubError) as exc:
        valid_map(data)
    assert exc.value.status == 10
    assert exc.value.message == ERR_MAP_CHAR


def test_valid_map_two_players():
    data = make_data(["1111111", "10N0S01", "1111111"])
    with pytest.raises(CubError) as exc:
        valid_map(data)
    assert exc.value.status == 11
    assert exc.value.message == ERR_SING_PLAYER


def test_valid_map_content_after_map():
    data = make_data(["11111", "10N01", "11111"], trailing=["\n", "extra\n"])
    with pytest.raises(CubError) as exc:
        valid_map(data)
    assert exc.value.status == 16
    assert exc.value.message == ERR_MAP_LAST


def test_valid_map_blank_lines_after_map_are_fine():
    data = make_data(["11111", "10W01", "11111"], trailing=["  \t\n", "\n"])
    valid_map(data)
    assert data.player.dir == "W"
    assert data.map[1][2] == "0"


def test_valid_map_without_player():
    data = make_data(["11111", "10001", "11111"])
    with pytest.raises(CubError) as exc:
        valid_map(data)
    assert exc.value.status == 1
    assert exc.value.message == ERR_PLA_POS


def test_is_map_surrounded_turns_leading_spaces_into_walls():
    data = make_data(["  111", "  101", "  111"])
    assert is_map_surrounded(data) is True
    assert ["".join(r) for r in data.map] == ["11111", "11101", "11111"]


def test_is_map_surrounded_rejects_open_first_row():
    data = make_data(["1101", "1001", "1111"])
    assert is_map_surrounded(data) is False


def test_is_map_surrounded_rejects_open_last_column():
    data = make_data(["1111", "1000", "1111"])
    assert is_map_surrounded(data) is False


def test_is_map_surrounded_vertically():
    closed = make_data(["111111", "100001", "111111"])
    assert is_map_surrounded_vertically(closed) is True
    open_below = make_data(["111111", "100001", "1001", "1111"])
    assert is_map_surrounded_vertically(open_below) is False


def test_pos_is_valid():
    data = make_data(["11111", "10001", "11111"])
    data.player.pos_x = 2.5
    data.player.pos_y = 1.5
    assert pos_is_valid(data, data.map) is True
    short = [list("11"), list("10001"), list("11111")]
    assert pos_is_valid(data, short) is False


def test_pos_is_valid_on_edge_row():
    data = make_data(["11111", "10001", "11111"])
    data.player.pos_x = 2.5
    data.player.pos_y = 0.5
    assert pos_is_valid(data, data.map) is False


def test_validate_move_inside_map():
    data = make_data(["1" * 10] * 10)
    data.player.pos_x = 5.0
    data.player.pos_y = 5.0
    assert validate_move(data, 6.0, 6.0) is True
    assert (data.player.pos_x, data.player.pos_y) == (6.0, 6.0)


def test_validate_move_outside_map():
    data = make_data(["1" * 10] * 10)
    data.player.pos_x = 5.0
    data.player.pos_y = 5.0
    assert validate_move(data, 0.1, 0.1) is False
    assert (data.player.pos_x, data.player.pos_y) == (5.0, 5.0)


def test_validate_move_one_axis_only():
    data = make_data(["1" * 10] * 10)
    data.player.pos_x = 5.0
    data.player.pos_y = 5.0
    assert validate_move(data, 9.0, 6.0) is True
    assert data.player.pos_x == 5.0
    assert data.player.pos_y == 6.0


def test_valid_texture_sets_hex_colours(tmp_path):
    texture = make_texture(tmp_path)
    valid_texture(texture)
    assert texture.hex_floor == rgb_to_hex([220, 100, 0])
    assert texture.hex_ceiling == rgb_to_hex([225, 30, 0])
    assert texture.hex_floor >> 16 == 220
    assert texture.hex_ceiling & 0xFF == 0


def test_valid_texture_missing_path(tmp_path):
    texture = make_texture(tmp_path)
    texture.north = None
    with pytest.raises(CubError) as exc:
        valid_texture(texture)
    assert exc.value.status == 12
    assert exc.value.message == ERR_TEXT_MAP


def test_valid_texture_missing_colour(tmp_path):
    texture = make_texture(tmp_path)
    texture.ceiling = None
    with pytest.raises(CubError) as exc:
        valid_texture(texture)
    assert exc.value.status == 13
    assert exc.value.message == ERR_TEXT_COL


def test_valid_texture_unreadable_path(tmp_path):
    texture = make_texture(tmp_path)
    texture.west = str(tmp_path / "nowhere.xpm")
    with pytest.raises(CubError) as exc:
        valid_texture(texture)
    assert exc.value.status == 14
    assert exc.value.message == ERR_TEXT_PATH


def test_valid_texture_component_out_of_range(tmp_path):
    texture = make_texture(tmp_path, floor=(256, 0, 0))
    with pytest.raises(CubError) as exc:
        valid_texture(texture)
    assert exc.value.status == 15
    assert exc.value.message == ERR_RGB_VAL


def test_rgb_to_hex_pinned_values():
    assert rgb_to_hex([255, 0, 0]) == 0xFF0000
    assert rgb_to_hex([0, 0, 0]) == 0
    assert rgb_to_hex([255, 255, 255]) == 0xFFFFFF


@pytest.mark.parametrize("rgb", [[220, 100, 0], [1, 2, 3], [0, 255, 17]])
def test_rgb_to_hex_round_trip(rgb):
    value = rgb_to_hex(rgb)
    assert [(value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF] == rgb