import pytest

from cubscene.colors import Color
from cubscene.errors import SceneError
from cubscene.scene import Scene, main, parse_scene, read_scene

MAP = ["111111\n", "100001\n", "10N001\n", "111111\n"]


@pytest.fixture
def textures(tmp_path):
    paths = {}
    for name in ("north", "south", "east", "west"):
        path = tmp_path / f"{name}.xpm"
        path.write_text("x")
        paths[name] = str(path)
    return paths


def header(paths, floor="220,100,0", ceiling="225,30,0"):
    return [
        f"NO {paths['north']}\n",
        f"SO {paths['south']}\n",
        f"WE {paths['west']}\n",
        f"EA {paths['east']}\n",
        "\n",
        f"F {floor}\n",
        f"C {ceiling}\n",
        "\n",
    ]


def error_of(lines):
    with pytest.raises(SceneError) as info:
        parse_scene(lines)
    return info.value.message


def test_valid_scene(textures):
    scene = parse_scene(header(textures) + MAP)
    assert isinstance(scene, Scene)
    assert scene.north == textures["north"]
    assert scene.south == textures["south"]
    assert scene.east == textures["east"]
    assert scene.west == textures["west"]
    assert scene.floor == Color(220, 100, 0)
    assert scene.ceiling == Color(225, 30, 0)


def test_spawn_points_at_player(textures):
    scene = parse_scene(header(textures) + MAP)
    row, column, direction = scene.spawn
    assert direction == "N"
    assert scene.rows[row][column] == "N"


def test_rows_are_rectangular_and_hold_map(textures):
    scene = parse_scene(header(textures) + MAP)
    assert len({len(row) for row in scene.rows}) == 1
    assert scene.rows[0].strip() == ""
    assert scene.rows[1].rstrip() == "111111"
    assert scene.rows[-1].strip() == ""


def test_whole_text_accepted(textures):
    lines = header(textures) + MAP
    assert parse_scene("".join(lines)) == parse_scene(lines)


def test_leading_spaces_and_order(textures):
    lines = header(textures)
    reordered = ["   " + lines[5], lines[6], lines[0], "  " + lines[1], lines[2], lines[3], "\n"]
    assert parse_scene(reordered + MAP) == parse_scene(lines + MAP)


def test_duplicate_texture(textures):
    lines = header(textures)
    assert error_of([lines[0]] + lines + MAP) == "Put one texture per face"


def test_duplicate_floor(textures):
    lines = header(textures)
    assert error_of(lines + ["F 1,2,3\n"] + MAP) == "Put three colors for the floor one time"


def test_duplicate_ceiling(textures):
    lines = header(textures)
    assert error_of(lines + ["C 1,2,3\n"] + MAP) == "Put three colors for the ceiling one time"


def test_unknown_line(textures):
    assert error_of(header(textures) + ["hello\n"] + MAP) == "Put path, colors and closed map only"


def test_map_row_starting_with_zero_rejected(textures):
    lines = header(textures) + ["111\n", "0111\n"]
    assert error_of(lines) == "Put path, colors and closed map only"


def test_map_before_header(textures):
    lines = header(textures)
    assert error_of(lines[:3] + MAP + lines[3:]) == "Put 4 path and 2 colors before the map"


def test_two_maps(textures):
    assert error_of(header(textures) + MAP + ["\n", "111\n"]) == "Put one map only"


@pytest.mark.parametrize(
    "index, message",
    [
        (0, "North path missing"),
        (1, "South path missing"),
        (3, "East path missing"),
        (2, "West path missing"),
        (5, "Floor color missing"),
        (6, "Ceiling path missing"),
    ],
)
def test_missing_entry(textures, index, message):
    lines = header(textures)
    del lines[index]
    assert error_of(lines) == message


def test_missing_map(textures):
    assert error_of(header(textures)) == "Map missing"


def test_bad_identifier(textures):
    lines = header(textures)
    lines[0] = f"NX {textures['north']}\n"
    assert error_of(lines + MAP) == "Bad format for north"


@pytest.mark.parametrize(
    "line, message",
    [
        ("NO\n", "Missing path for north"),
        ("WE   \n", "Bad path for west"),
    ],
)
def test_missing_or_empty_path(textures, line, message):
    lines = header(textures)
    index = 0 if line.startswith("N") else 2
    lines[index] = line
    assert error_of(lines + MAP) == message


def test_nonexistent_path(textures, tmp_path):
    lines = header(textures)
    lines[3] = f"EA {tmp_path / 'absent.xpm'}\n"
    assert error_of(lines + MAP) == "Bad path for east"


def test_bad_floor_color(textures):
    assert error_of(header(textures, floor="1,2") + MAP) == "Bad format of floor"


def test_open_map(textures):
    open_map = ["111111\n", "100001\n", "10N00\n", "111111\n"]
    assert error_of(header(textures) + open_map) == "The map is open"


def test_read_scene_matches_parse(textures, tmp_path):
    lines = header(textures) + MAP
    path = tmp_path / "level.cub"
    path.write_text("".join(lines))
    assert read_scene(path) == parse_scene(lines)


def test_main_success(textures, tmp_path, capsys):
    path = tmp_path / "level.cub"
    path.write_text("".join(header(textures) + MAP))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert textures["north"] in out
    assert "spawn: N" in out


def test_main_failure(textures, tmp_path, capsys):
    path = tmp_path / "level.cub"
    path.write_text("".join(header(textures)))
    assert main([str(path)]) == 1
    assert capsys.readouterr().err == "Error\nMap missing\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cub")]) == 1
    assert capsys.readouterr().err.startswith("Error\n")