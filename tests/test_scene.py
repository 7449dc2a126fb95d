import pytest

from cubescape.errors import CubError
from cubescape.scene import (
    Scene,
    has_extension,
    load_scene,
    parse_scene,
    read_content,
)

MAP_ROWS = ["111111", "100001", "10N001", "111111"]


@pytest.fixture
def header(tmp_path):
    lines = []
    for ident, name in (("NO", "n"), ("SO", "s"), ("WE", "w"), ("EA", "e")):
        texture = tmp_path / f"{name}.xpm"
        texture.write_text("")
        lines.append(f"{ident} {texture}")
    lines.append("F 220,100,0")
    lines.append("C 225,30,0")
    return lines


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


@pytest.mark.parametrize(
    "path, expected",
    [("map.cub", True), (".cub", True), ("map.cu", False), ("cub", False), ("a.xpm", False)],
)
def test_has_extension(path, expected):
    assert has_extension(path, ".cub") is expected


def test_read_content_drops_blank_lines_before_map(tmp_path, header):
    text = "\n\n".join(header) + "\n   \n\n" + "\n".join(MAP_ROWS) + "\n\n  \n"
    path = write(tmp_path, "scene.cub", text)
    assert read_content(path) == "\n".join(header + MAP_ROWS)


def test_read_content_keeps_blank_lines_inside_map(tmp_path, header):
    text = "\n".join(header + MAP_ROWS[:2]) + "\n\n" + "\n".join(MAP_ROWS[2:]) + "\n"
    path = write(tmp_path, "scene.cub", text)
    content = read_content(path)
    assert "\n".join(MAP_ROWS[:2]) + "\n\n" in content


def test_read_content_missing_file(tmp_path):
    with pytest.raises(CubError, match="Invalid fd!"):
        read_content(tmp_path / "absent.cub")


def test_parse_scene_valid(header):
    scene = parse_scene("\n".join(header + MAP_ROWS))
    assert isinstance(scene, Scene)
    assert scene.elements.floor == (220, 100, 0)
    assert scene.elements.ceiling == (225, 30, 0)
    assert scene.game_map.grid == MAP_ROWS
    assert scene.game_map.direction == "N"
    assert MAP_ROWS[scene.game_map.spawn_y][scene.game_map.spawn_x] == "N"


def test_parse_scene_empty():
    with pytest.raises(CubError, match="empty map"):
        parse_scene("")


def test_parse_scene_blank_line_in_map(header):
    text = "\n".join(header + MAP_ROWS[:2]) + "\n \n" + "\n".join(MAP_ROWS[2:])
    with pytest.raises(CubError, match="Map is not connected."):
        parse_scene(text)


def test_parse_scene_without_map(header):
    with pytest.raises(CubError, match="There is no map in the .cub file!"):
        parse_scene("\n".join(header))


def test_parse_scene_open_map(header):
    rows = ["111111", "100001", "10N000", "111111"]
    with pytest.raises(CubError, match="Map is not closed!"):
        parse_scene("\n".join(header + rows))


def test_load_scene_rejects_wrong_extension(tmp_path):
    path = write(tmp_path, "scene.txt", "")
    with pytest.raises(CubError, match="not cub file"):
        load_scene(path)


def test_load_scene_round_trip(tmp_path, header):
    text = "\n".join(header) + "\n\n" + "\n".join(MAP_ROWS) + "\n"
    path = write(tmp_path, "level.cub", text)
    scene = load_scene(path)
    assert scene.game_map.grid == MAP_ROWS
    assert scene.elements.north == header[0][3:]
    assert scene.elements.east == header[3][3:]


def test_load_scene_empty_file(tmp_path):
    path = write(tmp_path, "empty.cub", "\n  \n\t\n")
    with pytest.raises(CubError, match="empty map"):
        load_scene(path)