import pytest

from wirefdf.mapfile import (
    HeightMap,
    MapError,
    Point,
    check_arguments,
    check_extension,
    parse_row,
    read_file,
    read_map,
)

GRID = ["0 0 0\n", "0 10 0\n", "0 0 0\n"]


def test_read_map_dimensions_and_heights():
    grid = read_map(GRID)
    assert grid.width == 3
    assert grid.height == 3
    assert grid.point(1, 1).z == 10
    assert grid.point(0, 0).z == 0


def test_points_cover_grid_in_reading_order():
    grid = read_map(GRID)
    points = list(grid.points())
    assert len(points) == grid.width * grid.height
    assert [(p.x, p.y) for p in points] == [
        (x, y) for y in range(grid.height) for x in range(grid.width)
    ]


def test_default_and_explicit_colours():
    grid = read_map(["1 5,0xff0000\n"])
    assert grid.point(0, 0).color == 0xFFFFFF
    assert grid.point(1, 0) == Point(1, 0, 5, 0xFF0000)


def test_extra_spaces_are_tolerated():
    grid = read_map(["1   2    3\n", "4 5 6 \n"])
    assert [p.z for p in grid.points()] == [1, 2, 3, 4, 5, 6]


def test_not_rectangular_raises():
    with pytest.raises(MapError, match="not rectangular"):
        read_map(["1 2 3\n", "1 2\n"])


@pytest.mark.parametrize("lines", [[], ["\n"], [""]])
def test_no_map_raises(lines):
    with pytest.raises(MapError, match="no map"):
        read_map(lines)


def test_blank_line_ends_reading():
    grid = read_map(["1 2\n", "\n", "3 4 5\n"])
    assert grid.height == 1
    assert [p.z for p in grid.points()] == [1, 2]


def test_neighbours():
    grid = read_map(GRID)
    corner = grid.point(2, 2)
    assert grid.right_of(corner) is None
    assert grid.below(corner) is None
    origin = grid.point(0, 0)
    assert grid.right_of(origin) == grid.point(1, 0)
    assert grid.below(origin) == grid.point(0, 1)


def test_point_out_of_range():
    grid = read_map(GRID)
    with pytest.raises(IndexError):
        grid.point(3, 0)
    with pytest.raises(IndexError):
        grid.point(0, -1)


def test_heightmap_rejects_ragged_rows():
    with pytest.raises(MapError):
        HeightMap(((Point(0, 0, 0),), (Point(0, 1, 0), Point(1, 1, 0))))


def test_describe_lists_every_point():
    grid = read_map(["7 8\n"])
    text = grid.describe()
    assert text.startswith("xbase: 0, ybase: 0, zbase: 7, \n")
    assert text.count("\n") == grid.width * grid.height


def test_parse_row_uses_row_index():
    row = parse_row("3 -2,0xff", 4)
    assert [p.y for p in row] == [4, 4]
    assert [p.z for p in row] == [3, -2]
    assert row[1].color == 0xFF


def test_parse_row_bad_colour():
    with pytest.raises(MapError):
        parse_row("1,0xzz", 0)


@pytest.mark.parametrize("argv", [["fdf"], ["fdf", "a.fdf", "b.fdf"]])
def test_check_arguments_count(argv):
    with pytest.raises(MapError, match="usage"):
        check_arguments(argv)


def test_check_arguments_returns_name():
    assert check_arguments(["fdf", "pyramid.fdf"]) == "pyramid.fdf"


@pytest.mark.parametrize("name", ["map.txt", "mapfdf", "map.FDF"])
def test_check_extension_rejects(name):
    with pytest.raises(MapError, match="namefile.fdf"):
        check_extension(name)


def test_check_extension_accepts():
    assert check_extension("42.fdf") == "42.fdf"


def test_read_file_from_maps_directory(tmp_path, monkeypatch):
    (tmp_path / "maps").mkdir()
    (tmp_path / "maps" / "small.fdf").write_text("".join(GRID), encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    grid = read_file(["fdf", "small.fdf"])
    assert grid == read_map(GRID)


def test_read_file_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(MapError, match="issue with the file"):
        read_file(["fdf", "absent.fdf"])


def test_read_file_bad_extension_checked_first(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(MapError, match="namefile.fdf"):
        read_file(["fdf", "absent.txt"])