"""Reading ``.fdf`` height maps into a grid of points."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from wirefdf.lineparse import (
    DEFAULT_COLOR,
    clean_line,
    count_columns,
    map_path,
    parse_color,
    parse_int,
)
from wirefdf.printf import render

USAGE = "usage: ./fdf filename.fdf"


class MapError(Exception):
    """Raised when a map cannot be found, opened or read."""


@dataclass(frozen=True)
class Point:
    """One grid point: column, row, height and colour (0xRRGGBB)."""

    x: int
    y: int
    z: int
    color: int = DEFAULT_COLOR


@dataclass(frozen=True)
class HeightMap:
    """A rectangular grid of points, stored row by row."""

    rows: tuple[tuple[Point, ...], ...]

    def __post_init__(self) -> None:
        widths = {len(row) for row in self.rows}
        if len(widths) > 1:
            raise MapError("maps not rectangular")

    @property
    def width(self) -> int:
        """Number of columns."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def point(self, x: int, y: int) -> Point:
        """Return the point at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"point ({x}, {y}) outside {self.width}x{self.height} map")
        return self.rows[y][x]

    def points(self) -> Iterator[Point]:
        """Yield every point, row after row."""
        for row in self.rows:
            yield from row

    def right_of(self, point: Point) -> Point | None:
        """Return the neighbour in the next column, or None at the edge."""
        self.point(point.x, point.y)
        if point.x + 1 >= self.width:
            return None
        return self.rows[point.y][point.x + 1]

    def below(self, point: Point) -> Point | None:
        """Return the neighbour in the next row, or None at the edge."""
        self.point(point.x, point.y)
        if point.y + 1 >= self.height:
            return None
        return self.rows[point.y + 1][point.x]

    def describe(self) -> str:
        """Return one line per point giving its base coordinates."""
        return "".join(
            render("xbase: %i, ybase: %i, zbase: %i, \n", p.x, p.y, p.z)
            for p in self.points()
        )


def check_arguments(argv: Sequence[str]) -> str:
    """Return the map name from a command line of exactly one argument."""
    if len(argv) != 2:
        raise MapError(USAGE)
    return argv[1]


def check_extension(name: str) -> str:
    """Return ``name`` if it ends in ``.fdf``; raise MapError otherwise."""
    if not name.endswith(".fdf"):
        raise MapError("please enter namefile.fdf")
    return name


def parse_row(line: str, y: int) -> tuple[Point, ...]:
    """Turn a cleaned map line into the points of row ``y``."""
    count = count_columns(line)
    tokens = [token for token in line.split(" ") if token]
    if len(tokens) < count:
        raise MapError(f"malformed row: {line!r}")
    points = []
    for x, token in enumerate(tokens[:count]):
        try:
            color = parse_color(token)
        except ValueError as exc:
            raise MapError(f"bad colour in {token!r}") from exc
        points.append(Point(x, y, parse_int(token), color))
    return tuple(points)


def read_map(lines: Iterable[str]) -> HeightMap:
    """Read map lines until the input ends or a blank line is met.

    Lines holding no columns are skipped. Every other line must have as
    many columns as the first one.
    """
    source = iter(lines)
    line = clean_line(next(source, None))
    if line is None:
        raise MapError("no map")
    columns = count_columns(line)
    rows: list[tuple[Point, ...]] = []
    while line is not None:
        count = count_columns(line)
        if count:
            if count != columns:
                raise MapError("maps not rectangular")
            rows.append(parse_row(line, len(rows)))
        raw = next(source, None)
        if raw is None:
            break
        line = clean_line(raw)
    if not rows:
        raise MapError("no map")
    return HeightMap(tuple(rows))


def read_file(argv: Sequence[str]) -> HeightMap:
    """Load the map named on the command line from the ``maps`` directory."""
    name = check_extension(check_arguments(argv))
    path = map_path(name)
    try:
        handle = path.open(encoding="utf-8")
    except OSError as exc:
        raise MapError("issue with the file") from exc
    with handle:
        return read_map(handle)