# wirefdf

Tools for the data behind wireframe ("FdF") renderers:

- **Height maps** (`wirefdf.mapfile`): read `.fdf` grid files. Each
  space-separated token is an altitude, which may be followed by a colour
  such as `10,0xFF0000`. Every row must have as many columns as the first.
  A map that is not rectangular is rejected.
- **XPM images** (`wirefdf.xpm`): parse XPM data into an image of 32-bit
  pixel values. The data can be a list of strings or a file. Colours can be
  given as `#rrggbb` or as X11 colour names.
- **printf-style output** (`wirefdf.printf`): a small formatter supporting
  `%c %s %d %i %u %x %X %p %%`.

The package is pure Python with no runtime dependencies.

## Height maps

```python
from wirefdf.mapfile import read_map, MapError

lines = [
    "0 0 0",
    "0 10,0xFF0000 0",
    "0 0 0",
]
try:
    grid = read_map(lines)
except MapError as exc:
    print("bad map:", exc)
else:
    print(grid.width, grid.height)      # 3 3
    centre = grid.point(1, 1)           # Point(x=1, y=1, z=10, color=0xFF0000)
    print(grid.right_of(centre), grid.below(centre))
    for point in grid.points():
        ...
    print(grid.describe())
```

### Points

A `Point` is a frozen dataclass with four fields:

- `x` and `y`: the column and the row.
- `z`: the height.
- `color`: an `0xRRGGBB` value, `0xFFFFFF` when the token gives none.

### `HeightMap`

A `HeightMap` keeps its points in `rows`. It offers:

- `width` and `height`: the number of columns and rows, as properties.
- `point(x, y)`: the point at that position. Raises `IndexError` outside the grid.
- `points()`: every point, row after row.
- `right_of(point)` and `below(point)`: the neighbour in that direction, or `None` at the edge.
- `describe()`: one `xbase: …, ybase: …, zbase: …` line per point.

### Reading rules

`read_map(lines)` works as follows:

- It stops at the end of input or at the first empty line.
- It skips lines that hold no columns.
- It raises `MapError` in these cases:
  - there is no map;
  - a row's column count differs from the first row's;
  - a colour is malformed.

`parse_row(line, y)` turns a single cleaned line into a row of points.

### Reading from a file

`read_file(argv)` takes command-line style arguments: the program name and one `name.fdf`. It does three things:

1. It validates them with `check_arguments` and `check_extension`.
2. It opens the file under the `maps/` directory, relative to the current directory. The path comes from `wirefdf.lineparse.map_path`.
3. It reads the map.

Every failure raises `MapError`, with messages such as `usage: ./fdf filename.fdf`, `please enter namefile.fdf` or `issue with the file`.

### Line helpers

Lower-level helpers live in `wirefdf.lineparse`:

- `clean_line`: cuts a line at its newline and squeezes runs of spaces.
- `count_columns`: counts the columns of a line.
- `parse_int`: reads a leading integer, like C `atoi`.
- `parse_hex`: reads bare hex digits. Raises `ValueError` on anything else.
- `parse_color`: reads the `,0x…` part of a token.

## XPM images

```python
from wirefdf.xpm import xpm_to_image, xpm_file_to_image, XpmError

data = [
    "2 2 2 1",
    "a c #ff0000",
    "b c white",
    "ab",
    "ba",
]
image = xpm_to_image(data)
print(image.width, image.height)   # 2 2
print(hex(image.pixel(0, 0)))      # 0xff0000
```

An `XpmImage` holds `width`, `height` and the row-major `pixels` tuple.

The colour `None` is stored as `0xFF000000`. Unknown colour names resolve to 0.

`xpm_file_to_image(path)` reads an `.xpm` file. It blanks out C comments that are outside quotes (`strip_comments`) and takes the quoted strings in order (`quoted_lines`). Malformed or missing data raises `XpmError`.

Colour names are looked up case-insensitively with `wirefdf.colornames.lookup_color`. It raises `KeyError` for an unknown name.

`wirefdf.wordtab` provides the small search and split helpers the reader uses:

- `find_substring`
- `find_outside_quotes`
- `split_words`

## Formatting

```python
from wirefdf.printf import render, printf

text = render("x=%d hex=%x ptr=%p %s\n", -42, 255, 0x1000, "done")
count = printf("%i%%\n", 99)   # writes to stdout, returns characters written
```

`render` returns the text. `printf` writes it to `stream` (stdout by default) and returns its length.

Conversion behaviour:

- Unknown conversions produce nothing.
- Too few arguments raise `TypeError`.
- The per-conversion formatters are available on their own: `format_char`, `format_string`, `format_signed`, `format_unsigned`, `format_hex`, `format_pointer`.

## What it does not do

The package reads and describes maps. It does not:

- project points (isometric or otherwise);
- scale, centre or draw a wireframe;
- open a window or react to keys;
- provide a command-line program.

Those are left to whatever renderer uses it.

## Tests

Install the `test` extra and run `pytest` from the project root.