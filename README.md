# aocpuzzles

Solvers for a selection of Advent of Code puzzles from 2021 and 2022. Each
puzzle day is its own module. Most solvers take the path of a puzzle input
file and return the answer; the package has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

Modules are named `y<year>_day<NN>`. The days included are:

- 2021: days 1, 2, 3, 4, 11, 12, 13
- 2022: days 1–10, 12–15, 17–21, 23, 24, 25

Shared helpers for reading input files and splitting lines
(`read_lines`, `lines_to_int`, `split_lines`, `split_lines_no_empty_strings`,
`get_bit`, `binary_string_to_int`) are in `aocpuzzles.common`.

## Usage

```python
from aocpuzzles import y2021_day01, y2022_day06, y2022_day25

y2021_day01.solve1("input.txt")    # number of depth increases
y2021_day01.solve2("input.txt")    # increases over three-measurement windows

with open("input.txt") as handle:
    stream = handle.readline().strip()
y2022_day06.solve(stream, 4)       # characters read when the first marker ends

y2022_day25.decimal_to_snafu(2022)  # "1=11-2"
y2022_day25.snafu_to_decimal("1=")  # 3
```

Most modules offer `solve1`/`solve2` or `solve`/`solve2` taking a file path.
Some take extra arguments or differ in shape:

- `y2021_day11.solve1(steps)` and `solve2()` take no file: they use the grids
  built into the module, `sample_grid()` and `puzzle_grid()` respectively.
- `y2021_day13` has `solve1(filename)` only, which applies every fold and
  counts the remaining dots.
- `y2022_day02.solve3(filename)` gives the same score as `solve2`, computed
  round by round.
- `y2022_day05.solve1(filename, stacks)` and `solve2(filename, stacks)` take
  the starting crate stacks, bottom crate first; `sample_stacks()` and
  `puzzle_stacks()` supply them.
- `y2022_day10.solve2(filename)` prints the rendered screen and returns 1;
  `render_screen(register_values(filename))` returns the same picture as a
  string.
- `y2022_day15.solve(filename, row)` counts the positions in one row where no
  beacon can be; `solve2(filename, limit)` returns the tuning frequency of the
  uncovered spot with both coordinates in `0..limit`.
- `y2022_day17.solve(filename, piece_count)` gives the tower height after the
  given number of rocks, skipping ahead once the jet pattern repeats.
- `y2022_day24.solve(filename, trips)` gives the minutes needed to cross the
  valley `trips` times.
- `y2022_day25.solve(filename)` returns the sum of the file's numbers in
  balanced base five.

Solvers raise `ValueError` when an input cannot be solved, for example when no
bingo board wins, a map has no start, or a path cannot be found.

## What is not included

The package has no command-line program, and it ships no puzzle input files:
pass the path of your own input to the solvers. Puzzles not listed above are
not covered.