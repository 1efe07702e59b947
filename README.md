# algosolve

A set of small, self-contained solvers for classic algorithmic problems.
Each one can be used as a Python function or run as a command that reads
the problem from standard input and writes the answer to standard output.
There are no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Solvers

| Module | Function | Command |
| --- | --- | --- |
| `algosolve.sliding_min` | `sliding_window_minimum(values, width)` | `algosolve-sliding-min` |
| `algosolve.lis` | `longest_increasing_subsequence(values)` | `algosolve-lis` |
| `algosolve.door_maze` | `shortest_escape(grid)` | `algosolve-door-maze` |
| `algosolve.hills` | `count_peaks(points)` | `algosolve-hills` |
| `algosolve.paint_reach` | `reachable_cells(grid, max_left, max_right)` | `algosolve-paint-reach` |
| `algosolve.kmp` | `failure_table(pattern)`, `find_all(text, pattern)` | `algosolve-kmp` |
| `algosolve.bishops` | `max_bishops(board)` | `algosolve-bishops` |
| `algosolve.swans` | `days_until_meet(grid)` | `algosolve-swans` |
| `algosolve.grass` | `minimum_cost(cows, grasses)` | `algosolve-grass` |

- **sliding_window_minimum**: for every position, the minimum of the last
  `width` values; the first `width - 1` results cover the shorter windows
  that end there. Raises `ValueError` if `width` is less than 1.
- **longest_increasing_subsequence**: one longest strictly increasing
  subsequence, as a list. The command prints its length and then the values.
- **shortest_escape**: the fewest moves from the top-left to the
  bottom-right cell of a grid of `A` (open), `B` (closed), `C` (vertical
  passage) and `D` (horizontal passage) cells. A move is a step to a
  neighbouring cell the doors allow, or a rotation at the current cell that
  turns every `C`/`D` door in its row and column. Returns `None` when the
  exit cannot be reached; the command prints `-1` then.
- **count_peaks**: from the vertices of a polygon crossing the horizontal
  axis, a pair `(uncontained, innermost)`: the number of peaks lying inside
  no other peak and the number of peaks holding no other peak.
- **reachable_cells**: the number of cells reachable from the start cells
  (`2`) through free cells (`0`), avoiding walls (`1`), with unlimited
  vertical moves and at most `max_left` left and `max_right` right moves.
- **failure_table**: for each prefix of a pattern, the length of its
  longest proper border.
- **find_all**: every 1-based position where a pattern occurs in a text,
  overlapping matches included. Raises `ValueError` for an empty pattern.
  The command reads the text and the pattern as two lines and prints the
  number of matches followed by one position per line.
- **max_bishops**: the largest number of bishops that can stand on the
  squares marked `1` of a square board without attacking one another.
- **days_until_meet**: on a lake of `.` (water), `X` (ice) and `L` (a swan
  on water), where each day all ice touching water melts, the number of days
  before the two swans are connected. Raises `ValueError` unless there are
  exactly two swans.
- **minimum_cost**: given cows and grasses as `(price, greenness)` pairs,
  where a cow accepts a grass costing at least its price and at least as
  green as it demands, the least total price that gives each cow a distinct
  grass. Returns `None` if some cow cannot be fed; the command prints `-1`
  then.

## Example

```python
from algosolve.kmp import find_all
from algosolve.lis import longest_increasing_subsequence

print(find_all("ABC ABCDAB ABCDABCDABDE", "ABCDABD"))        # [16]
print(longest_increasing_subsequence([10, 20, 10, 30, 20, 50]))  # [10, 20, 30, 50]
```

From the shell, each command reads its input in the usual whitespace
separated form (and accepts `--help`):

```
echo "6
10 20 10 30 20 50" | algosolve-lis
```

## Running the tests

```
pip install .[test]
pytest
```