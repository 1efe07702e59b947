"""Count cells a painter can reach with limited sideways moves.

The grid holds ``0`` (free), ``1`` (wall) and ``2`` (start).  Vertical moves
are unlimited; at most ``max_left`` moves left and ``max_right`` moves right.
"""

import argparse
import sys
from collections import deque

_FREE, _PAINTED, _WALL = 0, 1, -1


def reachable_cells(grid, max_left, max_right):
    """Return the number of cells painted from the start cells."""
    rows = [str(row) for row in grid]
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must have equal length")
    height = len(rows)

    state = []
    queue = deque()
    for x, row in enumerate(rows):
        cells = []
        for y, char in enumerate(row):
            if char == "0":
                cells.append(_FREE)
            elif char == "1":
                cells.append(_WALL)
            elif char == "2":
                cells.append(_PAINTED)
                queue.append((x, y, 0, 0))
            else:
                raise ValueError(f"unexpected cell {char!r}")
        state.append(cells)

    while queue:
        x, y, left, right = queue.popleft()

        for step in (1, -1):
            nx = x + step
            while 0 <= nx < height and state[nx][y] == _FREE:
                state[nx][y] = _PAINTED
                queue.append((nx, y, left, right))
                nx += step

        ny = y + 1
        if ny < width and state[x][ny] == _FREE and right < max_right:
            state[x][ny] = _PAINTED
            queue.append((x, ny, left, right + 1))

        ny = y - 1
        if ny >= 0 and state[x][ny] == _FREE and left < max_left:
            state[x][ny] = _PAINTED
            queue.append((x, ny, left + 1, right))

    return sum(row.count(_PAINTED) for row in state)


def main(argv=None):
    """Read ``N M L R`` and the grid rows from stdin; print the count."""
    argparse.ArgumentParser(description=main.__doc__).parse_args(argv)
    tokens = sys.stdin.read().split()
    height, _, max_left, max_right = (int(token) for token in tokens[:4])
    print(reachable_cells(tokens[4:4 + height], max_left, max_right))


if __name__ == "__main__":
    main()