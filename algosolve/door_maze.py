"""Shortest escape through a grid of rotating doors.

Cells hold ``A`` (open both ways), ``B`` (closed), ``C`` (vertical passage)
or ``D`` (horizontal passage).  Rotating at a cell turns every C/D door in
its row and in its column by a quarter turn, at a cost of one move.
"""

import argparse
import sys
from collections import deque

_MOVES = ((0, 1), (0, -1), (1, 0), (-1, 0))
_TURNED = {"C": "D", "D": "C"}


def _door(grid, row_mask, col_mask, x, y):
    door = grid[x][y]
    if row_mask >> x & 1:
        door = _TURNED.get(door, door)
    if col_mask >> y & 1:
        door = _TURNED.get(door, door)
    return door


def _can_move(here, there, vertical):
    if "B" in (here, there):
        return False
    if here == "A":
        return (
            there == "A"
            or (there == "C" and vertical)
            or (there == "D" and not vertical)
        )
    if here == "C":
        return there in ("C", "A") and vertical
    if here == "D":
        return there in ("D", "A") and not vertical
    return False


def shortest_escape(grid):
    """Return the fewest moves from the top-left to the bottom-right cell.

    Returns ``None`` when the exit cannot be reached.
    """
    grid = [str(row) for row in grid]
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must have equal length")
    height = len(grid)
    target = (height - 1, width - 1)

    start = (0, 0, 0, 0)
    distance = {start: 0}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        row_mask, col_mask, x, y = state
        if (x, y) == target:
            return distance[state]
        steps = distance[state] + 1
        here = _door(grid, row_mask, col_mask, x, y)
        for dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < height and 0 <= ny < width):
                continue
            following = (row_mask, col_mask, nx, ny)
            if following in distance:
                continue
            there = _door(grid, row_mask, col_mask, nx, ny)
            if not _can_move(here, there, dx != 0):
                continue
            distance[following] = steps
            queue.append(following)

        turned = (row_mask ^ (1 << x), col_mask ^ (1 << y), x, y)
        if turned not in distance:
            distance[turned] = steps
            queue.append(turned)
    return None


def main(argv=None):
    """Read ``N M`` and the door grid from stdin; print the answer or -1."""
    argparse.ArgumentParser(description=main.__doc__).parse_args(argv)
    tokens = sys.stdin.read().split()
    height, width = int(tokens[0]), int(tokens[1])
    cells = "".join(tokens[2:])
    grid = [cells[row * width:(row + 1) * width] for row in range(height)]
    result = shortest_escape(grid)
    print(-1 if result is None else result)


if __name__ == "__main__":
    main()