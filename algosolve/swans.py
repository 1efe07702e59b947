"""Days until two swans on a melting lake can meet.

The lake holds ``.`` (water), ``X`` (ice) and ``L`` (a swan on water).  Each
day every ice cell touching water melts.
"""

import argparse
import sys

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def days_until_meet(grid):
    """Return the number of days after which the two swans are connected."""
    rows = [str(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("lake must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("lake rows must have equal length")
    if any(char not in ".XL" for row in rows for char in row):
        raise ValueError("lake cells must be '.', 'X' or 'L'")
    height = len(rows)

    swans = [x * width + y for x, row in enumerate(rows) for y, char in enumerate(row) if char == "L"]
    if len(swans) != 2:
        raise ValueError("lake must hold exactly two swans")

    parent = list(range(height * width))

    def find(cell):
        root = cell
        while parent[root] != root:
            root = parent[root]
        while parent[cell] != root:
            parent[cell], cell = root, parent[cell]
        return root

    def union(a, b):
        root_a, root_b = find(a), find(b)
        if root_a < root_b:
            parent[root_b] = root_a
        else:
            parent[root_a] = root_b

    def neighbours(x, y):
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < height and 0 <= ny < width:
                yield nx, ny

    water = [[char != "X" for char in row] for row in rows]
    frontier = [(x, y) for x in range(height) for y in range(width) if water[x][y]]

    day = 0
    while frontier:
        for x, y in frontier:
            for nx, ny in neighbours(x, y):
                if water[nx][ny]:
                    union(x * width + y, nx * width + ny)
        if find(swans[0]) == find(swans[1]):
            break

        melted = []
        for x, y in frontier:
            for nx, ny in neighbours(x, y):
                if not water[nx][ny]:
                    water[nx][ny] = True
                    melted.append((nx, ny))
        frontier = melted
        day += 1
    return day


def main(argv=None):
    """Read ``R C`` and the lake from stdin; print the number of days."""
    argparse.ArgumentParser(description=main.__doc__).parse_args(argv)
    tokens = sys.stdin.read().split()
    height, width = int(tokens[0]), int(tokens[1])
    cells = "".join(tokens[2:])
    grid = [cells[row * width:(row + 1) * width] for row in range(height)]
    print(days_until_meet(grid))


if __name__ == "__main__":
    main()