"""Place as many non-attacking bishops as possible on allowed squares."""

import argparse
import sys


def _best_on_colour(diagonals):
    """Pick at most one square per anti-diagonal with no shared diagonal."""
    best = 0
    used = set()

    def search(position, count):
        nonlocal best
        if count + len(diagonals) - position <= best:
            return
        if position == len(diagonals):
            best = count
            return
        for difference in diagonals[position]:
            if difference not in used:
                used.add(difference)
                search(position + 1, count + 1)
                used.discard(difference)
        search(position + 1, count)

    search(0, 0)
    return best


def max_bishops(board):
    """Return the largest number of mutually safe bishops on squares marked 1."""
    rows = [list(row) for row in board]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("board must be square")

    total = 0
    for colour in (0, 1):
        diagonals = []
        for total_index in range(colour, 2 * size - 1, 2):
            low = max(0, total_index - size + 1)
            high = min(size - 1, total_index)
            differences = [
                x - (total_index - x)
                for x in range(low, high + 1)
                if rows[x][total_index - x]
            ]
            if differences:
                diagonals.append(differences)
        total += _best_on_colour(diagonals)
    return total


def main(argv=None):
    """Read N and an N by N board of 0/1 from stdin; print the maximum."""
    argparse.ArgumentParser(description=main.__doc__).parse_args(argv)
    tokens = sys.stdin.read().split()
    size = int(tokens[0])
    cells = [int(token) for token in tokens[1:1 + size * size]]
    board = [cells[row * size:(row + 1) * size] for row in range(size)]
    print(max_bishops(board))


if __name__ == "__main__":
    main()