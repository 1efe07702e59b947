"""Minimum of every window of a fixed width sliding over a sequence."""

import argparse
import sys
from collections import deque


def sliding_window_minimum(values, width):
    """Return, for each position, the minimum of the last ``width`` values.

    The first ``width - 1`` results cover the shorter windows that end there.
    """
    if width < 1:
        raise ValueError("width must be at least 1")
    window = deque()
    minima = []
    for index, value in enumerate(values):
        if window and window[0][0] <= index - width:
            window.popleft()
        while window and window[-1][1] > value:
            window.pop()
        window.append((index, value))
        minima.append(window[0][1])
    return minima


def main(argv=None):
    """Read ``N L`` and N numbers from stdin and print the window minima."""
    argparse.ArgumentParser(description=main.__doc__).parse_args(argv)
    tokens = sys.stdin.read().split()
    count, width = int(tokens[0]), int(tokens[1])
    values = [int(token) for token in tokens[2:2 + count]]
    print(" ".join(map(str, sliding_window_minimum(values, width))))


if __name__ == "__main__":
    main()