"""Count peaks of a polygon that crosses the horizontal axis."""

import argparse
import sys
from collections import deque


def count_peaks(points):
    """Return ``(uncontained, innermost)`` peak counts for a polygon.

    ``points`` are the polygon's vertices in order.  A peak is a part of the
    polygon above the axis, bounded by two crossings.  ``uncontained`` counts
    peaks that lie inside no other peak, ``innermost`` peaks that hold none.
    """
    points = list(points)
    if not points:
        raise ValueError("polygon needs at least one vertex")
    (first_x, first_y), rest = points[0], points[1:]

    upside = opposite = first_y > 0
    crossings = deque()
    for x, y in rest:
        if (y < 0 and not upside) or (y > 0 and upside):
            continue
        upside = not upside
        crossings.append(x)

    if len(crossings) % 2:
        crossings.append(first_x)
    if opposite:
        crossings.rotate(-1)

    ends = iter(crossings)
    peaks = sorted(tuple(sorted(pair)) for pair in zip(ends, ends))

    stack = []
    uncontained = 0
    innermost = 1
    for peak in peaks:
        start, _ = peak
        if not stack:
            stack.append(peak)
            uncontained += 1
            continue
        if start < stack[-1][1]:
            stack.append(peak)
            continue
        innermost += 1
        while stack and stack[-1][1] < start:
            stack.pop()
        if not stack:
            uncontained += 1
        stack.append(peak)
    return uncontained, innermost


def main(argv=None):
    """Read N and N vertices from stdin; print the two peak counts."""
    argparse.ArgumentParser(description=main.__doc__).parse_args(argv)
    tokens = sys.stdin.read().split()
    count = int(tokens[0])
    coords = [int(token) for token in tokens[1:1 + 2 * count]]
    points = list(zip(coords[::2], coords[1::2]))
    uncontained, innermost = count_peaks(points)
    print(uncontained, innermost)


if __name__ == "__main__":
    main()