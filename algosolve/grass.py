"""Cheapest way to feed picky cows, each with a distinct grass."""

import argparse
import sys
from bisect import bisect_left, insort
from collections import deque


def _pickiest_first(item):
    price, greenness = item
    return -greenness, price


def minimum_cost(cows, grasses):
    """Return the least total price, or ``None`` if some cow cannot be fed.

    Each cow and grass is a ``(price, greenness)`` pair; a cow accepts a grass
    costing at least its price and at least as green as it demands.
    """
    pending = deque(sorted(grasses, key=_pickiest_first))
    available = []
    total = 0
    for price, greenness in sorted(cows, key=_pickiest_first):
        while pending and pending[0][1] >= greenness:
            insort(available, pending.popleft()[0])
        position = bisect_left(available, price)
        if position == len(available):
            return None
        total += available.pop(position)
    return total


def main(argv=None):
    """Read ``N M``, N cows and M grasses from stdin; print the cost or -1."""
    argparse.ArgumentParser(description=main.__doc__).parse_args(argv)
    tokens = [int(token) for token in sys.stdin.read().split()]
    cow_count, grass_count = tokens[0], tokens[1]
    pairs = list(zip(tokens[2::2], tokens[3::2]))
    cows = pairs[:cow_count]
    grasses = pairs[cow_count:cow_count + grass_count]
    result = minimum_cost(cows, grasses)
    print(-1 if result is None else result)


if __name__ == "__main__":
    main()