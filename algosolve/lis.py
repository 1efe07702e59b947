"""Longest strictly increasing subsequence with reconstruction."""

import argparse
import sys
from bisect import bisect_left


def longest_increasing_subsequence(values):
    """Return one longest strictly increasing subsequence of ``values``."""
    values = list(values)
    tails = []
    ranks = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
        ranks.append(position)

    wanted = len(tails) - 1
    picked = []
    for value, rank in zip(reversed(values), reversed(ranks)):
        if rank == wanted:
            picked.append(value)
            wanted -= 1
    picked.reverse()
    return picked


def main(argv=None):
    """Read N and N numbers from stdin; print the length and the subsequence."""
    argparse.ArgumentParser(description=main.__doc__).parse_args(argv)
    tokens = sys.stdin.read().split()
    count = int(tokens[0])
    values = [int(token) for token in tokens[1:1 + count]]
    subsequence = longest_increasing_subsequence(values)
    print(len(subsequence))
    print(" ".join(map(str, subsequence)))


if __name__ == "__main__":
    main()