"""Substring search with the Knuth-Morris-Pratt failure table."""

import argparse
import sys


def failure_table(pattern):
    """Return, per prefix, the length of its longest proper border."""
    table = [0] * len(pattern)
    border = 0
    for index, char in enumerate(pattern[1:], 1):
        while border > 0 and pattern[border] != char:
            border = table[border - 1]
        if pattern[border] == char:
            border += 1
        table[index] = border
    return table


def find_all(text, pattern):
    """Return the 1-based start positions of every match, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = failure_table(pattern)
    length = len(pattern)
    positions = []
    matched = 0
    for index, char in enumerate(text):
        while matched > 0 and pattern[matched] != char:
            matched = table[matched - 1]
        if pattern[matched] == char:
            matched += 1
        if matched == length:
            positions.append(index - length + 2)
            matched = table[matched - 1]
    return positions


def main(argv=None):
    """Read a text line and a pattern line; print the count and positions."""
    argparse.ArgumentParser(description=main.__doc__).parse_args(argv)
    text = sys.stdin.readline().rstrip("\r\n")
    pattern = sys.stdin.readline().rstrip("\r\n")
    positions = find_all(text, pattern)
    print(len(positions))
    for position in positions:
        print(position)


if __name__ == "__main__":
    main()