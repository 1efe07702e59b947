import io
import random

import pytest

from algosolve.kmp import failure_table, find_all, main

TEXT = "ABC ABCDAB ABCDABCDABDE"
PATTERN = "ABCDABD"


def test_worked_example():
    assert find_all(TEXT, PATTERN) == [16]


def test_failure_table_values():
    assert failure_table("aabaa") == [0, 1, 0, 1, 2]


def test_overlapping_matches():
    assert find_all("aaaa", "aa") == [1, 2, 3]


def test_failure_table_entries_are_borders():
    rng = random.Random(11)
    for _ in range(30):
        pattern = "".join(rng.choice("ab") for _ in range(rng.randint(1, 15)))
        for index, border in enumerate(failure_table(pattern)):
            prefix = pattern[:index + 1]
            assert border < len(prefix)
            assert prefix[:border] == prefix[len(prefix) - border:]


def test_matches_agree_with_startswith():
    rng = random.Random(5)
    for _ in range(50):
        text = "".join(rng.choice("abc") for _ in range(rng.randint(0, 30)))
        pattern = "".join(rng.choice("abc") for _ in range(rng.randint(1, 3)))
        expected = [i + 1 for i in range(len(text)) if text.startswith(pattern, i)]
        assert find_all(text, pattern) == expected


def test_empty_pattern_rejected():
    with pytest.raises(ValueError):
        find_all("abc", "")


def test_main_prints_count_and_positions(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{TEXT}\n{PATTERN}\n"))
    main([])
    lines = [int(line) for line in capsys.readouterr().out.split()]
    positions = find_all(TEXT, PATTERN)
    assert lines == [len(positions), *positions]