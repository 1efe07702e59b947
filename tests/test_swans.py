import io
import random

import pytest

from algosolve.swans import days_until_meet, main

EXAMPLE = [
    "...XXXXXX..XX.XXX",
    "....XXXXXXXXX.XXX",
    "...XXXXXXXXXXXX..",
    "..XXXXX.LXXXXXX..",
    ".XXXXXX..XXXXXX..",
    "XXXXXXX...XXXX...",
    "..XXXXX...XXX....",
    "....XXXXX.XXXL...",
]


def _random_lake(rng, height, width):
    cells = [["X" if rng.random() < 0.6 else "." for _ in range(width)] for _ in range(height)]
    spots = rng.sample([(x, y) for x in range(height) for y in range(width)], 2)
    for x, y in spots:
        cells[x][y] = "L"
    return ["".join(row) for row in cells]


def test_worked_example():
    assert days_until_meet(EXAMPLE) == 2


def test_already_connected():
    assert days_until_meet(["L.L"]) == 0


def test_single_ice_wall():
    assert days_until_meet(["LXL"]) == 1


def test_mirror_and_transpose_keep_answer():
    rng = random.Random(4)
    for _ in range(20):
        lake = _random_lake(rng, rng.randint(2, 7), rng.randint(2, 7))
        expected = days_until_meet(lake)
        assert days_until_meet([row[::-1] for row in lake]) == expected
        assert days_until_meet(lake[::-1]) == expected
        assert days_until_meet(["".join(col) for col in zip(*lake)]) == expected


def test_melting_a_cell_never_delays():
    rng = random.Random(8)
    for _ in range(20):
        lake = _random_lake(rng, 5, 6)
        ice = [(x, y) for x, row in enumerate(lake) for y, c in enumerate(row) if c == "X"]
        if not ice:
            continue
        x, y = rng.choice(ice)
        thawed = list(lake)
        thawed[x] = thawed[x][:y] + "." + thawed[x][y + 1:]
        assert days_until_meet(thawed) <= days_until_meet(lake)


@pytest.mark.parametrize("lake", [["L.."], ["LLL"], ["X.X"]])
def test_wrong_swan_count_rejected(lake):
    with pytest.raises(ValueError):
        days_until_meet(lake)


def test_main_prints_days(monkeypatch, capsys):
    text = f"{len(EXAMPLE)} {len(EXAMPLE[0])}\n" + "\n".join(EXAMPLE) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    main([])
    assert int(capsys.readouterr().out) == days_until_meet(EXAMPLE)