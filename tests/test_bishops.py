import io
import random

import pytest

from algosolve.bishops import main, max_bishops

EXAMPLE = [
    [1, 1, 0, 1, 1],
    [0, 1, 0, 0, 0],
    [1, 0, 1, 0, 1],
    [1, 0, 0, 0, 0],
    [1, 0, 1, 1, 1],
]


def test_worked_example():
    assert max_bishops(EXAMPLE) == 7


def test_no_allowed_squares():
    assert max_bishops([[0] * 4 for _ in range(4)]) == 0


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6])
def test_full_board(size):
    assert max_bishops([[1] * size for _ in range(size)]) == 2 * size - 2


def test_transpose_gives_same_answer():
    rng = random.Random(2)
    for _ in range(20):
        size = rng.randint(1, 6)
        board = [[rng.randint(0, 1) for _ in range(size)] for _ in range(size)]
        transposed = [list(column) for column in zip(*board)]
        assert max_bishops(board) == max_bishops(transposed)


def test_allowing_a_square_never_lowers_answer():
    rng = random.Random(9)
    for _ in range(20):
        size = rng.randint(2, 6)
        board = [[rng.randint(0, 1) for _ in range(size)] for _ in range(size)]
        before = max_bishops(board)
        x, y = rng.randrange(size), rng.randrange(size)
        board[x][y] = 1
        assert max_bishops(board) >= before


def test_non_square_board_rejected():
    with pytest.raises(ValueError):
        max_bishops([[1, 1, 1], [1, 1, 1]])


def test_main_prints_maximum(monkeypatch, capsys):
    text = "5\n" + "\n".join(" ".join(map(str, row)) for row in EXAMPLE)
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    main([])
    assert int(capsys.readouterr().out) == max_bishops(EXAMPLE)