import io

import pytest

from arborlab.rotation import main, rotate_values

VALUES = [1, 2, 3, 4, 5]


def test_left_rotation_example():
    assert rotate_values(VALUES, 2, "L") == [3, 4, 5, 1, 2]


def test_right_rotation_example():
    assert rotate_values(VALUES, 2, "R") == [4, 5, 1, 2, 3]


@pytest.mark.parametrize("k", range(0, 6))
def test_left_then_right_restores(k):
    left = rotate_values(VALUES, k, "L")
    assert rotate_values(left, k, "R") == VALUES
    assert sorted(left) == VALUES


@pytest.mark.parametrize("direction", ["L", "R"])
def test_full_turn_is_identity(direction):
    assert rotate_values(VALUES, len(VALUES), direction) == VALUES
    assert rotate_values(VALUES, 0, direction) == VALUES


@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_large_rotations_wrap(k):
    assert rotate_values(VALUES, k + len(VALUES), "L") == rotate_values(VALUES, k, "L")


def test_non_r_direction_rotates_left():
    assert rotate_values(VALUES, 3, "x") == rotate_values(VALUES, 3, "L")


def test_empty_values_rejected():
    with pytest.raises(ValueError):
        rotate_values([], 1, "L")


def test_negative_rotations_rejected():
    with pytest.raises(ValueError):
        rotate_values(VALUES, -1, "L")


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 2 L\n1 2 3 4 5\nn\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert (
        "User entered: Length = 5, NumRotations = 2, and will rotate in L direction."
        in out
    )
    assert "Initial List: 1 2 3 4 5 \n" in out
    assert "Rotated List: 3 4 5 1 2 \n" in out
    assert out.endswith("...Exiting Program ...\n")


def test_main_repeats_until_not_y(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1 R 7 8 y 1 0 L 9 n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Rotated List:") == 2


def test_main_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 1 L 1 2"))
    assert main([]) == 1
    assert "Invalid input" in capsys.readouterr().out