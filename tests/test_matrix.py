import pytest

from coursebook.matrix import main, pretty_print, transpose

SAMPLE = [[101, 102, 103], [201, 202, 203], [301, 302, 303]]
SAMPLE_T = [[101, 201, 301], [102, 202, 302], [103, 203, 303]]


def test_transpose():
    assert transpose(SAMPLE) == SAMPLE_T


def test_transpose_does_not_change_input():
    grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    transpose(grid)
    assert grid == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


def test_transpose_twice_is_identity():
    grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert transpose(transpose(grid)) == grid


def test_transpose_non_square():
    assert transpose([[1, 2, 3], [4, 5, 6]]) == [[1, 4], [2, 5], [3, 6]]


def test_transpose_ragged_rows_rejected():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])


def test_pretty_print_rows(capsys):
    pretty_print([[1, 2, 3], [4, 5, 6]])
    assert capsys.readouterr().out == "[1, 2, 3]\n[4, 5, 6]\n"


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "matrix:"
    assert lines[1:4] == [str(row) for row in SAMPLE]
    assert lines[4] == "transposed:"
    assert lines[5:] == [str(row) for row in SAMPLE_T]