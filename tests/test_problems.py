import pytest

from algodesign.algorithms import count_paths, longest_slope, max_product, max_profit
from algodesign.problems import (
    InputError,
    solve_digit_split,
    solve_job_assignment,
    solve_kth_smallest,
    solve_pawn_paths,
    solve_selection,
    solve_ski,
)


def test_kth_smallest_reads_sequence():
    nums = [3, 1, 4, 1, 5]
    assert solve_kth_smallest("5\n3 1 4 1 5\n2") == sorted(nums)[1]
    assert solve_kth_smallest("5 3 1 4 1 5 5") == max(nums)


@pytest.mark.parametrize(
    "text", ["", "x", "3 1 2", "3 1 2 z", "3 1 2 3", "3 1 2 3 0", "3 1 2 3 4", "-1 1"]
)
def test_kth_smallest_rejects_bad_input(text):
    with pytest.raises(InputError):
        solve_kth_smallest(text)


def test_selection_reads_n_k_then_array():
    nums = [9, 2, 7, 4]
    assert solve_selection("4 3\n9 2 7 4") == sorted(nums)[2]


@pytest.mark.parametrize(
    "text", ["4 4\n1 2 3 4", "4 0\n1 2 3 4", "101 1\n1", "4 2\n1 2 3", "4", "a b"]
)
def test_selection_rejects_bad_input(text):
    with pytest.raises(InputError):
        solve_selection(text)


def test_digit_split_delegates_to_max_product():
    assert solve_digit_split("4 1\n1231\n") == max_product("1231", 1)
    assert solve_digit_split("  5  2 \n\n31415") == max_product("31415", 2)


@pytest.mark.parametrize(
    "text",
    ["4 1", "4\n1231", "4 1 2\n1231", "a 1\n1231", "4 4\n1231", "0 0\n", "4 -1\n1231", "4 1\n123"],
)
def test_digit_split_rejects_bad_input(text):
    with pytest.raises(InputError):
        solve_digit_split(text)


def test_ski_reads_grid():
    text = "2 3\n1 2 3\n6 5 4"
    assert solve_ski(text) == longest_slope([[1, 2, 3], [6, 5, 4]])
    assert solve_ski(text) == 2 * 3


def test_ski_empty_grid():
    assert solve_ski("0 0") == 0


@pytest.mark.parametrize("text", ["", "2", "2 2\n1 2 3", "-1 2", "1 2 a b"])
def test_ski_rejects_bad_input(text):
    with pytest.raises(InputError):
        solve_ski(text)


def test_pawn_paths_reads_four_values():
    assert solve_pawn_paths("6 6 3 3") == count_paths(6, 6, 3, 3)
    assert solve_pawn_paths("20 20 0 0\n") == count_paths(20, 20, 0, 0)


@pytest.mark.parametrize(
    "text", ["6 6 3", "6  6 3 3", "6 6 3 3 3", "21 6 3 3", "6 -1 3 3", "6 6 x 3", "6 6 3 21"]
)
def test_pawn_paths_rejects_bad_input(text):
    with pytest.raises(InputError):
        solve_pawn_paths(text)


def test_job_assignment_reads_jobs_and_workers():
    text = "3 4\n2 10\n4 20\n6 30\n1 4 5 7"
    assert solve_job_assignment(text) == max_profit([2, 4, 6], [10, 20, 30], [1, 4, 5, 7])


@pytest.mark.parametrize("text", ["", "2", "2 1\n1 2\n3", "1 2\n1 5\n3", "1 1\nx 5\n3"])
def test_job_assignment_rejects_bad_input(text):
    with pytest.raises(InputError):
        solve_job_assignment(text)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        solve_selection("1 1")