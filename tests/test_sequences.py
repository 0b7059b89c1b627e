import math
import random

import pytest

from dsakit.sequences import (
    factorial_digits,
    insert_at,
    max_subarray_sum,
    min_jumps,
    move_negatives_left,
    reverse_chars,
    reverse_word,
    sort_by_parity_alternating,
    to_24_hour,
    trapping_water,
)


@pytest.mark.parametrize("text", ["", "a", "geeks", "abcd"])
def test_reverse_word_round_trip(text):
    assert reverse_word(reverse_word(text)) == text


def test_reverse_word_swaps_ends():
    result = reverse_word("geeks")
    assert result[0] == "s"
    assert result[-1] == "g"
    assert sorted(result) == sorted("geeks")


def test_reverse_chars_in_place():
    chars = list("hello")
    reverse_chars(chars)
    assert chars == ["o", "l", "l", "e", "h"]


def test_reverse_chars_twice_restores():
    chars = list("racecars")
    reverse_chars(chars)
    reverse_chars(chars)
    assert chars == list("racecars")


def test_move_negatives_left_partition():
    values = [-12, 11, -13, -5, 6, -7, 5, -3, -6]
    result = move_negatives_left(values)
    negatives = [v for v in values if v < 0]
    assert result[: len(negatives)] == negatives
    assert all(v >= 0 for v in result[len(negatives):])
    assert sorted(result) == sorted(values)


def test_move_negatives_left_leaves_input():
    values = [1, -1]
    assert move_negatives_left(values) == [-1, 1]
    assert values == [1, -1]


@pytest.mark.parametrize("seed", range(5))
def test_sort_by_parity_alternating(seed):
    rng = random.Random(seed)
    values = [rng.randrange(0, 50, 2) for _ in range(6)] + [
        rng.randrange(1, 50, 2) for _ in range(6)
    ]
    rng.shuffle(values)
    result = sort_by_parity_alternating(values)
    assert sorted(result) == sorted(values)
    assert all(v % 2 == i % 2 for i, v in enumerate(result))


def test_sort_by_parity_alternating_unbalanced_raises():
    with pytest.raises(ValueError):
        sort_by_parity_alternating([1, 3])


def test_insert_at_middle():
    assert insert_at([1, 2, 4, 5], 2, 3) == [1, 2, 3, 4, 5]


def test_insert_at_end_and_start():
    assert insert_at([1, 2], 2, 9) == [1, 2, 9]
    assert insert_at([1, 2], 0, 9) == [9, 1, 2]


@pytest.mark.parametrize("index", [-1, 3])
def test_insert_at_out_of_range(index):
    with pytest.raises(IndexError):
        insert_at([1, 2], index, 7)


def test_max_subarray_sum_all_positive_is_total():
    values = [4, 1, 8, 2]
    assert max_subarray_sum(values) == sum(values)


def test_max_subarray_sum_isolated_peak():
    assert max_subarray_sum([-5, 7, -5]) == 7


def test_max_subarray_sum_all_negative_matches_empty():
    assert max_subarray_sum([-3, -1]) == max_subarray_sum([])


def test_min_jumps_example():
    assert min_jumps([1, 3, 5, 8, 9, 2, 6, 7, 6, 8, 9]) == 3


def test_min_jumps_single_steps():
    values = [1, 1, 1, 1]
    assert min_jumps(values) == len(values) - 1


@pytest.mark.parametrize("values", [[0, 1], [1, 0, 1]])
def test_min_jumps_unreachable(values):
    assert min_jumps(values) is None


def test_trapping_water_example():
    assert trapping_water([3, 0, 0, 2, 0, 4]) == 10


def test_trapping_water_monotone_holds_nothing():
    assert trapping_water([1, 2, 3, 4]) == trapping_water([])
    assert trapping_water([4, 3, 2, 1]) == trapping_water([])


@pytest.mark.parametrize("n", [0, 1, 5, 10, 25])
def test_factorial_digits_round_trip(n):
    digits = factorial_digits(n)
    assert int("".join(map(str, digits))) == math.factorial(n)
    assert all(0 <= d <= 9 for d in digits)


def test_factorial_digits_negative_is_one():
    assert factorial_digits(-3) == factorial_digits(0) == [1]


def test_to_24_hour_source_example():
    assert to_24_hour("07:05:45PM") == "19:05:45"


def test_to_24_hour_midnight_and_noon():
    assert to_24_hour("12:00:00AM") == "00:00:00"
    assert to_24_hour("12:45:54PM") == "12:45:54"


def test_to_24_hour_morning_unchanged():
    assert to_24_hour("07:05:45AM") == "07:05:45"


@pytest.mark.parametrize("text", ["", "7:05:45P", "ab:05:45PM"])
def test_to_24_hour_rejects_malformed(text):
    with pytest.raises(ValueError):
        to_24_hour(text)