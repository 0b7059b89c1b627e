import pytest

from dsakit.bits import bits_to_flip, count_set_bits, is_power_of_two


@pytest.mark.parametrize("value", [0, 1, 10, 20, 255, 1023])
def test_flip_against_self_is_zero(value):
    assert bits_to_flip(value, value) == 0


@pytest.mark.parametrize("value", [0, 6, 10, 20, 255])
def test_flip_against_zero_counts_set_bits(value):
    assert bits_to_flip(value, 0) == count_set_bits(value)


@pytest.mark.parametrize("a,b", [(10, 20), (3, 12), (7, 8), (100, 1)])
def test_flip_is_symmetric(a, b):
    assert bits_to_flip(a, b) == bits_to_flip(b, a)


def test_flip_of_complementary_masks():
    assert bits_to_flip(0b1010, 0b0101) == count_set_bits(0b1111)


def test_flip_example():
    assert bits_to_flip(10, 20) == 4


def test_flip_when_both_negative_is_zero():
    assert bits_to_flip(-5, -9) == 0


@pytest.mark.parametrize("k", range(0, 40, 7))
def test_single_bit_counts_one(k):
    assert count_set_bits(1 << k) == 1


@pytest.mark.parametrize("n", [0, -1, -6])
def test_set_bits_non_positive(n):
    assert count_set_bits(n) == 0


def test_set_bits_all_ones():
    assert count_set_bits((1 << 12) - 1) == 12


@pytest.mark.parametrize("k", range(0, 40, 5))
def test_powers_of_two(k):
    assert is_power_of_two(1 << k) is True


@pytest.mark.parametrize("n", [0, 31, 6, 12, -2, -4, -1])
def test_not_powers_of_two(n):
    assert is_power_of_two(n) is False


@pytest.mark.parametrize("n", range(1, 200))
def test_power_of_two_matches_single_bit(n):
    assert is_power_of_two(n) == (count_set_bits(n) == 1)