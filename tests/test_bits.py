import pytest

from gw2dat.bits import is_power_of_two, lowest_set_bit, num_set_bits


@pytest.mark.parametrize("k", range(32))
def test_lowest_set_bit_of_powers(k):
    assert lowest_set_bit(1 << k) == k


def test_lowest_set_bit_of_zero():
    assert lowest_set_bit(0) == 0


@pytest.mark.parametrize("value", [3, 6, 12, 0x80000001, 0xFFFF0000, 0x077CB531, 0xDEADBEEF])
def test_lowest_set_bit_invariant(value):
    index = lowest_set_bit(value)
    assert (value >> index) & 1 == 1
    assert value & ((1 << index) - 1) == 0


def test_lowest_set_bit_only_looks_at_32_bits():
    assert lowest_set_bit((1 << 40) | (1 << 5)) == 5


@pytest.mark.parametrize("k", range(32))
def test_num_set_bits_of_powers(k):
    assert num_set_bits(1 << k) == 1


def test_num_set_bits_zero_and_all():
    assert num_set_bits(0) == 0
    assert num_set_bits(0xFFFFFFFF) == 32


@pytest.mark.parametrize("a,b", [(0xF0, 0x0F), (0xFF000000, 0x00FF00FF), (0x1, 0x80000000)])
def test_num_set_bits_adds_for_disjoint_values(a, b):
    assert a & b == 0
    assert num_set_bits(a | b) == num_set_bits(a) + num_set_bits(b)


def test_num_set_bits_complement():
    value = 0x12345678
    assert num_set_bits(value) + num_set_bits(~value & 0xFFFFFFFF) == num_set_bits(0xFFFFFFFF)


@pytest.mark.parametrize("k", range(40))
def test_powers_of_two(k):
    assert is_power_of_two(1 << k)


def test_zero_counts_as_power_of_two():
    assert is_power_of_two(0)


@pytest.mark.parametrize("value", [3, 5, 6, 7, 12, 100, 0x80000001])
def test_not_powers_of_two(value):
    assert not is_power_of_two(value)