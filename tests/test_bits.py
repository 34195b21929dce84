import pytest

from dspkit.bits import count_bits


def test_zero_has_no_bits():
    assert count_bits(0) == 0


def test_all_ones_32_bit():
    assert count_bits(0xFFFFFFFF) == 32


def test_all_ones_64_bit():
    assert count_bits(0xFFFFFFFFFFFFFFFF) == 64


@pytest.mark.parametrize("shift", [0, 1, 15, 31, 32, 63])
def test_single_bit(shift):
    assert count_bits(1 << shift) == 1


def test_sum_of_disjoint_masks():
    low = 0x0F0F0F0F
    high = 0xF0F0F0F0
    assert count_bits(low) + count_bits(high) == count_bits(low | high)


def test_negative_is_rejected():
    with pytest.raises(ValueError):
        count_bits(-1)