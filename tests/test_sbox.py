import numpy as np
import pytest

from presentcipher import ContractViolation
from presentcipher.sbox import (
    SBOX,
    SBOX_INV,
    difference_distribution_table,
    differential_uniformity,
    evaluate_sbox,
    invert_sbox,
    linear_approximation_table,
    linearity,
    substitute_block,
    substitute_byte,
    substitute_nibble,
)


def test_sbox_is_a_permutation():
    assert sorted(SBOX) == list(range(16))
    assert sorted(SBOX_INV) == list(range(16))


def test_inverse_table_matches_derived_inverse():
    assert list(SBOX_INV) == invert_sbox(SBOX)
    for x in range(16):
        assert SBOX_INV[SBOX[x]] == x
        assert SBOX[SBOX_INV[x]] == x


def test_sbox_literal_values():
    assert SBOX[0x0] == 0xC
    assert SBOX[0xF] == 0x2
    assert SBOX_INV[0xC] == 0x0


def test_substitute_nibble():
    assert substitute_nibble(0x0) == 0xC
    assert substitute_nibble(0xC, inverse=True) == 0x0


@pytest.mark.parametrize("value", [-1, 16, 255])
def test_substitute_nibble_out_of_range(value):
    with pytest.raises(ContractViolation):
        substitute_nibble(value)


def test_substitute_byte_treats_nibbles_independently():
    assert substitute_byte(0x00) == 0xCC
    assert substitute_byte(0x1F) == 0x52
    for value in range(256):
        assert substitute_byte(substitute_byte(value), inverse=True) == value


def test_substitute_block_in_place():
    block = bytearray(range(0x10, 0x18))
    substitute_block(block)
    assert block == bytearray(substitute_byte(b) for b in range(0x10, 0x18))
    substitute_block(block, inverse=True)
    assert block == bytearray(range(0x10, 0x18))


def test_substitute_block_rejects_read_only_block():
    with pytest.raises(ContractViolation):
        substitute_block(bytes(8))


def test_invert_sbox_rejects_non_permutation():
    with pytest.raises(ValueError):
        invert_sbox([0] * 16)


def test_difference_distribution_table():
    ddt = difference_distribution_table(SBOX)
    assert ddt.shape == (16, 16)
    assert ddt[0, 0] == 16
    # Every row distributes all 16 inputs
    assert np.all(ddt.sum(axis=1) == 16)
    assert differential_uniformity(SBOX) == 4


def test_linear_approximation_table():
    lat = linear_approximation_table(SBOX)
    assert lat[0, 0] == 8
    assert np.all(lat[1:, 0] == 0)
    assert linearity(SBOX) == 4


def test_evaluate_sbox():
    assert evaluate_sbox(SBOX) == {'bijective': True, 'differential': 4, 'linear': 4}

    identity = list(range(16))
    metrics = evaluate_sbox(identity)
    assert metrics['bijective'] is True
    assert metrics['differential'] == 16
    assert metrics['linear'] == 8
