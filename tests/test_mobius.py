# tests/test_mobius.py

import pytest

import numpy as np

from nevanlinna import MPBackend, mobius, mobius_transform, inverse_mobius


def test_mobius_of_zero_is_minus_one():
    B = MPBackend(30)
    assert mobius(0, B) == -1


def test_causal_values_land_in_unit_disk():
    B = MPBackend(30)
    z = 1j * np.pi * (2 * np.arange(6) + 1) / 10.0
    g = 1.0 / (z - 0.3)
    for m in mobius_transform(g, B):
        assert abs(m) < 1


def test_anticausal_values_leave_unit_disk():
    B = MPBackend(30)
    assert abs(mobius(-1.0 / (1j - 0.3), B)) > 1


@pytest.mark.parametrize("precision", [20, 40, 80])
def test_forward_then_inverse_recovers_value(precision):
    """
    The Nevanlinna value is h = -G, so inverse(mobius(d)) must be -d,
    with an error bounded by the working precision.
    """
    B = MPBackend(precision)
    d = B.complex("0.25", "-0.75") / 3
    err = abs(inverse_mobius(mobius(d, B)) + d)
    assert err <= B.real(10) ** (-(precision - 3))


def test_empty_sequence_rejected():
    with pytest.raises(ValueError):
        mobius_transform([], MPBackend(20))
