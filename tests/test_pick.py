# tests/test_pick.py

import pytest

import numpy as np

from nevanlinna.diagnostics.pick import (
    pick_matrix,
    pick_eigenvalues,
    satisfies_pick,
    largest_pick_prefix,
)
from nevanlinna.reference.models import LorentzianModel, single_pole, matsubara_frequencies, samples


def test_pick_matrix_is_hermitian():
    mesh, data = samples(LorentzianModel(), matsubara_frequencies(10.0, 6))
    P = pick_matrix(mesh, data)
    assert P.shape == (6, 6)
    assert np.allclose(P, P.conj().T)


def test_causal_data_satisfies_pick():
    mesh, data = samples(LorentzianModel(0.1, 0.5), matsubara_frequencies(10.0, 6))
    assert satisfies_pick(mesh, data)
    assert largest_pick_prefix(mesh, data) == 6
    assert pick_eigenvalues(mesh, data).min() > 0


def test_anticausal_data_fails_pick():
    mesh, data = samples(single_pole(0.3), matsubara_frequencies(10.0, 4))
    assert not satisfies_pick(mesh, -data)
    assert largest_pick_prefix(mesh, -data) == 0


def test_shape_mismatch():
    with pytest.raises(ValueError):
        pick_matrix([1j, 2j], [1.0])
