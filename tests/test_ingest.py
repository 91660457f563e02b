# tests/test_ingest.py

import pytest
from dataclasses import dataclass

import numpy as np

from nevanlinna import ShapeMismatchError
from nevanlinna.engines.ingest import samples_from_host
from nevanlinna.reference.models import LorentzianModel, sample_matsubara


@dataclass
class MeshPoint:
    value: complex


@dataclass
class Host:
    mesh: list
    data: np.ndarray


def test_filters_lower_half_plane_in_order():
    host = sample_matsubara(LorentzianModel(), 10.0, 4, positive_only=False)
    mesh, data = samples_from_host(host)

    assert len(mesh) == 4
    assert np.all(mesh.imag > 0)
    assert np.all(np.diff(mesh.imag) > 0)
    assert np.array_equal(data, host.data[4:, 0, 0])


def test_points_with_value_attribute_and_vector_data():
    points = [MeshPoint(-1j), MeshPoint(1j), MeshPoint(3j)]
    host = Host(points, np.array([1j, -1j, -0.5j]))
    mesh, data = samples_from_host(host)

    assert list(mesh) == [1j, 3j]
    assert list(data) == [-1j, -0.5j]


def test_real_axis_points_are_kept():
    host = Host([0.0, 1j], np.array([-1j, -1j]))
    mesh, _ = samples_from_host(host)
    assert list(mesh) == [0.0, 1j]


def test_length_mismatch():
    with pytest.raises(ShapeMismatchError):
        samples_from_host(Host([1j, 2j], np.zeros(3, dtype=complex)))


def test_not_a_host():
    with pytest.raises(TypeError):
        samples_from_host(object())
