# tests/test_boundary.py

import pytest

import numpy as np

import nevanlinna
from nevanlinna import NevanlinnaSolver, SolverParams, UnknownBoundaryError, MPBackend
from nevanlinna.engines.boundary import BoundaryRegistry, ConstantBoundary, ZeroBoundary, build_registry
from nevanlinna.reference.models import LorentzianModel, matsubara_frequencies, samples


@pytest.fixture
def lorentzian_samples():
    return samples(LorentzianModel(0.2, 0.4), matsubara_frequencies(10.0, 5))


def test_zero_is_registered_by_default():
    assert "zero" in nevanlinna.list_boundaries()


def test_unknown_boundary_name():
    with pytest.raises(UnknownBoundaryError):
        NevanlinnaSolver(SolverParams(boundary="no-such-boundary"))


def test_explicit_zero_boundary_matches_default(lorentzian_samples):
    a = NevanlinnaSolver(SolverParams(precision=40))
    b = NevanlinnaSolver(SolverParams(precision=40), boundary=ZeroBoundary(MPBackend(40)))
    a.solve(*lorentzian_samples)
    b.solve(*lorentzian_samples)

    grid = np.linspace(-1, 1, 5)
    assert np.array_equal(a.evaluate(grid, 0.05), b.evaluate(grid, 0.05))


def test_constant_boundary_changes_continuation_not_interpolation(lorentzian_samples):
    mesh, data = lorentzian_samples
    registry = build_registry()
    registry.register("half", lambda B: ConstantBoundary(B, 0.5))

    zero = NevanlinnaSolver(SolverParams(precision=40))
    half = NevanlinnaSolver(SolverParams(precision=40, boundary="half"), registry=registry)
    zero.solve(mesh, data)
    half.solve(mesh, data)

    # both interpolate the data ...
    assert np.allclose(half.evaluate_nevanlinna(mesh), -data, rtol=1e-10, atol=0)
    # ... but differ between the nodes
    grid = np.linspace(-1, 1, 5)
    assert not np.allclose(zero.evaluate(grid, 0.05), half.evaluate(grid, 0.05))


def test_register_through_public_api():
    nevanlinna.register_boundary("test-quarter", nevanlinna.constant_boundary(0.25j), overwrite=True)
    assert "test-quarter" in nevanlinna.list_boundaries()

    solver = nevanlinna.make_solver(precision=30, boundary="test-quarter")
    assert isinstance(solver.boundary, ConstantBoundary)
    assert solver.boundary(solver.backend.zero) == 0.25j


def test_duplicate_registration_requires_overwrite():
    registry = BoundaryRegistry({})
    registry.register("z", ZeroBoundary)
    with pytest.raises(KeyError):
        registry.register("z", ZeroBoundary)
    registry.register("z", ZeroBoundary, overwrite=True)
    assert registry.list() == ["z"]


def test_constant_outside_disk_rejected():
    with pytest.raises(ValueError):
        ConstantBoundary(MPBackend(20), 1.5)
