# tests/test_end_to_end.py

import pytest

import numpy as np

from nevanlinna import NevanlinnaSolver, SolverParams, MPBackend
from nevanlinna.diagnostics.precision_scan import precision_scan
from nevanlinna.diagnostics.spectra import peak_position, sum_rule
from nevanlinna.reference.models import (
    LorentzianModel,
    single_pole,
    sample_matsubara,
    samples,
    samples_mp,
    matsubara_frequencies,
)


@pytest.fixture(scope="module")
def single_pole_solver():
    """G(z) = 1/(z - 0.3) at the first five Matsubara frequencies of T = 0.1."""
    g_iw = sample_matsubara(single_pole(0.3), beta=1.0 / 0.1, n_points=5)
    solver = NevanlinnaSolver()
    solver.solve_host(g_iw)
    return solver


def test_single_pole_coarse_grid(single_pole_solver):
    grid = np.array([-1.0, -0.5, 0.0, 0.5, 1.0])
    eta = 0.01
    out = single_pole_solver.evaluate(grid, eta)
    exact = single_pole(0.3).spectral(grid, eta)

    assert out.shape == grid.shape
    # away from the pole the spectrum is tiny and positive
    assert np.all(out > 0)
    assert np.all(out < 0.1)
    assert out == pytest.approx(exact, rel=1e-3)


def test_single_pole_peak_and_sum_rule(single_pole_solver):
    eta = 0.01

    near = np.linspace(0.0, 0.6, 121)
    peak = single_pole_solver.evaluate(near, eta)
    assert peak_position(near, peak) == pytest.approx(0.3, abs=0.01)
    assert peak.max() == pytest.approx(1.0 / (np.pi * eta), rel=1e-2)

    omega = np.linspace(-3.0, 3.0, 1201)
    spectrum = single_pole_solver.evaluate(omega, eta)
    # the Lorentzian tails outside [-3, 3] carry about 0.2% of the weight
    assert sum_rule(omega, spectrum) == pytest.approx(1.0, abs=0.01)


def test_interpolates_input_data():
    mesh, data = samples(LorentzianModel(0.1, 0.4), matsubara_frequencies(10.0, 8))
    solver = NevanlinnaSolver(SolverParams(precision=80))
    solver.solve(mesh, data)

    h = solver.evaluate_nevanlinna(mesh)
    assert np.allclose(h, -data, rtol=1e-10, atol=0)


def test_insufficient_precision_breaks_contraction():
    """With many nodes, 8 digits are not enough: spurious |phi| > 1 appears."""
    B = MPBackend(200)
    mesh, data = samples_mp(LorentzianModel(0.0, 0.5), 10.0, 40, B)

    solver = NevanlinnaSolver(SolverParams(precision=8))
    report = solver.solve(mesh, data)
    assert not report.is_contractive


def test_more_precision_reduces_deviation():
    omega = np.linspace(-2.0, 2.0, 41)
    rows = precision_scan(
        LorentzianModel(0.0, 0.5),
        beta=10.0,
        n_points=30,
        precisions=[6, 100],
        omega=omega,
        eta=0.1,
    )
    low, high = rows

    assert len(rows) == 2
    assert low.precision == 6 and high.precision == 100
    assert low.noncontractive != 0
    assert low.max_contraction > 1
    assert high.noncontractive == 0
    assert high.deviation < low.deviation
