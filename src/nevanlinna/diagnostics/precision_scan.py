#!/usr/bin/env python3
"""
Precision scan: solve one synthetic problem at several working precisions.

The samples are generated at the highest requested precision so that the data
itself is never the limiting factor; what changes between rows is only the
precision of the recursion and the continued fraction.
"""

from __future__ import annotations

import argparse
import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from ..core.errors import DegenerateMeshError
from ..core.types import SolverParams
from ..engines.solver import NevanlinnaSolver
from ..numeric.backend import MPBackend
from ..reference.models import GreensModel, LorentzianModel, samples_mp
from .spectra import max_deviation

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanRow:
    """noncontractive = -1 marks a precision at which the solve broke down."""
    precision: int
    max_contraction: float
    noncontractive: int
    deviation: float


def precision_scan(
    model: GreensModel,
    *,
    beta: float,
    n_points: int,
    precisions: Sequence[int],
    omega: np.ndarray,
    eta: float,
) -> List[ScanRow]:
    B = MPBackend(max(precisions))
    mesh, data = samples_mp(model, beta, n_points, B)
    reference = model.spectral(omega, eta)

    rows = []
    for prec in precisions:
        solver = NevanlinnaSolver(SolverParams(precision=prec))
        try:
            report = solver.solve(mesh, data)
        except DegenerateMeshError as e:
            # exact cancellation at this precision; the row is still reported
            _logger.warning("%d digits: %s", prec, e)
            rows.append(ScanRow(precision=prec, max_contraction=math.inf, noncontractive=-1, deviation=math.inf))
            continue
        spectrum = solver.evaluate(omega, eta, on_fault="nan")
        rows.append(ScanRow(
            precision=prec,
            max_contraction=report.max_contraction,
            noncontractive=len(report.noncontractive),
            deviation=max_deviation(np.nan_to_num(spectrum, nan=np.inf), reference),
        ))
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="nevanlinna precision-scan", description="Max |phi| and spectral error versus working precision.")
    p.add_argument("--center", type=float, default=0.0, help="Lorentzian center")
    p.add_argument("--width", type=float, default=0.5, help="Lorentzian half-width")
    p.add_argument("--beta", type=float, default=10.0, help="Inverse temperature")
    p.add_argument("--n-points", type=int, default=30, help="Number of positive Matsubara frequencies")
    p.add_argument("--precisions", type=str, default="8,16,32,64,128", help="Comma-separated digit counts")
    p.add_argument("--eta", type=float, default=0.05, help="Broadening of the real-axis grid")
    p.add_argument("--wmin", type=float, default=-3.0)
    p.add_argument("--wmax", type=float, default=3.0)
    p.add_argument("--n", type=int, default=121, help="Number of real frequencies")
    args = p.parse_args(argv)

    precisions = [int(x) for x in args.precisions.split(",") if x.strip()]
    omega = np.linspace(args.wmin, args.wmax, args.n)
    model = LorentzianModel(args.center, args.width)

    rows = precision_scan(model, beta=args.beta, n_points=args.n_points, precisions=precisions, omega=omega, eta=args.eta)

    print(f"Lorentzian(center={args.center}, width={args.width}), beta={args.beta}, N={args.n_points}, eta={args.eta}")
    print("=" * 72)
    print(f"{'digits':>8} | {'max |phi|':>22} | {'|phi|>1':>8} | {'max |A - A_exact|':>20}")
    print("-" * 72)
    for r in rows:
        print(f"{r.precision:>8d} | {r.max_contraction:>22.15f} | {r.noncontractive:>8d} | {r.deviation:>20.6e}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
