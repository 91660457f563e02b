#!/usr/bin/env python3
"""
Pick-criterion diagnostics (double precision).

Data (z_k, G_k) admits a Nevanlinna interpolant iff the Pick matrix

    P_kl = (1 - theta_k conj(theta_l)) / (1 - lambda_k conj(lambda_l)),
    theta_k = mobius(G_k),  lambda_k = (z_k - i) / (z_k + i)

is positive semi-definite. Rounding in the input data eventually breaks this
for many points, so `largest_pick_prefix` reports how many leading samples are
still usable.
"""

from __future__ import annotations

import argparse
from typing import Any, List, Optional

import numpy as np


def pick_matrix(mesh: Any, data: Any) -> np.ndarray:
    z = np.asarray(mesh, dtype=complex)
    d = np.asarray(data, dtype=complex)
    if z.shape != d.shape or z.ndim != 1:
        raise ValueError("mesh and data must be 1-d arrays of equal length")
    theta = (-d - 1j) / (-d + 1j)
    lam = (z - 1j) / (z + 1j)
    num = 1.0 - np.outer(theta, np.conj(theta))
    den = 1.0 - np.outer(lam, np.conj(lam))
    return num / den


def pick_eigenvalues(mesh: Any, data: Any) -> np.ndarray:
    return np.linalg.eigvalsh(pick_matrix(mesh, data))


def satisfies_pick(mesh: Any, data: Any, *, tol: float = 1e-12) -> bool:
    if len(mesh) == 0:
        return True
    return bool(pick_eigenvalues(mesh, data).min() >= -tol)


def largest_pick_prefix(mesh: Any, data: Any, *, tol: float = 1e-12) -> int:
    """Largest N such that the first N samples satisfy the Pick criterion."""
    z = np.asarray(mesh, dtype=complex)
    d = np.asarray(data, dtype=complex)
    for n in range(1, len(z) + 1):
        if not satisfies_pick(z[:n], d[:n], tol=tol):
            return n - 1
    return len(z)


def main(argv: Optional[List[str]] = None) -> int:
    from ..data_files import load_samples

    p = argparse.ArgumentParser(prog="nevanlinna pick", description="Check the Pick criterion of sampled data.")
    p.add_argument("input", help="text file with columns: Re z, Im z, Re G, Im G")
    p.add_argument("--tol", type=float, default=1e-12, help="tolerance on the smallest eigenvalue")
    args = p.parse_args(argv)

    mesh, data = load_samples(args.input)
    eig = pick_eigenvalues(mesh, data)
    n = largest_pick_prefix(mesh, data, tol=args.tol)

    print(f"samples              : {len(mesh)}")
    print(f"min Pick eigenvalue  : {eig.min():.6e}")
    print(f"Pick criterion holds : {bool(eig.min() >= -args.tol)}")
    print(f"largest Pick prefix  : {n}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
