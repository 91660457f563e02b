#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

import numpy as np

from ..core.types import SolverParams
from ..data_files import load_samples
from ..engines.solver import NevanlinnaSolver
from ..reference.models import single_pole, samples, matsubara_frequencies


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "nevanlinna[diagnostics]"') from e


def plot_spectrum(omega, spectrum, *, reference=None, title: str = "", out: str = ""):
    plt = _need_matplotlib()
    fig, ax = plt.subplots(figsize=(8, 4.5))
    ax.plot(omega, spectrum, lw=1.5, label="Nevanlinna")
    if reference is not None:
        ax.plot(omega, reference, lw=1.0, ls="--", color="k", label="exact")
    ax.set_xlabel(r"$\omega$")
    ax.set_ylabel(r"$A(\omega)$")
    if title:
        ax.set_title(title)
    ax.legend()
    fig.tight_layout()
    if out:
        fig.savefig(out, dpi=150)
    else:
        plt.show()
    return fig


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="nevanlinna plot", description="Plot a continued spectral function.")
    p.add_argument("input", nargs="?", default="", help="sample file (Re z, Im z, Re G, Im G); default: single-pole demo")
    p.add_argument("--precision", type=int, default=100)
    p.add_argument("--eta", type=float, default=0.01)
    p.add_argument("--wmin", type=float, default=-2.0)
    p.add_argument("--wmax", type=float, default=2.0)
    p.add_argument("--n", type=int, default=801)
    p.add_argument("--out", type=str, default="", help="save the figure instead of showing it")
    args = p.parse_args(argv)

    omega = np.linspace(args.wmin, args.wmax, args.n)
    reference = None
    if args.input:
        mesh, data = load_samples(args.input)
        title = args.input
    else:
        model = single_pole(0.3)
        mesh, data = samples(model, matsubara_frequencies(10.0, 5))
        reference = model.spectral(omega, args.eta)
        title = "G(z) = 1/(z - 0.3), T = 0.1, 5 Matsubara points"

    solver = NevanlinnaSolver(SolverParams(precision=args.precision))
    solver.solve(mesh, data)
    spectrum = solver.evaluate(omega, args.eta, on_fault="nan")

    plot_spectrum(omega, spectrum, reference=reference, title=title, out=args.out)
    if args.out:
        print(f"Saved figure to {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
