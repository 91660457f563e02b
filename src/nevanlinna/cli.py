from __future__ import annotations

import argparse
import importlib
import logging
import sys

import numpy as np


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """Import a diagnostics module and run its main(argv)."""
    mod = importlib.import_module(modpath)
    return int(mod.main(argv) or 0)


def _print_report(report) -> None:
    print(f"nodes               : {report.size}")
    print(f"precision (digits)  : {report.precision}")
    print(f"max |phi|           : {report.max_contraction:.15f}")
    if report.noncontractive:
        print(f"|phi| > 1 at        : {list(report.noncontractive)}")


def cmd_continue(argv: list[str]) -> int:
    from nevanlinna import make_solver
    from nevanlinna.data_files import load_samples, save_spectrum

    p = argparse.ArgumentParser(prog="nevanlinna continue", description="Continue sampled data to the real axis.")
    p.add_argument("input", help="text file with columns: Re z, Im z, Re G, Im G")
    p.add_argument("--precision", type=int, default=100, help="working precision in decimal digits")
    p.add_argument("--boundary", default="zero", help="registered boundary function theta_{M+1}")
    p.add_argument("--eta", type=float, default=0.01, help="distance of the evaluation grid from the real axis")
    p.add_argument("--wmin", type=float, default=-5.0)
    p.add_argument("--wmax", type=float, default=5.0)
    p.add_argument("--n", type=int, default=1001, help="number of real frequencies")
    p.add_argument("--out", type=str, default="", help="write omega, A(omega) columns to this file")
    args = p.parse_args(argv)

    mesh, data = load_samples(args.input)
    keep = mesh.imag >= 0
    solver = make_solver(precision=args.precision, boundary=args.boundary)
    report = solver.solve(mesh[keep], data[keep])
    _print_report(report)

    omega = np.linspace(args.wmin, args.wmax, args.n)
    spectrum = solver.evaluate(omega, args.eta, on_fault="nan")

    if args.out:
        save_spectrum(args.out, omega, spectrum)
        print(f"Saved spectrum to {args.out}")
    else:
        print()
        print(f"{'omega':>12}  {'A(omega)':>16}")
        for w, a in zip(omega, spectrum):
            print(f"{w:>12.6f}  {a:>16.10f}")
    return 0


def cmd_demo(argv: list[str]) -> int:
    from nevanlinna import make_solver
    from nevanlinna.diagnostics.spectra import peak_position, sum_rule
    from nevanlinna.reference.models import single_pole, sample_matsubara

    p = argparse.ArgumentParser(prog="nevanlinna demo", description="Single pole G(z) = 1/(z - e0) from a few Matsubara points.")
    p.add_argument("--pole", type=float, default=0.3)
    p.add_argument("--temperature", type=float, default=0.1)
    p.add_argument("--n-points", type=int, default=5)
    p.add_argument("--precision", type=int, default=100)
    p.add_argument("--eta", type=float, default=0.01)
    args = p.parse_args(argv)

    model = single_pole(args.pole)
    g_iw = sample_matsubara(model, 1.0 / args.temperature, args.n_points)

    solver = make_solver(precision=args.precision)
    _print_report(solver.solve_host(g_iw))

    grid = np.array([-1.0, -0.5, 0.0, 0.5, 1.0])
    print()
    print(f"{'omega':>8}  {'A(omega)':>14}  {'exact':>14}")
    for w, a, e in zip(grid, solver.evaluate(grid, args.eta), model.spectral(grid, args.eta)):
        print(f"{w:>8.3f}  {a:>14.8f}  {e:>14.8f}")

    omega = np.linspace(-5.0, 5.0, 2001)
    spectrum = solver.evaluate(omega, args.eta)
    print()
    print(f"peak position       : {peak_position(omega, spectrum):.4f}")
    print(f"sum rule on [-5, 5] : {sum_rule(omega, spectrum):.6f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="nevanlinna", description="Nevanlinna analytic continuation toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("continue", help="Continue a sample file to the real axis")
    sub.add_parser("demo", help="Single-pole end-to-end example")
    sub.add_parser("precision-scan", help="Max |phi| and spectral error versus working precision")
    sub.add_parser("pick", help="Check the Pick criterion of a sample file")
    sub.add_parser("plot", help="Plot a continued spectral function (requires matplotlib)")

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    from nevanlinna.core.errors import NevanlinnaError

    try:
        if args.cmd == "continue":
            return cmd_continue(rest)

        if args.cmd == "demo":
            return cmd_demo(rest)

        tool_map = {
            "precision-scan": "nevanlinna.diagnostics.precision_scan",
            "pick": "nevanlinna.diagnostics.pick",
            "plot": "nevanlinna.diagnostics.plot_spectrum",
        }
        if args.cmd in tool_map:
            return _run_module_main(tool_map[args.cmd], rest)
    except NevanlinnaError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
