"""Diagnostics package.

- pick: Pick-criterion checks on sampled data (numpy only)
- spectra: sum rule / peak / deviation helpers (scipy for integration)
- precision_scan: max |phi| and spectral error versus working precision
- plot_spectrum: optional (requires matplotlib)
"""

__all__ = ["pick", "spectra", "precision_scan", "plot_spectrum"]
