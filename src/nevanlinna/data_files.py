"""Plain-text sample and spectrum files (whitespace separated columns)."""

from __future__ import annotations
from typing import Any, Tuple

import numpy as np


def load_samples(path: Any) -> Tuple[np.ndarray, np.ndarray]:
    """Rows of `Re z  Im z  Re G  Im G`; '#' starts a comment."""
    table = np.loadtxt(path, ndmin=2)
    if table.shape[1] != 4:
        raise ValueError(f"{path}: expected 4 columns (Re z, Im z, Re G, Im G), got {table.shape[1]}")
    mesh = table[:, 0] + 1j * table[:, 1]
    data = table[:, 2] + 1j * table[:, 3]
    return mesh, data


def save_samples(path: Any, mesh: Any, data: Any) -> None:
    z = np.asarray(mesh, dtype=complex)
    d = np.asarray(data, dtype=complex)
    np.savetxt(path, np.column_stack([z.real, z.imag, d.real, d.imag]), header="Re z  Im z  Re G  Im G")


def save_spectrum(path: Any, omega: Any, spectrum: Any) -> None:
    np.savetxt(path, np.column_stack([omega, spectrum]), header="omega  A(omega)")
