"""
nevanlinna.engines.ingest
-------------------------
Adapter from a host frequency-domain function to (mesh, data) arrays.

A host exposes
    host.mesh : iterable of complex points (or of objects with a `.value`)
    host.data : array whose leading axis runs parallel to the mesh;
                for matrix-valued functions the [j, 0, 0] element is used.
Only points with Im z >= 0 are kept; for a Green's function the lower
half-plane is the conjugate mirror and carries no new information.
"""

from __future__ import annotations
from typing import Any, Tuple

import numpy as np

from ..core.errors import ShapeMismatchError


def _point(p: Any) -> complex:
    if hasattr(p, "value"):
        p = p.value
    return complex(p)


def samples_from_host(host: Any) -> Tuple[np.ndarray, np.ndarray]:
    if not (hasattr(host, "mesh") and hasattr(host, "data")):
        raise TypeError(f"{type(host).__name__} does not expose `mesh` and `data`")

    points = [_point(p) for p in host.mesh]
    data = np.asarray(host.data)
    if data.ndim == 0 or data.shape[0] != len(points):
        raise ShapeMismatchError(
            f"host mesh has {len(points)} points but data has leading shape {data.shape[:1]}"
        )
    if data.ndim > 1:
        data = data[(slice(None),) + (0,) * (data.ndim - 1)]

    keep = [j for j, z in enumerate(points) if z.imag >= 0]
    mesh = np.array([points[j] for j in keep], dtype=complex)
    return mesh, np.asarray(data[keep], dtype=complex)
