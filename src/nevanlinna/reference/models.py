"""
nevanlinna.reference.models
---------------------------
Closed-form Green's functions with known spectral functions, plus a minimal
Matsubara host object. Used as ground truth for tests and diagnostics.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Protocol, Sequence, Tuple

import numpy as np

from ..numeric.backend import MPBackend
from ..numeric.mpcomplex import MPComplex


class GreensModel(Protocol):
    def __call__(self, z: Any) -> Any: ...
    def mp(self, z: MPComplex) -> MPComplex: ...
    def spectral(self, omega: Any, eta: float = 0.0) -> Any: ...


@dataclass(frozen=True)
class PoleModel:
    """G(z) = sum_p w_p / (z - e_p); spectral weight sum_p w_p (1 for a normalised G)."""
    energies: Tuple[float, ...]
    weights: Tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.energies) != len(self.weights):
            raise ValueError("energies and weights must have the same length")
        if any(w < 0 for w in self.weights):
            raise ValueError("pole weights must be non-negative")

    def __call__(self, z: Any) -> Any:
        z = np.asarray(z, dtype=complex)
        return sum(w / (z - e) for e, w in zip(self.energies, self.weights))

    def mp(self, z: MPComplex) -> MPComplex:
        """G(z) in the precision of `z`."""
        return sum((w / (z - e) for e, w in zip(self.energies, self.weights)), z.backend.zero)

    def spectral(self, omega: Any, eta: float = 0.0) -> Any:
        """-Im G(omega + i eta) / pi: a sum of Lorentzians of half-width eta."""
        if eta <= 0:
            raise ValueError("a pole model needs eta > 0 for a finite spectral function")
        return -np.imag(self(np.asarray(omega, dtype=float) + 1j * eta)) / math.pi


def single_pole(energy: float, weight: float = 1.0) -> PoleModel:
    return PoleModel((energy,), (weight,))


@dataclass(frozen=True)
class LorentzianModel:
    """
    Retarded G(z) = 1 / (z - center + i*width) on the upper half-plane,
    mirrored by conjugation below the real axis.
    """
    center: float = 0.0
    width: float = 0.5

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("width must be positive")

    def __call__(self, z: Any) -> Any:
        z = np.asarray(z, dtype=complex)
        s = np.where(np.imag(z) >= 0, 1.0, -1.0)
        return 1.0 / (z - self.center + 1j * self.width * s)

    def mp(self, z: MPComplex) -> MPComplex:
        B = z.backend
        return 1 / (z - self.center + B.complex(0, self.width))

    def spectral(self, omega: Any, eta: float = 0.0) -> Any:
        g = self.width + eta
        x = np.asarray(omega, dtype=float) - self.center
        return g / math.pi / (x * x + g * g)


def matsubara_frequencies(beta: float, n_points: int, *, positive_only: bool = True) -> np.ndarray:
    """Fermionic frequencies i(2n+1)pi/beta; with positive_only=False, n runs over -N..N-1."""
    if beta <= 0:
        raise ValueError("beta must be positive")
    n = np.arange(n_points) if positive_only else np.arange(-n_points, n_points)
    return 1j * (2 * n + 1) * math.pi / beta


@dataclass
class MatsubaraMesh:
    points: List[complex]
    beta: float
    positive_only: bool = True

    def __iter__(self):
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)


@dataclass
class MatsubaraFunction:
    """Host-style Green's function: `mesh` iterable and parallel `data` of shape (n, 1, 1)."""
    mesh: MatsubaraMesh
    data: np.ndarray


def sample_matsubara(model: GreensModel, beta: float, n_points: int, *, positive_only: bool = True) -> MatsubaraFunction:
    iw = matsubara_frequencies(beta, n_points, positive_only=positive_only)
    values = np.asarray(model(iw), dtype=complex).reshape(-1, 1, 1)
    return MatsubaraFunction(MatsubaraMesh(list(iw), beta, positive_only), values)


def samples(model: GreensModel, points: Sequence[complex]) -> Tuple[np.ndarray, np.ndarray]:
    z = np.asarray(points, dtype=complex)
    return z, np.asarray(model(z), dtype=complex)


def matsubara_mp(beta: float, n_points: int, B: MPBackend) -> List[MPComplex]:
    """Positive fermionic frequencies carried at the precision of B (exact pi)."""
    b = B.real(beta)
    return [B.complex(0, (2 * n + 1) * B.pi / b) for n in range(n_points)]


def samples_mp(model: GreensModel, beta: float, n_points: int, B: MPBackend) -> Tuple[List[MPComplex], List[MPComplex]]:
    """Matsubara samples of `model` computed entirely at the precision of B."""
    z = matsubara_mp(beta, n_points, B)
    return z, [model.mp(x) for x in z]
