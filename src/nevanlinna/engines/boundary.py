"""
nevanlinna.engines.boundary
---------------------------
Boundary Schur functions theta_{M+1}(z) closing the continued fraction.

Any Schur function (holomorphic on the upper half-plane, |theta| <= 1) yields a
valid interpolant; the default constant 0 is the simplest choice.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Protocol

from ..core.errors import UnknownBoundaryError
from ..numeric.backend import MPBackend
from ..numeric.mpcomplex import MPComplex


class BoundaryFunction(Protocol):
    def __call__(self, z: MPComplex) -> MPComplex: ...


@dataclass(frozen=True)
class ZeroBoundary:
    B: MPBackend

    def __call__(self, z: MPComplex) -> MPComplex:
        return self.B.zero


@dataclass(frozen=True)
class ConstantBoundary:
    """theta_{M+1}(z) = value, a point of the closed unit disk."""
    B: MPBackend
    value: Any = 0

    def __post_init__(self) -> None:
        if abs(complex(self.value)) > 1:
            raise ValueError(f"boundary constant must lie in the closed unit disk, got {self.value}")

    def __call__(self, z: MPComplex) -> MPComplex:
        return MPComplex.from_value(self.value, self.B)


BoundaryFactory = Callable[[MPBackend], BoundaryFunction]


@dataclass
class BoundaryRegistry:
    _factories: Dict[str, BoundaryFactory]

    def get(self, name: str) -> BoundaryFactory:
        if name not in self._factories:
            raise UnknownBoundaryError(f"Unknown boundary '{name}'. Available: {sorted(self._factories)}")
        return self._factories[name]

    def list(self) -> List[str]:
        return sorted(self._factories.keys())

    def register(self, name: str, factory: BoundaryFactory, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._factories):
            raise KeyError(f"Boundary '{name}' already exists. Use overwrite=True to replace.")
        self._factories[name] = factory

    def make(self, name: str, B: MPBackend) -> BoundaryFunction:
        return self.get(name)(B)


def build_registry() -> BoundaryRegistry:
    return BoundaryRegistry({"zero": ZeroBoundary})


BOUNDARIES = build_registry()
