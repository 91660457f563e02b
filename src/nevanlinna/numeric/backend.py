"""
nevanlinna.numeric.backend
--------------------------
Arbitrary-precision real backend.

Each MPBackend owns a private mpmath context, so several working precisions can
live side by side in one process (and in one test session) without touching
mpmath's global ``mp`` object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Literal, Protocol

import mpmath


class Backend(Protocol):
    kind: Literal["mpmath"]
    precision: int

    def real(self, x: Any) -> Any: ...
    def sqrt(self, x: Any) -> Any: ...
    def cos(self, x: Any) -> Any: ...
    def sin(self, x: Any) -> Any: ...
    def atan2(self, y: Any, x: Any) -> Any: ...


@dataclass(frozen=True)
class MPBackend(Backend):
    """Fixed-precision real arithmetic with `precision` significant decimal digits."""
    precision: int = 100
    kind: Literal["mpmath"] = "mpmath"
    ctx: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.precision < 1:
            raise ValueError(f"precision must be >= 1 digit, got {self.precision}")
        ctx = mpmath.MPContext()
        ctx.dps = self.precision
        object.__setattr__(self, "ctx", ctx)

    # -------- conversions --------
    def real(self, x: Any) -> Any:
        """Convert a real scalar (int, float, Fraction, mpf of any precision) into this context."""
        if isinstance(x, Fraction):
            return self.ctx.mpf(x.numerator) / x.denominator
        return self.ctx.mpf(x)

    def complex(self, x: Any = 0, im: Any = None):
        from .mpcomplex import MPComplex
        if im is not None:
            return MPComplex(x, im, self)
        return MPComplex.from_value(x, self)

    def to_float(self, x: Any) -> float:
        return float(x)

    def promote(self, other: "MPBackend") -> "MPBackend":
        """The common backend of two operands: the higher precision wins."""
        return other if other.precision > self.precision else self

    # -------- elementary functions --------
    def sqrt(self, x: Any) -> Any:
        return self.ctx.sqrt(x)

    def cos(self, x: Any) -> Any:
        return self.ctx.cos(x)

    def sin(self, x: Any) -> Any:
        return self.ctx.sin(x)

    def atan2(self, y: Any, x: Any) -> Any:
        return self.ctx.atan2(y, x)

    # -------- constants --------
    @property
    def pi(self) -> Any:
        return +self.ctx.pi

    @property
    def eps(self) -> Any:
        return self.ctx.eps

    @property
    def zero(self):
        return self.complex(0)

    @property
    def one(self):
        return self.complex(1)

    @property
    def i(self):
        return self.complex(0, 1)

    def nstr(self, x: Any, digits: int = 15) -> str:
        return self.ctx.nstr(x, digits)


DEFAULT_PRECISION = 100
