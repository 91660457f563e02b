"""
nevanlinna.numeric.mpcomplex
----------------------------
Complex numbers over an MPBackend.

Promotion rules:
- MPComplex (op) MPComplex: both operands are lifted to the higher precision.
- MPComplex (op) native scalar (int, float, complex, Fraction, numpy scalar,
  mpmath number): the scalar is lifted to the MPComplex's precision.
"""

from __future__ import annotations

import numbers
from fractions import Fraction
from typing import Any, Tuple

from .backend import MPBackend, DEFAULT_PRECISION

_DEFAULT_BACKEND = MPBackend(DEFAULT_PRECISION)


def _split(x: Any, B: MPBackend) -> Tuple[Any, Any]:
    """(re, im) of a native scalar as mpf in B, or raise TypeError."""
    if isinstance(x, bool):
        x = int(x)
    if hasattr(x, "_mpc_"):
        return B.real(x.real), B.real(x.imag)
    if hasattr(x, "_mpf_"):
        return B.real(x), B.real(0)
    if isinstance(x, numbers.Integral):
        return B.real(int(x)), B.real(0)
    if isinstance(x, Fraction):
        return B.real(x), B.real(0)
    if isinstance(x, numbers.Real):
        return B.real(float(x)), B.real(0)
    if isinstance(x, numbers.Complex):
        c = complex(x)
        return B.real(c.real), B.real(c.imag)
    raise TypeError(f"cannot convert {type(x).__name__} to MPComplex")


class MPComplex:
    """Immutable complex value whose parts carry the precision of `backend`."""

    __slots__ = ("re", "im", "backend")

    def __init__(self, re: Any = 0, im: Any = 0, backend: MPBackend | None = None):
        B = backend if backend is not None else _DEFAULT_BACKEND
        object.__setattr__(self, "backend", B)
        object.__setattr__(self, "re", B.real(re))
        object.__setattr__(self, "im", B.real(im))

    @classmethod
    def _raw(cls, re: Any, im: Any, backend: MPBackend) -> "MPComplex":
        # parts are already mpf of `backend`
        out = object.__new__(cls)
        object.__setattr__(out, "backend", backend)
        object.__setattr__(out, "re", re)
        object.__setattr__(out, "im", im)
        return out

    @classmethod
    def from_value(cls, x: Any, backend: MPBackend | None = None) -> "MPComplex":
        B = backend if backend is not None else _DEFAULT_BACKEND
        if isinstance(x, MPComplex):
            if x.backend == B:
                return x
            return cls._raw(B.real(x.re), B.real(x.im), B)
        re, im = _split(x, B)
        return cls._raw(re, im, B)

    @classmethod
    def polar(cls, rho: Any, theta: Any, backend: MPBackend | None = None) -> "MPComplex":
        B = backend if backend is not None else _DEFAULT_BACKEND
        rho = B.real(rho)
        theta = B.real(theta)
        return cls._raw(rho * B.cos(theta), rho * B.sin(theta), B)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("MPComplex is immutable")

    # -------- coercion --------
    def _pair(self, other: Any):
        """Return (self_re, self_im, other_re, other_im, backend) on a common backend."""
        if isinstance(other, MPComplex):
            B = self.backend.promote(other.backend)
            if B is self.backend and other.backend is self.backend:
                return self.re, self.im, other.re, other.im, B
            return B.real(self.re), B.real(self.im), B.real(other.re), B.real(other.im), B
        c, d = _split(other, self.backend)
        return self.re, self.im, c, d, self.backend

    def _coerce(self, other: Any):
        try:
            return self._pair(other)
        except TypeError:
            return None

    # -------- accessors --------
    @property
    def real(self) -> Any:
        return self.re

    @property
    def imag(self) -> Any:
        return self.im

    @property
    def precision(self) -> int:
        return self.backend.precision

    def conjugate(self) -> "MPComplex":
        return MPComplex._raw(self.re, -self.im, self.backend)

    def __abs__(self) -> Any:
        return self.backend.sqrt(self.re * self.re + self.im * self.im)

    def arg(self) -> Any:
        return self.backend.atan2(self.im, self.re)

    def sqrt(self) -> "MPComplex":
        """Principal square root: sqrt of the modulus, half the argument."""
        B = self.backend
        return MPComplex.polar(B.sqrt(abs(self)), self.arg() / 2, B)

    def is_zero(self) -> bool:
        return not self.re and not self.im

    def to(self, backend: MPBackend) -> "MPComplex":
        return MPComplex.from_value(self, backend)

    # -------- arithmetic --------
    def __neg__(self) -> "MPComplex":
        return MPComplex._raw(-self.re, -self.im, self.backend)

    def __pos__(self) -> "MPComplex":
        return self

    def __add__(self, other: Any):
        p = self._coerce(other)
        if p is None:
            return NotImplemented
        a, b, c, d, B = p
        return MPComplex._raw(a + c, b + d, B)

    __radd__ = __add__

    def __sub__(self, other: Any):
        p = self._coerce(other)
        if p is None:
            return NotImplemented
        a, b, c, d, B = p
        return MPComplex._raw(a - c, b - d, B)

    def __rsub__(self, other: Any):
        p = self._coerce(other)
        if p is None:
            return NotImplemented
        a, b, c, d, B = p
        return MPComplex._raw(c - a, d - b, B)

    def __mul__(self, other: Any):
        p = self._coerce(other)
        if p is None:
            return NotImplemented
        a, b, c, d, B = p
        return MPComplex._raw(a * c - b * d, a * d + b * c, B)

    __rmul__ = __mul__

    @staticmethod
    def _div(a, b, c, d, B: MPBackend) -> "MPComplex":
        denom = c * c + d * d
        if not denom:
            raise ZeroDivisionError("MPComplex division by zero")
        return MPComplex._raw((a * c + b * d) / denom, (b * c - a * d) / denom, B)

    def __truediv__(self, other: Any):
        p = self._coerce(other)
        if p is None:
            return NotImplemented
        a, b, c, d, B = p
        return MPComplex._div(a, b, c, d, B)

    def __rtruediv__(self, other: Any):
        p = self._coerce(other)
        if p is None:
            return NotImplemented
        a, b, c, d, B = p
        return MPComplex._div(c, d, a, b, B)

    # -------- comparison --------
    def __eq__(self, other: Any) -> bool:
        p = self._coerce(other)
        if p is None:
            return NotImplemented
        a, b, c, d, _ = p
        return a == c and b == d

    def __ne__(self, other: Any) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __hash__(self) -> int:
        return hash(complex(self))

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -------- narrowing --------
    def __complex__(self) -> complex:
        return complex(float(self.re), float(self.im))

    def __repr__(self) -> str:
        B = self.backend
        return f"MPComplex({B.nstr(self.re)}, {B.nstr(self.im)}, dps={B.precision})"

    def __str__(self) -> str:
        B = self.backend
        sign = "-" if self.im < 0 else "+"
        return f"({B.nstr(self.re)} {sign} {B.nstr(abs(self.im))}j)"
