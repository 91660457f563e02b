from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .backend import MPBackend
from .mpcomplex import MPComplex


@dataclass(frozen=True)
class Matrix2:
    """
    2x2 complex matrix [[a, b], [c, d]].

    `m @ e` is the ordinary (non-commutative) matrix product;
    `m.apply(t)` is the linear-fractional map (a*t + b) / (c*t + d).
    """
    a: MPComplex
    b: MPComplex
    c: MPComplex
    d: MPComplex

    @classmethod
    def identity(cls, B: MPBackend) -> "Matrix2":
        one, zero = B.one, B.zero
        return cls(one, zero, zero, one)

    def __matmul__(self, other: "Matrix2") -> "Matrix2":
        if not isinstance(other, Matrix2):
            return NotImplemented
        return Matrix2(
            self.a * other.a + self.b * other.c,
            self.a * other.b + self.b * other.d,
            self.c * other.a + self.d * other.c,
            self.c * other.b + self.d * other.d,
        )

    def __getitem__(self, ij: Tuple[int, int]) -> MPComplex:
        i, j = ij
        return ((self.a, self.b), (self.c, self.d))[i][j]

    def rows(self) -> Tuple[Tuple[MPComplex, MPComplex], Tuple[MPComplex, MPComplex]]:
        return ((self.a, self.b), (self.c, self.d))

    def det(self) -> MPComplex:
        return self.a * self.d - self.b * self.c

    def apply(self, t: MPComplex) -> MPComplex:
        return (self.a * t + self.b) / (self.c * t + self.d)

    def to_complex(self) -> Tuple[Tuple[complex, complex], Tuple[complex, complex]]:
        return tuple(tuple(complex(x) for x in row) for row in self.rows())  # type: ignore[return-value]
