"""
gl.py - The Lie algebra gl(n) of n×n matrices.

An element of gl(n) is a coordinate column of length n², read row-major:
coordinate i*n + j is the matrix entry (i, j). A matrix acts on a vector of
the Lie algebra by the usual product, so column j is the image of e_{j+1}.
"""

import sympy

from .base import PreconditionError, normalize
from .space import VectorSpace


class GL:
    """gl(n) as a vector space with its standard basis, and as matrices."""

    def __init__(self, n: int):
        if n < 1:
            raise PreconditionError(f"gl(n) needs n >= 1, got {n}")
        self.n = n
        basis = []
        for index in range(n * n):
            v = [0] * (n * n)
            v[index] = 1
            basis.append(v)
        names = [f'a{i + 1}{j + 1}' for i in range(n) for j in range(n)]
        self.space = VectorSpace(basis, prefix='a', ambient=n * n, names=names)

    @property
    def dimension(self) -> int:
        return self.n * self.n

    @property
    def coordinates(self):
        return self.space.coefficients

    def generic_element(self) -> sympy.ImmutableMatrix:
        return self.space.generic_element()

    def to_matrix(self, x) -> sympy.ImmutableMatrix:
        """Coordinates to matrix; an n×n matrix is returned unchanged."""
        m = sympy.ImmutableMatrix(x)
        if m.shape == (self.n, self.n):
            return m
        if len(m) != self.n * self.n:
            raise PreconditionError(f"expected {self.n * self.n} coordinates, got shape {m.shape}")
        return m.reshape(self.n, self.n)

    def from_matrix(self, M) -> sympy.ImmutableMatrix:
        M = sympy.ImmutableMatrix(M)
        if M.shape != (self.n, self.n):
            raise PreconditionError(f"expected a {self.n}×{self.n} matrix, got shape {M.shape}")
        return M.reshape(self.n * self.n, 1)

    def identity(self) -> sympy.ImmutableMatrix:
        return self.from_matrix(sympy.eye(self.n))

    def action(self, A, X) -> sympy.ImmutableMatrix:
        """A·X for A in gl(n) and X a vector of the Lie algebra."""
        return sympy.ImmutableMatrix(self.to_matrix(A) * sympy.Matrix(X))

    def trace(self, A) -> sympy.Expr:
        return normalize(self.to_matrix(A).trace())

    def commutator(self, A, B) -> sympy.ImmutableMatrix:
        a, b = self.to_matrix(A), self.to_matrix(B)
        return sympy.ImmutableMatrix((a * b - b * a).applyfunc(normalize))

    def __repr__(self) -> str:
        return f"GL({self.n})"


__all__ = ['GL']
