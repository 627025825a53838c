from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import sympy

from .base import InconsistentSystemError, PreconditionError, normalize
from .linear import GenericSolution, solve_linear


def _column(v) -> sympy.ImmutableMatrix:
    m = sympy.ImmutableMatrix(v)
    if m.cols != 1:
        m = m.reshape(len(m), 1)
    return m


class VectorSpace:
    """
    Span of an ordered basis of column vectors over the symbolic ring.

    Every space owns one fresh coefficient per basis vector; the generic
    element is the combination of the basis with these coefficients.
    Coefficient names are deterministic (prefix + index) so that printed
    output does not depend on how many spaces were built before.
    """

    def __init__(self, basis: Iterable = (), prefix: str = 'c', ambient: Optional[int] = None,
                 names: Optional[Sequence[str]] = None):
        self._basis = tuple(_column(v) for v in basis)
        if self._basis:
            ambient = self._basis[0].rows
            if any(v.rows != ambient for v in self._basis):
                raise PreconditionError("basis vectors must have the same length")
        elif ambient is None:
            raise PreconditionError("the ambient dimension of an empty space must be given")
        self.ambient = ambient
        self.prefix = prefix
        if names is None:
            names = [f'{prefix}{k + 1}' for k in range(len(self._basis))]
        elif len(names) != len(self._basis):
            raise PreconditionError("one coefficient name per basis vector")
        self._coefficients = tuple(sympy.Dummy(name) for name in names)

    @property
    def basis(self) -> Tuple[sympy.ImmutableMatrix, ...]:
        return self._basis

    @property
    def coefficients(self) -> Tuple[sympy.Dummy, ...]:
        return self._coefficients

    @property
    def dimension(self) -> int:
        return len(self._basis)

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[sympy.ImmutableMatrix]:
        return iter(self._basis)

    def e(self, k: int) -> sympy.ImmutableMatrix:
        """The k-th basis vector, counting from 1."""
        return self._basis[k - 1]

    def zero(self) -> sympy.ImmutableMatrix:
        return sympy.ImmutableMatrix.zeros(self.ambient, 1)

    def combination(self, coefficients: Sequence) -> sympy.ImmutableMatrix:
        result = sympy.Matrix.zeros(self.ambient, 1)
        for c, v in zip(coefficients, self._basis):
            if c != 0:
                result += c * v
        return sympy.ImmutableMatrix(result.applyfunc(normalize))

    def generic_element(self) -> sympy.ImmutableMatrix:
        return self.combination(self._coefficients)

    # === Solving ===

    def solutions_from_generic(self, solution: GenericSolution) -> List[sympy.ImmutableMatrix]:
        """Basis of the solution space, one vector per free coefficient."""
        return [self.combination(d) for d in solution.directions(self._coefficients)]

    def get_solutions(self, equations: Iterable) -> Tuple[List[sympy.ImmutableMatrix], sympy.ImmutableMatrix]:
        """
        Solve equations in our coefficients.

        Returns (basis, particular): the solution set is particular + span(basis).
        Raises InconsistentSystemError if there is no solution.
        """
        solution = solve_linear(equations, self._coefficients)
        particular = self.combination(solution.particular(self._coefficients))
        return self.solutions_from_generic(solution), particular

    def subspace_from_equations(self, equations: Iterable) -> 'VectorSpace':
        """The subspace of elements whose coefficients satisfy homogeneous equations."""
        basis, _ = self.get_solutions(equations)
        return VectorSpace(basis, prefix=self.prefix, ambient=self.ambient)

    def contains(self, v) -> bool:
        v = _column(v)
        if v.rows != self.ambient:
            return False
        equations = list(self.generic_element() - v)
        try:
            solve_linear(equations, self._coefficients)
        except InconsistentSystemError:
            return False
        return True

    def __repr__(self) -> str:
        return f"VectorSpace(dimension={self.dimension}, ambient={self.ambient})"


@dataclass(frozen=True)
class VectorSpaceBetween:
    """
    A space known only to lie between two subspaces.

    Every element of the smaller space is exact; the larger space is a
    relaxation. Without parameters both coincide.
    """
    basis_of_smaller_space: Tuple[sympy.ImmutableMatrix, ...]
    basis_of_larger_space: Tuple[sympy.ImmutableMatrix, ...]
    ambient: int

    @property
    def smaller(self) -> VectorSpace:
        return VectorSpace(self.basis_of_smaller_space, prefix='d', ambient=self.ambient)

    @property
    def larger(self) -> VectorSpace:
        return VectorSpace(self.basis_of_larger_space, prefix='d', ambient=self.ambient)

    @property
    def is_exact(self) -> bool:
        # smaller is contained in larger by construction
        return len(self.basis_of_smaller_space) == len(self.basis_of_larger_space)


@dataclass(frozen=True)
class AffineSpaceInGl:
    """
    Affine space N + W.

    N is a particular point (it may depend on parameters), W the space of
    directions.
    """
    N: sympy.ImmutableMatrix
    W: VectorSpace

    @property
    def dimension(self) -> int:
        return self.W.dimension

    def generic_element(self) -> sympy.ImmutableMatrix:
        return sympy.ImmutableMatrix((self.N + self.W.generic_element()).applyfunc(normalize))

    def translate(self, v) -> 'AffineSpaceInGl':
        return AffineSpaceInGl(N=sympy.ImmutableMatrix((self.N + _column(v)).applyfunc(normalize)), W=self.W)

    def contains(self, x) -> bool:
        return self.W.contains(_column(x) - self.N)

    def intersect(self, V: VectorSpace) -> Optional['AffineSpaceInGl']:
        """(N + W) ∩ V, or None if empty."""
        if V.ambient != self.W.ambient:
            raise PreconditionError("cannot intersect spaces of different ambient dimension")
        unknowns = self.W.coefficients + V.coefficients
        equations = list(self.generic_element() - V.generic_element())
        try:
            solution = solve_linear(equations, unknowns)
        except InconsistentSystemError:
            return None
        own = self.W.coefficients
        N = self.N + self.W.combination(solution.particular(own))
        directions = [self.W.combination(solution.direction(own, f)) for f in solution.free]
        directions = [d for d in directions if not d.is_zero_matrix]
        return AffineSpaceInGl(
            N=sympy.ImmutableMatrix(N.applyfunc(normalize)),
            W=VectorSpace(directions, prefix=self.W.prefix, ambient=self.W.ambient),
        )


__all__ = ['VectorSpace', 'VectorSpaceBetween', 'AffineSpaceInGl']
