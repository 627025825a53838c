# -*- coding: utf-8 -*-
"""derive/derivations.py - Derivations of a Lie algebra as a subspace of gl(n)."""

from typing import FrozenSet, List

import sympy

from ..algebra import LieAlgebra
from ..base import PreconditionError, nonzero_coefficients
from ..gl import GL
from ..linear import ParametricLinearSystem
from ..space import VectorSpace, VectorSpaceBetween
from ...log import get_logger

logger = get_logger(__name__)


def _check_dimensions(G: LieAlgebra, gl: GL):
    if G.dimension != gl.n:
        raise PreconditionError(f"{G!r} has dimension {G.dimension}, but gl acts on dimension {gl.n}")


def derivation_defect(G: LieAlgebra, gl: GL, A, X, Y) -> sympy.ImmutableMatrix:
    """A[X,Y] - ([AX,Y] + [X,AY]); zero for every X, Y iff A is a derivation."""
    AX = gl.action(A, X)
    AY = gl.action(A, Y)
    AXY = gl.action(A, G.bracket(X, Y))
    return sympy.ImmutableMatrix(AXY - G.bracket(AX, Y) - G.bracket(X, AY))


def derivation_defects(G: LieAlgebra, gl: GL, A) -> List[sympy.ImmutableMatrix]:
    """The derivation defect on every pair e_i, e_j with i < j."""
    _check_dimensions(G, gl)
    n = G.dimension
    return [
        derivation_defect(G, gl, A, G.e(i), G.e(j)).applyfunc(sympy.expand)
        for i in range(1, n + 1) for j in range(i + 1, n + 1)
    ]


def derivation_equations(G: LieAlgebra, gl: GL, A=None) -> List[sympy.Expr]:
    """Linear equations in the coordinates of gl; A defaults to the generic element."""
    if A is None:
        A = gl.generic_element()
    return nonzero_coefficients(derivation_defects(G, gl, A))


def derivations(G: LieAlgebra, gl: GL) -> VectorSpace:
    """
    Return the space of derivations of G as a subspace of gl.

    Args:
        G: Lie algebra of dimension n without parameters
        gl: gl(n), acting on G through the basis e_1..e_n

    Raises PreconditionError if G depends on parameters; use
    ``derivations_parametric`` for those.
    """
    if G.has_parameters:
        raise PreconditionError(f"{G!r} depends on parameters; use derivations_parametric")
    equations = derivation_equations(G, gl)
    basis, _ = gl.space.get_solutions(equations)
    logger.debug("%r: %d derivation equations, derivations of dimension %d",
                 G, len(equations), len(basis))
    return VectorSpace(basis, prefix='d', ambient=gl.dimension)


def derivations_parametric(G: LieAlgebra, gl: GL) -> VectorSpaceBetween:
    """
    Return two spaces between which the derivations of G lie, for every value
    of the parameters.

    Equations with a parameter-free pivot are eliminated exactly. The larger
    space solves only those; the smaller space also solves the remaining
    equations identically in the parameters. Both come from the same
    elimination, so the smaller space is contained in the larger one.
    Without parameters both equal ``derivations(G, gl)``.
    """
    equations = derivation_equations(G, gl)
    system = ParametricLinearSystem(equations, gl.coordinates, G.parameters).eliminate_linear_equations()
    larger = gl.space.solutions_from_generic(system.solution())
    smaller = gl.space.solutions_from_generic(system.always_solution())
    logger.debug("%r: %d equations, %d left with parameter-dependent coefficients; "
                 "derivations between dimension %d and %d",
                 G, len(equations), len(system.remaining_equations), len(smaller), len(larger))
    return VectorSpaceBetween(
        basis_of_smaller_space=tuple(smaller),
        basis_of_larger_space=tuple(larger),
        ambient=gl.dimension,
    )


def derivation_when(G: LieAlgebra, gl: GL, M) -> FrozenSet[sympy.Expr]:
    """
    Return the expressions that must vanish for M to be a derivation of G.

    M is an element of gl (coordinates or an n×n matrix), possibly depending
    on parameters or free coefficients. Zero is never in the result, so an
    empty set means M is a derivation unconditionally.
    """
    return frozenset(nonzero_coefficients(derivation_defects(G, gl, gl.to_matrix(M))))


__all__ = [
    'derivation_defect', 'derivation_defects', 'derivation_equations',
    'derivations', 'derivations_parametric', 'derivation_when',
]
