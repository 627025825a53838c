# -*- coding: utf-8 -*-
"""
derive/nikolayevsky.py - The Nikolayevsky derivation.

The Nikolayevsky derivation N of a Lie algebra is the derivation with
tr(N·D) = tr(D) for every derivation D. It is found as the affine space N + W
of solutions of this linear system inside the space of derivations.
"""

from enum import Enum, auto
from typing import FrozenSet, Iterable, List, Optional

import sympy

from ..algebra import LieAlgebra
from ..base import is_zero, normalize
from ..gl import GL
from ..space import AffineSpaceInGl, VectorSpace, VectorSpaceBetween
from .derivations import derivations, derivations_parametric, derivation_when
from ...log import get_logger
from ...render import horizontal, render_expr, render_set

logger = get_logger(__name__)


def nikolayevsky_equations(N, subspace: Iterable, gl: GL) -> List[sympy.Expr]:
    """
    Return the equations tr(N·D) = tr(D) for D in ``subspace``, as tr(N·D - D).

    Args:
        N: element of gl, typically the generic element of a space of derivations
        subspace: elements D of gl
        gl: gl(n)
    """
    n_matrix = gl.to_matrix(N)
    equations = []
    seen = set()
    for D in subspace:
        M = gl.to_matrix(D)
        eqn = normalize((n_matrix * M - M).trace())
        if eqn not in seen:
            seen.add(eqn)
            equations.append(eqn)
    return equations


def _solve_in(der: VectorSpace, constraints: Iterable, gl: GL) -> AffineSpaceInGl:
    equations = nikolayevsky_equations(der.generic_element(), constraints, gl)
    solutions, N = der.get_solutions(equations)
    return AffineSpaceInGl(N=N, W=VectorSpace(solutions, prefix='w', ambient=gl.dimension))


def nikolayevsky_like_derivations(G: LieAlgebra, gl: GL) -> AffineSpaceInGl:
    """
    Return the affine space N + W of derivations with tr(ND) = tr(D) for all
    derivations D.

    G must not depend on parameters; the space of derivations is computed
    exactly, so the result is exact.
    """
    der = derivations(G, gl)
    result = _solve_in(der, der.basis, gl)
    logger.debug("%r: Nikolayevsky-like derivations of dimension %d", G, result.dimension)
    return result


def nikolayevsky_like_derivations_parametric(G: LieAlgebra, gl: GL,
                                             between: Optional[VectorSpaceBetween] = None) -> AffineSpaceInGl:
    """
    Return an affine space N + W that contains the Nikolayevsky derivation.

    As in ``nikolayevsky_like_derivations``, except that the derivations are
    only known to lie between two spaces: N is sought in the larger space and
    the trace condition is imposed against the smaller one, solving for
    generic parameter values. N + W may therefore contain elements that are
    not derivations, or that fail tr(ND) = tr(D) for derivations outside the
    smaller space.

    ``between`` is the result of ``derivations_parametric(G, gl)`` when the
    caller already has it.
    """
    if between is None:
        between = derivations_parametric(G, gl)
    result = _solve_in(between.larger, between.basis_of_smaller_space, gl)
    logger.debug("%r: Nikolayevsky-like derivations of dimension %d (derivations bounds %s)",
                 G, result.dimension, "exact" if between.is_exact else "inexact")
    return result


class NikolayevskyKind(Enum):
    """How a candidate Nikolayevsky derivation is reported, in order of priority."""
    CONDITIONAL = auto()    # a derivation only when some expressions vanish
    DIAGONAL = auto()       # a diagonal derivation
    GENERIC = auto()        # a derivation, diagonal only after a change of basis


class Nikolayevsky:
    """Classification of a candidate Nikolayevsky derivation of G."""

    def __init__(self, G: LieAlgebra, gl: GL, nik):
        self.matrix = gl.to_matrix(nik)
        self.derivation_when: FrozenSet[sympy.Expr] = derivation_when(G, gl, nik)

    def is_diagonal(self) -> bool:
        n = self.matrix.rows
        return all(is_zero(self.matrix[i, j]) for i in range(n) for j in range(n) if i != j)

    def diagonal(self) -> List[sympy.Expr]:
        return [normalize(self.matrix[i, i]) for i in range(self.matrix.rows)]

    @property
    def is_zero(self) -> bool:
        return all(is_zero(x) for x in self.matrix)

    @property
    def kind(self) -> NikolayevskyKind:
        if self.derivation_when:
            return NikolayevskyKind.CONDITIONAL
        if self.is_diagonal():
            return NikolayevskyKind.DIAGONAL
        return NikolayevskyKind.GENERIC

    def to_string(self, style: str = 'latex') -> str:
        kind = self.kind
        if kind is NikolayevskyKind.CONDITIONAL:
            return (f"cannot compute; Nikolayevsky derivation takes the form "
                    f"{render_expr(self.matrix, style)}, only derivation when the following are zero: "
                    f"{render_set(self.derivation_when, style)}")
        if kind is NikolayevskyKind.DIAGONAL:
            return horizontal(self.diagonal(), style)
        return f"if diagonalizable, {render_expr(self.matrix, style)}"

    def __str__(self) -> str:
        return self.to_string()


__all__ = [
    'nikolayevsky_equations', 'nikolayevsky_like_derivations',
    'nikolayevsky_like_derivations_parametric', 'NikolayevskyKind', 'Nikolayevsky',
]
