# -*- coding: utf-8 -*-
"""
linear.py - Exact linear elimination over a symbolic coefficient ring.

Equations are stored as sparse rows {unknown: coefficient}, with the constant
term under the key ``ONE``. Elimination is Gauss-Jordan: each pivot row is
solved for its pivot unknown and substituted into every other row and every
earlier solution, so solved unknowns are always expressed in free ones.

Two entry points:

- ``solve_linear``: generic solve, any nonzero coefficient may be a pivot.
  Coefficients depending on parameters are assumed nonzero.
- ``ParametricLinearSystem``: only parameter-free coefficients are pivots,
  so every elimination step is valid for all parameter values. The leftover
  equations give an outer solution (ignore them) and an inner solution
  (require them to vanish identically in the parameters).
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import sympy

from .base import InconsistentSystemError, normalize

ONE = sympy.S.One

Row = Dict[sympy.Expr, sympy.Expr]


@dataclass(frozen=True)
class GenericSolution:
    """
    Solution of a linear system in generic form.

    values: every unknown -> expression affine in the free unknowns
    free:   unknowns left undetermined, in the order of the original unknowns
    """
    values: Dict[sympy.Symbol, sympy.Expr]
    free: Tuple[sympy.Symbol, ...]

    def direction(self, unknowns: Sequence[sympy.Symbol], f: sympy.Symbol) -> List[sympy.Expr]:
        """Coefficients of the free unknown ``f`` in each value."""
        return [normalize(sympy.diff(self.values[u], f)) for u in unknowns]

    def directions(self, unknowns: Sequence[sympy.Symbol]) -> List[List[sympy.Expr]]:
        return [self.direction(unknowns, f) for f in self.free]

    def particular(self, unknowns: Sequence[sympy.Symbol]) -> List[sympy.Expr]:
        """Values with all free unknowns set to zero."""
        zero = {f: 0 for f in self.free}
        return [normalize(self.values[u].subs(zero)) for u in unknowns]

    def compose(self, inner: 'GenericSolution') -> 'GenericSolution':
        """Substitute a solution for (some of) our free unknowns."""
        values = {u: normalize(v.subs(inner.values, simultaneous=True)) for u, v in self.values.items()}
        return GenericSolution(values=values, free=inner.free)


# === Sparse rows ===

def equations_to_rows(equations: Iterable[sympy.Expr], unknowns: Sequence[sympy.Symbol]) -> List[Row]:
    """Turn equations ``expr = 0`` linear in ``unknowns`` into sparse rows."""
    equations = [sympy.expand(e) for e in equations]
    equations = [e for e in equations if normalize(e) != 0]
    if not equations:
        return []
    if not unknowns:
        return [{ONE: normalize(e)} for e in equations]
    A, b = sympy.linear_eq_to_matrix(equations, list(unknowns))
    rows = []
    for i in range(A.rows):
        row = {}
        for j, u in enumerate(unknowns):
            a = normalize(A[i, j])
            if a != 0:
                row[u] = a
        constant = normalize(-b[i])
        if constant != 0:
            row[ONE] = constant
        if row:
            rows.append(row)
    return rows


def row_to_expr(row: Row) -> sympy.Expr:
    return sympy.Add(*[c if u is ONE else c * u for u, c in row.items()])


def _substitute(row: Row, u: sympy.Symbol, value: Row) -> Row:
    """Replace ``u`` in ``row`` by the linear expression ``value``."""
    a = row.get(u)
    if a is None:
        return row
    result = {k: c for k, c in row.items() if k != u}
    for v, b in value.items():
        s = normalize(result.get(v, 0) + a * b)
        if s == 0:
            result.pop(v, None)
        else:
            result[v] = s
    return result


def _find_pivot(rows: List[Row], unknowns: Sequence[sympy.Symbol],
                can_pivot: Callable[[sympy.Expr], bool]) -> Optional[Tuple[int, sympy.Symbol]]:
    for index, row in enumerate(rows):
        for u in unknowns:
            if u in row and can_pivot(row[u]):
                return index, u
    return None


def eliminate(rows: List[Row], unknowns: Sequence[sympy.Symbol],
              can_pivot: Callable[[sympy.Expr], bool]) -> Tuple[Dict[sympy.Symbol, Row], List[Row]]:
    """
    Gauss-Jordan elimination restricted to pivots accepted by ``can_pivot``.

    Returns (solved, remaining): solved maps each pivot unknown to a row
    giving its value in terms of non-pivot unknowns; remaining are the rows
    that contain no acceptable pivot.
    """
    solved: Dict[sympy.Symbol, Row] = {}
    pending = list(rows)
    while True:
        choice = _find_pivot(pending, unknowns, can_pivot)
        if choice is None:
            break
        index, u = choice
        row = pending.pop(index)
        c = row[u]
        value = {v: normalize(-a / c) for v, a in row.items() if v != u}
        pending = [r for r in (_substitute(r, u, value) for r in pending) if r]
        solved = {w: _substitute(val, u, value) for w, val in solved.items()}
        solved[u] = value
    return solved, pending


def _generic_solution(solved: Dict[sympy.Symbol, Row], unknowns: Sequence[sympy.Symbol]) -> GenericSolution:
    values = {}
    for u in unknowns:
        values[u] = row_to_expr(solved[u]) if u in solved else u
    free = tuple(u for u in unknowns if u not in solved)
    return GenericSolution(values=values, free=free)


# === Generic solve ===

def solve_linear(equations: Iterable[sympy.Expr], unknowns: Sequence[sympy.Symbol]) -> GenericSolution:
    """
    Solve a linear system exactly, for generic values of any other symbols.

    Raises InconsistentSystemError if a row reduces to a nonzero constant.
    """
    unknowns = tuple(unknowns)
    rows = equations_to_rows(equations, unknowns)
    solved, remaining = eliminate(rows, unknowns, lambda c: True)
    if remaining:
        # only constant rows survive a generic elimination
        raise InconsistentSystemError(f"linear system has no solution: {row_to_expr(remaining[0])} = 0")
    return _generic_solution(solved, unknowns)


# === Parametric elimination ===

class ParametricLinearSystem:
    """
    Homogeneous linear equations whose coefficients depend on parameters.

    Call ``eliminate_linear_equations()`` once, then read the two bounds:
    ``solution()`` satisfies only the equations that could be eliminated with
    parameter-free pivots; ``always_solution()`` additionally satisfies the
    remaining ones for every value of the parameters.
    """

    def __init__(self, equations: Iterable[sympy.Expr], unknowns: Sequence[sympy.Symbol],
                 parameters: Sequence[sympy.Symbol] = ()):
        self.unknowns = tuple(unknowns)
        self.parameters = tuple(parameters)
        self._rows = equations_to_rows(equations, self.unknowns)
        self._solved: Optional[Dict[sympy.Symbol, Row]] = None
        self._remaining: List[Row] = []

    def _parameter_free(self, coefficient: sympy.Expr) -> bool:
        return not (coefficient.free_symbols & set(self.parameters))

    def eliminate_linear_equations(self) -> 'ParametricLinearSystem':
        self._solved, self._remaining = eliminate(self._rows, self.unknowns, self._parameter_free)
        return self

    @property
    def is_eliminated(self) -> bool:
        return self._solved is not None

    def _require_eliminated(self):
        if not self.is_eliminated:
            self.eliminate_linear_equations()

    @property
    def remaining_equations(self) -> List[sympy.Expr]:
        """Equations with only parameter-dependent coefficients, left after elimination."""
        self._require_eliminated()
        return [row_to_expr(row) for row in self._remaining]

    def solution(self) -> GenericSolution:
        """Outer bound: the remaining equations are ignored."""
        self._require_eliminated()
        return _generic_solution(self._solved, self.unknowns)

    def always_conditions(self) -> List[sympy.Expr]:
        """
        Split each remaining equation by parameter monomials.
        The resulting equations have parameter-free coefficients.
        """
        self._require_eliminated()
        conditions = []
        for row in self._remaining:
            if not self.parameters:
                conditions.append(row_to_expr(row))
                continue
            by_monomial: Dict[Tuple[int, ...], sympy.Expr] = {}
            for u, c in row.items():
                for monomial, coeff in sympy.Poly(c, *self.parameters).terms():
                    term = coeff if u is ONE else coeff * u
                    by_monomial[monomial] = by_monomial.get(monomial, 0) + term
            conditions.extend(by_monomial.values())
        return conditions

    def always_solution(self) -> GenericSolution:
        """Inner bound: solutions valid for every value of the parameters."""
        outer = self.solution()
        inner = solve_linear(self.always_conditions(), outer.free)
        return outer.compose(inner)


__all__ = [
    'ONE', 'GenericSolution', 'equations_to_rows', 'row_to_expr', 'eliminate',
    'solve_linear', 'ParametricLinearSystem',
]
