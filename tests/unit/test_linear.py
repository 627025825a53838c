# -*- coding: utf-8 -*-
"""
tests/unit/test_linear.py

Tests for exact and parametric linear elimination.
"""
import pytest
import sympy

from nilmatrix.core.base import InconsistentSystemError
from nilmatrix.core.linear import (
    ONE,
    ParametricLinearSystem,
    equations_to_rows,
    solve_linear,
)

x, y, z, t = sympy.symbols("x y z t")


class TestEquationsToRows:

    def test_zero_equations_dropped(self):
        assert equations_to_rows([x - x, 2 * x], [x]) == [{x: 2}]

    def test_constant_term(self):
        assert equations_to_rows([x + 3], [x]) == [{x: 1, ONE: 3}]

    def test_no_unknowns(self):
        assert equations_to_rows([sympy.Integer(2)], []) == [{ONE: 2}]


class TestSolveLinear:

    def test_unique_solution(self):
        solution = solve_linear([x + y - 2, x - y], [x, y])
        assert solution.free == ()
        assert solution.particular([x, y]) == [1, 1]

    def test_free_unknown(self):
        solution = solve_linear([x + y], [x, y])
        assert solution.free == (y,)
        assert solution.values[x] == -y
        assert solution.directions([x, y]) == [[-1, 1]]

    def test_inconsistent(self):
        with pytest.raises(InconsistentSystemError):
            solve_linear([x - 1, x - 2], [x])

    def test_symbolic_pivot(self):
        # coefficients in other symbols are taken to be nonzero
        solution = solve_linear([t * x - 1], [x])
        assert solution.values[x] == 1 / t

    def test_empty_system(self):
        solution = solve_linear([], [x, y])
        assert solution.free == (x, y)


class TestParametricLinearSystem:

    @pytest.fixture
    def system(self):
        return ParametricLinearSystem([x + y, t * y], [x, y], [t]).eliminate_linear_equations()

    def test_parameter_dependent_rows_remain(self, system):
        assert system.is_eliminated
        assert system.remaining_equations == [t * y]

    def test_outer_solution_ignores_remaining(self, system):
        outer = system.solution()
        assert outer.free == (y,)
        assert outer.values[x] == -y

    def test_inner_solution_vanishes_identically(self, system):
        assert system.always_conditions() == [y]
        inner = system.always_solution()
        assert inner.free == ()
        assert inner.particular([x, y]) == [0, 0]

    def test_split_by_monomial(self):
        system = ParametricLinearSystem([t * x + t ** 2 * y + z * t], [x, y, z], [t])
        assert set(system.always_conditions()) == {x + z, y}
        assert system.always_solution().free == (z,)

    def test_lazy_elimination(self):
        system = ParametricLinearSystem([x - y], [x, y], [t])
        assert not system.is_eliminated
        assert system.solution().free == (y,)

    def test_without_parameters_matches_solve_linear(self):
        equations = [x + y + z, x - z]
        system = ParametricLinearSystem(equations, [x, y, z])
        assert system.remaining_equations == []
        exact = solve_linear(equations, [x, y, z])
        assert system.solution() == exact
        assert system.always_solution().free == exact.free
