# -*- coding: utf-8 -*-
"""
tests/unit/test_algebra.py

Tests for LieAlgebra: structure-constant parsing, bracket, Jacobi check,
specialization.
"""
import numpy as np
import pytest
import sympy

from nilmatrix.core.algebra import LieAlgebra, MAX_DIMENSION
from nilmatrix.core.base import PreconditionError, StructureConstantError


@pytest.fixture
def heisenberg():
    return LieAlgebra("0,0,12")


@pytest.fixture
def parametric():
    return LieAlgebra("0,0,12,[lambda]*13", ["lambda"])


class TestParsing:
    """Structure constants in the compact e^ij notation."""

    def test_heisenberg_bracket(self, heisenberg):
        G = heisenberg
        assert G.dimension == 3
        assert G.bracket(G.e(1), G.e(2)) == G.e(3)
        assert G.bracket(G.e(2), G.e(1)) == -G.e(3)
        assert G.bracket(G.e(1), G.e(3)) == sympy.zeros(3, 1)

    def test_tensor_is_antisymmetric(self, heisenberg):
        c = heisenberg.tensor
        assert c[0, 1, 2] == 1
        assert c[1, 0, 2] == -1

    def test_reversed_token_changes_sign(self):
        G = LieAlgebra("0,0,21")
        assert G.bracket(G.e(1), G.e(2)) == -G.e(3)

    def test_repeated_index_is_zero(self):
        G = LieAlgebra("0,0,11")
        assert G.bracket(G.e(1), G.e(2)) == sympy.zeros(3, 1)
        assert str(G) == "0,0,0"

    def test_numeric_coefficients(self):
        G = LieAlgebra("0,0,0,0,1/2*(12+34)")
        assert G.tensor[0, 1, 4] == sympy.Rational(1, 2)
        assert G.tensor[2, 3, 4] == sympy.Rational(1, 2)

    def test_larger_coefficients(self):
        G = LieAlgebra("0,0,[10]*12")
        assert G.tensor[0, 1, 2] == 10
        assert LieAlgebra("0,0,2*5*12").tensor[0, 1, 2] == 10

    def test_whitespace_is_ignored(self):
        assert str(LieAlgebra("0, 0, 12 + 0")) == "0,0,12"

    def test_parameter_named_like_keyword(self, parametric):
        lam = sympy.Symbol("lambda")
        assert parametric.parameters == (lam,)
        assert parametric.has_parameters
        assert parametric.tensor[0, 2, 3] == lam

    def test_parameter_expression(self):
        G = LieAlgebra("0,0,12,[1-lambda]*13", ["lambda"])
        assert G.tensor[0, 2, 3] == 1 - sympy.Symbol("lambda")

    def test_str_round_trip(self, parametric):
        assert str(parametric) == "0,0,12,[lambda]*13"
        assert str(LieAlgebra("0,0,2*12,-13")) == "0,0,2*12,-13"

    def test_structure_constants_tuple(self, heisenberg):
        assert heisenberg.structure_constants() == ("0", "0", "12")

    def test_repr_mentions_parameters(self, parametric):
        assert "lambda" in repr(parametric)


class TestParsingErrors:
    """Malformed input raises StructureConstantError."""

    @pytest.mark.parametrize("text", [
        "0,0,14",           # index out of range
        "0,0,123",          # three-digit token
        "0,0,12*13",        # not linear in e^ij
        "0,,12",            # empty entry
        "0,0,x",            # name outside brackets
        "0,0,12+*13",       # unparsable
        "0,0,10*12",        # two digits are a wedge, not a number
    ])
    def test_malformed(self, text):
        with pytest.raises(StructureConstantError):
            LieAlgebra(text)

    def test_undeclared_parameter(self):
        with pytest.raises(StructureConstantError):
            LieAlgebra("0,0,[mu]*12")

    @pytest.mark.parametrize("text", [
        "0,0,12,[1/lambda]*13",
        "0,0,12,[lambda**(1/2)]*13",
        "0,0,12,[1/(1-lambda)]*13",
    ])
    def test_non_polynomial_parameter(self, text):
        with pytest.raises(StructureConstantError, match="polynomial"):
            LieAlgebra(text, ["lambda"])

    def test_rational_numbers_allowed_with_parameters(self):
        G = LieAlgebra("0,0,12,[lambda/2]*13", ["lambda"])
        assert G.tensor[0, 2, 3] == sympy.Symbol("lambda") / 2

    def test_repeated_parameter_names(self):
        with pytest.raises(StructureConstantError):
            LieAlgebra("0,0,[a]*12", ["a", "a"])

    def test_dimension_limit(self):
        with pytest.raises(StructureConstantError):
            LieAlgebra(",".join(["0"] * (MAX_DIMENSION + 1)))

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            LieAlgebra("0,0,14")


class TestLieAlgebra:

    def test_basis_index_from_one(self, heisenberg):
        assert heisenberg.e(1) == sympy.Matrix([1, 0, 0])
        with pytest.raises(IndexError):
            heisenberg.e(0)
        with pytest.raises(IndexError):
            heisenberg.e(4)

    def test_tensor_is_read_only(self, heisenberg):
        with pytest.raises(ValueError):
            heisenberg.tensor[0, 1, 2] = 5

    def test_jacobi_holds(self, heisenberg, parametric):
        assert heisenberg.jacobi_defects() == []
        assert parametric.jacobi_defects() == []

    def test_jacobi_fails(self):
        # [[e1,e2],e4] = [e3,e4] = e4
        assert LieAlgebra("0,0,12,34").jacobi_defects() == [1]

    def test_specialize(self, parametric):
        G0 = parametric.specialize({"lambda": 0})
        assert not G0.has_parameters
        assert str(G0) == "0,0,12,0"
        G2 = parametric.specialize({sympy.Symbol("lambda"): 2})
        assert str(G2) == "0,0,12,2*13"

    def test_specialize_unknown_parameter(self, parametric):
        with pytest.raises(PreconditionError):
            parametric.specialize({"mu": 1})

    def test_from_tensor_shape(self):
        with pytest.raises(PreconditionError):
            LieAlgebra.from_tensor(np.zeros((2, 2, 3), dtype=object))
