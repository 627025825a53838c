# -*- coding: utf-8 -*-
"""
tests/unit/test_space.py

Tests for gl(n), VectorSpace, VectorSpaceBetween and AffineSpaceInGl.
"""
import pytest
import sympy

from nilmatrix.core.base import InconsistentSystemError, PreconditionError
from nilmatrix.core.gl import GL
from nilmatrix.core.space import AffineSpaceInGl, VectorSpace, VectorSpaceBetween


@pytest.fixture
def plane():
    """span(e1, e2) in R^3."""
    return VectorSpace([[1, 0, 0], [0, 1, 0]])


class TestGL:

    def test_dimension_and_names(self):
        gl = GL(2)
        assert gl.dimension == 4
        assert [a.name for a in gl.coordinates] == ["a11", "a12", "a21", "a22"]

    def test_row_major_coordinates(self):
        gl = GL(2)
        M = sympy.Matrix([[1, 2], [3, 4]])
        assert gl.from_matrix(M) == sympy.Matrix([1, 2, 3, 4])
        assert gl.to_matrix([1, 2, 3, 4]) == M
        assert gl.to_matrix(M) == M

    def test_action_columns_are_images(self):
        gl = GL(2)
        A = sympy.Matrix([[1, 2], [3, 4]])
        assert gl.action(A, [1, 0]) == sympy.Matrix([1, 3])

    def test_identity_and_trace(self):
        gl = GL(3)
        assert gl.to_matrix(gl.identity()) == sympy.eye(3)
        assert gl.trace(gl.identity()) == 3

    def test_commutator(self):
        gl = GL(2)
        E12 = sympy.Matrix([[0, 1], [0, 0]])
        E21 = sympy.Matrix([[0, 0], [1, 0]])
        assert gl.commutator(E12, E21) == sympy.Matrix([[1, 0], [0, -1]])

    def test_wrong_size(self):
        with pytest.raises(PreconditionError):
            GL(2).to_matrix([1, 2, 3])
        with pytest.raises(PreconditionError):
            GL(0)


class TestVectorSpace:

    def test_basics(self, plane):
        assert plane.dimension == 2
        assert len(plane) == 2
        assert plane.ambient == 3
        assert plane.e(2) == sympy.Matrix([0, 1, 0])
        assert plane.zero() == sympy.zeros(3, 1)

    def test_generic_element(self, plane):
        c1, c2 = plane.coefficients
        assert plane.generic_element() == sympy.Matrix([c1, c2, 0])

    def test_contains(self, plane):
        assert plane.contains([5, -1, 0])
        assert not plane.contains([0, 0, 1])
        assert not plane.contains([1, 0])

    def test_empty_space_needs_ambient(self):
        with pytest.raises(PreconditionError):
            VectorSpace([])
        assert VectorSpace([], ambient=4).dimension == 0

    def test_mismatched_basis(self):
        with pytest.raises(PreconditionError):
            VectorSpace([[1, 0], [1, 0, 0]])

    def test_subspace_from_equations(self, plane):
        c1, c2 = plane.coefficients
        line = plane.subspace_from_equations([c1 - c2])
        assert line.dimension == 1
        assert line.contains([1, 1, 0])
        assert not line.contains([1, 0, 0])

    def test_get_solutions_inhomogeneous(self, plane):
        c1, _ = plane.coefficients
        basis, particular = plane.get_solutions([c1 - 1])
        assert len(basis) == 1
        assert particular == sympy.Matrix([1, 0, 0])

    def test_get_solutions_homogeneous(self, plane):
        c1, _ = plane.coefficients
        basis, particular = plane.get_solutions([c1])
        assert len(basis) == 1
        assert particular == plane.zero()

    def test_get_solutions_inconsistent(self, plane):
        c1, _ = plane.coefficients
        with pytest.raises(InconsistentSystemError):
            plane.get_solutions([c1 - 1, c1 - 2])

    def test_coefficient_names_are_deterministic(self):
        a = VectorSpace([[1, 0]], prefix='d')
        b = VectorSpace([[0, 1]], prefix='d')
        assert a.coefficients[0].name == b.coefficients[0].name == "d1"
        assert a.coefficients[0] != b.coefficients[0]


class TestVectorSpaceBetween:

    def test_exact(self):
        between = VectorSpaceBetween(
            basis_of_smaller_space=(sympy.ImmutableMatrix([1, 0]),),
            basis_of_larger_space=(sympy.ImmutableMatrix([1, 0]),),
            ambient=2,
        )
        assert between.is_exact
        assert between.smaller.dimension == between.larger.dimension == 1

    def test_inexact(self):
        between = VectorSpaceBetween(
            basis_of_smaller_space=(),
            basis_of_larger_space=(sympy.ImmutableMatrix([1, 0]),),
            ambient=2,
        )
        assert not between.is_exact
        assert between.smaller.ambient == 2


class TestAffineSpaceInGl:

    @pytest.fixture
    def affine(self):
        """(1, 0, 0) + span((0, 1, 0))."""
        return AffineSpaceInGl(N=sympy.ImmutableMatrix([1, 0, 0]), W=VectorSpace([[0, 1, 0]]))

    def test_contains(self, affine):
        assert affine.contains([1, 5, 0])
        assert not affine.contains([0, 1, 0])
        assert affine.dimension == 1

    def test_translate(self, affine):
        moved = affine.translate([-1, 0, 2])
        assert moved.contains([0, 7, 2])
        assert not moved.contains([1, 7, 0])

    def test_intersect_in_point(self, affine):
        result = affine.intersect(VectorSpace([[1, 1, 0]]))
        assert result is not None
        assert result.dimension == 0
        assert result.N == sympy.Matrix([1, 1, 0])

    def test_intersect_empty(self, affine):
        assert affine.intersect(VectorSpace([[0, 0, 1]])) is None

    def test_intersect_keeps_directions(self, affine):
        result = affine.intersect(VectorSpace([[1, 0, 0], [0, 1, 0]]))
        assert result.dimension == 1
        assert result.contains([1, -3, 0])

    def test_intersect_ambient_mismatch(self, affine):
        with pytest.raises(PreconditionError):
            affine.intersect(VectorSpace([[1, 0]]))
