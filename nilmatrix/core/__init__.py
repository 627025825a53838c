"""
nilmatrix.core - Lie algebras, gl(n), linear elimination and derivations.
"""

from .base import (
    NilmatrixError,
    StructureConstantError,
    PreconditionError,
    InconsistentSystemError,
    ConfigError,
)
from .algebra import LieAlgebra
from .gl import GL
from .space import VectorSpace, VectorSpaceBetween, AffineSpaceInGl
