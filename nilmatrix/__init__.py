"""
nilmatrix - Derivations of nilpotent Lie algebras given by structure constants.

Core modules:
- nilmatrix.core: LieAlgebra, gl(n), vector spaces, derive
- nilmatrix.plugins: Catalogs of nilpotent Lie algebras
- nilmatrix.study: Nikolayevsky derivation and centralizer reports
"""

from nilmatrix.core.base import (
    NilmatrixError,
    StructureConstantError,
    PreconditionError,
    InconsistentSystemError,
    ConfigError,
)
from nilmatrix.core.algebra import LieAlgebra
from nilmatrix.core.gl import GL
from nilmatrix.core.space import VectorSpace, VectorSpaceBetween, AffineSpaceInGl
from nilmatrix.core.derive import (
    derivations,
    derivations_parametric,
    derivation_when,
    nikolayevsky_like_derivations,
    nikolayevsky_like_derivations_parametric,
    Nikolayevsky,
    NikolayevskyKind,
    centralizer,
)
from nilmatrix.plugins.classification import (
    Classification,
    NilpotentLieAlgebras7,
    NonniceNilpotentLieAlgebras7,
)
from nilmatrix.study import StudyReport, study_group, study_catalog

__version__ = "1.0.0"
__all__ = [
    "NilmatrixError",
    "StructureConstantError",
    "PreconditionError",
    "InconsistentSystemError",
    "ConfigError",
    "LieAlgebra",
    "GL",
    "VectorSpace",
    "VectorSpaceBetween",
    "AffineSpaceInGl",
    "derivations",
    "derivations_parametric",
    "derivation_when",
    "nikolayevsky_like_derivations",
    "nikolayevsky_like_derivations_parametric",
    "Nikolayevsky",
    "NikolayevskyKind",
    "centralizer",
    "Classification",
    "NilpotentLieAlgebras7",
    "NonniceNilpotentLieAlgebras7",
    "StudyReport",
    "study_group",
    "study_catalog",
]
