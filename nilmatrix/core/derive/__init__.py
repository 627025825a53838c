# -*- coding: utf-8 -*-
"""
derive package - Derivations and the spaces built from them

Re-exports the solvers from the sub-modules.
"""

# Derivations, exact and bracketed
from .derivations import (
    derivation_defect,
    derivation_defects,
    derivation_equations,
    derivations,
    derivations_parametric,
    derivation_when,
)

# Nikolayevsky derivation
from .nikolayevsky import (
    nikolayevsky_equations,
    nikolayevsky_like_derivations,
    nikolayevsky_like_derivations_parametric,
    NikolayevskyKind,
    Nikolayevsky,
)

# Centralizer
from .centralizer import centralizer
