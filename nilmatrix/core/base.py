#!/usr/bin/env python3
"""
base.py - Exception hierarchy and shared symbolic helpers.
Kept free of imports from sibling modules to avoid circular dependencies.
"""
from typing import Iterable, List

import sympy


class NilmatrixError(Exception):
    """Base class for all errors raised by nilmatrix."""
    pass


class StructureConstantError(NilmatrixError, ValueError):
    """Raised when a structure-constant string cannot be parsed."""
    pass


class PreconditionError(NilmatrixError):
    """Raised when an operation is called on input it does not accept."""
    pass


class InconsistentSystemError(NilmatrixError):
    """Raised when a linear system has no solution."""
    pass


class ConfigError(NilmatrixError, ValueError):
    """Raised on an invalid study configuration."""
    pass


# === Symbolic normal form ===

def normalize(expr) -> sympy.Expr:
    """Canonical form for coefficients: polynomials expanded, rational functions cancelled."""
    return sympy.cancel(sympy.expand(expr))


def is_zero(expr) -> bool:
    """Identically zero in the coefficient ring."""
    return normalize(expr) == 0


def nonzero_coefficients(vectors: Iterable[sympy.MatrixBase]) -> List[sympy.Expr]:
    """
    Flatten the components of each vector, drop the ones that vanish.
    Order is preserved; repeated expressions are kept once.
    """
    seen = set()
    result = []
    for v in vectors:
        for c in v:
            c = normalize(c)
            if c == 0 or c in seen:
                continue
            seen.add(c)
            result.append(c)
    return result


__all__ = [
    'NilmatrixError', 'StructureConstantError', 'PreconditionError',
    'InconsistentSystemError', 'ConfigError', 'normalize', 'is_zero', 'nonzero_coefficients',
]
