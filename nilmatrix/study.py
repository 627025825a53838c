# -*- coding: utf-8 -*-
"""
study.py - Study driver.

For each Lie algebra, compute an affine space N + W containing the
Nikolayevsky derivation, classify N, and bound the centralizer of N in W.
The result is a ``StudyReport`` that renders to text lines.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Optional, Tuple

import sympy

from .core.algebra import LieAlgebra
from .core.base import ConfigError, NilmatrixError
from .core.derive import (
    Nikolayevsky,
    centralizer,
    derivation_when,
    derivations_parametric,
    nikolayevsky_like_derivations_parametric,
)
from .core.gl import GL
from .log import get_logger
from .plugins.classification import Classification
from .render import render_expr, render_set

logger = get_logger(__name__)


@dataclass(frozen=True)
class StudyReport:
    """Everything ``study_group`` finds out about one Lie algebra."""
    structure_constants: Tuple[str, ...]
    nikolayevsky: Nikolayevsky
    nikolayevsky_is_zero: bool
    generic_derivation: Optional[sympy.ImmutableMatrix] = None
    generic_derivation_conditions: FrozenSet[sympy.Expr] = frozenset()
    centralizer_dimension: Optional[int] = None
    centralizer_generic_element: Optional[sympy.ImmutableMatrix] = None
    centralizer_conditions: FrozenSet[sympy.Expr] = frozenset()

    def lines(self, style: str = 'latex') -> List[str]:
        result = [
            f"Lie algebra: ({', '.join(self.structure_constants)})",
            f"Nikolayevsky derivation: {self.nikolayevsky.to_string(style)}",
        ]
        if self.generic_derivation is not None:
            result.append(f"generic derivation {render_expr(self.generic_derivation, style)}")
            result.append("derivation when the following are zero: "
                          f"{render_set(self.generic_derivation_conditions, style)}")
        if self.nikolayevsky_is_zero:
            result.append("Nikolayevsky derivation is zero")
            return result
        result.append(f"centralizer contained in space of dimension {self.centralizer_dimension}")
        if self.centralizer_generic_element is not None:
            result.append(f"generic element {render_expr(self.centralizer_generic_element, style)}")
            if self.centralizer_conditions:
                result.append("derivation when the following are zero: "
                              f"{render_set(self.centralizer_conditions, style)}")
        return result

    def render(self, style: str = 'latex') -> str:
        return '\n'.join(self.lines(style))


def study_group(G: LieAlgebra, config=None) -> StudyReport:
    """
    Study one Lie algebra.

    Args:
        G: Lie algebra, possibly depending on parameters
        config: a ``StudyConfig``; only ``show_derivations`` is read here

    The centralizer is computed in W, the directions of the Nikolayevsky
    space, which lies in the outer bound for the derivations. Elements of
    W that are derivations only for special parameter values are reported
    with the conditions they need.
    """
    show_derivations = bool(config is not None and config.show_derivations)
    gl = GL(G.dimension)
    between = derivations_parametric(G, gl)
    nik_space = nikolayevsky_like_derivations_parametric(G, gl, between)
    nikolayevsky = Nikolayevsky(G, gl, nik_space.N)
    fields = dict(
        structure_constants=G.structure_constants(),
        nikolayevsky=nikolayevsky,
        nikolayevsky_is_zero=nikolayevsky.is_zero,
    )

    if show_derivations:
        generic = between.larger.generic_element()
        fields.update(
            generic_derivation=gl.to_matrix(generic),
            generic_derivation_conditions=derivation_when(G, gl, generic),
        )

    if nikolayevsky.is_zero:
        logger.info("%r: Nikolayevsky derivation is zero", G)
        return StudyReport(**fields)

    C = centralizer(nik_space.N, nik_space.W, gl)
    fields['centralizer_dimension'] = C.dimension
    if C.dimension:
        generic = C.generic_element()
        fields.update(
            centralizer_generic_element=gl.to_matrix(generic),
            centralizer_conditions=derivation_when(G, gl, generic),
        )
    logger.info("%r: Nikolayevsky derivation %s, centralizer of dimension %d",
                G, nikolayevsky.kind.name.lower(), C.dimension)
    return StudyReport(**fields)


def study_catalog(catalog: Classification, config=None) -> Iterator[Tuple[str, StudyReport]]:
    """
    Study every entry of ``catalog`` in order, or just the one named by
    ``config.only``.

    An entry that raises ``NilmatrixError`` is logged and skipped.
    """
    only = config.only if config is not None else None
    if only is not None:
        try:
            G = catalog.by_name(only)
        except KeyError as e:
            raise ConfigError(str(e)) from None
        entries = [(only, G)]
    else:
        entries = catalog.items()
    for name, G in entries:
        logger.info("studying %s", name)
        try:
            report = study_group(G, config)
        except NilmatrixError as e:
            logger.error("%s: %s", name, e)
            continue
        yield name, report


__all__ = ['StudyReport', 'study_group', 'study_catalog']
