"""
render.py - Text rendering of expressions, matrices and lists for reports.

Two styles: ``latex`` (typeset, the default for reports) and ``plain``.
Coefficients of generic elements are ``sympy.Dummy`` symbols; they are shown
by name, e.g. ``w1`` rather than ``_w1``.
"""

from typing import Iterable

import sympy

STYLES = ('latex', 'plain')


def _check_style(style: str):
    if style not in STYLES:
        raise ValueError(f"unknown style '{style}', expected one of {STYLES}")


def _display(expr):
    if not isinstance(expr, (sympy.Basic, sympy.MatrixBase)):
        return expr
    dummies = expr.atoms(sympy.Dummy)
    if not dummies:
        return expr
    return expr.xreplace({d: sympy.Symbol(d.name) for d in dummies})


def render_expr(expr, style: str = 'latex') -> str:
    _check_style(style)
    expr = _display(expr)
    if style == 'latex':
        return sympy.latex(expr)
    if isinstance(expr, sympy.MatrixBase):
        # one line, row by row
        return sympy.sstr(expr.tolist())
    return sympy.sstr(expr)


def horizontal(items: Iterable, style: str = 'latex') -> str:
    """Comma-separated list in parentheses, e.g. (1, 1, 2)."""
    return '(' + ', '.join(render_expr(x, style) for x in items) + ')'


def render_set(exprs: Iterable, style: str = 'latex') -> str:
    """Braces around expressions sorted canonically, so output is reproducible."""
    shown = sorted((_display(x) for x in exprs), key=sympy.default_sort_key)
    body = ', '.join(render_expr(x, style) for x in shown)
    if style == 'latex':
        return r'\{' + body + r'\}'
    return '{' + body + '}'


__all__ = ['STYLES', 'render_expr', 'horizontal', 'render_set']
