# -*- coding: utf-8 -*-
"""
algebra.py - Lie algebras given by structure constants.

Structure constants are written in the usual compact notation: a
comma-separated list with one entry per basis covector, where the token
``ij`` stands for e^i∧e^j. The k-th entry lists the pairs with a nonzero
k-th component in their bracket:

    "0,0,12"        [e1,e2] = e3
    "0,0,12,13"     [e1,e2] = e3, [e1,e3] = e4
    "0,0,12,[lambda]*13-2*14"

Single digits are numeric coefficients (``2*34``, ``1/2*(26+34)``), so a
coefficient such as 10 must be written ``2*5*12`` or ``[10]*12``; a two-digit
token is always read as a wedge and a longer one is an error. Parameter
expressions go in square brackets and must be polynomial in the parameters.
Wedge tokens use one digit per index, so dimension is at most 9.
"""

import re
import tokenize
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import sympy
from sympy.parsing.sympy_parser import parse_expr

from .base import StructureConstantError, PreconditionError, normalize

_TOKEN = re.compile(r"\[(?P<param>[^\[\]]*)\]|(?P<number>\d+)")
_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z_0-9]*")

MAX_DIMENSION = 9


def _rename_parameters(expression: str, placeholders: Mapping[str, str]) -> str:
    def rename(match):
        name = match.group(0)
        if name not in placeholders:
            raise StructureConstantError(f"undeclared parameter '{name}'")
        return placeholders[name]
    return _IDENTIFIER.sub(rename, expression)


def parse_structure_constants(text: str, parameters: Sequence[str] = ()) -> List[Dict[Tuple[int, int], sympy.Expr]]:
    """
    Parse structure constants into one dict per basis vector.

    Entry k maps (i, j), 0-based with i < j, to the coefficient of e_k in
    [e_i, e_j]. Tokens ``ji`` with j > i count with the opposite sign.
    """
    entries = [entry.strip() for entry in text.split(',')]
    n = len(entries)
    if n > MAX_DIMENSION:
        raise StructureConstantError(f"dimension {n} exceeds {MAX_DIMENSION}")

    placeholders = {name: f"_p{index}" for index, name in enumerate(parameters)}
    symbols = {f"_p{index}": sympy.Symbol(name) for index, name in enumerate(parameters)}

    result = []
    for k, entry in enumerate(entries, start=1):
        if not entry:
            raise StructureConstantError(f"empty entry {k} in '{text}'")
        wedges: Dict[Tuple[int, int], sympy.Symbol] = {}

        def replace(match):
            if match.group('param') is not None:
                return '(' + _rename_parameters(match.group('param'), placeholders) + ')'
            digits = match.group('number')
            if len(digits) == 1:
                return digits
            if len(digits) > 2:
                raise StructureConstantError(f"cannot read token '{digits}' in entry {k}")
            i, j = int(digits[0]), int(digits[1])
            if not (1 <= i <= n and 1 <= j <= n):
                raise StructureConstantError(f"index out of range in token '{digits}' (dimension {n})")
            name = f"_w{i}{j}"
            wedges[(i, j)] = sympy.Symbol(name)
            return name

        source = _TOKEN.sub(replace, entry)
        local_dict = dict(symbols)
        local_dict.update({s.name: s for s in wedges.values()})
        for name in _IDENTIFIER.findall(source):
            if name not in local_dict:
                raise StructureConstantError(
                    f"unexpected name '{name}' in entry {k}; parameters go in square brackets")
        try:
            expr = sympy.expand(parse_expr(source, local_dict=local_dict))
        except (SyntaxError, TypeError, tokenize.TokenError, sympy.SympifyError) as e:
            raise StructureConstantError(f"cannot parse entry {k}: '{entry}'") from e

        terms: Dict[Tuple[int, int], sympy.Expr] = {}
        for (i, j), w in wedges.items():
            coefficient = expr.coeff(w)
            if i == j:
                continue
            key, sign = ((i - 1, j - 1), 1) if i < j else ((j - 1, i - 1), -1)
            terms[key] = terms.get(key, 0) + sign * coefficient
        remainder = normalize(expr - sum(expr.coeff(w) * w for w in wedges.values()))
        if remainder != 0 or any(c.free_symbols & set(wedges.values()) for c in terms.values()):
            raise StructureConstantError(f"entry {k} is not linear in e^ij: '{entry}'")
        coefficients = {key: normalize(c) for key, c in terms.items()}
        parameter_symbols = list(symbols.values())
        for c in coefficients.values():
            if not c.is_polynomial(*parameter_symbols):
                raise StructureConstantError(f"entry {k} is not polynomial in the parameters: '{entry}'")
        result.append({key: c for key, c in coefficients.items() if c != 0})
    return result


def _format_coefficient(c: sympy.Expr) -> str:
    if c == 1:
        return ''
    if c == -1:
        return '-'
    if c.is_number:
        return f"{sympy.sstr(c)}*"
    return f"[{sympy.sstr(c)}]*"


def format_structure_constants(tensor: np.ndarray) -> str:
    """Inverse of ``parse_structure_constants`` on a structure-constant tensor."""
    n = tensor.shape[0]
    entries = []
    for k in range(n):
        text = ''
        for i in range(n):
            for j in range(i + 1, n):
                c = tensor[i, j, k]
                if c == 0:
                    continue
                term = f"{_format_coefficient(c)}{i + 1}{j + 1}"
                if text and not term.startswith('-'):
                    text += '+'
                text += term
        entries.append(text or '0')
    return ','.join(entries)


class LieAlgebra:
    """
    Lie algebra of dimension n on the basis e_1..e_n.

    The bracket is [e_i, e_j] = Σ_k c[i, j, k] e_k, where ``c`` is an
    antisymmetric tensor of sympy expressions that may involve parameters.
    Vectors are sympy column matrices of coefficients.

    The Jacobi identity is assumed, not checked; see ``jacobi_defects``.
    Instances are read-only.
    """

    def __init__(self, structure_constants: str, parameters: Sequence[str] = ()):
        names = tuple(parameters)
        if len(set(names)) != len(names):
            raise StructureConstantError(f"repeated parameter names: {names}")
        entries = parse_structure_constants(structure_constants, names)
        n = len(entries)
        tensor = np.full((n, n, n), sympy.S.Zero, dtype=object)
        for k, terms in enumerate(entries):
            for (i, j), c in terms.items():
                tensor[i, j, k] = c
                tensor[j, i, k] = -c
        self._set_tensor(tensor, tuple(sympy.Symbol(name) for name in names))

    @classmethod
    def from_tensor(cls, tensor: np.ndarray, parameters: Sequence[sympy.Symbol] = ()) -> 'LieAlgebra':
        tensor = np.asarray(tensor, dtype=object)
        if tensor.ndim != 3 or len(set(tensor.shape)) != 1:
            raise PreconditionError(f"structure-constant tensor must be n×n×n, got {tensor.shape}")
        obj = cls.__new__(cls)
        obj._set_tensor(tensor.copy(), tuple(parameters))
        return obj

    def _set_tensor(self, tensor: np.ndarray, parameters: Tuple[sympy.Symbol, ...]):
        n = tensor.shape[0]
        for index in np.ndindex(tensor.shape):
            tensor[index] = normalize(tensor[index])
        tensor.setflags(write=False)
        self._tensor = tensor
        self._parameters = parameters
        self._dimension = n
        # nonzero [e_i, e_j], i < j
        self._terms = tuple(
            (i, j, k, tensor[i, j, k])
            for i in range(n) for j in range(i + 1, n) for k in range(n)
            if tensor[i, j, k] != 0
        )

    # === Properties ===

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def parameters(self) -> Tuple[sympy.Symbol, ...]:
        return self._parameters

    @property
    def has_parameters(self) -> bool:
        return bool(self._parameters)

    @property
    def tensor(self) -> np.ndarray:
        """Read-only structure-constant tensor c[i, j, k], 0-based."""
        return self._tensor

    def e(self, i: int) -> sympy.ImmutableMatrix:
        """The basis vector e_i, counting from 1."""
        if not 1 <= i <= self._dimension:
            raise IndexError(f"basis index {i} out of range 1..{self._dimension}")
        v = [0] * self._dimension
        v[i - 1] = 1
        return sympy.ImmutableMatrix(v)

    def basis(self) -> List[sympy.ImmutableMatrix]:
        return [self.e(i) for i in range(1, self._dimension + 1)]

    def structure_constants(self) -> Tuple[str, ...]:
        """One entry per basis covector, in the input notation."""
        return tuple(str(self).split(','))

    # === Algebra ===

    def bracket(self, X, Y) -> sympy.ImmutableMatrix:
        X = sympy.Matrix(X)
        Y = sympy.Matrix(Y)
        result = [sympy.S.Zero] * self._dimension
        for i, j, k, c in self._terms:
            result[k] += c * (X[i] * Y[j] - X[j] * Y[i])
        return sympy.ImmutableMatrix([sympy.expand(r) for r in result])

    def jacobi_defects(self) -> List[sympy.Expr]:
        """
        Nonzero components of [[x,y],z] + [[y,z],x] + [[z,x],y] on basis triples.
        Empty for a genuine Lie algebra.
        """
        defects = []
        basis = self.basis()
        n = self._dimension
        for a in range(n):
            for b in range(a + 1, n):
                for c in range(b + 1, n):
                    x, y, z = basis[a], basis[b], basis[c]
                    jacobiator = (self.bracket(self.bracket(x, y), z)
                                  + self.bracket(self.bracket(y, z), x)
                                  + self.bracket(self.bracket(z, x), y))
                    defects.extend(d for d in (normalize(v) for v in jacobiator) if d != 0)
        return defects

    def specialize(self, values: Mapping) -> 'LieAlgebra':
        """Substitute values for some parameters, given by name or symbol."""
        by_name = {p.name: p for p in self._parameters}
        substitution = {}
        for key, value in values.items():
            symbol = by_name.get(key, key) if isinstance(key, str) else key
            if symbol not in self._parameters:
                raise PreconditionError(f"'{key}' is not a parameter of {self!r}")
            substitution[symbol] = sympy.sympify(value)
        tensor = np.vectorize(lambda c: c.subs(substitution), otypes=[object])(self._tensor)
        remaining = tuple(p for p in self._parameters if p not in substitution)
        return LieAlgebra.from_tensor(tensor, remaining)

    # === Display ===

    def __str__(self) -> str:
        return format_structure_constants(self._tensor)

    def __repr__(self) -> str:
        if self._parameters:
            names = tuple(p.name for p in self._parameters)
            return f"LieAlgebra('{self}', parameters={names})"
        return f"LieAlgebra('{self}')"


__all__ = ['LieAlgebra', 'parse_structure_constants', 'format_structure_constants', 'MAX_DIMENSION']
