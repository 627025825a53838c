# -*- coding: utf-8 -*-
"""
classification/base.py - Immutable registries of Lie algebras.

A classification is a list of entries, each a structure-constant string with
the names of the parameters it depends on. Subclasses only supply ``ENTRIES``.
"""

from typing import Iterator, NamedTuple, Optional, Tuple

from nilmatrix.core.algebra import LieAlgebra


class CatalogEntry(NamedTuple):
    structure_constants: str
    parameters: Tuple[str, ...] = ()
    name: Optional[str] = None


def entry(structure_constants: str, *parameters: str, name: Optional[str] = None) -> CatalogEntry:
    return CatalogEntry(structure_constants, tuple(parameters), name)


class Classification:
    """
    Read-only sequence of Lie algebras, indexed from 1.

    Each algebra has a name: the given one if any, otherwise its position.
    All algebras are built when the registry is created, so malformed
    entries fail at once.
    """

    ENTRIES: Tuple[CatalogEntry, ...] = ()

    def __init__(self):
        self._entries = tuple(self.ENTRIES)
        self._algebras = tuple(LieAlgebra(e.structure_constants, e.parameters) for e in self._entries)
        self._names = tuple(e.name or str(k) for k, e in enumerate(self._entries, start=1))
        self._index = {}
        for k, name in enumerate(self._names, start=1):
            self._index.setdefault(name, k)

    def _check_index(self, index: int):
        if not 1 <= index <= len(self._entries):
            raise IndexError(f"{type(self).__name__} has entries 1..{len(self._entries)}, got {index}")

    def entry(self, index: int) -> LieAlgebra:
        """The algebra at position ``index``, counting from 1."""
        self._check_index(index)
        return self._algebras[index - 1]

    def name(self, index: int) -> str:
        self._check_index(index)
        return self._names[index - 1]

    def by_name(self, name: str) -> LieAlgebra:
        """First algebra with the given name; KeyError if there is none."""
        try:
            return self.entry(self._index[name])
        except KeyError:
            raise KeyError(f"no entry named '{name}' in {type(self).__name__}") from None

    def items(self) -> Iterator[Tuple[str, LieAlgebra]]:
        return zip(self._names, self._algebras)

    def __iter__(self) -> Iterator[LieAlgebra]:
        return iter(self._algebras)

    def __len__(self) -> int:
        return len(self._algebras)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} entries)"


__all__ = ['CatalogEntry', 'entry', 'Classification']
