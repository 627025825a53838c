# -*- coding: utf-8 -*-
"""
Classification Plugin

Catalogs of nilpotent Lie algebras, looked up by name from the study driver.
"""

from nilmatrix.core.base import ConfigError

from .base import CatalogEntry, Classification, entry
from .gong7 import NilpotentLieAlgebras7
from .nonnice7 import NonniceNilpotentLieAlgebras7

CATALOGS = {
    'gong7': NilpotentLieAlgebras7,
    'nonnice7': NonniceNilpotentLieAlgebras7,
}


def get_catalog(name: str) -> Classification:
    """Build the catalog registered under ``name``."""
    try:
        cls = CATALOGS[name]
    except KeyError:
        raise ConfigError(f"unknown catalog '{name}', expected one of {sorted(CATALOGS)}") from None
    return cls()


__all__ = [
    'CatalogEntry',
    'Classification',
    'entry',
    'NilpotentLieAlgebras7',
    'NonniceNilpotentLieAlgebras7',
    'CATALOGS',
    'get_catalog',
]
