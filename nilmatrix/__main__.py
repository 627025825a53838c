"""
Command line entry point.

    python -m nilmatrix                                   # nonnice 7-dimensional catalog
    python -m nilmatrix catalog=gong7 style=plain
    python -m nilmatrix structure_constants="0,0,12,[lambda]*13" parameters=[lambda]
"""

import sys

from .config import load_config
from .core.algebra import LieAlgebra
from .core.base import NilmatrixError
from .log import get_logger, set_level
from .plugins.classification import get_catalog
from .study import study_catalog, study_group

logger = get_logger(__name__)


def _print_report(name, report, style):
    print(name)
    for line in report.lines(style):
        print(line)
    print()


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        cfg = load_config(argv)
    except NilmatrixError as e:
        logger.error("%s", e)
        return 2
    if cfg.log_level:
        set_level(cfg.log_level.upper())

    if cfg.structure_constants:
        try:
            G = LieAlgebra(cfg.structure_constants, list(cfg.parameters))
            report = study_group(G, cfg)
        except NilmatrixError as e:
            logger.error("%s: %s", cfg.structure_constants, e)
            return 1
        _print_report(str(G), report, cfg.style)
        return 0

    try:
        catalog = get_catalog(cfg.catalog)
        for name, report in study_catalog(catalog, cfg):
            _print_report(name, report, cfg.style)
    except NilmatrixError as e:
        logger.error("%s", e)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
