"""nilmatrix logging.

Loggers live under the ``nilmatrix`` hierarchy; modules obtain one through
:func:`get_logger`. Reports go to stdout, log records to stderr.

Environment variables:
    NILMATRIX_LOG_LEVEL: DEBUG / INFO / WARNING (default) / ERROR
    NILMATRIX_LOG_FILE: optional path; appends plain-text log lines
"""

import logging
import os
import sys

_CONFIGURED = False


def _configure_once() -> None:
    """One-time lazy init of the ``nilmatrix`` root logger."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    _CONFIGURED = True

    root = logging.getLogger("nilmatrix")
    level_name = os.environ.get("NILMATRIX_LOG_LEVEL", "WARNING").upper()
    root.setLevel(getattr(logging, level_name, logging.WARNING))

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(console)

    log_file = os.environ.get("NILMATRIX_LOG_FILE")
    if log_file:
        fh = logging.FileHandler(log_file, mode="a")
        fh.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s"
        ))
        root.addHandler(fh)


def set_level(level) -> None:
    """Override the level chosen from the environment."""
    _configure_once()
    logging.getLogger("nilmatrix").setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``nilmatrix`` hierarchy.

    Args:
        name: Typically ``__name__`` of the calling module.
    """
    _configure_once()
    if name == "nilmatrix" or name.startswith("nilmatrix."):
        return logging.getLogger(name)
    return logging.getLogger(f"nilmatrix.{name}")
