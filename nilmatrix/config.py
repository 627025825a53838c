"""
config.py - Study configuration.

``StudyConfig`` is the schema; ``load_config`` turns it into an OmegaConf
structured config and applies ``key=value`` overrides, e.g.

    python -m nilmatrix catalog=gong7 style=plain only=123457H1
    python -m nilmatrix structure_constants="0,0,12,[lambda]*13" parameters=[lambda]
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from .core.base import ConfigError
from .render import STYLES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class StudyConfig:
    catalog: str = "nonnice7"           # catalog to iterate over
    style: str = "latex"                # latex | plain
    show_derivations: bool = False      # also report the generic derivation
    only: Optional[str] = None          # study a single catalog entry, by name
    structure_constants: Optional[str] = None   # study this algebra instead of a catalog
    parameters: List[str] = field(default_factory=list)
    log_level: Optional[str] = None     # overrides NILMATRIX_LOG_LEVEL


def load_config(argv: Optional[Sequence[str]] = None, **overrides) -> DictConfig:
    """Build the configuration from dotlist arguments and keyword overrides."""
    cfg = OmegaConf.structured(StudyConfig)
    try:
        if argv:
            cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(argv)))
        if overrides:
            cfg = OmegaConf.merge(cfg, OmegaConf.create(overrides))
    except OmegaConfBaseException as e:
        raise ConfigError(f"invalid configuration: {e}") from e
    if cfg.style not in STYLES:
        raise ConfigError(f"unknown style '{cfg.style}', expected one of {STYLES}")
    if cfg.parameters and not cfg.structure_constants:
        raise ConfigError("parameters given without structure_constants")
    if cfg.log_level and cfg.log_level.upper() not in LOG_LEVELS:
        raise ConfigError(f"unknown log_level '{cfg.log_level}', expected one of {LOG_LEVELS}")
    return cfg


__all__ = ['StudyConfig', 'load_config', 'LOG_LEVELS']
