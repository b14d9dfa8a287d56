from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging

import yaml

from .clone import clone
from .errors import ConfigError
from .log import is_level_name
from .model import AppState, Filter, History, UserProfile, coerce_filter, utcnow
from .reducer import Clock

logger = logging.getLogger(__name__)


# ---------------------------
# Config loading
# ---------------------------

DEFAULT_CONFIG: Dict[str, Any] = {
    "user": {
        "name": "Guest",
        "preferences": {"theme": "light"},
    },
    "filter": Filter.ALL.value,
    "logging": {
        "level": "INFO",
        "prefix": "TODO_APP",   # tag used by ActionLogger
    },
}


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Defaults, overlaid with a YAML file when one is given.

    Merge is one level deep: a mapping section in the file updates the
    matching default section key by key, anything else replaces it. The
    `logging.level` entry is checked here and handed to setup_logging() by
    the app; loading a config never reconfigures logging by itself.
    """
    cfg = clone(DEFAULT_CONFIG)
    if not path:
        return cfg
    p = Path(path)
    if not p.exists():
        logger.warning("config not found: %s (using defaults)", p)
        return cfg
    with p.open("r", encoding="utf-8") as f:
        user = yaml.safe_load(f) or {}
    if not isinstance(user, dict):
        raise ConfigError(f"{p}: expected a mapping at top level, got {type(user).__name__}")
    for k, v in user.items():
        if isinstance(v, dict) and isinstance(cfg.get(k), dict):
            cfg[k].update(v)
        else:
            cfg[k] = v
    log_cfg = cfg.get("logging")
    if not isinstance(log_cfg, dict):
        raise ConfigError(f"{p}: 'logging' must be a mapping")
    level = log_cfg.get("level", "INFO")
    if not is_level_name(level):
        raise ConfigError(f"{p}: unknown logging level {level!r}")
    return cfg


# ---------------------------
# Process-start values
# ---------------------------

def initial_state(config: Optional[Dict[str, Any]] = None, clock: Optional[Clock] = None) -> AppState:
    cfg = config if config is not None else DEFAULT_CONFIG
    user_cfg = cfg.get("user") or {}
    defaults = UserProfile()
    user = UserProfile(
        name=user_cfg.get("name", defaults.name),
        preferences=clone(user_cfg.get("preferences", defaults.preferences)),
    )
    return AppState(
        todos=[],
        filter=coerce_filter(cfg.get("filter", Filter.ALL)),
        user=user,
        last_updated=(clock or utcnow)(),
    )


def initial_history() -> History:
    return History(past=[], future=[])
