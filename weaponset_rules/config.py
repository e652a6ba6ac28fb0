from __future__ import annotations
from typing import Any, Dict, Iterable, Mapping, Optional
import logging
import os

import yaml

from .beginner_rules import (
    DefaultRulesTable,
    RulesTableError,
    WEAPON_TO_AMMO_TYPE,
    WEAPON_TO_DEFAULT_AMMO_COUNT,
    get_table,
)
from . import catalog

logger = logging.getLogger(__name__)

ENV_PREFIX = "WEAPONSET_RULES__"
SECTIONS = ("ammo_types", "default_counts")

def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(a)
    for k, v in (b or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out

def _load_one(path: str) -> Dict[str, Any]:
    # safe_load reads JSON documents as well
    with open(path, "r", encoding="utf-8") as f:
        d = yaml.safe_load(f)
    if d is None:
        return {}
    if not isinstance(d, dict):
        raise RulesTableError(f"Config file {path!r} must contain a mapping, got {type(d).__name__}")
    logger.debug("Loaded rules config from %s", path)
    return d

def load_configs(paths: Iterable[str] | None) -> Dict[str, Any]:
    cfg: Dict[str, Any] = {}
    for p in (paths or []):
        cfg = _deep_merge(cfg, _load_one(p))
    return cfg

def env_overrides(prefix: str = ENV_PREFIX) -> Dict[str, Any]:
    """Rule overrides from the environment, e.g. ``WEAPONSET_RULES__DEFAULT_COUNTS__PP7=100``.

    Values stay text, the way the tables store them. Weapon names are
    matched case-insensitively later, so the lowercased key still applies.
    """
    out: Dict[str, Any] = {}
    for k, v in os.environ.items():
        if not k.startswith(prefix):
            continue
        section, _, weapon = k[len(prefix):].partition("__")
        section = section.lower()
        if not weapon:
            out[section] = v
        else:
            entries = out.setdefault(section, {})
            if isinstance(entries, dict):
                entries[weapon.lower()] = v.strip()
    return out

def _overlay(base: Mapping[str, str], overrides: Any, section: str) -> Dict[str, str]:
    # Overrides replace entries case-insensitively, keeping the override's spelling.
    if overrides is None:
        return dict(base)
    if not isinstance(overrides, Mapping):
        raise RulesTableError(
            f"Config section {section!r} must map weapon names to values, got {type(overrides).__name__}"
        )
    out = dict(base)
    for name, value in overrides.items():
        folded = str(name).casefold()
        for existing in [k for k in out if k.casefold() == folded]:
            del out[existing]
        out[str(name)] = str(value)
    return out

def table_from_config(cfg: Optional[Dict[str, Any]] = None) -> DefaultRulesTable:
    """Default rules layered with the ``ammo_types``/``default_counts`` sections of ``cfg``."""
    cfg = cfg or {}
    return DefaultRulesTable(
        _overlay(WEAPON_TO_AMMO_TYPE, cfg.get("ammo_types"), "ammo_types"),
        _overlay(WEAPON_TO_DEFAULT_AMMO_COUNT, cfg.get("default_counts"), "default_counts"),
        lambda: catalog.WEAPONS,
    )

def configure(paths: Iterable[str] | None = None, prefix: str = ENV_PREFIX) -> DefaultRulesTable:
    """Build rules from config files plus environment overrides and share them via ``get_table``.

    Environment values win over file values.
    """
    cfg = _deep_merge(load_configs(paths), env_overrides(prefix))
    unknown = sorted(set(cfg) - set(SECTIONS))
    if unknown:
        logger.warning("Ignoring unknown rules config sections: %s", ", ".join(unknown))
    return get_table(table_from_config(cfg))

__all__ = ["load_configs", "env_overrides", "table_from_config", "configure", "_deep_merge"]
