"""Weapon-set rules: Beginner Mode ammo, count and prop defaults for weapon pickups."""

from importlib import import_module
from typing import Any

__version__ = "0.1.0"
__all__ = [
    "DefaultRulesTable",
    "RulesTableError",
    "get_table",
    "ammo_type_for",
    "default_count_for",
    "has_prop",
    "BeginnerDefaults",
    "beginner_defaults",
    "CatalogEntry",
    "build_lookup",
    "configure",
    "__version__",
]

_EXPORTS = {
    "DefaultRulesTable": ("beginner_rules", "DefaultRulesTable"),
    "RulesTableError": ("beginner_rules", "RulesTableError"),
    "get_table": ("beginner_rules", "get_table"),
    "ammo_type_for": ("beginner_rules", "ammo_type_for"),
    "default_count_for": ("beginner_rules", "default_count_for"),
    "has_prop": ("beginner_rules", "has_prop"),
    "BeginnerDefaults": ("autofill", "BeginnerDefaults"),
    "beginner_defaults": ("autofill", "beginner_defaults"),
    "CatalogEntry": ("catalog", "CatalogEntry"),
    "build_lookup": ("catalog", "build_lookup"),
    "configure": ("config", "configure"),
}


def __getattr__(name: str) -> Any:
    if name in _EXPORTS:
        module_name, attr_name = _EXPORTS[name]
        module = import_module(f".{module_name}", __name__)
        attr = getattr(module, attr_name)
        globals()[name] = attr
        return attr
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def __dir__() -> list[str]:
    return sorted(set(list(globals().keys()) + list(__all__)))
