"""Resolve the Beginner Mode auto-fill values for a weapon-set slot."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from . import catalog
from .beginner_rules import DefaultRulesTable, get_table

NO_AMMO = "None"
NO_PROP = "None"
ZERO_COUNT = "0"

# Listed in the prop catalog but never spawn a visible pickup.
PROPLESS_WEAPONS = frozenset(name.casefold() for name in ("Nothing (No Pickup)", "Unarmed"))


@dataclass(frozen=True)
class BeginnerDefaults:
    weapon: str
    ammo_type: str
    ammo_type_code: int
    ammo_count_text: str
    ammo_count: Optional[int]
    has_prop: bool
    prop: str
    prop_id: int

    @property
    def weapon_toggle(self) -> int:
        return 1 if self.has_prop else 0


def _parse_count(text: str) -> Optional[int]:
    try:
        value = int(text)
    except ValueError:
        return None
    if 0 <= value <= 0xFF:
        return value
    return None


def beginner_defaults(weapon_name: str, table: Optional[DefaultRulesTable] = None) -> Optional[BeginnerDefaults]:
    """
    Values the editor writes into a slot when ``weapon_name`` is selected.

    Unknown weapons fall back to no ammo and a zero count; a blank name
    yields ``None`` so the caller leaves the slot untouched.
    """
    if not weapon_name or not weapon_name.strip():
        return None
    rules = table if table is not None else get_table()

    ammo_type = rules.ammo_type_for(weapon_name) or NO_AMMO
    count_text = rules.default_count_for(weapon_name) or ZERO_COUNT

    with_prop = rules.has_prop(weapon_name) and weapon_name.casefold() not in PROPLESS_WEAPONS
    prop = weapon_name if with_prop else NO_PROP

    return BeginnerDefaults(
        weapon=weapon_name,
        ammo_type=ammo_type,
        ammo_type_code=catalog.code_for(catalog.AMMO_TYPES, ammo_type),
        ammo_count_text=count_text,
        ammo_count=_parse_count(count_text),
        has_prop=with_prop,
        prop=prop,
        prop_id=catalog.code_for(catalog.PROPS, prop),
    )


__all__ = ["BeginnerDefaults", "beginner_defaults", "PROPLESS_WEAPONS"]
