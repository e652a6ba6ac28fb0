"""Default ammo and prop rules applied by the editor's Beginner Mode."""
from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Iterable, Mapping, Optional, Union

from . import catalog

logger = logging.getLogger(__name__)


class RulesTableError(ValueError):
    """Raised when a rules table is internally inconsistent."""


# =============================
# Reference data
# =============================

WEAPON_TO_AMMO_TYPE: Mapping[str, str] = MappingProxyType({
    "Nothing (No Pickup)": "None",
    "Unarmed": "None",
    "Hunting Knives": "Knife",
    "Throwing Knives": "Knife",
    "PP7": "9mm Ammo",
    "PP7 (Silenced)": "9mm Ammo",
    "DD44": "9mm Ammo",
    "Klobb": "9mm Ammo",
    "KF7": "Rifle Ammo",
    "ZMG": "9mm Ammo",
    "D5K": "9mm Ammo",
    "D5K (Silenced)": "9mm Ammo",
    "Phantom": "9mm Ammo",
    "AR33": "Rifle Ammo",
    "RC-P90": "9mm Ammo",
    "Shotgun": "Cartridges",
    "Automatic Shotgun": "Cartridges",
    "Sniper Rifle": "Rifle Ammo",
    "Cougar Magnum": "Magnum Bullets",
    "Golden Gun": "Golden Bullets",
    "Silver PP7": "9mm Ammo",
    "Gold PP7": "9mm Ammo",
    "Moonraker Laser": "None",
    "Watch Laser": "Watch Laser",
    "Grenade Launcher": "Grenade Rounds",
    "Rocket Launcher": "Rockets",
    "Grenades": "Grenades",
    "Timed Mine": "Timed Mines",
    "Proximity Mine": "Proximity Mines",
    "Remote Mine": "Remote Mines",
    "Detonator": "None",
    "Tazer": "None",
    "Tank": "Tank",
})

WEAPON_TO_DEFAULT_AMMO_COUNT: Mapping[str, str] = MappingProxyType({
    "Nothing (No Pickup)": "0",
    "Unarmed": "0",
    "Hunting Knives": "1",
    "Throwing Knives": "10",
    "PP7": "50",
    "PP7 (Silenced)": "50",
    "DD44": "50",
    "Klobb": "100",
    "KF7": "100",
    "ZMG": "100",
    "D5K": "100",
    "D5K (Silenced)": "100",
    "Phantom": "100",
    "AR33": "40",
    "RC-P90": "100",
    "Shotgun": "30",
    "Automatic Shotgun": "30",
    "Sniper Rifle": "50",
    "Cougar Magnum": "50",
    "Golden Gun": "10",
    "Silver PP7": "10",
    "Gold PP7": "10",
    "Moonraker Laser": "0",
    "Watch Laser": "100",
    "Grenade Launcher": "6",
    "Rocket Launcher": "6",
    "Grenades": "5",
    "Timed Mine": "5",
    "Proximity Mine": "5",
    "Remote Mine": "5",
    "Detonator": "0",
    "Tazer": "1",
    "Tank": "5",
})


# =============================
# Table
# =============================

def _fold(name: str) -> str:
    return name.casefold()


def _record_name(record: Any) -> str:
    name = getattr(record, "name", None)
    if name is None and isinstance(record, Mapping):
        name = record.get("name")
    if callable(name):
        name = name()
    if not isinstance(name, str):
        raise TypeError(f"Catalog record {record!r} has no string 'name'")
    return name


def _normalise(table: Mapping[str, str], label: str) -> Dict[str, str]:
    out: Dict[str, str] = {}
    seen: Dict[str, str] = {}
    for name, value in table.items():
        key = _fold(name)
        if key in seen:
            raise RulesTableError(
                f"{label} has case-insensitive duplicate keys: {seen[key]!r} and {name!r}"
            )
        seen[key] = name
        out[key] = value
    return out


CatalogSource = Union[Iterable[Any], Callable[[], Iterable[Any]]]


class DefaultRulesTable:
    """Case-insensitive ammo/count/prop lookups for weapon names.

    ``ammo_types`` and ``default_counts`` must share one key set.
    ``weapon_catalog`` is an iterable of records exposing ``name`` or a
    zero-argument callable returning one; it is read once, on the first
    prop lookup.
    """

    def __init__(
        self,
        ammo_types: Mapping[str, str],
        default_counts: Mapping[str, str],
        weapon_catalog: CatalogSource,
    ) -> None:
        ammo = _normalise(ammo_types, "ammo type table")
        counts = _normalise(default_counts, "default count table")
        if ammo.keys() != counts.keys():
            only_ammo = sorted(ammo.keys() - counts.keys())
            only_counts = sorted(counts.keys() - ammo.keys())
            raise RulesTableError(
                "Ammo type and default count tables disagree on weapons: "
                f"missing counts for {only_ammo}, missing ammo types for {only_counts}"
            )
        for key, value in counts.items():
            if not (value.isascii() and value.isdigit()):
                raise RulesTableError(f"Default count for {key!r} is not a non-negative integer: {value!r}")
        self._ammo_types: Mapping[str, str] = MappingProxyType(ammo)
        self._default_counts: Mapping[str, str] = MappingProxyType(counts)
        self._catalog = weapon_catalog
        self._prop_names: Optional[FrozenSet[str]] = None
        self._build_error: Optional[BaseException] = None
        self._lock = threading.Lock()
        self.build_count = 0

    def __len__(self) -> int:
        return len(self._ammo_types)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _fold(name) in self._ammo_types

    def ammo_type_for(self, name: str) -> Optional[str]:
        """Ammo type for ``name``, or ``None`` when the weapon is unknown."""
        return self._ammo_types.get(_fold(name))

    def default_count_for(self, name: str) -> Optional[str]:
        """Default ammo count (as text) for ``name``, or ``None`` when unknown."""
        return self._default_counts.get(_fold(name))

    @property
    def is_built(self) -> bool:
        return self._prop_names is not None

    @property
    def prop_names(self) -> FrozenSet[str]:
        """Casefolded weapon names that carry a prop, built on first access."""
        props = self._prop_names
        if props is not None:
            return props
        with self._lock:
            if self._prop_names is None:
                # A failed catalog read is final.
                if self._build_error is not None:
                    raise self._build_error
                try:
                    self._prop_names = self._build_prop_names()
                except Exception as exc:
                    self._build_error = exc
                    raise
                self.build_count += 1
            return self._prop_names

    def has_prop(self, name: str) -> bool:
        return _fold(name) in self.prop_names

    def _build_prop_names(self) -> FrozenSet[str]:
        source = self._catalog() if callable(self._catalog) else self._catalog
        props = frozenset(_fold(_record_name(record)) for record in source)
        logger.debug("Built prop name set with %d entries", len(props))
        return props


# =============================
# Default table
# =============================

def default_table() -> DefaultRulesTable:
    return DefaultRulesTable(
        WEAPON_TO_AMMO_TYPE,
        WEAPON_TO_DEFAULT_AMMO_COUNT,
        lambda: catalog.WEAPONS,
    )


# Built at import so drift between the two tables fails immediately.
_table: DefaultRulesTable = default_table()
_table_lock = threading.Lock()


def get_table(table: Optional[DefaultRulesTable] = None) -> DefaultRulesTable:
    """Return the shared table, replacing it first when ``table`` is given."""
    global _table
    with _table_lock:
        if table is not None:
            _table = table
        return _table


def ammo_type_for(name: str) -> Optional[str]:
    return get_table().ammo_type_for(name)


def default_count_for(name: str) -> Optional[str]:
    return get_table().default_count_for(name)


def has_prop(name: str) -> bool:
    return get_table().has_prop(name)


__all__ = [
    "RulesTableError",
    "DefaultRulesTable",
    "WEAPON_TO_AMMO_TYPE",
    "WEAPON_TO_DEFAULT_AMMO_COUNT",
    "default_table",
    "get_table",
    "ammo_type_for",
    "default_count_for",
    "has_prop",
]
