"""Name/code lookup tables for weapons, ammunition and pickup props.

Every table is a tuple of ``CatalogEntry`` records in the order the editor
lists them in its dropdowns. Names are human readable; codes are the 8-bit
ids written into weapon-set files.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple
import re


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    code: int


def _entries(*pairs: Tuple[str, int]) -> Tuple[CatalogEntry, ...]:
    return tuple(CatalogEntry(name, code) for name, code in pairs)


# =============================
# Weapons
# =============================

WEAPONS: Tuple[CatalogEntry, ...] = _entries(
    # Special entries
    ("Nothing (No Pickup)", 0x00),
    ("Unarmed", 0x01),
    # Melee
    ("Hunting Knives", 0x02),
    ("Throwing Knives", 0x03),
    # Pistols
    ("PP7", 0x04),
    ("PP7 (Silenced)", 0x05),
    ("DD44", 0x06),
    ("Cougar Magnum", 0x12),
    ("Golden Gun", 0x13),
    ("Silver PP7", 0x14),
    ("Gold PP7", 0x15),
    # Submachine guns
    ("Klobb", 0x07),
    ("ZMG", 0x09),
    ("D5K", 0x0A),
    ("D5K (Silenced)", 0x0B),
    ("Phantom", 0x0C),
    # Rifles
    ("KF7", 0x08),
    ("AR33", 0x0D),
    ("RC-P90", 0x0E),
    ("Sniper Rifle", 0x11),
    # Shotguns
    ("Shotgun", 0x0F),
    ("Automatic Shotgun", 0x10),
    # Special
    ("Moonraker Laser", 0x16),
    ("Watch Laser", 0x17),
    ("Tazer", 0x1F),
    # Explosives
    ("Grenade Launcher", 0x18),
    ("Rocket Launcher", 0x19),
    ("Grenades", 0x1A),
    ("Timed Mine", 0x1B),
    ("Proximity Mine", 0x1C),
    ("Remote Mine", 0x1D),
    ("Detonator", 0x1E),
    # Vehicle
    ("Tank", 0x20),
)


# =============================
# Ammunition
# =============================

AMMO_TYPES: Tuple[CatalogEntry, ...] = _entries(
    ("None", 0x00),
    ("9mm Ammo", 0x01),
    ("Rifle Ammo", 0x03),
    ("Cartridges", 0x04),
    ("Magnum Bullets", 0x0C),
    ("Golden Bullets", 0x0D),  # Golden Gun only
    ("Grenades", 0x05),
    ("Rockets", 0x06),
    ("Grenade Rounds", 0x0B),
    ("Remote Mines", 0x07),
    ("Proximity Mines", 0x08),
    ("Timed Mines", 0x09),
    ("Knife", 0x0A),
    ("Watch Laser", 0x18),
    ("Tank", 0xC1),
)

AMMO_COUNTS: Tuple[CatalogEntry, ...] = _entries(
    ("0", 0x00),
    ("1", 0x01),
    ("2", 0x02),
    ("3", 0x03),
    ("4", 0x04),
    ("5", 0x05),
    ("10", 0x0A),
    ("20", 0x14),
    ("30", 0x1E),
    ("50", 0x32),
    ("100", 0x64),
    ("255", 0xFF),
)


# =============================
# Props
# =============================

# 0x60 is the invisible model; 0xC6 is shared by the small misc props.
PROPS: Tuple[CatalogEntry, ...] = _entries(
    ("Nothing (No Pickup)", 0x60),
    ("Unarmed", 0x60),
    ("KF7", 0xB8),
    ("AR33", 0xBC),
    ("Phantom", 0xC2),
    ("Sniper Rifle", 0xD2),
    ("D5K", 0xBD),
    ("D5K (Silenced)", 0xCE),
    ("Klobb", 0xC1),
    ("ZMG", 0xC3),
    ("RC-P90", 0xC5),
    ("PP7", 0xBF),
    ("PP7 (Silenced)", 0xCC),
    ("DD44", 0xCD),
    ("Cougar Magnum", 0xBE),
    ("Golden Gun", 0xD0),
    ("Silver PP7", 0xE6),
    ("Gold PP7", 0xE7),
    ("Shotgun", 0xC0),
    ("Automatic Shotgun", 0xCF),
    ("Moonraker Laser", 0xBB),
    ("Grenade Launcher", 0xB9),
    ("Rocket Launcher", 0xD3),
    ("Hunting Knives", 0xBA),
    ("Throwing Knives", 0xD1),
    ("Grenades", 0xC4),
    ("Remote Mines", 0xC7),
    ("Proximity Mines", 0xC8),
    ("Timed Mines", 0xC9),
    ("Watch Laser", 0xC6),
    ("Tank", 0xC6),
    ("Detonator", 0xC6),
    ("Tazer", 0xC6),
)


# =============================
# Lookups
# =============================

_RAW_CODE = re.compile(r"[0-9A-Fa-f]{1,4}")


def build_lookup(entries: Iterable[CatalogEntry]) -> Dict[str, int]:
    """Build a case-insensitive ``name -> code`` dict.

    Blank names are skipped and the first entry wins when two names differ
    only by case. Keys are casefolded; use ``code_for`` to query.
    """
    out: Dict[str, int] = {}
    for entry in entries:
        if not entry.name or not entry.name.strip():
            continue
        out.setdefault(entry.name.casefold(), entry.code)
    return out


def code_for(entries: Iterable[CatalogEntry], name: str, default: int = 0) -> int:
    """Code for ``name``; unlisted names of up to four hex digits (``"0A"``) are read as raw codes."""
    key = (name or "").casefold()
    for entry in entries:
        if entry.name.casefold() == key:
            return entry.code
    if _RAW_CODE.fullmatch(name or ""):
        return int(name, 16)
    return default


def names(entries: Iterable[CatalogEntry]) -> list[str]:
    return [entry.name for entry in entries]


__all__ = [
    "CatalogEntry",
    "WEAPONS",
    "AMMO_TYPES",
    "AMMO_COUNTS",
    "PROPS",
    "build_lookup",
    "code_for",
    "names",
]
