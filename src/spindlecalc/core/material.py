"""Workpiece materials and their cutting data.

Cutting speeds are in m/min, feed per tooth in mm.  Every material carries a
cutting-speed range and a feed table indexed by tool diameter (mm) with
strictly increasing diameters.  These are conservative starting points for
solid carbide cutters on hobby-class machines.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Range(NamedTuple):
    """Closed interval ``start..end``."""

    start: float
    end: float

    @property
    def is_empty(self) -> bool:
        return not self.start < self.end

    def scaled(self, factor: float) -> Range:
        return Range(self.start * factor, self.end * factor)


class Material(Enum):
    ALUMINIUM = "aluminium"
    PLASTIC = "plastic"
    COPPER = "copper"
    WOOD_SOFT = "wood_soft"
    WOOD_HARD = "wood_hard"
    WOOD_MDF = "wood_mdf"

    def label(self) -> str:
        return _LABELS[self]

    def cut_speed_range(self) -> Range:
        return _CUT_SPEED[self]

    def feed_table(self) -> tuple[tuple[float, Range], ...]:
        return _FEED_TABLE[self]

    @classmethod
    def from_name(cls, name: str) -> Material:
        """Resolve ``wood_soft``, ``WOOD_SOFT`` or ``wood-soft``."""
        key = name.strip().lower().replace("-", "_")
        for material in cls:
            if material.value == key:
                return material
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown material {name!r} (choose from {choices})")


_LABELS: dict[Material, str] = {
    Material.ALUMINIUM: "Aluminium",
    Material.PLASTIC: "Kunststoff",
    Material.COPPER: "Kupfer / Messing",
    Material.WOOD_SOFT: "Holz weich",
    Material.WOOD_HARD: "Holz hart",
    Material.WOOD_MDF: "Holz MDF",
}

_CUT_SPEED: dict[Material, Range] = {
    Material.ALUMINIUM: Range(100.0, 450.0),
    Material.PLASTIC: Range(200.0, 400.0),
    Material.COPPER: Range(80.0, 200.0),
    Material.WOOD_SOFT: Range(300.0, 600.0),
    Material.WOOD_HARD: Range(200.0, 450.0),
    Material.WOOD_MDF: Range(250.0, 500.0),
}

_FEED_TABLE: dict[Material, tuple[tuple[float, Range], ...]] = {
    Material.ALUMINIUM: (
        (4.0, Range(0.005, 0.015)),
        (6.0, Range(0.015, 0.025)),
        (8.0, Range(0.02, 0.03)),
        (10.0, Range(0.025, 0.038)),
        (12.0, Range(0.03, 0.05)),
    ),
    Material.PLASTIC: (
        (4.0, Range(0.02, 0.05)),
        (6.0, Range(0.04, 0.09)),
        (8.0, Range(0.04, 0.1)),
        (10.0, Range(0.05, 0.15)),
        (12.0, Range(0.08, 0.18)),
    ),
    Material.COPPER: (
        (4.0, Range(0.01, 0.02)),
        (6.0, Range(0.015, 0.025)),
        (8.0, Range(0.03, 0.057)),
        (10.0, Range(0.035, 0.065)),
        (12.0, Range(0.04, 0.08)),
    ),
    Material.WOOD_SOFT: (
        (4.0, Range(0.02, 0.04)),
        (6.0, Range(0.025, 0.055)),
        (8.0, Range(0.037, 0.07)),
        (10.0, Range(0.045, 0.085)),
        (12.0, Range(0.05, 0.095)),
    ),
    Material.WOOD_HARD: (
        (4.0, Range(0.015, 0.035)),
        (6.0, Range(0.02, 0.05)),
        (8.0, Range(0.03, 0.065)),
        (10.0, Range(0.045, 0.08)),
        (12.0, Range(0.05, 0.09)),
    ),
    Material.WOOD_MDF: (
        (4.0, Range(0.025, 0.05)),
        (6.0, Range(0.03, 0.065)),
        (8.0, Range(0.045, 0.08)),
        (10.0, Range(0.055, 0.095)),
        (12.0, Range(0.06, 0.11)),
    ),
}


def cut_speed_range(material: Material) -> Range:
    return material.cut_speed_range()


def feed_table(material: Material) -> tuple[tuple[float, Range], ...]:
    return material.feed_table()
