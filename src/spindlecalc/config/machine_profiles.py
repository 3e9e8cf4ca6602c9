"""Spindle presets: the RPM window of common machines.

Speeds are rev/min.  The router spindle matches the defaults of a fresh
CuttingState.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class MachineProfile:
    """Spindle speed limits of a specific machine."""

    model: str
    min_rpm: float
    max_rpm: float

    def __str__(self) -> str:
        return f"{self.model}  {self.min_rpm:.0f}–{self.max_rpm:.0f} RPM"


class SpindleModel(Enum):
    ROUTER_SPINDLE = "router"
    TRIM_ROUTER = "trim-router"
    PCNC_440 = "pcnc-440"
    PCNC_770 = "pcnc-770"
    PCNC_1100 = "pcnc-1100"

    @classmethod
    def from_name(cls, name: str) -> SpindleModel:
        key = name.strip().lower().replace("_", "-").replace(" ", "-")
        for model in cls:
            if model.value == key:
                return model
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown machine {name!r} (choose from {choices})")


_PROFILES: dict[SpindleModel, MachineProfile] = {
    SpindleModel.ROUTER_SPINDLE: MachineProfile(
        model="Router spindle 2.2 kW",
        min_rpm=3000.0,
        max_rpm=24000.0,
    ),
    SpindleModel.TRIM_ROUTER: MachineProfile(
        model="Trim router",
        min_rpm=10000.0,
        max_rpm=30000.0,
    ),
    SpindleModel.PCNC_440: MachineProfile(
        model="Tormach PCNC 440",
        min_rpm=100.0,
        max_rpm=10000.0,
    ),
    SpindleModel.PCNC_770: MachineProfile(
        model="Tormach PCNC 770",
        min_rpm=175.0,
        max_rpm=10000.0,
    ),
    SpindleModel.PCNC_1100: MachineProfile(
        model="Tormach PCNC 1100",
        min_rpm=175.0,
        max_rpm=10000.0,
    ),
}


def get_profile(model: SpindleModel) -> MachineProfile:
    return _PROFILES[model]


def list_profiles() -> list[MachineProfile]:
    return list(_PROFILES.values())
