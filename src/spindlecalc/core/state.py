"""Cutting state: current inputs plus the values derived from them.

A CuttingState is immutable.  Every mutator returns a new, fully consistent
state, or the very same object when the edit would not change anything, so
a shell can skip redraws with an identity check.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace
from enum import Enum

import numpy as np

from .feed import feed_per_tooth
from .material import Material, Range

_MAX_FLUTES = 255
_FLUTE_RE = re.compile(r"[+]?[0-9]+")


class RpmPolicy(Enum):
    """How the selected spindle speed follows the recommended range."""

    CLAMPED = "clamped"      # range limited to the machine, selection follows
    UNCLAMPED = "unclamped"  # raw range, selection is only warned about

    @classmethod
    def from_name(cls, name: str) -> RpmPolicy:
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown RPM policy {name!r} (choose from clamped, unclamped)"
            ) from None


def _clamp(value: float, lo: float, hi: float) -> float:
    # lo > hi collapses to lo instead of raising
    return max(lo, min(value, hi))


def _rpm_for_speed(cut_speed: float, diameter: float) -> float:
    """Spindle speed giving *cut_speed* (m/min) at *diameter* (mm)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        rpm = np.float64(cut_speed * 1000.0) / np.float64(diameter * math.pi)
    return float(rpm)


def parse_diameter(text: str) -> float | None:
    """Parse a diameter field; ``None`` when the text is not a finite number."""
    text = text.strip()
    if not text or not text.isascii() or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_flute_count(text: str) -> int | None:
    """Parse a flute count field; ``None`` unless it is an integer 0–255."""
    text = text.strip()
    if not _FLUTE_RE.fullmatch(text):
        return None
    value = int(text)
    if value > _MAX_FLUTES:
        return None
    return value


@dataclass(frozen=True)
class CuttingState:
    """Inputs of one feeds & speeds calculation.

    Dimensions are mm, spindle speeds rev/min.  ``diameter_error`` and
    ``flute_count_error`` flag the last text edit of that field as
    unparsable; the numeric field then still holds the last valid value.
    """

    material: Material = Material.WOOD_SOFT
    diameter: float = 8.0
    diameter_error: bool = False
    flute_count: int = 2
    flute_count_error: bool = False
    min_rpm: float = 3000.0
    max_rpm: float = 24000.0
    selected_rpm: float = 13000.0
    policy: RpmPolicy = RpmPolicy.CLAMPED

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def rpm_range(self) -> Range:
        """Spindle speeds matching the material's cutting speed range.

        Under the clamped policy both bounds are limited to
        ``[min_rpm, max_rpm]``.  A non-positive diameter is not guarded and
        yields infinite or negative speeds.
        """
        vc = self.material.cut_speed_range()
        rpm_min = _rpm_for_speed(vc.start, self.diameter)
        rpm_max = _rpm_for_speed(vc.end, self.diameter)
        if self.policy is RpmPolicy.CLAMPED:
            return Range(
                _clamp(rpm_min, self.min_rpm, self.max_rpm),
                _clamp(rpm_max, self.min_rpm, self.max_rpm),
            )
        return Range(rpm_min, rpm_max)

    def feed_per_tooth(self) -> Range:
        return feed_per_tooth(self.material, self.diameter)

    def feed_range(self) -> Range:
        """Table feed in mm/min at the selected spindle speed."""
        return self.feed_per_tooth().scaled(self.selected_rpm * self.flute_count)

    def cutting_speed(self) -> float:
        """Cutting speed in m/min at the selected spindle speed."""
        return self.diameter * math.pi * self.selected_rpm / 1000.0

    @property
    def has_error(self) -> bool:
        return self.diameter_error or self.flute_count_error

    @property
    def rpm_in_range(self) -> bool:
        rpm_range = self.rpm_range()
        return rpm_range.start <= self.selected_rpm <= rpm_range.end

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def clamp_selected_rpm(self) -> CuttingState:
        """Pull ``selected_rpm`` into ``rpm_range()`` whatever the policy."""
        rpm_range = self.rpm_range()
        rpm = _clamp(self.selected_rpm, rpm_range.start, rpm_range.end)
        if rpm == self.selected_rpm:
            return self
        return replace(self, selected_rpm=rpm)

    def _reclamped(self) -> CuttingState:
        if self.policy is not RpmPolicy.CLAMPED:
            return self
        return self.clamp_selected_rpm()

    def set_material(self, material: Material) -> CuttingState:
        state = self if material is self.material else replace(self, material=material)
        return state._reclamped()

    def set_diameter(self, diameter: float) -> CuttingState:
        state = self if diameter == self.diameter else replace(self, diameter=diameter)
        return state._reclamped()

    def set_flute_count(self, flute_count: int) -> CuttingState:
        if not 0 <= flute_count <= _MAX_FLUTES:
            raise ValueError(f"flute_count must be between 0 and {_MAX_FLUTES}")
        if flute_count == self.flute_count:
            return self
        return replace(self, flute_count=flute_count)

    def set_min_rpm(self, min_rpm: float) -> CuttingState:
        if min_rpm == self.min_rpm:
            return self
        return replace(self, min_rpm=min_rpm)

    def set_max_rpm(self, max_rpm: float) -> CuttingState:
        if max_rpm == self.max_rpm:
            return self
        return replace(self, max_rpm=max_rpm)

    def set_selected_rpm(self, selected_rpm: float) -> CuttingState:
        if selected_rpm == self.selected_rpm:
            return self
        return replace(self, selected_rpm=selected_rpm)

    def set_policy(self, policy: RpmPolicy) -> CuttingState:
        """Switch policy; switching to CLAMPED pulls the selection in range."""
        if policy is self.policy:
            return self
        return replace(self, policy=policy)._reclamped()

    # ------------------------------------------------------------------
    # Text field commits
    # ------------------------------------------------------------------

    def commit_diameter_text(self, text: str) -> tuple[CuttingState, bool]:
        """Apply the raw diameter field *text*.

        Returns ``(state, committed)``; *committed* is False and *state* is
        ``self`` when the edit changes nothing.  Under the clamped policy a
        valid commit always reclamps the selected speed, even when the value
        itself is unchanged.
        """
        value = parse_diameter(text)
        if value is None:
            if self.diameter_error:
                return self, False
            return replace(self, diameter_error=True), True
        if value == self.diameter and not self.diameter_error:
            state = self._reclamped()
            return state, state is not self
        state = replace(self, diameter=value, diameter_error=False)._reclamped()
        return state, True

    def commit_flute_count_text(self, text: str) -> tuple[CuttingState, bool]:
        """Apply the raw flute count field *text*, see commit_diameter_text."""
        value = parse_flute_count(text)
        if value is None:
            if self.flute_count_error:
                return self, False
            return replace(self, flute_count_error=True), True
        if value == self.flute_count and not self.flute_count_error:
            return self, False
        state = replace(self, flute_count_error=False, flute_count=value)
        return state, True
