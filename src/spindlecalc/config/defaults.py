"""Default cutting state.

The stock defaults suit a soft-wood job with an 8 mm two-flute cutter on a
3000–24000 RPM router spindle.
"""

from __future__ import annotations

from typing import Optional

from ..core.state import CuttingState, RpmPolicy
from .machine_profiles import get_profile
from .settings import AppSettings

DEFAULT_DIAMETER = 8.0
DEFAULT_FLUTE_COUNT = 2
DEFAULT_SELECTED_RPM = 13000.0


def build_default_state(settings: Optional[AppSettings] = None) -> CuttingState:
    """Return the starting state for *settings* (built-in defaults if None).

    The selected RPM starts inside the machine's bounds and, under the
    clamped policy, inside the recommended range.
    """
    if settings is None:
        settings = AppSettings()
    profile = get_profile(settings.spindle_model())
    policy = settings.rpm_policy()

    state = CuttingState(
        material=settings.start_material(),
        diameter=DEFAULT_DIAMETER,
        flute_count=DEFAULT_FLUTE_COUNT,
        min_rpm=profile.min_rpm,
        max_rpm=profile.max_rpm,
        selected_rpm=max(profile.min_rpm, min(DEFAULT_SELECTED_RPM, profile.max_rpm)),
        policy=policy,
    )
    if policy is RpmPolicy.CLAMPED:
        state = state.clamp_selected_rpm()
    return state
