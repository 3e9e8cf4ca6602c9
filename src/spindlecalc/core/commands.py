"""Edit commands and the reducer that applies them to a CuttingState.

Shells translate widget events into one of the command objects below and
hand it to :func:`reduce`.  The reducer returns the identical state object
when the edit is a no-op, so ``new is old`` tells the shell nothing changed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from .material import Material
from .state import CuttingState, RpmPolicy

if TYPE_CHECKING:
    from ..config.machine_profiles import MachineProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetMaterial:
    material: Material


@dataclass(frozen=True)
class SetDiameter:
    """Raw diameter field text, parsed on commit."""

    text: str


@dataclass(frozen=True)
class SetFluteCount:
    """Raw flute count field text, parsed on commit."""

    text: str


@dataclass(frozen=True)
class SetMinRpm:
    rpm: float


@dataclass(frozen=True)
class SetMaxRpm:
    rpm: float


@dataclass(frozen=True)
class SetSelectedRpm:
    rpm: float


@dataclass(frozen=True)
class SetPolicy:
    policy: RpmPolicy


@dataclass(frozen=True)
class ApplyMachineProfile:
    """Replace both machine bounds with those of *profile*.

    Unlike SetMinRpm/SetMaxRpm this also pulls the selected RPM into the
    new range under the clamped policy.
    """

    profile: MachineProfile


Command = Union[
    SetMaterial,
    SetDiameter,
    SetFluteCount,
    SetMinRpm,
    SetMaxRpm,
    SetSelectedRpm,
    SetPolicy,
    ApplyMachineProfile,
]


def _apply(state: CuttingState, command: Command) -> CuttingState:
    if isinstance(command, SetMaterial):
        return state.set_material(command.material)
    if isinstance(command, SetDiameter):
        return state.commit_diameter_text(command.text)[0]
    if isinstance(command, SetFluteCount):
        return state.commit_flute_count_text(command.text)[0]
    if isinstance(command, SetMinRpm):
        return state.set_min_rpm(command.rpm)
    if isinstance(command, SetMaxRpm):
        return state.set_max_rpm(command.rpm)
    if isinstance(command, SetSelectedRpm):
        return state.set_selected_rpm(command.rpm)
    if isinstance(command, SetPolicy):
        return state.set_policy(command.policy)
    if isinstance(command, ApplyMachineProfile):
        new_state = (
            state.set_min_rpm(command.profile.min_rpm)
            .set_max_rpm(command.profile.max_rpm)
        )
        if new_state.policy is RpmPolicy.CLAMPED:
            new_state = new_state.clamp_selected_rpm()
        return new_state
    raise TypeError(f"Unsupported command: {command!r}")


def reduce(state: CuttingState, command: Command) -> CuttingState:
    """Return the state after *command*; *state* itself when nothing changed."""
    new_state = _apply(state, command)
    if new_state is state:
        logger.debug("Ignored no-op %r", command)
    else:
        logger.debug("Applied %r", command)
    return new_state


def reduce_all(state: CuttingState, commands) -> CuttingState:
    """Apply *commands* in order."""
    for command in commands:
        state = reduce(state, command)
    return state
