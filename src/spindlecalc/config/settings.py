"""Application preferences.

Read from ``SPINDLECALC_*`` environment variables on top of the built-in
defaults.  Nothing is written back.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

from ..core.material import Material
from ..core.state import RpmPolicy
from .machine_profiles import SpindleModel

ENV_PREFIX = "SPINDLECALC_"


@dataclass
class AppSettings:
    """User preferences: machine preset, RPM policy and start material."""

    machine: str = SpindleModel.ROUTER_SPINDLE.value
    policy: str = RpmPolicy.CLAMPED.value
    material: str = Material.WOOD_SOFT.value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> AppSettings:
        """Build settings, overriding each field from ``SPINDLECALC_<FIELD>``.

        Raises
        ------
        ValueError:
            If a variable names an unknown machine, policy or material.
        """
        if environ is None:
            environ = os.environ
        values = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw:
                values[f.name] = raw
        settings = cls(**values)
        settings.check()
        return settings

    def check(self) -> None:
        self.spindle_model()
        self.rpm_policy()
        self.start_material()

    def spindle_model(self) -> SpindleModel:
        return SpindleModel.from_name(self.machine)

    def rpm_policy(self) -> RpmPolicy:
        return RpmPolicy.from_name(self.policy)

    def start_material(self) -> Material:
        return Material.from_name(self.material)
