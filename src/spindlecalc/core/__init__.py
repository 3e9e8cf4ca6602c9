"""Feeds & speeds calculation engine."""

from .feed import feed_per_tooth
from .material import Material, Range
from .state import CuttingState, RpmPolicy

__all__ = ["feed_per_tooth", "Material", "Range", "CuttingState", "RpmPolicy"]
