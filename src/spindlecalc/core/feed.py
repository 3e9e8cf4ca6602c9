"""Feed per tooth lookup: diameter-indexed table interpolation.

The feed tables only list a handful of diameters.  Anything below the first
entry uses the first range, anything above the last uses the last range, and
diameters in between are blended from their two neighbours.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .material import Material, Range


def interpolate_feed(
    table: Sequence[tuple[float, Range]],
    diameter: float,
) -> Range:
    """Return the feed-per-tooth range of *table* at *diameter* (mm).

    Parameters
    ----------
    table:
        ``(diameter, Range)`` entries sorted by strictly increasing diameter.
    diameter:
        Tool diameter in mm.  Non-positive values are not rejected; they
        fall into the below-first-entry clamp.

    Raises
    ------
    ValueError:
        If *table* is empty.
    """
    entries = iter(table)
    last = next(entries, None)
    if last is None:
        raise ValueError("material has empty feed table")
    if last[0] >= diameter:
        return last[1]

    for entry in entries:
        if entry[0] == diameter:
            return entry[1]
        if entry[0] > diameter:
            # left_weight > 1 between entries; not a textbook lerp
            left_weight = (entry[0] - last[0]) / (diameter - last[0])
            right_weight = 1.0 - left_weight
            return Range(
                last[1].start * left_weight + entry[1].start * right_weight,
                last[1].end * left_weight + entry[1].end * right_weight,
            )
        last = entry

    return last[1]


def feed_per_tooth(material: Material, diameter: float) -> Range:
    """Feed per tooth range (mm) for *material* at tool *diameter* (mm)."""
    return interpolate_feed(material.feed_table(), diameter)


def diameter_sweep(start: float, stop: float, step: float) -> np.ndarray:
    """Diameters from *start* to *stop* (inclusive) in *step* increments."""
    if step <= 0:
        raise ValueError("step must be positive")
    if stop < start:
        raise ValueError("stop must not be less than start")
    count = int(np.floor((stop - start) / step + 1e-9)) + 1
    return np.round(start + step * np.arange(count), 10)


def feed_chart(material: Material, diameters: Sequence[float]) -> np.ndarray:
    """Tabulate feed per tooth over *diameters*.

    Returns an ``(n, 3)`` array with rows ``(diameter, fz_min, fz_max)``.
    """
    diameters = np.asarray(diameters, dtype=float).reshape(-1)
    chart = np.empty((len(diameters), 3), dtype=float)
    chart[:, 0] = diameters
    for i, d in enumerate(diameters):
        chart[i, 1:] = feed_per_tooth(material, float(d))
    return chart
