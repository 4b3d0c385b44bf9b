# models/curve_generator.py
"""Synthetic frequency-response curves.

A speaker's base curve is a short list of anchor points. The generator
linearly interpolates between anchors at every frequency of the banded
sampling grid (see :mod:`models.bands`) and perturbs each interpolated level
with a small random jitter so the plotted curve looks measured.

Outside the anchor table the curve is flat: the level of the last anchor at
or below the frequency, or ``FALLBACK_LEVEL_DB`` when there is none. Flat
samples are never jittered.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Sequence, Tuple

import numpy as np

from .bands import sample_grid
from .speaker import AnchorPoint, CurvePoint

logger = logging.getLogger(__name__)

FALLBACK_LEVEL_DB = 80.0
JITTER_SPREAD_DB = 0.5

Jitter = Callable[[], float]


class AnchorOrderError(ValueError):
    """Raised when anchor frequencies are not strictly increasing."""
    pass


def uniform_jitter(rng: Optional[np.random.Generator] = None,
                   spread: float = JITTER_SPREAD_DB) -> Jitter:
    """Return a callable drawing independent values from [-spread, +spread]."""
    gen = rng if rng is not None else np.random.default_rng()

    def _draw() -> float:
        return float(gen.uniform(-spread, spread))

    return _draw


def as_anchor_points(anchors: Iterable) -> Tuple[AnchorPoint, ...]:
    """Coerce ``(frequency, level)`` pairs to AnchorPoint instances."""
    out = []
    for a in anchors:
        if isinstance(a, AnchorPoint):
            out.append(a)
        else:
            freq, level = a
            out.append(AnchorPoint(float(freq), float(level)))
    return tuple(out)


def validate_anchors(anchors: Sequence[AnchorPoint]) -> None:
    for prev, cur in zip(anchors, anchors[1:]):
        if not cur.frequency > prev.frequency:
            raise AnchorOrderError(
                f"anchor frequencies must be strictly increasing "
                f"({prev.frequency:g} Hz followed by {cur.frequency:g} Hz)"
            )


def interpolate_level(anchors: Sequence[AnchorPoint], frequency: float) -> Tuple[float, bool]:
    """Return ``(level, interpolated)`` for *frequency* before any jitter.

    ``interpolated`` is False when the frequency lies outside the anchor
    table and the flat extrapolation value was used.
    """
    last_point = None
    next_point = None
    for anchor in anchors:
        if anchor.frequency <= frequency:
            last_point = anchor
        elif next_point is None:
            next_point = anchor
            break

    if last_point is None or next_point is None:
        level = last_point.level if last_point is not None else FALLBACK_LEVEL_DB
        return level, False

    slope = (next_point.level - last_point.level) / (next_point.frequency - last_point.frequency)
    return last_point.level + slope * (frequency - last_point.frequency), True


def generate_response_curve(anchors: Iterable, jitter: Optional[Jitter] = None) -> Tuple[CurvePoint, ...]:
    """Resample *anchors* onto the banded grid and return the curve.

    Args:
        anchors: AnchorPoint instances or ``(frequency, level)`` pairs,
            strictly increasing in frequency. May be empty.
        jitter: zero-argument callable added to every interpolated level.
            Defaults to :func:`uniform_jitter` with an unseeded generator.

    Raises:
        AnchorOrderError: if the anchor frequencies are not strictly increasing.
    """
    points = as_anchor_points(anchors)
    validate_anchors(points)
    if len(points) < 2:
        logger.debug("Generating flat response from %d anchor(s)", len(points))
    if jitter is None:
        jitter = uniform_jitter()

    curve = []
    for frequency in sample_grid():
        f = float(frequency)
        level, interpolated = interpolate_level(points, f)
        if interpolated:
            level += jitter()
        curve.append(CurvePoint(frequency=f, level=float(level)))
    return tuple(curve)
