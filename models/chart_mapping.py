# models/chart_mapping.py
"""Coordinate mapping for the banded logarithmic response chart.

Three coordinate spaces are involved:

  - frequency in Hz (log-distributed),
  - the normalized x-axis value in [0, AXIS_MAX]; each band is
    log-normalized to [0, 1] and shifted by its axis offset,
  - pixel x inside the rendered plot area.

``resolve_point`` turns a frequency picked by the user into a point on a
generated curve, either an existing sample or a linear interpolation between
the two neighbouring samples.
"""
from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .bands import AXIS_MAX, BANDS, BOUNDARY_FREQUENCIES, HIGH, LOW, MID, band_for_frequency
from .speaker import CurvePoint


def normalize_frequency(frequency: float) -> float:
    """Map a frequency in Hz to the normalized chart x-axis."""
    if frequency <= 0:
        raise ValueError(f"frequency must be positive, got {frequency!r}")
    band = band_for_frequency(frequency)
    return band.axis_offset + (math.log10(frequency) - math.log10(band.min_hz)) / band.log_span


def normalize_frequencies(frequencies) -> np.ndarray:
    """Vectorized :func:`normalize_frequency` used for plotting whole curves."""
    f = np.asarray(frequencies, dtype=float)
    if np.any(f <= 0):
        raise ValueError("frequencies must be positive")
    log_f = np.log10(f)
    conditions = [f <= LOW.max_hz, f <= MID.max_hz]
    choices = [
        LOW.axis_offset + (log_f - math.log10(LOW.min_hz)) / LOW.log_span,
        MID.axis_offset + (log_f - math.log10(MID.min_hz)) / MID.log_span,
    ]
    default = HIGH.axis_offset + (log_f - math.log10(HIGH.min_hz)) / HIGH.log_span
    return np.select(conditions, choices, default=default)


def format_frequency_label(frequency: float) -> str:
    if frequency >= 1_000:
        return f"{int(frequency / 1_000)}k"
    return f"{int(frequency)}"


def denormalize_label(value: float) -> str:
    """Label for an x-axis tick value.

    Only the four band boundaries (20, 200, 2k, 20k) are labeled, and only on
    an exact match with their normalized value; every other tick is blank.
    """
    for frequency in BOUNDARY_FREQUENCIES:
        if value == normalize_frequency(frequency):
            return format_frequency_label(frequency)
    return ""


def axis_ticks() -> List[Tuple[float, str]]:
    """Return ``(normalized value, label)`` for every x-axis grid line."""
    ticks = []
    seen = set()
    for band in BANDS:
        for frequency in band.tick_frequencies():
            value = normalize_frequency(float(frequency))
            if value in seen:
                continue
            seen.add(value)
            ticks.append((value, denormalize_label(value)))
    return ticks


def pixel_to_frequency(pixel_x: float, chart_width: float) -> float:
    """Invert a pixel position inside the plot area to a frequency in Hz."""
    if chart_width <= 0:
        raise ValueError(f"chart width must be positive, got {chart_width!r}")
    normalized_x = (pixel_x / chart_width) * AXIS_MAX
    if normalized_x <= 1.0:
        band, offset_x = LOW, normalized_x
    elif normalized_x <= 2.0:
        band, offset_x = MID, normalized_x - 1.0
    else:
        band, offset_x = HIGH, normalized_x - 2.0
    return 10 ** (math.log10(band.min_hz) + offset_x * band.log_span)


def resolve_point(frequency: float, curve: Sequence[CurvePoint]) -> Optional[CurvePoint]:
    """Return the curve point shown for *frequency*.

    Returns None when *frequency* is not bracketed by the curve (below the
    first sample or at/after the last one); callers keep their current
    selection in that case. An exact sample match returns the stored point
    itself; anything else is interpolated without jitter.
    """
    if not curve:
        return None
    freqs = np.fromiter((p.frequency for p in curve), dtype=float, count=len(curve))
    upper_idx = int(np.searchsorted(freqs, frequency, side="right"))
    if upper_idx == 0 or upper_idx >= len(curve):
        return None

    lower = curve[upper_idx - 1]
    upper = curve[upper_idx]
    if lower.frequency == frequency:
        return lower
    if upper.frequency == frequency:
        return upper

    slope = (upper.level - lower.level) / (upper.frequency - lower.frequency)
    level = lower.level + slope * (frequency - lower.frequency)
    return CurvePoint(frequency=float(frequency), level=float(level))


def format_selection(point: CurvePoint) -> str:
    return f"Selected Hz: {point.frequency:.0f}, dB: {point.level:.0f}"
