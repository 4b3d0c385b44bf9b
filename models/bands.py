# models/bands.py
"""Frequency band table shared by the curve generator and the chart mapper.

The response chart compresses 20 Hz - 20 kHz into three bands, each with its
own sampling step (used when generating curves), its own tick step (used for
x-axis grid lines) and an integer offset on the normalized x-axis.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

# Normalized x-axis domain of the chart: three unit bands plus headroom.
AXIS_MAX = 3.2


def _stride_through(start: float, stop: float, step: float) -> np.ndarray:
    """Inclusive arithmetic progression that never passes ``stop``."""
    count = int(math.floor((stop - start) / step))
    return start + np.arange(count + 1, dtype=float) * step


@dataclass(frozen=True)
class FrequencyBand:
    name: str
    min_hz: float
    max_hz: float
    step_hz: float
    tick_step_hz: float
    axis_offset: float

    @property
    def log_span(self) -> float:
        return math.log10(self.max_hz) - math.log10(self.min_hz)

    def sample_frequencies(self) -> np.ndarray:
        """Frequencies at which a response curve is sampled in this band."""
        return _stride_through(self.min_hz, self.max_hz, self.step_hz)

    def tick_frequencies(self) -> np.ndarray:
        """Frequencies that get an x-axis grid line in this band."""
        return _stride_through(self.min_hz, self.max_hz, self.tick_step_hz)


LOW = FrequencyBand("low", 20.0, 200.0, 10.0, 20.0, 0.0)
MID = FrequencyBand("mid", 200.0, 2_000.0, 70.0, 200.0, 1.0)
HIGH = FrequencyBand("high", 2_000.0, 20_000.0, 800.0, 2_000.0, 2.0)

BANDS: Tuple[FrequencyBand, ...] = (LOW, MID, HIGH)

# Frequencies that carry a text label on the x-axis.
BOUNDARY_FREQUENCIES: Tuple[float, ...] = (LOW.min_hz, LOW.max_hz, MID.max_hz, HIGH.max_hz)


def band_for_frequency(frequency: float) -> FrequencyBand:
    """Return the band a frequency is plotted in (boundaries go to the lower band)."""
    if frequency <= LOW.max_hz:
        return LOW
    if frequency <= MID.max_hz:
        return MID
    return HIGH


def sample_grid() -> np.ndarray:
    """Concatenated sampling grid of all bands, boundary duplicates included."""
    return np.concatenate([band.sample_frequencies() for band in BANDS])
