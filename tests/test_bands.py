"""
Tests for the shared frequency band table.
"""
import sys
from pathlib import Path

import numpy as np

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.bands import BANDS, HIGH, LOW, MID, band_for_frequency, sample_grid


def test_band_sample_counts():
    """Stride-through sampling stops at or before the band maximum."""
    assert len(LOW.sample_frequencies()) == 19    # 20, 30, ..., 200
    assert len(MID.sample_frequencies()) == 26    # 200, 270, ..., 1950
    assert len(HIGH.sample_frequencies()) == 23   # 2000, 2800, ..., 19600


def test_band_sample_endpoints():
    assert LOW.sample_frequencies()[-1] == 200.0
    assert MID.sample_frequencies()[-1] == 1950.0
    assert HIGH.sample_frequencies()[-1] == 19600.0
    for band in BANDS:
        assert band.sample_frequencies()[0] == band.min_hz
        assert band.sample_frequencies()[-1] <= band.max_hz


def test_sample_grid_keeps_boundary_duplicate():
    grid = sample_grid()
    assert len(grid) == 68
    assert np.count_nonzero(grid == 200.0) == 2
    assert np.count_nonzero(grid == 2000.0) == 1
    assert np.all(np.diff(grid) >= 0)


def test_tick_frequencies_include_both_band_ends():
    for band in BANDS:
        ticks = band.tick_frequencies()
        assert ticks[0] == band.min_hz
        assert ticks[-1] == band.max_hz
        assert len(ticks) == 10


def test_band_for_frequency_boundaries_go_to_lower_band():
    assert band_for_frequency(20.0) is LOW
    assert band_for_frequency(200.0) is LOW
    assert band_for_frequency(200.1) is MID
    assert band_for_frequency(2000.0) is MID
    assert band_for_frequency(2000.1) is HIGH
    assert band_for_frequency(50_000.0) is HIGH


def test_axis_offsets():
    assert [b.axis_offset for b in BANDS] == [0.0, 1.0, 2.0]
    # every band spans one decade
    for band in BANDS:
        assert abs(band.log_span - 1.0) < 1e-12
