"""
Tests for the banded logarithmic chart mapping and point resolution.
"""
import sys
from pathlib import Path

import numpy as np
import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.bands import AXIS_MAX
from models.chart_mapping import (
    axis_ticks,
    denormalize_label,
    format_frequency_label,
    format_selection,
    normalize_frequencies,
    normalize_frequency,
    pixel_to_frequency,
    resolve_point,
)
from models.curve_generator import generate_response_curve
from models.speaker import CurvePoint

A_TYPE = [
    (20, 70), (100, 85), (500, 95), (1_000, 98),
    (2_000, 95), (5_000, 90), (10_000, 80), (20_000, 75),
]


@pytest.fixture
def a_type_curve():
    return generate_response_curve(A_TYPE, jitter=lambda: 0.0)


def test_band_boundaries_normalize_to_integers():
    assert normalize_frequency(20.0) == 0.0
    assert normalize_frequency(200.0) == 1.0
    assert normalize_frequency(2_000.0) == 2.0
    assert normalize_frequency(20_000.0) == 3.0


def test_normalize_is_continuous_at_band_starts():
    # just past a boundary the next band starts from its offset
    assert normalize_frequency(200.0001) == pytest.approx(1.0, abs=1e-6)
    assert normalize_frequency(2_000.001) == pytest.approx(2.0, abs=1e-6)


def test_normalize_is_monotonic():
    freqs = np.geomspace(20.0, 20_000.0, 500)
    values = [normalize_frequency(float(f)) for f in freqs]
    assert all(b > a for a, b in zip(values, values[1:]))


def test_normalize_rejects_non_positive_frequency():
    with pytest.raises(ValueError):
        normalize_frequency(0.0)
    with pytest.raises(ValueError):
        normalize_frequencies([100.0, -5.0])


def test_vectorized_normalize_matches_scalar():
    freqs = [20.0, 55.0, 200.0, 270.0, 1_950.0, 2_000.0, 7_600.0, 19_600.0]
    vec = normalize_frequencies(freqs)
    for f, v in zip(freqs, vec):
        assert v == pytest.approx(normalize_frequency(f), abs=1e-12)


def test_format_frequency_label():
    assert format_frequency_label(20.0) == "20"
    assert format_frequency_label(200.0) == "200"
    assert format_frequency_label(2_000.0) == "2k"
    assert format_frequency_label(20_000.0) == "20k"


def test_denormalize_label_only_matches_boundaries():
    assert denormalize_label(0.0) == "20"
    assert denormalize_label(1.0) == "200"
    assert denormalize_label(2.0) == "2k"
    assert denormalize_label(3.0) == "20k"
    assert denormalize_label(0.5) == ""
    assert denormalize_label(normalize_frequency(1_000.0)) == ""


def test_axis_ticks_label_only_band_boundaries():
    ticks = axis_ticks()
    values = [v for v, _ in ticks]
    # 10 ticks per band, shared boundary ticks kept once
    assert len(ticks) == 28
    assert values == sorted(values)
    labeled = [(v, label) for v, label in ticks if label]
    assert labeled == [(0.0, "20"), (1.0, "200"), (2.0, "2k"), (3.0, "20k")]


def test_pixel_to_frequency_edges():
    assert pixel_to_frequency(0.0, 640.0) == pytest.approx(20.0)
    # right edge of the chart lies past 20 kHz (axis runs to 3.2)
    assert pixel_to_frequency(640.0, 640.0) == pytest.approx(2_000.0 * 10 ** 1.2)
    with pytest.raises(ValueError):
        pixel_to_frequency(10.0, 0.0)


@pytest.mark.parametrize("freq", [20.0, 37.0, 200.0, 333.0, 1_000.0, 2_000.0, 4_321.0, 20_000.0])
@pytest.mark.parametrize("width", [320.0, 777.0])
def test_pixel_round_trip(freq, width):
    pixel = normalize_frequency(freq) * width / AXIS_MAX
    assert pixel_to_frequency(pixel, width) == pytest.approx(freq, rel=1e-6)


def test_resolve_exact_sample_returns_stored_point(a_type_curve):
    stored = next(p for p in a_type_curve if p.frequency == 1_180.0)
    resolved = resolve_point(1_180.0, a_type_curve)
    assert resolved is stored


def test_resolve_between_samples_interpolates_without_jitter(a_type_curve):
    lower = next(p for p in a_type_curve if p.frequency == 1_180.0)
    upper = next(p for p in a_type_curve if p.frequency == 1_250.0)
    resolved = resolve_point(1_215.0, a_type_curve)
    assert resolved is not lower and resolved is not upper
    assert resolved.frequency == 1_215.0
    assert resolved.level == pytest.approx((lower.level + upper.level) / 2.0)


def test_resolve_uses_real_jittered_samples():
    curve = generate_response_curve(A_TYPE, jitter=lambda: 0.4)
    lower = next(p for p in curve if p.frequency == 1_180.0)
    upper = next(p for p in curve if p.frequency == 1_250.0)
    resolved = resolve_point(1_197.5, curve)
    expected = lower.level + (upper.level - lower.level) * (17.5 / 70.0)
    assert resolved.level == pytest.approx(expected)


def test_resolve_boundary_duplicate_picks_later_sample(a_type_curve):
    dupes = [p for p in a_type_curve if p.frequency == 200.0]
    assert len(dupes) == 2
    assert resolve_point(200.0, a_type_curve) is dupes[1]


def test_resolve_outside_curve_returns_none(a_type_curve):
    assert resolve_point(10.0, a_type_curve) is None
    assert resolve_point(19_600.0, a_type_curve) is None
    assert resolve_point(25_000.0, a_type_curve) is None
    assert resolve_point(100.0, ()) is None


def test_resolve_first_sample_is_exact(a_type_curve):
    assert resolve_point(20.0, a_type_curve) is a_type_curve[0]


def test_format_selection():
    assert format_selection(CurvePoint(1_215.0, 97.355)) == "Selected Hz: 1215, dB: 97"
