"""
Tests for value equality versus identity of speaker records.
"""
import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.catalog import build_speaker
from models.speaker import CurvePoint


ENTRY = {
    "name": "Test Speaker",
    "resonance_frequency": 80,
    "sensitivity": 99,
    "description": "Flat-ish test unit.",
    "anchors": [[20, 70], [200, 90], [2000, 95], [20000, 80]],
}


def test_curve_points_compare_by_value():
    a = CurvePoint(100.0, 88.0)
    b = CurvePoint(100.0, 88.0)
    assert a == b
    assert hash(a) == hash(b)
    assert a is not b
    assert a.uid != b.uid
    assert CurvePoint(100.0, 88.5) != a


def test_curve_points_are_immutable():
    p = CurvePoint(100.0, 88.0)
    with pytest.raises(AttributeError):
        p.level = 90.0


def test_speakers_compare_every_field_but_uid():
    a = build_speaker(ENTRY, jitter=lambda: 0.0)
    b = build_speaker(ENTRY, jitter=lambda: 0.0)
    assert a == b
    assert hash(a) == hash(b)
    assert a.uid != b.uid

    changed = build_speaker(dict(ENTRY, description="Different."), jitter=lambda: 0.0)
    assert changed != a


def test_speakers_with_different_curves_differ():
    a = build_speaker(ENTRY, jitter=lambda: 0.0)
    b = build_speaker(ENTRY, jitter=lambda: 0.1)
    assert a != b
    assert a.frequencies() == b.frequencies()
    assert a.levels() != b.levels()
