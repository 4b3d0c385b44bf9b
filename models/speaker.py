# models/speaker.py
"""Immutable speaker records.

Every record carries a random ``uid`` used as a stable key by list widgets.
The ``uid`` is excluded from comparison and hashing, so two records with the
same content compare equal even though they are distinct instances.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Tuple


def _new_uid() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class AnchorPoint:
    """Hand-authored (frequency, level) control value of a base curve."""
    frequency: float  # Hz
    level: float  # dB


@dataclass(frozen=True)
class CurvePoint:
    """One sample of a frequency-response curve."""
    frequency: float  # Hz
    level: float  # dB SPL
    uid: str = field(default_factory=_new_uid, compare=False, repr=False)


@dataclass(frozen=True)
class Speaker:
    name: str
    resonance_frequency: int  # Hz
    sensitivity: int  # dB
    description: str
    anchors: Tuple[AnchorPoint, ...]
    response: Tuple[CurvePoint, ...]
    uid: str = field(default_factory=_new_uid, compare=False, repr=False)

    def frequencies(self):
        return [p.frequency for p in self.response]

    def levels(self):
        return [p.level for p in self.response]
