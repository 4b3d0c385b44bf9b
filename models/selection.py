# models/selection.py
from typing import Optional

from .speaker import CurvePoint


class PointSelection:
    """
    Holds the point the user last inspected on the chart.
    Two states: nothing selected, or one CurvePoint selected. A failed
    resolution (None) leaves the current state untouched.
    """

    def __init__(self):
        self._point: Optional[CurvePoint] = None

    @property
    def point(self) -> Optional[CurvePoint]:
        return self._point

    @property
    def has_selection(self) -> bool:
        return self._point is not None

    def apply(self, point: Optional[CurvePoint]) -> bool:
        """Select *point*; returns True when the selection changed."""
        if point is None:
            return False
        changed = point is not self._point
        self._point = point
        return changed

    def reset(self) -> bool:
        """Clear the selection; returns True if something was selected."""
        had = self._point is not None
        self._point = None
        return had
