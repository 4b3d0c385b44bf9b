# view/view_box.py
from PySide6 import QtCore
import pyqtgraph as pg


class InspectionViewBox(pg.ViewBox):
    """
    ViewBox for the response chart.
    Handles:
      - Left click: inspect the point under the cursor
      - Left drag: inspect continuously while the mouse moves
    Pan, zoom and the context menu are disabled; the axis ranges are fixed.
    Emits the pixel x-coordinate inside the ViewBox and the ViewBox pixel
    width, leaving the frequency mapping to the ViewModel.
    """

    pointInspected = QtCore.Signal(float, float)         # pixel_x, chart_width

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setMouseEnabled(x=False, y=False)
        self.setMenuEnabled(False)
        self.setAspectLocked(False)
        self.disableAutoRange()

    def _emit_inspection(self, pos):
        width = float(self.width())
        if width <= 0:
            return
        self.pointInspected.emit(float(pos.x()), width)

    # ---------------------
    # Mouse events
    # ---------------------
    def mouseClickEvent(self, ev):
        if ev.button() == QtCore.Qt.LeftButton:
            self._emit_inspection(ev.pos())
            ev.accept()
            return
        super().mouseClickEvent(ev)

    def mouseDragEvent(self, ev, axis=None):
        if ev.button() != QtCore.Qt.LeftButton:
            return super().mouseDragEvent(ev, axis)
        ev.accept()
        self._emit_inspection(ev.pos())

    def wheelEvent(self, ev, axis=None):
        ev.accept()
