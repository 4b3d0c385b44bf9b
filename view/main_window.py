# view/main_window.py
from PySide6.QtWidgets import QMainWindow, QDockWidget, QWidget, QVBoxLayout, QLabel, QGroupBox
from PySide6.QtCore import Qt
import pyqtgraph as pg

from view.view_box import InspectionViewBox
from view.docks.speaker_list_dock import SpeakerListDock
from view.docks.log_dock import LogDock
from view.constants import (
    AXIS_COLOR, CURVE_WIDTH, GRID_ALPHA, MARKER_COLOR, MARKER_SIZE,
    PLACEHOLDER_TEXT, PLOT_BG, X_AXIS_LABEL, Y_AXIS_LABEL,
)
from models import AXIS_MAX, format_selection, normalize_frequency
from viewmodel.logging_helpers import log_exception

APP_TITLE = "Guitar Speakers"


class MainWindow(QMainWindow):
    def __init__(self, viewmodel=None):
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.viewmodel = viewmodel
        cfg = getattr(viewmodel, "config", None)
        self._y_range = (cfg.y_min, cfg.y_max) if cfg is not None else (50.0, 110.0)
        self._curve_color = cfg.curve_color if cfg is not None else "red"

        self._init_central()
        self._init_docks()

        for dock in [self.speaker_dock, self.log_dock]:
            dock.setFeatures(QDockWidget.DockWidgetMovable | QDockWidget.DockWidgetFloatable)

        if cfg is not None:
            self.resize(cfg.window_width, cfg.window_height)
        else:
            self.resize(1200, 760)
        self.show_speaker(None)

    # --------------------------
    # Central panel
    # --------------------------
    def _init_central(self):
        central = QWidget()
        layout = QVBoxLayout(central)

        self.placeholder_label = QLabel(PLACEHOLDER_TEXT)
        self.placeholder_label.setAlignment(Qt.AlignCenter)
        self.placeholder_label.setStyleSheet("color: gray;")
        layout.addWidget(self.placeholder_label)

        self.details_box = QGroupBox()
        details_layout = QVBoxLayout(self.details_box)
        self.description_label = QLabel()
        self.description_label.setWordWrap(True)
        self.resonance_label = QLabel()
        self.sensitivity_label = QLabel()
        for w in (self.description_label, self.resonance_label, self.sensitivity_label):
            details_layout.addWidget(w)
        layout.addWidget(self.details_box)

        self._init_plot()
        layout.addWidget(self.plot_widget, 1)

        self.selection_label = QLabel()
        layout.addWidget(self.selection_label)

        self.setCentralWidget(central)

    def _init_plot(self):
        self.viewbox = InspectionViewBox()
        self.plot_widget = pg.PlotWidget(viewBox=self.viewbox)
        self.plot_widget.setBackground(PLOT_BG)
        self.plot_widget.showGrid(x=True, y=True, alpha=GRID_ALPHA)
        self.plot_widget.setLabel("bottom", X_AXIS_LABEL)
        self.plot_widget.setLabel("left", Y_AXIS_LABEL)

        # fixed domains: banded log axis on x, dB range from config on y
        self.plot_widget.setXRange(0.0, AXIS_MAX, padding=0)
        self.plot_widget.setYRange(self._y_range[0], self._y_range[1], padding=0)

        for ax in ("left", "bottom"):
            axis = self.plot_widget.getAxis(ax)
            axis.setPen(pg.mkPen(AXIS_COLOR))
            axis.setTextPen(pg.mkPen(AXIS_COLOR))

        if self.viewmodel is not None:
            self.plot_widget.getAxis("bottom").setTicks([self.viewmodel.axis_ticks()])
            self.plot_widget.getAxis("left").setTicks([self.viewmodel.y_ticks()])

        self.curve = self.plot_widget.plot(pen=pg.mkPen(self._curve_color, width=CURVE_WIDTH))
        self.marker = pg.ScatterPlotItem(size=MARKER_SIZE, pen=None, brush=pg.mkBrush(MARKER_COLOR))
        self.plot_widget.addItem(self.marker)

        if self.viewmodel is not None:
            self.viewbox.pointInspected.connect(self._on_point_inspected)

    # --------------------------
    # Docks
    # --------------------------
    def _init_docks(self):
        """Initialize all dock widgets."""
        # Create the log dock first so logging is available immediately
        self.log_dock = LogDock(self)
        self.addDockWidget(Qt.BottomDockWidgetArea, self.log_dock)

        self.speaker_dock = SpeakerListDock(self)
        self.addDockWidget(Qt.LeftDockWidgetArea, self.speaker_dock)

        if self.viewmodel is not None:
            self.speaker_dock.speaker_selected.connect(self._on_speaker_selected)

    # --------------------------
    # View -> ViewModel
    # --------------------------
    def _on_speaker_selected(self, row):
        self.viewmodel.handle_action("activate_speaker", index=row)

    def _on_point_inspected(self, pixel_x, chart_width):
        self.viewmodel.handle_action("inspect_pixel", pixel_x=pixel_x, chart_width=chart_width)

    # --------------------------
    # ViewModel -> View
    # --------------------------
    def update_speakers(self, entries):
        self.speaker_dock.update_speakers(entries)

    def show_speaker(self, speaker):
        has_speaker = speaker is not None
        self.placeholder_label.setVisible(not has_speaker)
        self.details_box.setVisible(has_speaker)
        self.plot_widget.setVisible(has_speaker)
        self.selection_label.setVisible(has_speaker)
        if not has_speaker:
            self.setWindowTitle(APP_TITLE)
            self.curve.setData([], [])
            return

        self.setWindowTitle(f"{APP_TITLE} - {speaker.name}")
        self.description_label.setText(speaker.description)
        self.resonance_label.setText(f"Resonance Frequency: {speaker.resonance_frequency}")
        self.sensitivity_label.setText(f"Sensitivity: {speaker.sensitivity}")

    def update_plot_data(self, x, y):
        self.curve.setData(x, y)

    def show_selection(self, point):
        if point is None:
            self.marker.clear()
            self.selection_label.setText("")
            return
        try:
            self.marker.setData([normalize_frequency(point.frequency)], [point.level])
        except ValueError as exc:
            log_exception("Failed to place selection marker", exc, vm=self.viewmodel)
        self.selection_label.setText(format_selection(point))

    def append_log(self, msg: str):
        self.log_dock.append_log(msg)
