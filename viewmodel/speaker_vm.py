# viewmodel/speaker_vm.py
from PySide6.QtCore import QObject, Signal
import numpy as np
import typing as _typing

from models import (
    CurvePoint,
    PointSelection,
    Speaker,
    axis_ticks,
    format_selection,
    get_speaker_catalog,
    normalize_frequencies,
    pixel_to_frequency,
    resolve_point,
)
from .logging_helpers import log_exception, log_message, safe_call, safe_emit


class SpeakerViewModel(QObject):
    """
    Central logic layer: holds the speaker catalog, the active speaker and the
    inspected chart point, and turns view events into updates for the plot.
    """

    speakers_updated = Signal(object)                        # list of speaker entries
    speaker_changed = Signal(object)                         # Speaker or None
    plot_updated = Signal(object, object)                    # normalized x, levels
    selection_changed = Signal(object)                       # CurvePoint or None
    log_message = Signal(str)

    def __init__(self, speakers: _typing.Optional[_typing.Sequence[Speaker]] = None, config=None):
        super().__init__()
        if speakers is None:
            speakers = get_speaker_catalog()
        if config is None:
            from dataio import get_config
            config = get_config()
        self.config = config
        self._speakers: _typing.List[Speaker] = list(speakers)
        self._active_index: _typing.Optional[int] = None
        self._selection = PointSelection()

    def _log_message(self, message: str) -> None:
        """Emit a message via the shared logging helper."""
        log_message(message, vm=self)

    def _log_exception(self, context: str, exc: Exception) -> None:
        """Emit an exception context via the shared logging helper."""
        log_exception(context, exc, vm=self)

    # --------------------------
    # Catalog
    # --------------------------
    @property
    def speakers(self) -> _typing.List[Speaker]:
        return list(self._speakers)

    @property
    def active_index(self) -> _typing.Optional[int]:
        return self._active_index

    @property
    def active_speaker(self) -> _typing.Optional[Speaker]:
        if self._active_index is None:
            return None
        return self._speakers[self._active_index]

    def _speaker_entries(self) -> _typing.List[dict]:
        return [
            {
                "index": idx,
                "name": speaker.name,
                "uid": speaker.uid,
                "active": idx == self._active_index,
            }
            for idx, speaker in enumerate(self._speakers)
        ]

    def notify_speakers(self):
        safe_emit(self, "speakers_updated", self._speaker_entries())

    def activate_speaker(self, index) -> bool:
        """Show the speaker at *index*. Returns True if the active speaker changed."""
        try:
            idx = int(index)
        except (ValueError, TypeError):
            return False

        if idx < 0 or idx >= len(self._speakers):
            return False
        if idx == self._active_index:
            return False

        self._active_index = idx
        # a new speaker always starts without an inspected point
        self._selection.reset()

        speaker = self._speakers[idx]
        self._log_message(f"Showing speaker: {speaker.name}")

        safe_emit(self, "speaker_changed", speaker)
        safe_call(self, "update plot", self.update_plot)
        safe_emit(self, "selection_changed", None)
        self.notify_speakers()
        return True

    # --------------------------
    # Plot
    # --------------------------
    def get_plot_data(self) -> _typing.Optional[_typing.Tuple[np.ndarray, np.ndarray]]:
        speaker = self.active_speaker
        if speaker is None:
            return None
        x = normalize_frequencies(speaker.frequencies())
        y = np.asarray(speaker.levels(), dtype=float)
        return x, y

    def update_plot(self):
        data = self.get_plot_data()
        if data is None:
            return
        self.plot_updated.emit(*data)

    def axis_ticks(self) -> _typing.List[_typing.Tuple[float, str]]:
        return axis_ticks()

    def y_ticks(self) -> _typing.List[_typing.Tuple[float, str]]:
        cfg = self.config
        values = np.arange(cfg.y_min, cfg.y_max + cfg.y_tick_step / 2.0, cfg.y_tick_step)
        return [(float(v), f"{v:g}") for v in values]

    # --------------------------
    # Point inspection
    # --------------------------
    @property
    def selected_point(self) -> _typing.Optional[CurvePoint]:
        return self._selection.point

    def inspect_pixel(self, pixel_x: float, chart_width: float) -> _typing.Optional[CurvePoint]:
        """Resolve a click/drag position to a curve point and select it.

        Positions outside the curve's frequency range resolve to nothing and
        keep the current selection.
        """
        speaker = self.active_speaker
        if speaker is None:
            return None
        try:
            frequency = pixel_to_frequency(float(pixel_x), float(chart_width))
        except ValueError as exc:
            self._log_message(f"Ignored chart position ({pixel_x}, width {chart_width}): {exc}")
            return None

        point = resolve_point(frequency, speaker.response)
        if point is None:
            return None
        if self._selection.apply(point):
            safe_emit(self, "selection_changed", point)
        return point

    def clear_selection(self):
        if self._selection.reset():
            safe_emit(self, "selection_changed", None)

    def selection_text(self) -> str:
        point = self._selection.point
        if point is None:
            return ""
        return format_selection(point)

    # --------------------------
    # Dispatcher
    # --------------------------
    def handle_action(self, action: str, **kwargs):
        """
        Central dispatcher for view-driven actions.

        Examples:
            handle_action('activate_speaker', index=2)
            handle_action('inspect_pixel', pixel_x=120.0, chart_width=640.0)
            handle_action('clear_selection')

        Returns:
            The result of the called action, or None if the action is not
            recognized or raised.
        """
        if not action:
            self._log_message("handle_action: no action provided")
            return None

        a = str(action).strip()
        mapping = {
            "activate_speaker": lambda: self.activate_speaker(kwargs.get("index", kwargs.get("idx"))),
            "inspect_pixel": lambda: self.inspect_pixel(kwargs.get("pixel_x"), kwargs.get("chart_width")),
            "clear_selection": self.clear_selection,
            "update_plot": self.update_plot,
            "notify_speakers": self.notify_speakers,
        }

        if a not in mapping:
            self._log_message(f"Unknown action requested: '{action}'")
            return None
        try:
            return mapping[a]()
        except Exception as e:
            self._log_exception(f"handle_action('{action}') failed", e)
            return None
