"""
Speaker list dock widget for choosing the displayed speaker.
"""

from PySide6.QtWidgets import (
    QDockWidget, QWidget, QVBoxLayout, QLabel, QListWidget, QListWidgetItem, QAbstractItemView
)
from PySide6.QtCore import Qt, Signal


class SpeakerListDock(QDockWidget):
    """Dock widget listing the speaker catalog."""

    speaker_selected = Signal(int)  # row number

    def __init__(self, parent=None):
        """
        Initialize the speaker list dock.

        Args:
            parent: Parent widget (typically the main window)
        """
        super().__init__("Speakers", parent)
        self._init_ui()

    def _init_ui(self):
        """Initialize the UI components."""
        left_widget = QWidget()
        layout = QVBoxLayout(left_widget)

        layout.addWidget(QLabel("Select Speaker"))
        self.speaker_list = QListWidget()
        self.speaker_list.setSelectionMode(QAbstractItemView.SingleSelection)
        layout.addWidget(self.speaker_list)

        self.setWidget(left_widget)

        self.speaker_list.currentRowChanged.connect(self._on_speaker_selected)

    def _on_speaker_selected(self, row):
        """Handle speaker selection."""
        if row >= 0:
            self.speaker_selected.emit(row)

    def update_speakers(self, speakers):
        """
        Rebuild the list from the provided entries.

        Args:
            speakers: List of entries (dicts with 'index', 'name', 'uid', 'active')
        """
        entries = speakers or []
        active_row = -1
        self.speaker_list.blockSignals(True)
        self.speaker_list.clear()

        for entry in entries:
            item = QListWidgetItem(entry.get("name") or f"Speaker {entry.get('index', 0) + 1}")
            # uid keys the row; equal-valued speakers stay distinct
            item.setData(Qt.UserRole, entry.get("uid"))
            if entry.get("active"):
                font = item.font()
                font.setBold(True)
                item.setFont(font)
                active_row = self.speaker_list.count()
            self.speaker_list.addItem(item)

        if active_row >= 0:
            self.speaker_list.setCurrentRow(active_row)

        self.speaker_list.blockSignals(False)
