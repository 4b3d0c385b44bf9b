"""
Log dock widget for displaying application log messages.
"""

from PySide6.QtWidgets import QDockWidget, QPlainTextEdit


class LogDock(QDockWidget):
    """Dock widget showing messages emitted on the ViewModel's log signal."""

    MAX_BLOCKS = 500

    def __init__(self, parent=None):
        super().__init__("Log", parent)
        self.log_text = QPlainTextEdit()
        self.log_text.setReadOnly(True)
        # oldest lines are dropped once the limit is reached
        self.log_text.setMaximumBlockCount(self.MAX_BLOCKS)
        self.log_text.appendPlainText("Speaker catalog loaded.")
        self.setWidget(self.log_text)

    def append_log(self, msg: str):
        self.log_text.appendPlainText(str(msg))
