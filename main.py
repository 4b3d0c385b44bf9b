# main.py
import sys
from PySide6.QtWidgets import QApplication
from models import SpeakerCatalogError
from view.main_window import MainWindow
from viewmodel.speaker_vm import SpeakerViewModel
from viewmodel.logging_helpers import log_exception


def main():
    app = QApplication(sys.argv)

    # Model + ViewModel + View
    try:
        viewmodel = SpeakerViewModel()
    except SpeakerCatalogError as e:
        log_exception("Failed to load speaker catalog", e)
        return 1
    window = MainWindow(viewmodel)

    # Connect ViewModel → View signals
    viewmodel.speakers_updated.connect(window.update_speakers)
    viewmodel.speaker_changed.connect(window.show_speaker)
    viewmodel.plot_updated.connect(window.update_plot_data)
    viewmodel.selection_changed.connect(window.show_selection)
    viewmodel.log_message.connect(window.append_log)

    # Populate the sidebar; no speaker is shown until the user picks one.
    viewmodel.notify_speakers()

    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
