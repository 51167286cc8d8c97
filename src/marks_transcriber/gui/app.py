"""
Entry point for the PySide6 GUI.
"""
import logging
import sys


def run():
    """
    Main entry point for the GUI application.
    """
    from PySide6.QtWidgets import QApplication
    from marks_transcriber.config import TranscriberConfig
    from marks_transcriber.gui.main_window import MainWindow
    from marks_transcriber.gui.styles.theme import apply_global_stylesheet
    from marks_transcriber.paths import ensure_directories
    from marks_transcriber.session.controller import TranscriptionSession
    from marks_transcriber.session.storage import JsonFileKeyValueStore

    app = QApplication(sys.argv)
    app.setApplicationName("Marks Transcriber")
    app.setApplicationDisplayName("Marks Transcriber")
    app.setOrganizationName("Marks Transcriber")

    ensure_directories()
    config = TranscriberConfig()
    logging.getLogger("marks_transcriber").setLevel(config.log_level.upper())

    apply_global_stylesheet(app)

    session = TranscriptionSession(JsonFileKeyValueStore(config.storage_path), config)
    session.load()

    window = MainWindow(session)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
