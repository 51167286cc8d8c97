"""
Main Window for the Marks Transcriber GUI.

Two pages in a stack: step 1 takes the pasted student list, step 2 takes
queries and marks lines. Every widget event is forwarded to the
TranscriptionSession and the returned SessionUpdate is applied here.
"""
import logging
import queue

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QStackedWidget,
    QPushButton, QLabel, QLineEdit, QPlainTextEdit, QApplication, QSplitter
)
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont

from marks_transcriber import __version__
from marks_transcriber.gui.styles.theme import Fonts
from marks_transcriber.gui.utils.icons import MaterialIcons
from marks_transcriber.gui.utils.logging_utils import (
    attach_queue_handler,
    detach_queue_handler,
    drain_queue,
)
from marks_transcriber.gui.widgets.console_widget import ConsoleWidget
from marks_transcriber.session.controller import SessionUpdate, Step, TranscriptionSession

logger = logging.getLogger(__name__)

LOGGER_NAME = "marks_transcriber"
LOG_POLL_INTERVAL_MS = 100
STATUS_TIMEOUT_MS = 5000

ROSTER_HINT = "Paste one student per line, then press Done."
TRANSCRIBE_HINT = (
    "Type part of a name to bring the student to the top. "
    "Enter \"name = 1 2 3\" to record marks, \":export\" to copy the table, "
    "\":clear\" to start over."
)


class MainWindow(QMainWindow):
    def __init__(self, session: TranscriptionSession, parent=None):
        super().__init__(parent)
        self.session = session

        self.setWindowTitle(f"Marks Transcriber {__version__}")
        self.resize(900, 700)

        self.pages = QStackedWidget()
        self.pages.addWidget(self._build_roster_page())
        self.pages.addWidget(self._build_transcribe_page())

        self.console = ConsoleWidget()

        splitter = QSplitter(Qt.Orientation.Vertical)
        splitter.addWidget(self.pages)
        splitter.addWidget(self.console)
        splitter.setStretchFactor(0, 4)
        splitter.setStretchFactor(1, 1)
        self.setCentralWidget(splitter)

        # Route package logs into the console
        self.log_queue: queue.Queue = queue.Queue()
        level = logging.getLevelName(self.session.config.log_level.upper())
        self._log_handler = attach_queue_handler(self.log_queue, LOGGER_NAME, level)
        self._log_timer = QTimer(self)
        self._log_timer.timeout.connect(self._poll_logs)
        self._log_timer.start(LOG_POLL_INTERVAL_MS)

        self.done_btn.clicked.connect(self._on_done_clicked)
        self.input.textEdited.connect(self._on_input_edited)
        self.input.returnPressed.connect(self._on_return_pressed)

        if self.session.step == Step.TRANSCRIBE:
            self.output.setPlainText(self.session.display())
        self._show_step(self.session.step)

    # ─────────────────────────────────────────────────────────────────────────
    # Layout
    # ─────────────────────────────────────────────────────────────────────────

    def _build_roster_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)

        title = QLabel("Step 1: Students")
        title.setObjectName("stepTitle")
        hint = QLabel(ROSTER_HINT)
        hint.setObjectName("hint")

        self.students = QPlainTextEdit()
        self.students.setPlaceholderText("student A\nstudent B\n...")

        self.done_btn = QPushButton(MaterialIcons.check(), "Done")
        button_row = QHBoxLayout()
        button_row.addStretch(1)
        button_row.addWidget(self.done_btn)

        layout.addWidget(title)
        layout.addWidget(hint)
        layout.addWidget(self.students, 1)
        layout.addLayout(button_row)
        return page

    def _build_transcribe_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)

        title = QLabel("Step 2: Marks")
        title.setObjectName("stepTitle")
        hint = QLabel(TRANSCRIBE_HINT)
        hint.setObjectName("hint")
        hint.setWordWrap(True)

        self.input = QLineEdit()
        self.input.setPlaceholderText("student name = 1 2 3")

        self.output = QPlainTextEdit()
        self.output.setReadOnly(True)
        self.output.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        font = QFont(Fonts.MONO_FONT.split(',')[0])
        font.setStyleHint(QFont.StyleHint.Monospace)
        self.output.setFont(font)

        layout.addWidget(title)
        layout.addWidget(hint)
        layout.addWidget(self.input)
        layout.addWidget(self.output, 1)
        return page

    # ─────────────────────────────────────────────────────────────────────────
    # Event Handlers
    # ─────────────────────────────────────────────────────────────────────────

    def _on_done_clicked(self) -> None:
        self.apply_update(self.session.declare_students(self.students.toPlainText()))

    def _on_input_edited(self, text: str) -> None:
        update = self.session.preview(text)
        if update is not None:
            self.apply_update(update)

    def _on_return_pressed(self) -> None:
        self.apply_update(self.session.commit(self.input.text()))

    def apply_update(self, update: SessionUpdate) -> None:
        """Reflect one SessionUpdate in the widgets."""
        if update.clipboard is not None:
            QApplication.clipboard().setText(update.clipboard)
        if update.output is not None:
            self.output.setPlainText(update.output)
        if update.clear_input:
            self.input.clear()
        if update.clear_roster:
            self.students.clear()
        if update.step is not None:
            self._show_step(update.step)
        if update.error:
            self.statusBar().showMessage(update.error, STATUS_TIMEOUT_MS)

    def _show_step(self, step: Step) -> None:
        if step == Step.TRANSCRIBE:
            self.pages.setCurrentIndex(1)
            self.input.setFocus()
        else:
            self.pages.setCurrentIndex(0)
            self.students.setFocus()

    def _poll_logs(self) -> None:
        drain_queue(self.log_queue, self.console.append_log)

    def closeEvent(self, event):
        self._log_timer.stop()
        detach_queue_handler(self._log_handler, LOGGER_NAME)
        super().closeEvent(event)
