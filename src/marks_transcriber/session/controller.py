"""
Module: session.controller

Purpose:
    Sequences UI events against one record store. The host calls a
    handler per event (roster submitted, input edited, Enter pressed)
    and applies the returned SessionUpdate to its widgets; the session
    owns the store and the storage, so no state is shared with the UI.

Key Classes:
    - Step: Which page the UI should show
    - SessionUpdate: What the UI should change after an event
    - TranscriptionSession: load, declare_students, preview, commit

Dependencies:
    - core.models.records: MarksRecords
    - commands: parse_input, build_records
    - session.storage: KeyValueStore

Used By:
    - gui.main_window.MainWindow
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from marks_transcriber.commands.parser import (
    AssignMarks,
    Clear,
    Export,
    InvalidCommand,
    Query,
    parse_input,
)
from marks_transcriber.commands.roster import build_records
from marks_transcriber.config import TranscriberConfig
from marks_transcriber.core.errors import (
    DeserializationError,
    EmptyStoreError,
    MarksParseError,
    SerializationFault,
    StorageError,
)
from marks_transcriber.core.models.records import MarksRecords

from .storage import KeyValueStore

logger = logging.getLogger(__name__)

EXPORT_MESSAGE = "Marks copied to clipboard. Paste it into your spreadsheet."


class Step(IntEnum):
    """UI page: declare the roster, then transcribe marks."""
    ROSTER = 1
    TRANSCRIBE = 2


@dataclass(frozen=True)
class SessionUpdate:
    """
    Changes for the UI to apply after one event.

    Attributes:
        output: New text of the output pane, None to leave it as is
        step: Page to switch to, None to stay
        clear_input: Empty the command input
        clear_roster: Empty the roster text box
        clipboard: Text to copy to the clipboard
        error: Message to surface; the store was not changed by the failed part
    """
    output: Optional[str] = None
    step: Optional[Step] = None
    clear_input: bool = False
    clear_roster: bool = False
    clipboard: Optional[str] = None
    error: Optional[str] = None


class TranscriptionSession:
    """
    Owner of the record store for one UI.

    Example:
        >>> session = TranscriptionSession(MemoryKeyValueStore(), config)
        >>> _ = session.declare_students("student A\\nstudent B")
        >>> _ = session.preview("B")
        >>> session.commit("B = 2 2 2").error is None
        True
        >>> session.records.top.student_id
        'student B'
    """

    def __init__(self, storage: KeyValueStore, config: Optional[TranscriberConfig] = None) -> None:
        self.storage = storage
        self.config = config or TranscriberConfig()
        self.records = MarksRecords()
        self.step = Step.ROSTER

    def display(self) -> str:
        """Current fixed-width view of the store."""
        return self.records.render(**self.config.display_widths)

    # ─────────────────────────────────────────────────────────────────────────
    # Persistence
    # ─────────────────────────────────────────────────────────────────────────

    def load(self) -> bool:
        """
        Restore the store from storage.

        Returns:
            True if saved students were found; the session is then on the
            transcribe step. False leaves an empty store on the roster step.
        """
        key = self.config.storage_key
        logger.info(f"Loading {key} from storage")
        text = self.storage.get(key)
        if text is None:
            logger.info(f"Storage of {key} not found")
            return False
        try:
            records = MarksRecords.from_transport_string(text)
        except DeserializationError as e:
            logger.error(f"Ignoring saved {key}: {e.cause}")
            return False
        if records.is_empty:
            # Keep the counter so ids stay unique after a reload
            self.records = records
            return False
        self.records = records
        self.step = Step.TRANSCRIBE
        logger.info(f"Loaded {len(records)} students")
        return True

    def save(self) -> Optional[str]:
        """Persist the store. Returns an error message instead of raising."""
        key = self.config.storage_key
        logger.debug(f"Saving {key} to storage")
        try:
            self.storage.set(key, self.records.to_transport_string())
        except (SerializationFault, StorageError) as e:
            logger.error(f"Failed saving {key}: {e}")
            return str(e)
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Event Handlers
    # ─────────────────────────────────────────────────────────────────────────

    def declare_students(self, roster: str) -> SessionUpdate:
        """Replace the store with the students of the roster text."""
        records = build_records(roster)
        # Ids handed out before stay retired
        self.records = MarksRecords(records, next_record_id=self.records.next_record_id)
        self.step = Step.TRANSCRIBE
        error = self.save()
        return SessionUpdate(output=self.display(), step=Step.TRANSCRIBE, error=error)

    def preview(self, line: str) -> Optional[SessionUpdate]:
        """
        Re-sort while typing.

        Only a non-empty query changes anything; marks lines and commands
        wait for commit.
        """
        command = parse_input(line)
        if not isinstance(command, Query) or not command.text:
            return None
        logger.debug(f"Sorting students with query {command.text!r}")
        self.records.sort_with(command.text)
        return SessionUpdate(output=self.display())

    def commit(self, line: str) -> SessionUpdate:
        """Run the command on Enter."""
        command = parse_input(line)

        if isinstance(command, Query):
            logger.info("No marks entered")
            return SessionUpdate()

        if isinstance(command, AssignMarks):
            try:
                self.records.set_marks_at_top(command.marks)
            except (EmptyStoreError, MarksParseError) as e:
                logger.error(f"Failed recording marks: {e}")
                return SessionUpdate(error=f"Failed recording marks: {e}")
            error = self.save()
            return SessionUpdate(output=self.display(), clear_input=True, error=error)

        if isinstance(command, Export):
            logger.info("Exporting marks to clipboard")
            return SessionUpdate(
                output=EXPORT_MESSAGE,
                clear_input=True,
                clipboard=self.records.export_text(),
            )

        if isinstance(command, Clear):
            logger.info("Clearing data")
            self.records.clear()
            self.step = Step.ROSTER
            error = self.save()
            return SessionUpdate(
                output="",
                step=Step.ROSTER,
                clear_input=True,
                clear_roster=True,
                error=error,
            )

        if isinstance(command, InvalidCommand):
            logger.error(f"Failed parsing input: {command.message}")
            return SessionUpdate(error=f"Failed parsing input: {command.message}")

        raise TypeError(f"Unhandled command: {command!r}")
