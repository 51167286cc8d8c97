"""
Module: config

Purpose:
    Configuration dataclass for a transcription session. Immutable
    configuration with validation on construction.

Key Classes:
    - TranscriberConfig: Storage location/key, display widths, log level

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - session.controller: Storage key and display widths
    - gui.app: Storage path and log level
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from marks_transcriber.paths import get_storage_path


@dataclass(frozen=True)
class TranscriberConfig:
    """
    Configuration for a transcription session (immutable).

    Attributes:
        storage_path: JSON file backing the key-value store
        storage_key: Key the transport string is saved under
        id_width: Display column width of the record id
        name_width: Display column width of the student id (longer names are cut)
        total_width: Display column width of the marks total
        log_level: Level name for the package logger

    Example:
        >>> config = TranscriberConfig(storage_path=Path("/tmp/marks.json"))
        >>> config.storage_key
        'marks_records'
    """

    storage_path: Path = field(default_factory=get_storage_path)
    storage_key: str = "marks_records"

    # Display
    id_width: int = 4
    name_width: int = 24
    total_width: int = 10

    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.storage_key:
            raise ValueError("storage_key must not be empty")
        for name in ("id_width", "name_width", "total_width"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive: {value}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @property
    def display_widths(self) -> dict[str, int]:
        """Keyword arguments for MarksRecords.render."""
        return {
            "id_width": self.id_width,
            "name_width": self.name_width,
            "total_width": self.total_width,
        }
