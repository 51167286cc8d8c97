"""
Path utilities for handling dev vs production (frozen) file locations.

Dev mode: Uses local workspace/ directory
Frozen mode: Uses system-standard paths (AppData)
"""
from __future__ import annotations

import sys
from pathlib import Path

STORAGE_FILENAME = "marks_records.json"


def is_frozen() -> bool:
    """Check if running as a frozen (PyInstaller) application."""
    return getattr(sys, 'frozen', False) or hasattr(sys, '_MEIPASS')


def get_app_data_dir() -> Path:
    """
    Get the application data directory for internal state files.

    Frozen: ~/Library/Application Support/Marks Transcriber (macOS)
            or %LOCALAPPDATA%/Marks Transcriber (Windows)
    Dev: workspace/
    """
    if is_frozen():
        # Qt only in the packaged app; the session layer runs without it
        from PySide6.QtCore import QStandardPaths
        return Path(QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.AppLocalDataLocation
        ))
    # Dev mode: use local workspace
    return Path.cwd() / "workspace"


def get_storage_path() -> Path:
    """Path of the JSON key-value file that holds the saved records."""
    return get_app_data_dir() / STORAGE_FILENAME


def ensure_directories() -> None:
    """Create the app data directory if it does not exist yet."""
    get_app_data_dir().mkdir(parents=True, exist_ok=True)
