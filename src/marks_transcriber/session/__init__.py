"""
Session Package

Key-value persistence and the event-driven session controller.
"""

from .storage import JsonFileKeyValueStore, KeyValueStore, MemoryKeyValueStore
from .controller import EXPORT_MESSAGE, SessionUpdate, Step, TranscriptionSession

__all__ = [
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "EXPORT_MESSAGE",
    "SessionUpdate",
    "Step",
    "TranscriptionSession",
]
