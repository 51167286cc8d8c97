"""
Marks Transcriber Core Package

The similarity scorer and the record store, plus their formats.

1. **Similarity** (`similarity.score`)
   - Cosine similarity over lower-cased byte unigrams and bigrams
   - Empty strings always score 0.0

2. **Record Store** (`MarksRecords`)
   - Rows sorted by similarity to the typed query
   - Marks written to the top row; ids assigned on first write

3. **Formats**
   - Lossless JSON transport, validated against a JSON Schema
   - Lossy tab-separated export for spreadsheets
"""

from .errors import (
    MarksTranscriberError,
    EmptyStoreError,
    SerializationFault,
    DeserializationError,
    MarksParseError,
    UnknownCommandError,
    StorageError,
)
from .models import FIRST_RECORD_ID, Record, MarksRecords
from .similarity import score

__all__ = [
    "MarksTranscriberError",
    "EmptyStoreError",
    "SerializationFault",
    "DeserializationError",
    "MarksParseError",
    "UnknownCommandError",
    "StorageError",
    "FIRST_RECORD_ID",
    "Record",
    "MarksRecords",
    "score",
]
