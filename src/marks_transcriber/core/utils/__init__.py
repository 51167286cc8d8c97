"""
Utils Package

Transport serialization and text export/display rendering.
"""

from .serialization import (
    serialize_marks_records,
    deserialize_marks_records,
    dumps_transport,
    loads_transport,
)
from .export import export_text, render_display

__all__ = [
    "serialize_marks_records",
    "deserialize_marks_records",
    "dumps_transport",
    "loads_transport",
    "export_text",
    "render_display",
]
