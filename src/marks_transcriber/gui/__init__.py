"""
GUI Package

PySide6 desktop host: roster page, transcription page, log console.
"""
