"""
Unit tests for key-value persistence.
"""
import json
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

from marks_transcriber.core.errors import StorageError
from marks_transcriber.session.storage import JsonFileKeyValueStore, MemoryKeyValueStore


class TestJsonFileKeyValueStore(unittest.TestCase):
    """Test JSON file persistence."""

    def setUp(self):
        self.temp_dir = TemporaryDirectory()
        self.path = Path(self.temp_dir.name) / "nested" / "storage.json"
        self.store = JsonFileKeyValueStore(self.path)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_get_missing_key_returns_none(self):
        self.assertIsNone(self.store.get("marks_records"))
        self.assertIsNone(self.store.load_error)

    def test_set_persists_across_instances(self):
        """Values written by one instance are read by the next."""
        self.store.set("marks_records", '{"x": 1}')

        new_store = JsonFileKeyValueStore(self.path)
        self.assertEqual(new_store.get("marks_records"), '{"x": 1}')

    def test_set_creates_parent_directory(self):
        self.store.set("k", "v")
        self.assertTrue(self.path.exists())

    def test_corrupted_file_falls_back_to_empty(self):
        """Malformed JSON never crashes; the error is kept for reporting."""
        self.path.parent.mkdir(parents=True)
        self.path.write_text("{not json", encoding="utf-8")

        store = JsonFileKeyValueStore(self.path)
        self.assertIsNone(store.get("k"))
        self.assertIn("corrupted", store.load_error)

    def test_deeply_nested_file_falls_back_to_empty(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")

        store = JsonFileKeyValueStore(self.path)
        self.assertEqual(store.data, {})
        self.assertIn("corrupted", store.load_error)

    def test_lone_surrogate_value_persists(self):
        """Text that is not valid UTF-8 is still written and read back."""
        self.store.set("marks_records", "\ud800x")

        new_store = JsonFileKeyValueStore(self.path)
        self.assertEqual(new_store.get("marks_records"), "\ud800x")
        self.assertIsNone(new_store.load_error)

    def test_non_object_file_falls_back_to_empty(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text(json.dumps(["a"]), encoding="utf-8")

        store = JsonFileKeyValueStore(self.path)
        self.assertEqual(store.data, {})
        self.assertIsNotNone(store.load_error)

    def test_non_string_values_are_ignored(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text(json.dumps({"a": "x", "b": 3}), encoding="utf-8")

        store = JsonFileKeyValueStore(self.path)
        self.assertEqual(store.data, {"a": "x"})

    def test_write_failure_raises_storage_error_and_restores_memory(self):
        self.store.set("k", "old")
        with patch.object(Path, "write_text", side_effect=OSError("disk full")):
            with self.assertRaises(StorageError):
                self.store.set("k", "new")
            with self.assertRaises(StorageError):
                self.store.set("other", "value")
        self.assertEqual(self.store.get("k"), "old")
        self.assertIsNone(self.store.get("other"))


class TestMemoryKeyValueStore(unittest.TestCase):

    def test_set_then_get(self):
        store = MemoryKeyValueStore()
        store.set("k", "v")
        self.assertEqual(store.get("k"), "v")
        self.assertIsNone(store.get("missing"))
