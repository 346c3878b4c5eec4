#!/usr/bin/env python3
"""Tests for JSON and JSONL output."""

import io
import json
import os
import tempfile
import unittest

from genius_client.core.output import to_serializable, write_json, write_jsonl_output
from genius_client.models import ArtistDetails


def read_jsonl(path):
    with open(path, encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


class TestOutput(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_records_become_dicts(self):
        value = to_serializable([ArtistDetails(id=1, name="Sia"), {"x": (1, 2)}])
        self.assertEqual(value[0]["name"], "Sia")
        self.assertIsNone(value[0]["iq"])
        self.assertEqual(value[1], {"x": [1, 2]})

    def test_write_json(self):
        stream = io.StringIO()
        write_json({"title": "Déjà Vu"}, stream)
        self.assertIn("Déjà Vu", stream.getvalue())
        self.assertEqual(json.loads(stream.getvalue()), {"title": "Déjà Vu"})

    def test_write_and_read_jsonl(self):
        path = os.path.join(self.temp_dir.name, "nested", "songs.jsonl")
        count = write_jsonl_output([{"id": 1}, ArtistDetails(id=2)], path)
        self.assertEqual(count, 2)
        rows = read_jsonl(path)
        self.assertEqual(rows[0], {"id": 1})
        self.assertEqual(rows[1]["id"], 2)
        self.assertEqual(len(rows[1]), len(ArtistDetails._fields))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
