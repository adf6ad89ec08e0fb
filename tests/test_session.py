"""Tests for in-memory assembly sessions."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from assembly_trainer.catalog import CatalogError
from assembly_trainer.session import create_session
from tests.pc_fixture import INSIDE_POINTS


class TestSession(unittest.TestCase):

    def test_create_from_shipped_catalog(self):
        session = create_session()
        self.assertEqual(session.validator.current_stage(), 1)
        self.assertEqual(session.created, session.last_modified)
        self.assertEqual(session.validator.catalog.prerequisite.id, "motherboardLabel")

    def test_restart_discards_progress(self):
        session = create_session()
        session.validator.validate("motherboardLabel", INSIDE_POINTS["motherboardLabel"])
        session.restart()
        self.assertEqual(session.validator.state.locked, [])
        self.assertGreaterEqual(session.last_modified, session.created)

    def test_invalid_catalog_dir(self):
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(CatalogError):
                create_session(catalog_dir=Path(d))


if __name__ == "__main__":
    unittest.main()
