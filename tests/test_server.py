"""Tests for the FastAPI surface, backed by the PC fixture catalog."""

from __future__ import annotations

import unittest

from fastapi.testclient import TestClient

from assembly_trainer.session import create_session
from assembly_trainer.web import server
from tests.pc_fixture import make_pc_catalog


class TestServer(unittest.TestCase):

    def setUp(self):
        server.set_session(create_session(make_pc_catalog()))
        self.client = TestClient(server.app)

    def tearDown(self):
        server.set_session(None)

    def _drop(self, cid, x, y, path="/api/validate"):
        return self.client.post(path, json={"component_id": cid, "x": x, "y": y})

    def test_catalog(self):
        res = self.client.get("/api/catalog")
        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body["stage_count"], 6)
        self.assertEqual(body["prerequisite"], "motherboardLabel")
        self.assertEqual(len(body["components"]), 7)

    def test_validate_flow(self):
        body = self._drop("cpuLabel", 320, 300).json()
        self.assertFalse(body["result"]["correct"])
        self.assertEqual(body["result"]["outcome"], "ineligible")
        self.assertTrue(body["revert"])
        self.assertTrue(body["result"]["reverted"])
        self.assertEqual(body["result"]["position"], {"x": 620, "y": 400})
        self.assertEqual(body["feedback"]["sound"], "bad")

        body = self._drop("motherboardLabel", 300, 400).json()
        self.assertTrue(body["result"]["correct"])
        self.assertEqual(body["result"]["stage"], 2)

        body = self._drop("cpuLabel", 10, 10).json()
        self.assertEqual(body["result"]["outcome"], "incorrect")
        self.assertTrue(body["revert"])

        state = self.client.get("/api/state").json()
        self.assertEqual(state["locked"], ["motherboardLabel"])
        self.assertAlmostEqual(state["progress"], 1 / 6)

    def test_snap_preview(self):
        self._drop("motherboardLabel", 300, 400)
        body = self._drop("cpuLabel", 350, 350, path="/api/snap").json()
        self.assertTrue(body["hit"])
        self.assertEqual(body["position"], {"x": 315, "y": 295})
        self.assertEqual(self.client.get("/api/state").json()["stage"], 2)

    def test_unknown_component_is_404(self):
        self.assertEqual(self._drop("floppyLabel", 0, 0).status_code, 404)
        self.assertEqual(self._drop("floppyLabel", 0, 0, path="/api/snap").status_code, 404)

    def test_reset(self):
        self._drop("motherboardLabel", 300, 400)
        res = self.client.post("/api/reset")
        self.assertEqual(res.json()["status"], "ok")
        state = self.client.get("/api/state").json()
        self.assertEqual(state["stage"], 1)
        self.assertEqual(state["locked"], [])

    def test_catalog_check(self):
        body = self.client.get("/api/catalog/check").json()
        self.assertTrue(body["ok"])


if __name__ == "__main__":
    unittest.main()
