"""Tests for zone geometry and the snap engine."""

from __future__ import annotations

import unittest

from assembly_trainer.assembly import SnapEngine
from assembly_trainer.catalog import Component, Size, UnknownComponentError, Zone, ZoneCatalog
from assembly_trainer.geometry import Point, Rect, centered_under, rect_contains_point, rects_overlap
from tests.pc_fixture import make_pc_catalog, make_pc_components


class TestRectGeometry(unittest.TestCase):

    def setUp(self):
        self.cpu = Rect(315, 295, 395, 375)

    def test_interior_point(self):
        self.assertTrue(rect_contains_point(self.cpu, Point(350, 330)))

    def test_boundary_is_inclusive(self):
        for p in (Point(315, 295), Point(395, 375), Point(315, 330), Point(350, 375)):
            self.assertTrue(rect_contains_point(self.cpu, p), p)

    def test_just_outside(self):
        for p in (Point(314.9, 330), Point(395.1, 330), Point(350, 294.9), Point(350, 375.1)):
            self.assertFalse(rect_contains_point(self.cpu, p), p)

    def test_touching_rects_do_not_overlap(self):
        ram1 = Rect(420, 280, 440, 410)
        ram2 = Rect(440, 280, 460, 410)
        self.assertFalse(rects_overlap(ram1, ram2))

    def test_overlapping_rects(self):
        memory = Rect(260, 370, 350, 420)
        self.assertTrue(rects_overlap(self.cpu, memory))

    def test_centered_under(self):
        self.assertEqual(centered_under(Point(100, 100), 80, 40), Point(60, 80))


class TestSnapEngine(unittest.TestCase):

    def setUp(self):
        self.engine = SnapEngine(make_pc_catalog())

    def test_snaps_to_canonical_point_anywhere_in_zone(self):
        for cursor in (Point(315, 295), Point(320, 300), Point(355, 335), Point(395, 375)):
            result = self.engine.snap(cursor, "cpuLabel", 2)
            self.assertTrue(result.hit)
            self.assertEqual(result.point, Point(315, 295))

    def test_miss_follows_cursor(self):
        result = self.engine.snap(Point(100, 100), "cpuLabel", 2)
        self.assertFalse(result.hit)
        self.assertIsNone(result.zone)
        self.assertEqual(result.point, Point(60, 60))   # CPU icon is 80x80

    def test_miss_uses_dragged_component_size(self):
        result = self.engine.snap(Point(100, 100), "gpuLabel", 2)
        self.assertEqual(result.point, Point(-25, 65))  # GPU icon is 250x70

    def test_zone_not_live_before_its_stage(self):
        result = self.engine.snap(Point(320, 300), "cpuLabel", 1)
        self.assertFalse(result.hit)

    def test_prerequisite_zone_closes_after_stage_one(self):
        self.assertTrue(self.engine.snap(Point(300, 400), "motherboardLabel", 1).hit)
        self.assertFalse(self.engine.snap(Point(300, 400), "motherboardLabel", 2).hit)

    def test_motherboard_snap(self):
        result = self.engine.snap(Point(300, 400), "motherboardLabel", 1)
        self.assertEqual(result.point, Point(200, 245))

    def test_zones_are_per_component(self):
        # Inside the CPU socket, but the SSD does not belong there
        result = self.engine.snap(Point(390, 300), "memoryLabel", 3)
        self.assertFalse(result.hit)

    def test_ram_sticks_bound_to_own_slot(self):
        self.assertEqual(self.engine.snap(Point(430, 300), "ramLabel1", 4).point, Point(423, 270))
        self.assertEqual(self.engine.snap(Point(450, 300), "ramLabel2", 4).point, Point(443, 270))
        self.assertFalse(self.engine.snap(Point(450, 300), "ramLabel1", 4).hit)

    def test_gpu_snap_is_away_from_zone(self):
        result = self.engine.snap(Point(325, 500), "gpuLabel", 5)
        self.assertEqual(result.point, Point(200, 370))

    def test_first_declared_zone_wins(self):
        comps = make_pc_components()
        cpu = next(c for c in comps if c.id == "cpuLabel")
        cpu.zones.append(Zone(rect=Rect(300, 280, 400, 380), snap=Point(1, 1), stage=2))
        engine = SnapEngine(ZoneCatalog(comps))
        self.assertEqual(engine.snap(Point(320, 300), "cpuLabel", 2).point, Point(315, 295))
        self.assertEqual(engine.snap(Point(305, 285), "cpuLabel", 2).point, Point(1, 1))

    def test_component_without_zones_never_hits(self):
        catalog = ZoneCatalog([Component(
            id="fanLabel", name="Fan", tooltip="Fan", image="fan.png",
            size=Size(20, 20), home=Point(0, 0),
        )])
        result = SnapEngine(catalog).snap(Point(10, 10), "fanLabel", 3)
        self.assertFalse(result.hit)
        self.assertEqual(result.point, Point(0, 0))

    def test_unknown_component(self):
        with self.assertRaises(UnknownComponentError):
            self.engine.snap(Point(0, 0), "floppyLabel", 2)


if __name__ == "__main__":
    unittest.main()
