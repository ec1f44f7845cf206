#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.renderers.r_null import Renderer
from mchip.framebuffer import Framebuffer


class TestFrameBuffer(unittest.TestCase):
    def setUp(self):
        self.renderer = Renderer()
        self.framebuffer = Framebuffer(self.renderer)

        self.renderer_small = Renderer()
        self.framebuffer_small = Framebuffer(self.renderer_small, vid_width=10, vid_height=3)

    def _lit_pixels(self, fb):
        width = fb.vid_width
        return {(loc % width, loc // width) for loc, pixel in enumerate(fb.snapshot()) if pixel}

    def test_framebuffer_init(self):
        self.assertEqual((64, 32), self.framebuffer.get_vid_size())
        self.assertEqual((64, 32), (self.renderer.width, self.renderer.height))
        self.assertEqual(bytes(64 * 32), self.framebuffer.snapshot())
        self.assertFalse(self.framebuffer.redraw_pending)
        self.assertIn("0 TPS", self.renderer.title)

    def test_framebuffer_draw_sprite(self):
        fb = self.framebuffer
        collision = fb.draw_sprite(2, 1, [0b10100000, 0b00000001])
        self.assertFalse(collision)
        self.assertTrue(fb.redraw_pending)
        self.assertEqual({(2, 1), (4, 1), (9, 2)}, self._lit_pixels(fb))

    def test_framebuffer_redraw_restores(self):
        # Drawing the same sprite twice puts back what was there
        fb = self.framebuffer
        fb.draw_sprite(0, 0, [0xFF])
        before = fb.snapshot()
        sprite = [0b00111100, 0b01000010]
        self.assertFalse(fb.draw_sprite(20, 10, sprite))
        self.assertNotEqual(before, fb.snapshot())
        self.assertTrue(fb.draw_sprite(20, 10, sprite))
        self.assertEqual(before, fb.snapshot())

    def test_framebuffer_collision_clears(self):
        fb = self.framebuffer
        fb.draw_sprite(0, 0, [0b11110000])
        collision = fb.draw_sprite(2, 0, [0b11110000])
        self.assertTrue(collision)
        # Overlapping pixels at x=2,3 are cleared, the rest are set
        self.assertEqual({(0, 0), (1, 0), (4, 0), (5, 0)}, self._lit_pixels(fb))

    def test_framebuffer_clip_right(self):
        fb = self.framebuffer_small
        self.assertFalse(fb.draw_sprite(6, 0, [0xFF]))
        self.assertEqual({(6, 0), (7, 0), (8, 0), (9, 0)}, self._lit_pixels(fb))

    def test_framebuffer_clip_bottom(self):
        fb = self.framebuffer_small
        fb.draw_sprite(0, 1, [0x80, 0x80, 0x80, 0x80])
        self.assertEqual({(0, 1), (0, 2)}, self._lit_pixels(fb))

    def test_framebuffer_empty_sprite_marks_redraw(self):
        fb = self.framebuffer
        self.assertFalse(fb.draw_sprite(0, 0, []))
        self.assertTrue(fb.redraw_pending)

    def test_framebuffer_get_pixel(self):
        fb = self.framebuffer
        fb.draw_sprite(63, 31, [0x80])
        self.assertTrue(fb.get_pixel(63, 31))
        self.assertFalse(fb.get_pixel(62, 31))

    def test_framebuffer_clear(self):
        fb = self.framebuffer
        fb.draw_sprite(5, 5, [0xFF])
        fb.refresh_display()
        self.assertFalse(fb.redraw_pending)
        fb.clear()
        self.assertTrue(fb.redraw_pending)
        self.assertEqual(bytes(64 * 32), fb.snapshot())

    def test_framebuffer_refresh_display(self):
        fb = self.framebuffer
        self.assertFalse(fb.refresh_display())  # Nothing to show yet
        self.assertEqual(0, self.renderer.frames_presented)

        fb.draw_sprite(0, 0, [0x80])
        self.assertTrue(fb.refresh_display())
        self.assertEqual(1, self.renderer.frames_presented)
        self.assertFalse(fb.redraw_pending)
        self.assertEqual(1, self.renderer.last_frame[0])

        self.assertFalse(fb.refresh_display())
        self.assertEqual(1, self.renderer.frames_presented)

    def test_framebuffer_snapshot_is_copy(self):
        fb = self.framebuffer
        snapshot = fb.snapshot()
        fb.draw_sprite(0, 0, [0x80])
        self.assertEqual(0, snapshot[0])
        self.assertIsInstance(snapshot, bytes)

    def test_framebuffer_report_perf(self):
        self.framebuffer.report_perf(60)
        self.assertIn("60 TPS", self.renderer.title)
