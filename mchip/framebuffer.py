#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here, and only handed over to the actual display (the host
rendering system) when the driver asks for it, once per tick.  The renderer
never sees the live pixels, only a read-only snapshot taken at that point.

Programs cannot write directly into video memory.  Instead, sprites are drawn
to the screen by XORing them against what is already there.  A collision is
reported if any pixel that was set gets switched off.

Sprites that run off the right or bottom edge are clipped, not wrapped around
to the opposite side.  Only the starting position wraps.

Any change to the screen marks a redraw as pending.  The flag is cleared once
the screen has been presented.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_NAME, VID_WIDTH, VID_HEIGHT

SPRITE_WIDTH = 8


class Framebuffer:
    def __init__(self, renderer, vid_width=VID_WIDTH, vid_height=VID_HEIGHT):
        self.renderer = renderer
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.vram = memoryview(bytearray(self.vid_size))  # One byte per pixel, 0 or 1
        self.redraw_pending = False
        self.renderer.set_resolution(vid_width, vid_height)
        self.report_perf()

    def clear(self):
        self.vram[:] = bytes(self.vid_size)
        self.redraw_pending = True

    def get_pixel(self, x, y):
        return bool(self.vram[y * self.vid_width + x])

    def draw_sprite(self, x, y, sprite):
        # Returns True if any pixel was switched off.  x and y must already be on screen.
        vid_width = self.vid_width
        vid_height = self.vid_height
        vram = self.vram
        collision = False

        for row, spr_data in enumerate(sprite):
            scr_y = y + row

            if scr_y >= vid_height:
                break

            for col in range(SPRITE_WIDTH):
                scr_x = x + col

                if scr_x >= vid_width:
                    break

                sprite_pixel = (spr_data >> (SPRITE_WIDTH - 1 - col)) & 1
                vram_loc = scr_y * vid_width + scr_x
                pixel = vram[vram_loc]

                if sprite_pixel and pixel:
                    collision = True
                    vram[vram_loc] = 0
                else:
                    vram[vram_loc] = sprite_pixel ^ pixel

        self.redraw_pending = True
        return collision

    def snapshot(self):
        # Immutable copy for the renderer, row-major, one byte per pixel
        return self.vram.tobytes()

    def refresh_display(self):
        # Present the screen if anything has changed since it was last shown
        if not self.redraw_pending:
            return False

        self.renderer.present(self.snapshot())
        self.redraw_pending = False
        return True

    def get_vid_size(self):
        return self.vid_width, self.vid_height

    def report_perf(self, tps=0):
        title = "{} - {} TPS".format(APP_NAME, tps)
        self.renderer.set_title(title)
