#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading ROM binaries and the built-in system font, and writing them
into RAM at their fixed locations.  ROMs have no header or checksum, so they
are copied in byte for byte.  A ROM too large for memory is rejected by RAM,
and nothing is written.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import FONT_LOCATION, PROGRAM_START, SYSTEM_FONT


class Loader:
    def load_binary(self, filename):
        with open(filename, "rb") as f:
            return f.read()

    def load_system_font(self):
        return SYSTEM_FONT

    def install_font(self, ram):
        ram.write_block(FONT_LOCATION, self.load_system_font())

    def install_rom(self, ram, filename):
        data = self.load_binary(filename)
        ram.write_block(PROGRAM_START, data)
        return len(data)
