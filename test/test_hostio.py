#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import os
import tempfile
import unittest
from mchip.hostio import Loader
from mchip.ram import RAM, CapacityExceeded


class TestLoader(unittest.TestCase):
    def setUp(self):
        self.loader = Loader()
        self.ram = RAM()
        self.temp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.temp_dir.cleanup()

    def _write_rom(self, data):
        filename = os.path.join(self.temp_dir.name, "test.ch8")

        with open(filename, "wb") as f:
            f.write(data)

        return filename

    def test_loader_system_font(self):
        # Verify the system font is okay
        font = self.loader.load_system_font()
        self.assertEqual(80, len(font))
        self.assertEqual(bytes((0xF0, 0x90, 0x90, 0x90, 0xF0)), font[:5])
        self.assertEqual(bytes((0xF0, 0x80, 0xF0, 0x80, 0x80)), font[75:])

    def test_loader_install_font(self):
        self.loader.install_font(self.ram)
        self.assertEqual(self.loader.load_system_font(), self.ram.mem[0x50:0xA0].tobytes())
        self.assertEqual(0, self.ram.read(0x4F))
        self.assertEqual(0, self.ram.read(0xA0))

    def test_loader_install_rom(self):
        filename = self._write_rom(b"\x60\x05\x70\x03")
        self.assertEqual(4, self.loader.install_rom(self.ram, filename))
        self.assertEqual(0x6005, self.ram.read_word(0x200))
        self.assertEqual(0x7003, self.ram.read_word(0x202))

    def test_loader_install_rom_too_large(self):
        filename = self._write_rom(b"\xAA" * 0xE00)
        self.assertRaises(CapacityExceeded, self.loader.install_rom, self.ram, filename)
        self.assertEqual(0, self.ram.read(0x200))

    def test_loader_load_file_missing(self):
        self.assertRaises(FileNotFoundError, self.loader.load_binary, "NoFile.ch8")
