#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.ram import RAM, RAMError, CapacityExceeded


class TestRAM(unittest.TestCase):
    def setUp(self):
        self.ram = RAM(5)

    def test_ram_init(self):
        ram = RAM()
        self.assertEqual(0x1000, ram.mem_size)
        self.assertEqual(bytes(0x1000), ram.mem.tobytes())

    def test_ram_small(self):
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_write(self):
        self.ram.write(1, 255)
        self.assertEqual("00ff000000", self.ram.mem.hex())
        self.assertEqual(255, self.ram.read(1))

    def test_ram_write_block(self):
        self.ram.write_block(1, bytearray(b"\xFD\xFE"))
        self.ram.write_block(3, bytearray(b"\xFF"))
        self.assertEqual("00fdfeff00", self.ram.mem.hex())

    def test_ram_read_word(self):
        self.ram.write_block(1, bytearray(b"\x12\x34"))
        self.assertEqual(0x1234, self.ram.read_word(1))
        self.assertEqual(0x0012, self.ram.read_word(0))

    def test_ram_read_word_top(self):
        self.ram.write(4, 0xAB)
        self.ram.write(0, 0xCD)
        self.assertEqual(0xABCD, self.ram.read_word(4))

    def test_ram_byte_out_of_range(self):
        self.assertRaises(IndexError, self.ram.write, 5, 255)
        self.assertRaises(IndexError, self.ram.read, 5)

    def test_ram_block_overflow(self):
        self.assertRaises(CapacityExceeded, self.ram.write_block, 4, bytearray(b"\xFE\xFF"))
        self.assertEqual("0000000000", self.ram.mem.hex())  # Nothing partially written

    def test_ram_block_last_byte_rejected(self):
        # A block ending exactly at the top of memory is still too large
        self.assertRaises(CapacityExceeded, self.ram.write_block, 4, bytearray(b"\xFF"))
        self.assertRaises(RAMError, self.ram.write_block, 0, bytearray(5))
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_full_size_block(self):
        ram = RAM()
        ram.write_block(0x200, bytes(range(256)) * 7)
        self.assertRaises(CapacityExceeded, ram.write_block, 0x200, bytes(0xE00))
        ram.write_block(0x200, bytes(0xDFF))

    def test_ram_clear(self):
        self.ram.write_block(1, bytearray(b"\xFD\xFE"))
        self.assertEqual("00fdfe0000", self.ram.mem.hex())
        self.ram.clear()
        self.assertEqual("0000000000", self.ram.mem.hex())
