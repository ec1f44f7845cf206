#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.registers import RegisterFile
from mchip.stack import StackOverflow, StackUnderflow


class TestRegisterFile(unittest.TestCase):
    def setUp(self):
        self.registers = RegisterFile()

    def test_registers_init(self):
        registers = self.registers
        self.assertEqual(0x200, registers.pc)
        self.assertEqual(0, registers.sp)
        self.assertEqual(0, registers.i)
        self.assertEqual(0, registers.dt)
        self.assertEqual(0, registers.st)
        self.assertEqual(bytes(16), registers.v.tobytes())

    def test_registers_inc_pc(self):
        self.registers.inc_pc()
        self.assertEqual(0x202, self.registers.pc)
        self.registers.pc = 0xFFE
        self.registers.inc_pc()
        self.assertEqual(0x000, self.registers.pc)

    def test_registers_jump_masks(self):
        self.registers.jump(0x1234)
        self.assertEqual(0x234, self.registers.pc)

    def test_registers_call_ret(self):
        self.registers.pc = 0x206  # Already past the call instruction at 0x204
        self.registers.call(0x400)
        self.assertEqual(0x400, self.registers.pc)
        self.assertEqual(1, self.registers.sp)
        self.registers.ret()
        self.assertEqual(0x206, self.registers.pc)
        self.assertEqual(0, self.registers.sp)

    def test_registers_nested_calls(self):
        for depth in range(15):
            self.registers.call(0x300 + depth * 2)

        self.assertEqual(15, self.registers.sp)
        self.assertRaises(StackOverflow, self.registers.call, 0x500)

        for depth in range(14, -1, -1):
            self.registers.ret()

        self.assertEqual(0x200, self.registers.pc)
        self.assertRaises(StackUnderflow, self.registers.ret)

    def test_registers_timers(self):
        self.registers.dt = 2
        self.registers.st = 1
        self.registers.tick_timers()
        self.assertEqual((1, 0), (self.registers.dt, self.registers.st))

        for _ in range(5):
            self.registers.tick_timers()

        self.assertEqual((0, 0), (self.registers.dt, self.registers.st))

    def test_registers_v_rejects_out_of_range(self):
        self.assertRaises(ValueError, self.registers.v.__setitem__, 0, 256)

    def test_registers_reset(self):
        self.registers.v[3] = 7
        self.registers.i = 0x123
        self.registers.call(0x300)
        self.registers.reset()
        self.assertEqual(0x200, self.registers.pc)
        self.assertEqual(0, self.registers.sp)
        self.assertEqual(0, self.registers.i)
        self.assertEqual(0, self.registers.v[3])
