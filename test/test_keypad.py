#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.keypad import Keypad, KeypadError


class TestKeypad(unittest.TestCase):
    def setUp(self):
        self.keypad = Keypad()

    def test_keypad_press_release(self):
        self.assertFalse(self.keypad.is_pressed(0xA))
        self.keypad.press(0xA)
        self.assertTrue(self.keypad.is_pressed(0xA))
        self.assertFalse(self.keypad.is_pressed(0xB))
        self.keypad.release(0xA)
        self.assertFalse(self.keypad.is_pressed(0xA))

    def test_keypad_out_of_range(self):
        self.assertRaises(KeypadError, self.keypad.press, 0x10)
        self.assertRaises(KeypadError, self.keypad.release, -1)
        self.assertRaises(KeypadError, self.keypad.is_pressed, 0x10)

    def test_keypad_sync(self):
        self.assertEqual([0x3, 0xF], self.keypad.sync({0xF, 0x3}))
        self.assertTrue(self.keypad.is_pressed(0x3))
        self.assertTrue(self.keypad.is_pressed(0xF))

        # Held keys aren't reported again, and missing keys are released
        self.assertEqual([0x1], self.keypad.sync({0x1, 0x3}))
        self.assertFalse(self.keypad.is_pressed(0xF))

        self.assertEqual([], self.keypad.sync(frozenset()))
        self.assertEqual([False] * 16, self.keypad.key_down)
