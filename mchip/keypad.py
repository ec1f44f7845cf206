#!/usr/bin/env python3

"""
Keypad State

The 16 hex keys (0-F) of the emulated keypad, each either held or not.  Input
plugins know nothing about this; once per tick, the driver hands over the set
of keys the host currently has down, and the keypad works out which keys have
just been pressed.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import NUM_KEYS


class KeypadError(Exception):
    pass


class Keypad:
    def __init__(self):
        self.key_down = [False] * NUM_KEYS

    def _check_key(self, key):
        if not 0 <= key < NUM_KEYS:
            raise KeypadError("Key 0x{:x} is out of range".format(key))

    def press(self, key):
        self._check_key(key)
        self.key_down[key] = True

    def release(self, key):
        self._check_key(key)
        self.key_down[key] = False

    def is_pressed(self, key):
        self._check_key(key)
        return self.key_down[key]

    def sync(self, pressed_keys):
        # Returns keys that went down since the last sync, lowest first
        newly_pressed = []

        for key in range(NUM_KEYS):
            if key in pressed_keys:
                if not self.key_down[key]:
                    newly_pressed.append(key)

                self.press(key)
            else:
                self.release(key)

        return newly_pressed
