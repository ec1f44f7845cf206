#!/usr/bin/env python3

"""
Null Input Plugin

Serves as a base class for other Input plugins.  Can be used on its own if zero
input functionality is required.

Plugins only report what the host is doing: whether the user has asked to
quit, and which of the 16 hex keys are currently held.  The driver turns that
into keypad state.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from ..constants import NUM_KEYS


class InputsError(Exception):
    pass


class Inputs:
    def __init__(self, keymap, renderer):
        self.keymap_dict = {}
        self.renderer = renderer
        keymap_split = keymap.split(",")

        if len(keymap_split) != NUM_KEYS:
            raise InputsError("Incorrect number of keys defined -- 16 required.  Use commas to split key names")

        for key_num, key_name in enumerate(keymap_split):
            key_code = self.key_code(key_name.strip())

            if key_code in self.keymap_dict:
                raise InputsError("Duplicate keys defined")

            self.keymap_dict[key_code] = key_num

    def key_code(self, key_name):
        # Translate a key name into whatever the host reports when it is pressed
        if not key_name:
            raise InputsError("Empty key name defined")

        return key_name.lower()

    def process_messages(self):
        return False  # Don't exit the program

    def get_pressed_keys(self):
        return frozenset()  # No keys are held

    def shutdown(self):
        pass
