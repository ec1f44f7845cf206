#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "MonoChip Emulator"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Memory layout
MEM_SIZE = 0x1000      # 4K of addressable RAM
FONT_LOCATION = 0x50   # System font glyphs live below the program area
PROGRAM_START = 0x200  # ROMs are loaded (and the program counter starts) here
ADDR_MASK = 0xFFF      # Index register, program counter and jump targets are 12-bit

# Register file
NUM_REGISTERS = 0x10
STACK_DEPTH = 0x10     # Slot 0 is never written, so 15 nested calls are possible

# Display
VID_WIDTH = 64
VID_HEIGHT = 32

# Input
NUM_KEYS = 0x10

# Host timing.  One instruction is executed per tick, and the timers count down once per tick.
DEFAULT_CLOCK_SPEED = 60

# Default host keys for hex keys 0-F, later populated into a dictionary.  PyGame uses these as key names, and Curses
# uses them as characters.
DEFAULT_KEYMAP = "0,1,2,3,4,5,6,7,8,9,a,b,c,d,e,f"

# Built-in 4x5 pixel system font, one glyph per hex digit 0-F
SYSTEM_FONT = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
))
GLYPH_SIZE = 5
