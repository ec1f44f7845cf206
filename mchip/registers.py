#!/usr/bin/env python3

"""
Register File

Holds everything the CPU keeps outside of RAM:
    * V0-Vf - 16 general purpose 8-bit registers.  Vf doubles as the flag
              register for arithmetic, shifts and sprite collisions
    * I     - 12-bit index register
    * PC    - 12-bit program counter
    * DT    - 8-bit delay timer
    * ST    - 8-bit sound timer
    * The return address stack (and its pointer)

The timers count down by one per tick until they reach zero, and stay there.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import NUM_REGISTERS, PROGRAM_START, ADDR_MASK
from .stack import Stack


class RegisterFile:
    def __init__(self, stack=None):
        self.stack = Stack() if stack is None else stack
        self.reset()

    def reset(self):
        self.v = memoryview(bytearray(NUM_REGISTERS))  # Bytearrays keep every register within 0-255
        self.i = 0
        self.pc = PROGRAM_START
        self.dt = 0
        self.st = 0
        self.stack.reset()

    @property
    def sp(self):
        return self.stack.sp

    def inc_pc(self):
        self.pc = (self.pc + 2) & ADDR_MASK

    def jump(self, address):
        self.pc = address & ADDR_MASK

    def call(self, address):
        # The program counter has already moved past the CALL, so that's where RET comes back to
        self.stack.push(self.pc)
        self.jump(address)

    def ret(self):
        self.pc = self.stack.pop()

    def tick_timers(self):
        if self.dt > 0:
            self.dt -= 1

        if self.st > 0:
            self.st -= 1
