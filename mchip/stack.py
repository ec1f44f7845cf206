#!/usr/bin/env python3

"""
Stack Emulator

The call stack is kept outside of system RAM.  Programs have no instruction
to read the stack pointer or the stack slots directly, so a separate fixed
array is both faster and simpler.

The pointer starts at 0, and slot 0 is never written: a push moves the pointer
up first and then stores, and a pop reads the current slot before moving the
pointer down.  That leaves 15 usable levels of nesting.

Running off either end of the stack would silently corrupt the machine, so
both are raised as errors and treated as fatal by the driver.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import STACK_DEPTH


class StackError(Exception):
    pass


class StackOverflow(StackError):
    pass


class StackUnderflow(StackError):
    pass


class Stack:
    def __init__(self, size=STACK_DEPTH):
        self.slots = [0] * size
        self.size = size
        self.sp = 0

    def push(self, item):
        if self.sp >= self.size - 1:
            raise StackOverflow("Stack overflow")

        self.sp += 1
        self.slots[self.sp] = item

    def pop(self):
        if self.sp <= 0:
            raise StackUnderflow("Stack underflow")

        item = self.slots[self.sp]
        self.sp -= 1
        return item

    def reset(self):
        self.slots = [0] * self.size
        self.sp = 0

    def get_items(self):
        # For debugging.  Only the live slots, oldest first
        return self.slots[1:self.sp + 1]
