#!/usr/bin/env python3

"""
RAM Emulator

A flat, fixed-size block of byte-addressable memory.  Supports reading and
writing of individual bytes, reading of big-endian 16-bit words (instructions),
and writing of whole blocks, such as ROMs and the system font.

Block writes are checked before anything is copied, so a block that doesn't
fit leaves memory untouched.  Single-byte accesses are not checked here: an
address outside memory is a bug in the caller, and the underlying memoryview
will raise an IndexError on its own.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import MEM_SIZE


class RAMError(Exception):
    pass


class CapacityExceeded(RAMError):
    pass


class RAM:
    def __init__(self, mem_size=MEM_SIZE):
        self.mem = memoryview(bytearray(mem_size))
        self.mem_size = mem_size

    def read(self, location):
        return self.mem[location]

    def read_word(self, location):
        # Instructions are stored most-significant byte first.  A word at the very top of memory wraps round to 0.
        return (self.mem[location] << 8) | self.mem[(location + 1) % self.mem_size]

    def write(self, location, byte):
        self.mem[location] = byte

    def write_block(self, location, block):
        block_top = location + len(block)

        # The final byte of memory is never available to block writes
        if block_top >= self.mem_size:
            raise CapacityExceeded(
                "Block of {} bytes at 0x{:03x} does not fit in {} bytes of memory".format(
                    len(block), location, self.mem_size
                )
            )

        self.mem[location:block_top] = block

    def clear(self):
        self.mem[:] = bytes(self.mem_size)
