#!/usr/bin/env python3

"""
CPU Emulator (CHIP-8)

Fetches, decodes and executes one instruction at a time.  Decoding is handled
by the decoder module; this module owns the handler for each instruction form
and applies it to the register file, RAM, keypad and framebuffer.

The program counter is moved past the instruction before it is executed, so
skips, calls and jumps all work relative to the next instruction.

Nothing here catches errors.  A bad opcode or a broken call stack is raised
straight up to the driver, which stops the machine.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import random
from .constants import ADDR_MASK, FONT_LOCATION, GLYPH_SIZE
from .decoder import decode, get_forms
from .states import WaitingForKey


class CPUError(Exception):
    pass


class CPU:
    def __init__(self, ram, registers, framebuffer, keypad, debugger, rng=None):
        self.ram = ram
        self.registers = registers
        self.framebuffer = framebuffer
        self.keypad = keypad
        self.debugger = debugger
        self.live_debug = self.debugger.is_live()
        self.rng = random if rng is None else rng  # Anything with a randint(a, b) method

        # Current instruction and where it came from, kept for debugging
        self.debug_pc = self.registers.pc
        self.opcode = 0

        self.instructions = {
            "00E0": self._00E0,
            "00EE": self._00EE,
            "1nnn": self._1nnn,
            "2nnn": self._2nnn,
            "3xkk": self._3xkk,
            "4xkk": self._4xkk,
            "5xy0": self._5xy0,
            "6xkk": self._6xkk,
            "7xkk": self._7xkk,
            "8xy0": self._8xy0,
            "8xy1": self._8xy1,
            "8xy2": self._8xy2,
            "8xy3": self._8xy3,
            "8xy4": self._8xy4,
            "8xy5": self._8xy5,
            "8xy6": self._8xy6,
            "8xy7": self._8xy7,
            "8xyE": self._8xyE,
            "9xy0": self._9xy0,
            "Annn": self._Annn,
            "Bnnn": self._Bnnn,
            "Cxkk": self._Cxkk,
            "Dxyn": self._Dxyn,
            "Ex9E": self._Ex9E,
            "ExA1": self._ExA1,
            "Fx07": self._Fx07,
            "Fx0A": self._Fx0A,
            "Fx15": self._Fx15,
            "Fx18": self._Fx18,
            "Fx1E": self._Fx1E,
            "Fx29": self._Fx29,
            "Fx33": self._Fx33,
            "Fx55": self._Fx55,
            "Fx65": self._Fx65
        }

        missing = set(get_forms()) - set(self.instructions)

        if missing:
            raise CPUError("No handler for instruction forms: {}".format(", ".join(sorted(missing))))

    def fetch(self):
        return self.ram.read_word(self.registers.pc)

    def step(self):
        # Returns the state the machine should switch to, or None to keep running
        registers = self.registers
        self.debug_pc = registers.pc  # Do this all the time in case there is a crash
        self.opcode = self.fetch()
        registers.inc_pc()  # Program counter updates after fetch, but before execute
        return self.execute(decode(self.opcode, self.debug_pc))

    def execute(self, instruction):
        if self.live_debug:
            self.debugger.output(self, instruction)

        return self.instructions[instruction.form](instruction)

    def _skip(self):
        self.registers.inc_pc()

    def _00E0(self, ins):  # CLS
        self.framebuffer.clear()

    def _00EE(self, ins):  # RET
        self.registers.ret()

    def _1nnn(self, ins):  # JP addr
        self.registers.jump(ins.nnn)

    def _2nnn(self, ins):  # CALL addr
        self.registers.call(ins.nnn)

    def _3xkk(self, ins):  # SE Vx, byte
        if self.registers.v[ins.x] == ins.kk:
            self._skip()

    def _4xkk(self, ins):  # SNE Vx, byte
        if self.registers.v[ins.x] != ins.kk:
            self._skip()

    def _5xy0(self, ins):  # SE Vx, Vy
        v = self.registers.v

        if v[ins.x] == v[ins.y]:
            self._skip()

    def _6xkk(self, ins):  # LD Vx, byte
        self.registers.v[ins.x] = ins.kk

    def _7xkk(self, ins):  # ADD Vx, byte
        v = self.registers.v
        v[ins.x] = (v[ins.x] + ins.kk) & 0xFF  # Vf is left alone

    def _8xy0(self, ins):  # LD Vx, Vy
        v = self.registers.v
        v[ins.x] = v[ins.y]

    def _8xy1(self, ins):  # OR Vx, Vy
        v = self.registers.v
        v[ins.x] |= v[ins.y]

    def _8xy2(self, ins):  # AND Vx, Vy
        v = self.registers.v
        v[ins.x] &= v[ins.y]

    def _8xy3(self, ins):  # XOR Vx, Vy
        v = self.registers.v
        v[ins.x] ^= v[ins.y]

    # For the arithmetic and shift instructions, Vf is always written last, so the flag survives if Vf is also Vx.

    def _8xy4(self, ins):  # ADD Vx, Vy
        v = self.registers.v
        val = v[ins.x] + v[ins.y]
        v[ins.x] = val & 0xFF
        v[0xF] = int(val > 0xFF)  # Vf is set when carrying

    def _8xy5(self, ins):  # SUB Vx, Vy
        v = self.registers.v
        vx_val = v[ins.x]
        vy_val = v[ins.y]
        v[ins.x] = (vx_val - vy_val) & 0xFF
        v[0xF] = int(vx_val > vy_val)  # Vf is set when NOT borrowing.  Equal values count as a borrow

    def _8xy6(self, ins):  # SHR Vx
        v = self.registers.v
        val = v[ins.x]
        v[ins.x] = val >> 1
        v[0xF] = val & 1

    def _8xy7(self, ins):  # SUBN Vx, Vy
        v = self.registers.v
        vx_val = v[ins.x]
        vy_val = v[ins.y]
        v[ins.x] = (vy_val - vx_val) & 0xFF
        v[0xF] = int(vy_val > vx_val)

    def _8xyE(self, ins):  # SHL Vx
        v = self.registers.v
        val = v[ins.x]
        v[ins.x] = (val << 1) & 0xFF
        v[0xF] = val >> 7

    def _9xy0(self, ins):  # SNE Vx, Vy
        v = self.registers.v

        if v[ins.x] != v[ins.y]:
            self._skip()

    def _Annn(self, ins):  # LD I, addr
        self.registers.i = ins.nnn

    def _Bnnn(self, ins):  # JP V0, addr
        self.registers.jump(self.registers.v[0x0] + ins.nnn)

    def _Cxkk(self, ins):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.registers.v[ins.x] = self.rng.randint(0, 0xFF) & ins.kk

    def _Dxyn(self, ins):  # DRW Vx, Vy, nibble
        registers = self.registers
        v = registers.v
        vid_width, vid_height = self.framebuffer.get_vid_size()

        # The sprite's start always wraps, but anything past the right or bottom edge is trimmed
        vx_pos = v[ins.x] % vid_width
        vy_pos = v[ins.y] % vid_height
        i = registers.i
        sprite = [self.ram.read((i + row) & ADDR_MASK) for row in range(ins.n)]

        # Vf ends up 0 unless a set pixel was switched off
        v[0xF] = int(self.framebuffer.draw_sprite(vx_pos, vy_pos, sprite))

    def _Ex9E(self, ins):  # SKP Vx
        # Only the low nibble of Vx can name a key
        if self.keypad.is_pressed(self.registers.v[ins.x] & 0xF):
            self._skip()

    def _ExA1(self, ins):  # SKNP Vx
        if not self.keypad.is_pressed(self.registers.v[ins.x] & 0xF):
            self._skip()

    def _Fx07(self, ins):  # LD Vx, DT
        self.registers.v[ins.x] = self.registers.dt

    def _Fx0A(self, ins):  # LD Vx, K
        # Nothing is read here.  The driver stops executing until a key goes down, then fills in Vx itself, so the
        # timers and display carry on as normal in the meantime.
        return WaitingForKey(ins.x)

    def _Fx15(self, ins):  # LD DT, Vx
        self.registers.dt = self.registers.v[ins.x]

    def _Fx18(self, ins):  # LD ST, Vx
        self.registers.st = self.registers.v[ins.x]

    def _Fx1E(self, ins):  # ADD I, Vx
        registers = self.registers
        registers.i = (registers.i + registers.v[ins.x]) & ADDR_MASK

    def _Fx29(self, ins):  # LD F, Vx
        registers = self.registers
        registers.i = (FONT_LOCATION + GLYPH_SIZE * registers.v[ins.x]) & ADDR_MASK

    def _Fx33(self, ins):  # LD B, Vx
        val = self.registers.v[ins.x]
        i = self.registers.i
        self.ram.write(i, val // 100)                           # Most-significant digit
        self.ram.write((i + 1) & ADDR_MASK, (val // 10) % 10)   # Middle digit
        self.ram.write((i + 2) & ADDR_MASK, val % 10)           # Least-significant digit

    def _Fx55(self, ins):  # LD [I], Vx
        registers = self.registers
        i = registers.i

        # The index register is left where it was
        for reg in range(ins.x + 1):
            self.ram.write((i + reg) & ADDR_MASK, registers.v[reg])

    def _Fx65(self, ins):  # LD Vx, [I]
        registers = self.registers
        i = registers.i

        for reg in range(ins.x + 1):
            registers.v[reg] = self.ram.read((i + reg) & ADDR_MASK)
