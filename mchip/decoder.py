#!/usr/bin/env python3

"""
Instruction Decoder

Turns a raw 16-bit opcode into an Instruction, without touching any machine
state.  The CPU then looks up the Instruction's form to decide what to run, so
decoding and execution can be tested separately.

Every opcode is split into the same fields, whether or not a particular
instruction uses them:
    form   - Instruction pattern, e.g. "8xy4"
    x / y  - Register numbers (0-15), second and third nibbles
    n      - Nibble, lowest 4 bits
    kk     - Byte, lowest 8 bits
    nnn    - Address, lowest 12 bits

Which bits identify the instruction depends on the first nibble, so that is
used to select a mask before looking up the form.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple


class DecoderError(Exception):
    pass


class UnimplementedOpcode(DecoderError):
    def __init__(self, opcode, address=None):
        self.opcode = opcode
        self.address = address

        if address is None:
            message = "Opcode 0x{:04x} is not a supported instruction".format(opcode)
        else:
            message = "Opcode 0x{:04x} at address 0x{:03x} is not a supported instruction".format(opcode, address)

        super().__init__(message)


Instruction = namedtuple("Instruction", ["form", "opcode", "x", "y", "n", "kk", "nnn"])

# Identifying bits for each first nibble.  Anything not listed only needs the first nibble.
CLASS_MASKS = {
    0x0: 0xFFFF,  # Exact match
    0x5: 0xF00F,
    0x8: 0xF00F,
    0x9: 0xF00F,
    0xE: 0xF0FF,
    0xF: 0xF0FF
}
DEFAULT_MASK = 0xF000

# Masked opcode -> (form, disassembly template)
FORMS = {
    0x00E0: ("00E0", "CLS"),
    0x00EE: ("00EE", "RET"),
    0x1000: ("1nnn", "JP 0x{nnn:03x}"),
    0x2000: ("2nnn", "CALL 0x{nnn:03x}"),
    0x3000: ("3xkk", "SE V{x:01x}, 0x{kk:02x}"),
    0x4000: ("4xkk", "SNE V{x:01x}, 0x{kk:02x}"),
    0x5000: ("5xy0", "SE V{x:01x}, V{y:01x}"),
    0x6000: ("6xkk", "LD V{x:01x}, 0x{kk:02x}"),
    0x7000: ("7xkk", "ADD V{x:01x}, 0x{kk:02x}"),
    0x8000: ("8xy0", "LD V{x:01x}, V{y:01x}"),
    0x8001: ("8xy1", "OR V{x:01x}, V{y:01x}"),
    0x8002: ("8xy2", "AND V{x:01x}, V{y:01x}"),
    0x8003: ("8xy3", "XOR V{x:01x}, V{y:01x}"),
    0x8004: ("8xy4", "ADD V{x:01x}, V{y:01x}"),
    0x8005: ("8xy5", "SUB V{x:01x}, V{y:01x}"),
    0x8006: ("8xy6", "SHR V{x:01x}"),
    0x8007: ("8xy7", "SUBN V{x:01x}, V{y:01x}"),
    0x800E: ("8xyE", "SHL V{x:01x}"),
    0x9000: ("9xy0", "SNE V{x:01x}, V{y:01x}"),
    0xA000: ("Annn", "LD I, 0x{nnn:03x}"),
    0xB000: ("Bnnn", "JP V0, 0x{nnn:03x}"),
    0xC000: ("Cxkk", "RND V{x:01x}, 0x{kk:02x}"),
    0xD000: ("Dxyn", "DRW V{x:01x}, V{y:01x}, 0x{n:01x}"),
    0xE09E: ("Ex9E", "SKP V{x:01x}"),
    0xE0A1: ("ExA1", "SKNP V{x:01x}"),
    0xF007: ("Fx07", "LD V{x:01x}, DT"),
    0xF00A: ("Fx0A", "LD V{x:01x}, K"),
    0xF015: ("Fx15", "LD DT, V{x:01x}"),
    0xF018: ("Fx18", "LD ST, V{x:01x}"),
    0xF01E: ("Fx1E", "ADD I, V{x:01x}"),
    0xF029: ("Fx29", "LD F, V{x:01x}"),
    0xF033: ("Fx33", "LD B, V{x:01x}"),
    0xF055: ("Fx55", "LD [I], V{x:01x}"),
    0xF065: ("Fx65", "LD V{x:01x}, [I]")
}

TEMPLATES = dict(FORMS.values())


def decode(opcode, address=None):
    # address is only used to give a useful error message
    masked_opcode = opcode & CLASS_MASKS.get(opcode >> 12, DEFAULT_MASK)
    form_info = FORMS.get(masked_opcode)

    if form_info is None:
        raise UnimplementedOpcode(opcode, address)

    return Instruction(
        form=form_info[0],
        opcode=opcode,
        x=(opcode & 0xF00) >> 8,
        y=(opcode & 0xF0) >> 4,
        n=opcode & 0xF,
        kk=opcode & 0xFF,
        nnn=opcode & 0xFFF
    )


def disassemble(instruction):
    return TEMPLATES[instruction.form].format(**instruction._asdict())


def get_forms():
    return list(TEMPLATES.keys())
