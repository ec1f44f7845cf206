#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the emulator, replacing args with a dictionary
of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.

Returns the process exit status: 0 if the user quit, 1 if the machine stopped
on a fault or the ROM could not be loaded.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import sys
from .constants import APP_INTRO, APP_COPYRIGHT, DEFAULT_KEYMAP
from .cpu import CPU
from .debugger import Debugger
from .framebuffer import Framebuffer
from .hostio import Loader
from .keypad import Keypad
from .machine import Machine
from .ram import RAM, RAMError
from .registers import RegisterFile


class StartupError(Exception):
    pass


def select_plugins(opt_renderer):
    auto_select_renderer = opt_renderer is None  # If necessary, try PyGame first, then Curses.

    # flake8: noqa: F401
    if auto_select_renderer or opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame
        except ImportError:
            if auto_select_renderer:
                opt_renderer = "curses"
            else:
                raise StartupError(
                    "PyGame does not appear to be installed."
                )
        else:
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer
            return Inputs, Renderer

    if opt_renderer == "curses":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import curses
        except ImportError:
            if auto_select_renderer:
                raise StartupError(
                    "Neither PyGame nor Curses (or Windows-Curses) appear to be installed."
                )

            raise StartupError(
                "Curses (or Windows-Curses) does not appear to be installed."
            )
        else:
            from .inputs.i_curses import Inputs
            from .renderers.r_curses import Renderer
            return Inputs, Renderer

    if opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer
        return Inputs, Renderer

    raise StartupError("Unknown renderer '{}'".format(opt_renderer))


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))
    Inputs, Renderer = select_plugins(args["renderer"])
    loader = Loader()

    # Allocate memory, then write the system font and the ROM into it
    ram = RAM()
    loader.install_font(ram)

    try:
        loader.install_rom(ram, args["filename"])
    except (OSError, RAMError) as err:
        print("Unable to load {}: {}".format(args["filename"], err), file=sys.stderr)
        return 1

    # Set up a new rendering system, and attach the framebuffer to it
    renderer = Renderer(scale=args["scale"], pygame_palette=args["pygame_palette"])
    inputs = None

    try:
        framebuffer = Framebuffer(renderer)

        # Set up host inputs, and link to the chosen rendering module in case it provides inputs too
        inputs = Inputs(args["keymap"] or DEFAULT_KEYMAP, renderer)

        # Set up debugger and live output if necessary
        debugger = Debugger()
        debugger.set_live(args["debug"])

        # Create a new CPU, plug it into the rest of the system, and boot it up at the default address
        cpu = CPU(ram, RegisterFile(), framebuffer, Keypad(), debugger)
        machine = Machine(cpu, inputs, clock_speed=args["clock_speed"])
        fault = machine.run()
    finally:
        # Shut down the rendering framework even if setup failed.  __del__ cannot be relied upon when using PyPy
        if inputs is not None:
            inputs.shutdown()

        renderer.shutdown()

    if fault is not None:
        print(
            "Emulation halted.\n\n{}Debug info:\n{}\n\n{}".format(
                APP_INTRO, debugger.debug(cpu, "???", verbose=True), fault
            ),
            file=sys.stderr
        )
        return 1

    return 0
