#!/usr/bin/env python3

"""
Machine Driver

Runs the emulated system one tick at a time.  Every tick:
    1. The delay and sound timers count down (if not already at zero)
    2. Host inputs are processed, and the keypad is brought up to date.  If
       the host has asked to quit, the machine stops here
    3. If waiting for a keypress and a key has just gone down, the key is
       stored in the waiting register and the machine carries on running
    4. If running, one instruction is fetched, decoded and executed
    5. The screen is presented, if it has changed

Waiting for a keypress is just another state, so the timers keep counting and
the host stays responsive while nothing is executing.

A bad opcode or a broken call stack can't be recovered from, as the register
file would be left in an undefined state.  These stop the machine, and the
error is kept in 'fault' for whoever started it.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter, sleep
from .constants import DEFAULT_CLOCK_SPEED
from .decoder import DecoderError
from .ram import RAMError
from .stack import StackError
from .states import RUNNING, STOPPED, WaitingForKey

FATAL_ERRORS = (DecoderError, StackError, RAMError)


class Machine:
    def __init__(self, cpu, inputs, clock_speed=None):
        self.cpu = cpu
        self.registers = cpu.registers
        self.keypad = cpu.keypad
        self.framebuffer = cpu.framebuffer
        self.inputs = inputs
        self.state = RUNNING
        self.fault = None

        if clock_speed is None:
            clock_speed = DEFAULT_CLOCK_SPEED

        # User can specify 0 for uncapped ticks
        self.tick_interval = None if clock_speed <= 0 else 1.0 / clock_speed

        # Performance-related vars
        self.perf_counter_tps = 0
        self.next_perf_report_time = 0

    def is_running(self):
        return self.state is RUNNING

    def is_stopped(self):
        return self.state is STOPPED

    def stop(self):
        self.state = STOPPED

    def tick(self):
        if self.state is STOPPED:
            return self.state

        self.registers.tick_timers()

        if self.inputs.process_messages():
            # Quit immediately, before anything else is executed
            self.stop()
            return self.state

        newly_pressed = self.keypad.sync(self.inputs.get_pressed_keys())
        state = self.state

        if isinstance(state, WaitingForKey) and newly_pressed:
            self.registers.v[state.destination] = newly_pressed[0]
            self.state = RUNNING

        if self.state is RUNNING:
            try:
                next_state = self.cpu.step()
            except FATAL_ERRORS as err:
                self.fault = err
                self.stop()
            else:
                if next_state is not None:
                    self.state = next_state

        # Show whatever was drawn up to this point, even if the machine has just stopped
        self.framebuffer.refresh_display()
        return self.state

    def run(self):
        # Returns the fault that stopped the machine, or None if the host quit
        while self.state is not STOPPED:
            this_time = perf_counter()  # Do this first for maximum precision

            if this_time >= self.next_perf_report_time:
                self.next_perf_report_time = int(this_time) + 1.0
                self.framebuffer.report_perf(self.perf_counter_tps)
                self.perf_counter_tps = 0

            self.tick()
            self.perf_counter_tps += 1

            if self.tick_interval is not None:
                # Wait for the next tick, taking into account the time spent on this one
                remaining = this_time + self.tick_interval - perf_counter()

                if remaining > 0:
                    sleep(remaining)

        return self.fault
