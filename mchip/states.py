#!/usr/bin/env python3

"""
Machine States

The driver is always in exactly one of these.  Waiting for a keypress carries
the register the key should end up in, so a destination can't exist without
the wait, or the other way round.

Nothing switches the machine into Paused at present; the driver treats it like
any other non-running state.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class State:
    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return "<State {}>".format(self.name)


class WaitingForKey(State):
    def __init__(self, destination):
        super().__init__("WaitingForKey")
        self.destination = destination

    def __repr__(self):
        return "<State {} V{:01x}>".format(self.name, self.destination)

    def __eq__(self, other):
        return isinstance(other, WaitingForKey) and other.destination == self.destination

    def __hash__(self):
        return hash((self.name, self.destination))


RUNNING = State("Running")
PAUSED = State("Paused")
STOPPED = State("Stopped")
