from typing import Callable

from sortedcontainers import SortedDict


class EventLoop:
    """Discrete event timeline: callbacks keyed by simulated time, run in time order and
    FIFO within a single time. The optional `clock` hook is invoked with each time before
    the callbacks registered at it, eg, to advance a simulation to that point"""

    def __init__(self, clock: Callable[[int], None] | None = None):
        self.timesteps = SortedDict()
        self.clock = clock

    def add_event(self, time, callback, *args):
        if time in self.timesteps:
            self.timesteps[time].append((callback, *args))
        else:
            self.timesteps[time] = [(callback, *args)]

    def run(self):
        while len(self.timesteps) > 0:
            time, callbacks = self.timesteps.popitem(0)
            if self.clock is not None:
                self.clock(time)
            while len(callbacks) > 0:
                callback = callbacks[0]
                callback[0](time, *callback[1:])
                callbacks.pop(0)
