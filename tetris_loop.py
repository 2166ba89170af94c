
"""Frame scheduler: turns a millisecond clock into session ticks"""
from typing import Callable, Optional

class FrameLoop:
    """Drives ``session.tick`` from a clock.

    ``clock`` is any zero-arg callable returning milliseconds; it defaults to
    ``pygame.time.get_ticks`` so tests can swap in a fake.
    """
    def __init__(self, session, clock: Optional[Callable[[], float]] = None):
        if clock is None:
            import pygame
            clock = pygame.time.get_ticks
        self.session = session
        self.clock = clock
        self.last = clock()

    def reset(self):
        self.last = self.clock()

    def step(self) -> float:
        now = self.clock()
        dt = now - self.last
        self.last = now
        if self.session.running:
            self.session.tick(dt)
        return dt

    def run(self, on_frame: Callable[[], None]):
        """Tick and call ``on_frame`` once per frame until the session stops running."""
        self.reset()
        while self.session.running:
            self.step()
            on_frame()
