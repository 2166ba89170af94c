
"""7-bag randomizer module"""
import random
from collections import deque
from typing import List, Optional
from tetris_piece import PIECES, Shape, shape_for

class BagRandom:
    """Queue of upcoming piece types, topped up one shuffled bag at a time.

    A new bag of all seven types is appended whenever fewer than seven are
    waiting, so the preview never runs dry. Pass ``seed`` or an explicit
    ``rng`` for a reproducible sequence.
    """
    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)
        self.queue = deque()

    def _shuffle(self, items: List[str]) -> List[str]:
        # Fisher-Yates
        for i in range(len(items) - 1, 0, -1):
            j = self.rng.randint(0, i)
            items[i], items[j] = items[j], items[i]
        return items

    def _refill(self):
        if len(self.queue) < len(PIECES):
            self.queue.extend(self._shuffle(list(PIECES)))

    def next_piece(self) -> str:
        self._refill()
        return self.queue.popleft()

    def next_shape(self) -> Shape:
        return shape_for(self.next_piece())

    def peek(self, n: int = 3) -> List[str]:
        return list(self.queue)[:n]

    def reset(self):
        self.queue.clear()
