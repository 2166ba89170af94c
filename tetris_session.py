
"""Session controller: owns board, active piece, queue, hold, score and timing.

All game state lives on a ``Session`` instance; nothing is module-global, so
several sessions can run side by side and tests can drive one directly.
Time only advances through ``tick(elapsed_ms)``.
"""
from __future__ import annotations
import enum
import logging
import random
from typing import Callable, List, Mapping, Optional

from tetris_board import Board, collide, create_board, ghost_y, merge, sweep
from tetris_config import CONFIG
from tetris_piece import Piece, Shape, shape_for, try_rotate
from tetris_rng import BagRandom
from tetris_store import MemoryStore

log = logging.getLogger(__name__)


class GameState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class Session:
    def __init__(self, store=None, width: Optional[int] = None, height: Optional[int] = None,
                 seed: Optional[int] = None, rng: Optional[random.Random] = None,
                 config: Optional[Mapping] = None):
        self.config = dict(CONFIG)
        if config:
            self.config.update(config)
        self.cols = width or self.config["BOARD_W"]
        self.rows = height or self.config["BOARD_H"]
        self.store = store if store is not None else MemoryStore()
        if seed is None:
            seed = self.config["SEED"]
        self.queue = BagRandom(seed, rng)

        self.state = GameState.IDLE
        self.board: Board = create_board(self.cols, self.rows)
        self.current: Optional[Piece] = None
        self.hold_piece: Optional[Piece] = None
        self.can_hold = True
        self.score = 0
        self.high_score = 0
        self.lines = 0
        self.drop_interval = float(self.config["DROP_INTERVAL_MS"])
        self.drop_counter = 0.0
        self.on_game_over: List[Callable[[int, int], None]] = []

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    # ---------- lifecycle ----------
    def start(self):
        self.board = create_board(self.cols, self.rows)
        self.score = 0
        self.lines = 0
        self.drop_interval = float(self.config["DROP_INTERVAL_MS"])
        self.drop_counter = 0.0
        self.queue.reset()
        self.hold_piece = None
        self.can_hold = True
        self.high_score = self.store.load_high_score()
        self.state = GameState.RUNNING
        log.info("session started (%dx%d, high score %d)", self.cols, self.rows, self.high_score)
        self._spawn()
        if self.state is GameState.GAME_OVER:
            self._finish()

    restart = start

    def _spawn(self):
        self.current = Piece.spawn(self.queue.next_piece(), self.cols)
        self.can_hold = True
        if collide(self.board, self.current):
            self.state = GameState.GAME_OVER

    def _finish(self):
        if self.score > self.high_score:
            self.high_score = self.score
            self.store.save_high_score(self.score)
        log.info("game over: score %d, high score %d", self.score, self.high_score)
        for cb in list(self.on_game_over):
            cb(self.score, self.high_score)

    # ---------- timing ----------
    def tick(self, elapsed_ms: float):
        if not self.running:
            return
        self.drop_counter += elapsed_ms
        if self.drop_counter > self.drop_interval:
            self.soft_drop()

    # ---------- input ----------
    def move(self, direction: int) -> bool:
        if not self.running:
            return False
        t = self.current.moved(dx=direction)
        if collide(self.board, t):
            return False
        self.current = t
        return True

    def rotate(self, direction: int) -> bool:
        if not self.running:
            return False
        t = try_rotate(self.board, self.current, direction)
        if t is None:
            return False
        self.current = t
        return True

    def soft_drop(self) -> bool:
        """Step down one row, locking the piece if it is resting.

        Returns True when the piece moved.
        """
        if not self.running:
            return False
        t = self.current.moved(dy=1)
        moved = not collide(self.board, t)
        if moved:
            self.current = t
        else:
            self._lock()
        self.drop_counter = 0.0
        return moved

    def hard_drop(self) -> int:
        if not self.running:
            return 0
        gy = ghost_y(self.board, self.current)
        dropped = gy - self.current.y
        self.current = self.current.moved(dy=dropped)
        self._lock()
        self.drop_counter = 0.0
        return dropped

    def hold(self) -> bool:
        if not self.running or not self.can_hold:
            return False
        held = self.hold_piece
        self.hold_piece = self.current.moved()
        if held is not None:
            self.current = Piece.spawn(held.t, self.cols, held.shape, held.state)
        else:
            self.current = Piece.spawn(self.queue.next_piece(), self.cols)
        self.can_hold = False
        return True

    # ---------- locking ----------
    def _lock(self):
        locked = self.current
        merge(self.board, locked)
        self._spawn()
        cleared = sweep(self.board)
        if cleared:
            self._score_clears(cleared)
        log.debug("locked %s at (%d, %d), cleared %d", locked.t, locked.x, locked.y, cleared)
        if self.state is GameState.GAME_OVER:
            self._finish()

    def _score_clears(self, cleared: int):
        floor = self.config["DROP_INTERVAL_FLOOR_MS"]
        for _ in range(cleared):
            self.score += self.config["LINE_BONUS"]
            self.drop_interval *= self.config["SPEED_FACTOR"]
        if floor:
            self.drop_interval = max(self.drop_interval, floor)
        self.lines += cleared

    # ---------- views for rendering ----------
    def ghost(self) -> Optional[Piece]:
        if self.current is None:
            return None
        gy = ghost_y(self.board, self.current)
        return self.current.moved(dy=gy - self.current.y)

    def preview(self, n: Optional[int] = None) -> List[Shape]:
        if n is None:
            n = self.config["PREVIEW_COUNT"]
        return [shape_for(t) for t in self.queue.peek(n)]
