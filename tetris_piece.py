
"""Piece model, shapes, rotation with simple wall kick"""
from dataclasses import dataclass
from typing import List, Optional

Shape = List[List[int]]

PIECES = "TILSZJO"

# cell-id doubles as the color index
SHAPES = {
    "T": [[0,1,0],[1,1,1],[0,0,0]],
    "O": [[2,2],[2,2]],
    "L": [[0,0,3],[3,3,3],[0,0,0]],
    "J": [[4,0,0],[4,4,4],[0,0,0]],
    "I": [[0,0,0,0],[5,5,5,5],[0,0,0,0],[0,0,0,0]],
    "S": [[0,6,6],[6,6,0],[0,0,0]],
    "Z": [[7,7,0],[0,7,7],[0,0,0]],
}

def shape_for(t: str) -> Shape:
    return [r[:] for r in SHAPES[t]]

def rotate(m: Shape, direction: int) -> Shape:
    """Transpose, then mirror rows (cw, direction > 0) or flip row order (ccw)."""
    t = [list(c) for c in zip(*m)]
    if direction > 0:
        return [r[::-1] for r in t]
    return t[::-1]

@dataclass
class Piece:
    t: str
    shape: Shape
    state: int
    x: int
    y: int
    @staticmethod
    def spawn(t: str, cols: int, shape: Optional[Shape] = None, state: int = 0):
        s = shape_for(t) if shape is None else [r[:] for r in shape]
        return Piece(t, s, state, cols // 2 - len(s[0]) // 2, 0)
    def moved(self, dx: int = 0, dy: int = 0) -> "Piece":
        return Piece(self.t, [r[:] for r in self.shape], self.state, self.x + dx, self.y + dy)

# rotation

def try_rotate(board, piece: Piece, direction: int) -> Optional[Piece]:
    """Rotate and shove sideways by +1, -2, +3, ... until it fits.

    Gives up once the next offset exceeds the piece width; the caller keeps
    the unrotated piece in that case.
    """
    from tetris_board import collide
    test = Piece(piece.t, rotate(piece.shape, direction),
                 (piece.state + (1 if direction > 0 else -1)) % 4, piece.x, piece.y)
    offset = 1
    while collide(board, test):
        test.x += offset
        offset = -(offset + (1 if offset > 0 else -1))
        if offset > len(test.shape[0]):
            return None
    return test
