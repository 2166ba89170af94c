
"""Board helpers: create, collide, merge, sweep, ghost"""
from typing import List
from tetris_piece import Piece

Board = List[List[int]]

def create_board(w: int, h: int) -> Board:
    return [[0] * w for _ in range(h)]

def collide(board: Board, piece: Piece) -> bool:
    rows, cols = len(board), len(board[0])
    for y,row in enumerate(piece.shape):
        for x,v in enumerate(row):
            if not v: continue
            bx,by = piece.x+x, piece.y+y
            if bx<0 or bx>=cols or by>=rows: return True
            if by>=0 and board[by][bx]: return True
    return False

def merge(board:Board, piece:Piece):
    for y,r in enumerate(piece.shape):
        for x,v in enumerate(r):
            if v:
                by = piece.y+y
                if by>=0: board[by][piece.x+x]=v

def sweep(board:Board)->int:
    """Clear full rows bottom-up and return how many went.

    The row index is not advanced after a clear, so the row that slid down
    into it gets checked too.
    """
    cols = len(board[0])
    c=0; y=len(board)-1
    while y>=0:
        if all(board[y]):
            del board[y]; board.insert(0,[0]*cols); c+=1
        else: y-=1
    return c

def ghost_y(board:Board,piece:Piece)->int:
    t=piece.moved()
    while not collide(board,t):
        t.y+=1
    return t.y-1
