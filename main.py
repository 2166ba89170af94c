import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_input import handle_key
from tetris_layout import compute_dims
from tetris_loop import FrameLoop
from tetris_overlay import Overlay
from tetris_render import RenderAssets
from tetris_session import Session
from tetris_store import HighScoreStore

log = logging.getLogger("tetris")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN])

    session = Session(HighScoreStore(), seed=CONFIG["SEED"])
    dims = compute_dims(session.cols, session.rows)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont(None, 48)

    render = RenderAssets(dims, font, session.cols, session.rows)
    overlay = Overlay()
    session.on_game_over.append(overlay.game_over)
    clock = pygame.time.Clock()
    loop = FrameLoop(session)

    def pump():
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if overlay.handle(e):
                overlay.hide()
                session.restart()
                loop.reset()
            elif e.type == pygame.KEYDOWN and session.running:
                handle_key(session, e.key)

    def frame():
        pump()
        render.draw_session(screen, session)
        overlay.draw(screen, font, big_font, dims.total_w, dims.total_h)
        pygame.display.flip()
        clock.tick(CONFIG["TARGET_FPS"])

    # Idle on the start / game-over screen, then hand frames to the loop
    while True:
        frame()
        if session.running:
            loop.run(frame)
            log.debug("frame loop stopped in state %s", session.state.value)


if __name__ == '__main__':
    main()
