
import pygame

class Overlay:
    """Start and game-over screens drawn over the board."""
    def __init__(self):
        self.mode = "start"
        self.score = 0
        self.high_score = 0

    @property
    def active(self): return self.mode is not None

    def show_start(self): self.mode = "start"
    def hide(self): self.mode = None

    def game_over(self, score, high_score):
        self.mode = "game_over"; self.score = score; self.high_score = high_score

    def handle(self, e) -> bool:
        """True when the event should (re)start a session."""
        if not self.active: return False
        if e.type == pygame.MOUSEBUTTONDOWN: return True
        if e.type == pygame.KEYDOWN and e.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_r):
            return self.mode == "game_over" or e.key != pygame.K_r
        return False

    def draw(self, screen, font, big_font, w, h):
        if not self.active: return
        s = pygame.Surface((w, h), pygame.SRCALPHA); s.fill((0,0,0,200))
        screen.blit(s, (0,0))
        if self.mode == "start":
            lines = [(big_font, "TETRIS", (255,255,255)),
                     (font, "Enter / click to start", (200,200,220))]
        else:
            lines = [(big_font, "GAME OVER", (255,220,220)),
                     (font, f"Score: {self.score}", (230,230,240)),
                     (font, f"High score: {self.high_score}", (230,230,240)),
                     (font, "Enter / R / click to restart", (200,200,220))]
        y = h // 2 - 20 * len(lines)
        for f, text, col in lines:
            surf = f.render(text, True, col)
            screen.blit(surf, surf.get_rect(center=(w // 2, y))); y += 40
