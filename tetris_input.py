
"""Key bindings for a running session (one action per KEYDOWN, no auto-repeat)"""
import pygame

KEYMAP = {
    pygame.K_LEFT: ("move", -1),
    pygame.K_RIGHT: ("move", 1),
    pygame.K_DOWN: ("soft_drop",),
    pygame.K_q: ("rotate", -1),
    pygame.K_w: ("rotate", 1),
    pygame.K_UP: ("rotate", 1),
    pygame.K_SPACE: ("hard_drop",),
    pygame.K_LSHIFT: ("hold",),
    pygame.K_RSHIFT: ("hold",),
}

def handle_key(session, key) -> bool:
    """Apply the action bound to ``key``; False if the key is unbound."""
    action = KEYMAP.get(key)
    if action is None:
        return False
    name, *args = action
    getattr(session, name)(*args)
    return True
