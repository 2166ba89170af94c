import pygame

from tetris_input import KEYMAP, handle_key


class _Recorder:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        return lambda *args: self.calls.append((name, args))


def test_arrow_and_letter_bindings():
    s = _Recorder()
    for key in (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_DOWN, pygame.K_q, pygame.K_w,
                pygame.K_SPACE, pygame.K_LSHIFT):
        assert handle_key(s, key)
    assert s.calls == [
        ("move", (-1,)),
        ("move", (1,)),
        ("soft_drop", ()),
        ("rotate", (-1,)),
        ("rotate", (1,)),
        ("hard_drop", ()),
        ("hold", ()),
    ]


def test_unbound_key_is_ignored():
    s = _Recorder()
    assert not handle_key(s, pygame.K_F12)
    assert s.calls == []


def test_every_binding_names_a_session_operation():
    from tetris_session import Session
    for name, *_ in KEYMAP.values():
        assert callable(getattr(Session, name))
