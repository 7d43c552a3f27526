from types import SimpleNamespace

import pygame
import pytest

from mazerunner.input_handler import InputHandler, controls_from_keys
from mazerunner.simulation import Controls


class KeyState:
    """Stand-in for pygame's key table: indexable by key constant."""

    def __init__(self, pressed=()):
        self._pressed = set(pressed)

    def __getitem__(self, key):
        return key in self._pressed


@pytest.mark.parametrize(
    "pressed,expected",
    [
        ((), Controls()),
        ((pygame.K_UP,), Controls(move_forward=True)),
        ((pygame.K_w,), Controls(move_forward=True)),
        ((pygame.K_s,), Controls(move_backward=True)),
        ((pygame.K_LEFT, pygame.K_d), Controls(rotate_left=True, rotate_right=True)),
        ((pygame.K_a, pygame.K_DOWN), Controls(rotate_left=True, move_backward=True)),
    ],
)
def test_controls_from_keys(pressed, expected):
    assert controls_from_keys(KeyState(pressed)) == expected


def test_process_events_captures_controls_and_quit(monkeypatch):
    events = [SimpleNamespace(type=pygame.QUIT)]
    monkeypatch.setattr(pygame.event, "get", lambda: events)
    monkeypatch.setattr(pygame.key, "get_pressed", lambda: KeyState([pygame.K_RIGHT]))

    handler = InputHandler()
    handler.process_events()
    assert handler.should_quit()
    assert handler.get_controls() == Controls(rotate_right=True)

    # Quit flag resets on the next poll
    events.clear()
    handler.process_events()
    assert not handler.should_quit()


def test_escape_quits(monkeypatch):
    monkeypatch.setattr(
        pygame.event,
        "get",
        lambda: [SimpleNamespace(type=pygame.KEYDOWN, key=pygame.K_ESCAPE)],
    )
    monkeypatch.setattr(pygame.key, "get_pressed", lambda: KeyState())
    handler = InputHandler()
    handler.process_events()
    assert handler.should_quit()
