"""
Tests for input state and the keyboard input source.
"""

from collections import defaultdict
from dataclasses import FrozenInstanceError

import pygame
import pytest

from brickbreak.input import InputState, KeyAction
from brickbreak.input.sources import InputSource, KeyboardInputSource


def _pressed(*keys):
    state = defaultdict(bool)
    for key in keys:
        state[key] = True
    return state


class TestInputState:

    def test_defaults(self):
        state = InputState()
        assert not state.left_pressed
        assert not state.right_pressed
        assert state.actions == ()

    def test_frozen(self):
        state = InputState()
        with pytest.raises(FrozenInstanceError):
            state.left_pressed = True  # type: ignore

    def test_has_action(self):
        state = InputState(actions=(KeyAction.PAUSE,))
        assert state.has_action(KeyAction.PAUSE)
        assert not state.has_action(KeyAction.QUIT)


class TestKeyboardInputSource:

    def test_cannot_instantiate_base(self):
        with pytest.raises(TypeError):
            InputSource()  # type: ignore

    def test_held_keys(self, pygame_display, monkeypatch):
        monkeypatch.setattr(pygame.key, 'get_pressed', lambda: _pressed(pygame.K_LEFT))
        source = KeyboardInputSource()
        source.update(1 / 60)
        state = source.poll_state()
        assert state.left_pressed
        assert not state.right_pressed

    def test_held_keys_persist_across_polls(self, pygame_display, monkeypatch):
        monkeypatch.setattr(pygame.key, 'get_pressed',
                            lambda: _pressed(pygame.K_LEFT, pygame.K_RIGHT))
        source = KeyboardInputSource()
        source.update(1 / 60)
        source.poll_state()
        state = source.poll_state()
        assert state.left_pressed and state.right_pressed

    def test_key_actions_queued_until_poll(self, pygame_display, monkeypatch):
        monkeypatch.setattr(pygame.key, 'get_pressed', lambda: _pressed())
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p))
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r))
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))

        source = KeyboardInputSource()
        source.update(1 / 60)

        assert source.poll_state().actions == (KeyAction.PAUSE, KeyAction.RESET)
        assert source.poll_state().actions == ()

    def test_escape_and_window_close_quit(self, pygame_display, monkeypatch):
        monkeypatch.setattr(pygame.key, 'get_pressed', lambda: _pressed())
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        pygame.event.post(pygame.event.Event(pygame.QUIT))

        source = KeyboardInputSource()
        source.update(1 / 60)

        assert source.poll_state().actions == (KeyAction.QUIT, KeyAction.QUIT)

    def test_custom_bindings(self, pygame_display, monkeypatch):
        monkeypatch.setattr(pygame.key, 'get_pressed', lambda: _pressed(pygame.K_a))
        source = KeyboardInputSource(left_key=pygame.K_a, right_key=pygame.K_d)
        source.update(1 / 60)
        assert source.poll_state().left_pressed
