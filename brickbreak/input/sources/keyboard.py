"""
Keyboard Input Source - Arrow keys move the paddle.

Held keys are sampled from pygame's key state each update, so a key
held across frames keeps the paddle moving. Key presses that map to
actions are queued until the next poll.
"""
from typing import Dict, List, Optional

import pygame

from brickbreak.input.input_event import InputState, KeyAction
from brickbreak.input.sources.base import InputSource
from brickbreak.logging import get_logger

log = get_logger('input')

DEFAULT_ACTION_KEYS: Dict[int, KeyAction] = {
    pygame.K_p: KeyAction.PAUSE,
    pygame.K_r: KeyAction.RESET,
    pygame.K_ESCAPE: KeyAction.QUIT,
}


class KeyboardInputSource(InputSource):
    """Keyboard input source.

    Left/right arrows are held-key movement; P, R and ESC trigger
    pause, reset and quit. Closing the window also queues QUIT.
    """

    def __init__(
        self,
        left_key: int = pygame.K_LEFT,
        right_key: int = pygame.K_RIGHT,
        action_keys: Optional[Dict[int, KeyAction]] = None,
    ):
        self._left_key = left_key
        self._right_key = right_key
        self._action_keys = action_keys if action_keys is not None else DEFAULT_ACTION_KEYS
        self._left_pressed = False
        self._right_pressed = False
        self._actions: List[KeyAction] = []

    def poll_state(self) -> InputState:
        """Get input for this frame and clear queued actions."""
        state = InputState(
            left_pressed=self._left_pressed,
            right_pressed=self._right_pressed,
            actions=tuple(self._actions),
        )
        self._actions.clear()
        return state

    def update(self, dt: float) -> None:
        """Process pygame events and sample held keys."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._actions.append(KeyAction.QUIT)
            elif event.type == pygame.KEYDOWN:
                action = self._action_keys.get(event.key)
                if action is not None:
                    log.debug("Key action %s", action.value)
                    self._actions.append(action)

        pressed = pygame.key.get_pressed()
        self._left_pressed = bool(pressed[self._left_key])
        self._right_pressed = bool(pressed[self._right_key])
