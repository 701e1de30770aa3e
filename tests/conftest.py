"""Shared fixtures for Brick Break tests."""
import os

# Headless pygame: must be set before pygame initializes video or audio
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pygame
import pytest

from brickbreak import logging as bb_logging
from brickbreak.config import (
    default_paddle_config, default_ball_config, default_grid_config,
)
from brickbreak.game_mode import BrickBreakMode


@pytest.fixture(autouse=True)
def restore_logging_config():
    """Keep per-test logging changes from leaking."""
    saved_default = bb_logging._config['default_level']
    saved_modules = dict(bb_logging._config['module_levels'])
    bb_logging._config['default_level'] = bb_logging.LogLevel.INFO
    bb_logging._config['module_levels'].clear()
    yield
    bb_logging._config['default_level'] = saved_default
    bb_logging._config['module_levels'].clear()
    bb_logging._config['module_levels'].update(saved_modules)


@pytest.fixture
def paddle_config():
    return default_paddle_config(320, 240, 60)


@pytest.fixture
def ball_config():
    return default_ball_config(320, 240, 60)


@pytest.fixture
def grid_config():
    return default_grid_config(320, 240)


@pytest.fixture
def game():
    """Default 320x240 game with the full tiled wall."""
    return BrickBreakMode(width=320, height=240, tps=60)


@pytest.fixture
def pygame_display():
    """Initialize pygame with a tiny dummy display for event and key tests."""
    pygame.init()
    pygame.display.set_mode((1, 1))
    pygame.event.clear()
    yield
    pygame.quit()


@pytest.fixture
def write_layout(tmp_path):
    """Write a YAML layout file and return its path."""
    def _write(text: str, name: str = 'layout.yaml'):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write
