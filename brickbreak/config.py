"""Configuration for Brick Break.

Contains screen dimensions, tick rate, entity sizes and speeds, and
color definitions. Screen values can be overridden from the environment
or a .env file beside this module.

Entity sizes are fractions of the logical screen. Speeds are given in
pixels per tick and converted to pixels per second, since entities
integrate with a delta time in seconds.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple

from dotenv import load_dotenv

# Load .env from package directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Logical screen (window is scaled up from this)
SCREEN_WIDTH: int = _get_int('BRICKBREAK_SCREEN_WIDTH', 320)
SCREEN_HEIGHT: int = _get_int('BRICKBREAK_SCREEN_HEIGHT', 240)
WINDOW_SCALE: int = _get_int('BRICKBREAK_WINDOW_SCALE', 2)
WINDOW_TITLE: str = "Brick Break"

# Smallest logical size where every derived entity dimension is nonzero
MIN_SCREEN_SIZE: int = 40

# Update rate
TICKS_PER_SECOND: int = _get_int('BRICKBREAK_TPS', 60)
MAX_FRAME_DT: float = _get_float('BRICKBREAK_MAX_FRAME_DT', 0.05)

# Brick wall defaults
BRICK_ROWS: int = 5
BRICK_TOP_OFFSET_ROWS: int = 2  # Empty brick-heights above the wall
BRICK_ROW_COLORS: Tuple[str, ...] = ('red', 'orange', 'yellow', 'green', 'blue')

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (0, 0, 0)
ENTITY_COLOR: Tuple[int, int, int] = (255, 255, 255)

BRICK_COLORS: Dict[str, Tuple[int, int, int]] = {
    'white': (255, 255, 255),
    'red': (255, 100, 100),
    'orange': (255, 180, 100),
    'yellow': (255, 255, 100),
    'green': (100, 255, 100),
    'blue': (100, 100, 255),
    'purple': (200, 100, 255),
    'cyan': (100, 255, 255),
    'gray': (150, 150, 150),
}


def _check_screen_size(screen_width: int, screen_height: int) -> None:
    """Raise ValueError if the screen is too small for nonzero entity sizes."""
    if screen_width < MIN_SCREEN_SIZE or screen_height < MIN_SCREEN_SIZE:
        raise ValueError(
            f"Screen {screen_width}x{screen_height} is too small, "
            f"both dimensions must be at least {MIN_SCREEN_SIZE}"
        )


@dataclass
class PaddleConfig:
    """Paddle size and speed."""

    width: float
    height: float
    speed: float  # pixels/second


@dataclass
class BallConfig:
    """Ball size and initial velocity."""

    width: float
    height: float
    speed_x: float  # pixels/second
    speed_y: float  # pixels/second


@dataclass
class BrickGridConfig:
    """Brick size and placement of the default wall."""

    brick_width: float
    brick_height: float
    rows: int = BRICK_ROWS
    offset_x: float = 0.0
    offset_y: float = 0.0
    colors: Tuple[str, ...] = BRICK_ROW_COLORS


def default_paddle_config(
    screen_width: int = SCREEN_WIDTH,
    screen_height: int = SCREEN_HEIGHT,
    tps: int = TICKS_PER_SECOND,
) -> PaddleConfig:
    """Paddle: 1/15 of the width, 1/30 of the height, width/100 px per tick."""
    _check_screen_size(screen_width, screen_height)
    return PaddleConfig(
        width=float(screen_width // 15),
        height=float(screen_height // 30),
        speed=float((screen_width // 100) * tps),
    )


def default_ball_config(
    screen_width: int = SCREEN_WIDTH,
    screen_height: int = SCREEN_HEIGHT,
    tps: int = TICKS_PER_SECOND,
) -> BallConfig:
    """Ball: 1/40 of each dimension, width/150 px per tick on both axes."""
    _check_screen_size(screen_width, screen_height)
    speed = float((screen_width // 150) * tps)
    return BallConfig(
        width=float(screen_width // 40),
        height=float(screen_height // 40),
        speed_x=speed,
        speed_y=speed,
    )


def default_grid_config(
    screen_width: int = SCREEN_WIDTH,
    screen_height: int = SCREEN_HEIGHT,
) -> BrickGridConfig:
    """Brick: 1/20 of the width, 1/30 of the height."""
    _check_screen_size(screen_width, screen_height)
    brick_height = float(screen_height // 30)
    return BrickGridConfig(
        brick_width=float(screen_width // 20),
        brick_height=brick_height,
        offset_y=brick_height * BRICK_TOP_OFFSET_ROWS,
    )
