"""Brick layout building and loading.

The default wall tiles the screen width with rows of bricks. A YAML
layout file can replace it with an ASCII-art wall:

    name: Checkers
    brick_types:
      red:
        color: red
      tough:
        color: gray
        hits: 2
    layout_key:
      R: red
      T: tough
    layout: |
      RTRTRTRTRTRTRTRTRTRT
      .R.R.R.R.R.R.R.R.R.R

Characters ' ', '.', '-' and '_' leave a gap.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from brickbreak.config import BrickGridConfig
from brickbreak.logging import get_logger

from .entities.brick import Brick

log = get_logger('layout_loader')

EMPTY_CELLS = (' ', '.', '-', '_')


class LayoutLoadError(Exception):
    """Raised when a layout file cannot be read or is invalid."""


class BrickTypeConfig(BaseModel):
    """A named brick type referenced from the layout key."""
    model_config = {"frozen": True}

    color: str = "white"
    hits: int = Field(default=1, ge=1)


class LayoutConfig(BaseModel):
    """Validated contents of a layout YAML file."""
    model_config = {"frozen": True}

    name: str = "Untitled"
    description: str = ""
    brick_types: Dict[str, BrickTypeConfig] = Field(default_factory=dict)
    layout_key: Dict[str, str] = Field(default_factory=dict)
    layout: str = Field(min_length=1)
    brick_width: Optional[float] = Field(default=None, gt=0)
    brick_height: Optional[float] = Field(default=None, gt=0)
    grid_offset_x: Optional[float] = Field(default=None, ge=0)
    grid_offset_y: Optional[float] = Field(default=None, ge=0)


def build_brick_grid(grid: BrickGridConfig, screen_width: float) -> List[Brick]:
    """Tile rows of bricks across the screen width.

    Args:
        grid: Brick size, row count and offsets
        screen_width: Screen width in pixels

    Returns:
        Bricks in row-major order
    """
    if screen_width % grid.brick_width != 0:
        log.warning(
            "bricks will not tile horizontally because the screen width "
            "is not divisible by the brick width"
        )

    cols = int((screen_width - grid.offset_x) // grid.brick_width)
    bricks = []
    for row in range(grid.rows):
        color = grid.colors[row % len(grid.colors)] if grid.colors else "white"
        for col in range(cols):
            bricks.append(Brick(
                grid.offset_x + col * grid.brick_width,
                grid.offset_y + row * grid.brick_height,
                grid.brick_width,
                grid.brick_height,
                color=color,
                grid_position=(row, col),
            ))

    log.debug("Built %d x %d brick wall", grid.rows, cols)
    return bricks


class BrickLayoutLoader:
    """Loads ASCII-art brick walls from YAML files."""

    def __init__(self, grid: BrickGridConfig, screen_width: float, screen_height: float):
        """Initialize loader.

        Args:
            grid: Defaults for brick size and offsets
            screen_width: Screen width; bricks past the right edge are dropped
            screen_height: Screen height; bricks past the bottom edge are dropped
        """
        self._grid = grid
        self._screen_width = screen_width
        self._screen_height = screen_height

    def load(self, path: Union[str, Path]) -> List[Brick]:
        """Load a layout file and build its bricks.

        Args:
            path: Path to the YAML layout

        Returns:
            Bricks in row-major order

        Raises:
            LayoutLoadError: File missing, unparseable, or invalid
        """
        path = Path(path)
        if not path.is_file():
            raise LayoutLoadError(f"Layout file not found: {path}")

        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise LayoutLoadError(f"Invalid YAML in {path}: {e}") from e

        config = self.parse(data, source=path)
        log.info("Loaded layout '%s' from %s", config.name, path)
        return self.build(config)

    def parse(self, data: Any, source: Optional[Path] = None) -> LayoutConfig:
        """Validate raw layout data.

        Raises:
            LayoutLoadError: Data does not describe a valid layout
        """
        where = f" in {source}" if source else ""
        if not isinstance(data, dict):
            raise LayoutLoadError(f"Layout{where} must be a mapping")
        try:
            return LayoutConfig(**data)
        except ValidationError as e:
            raise LayoutLoadError(f"Invalid layout{where}: {e}") from e

    def build(self, config: LayoutConfig) -> List[Brick]:
        """Turn a validated layout into bricks."""
        width = config.brick_width or self._grid.brick_width
        height = config.brick_height or self._grid.brick_height
        offset_x = config.grid_offset_x if config.grid_offset_x is not None else self._grid.offset_x
        offset_y = config.grid_offset_y if config.grid_offset_y is not None else self._grid.offset_y

        bricks = []
        lines = config.layout.strip('\n').split('\n')
        for row, line in enumerate(lines):
            for col, char in enumerate(line.rstrip()):
                if char in EMPTY_CELLS:
                    continue

                type_name = config.layout_key.get(char)
                brick_type = config.brick_types.get(type_name) if type_name else None
                if brick_type is None:
                    log.warning("Unknown layout character %r at row %d, col %d", char, row, col)
                    continue

                x = offset_x + col * width
                y = offset_y + row * height
                if x + width > self._screen_width or y + height > self._screen_height:
                    log.warning("Brick at row %d, col %d extends past the screen edge", row, col)
                    continue

                bricks.append(Brick(
                    x,
                    y,
                    width,
                    height,
                    color=brick_type.color,
                    hits=brick_type.hits,
                    grid_position=(row, col),
                ))

        return bricks
