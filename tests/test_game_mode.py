"""
Tests for BrickBreakMode: the per-frame update loop, input handling,
win detection, reset and rendering.
"""

import pygame
import pytest

from brickbreak.base_game import BaseGame
from brickbreak.game.entities import Ball
from brickbreak.game.layout_loader import LayoutLoadError
from brickbreak.game_mode import (
    BOUNCE_BRICK, BOUNCE_PADDLE, BOUNCE_WALL, BrickBreakMode,
)
from brickbreak.game_state import GameState
from brickbreak.input import InputState, KeyAction

DT = 1 / 60

SINGLE_BRICK = (
    "brick_types: {a: {}}\n"
    "layout_key: {A: a}\n"
    "layout: A\n"
)


class TestSetup:

    def test_is_base_game(self, game):
        assert isinstance(game, BaseGame)

    def test_initial_entities(self, game):
        assert game.state == GameState.PLAYING
        assert (game.paddle.x, game.paddle.y) == (0.0, 232.0)
        assert (game.ball.x, game.ball.y) == (160.0, 120.0)
        assert len(game.bricks) == 100
        assert game.last_bounce is None

    def test_layout_file(self, write_layout):
        game = BrickBreakMode(layout=write_layout(SINGLE_BRICK))
        assert len(game.bricks) == 1

    def test_layout_bricks_stay_on_screen(self, write_layout):
        game = BrickBreakMode(layout=write_layout(
            "brick_types: {a: {}}\n"
            "layout_key: {A: a}\n"
            "layout: |\n" + "  A\n" * 30
        ))
        assert game.bricks
        assert all(b.rect.bottom <= 240.0 for b in game.bricks)

    def test_screen_too_small_raises(self):
        with pytest.raises(ValueError, match="too small"):
            BrickBreakMode(width=19, height=240)

    def test_bad_layout_raises(self, tmp_path):
        with pytest.raises(LayoutLoadError):
            BrickBreakMode(layout=tmp_path / 'missing.yaml')

    def test_arguments_declared(self):
        names = [arg['name'] for arg in BrickBreakMode.ARGUMENTS]
        assert names == ['--layout', '--skin', '--monochrome']
        assert BrickBreakMode.NAME == "Brick Break"


class TestUpdate:

    def test_ball_moves_each_frame(self, game):
        game.update(DT)
        assert game.ball.x == pytest.approx(162.0)
        assert game.ball.y == pytest.approx(122.0)
        assert game.last_bounce is None

    def test_paddle_follows_held_key(self, game):
        game.handle_input(InputState(right_pressed=True))
        game.update(DT)
        assert game.paddle.x == pytest.approx(3.0)

        game.handle_input(InputState())
        game.update(DT)
        assert game.paddle.x == pytest.approx(3.0)

    def test_wall_bounce(self, game):
        game._ball = Ball(8, 6, 311.0, 100.0, 120.0, 120.0)
        game.update(DT)
        assert game.ball.x == 312.0
        assert game.ball.vx == -120.0
        assert game.last_bounce == BOUNCE_WALL

    def test_paddle_bounce(self, game):
        game._ball = Ball(8, 6, 5.0, 225.0, 120.0, 120.0)
        game.update(DT)
        assert game.ball.vy == -120.0
        assert game.ball.y == 226.0
        assert game.last_bounce == BOUNCE_PADDLE

    def test_brick_destroyed_on_contact(self, game):
        game._ball = Ball(8, 6, 4.0, 57.0, 0.0, -120.0)
        game.update(DT)

        assert len(game.bricks) == 99
        assert (4, 0) not in [b.grid_position for b in game.bricks]
        assert game.ball.vy == 120.0
        assert game.last_bounce == BOUNCE_BRICK

    def test_one_brick_per_frame(self, game):
        # Straddles columns 0 and 1 of the bottom row
        game._ball = Ball(8, 6, 12.0, 57.0, 0.0, -120.0)
        game.update(DT)
        assert len(game.bricks) == 99

    def test_tough_brick_survives_first_hit(self, write_layout):
        game = BrickBreakMode(layout=write_layout(
            "brick_types: {t: {hits: 2}}\n"
            "layout_key: {T: t}\n"
            "layout: T\n"
        ))
        game._ball = Ball(8, 6, 4.0, 25.0, 0.0, -120.0)
        game.update(DT)
        assert len(game.bricks) == 1
        assert game.bricks[0].hits_remaining == 1

    def test_clearing_wall_wins(self, write_layout):
        game = BrickBreakMode(layout=write_layout(SINGLE_BRICK))
        game._ball = Ball(8, 6, 4.0, 25.0, 0.0, -120.0)
        game.update(DT)

        assert game.bricks == []
        assert game.state == GameState.WON

        frozen = game.ball
        game.update(DT)
        assert game.ball is frozen

    def test_empty_layout_never_wins(self, write_layout):
        game = BrickBreakMode(layout=write_layout(
            "layout_key: {}\n"
            "layout: '....'\n"
        ))
        game.update(DT)
        assert game.state == GameState.PLAYING


class TestInputActions:

    def test_pause_freezes_update(self, game):
        game.handle_input(InputState(actions=(KeyAction.PAUSE,)))
        assert game.state == GameState.PAUSED

        ball = game.ball
        game.update(DT)
        assert game.ball is ball

    def test_pause_toggles_back(self, game):
        game.handle_input(InputState(actions=(KeyAction.PAUSE,)))
        game.handle_input(InputState(actions=(KeyAction.PAUSE,)))
        assert game.state == GameState.PLAYING

    def test_pause_ignored_after_win(self, write_layout):
        game = BrickBreakMode(layout=write_layout(SINGLE_BRICK))
        game._ball = Ball(8, 6, 4.0, 25.0, 0.0, -120.0)
        game.update(DT)
        game.handle_input(InputState(actions=(KeyAction.PAUSE,)))
        assert game.state == GameState.WON

    def test_reset_restores_everything(self, game):
        game._ball = Ball(8, 6, 4.0, 57.0, 0.0, -120.0)
        game.handle_input(InputState(right_pressed=True))
        game.update(DT)
        game.handle_input(InputState(actions=(KeyAction.PAUSE,)))

        game.handle_input(InputState(actions=(KeyAction.RESET,)))

        assert game.state == GameState.PLAYING
        assert len(game.bricks) == 100
        assert (game.ball.x, game.ball.y) == (160.0, 120.0)
        assert game.paddle.x == 0.0

    def test_quit_is_left_to_caller(self, game):
        game.handle_input(InputState(actions=(KeyAction.QUIT,)))
        assert game.state == GameState.PLAYING


class TestRender:

    @pytest.fixture
    def screen(self):
        return pygame.Surface((320, 240))

    def test_draws_entities(self, game, screen):
        game.render(screen)
        white = (255, 255, 255)
        assert tuple(screen.get_at((5, 235)))[:3] == white      # paddle
        assert tuple(screen.get_at((163, 122)))[:3] == white    # ball
        assert tuple(screen.get_at((5, 20)))[:3] == (255, 100, 100)  # red top row
        assert tuple(screen.get_at((200, 200)))[:3] == (0, 0, 0)

    def test_monochrome_bricks(self, screen):
        game = BrickBreakMode(monochrome=True)
        game.render(screen)
        assert tuple(screen.get_at((5, 20)))[:3] == (255, 255, 255)

    def test_destroyed_brick_not_drawn(self, game, screen):
        game._ball = Ball(8, 6, 4.0, 57.0, 0.0, -120.0)
        game.update(DT)
        game._ball = Ball(8, 6, 160.0, 120.0)
        game.render(screen)
        assert tuple(screen.get_at((8, 52)))[:3] == (0, 0, 0)

    @staticmethod
    def _lit_pixels_at_center(screen):
        """Count non-background pixels in a band around the screen center."""
        return sum(
            1
            for x in range(100, 220)
            for y in range(100, 140)
            if tuple(screen.get_at((x, y)))[:3] != (0, 0, 0)
        )

    def test_no_overlay_while_playing(self, game, screen):
        game._ball = Ball(8, 6, 10.0, 180.0)
        game.render(screen)
        assert self._lit_pixels_at_center(screen) == 0

    def test_paused_overlay_renders(self, game, screen):
        game._ball = Ball(8, 6, 10.0, 180.0)
        game.toggle_pause()
        game.render(screen)
        assert self._lit_pixels_at_center(screen) > 0

    def test_cleared_overlay_renders(self, write_layout, screen):
        game = BrickBreakMode(layout=write_layout(SINGLE_BRICK))
        game._bricks = []
        game.update(DT)
        assert game.state == GameState.WON

        game._ball = Ball(8, 6, 10.0, 180.0)
        game.render(screen)
        assert self._lit_pixels_at_center(screen) > 0
