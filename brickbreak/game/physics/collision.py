"""Collision detection and response for Brick Break.

Handles ball-wall, ball-paddle, and ball-brick collisions. All checks
are axis-aligned bounding-box comparisons.
"""

from typing import Literal, Optional, Tuple, TYPE_CHECKING

from brickbreak.logging import get_logger

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle
    from ..entities.brick import Brick

log = get_logger('physics')

Direction = Literal["top", "bottom", "left", "right"]


def _bounce_axis(pos: float, velocity: float, limit: float) -> Tuple[float, float, bool]:
    """Clamp one axis to [0, limit], reversing velocity when clamped."""
    if pos < 0:
        return 0.0, -velocity, True
    if pos > limit:
        return limit, -velocity, True
    return pos, velocity, False


def bounce_off_walls(
    ball: 'Ball',
    screen_width: float,
    screen_height: float,
) -> Tuple['Ball', bool]:
    """Keep the ball on screen, reflecting it off any wall it crossed.

    Each axis is handled independently, so a corner hit reverses both
    velocity components. All four walls reflect; nothing is lost off
    the bottom.

    Args:
        ball: Ball after moving this frame
        screen_width: Screen width in pixels
        screen_height: Screen height in pixels

    Returns:
        Tuple of (updated ball, True if any wall was hit)
    """
    x, vx, hit_x = _bounce_axis(ball.x, ball.vx, screen_width - ball.width)
    y, vy, hit_y = _bounce_axis(ball.y, ball.vy, screen_height - ball.height)

    if not (hit_x or hit_y):
        return ball, False

    log.trace("Wall bounce at (%.1f, %.1f)", x, y)
    return ball.set_position(x, y).with_velocity(vx, vy), True


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if ball collides with paddle.

    Only returns True if ball is moving downward (to prevent
    multiple bounces when ball is inside paddle).

    Args:
        ball: Ball to check
        paddle: Paddle to check against

    Returns:
        True if ball hits paddle
    """
    if ball.vy <= 0:
        return False
    return ball.rect.intersects(paddle.rect)


def resolve_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> 'Ball':
    """Rest the ball on the paddle's top edge and send it upward."""
    return ball.set_position(ball.x, paddle.y - ball.height).with_velocity(ball.vx, -abs(ball.vy))


def check_brick_collision(ball: 'Ball', brick: 'Brick') -> bool:
    """Check if ball collides with an active brick."""
    if not brick.is_active:
        return False
    return ball.rect.intersects(brick.rect)


def get_collision_direction(ball: 'Ball', brick: 'Brick') -> Optional[Direction]:
    """Determine which side of the brick the ball hit.

    Uses the axis with the smaller penetration depth.

    Args:
        ball: Ball that hit the brick
        brick: Brick that was hit

    Returns:
        Side of the brick that was hit, or None if no collision
    """
    if not check_brick_collision(ball, brick):
        return None

    dx = ball.center_x - brick.center_x
    dy = ball.center_y - brick.center_y

    overlap_x = (brick.width + ball.width) / 2 - abs(dx)
    overlap_y = (brick.height + ball.height) / 2 - abs(dy)

    if overlap_x < overlap_y:
        return "right" if dx > 0 else "left"
    return "bottom" if dy > 0 else "top"


def resolve_brick_collision(ball: 'Ball', direction: Direction) -> 'Ball':
    """Point the ball away from the side of the brick it hit.

    Sets the sign of the matching velocity component rather than
    negating it; a ball still overlapping next frame keeps moving away.

    Args:
        ball: Ball that hit the brick
        direction: Side of the brick that was hit

    Returns:
        Ball with updated velocity
    """
    if direction == "top":
        return ball.with_velocity(ball.vx, -abs(ball.vy))
    if direction == "bottom":
        return ball.with_velocity(ball.vx, abs(ball.vy))
    if direction == "left":
        return ball.with_velocity(-abs(ball.vx), ball.vy)
    return ball.with_velocity(abs(ball.vx), ball.vy)
