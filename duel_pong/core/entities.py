"""
Duel Pong game entities: ball and players
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from duel_pong.core import constants
from duel_pong.core.clock import MonotonicClock
from duel_pong.core.interfaces.clock import Clock


class Collision(Enum):
    """Outcome of a single ball update"""

    NONE = "none"
    HIT = "hit"
    MISS = "miss"


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class Player:
    """
    Player paddle and score.

    ``y`` is the top edge of the paddle, always kept within
    [PADDLE_MIN_Y, PADDLE_MAX_Y].
    """

    def __init__(self, y: float = 0.0, score: int = 0):
        self.y = y
        self.score = score

    def move_up(self) -> None:
        """Moves the paddle one step up, stopping at the top edge"""
        self.y = max(constants.PADDLE_MIN_Y, self.y - constants.PADDLE_SPEED)

    def move_down(self) -> None:
        """Moves the paddle one step down, stopping at the bottom edge"""
        self.y = min(constants.PADDLE_MAX_Y, self.y + constants.PADDLE_SPEED)

    def reset_position(self) -> None:
        """Recentres the paddle after a missed ball"""
        self.y = constants.PADDLE_RESET_Y

    def test_collision(self, ball: "Ball") -> bool:
        """
        Attempts a save: checks whether the paddle's hit-box covers the ball.

        This is not a pure query. Every True result awards the player one
        point, so call it at most once per frame for a given side.

        Args:
            ball: Ball that reached this player's side

        Returns:
            True if the ball is within [y - 10, y + 60]
        """
        hit = (
            self.y - constants.PADDLE_HITBOX_ABOVE
            <= ball.position.y
            <= self.y + constants.PADDLE_HITBOX_BELOW
        )
        if hit:
            self.score += 1
        return hit

    def get_rect(self, x: float) -> tuple[float, float, float, float]:
        """Returns the drawn rectangle (x, y, width, height) for a given column"""
        return (x, self.y + 1, constants.PADDLE_WIDTH, constants.PADDLE_HEIGHT)


class Ball:
    """
    Game ball.

    The ball is either rallying or frozen. It freezes for FREEZE_DURATION_MS
    milliseconds after creation and after every miss; callers check
    ``is_frozen()`` before calling ``update()``.
    """

    def __init__(self, clock: Clock | None = None):
        self.clock = clock or MonotonicClock()
        self.radius = constants.BALL_RADIUS
        self.position = Vector2D(constants.BALL_SPAWN_X, constants.BALL_SPAWN_Y)
        self.velocity = Vector2D(constants.BALL_SPEED, constants.BALL_SPEED)
        self.frozen_at = self.clock.now()

    def reset(self) -> None:
        """Respawns the ball at the fixed spawn point and starts a freeze"""
        self.frozen_at = self.clock.now()
        self.position = Vector2D(constants.BALL_SPAWN_X, constants.BALL_SPAWN_Y)
        self.velocity = Vector2D(constants.BALL_SPEED, constants.BALL_SPEED)

    def is_frozen(self) -> bool:
        """True while the post-point pause is still running"""
        # Whole milliseconds, so a reading taken exactly 400 ms later is not frozen
        elapsed_ms = round((self.clock.now() - self.frozen_at) * 1000)
        return elapsed_ms < constants.FREEZE_DURATION_MS

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.velocity.y = -self.velocity.y

    def bounce_horizontal(self) -> None:
        """Horizontal bounce (paddles)"""
        self.velocity.x = -self.velocity.x

    def update(self, player_a: Player, player_b: Player) -> Collision:
        """
        Advances the ball by one frame and resolves collisions.

        The position is not pulled back inside the field on a wall bounce,
        so the ball can overshoot a wall by less than one step.

        Paddle zones are plain x thresholds. They only work while
        BALL_SPEED is smaller than LEFT_PADDLE_X and the gap between
        RIGHT_PADDLE_X and the right edge.

        Args:
            player_a: Left player, defends x < LEFT_PADDLE_X
            player_b: Right player, defends x > RIGHT_PADDLE_X

        Returns:
            Collision: HIT or MISS when a paddle zone was reached, NONE otherwise
        """
        self.position += self.velocity

        if self.position.y < constants.WALL_TOP_Y or self.position.y > constants.WALL_BOTTOM_Y:
            self.bounce_vertical()

        if self.position.x < constants.LEFT_PADDLE_X:
            collision = Collision.HIT if player_a.test_collision(self) else Collision.MISS
        elif self.position.x > constants.RIGHT_PADDLE_X:
            collision = Collision.HIT if player_b.test_collision(self) else Collision.MISS
        else:
            collision = Collision.NONE

        if collision is Collision.HIT:
            self.bounce_horizontal()
        elif collision is Collision.MISS:
            self.reset()
            # Both paddles recentre, whichever side missed
            player_a.reset_position()
            player_b.reset_position()

        return collision
