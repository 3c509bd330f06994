"""
Match loop for Duel Pong
"""

import logging
from typing import Any

from duel_pong.core import constants
from duel_pong.core.clock import MonotonicClock
from duel_pong.core.entities import Ball, Collision, Player
from duel_pong.core.interfaces.audio import AudioSink, Cue
from duel_pong.core.interfaces.clock import Clock
from duel_pong.core.interfaces.input import Control, InputSource

logger = logging.getLogger(__name__)

COLLISION_CUES: dict[Collision, Cue | None] = {
    Collision.HIT: Cue.HIT,
    Collision.MISS: Cue.MISS,
    Collision.NONE: None,
}


class Match:
    """Owns both players and the ball and advances them once per frame"""

    def __init__(self, clock: Clock | None = None, audio: AudioSink | None = None):
        self.clock = clock or MonotonicClock()
        self.audio = audio

        self.player_a = Player()
        self.player_b = Player()
        self.ball = Ball(self.clock)

    @property
    def score(self) -> tuple[int, int]:
        return (self.player_a.score, self.player_b.score)

    def is_frozen(self) -> bool:
        """True while the pause after a miss is still running"""
        return self.ball.is_frozen()

    def update(self, controls: InputSource) -> Collision:
        """
        Runs one simulation frame.

        Frozen frames are skipped entirely: paddles and ball keep their
        positions and no input is read.

        Args:
            controls: Input state for this frame

        Returns:
            Collision: Outcome of the ball update (NONE on skipped frames)
        """
        if self.is_frozen():
            return Collision.NONE

        # Up wins when both directions are held
        if controls.is_pressed(Control.P1_UP):
            self.player_a.move_up()
        elif controls.is_pressed(Control.P1_DOWN):
            self.player_a.move_down()

        if controls.is_pressed(Control.P2_UP):
            self.player_b.move_up()
        elif controls.is_pressed(Control.P2_DOWN):
            self.player_b.move_down()

        collision = self.ball.update(self.player_a, self.player_b)

        if collision is Collision.HIT:
            logger.debug("Paddle hit, score %d - %d", *self.score)
        elif collision is Collision.MISS:
            logger.debug("Ball missed, freezing for %d ms", constants.FREEZE_DURATION_MS)

        cue = COLLISION_CUES[collision]
        if cue is not None and self.audio is not None:
            self.audio.play_cue(cue)

        return collision

    def get_game_state(self) -> dict[str, Any]:
        """Returns a snapshot of the match state"""
        return {
            "ball_position": self.ball.position.to_tuple(),
            "ball_velocity": self.ball.velocity.to_tuple(),
            "ball_speed": self.ball.velocity.magnitude(),
            "player_a_y": self.player_a.y,
            "player_b_y": self.player_b.y,
            "score": self.score,
            "frozen": self.is_frozen(),
            "field_bounds": (0, constants.FIELD_WIDTH, 0, constants.FIELD_HEIGHT),
        }
