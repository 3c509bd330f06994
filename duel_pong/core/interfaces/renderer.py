"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import TYPE_CHECKING
from typing import Protocol

if TYPE_CHECKING:
    from duel_pong.core.entities import Ball
    from duel_pong.core.entities import Player


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    A renderer is a pure consumer of the match state: it reads paddle and
    ball positions plus scores and never mutates them.
    """

    def render_frame(self, ball: "Ball", player_a: "Player", player_b: "Player") -> None:
        """
        Render a single frame of the game.

        Args:
            ball: The ball
            player_a: Left player
            player_b: Right player
        """
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
