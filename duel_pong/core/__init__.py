"""
Core module of Duel Pong game
"""

from duel_pong.core.entities import Ball
from duel_pong.core.entities import Collision
from duel_pong.core.entities import Player
from duel_pong.core.entities import Vector2D
from duel_pong.core.match import Match

__all__ = [
    "Ball",
    "Collision",
    "Match",
    "Player",
    "Vector2D",
]
