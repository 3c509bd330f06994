"""
Duel Pong: two-player Pong on top of pygame
"""

__version__ = "0.1.0"
