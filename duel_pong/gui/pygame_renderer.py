"""
PyGame renderer for Duel Pong
"""

import logging

import pygame

from duel_pong.core import constants
from duel_pong.core.entities import Ball, Player
from duel_pong.utils.config import GameConfig, game_config

logger = logging.getLogger(__name__)

# Paddle columns and score label anchors
PLAYER_A_X = 1.0
PLAYER_B_X = constants.FIELD_WIDTH - constants.PADDLE_WIDTH
PLAYER_A_SCORE_POS = (290, 0)
PLAYER_B_SCORE_POS = (500, 570)


class PygameRenderer:
    """PyGame-based renderer for Duel Pong"""

    def __init__(self, screen: pygame.Surface, config: GameConfig | None = None):
        """
        Initialize the renderer on an existing display surface

        Raises:
            FileNotFoundError: If the configured font file does not exist
            pygame.error: If the font can't be loaded
        """
        self.screen = screen
        config = config or game_config

        self.background_color = config.BACKGROUND_COLOR
        self.player_a_color = config.PLAYER_A_COLOR
        self.player_b_color = config.PLAYER_B_COLOR
        self.ball_color = config.BALL_COLOR

        if config.FONT_PATH is not None:
            logger.info("Loading font %s", config.FONT_PATH)
        self.font = pygame.font.Font(config.FONT_PATH, config.FONT_SIZE)

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_paddle(self, player: Player, x: float, color: tuple[int, int, int]) -> None:
        """Draw a player paddle"""
        pygame.draw.rect(self.screen, color, pygame.Rect(player.get_rect(x)))

    def draw_ball(self, ball: Ball) -> None:
        """Draw the game ball"""
        pos = (int(ball.position.x), int(ball.position.y))
        pygame.draw.circle(self.screen, self.ball_color, pos, int(ball.radius))

    def draw_score(self, score: int, pos: tuple[int, int], color: tuple[int, int, int]) -> None:
        """Draw one player's score label"""
        text_surface = self.font.render(str(score), True, color)
        self.screen.blit(text_surface, pos)

    def render_frame(self, ball: Ball, player_a: Player, player_b: Player) -> None:
        """Render a single frame, skipping it if pygame fails to draw"""
        try:
            self.clear_screen()
            self.draw_paddle(player_a, PLAYER_A_X, self.player_a_color)
            self.draw_paddle(player_b, PLAYER_B_X, self.player_b_color)
            self.draw_ball(ball)
            self.draw_score(player_a.score, PLAYER_A_SCORE_POS, self.player_a_color)
            self.draw_score(player_b.score, PLAYER_B_SCORE_POS, self.player_b_color)
            pygame.display.flip()
        except pygame.error as e:
            logger.warning("Skipping frame, draw failed: %s", e)

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        pygame.quit()
