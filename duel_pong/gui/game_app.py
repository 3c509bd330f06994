"""
Main game application with PyGame GUI
"""

import argparse
import logging
from collections.abc import Sequence

import pygame

from duel_pong.core import constants
from duel_pong.core.interfaces.renderer import RendererProtocol
from duel_pong.core.match import Match
from duel_pong.gui.audio import MIXER_BUFFER, MIXER_CHANNELS, MIXER_FREQUENCY, MIXER_SIZE
from duel_pong.gui.audio import PygameAudio
from duel_pong.gui.keyboard_input import KeyboardInput
from duel_pong.gui.pygame_renderer import PygameRenderer
from duel_pong.utils.config import KEYBOARD_LAYOUTS, GameConfig, game_config
from duel_pong.utils.config import load_config_from_file
from duel_pong.utils.keyboard_layout import auto_configure_layout, set_preferred_layout
from duel_pong.utils.keyboard_layout import show_layout_help

logger = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """The window, font or sounds could not be created"""


class PongApp:
    """Main application class for Duel Pong with PyGame GUI"""

    def __init__(self, config: GameConfig | None = None, mute: bool = False) -> None:
        """
        Initialize the application

        Raises:
            StartupError: If the display or any asset fails to load
        """
        self.config = config or game_config
        self.running = True

        try:
            pygame.mixer.pre_init(MIXER_FREQUENCY, MIXER_SIZE, MIXER_CHANNELS, MIXER_BUFFER)
            pygame.init()
            screen = pygame.display.set_mode((constants.FIELD_WIDTH, constants.FIELD_HEIGHT))
            pygame.display.set_caption(self.config.WINDOW_TITLE)

            self.renderer: RendererProtocol = PygameRenderer(screen, self.config)
            self.audio: PygameAudio | None = None
            if self.config.SOUND_ENABLED and not mute:
                self.audio = self._create_audio()
        except (pygame.error, OSError) as e:
            pygame.quit()
            raise StartupError(f"Could not start Duel Pong: {e}") from e

        self.clock = pygame.time.Clock()
        self.input = KeyboardInput(self.config.get_keyboard_layout())
        self.match = Match(audio=self.audio)

        logger.info("Duel Pong initialized (%s layout)", self.config.KEYBOARD_LAYOUT)

    def _create_audio(self) -> PygameAudio:
        return PygameAudio(
            hit_path=self.config.HIT_SOUND_PATH,
            miss_path=self.config.MISS_SOUND_PATH,
            volume=self.config.SOUND_VOLUME,
        )

    def handle_events(self) -> None:
        """Process window events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def step(self) -> None:
        """Run one frame: events, input, simulation, drawing"""
        self.handle_events()
        self.input.poll()
        self.match.update(self.input)
        self.renderer.render_frame(self.match.ball, self.match.player_a, self.match.player_b)

    def run(self) -> None:
        """Main game loop"""
        try:
            while self.running:
                self.step()
                self.clock.tick(self.config.FPS)
        finally:
            logger.info("Final score %d - %d", *self.match.score)
            self.renderer.cleanup()


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player Pong")
    parser.add_argument("--config", help="JSON configuration file to load")
    parser.add_argument(
        "--layout", choices=sorted(KEYBOARD_LAYOUTS), help="Keyboard layout (default: detect)"
    )
    parser.add_argument(
        "--save-layout", action="store_true", help="Remember --layout for future runs"
    )
    parser.add_argument("--mute", action="store_true", help="Disable sound cues")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point, returns the process exit status"""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config:
        load_config_from_file(args.config)

    if args.save_layout and not args.layout:
        logger.warning("--save-layout needs --layout, nothing saved")

    if args.layout and args.save_layout:
        set_preferred_layout(args.layout)
        logger.info("Saved %s as the preferred keyboard layout", args.layout)
    elif args.layout:
        game_config.KEYBOARD_LAYOUT = args.layout
    else:
        auto_configure_layout()
    logger.info("\n%s", show_layout_help())

    try:
        app = PongApp(game_config, mute=args.mute)
    except StartupError as e:
        logger.error("%s", e)
        return 1

    app.run()
    return 0
