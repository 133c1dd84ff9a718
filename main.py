import logging
import os
import sys
from pathlib import Path

import pygame

from asteroids.audio import SoundEffects
from asteroids.controls import Intent
from asteroids.driver import FixedStepDriver
from asteroids.game import Game
from asteroids.highscore import HighScoreStore
from asteroids.render import draw_game
from asteroids.settings import Settings

# File paths
SETTINGS_FILE = Path(__file__).parent / "settings.json"
HIGH_SCORE_FILE = Path(__file__).parent / "high_score.json"

KEY_DOWN_INTENTS = {
    pygame.K_SPACE: Intent.FIRE,
    pygame.K_LEFT: Intent.ROTATE_LEFT,
    pygame.K_RIGHT: Intent.ROTATE_RIGHT,
    pygame.K_UP: Intent.THRUST_START,
}

KEY_UP_INTENTS = {
    pygame.K_SPACE: Intent.FIRE_RELEASE,
    pygame.K_LEFT: Intent.ROTATE_STOP,
    pygame.K_RIGHT: Intent.ROTATE_STOP,
    pygame.K_UP: Intent.THRUST_STOP,
}

logger = logging.getLogger("asteroids")


def setup_logging() -> None:
    level = logging.DEBUG if os.environ.get("ASTEROIDS_DEBUG") == "1" else logging.INFO
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[logging.StreamHandler(sys.stdout)]
        )


def run(settings: Settings) -> None:
    pygame.init()
    screen = pygame.display.set_mode((settings.width, settings.height))
    pygame.display.set_caption("Asteroids")
    clock = pygame.time.Clock()

    game = Game(settings, SoundEffects(settings), HighScoreStore(HIGH_SCORE_FILE))
    driver = FixedStepDriver(game)

    running = True
    while running:
        elapsed = clock.tick(settings.fps) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_m:
                    game.sound_effects.music.toggle()
                elif event.key == pygame.K_s:
                    game.sound_effects.toggle_sound()
                elif event.key in KEY_DOWN_INTENTS:
                    game.push(KEY_DOWN_INTENTS[event.key])
            elif event.type == pygame.KEYUP and event.key in KEY_UP_INTENTS:
                game.push(KEY_UP_INTENTS[event.key])

        if driver.advance(elapsed):
            draw_game(screen, game.state)
            pygame.display.flip()

    game.sound_effects.stop_all_sounds()
    logger.info("Quit after %d frames", driver.frame_count)
    pygame.quit()


def main() -> None:
    setup_logging()
    run(Settings.load(SETTINGS_FILE))


if __name__ == "__main__":
    main()
