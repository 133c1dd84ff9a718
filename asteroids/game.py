from typing import Optional
import logging
import random

from .audio import SoundEffects
from .belt import (asteroid_ratio, create_asteroid_belt, split_asteroid,
                   tier_points, update_asteroids)
from .collisions import resolve_collisions
from .controls import Intent, IntentQueue
from .entities import new_ship
from .highscore import HighScoreStore
from .lasers import shoot_laser, update_lasers
from .settings import Settings
from .ship import explode_ship, rotate_left, rotate_right, stop_rotation, update_ship
from .state import GameState

logger = logging.getLogger(__name__)


class Game:
    """Owns the game state and advances it one frame per `update` call.

    Audio and high-score persistence are injected so the simulation can run
    headless; by default it is silent and keeps the high score in memory.
    """

    def __init__(self, settings: Optional[Settings] = None,
                 sound_effects: Optional[SoundEffects] = None,
                 store: Optional[HighScoreStore] = None,
                 rng: Optional[random.Random] = None) -> None:
        self.settings = settings or Settings()
        self.sound_effects = sound_effects or SoundEffects(self.settings, synthesize=False)
        self.store = store or HighScoreStore()
        self.rng = rng or random.Random()
        self.intents = IntentQueue()
        self.state = GameState(settings=self.settings, ship=new_ship(self.settings))
        self.new_game()

    def new_game(self) -> None:
        state = self.state
        state.level = 0
        state.lives = self.settings.game_lives
        state.score = 0
        state.ship = new_ship(self.settings)
        state.high_score = self.store.load()
        logger.info("New game (high score %d)", state.high_score)
        self.new_level()

    def new_level(self) -> None:
        state = self.state
        state.text = f"Level {state.level + 1}"
        state.text_alpha = 1.0
        create_asteroid_belt(state, self.rng)
        logger.info("Starting level %d", state.level + 1)

    def destroy_asteroid(self, index: int) -> None:
        state = self.state
        roid = state.asteroids[index]

        state.asteroids.extend(split_asteroid(roid, state.level, self.settings, self.rng))
        state.score += tier_points(roid.r, self.settings)

        if state.score > state.high_score:
            state.high_score = state.score
            self.store.save(state.high_score)
            logger.debug("New high score %d", state.high_score)

        del state.asteroids[index]
        self.sound_effects.play_hit()

        state.roids_left -= 1
        self.sound_effects.music.set_asteroid_ratio(asteroid_ratio(state))

        if not state.asteroids:
            state.level += 1
            self.new_level()

    def explode_ship(self) -> None:
        explode_ship(self.state.ship, self.settings)
        self.sound_effects.play_explosion()
        logger.info("Ship destroyed on level %d, %d live(s) left",
                    self.state.level + 1, self.state.lives - 1)

    def game_over(self) -> None:
        state = self.state
        state.ship.dead = True
        state.text = 'Game Over'
        state.text_alpha = 1.0
        self.sound_effects.stop_thrust()
        logger.info("Game over: score %d, level %d", state.score, state.level + 1)

    def lose_life(self) -> None:
        state = self.state
        state.lives -= 1
        if state.lives == 0:
            self.game_over()
        else:
            state.ship = new_ship(self.settings)

    def push(self, intent: Intent) -> None:
        self.intents.push(intent)

    def handle_intent(self, intent: Intent) -> None:
        ship = self.state.ship
        if ship.dead:
            return

        if intent is Intent.FIRE:
            if shoot_laser(ship, self.settings):
                self.sound_effects.play_laser()
        elif intent is Intent.FIRE_RELEASE:
            ship.can_shoot = True
        elif intent is Intent.ROTATE_LEFT:
            rotate_left(ship, self.settings)
        elif intent is Intent.ROTATE_RIGHT:
            rotate_right(ship, self.settings)
        elif intent is Intent.ROTATE_STOP:
            stop_rotation(ship)
        elif intent is Intent.THRUST_START:
            ship.thrusting = True
        elif intent is Intent.THRUST_STOP:
            ship.thrusting = False

    def update(self) -> None:
        """Run exactly one simulation frame"""
        for intent in self.intents.drain():
            self.handle_intent(intent)

        state = self.state
        self.sound_effects.music.tick()

        if state.ship.thrusting and not state.ship.dead:
            self.sound_effects.start_thrust()
        else:
            self.sound_effects.stop_thrust()

        if update_ship(state.ship, self.settings):
            self.lose_life()

        update_lasers(state.ship, self.settings)
        update_asteroids(state.asteroids, self.settings)
        resolve_collisions(self)
        self.fade_text()

    def fade_text(self) -> None:
        state = self.state
        if state.text_alpha >= 0:
            state.text_alpha -= 1.0 / self.settings.text_fade_time / self.settings.fps
        elif state.ship.dead:
            # Game over message has faded out
            self.new_game()
