from typing import List, Optional
import logging
import random

from .entities import Asteroid, new_asteroid
from .geometry import dist_between_points, wrap_with_margin
from .settings import Settings
from .state import GameState

logger = logging.getLogger(__name__)

# Only feeds the music tempo; the real number of asteroids a level produces differs
ROIDS_TOTAL_FACTOR = 7


def create_asteroid_belt(state: GameState, rng: Optional[random.Random] = None) -> None:
    rng = rng or random
    settings = state.settings
    ship = state.ship
    count = settings.roid_num + state.level
    state.asteroids = []
    state.roids_total = count * ROIDS_TOTAL_FACTOR
    state.roids_left = state.roids_total

    # Keep new asteroids clear of the ship
    min_dist = settings.roid_large * 2 + ship.r
    for _ in range(count):
        while True:
            x = int(rng.random() * settings.width)
            y = int(rng.random() * settings.height)
            if dist_between_points(ship.pos.x, ship.pos.y, x, y) >= min_dist:
                break
        state.asteroids.append(new_asteroid(x, y, settings.roid_large, state.level, settings, rng))
    logger.debug("Level %d belt: %d asteroid(s)", state.level + 1, count)


def child_radius(r: float, settings: Settings) -> Optional[int]:
    """Radius of the pieces an asteroid breaks into, or None if it just vanishes"""
    if r == settings.roid_large:
        return settings.roid_medium
    if r == settings.roid_medium:
        return settings.roid_small
    return None


def tier_points(r: float, settings: Settings) -> int:
    if r == settings.roid_large:
        return settings.roids_pts_lge
    if r == settings.roid_medium:
        return settings.roids_pts_med
    return settings.roids_pts_sml


def split_asteroid(asteroid: Asteroid, level: int, settings: Settings,
                   rng: Optional[random.Random] = None) -> List[Asteroid]:
    r = child_radius(asteroid.r, settings)
    if r is None:
        return []
    x, y = asteroid.pos.x, asteroid.pos.y
    return [new_asteroid(x, y, r, level, settings, rng) for _ in range(2)]


def asteroid_ratio(state: GameState) -> float:
    if state.roids_left == 0 or state.roids_total == 0:
        return 1.0
    return state.roids_left / state.roids_total


def update_asteroids(asteroids: List[Asteroid], settings: Settings) -> None:
    for asteroid in asteroids:
        asteroid.pos += asteroid.velocity
        wrap_with_margin(asteroid.pos, settings.width, settings.height, asteroid.r)
