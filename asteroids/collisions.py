from typing import TYPE_CHECKING

from .geometry import dist_between_points
from .settings import frames

if TYPE_CHECKING:
    from .game import Game


def resolve_laser_hits(game: 'Game') -> None:
    """Destroy every asteroid hit by a flying laser.

    Walks both lists from the end so that removing the current asteroid and
    appending its fragments never shifts an index still to be visited. An
    asteroid is destroyed at most once per frame.
    """
    state = game.state
    settings = state.settings
    for i in range(len(state.asteroids) - 1, -1, -1):
        roid = state.asteroids[i]
        lasers = state.ship.lasers
        for j in range(len(lasers) - 1, -1, -1):
            laser = lasers[j]
            if laser.explode_time == 0 and \
                    dist_between_points(roid.pos.x, roid.pos.y, laser.pos.x, laser.pos.y) < roid.r:
                game.destroy_asteroid(i)
                laser.explode_time = frames(settings.laser_explode_dur, settings.fps)
                break


def resolve_ship_collision(game: 'Game') -> bool:
    ship = game.state.ship
    if ship.exploding or ship.invincible or ship.dead:
        return False
    for i, roid in enumerate(game.state.asteroids):
        if dist_between_points(ship.pos.x, ship.pos.y, roid.pos.x, roid.pos.y) < ship.r + roid.r:
            game.explode_ship()
            game.destroy_asteroid(i)
            return True
    return False


def resolve_collisions(game: 'Game') -> None:
    resolve_laser_hits(game)
    resolve_ship_collision(game)
