"""Ship movement and the blink / explosion state machine.

The life bookkeeping that follows an explosion belongs to the game, so
`update_ship` reports back when the explosion countdown has finished.
"""
import math

from .entities import Ship
from .geometry import wrap_with_margin
from .settings import Settings, frames


def turn_rate(settings: Settings) -> float:
    """Rotation per frame in radians"""
    return settings.turn_speed / 180 * math.pi / settings.fps


def rotate_left(ship: Ship, settings: Settings) -> None:
    ship.rot = turn_rate(settings)


def rotate_right(ship: Ship, settings: Settings) -> None:
    ship.rot = -turn_rate(settings)


def stop_rotation(ship: Ship) -> None:
    ship.rot = 0.0


def apply_thrust(ship: Ship, settings: Settings) -> None:
    if ship.thrusting and not ship.dead:
        ship.thrust.x += settings.ship_thrust * math.cos(ship.a) / settings.fps
        # Screen y grows downwards
        ship.thrust.y -= settings.ship_thrust * math.sin(ship.a) / settings.fps
    else:
        ship.thrust.x -= settings.friction * ship.thrust.x / settings.fps
        ship.thrust.y -= settings.friction * ship.thrust.y / settings.fps


def explode_ship(ship: Ship, settings: Settings) -> None:
    ship.explode_time = frames(settings.ship_explode_dur, settings.fps)


def update_ship(ship: Ship, settings: Settings) -> bool:
    """Advance the ship by one frame.

    Returns True when an explosion finished on this frame and the ship
    should be replaced (or the game ended).
    """
    apply_thrust(ship, settings)

    exploded = False
    if not ship.exploding:
        if ship.blink_num > 0:
            ship.blink_time -= 1
            if ship.blink_time == 0:
                ship.blink_time = frames(settings.ship_blink_dur, settings.fps)
                ship.blink_num -= 1
        ship.a += ship.rot
        ship.pos += ship.thrust
    else:
        ship.explode_time -= 1
        exploded = ship.explode_time == 0

    wrap_with_margin(ship.pos, settings.width, settings.height, ship.r)
    return exploded
