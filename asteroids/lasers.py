import math

from pygame import Vector2

from .entities import Laser, Ship
from .geometry import wrap_point
from .settings import Settings


def shoot_laser(ship: Ship, settings: Settings) -> bool:
    """Fire from the ship's nose if armed and under the cap.

    Every fire request disarms the ship until the trigger is released.
    """
    fired = False
    if ship.can_shoot and len(ship.lasers) < settings.laser_max:
        ship.lasers.append(Laser(
            pos=ship.nose(),
            velocity=Vector2(
                settings.laser_spd * math.cos(ship.a) / settings.fps,
                -settings.laser_spd * math.sin(ship.a) / settings.fps
            ),
        ))
        fired = True
    ship.can_shoot = False
    return fired


def update_lasers(ship: Ship, settings: Settings) -> None:
    max_dist = settings.laser_dist * settings.width
    for i in range(len(ship.lasers) - 1, -1, -1):
        laser = ship.lasers[i]

        if laser.dist > max_dist:
            del ship.lasers[i]
            continue

        if laser.explode_time > 0:
            laser.explode_time -= 1
            if laser.explode_time == 0:
                del ship.lasers[i]
                continue
        else:
            laser.pos += laser.velocity
            laser.dist += laser.velocity.length()

        wrap_point(laser.pos, settings.width, settings.height)
