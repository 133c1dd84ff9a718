from typing import List, Optional
from dataclasses import dataclass, field
import math
import random

from pygame import Vector2

from .settings import Settings, frames


@dataclass
class Laser:
    pos: Vector2
    velocity: Vector2
    dist: float = 0.0
    explode_time: int = 0

    @property
    def exploding(self) -> bool:
        return self.explode_time > 0


@dataclass
class Asteroid:
    pos: Vector2
    velocity: Vector2
    r: float
    a: float
    vert: int
    offs: List[float]

    def polygon(self) -> List[Vector2]:
        """Jittered outline used for drawing; collisions use the nominal radius"""
        points = []
        for j in range(self.vert):
            angle = self.a + j * math.pi * 2 / self.vert
            radius = self.r * self.offs[j]
            points.append(Vector2(
                self.pos.x + radius * math.cos(angle),
                self.pos.y + radius * math.sin(angle)
            ))
        return points


@dataclass
class Ship:
    pos: Vector2
    r: float
    a: float = math.pi / 2
    rot: float = 0.0
    thrust: Vector2 = field(default_factory=lambda: Vector2(0, 0))
    thrusting: bool = False
    can_shoot: bool = True
    dead: bool = False
    explode_time: int = 0
    blink_num: int = 0
    blink_time: int = 0
    lasers: List[Laser] = field(default_factory=list)

    @property
    def exploding(self) -> bool:
        return self.explode_time > 0

    @property
    def invincible(self) -> bool:
        return self.blink_num > 0

    @property
    def blink_on(self) -> bool:
        # Visible on even blink counts, so the ship shows once blinking ends
        return self.blink_num % 2 == 0

    def nose(self) -> Vector2:
        return Vector2(
            self.pos.x + 2 * self.r * math.cos(self.a),
            self.pos.y - 2 * self.r * math.sin(self.a)
        )


def new_ship(settings: Settings) -> Ship:
    return Ship(
        pos=Vector2(settings.width / 2, settings.height / 2),
        r=settings.ship_size / 2,
        a=math.pi / 2,
        blink_num=frames(settings.ship_inv_dur, 1 / settings.ship_blink_dur),
        blink_time=frames(settings.ship_blink_dur, settings.fps),
    )


def new_asteroid(x: float, y: float, r: float, level: int, settings: Settings,
                 rng: Optional[random.Random] = None) -> Asteroid:
    rng = rng or random
    lvl_mult = 1 + 0.1 * level
    max_speed = settings.roids_spd * lvl_mult / settings.fps
    velocity = Vector2(
        rng.random() * max_speed * (1 if rng.random() < 0.5 else -1),
        rng.random() * max_speed * (1 if rng.random() < 0.5 else -1)
    )
    vert = math.floor(rng.random() * (settings.roids_vert + 1) + settings.roids_vert / 2)
    jag = settings.roids_jag
    offs = [rng.random() * jag * 2 + 1 - jag for _ in range(vert)]
    return Asteroid(
        pos=Vector2(x, y),
        velocity=velocity,
        r=r,
        a=rng.random() * math.pi * 2,
        vert=vert,
        offs=offs,
    )
