from typing import List
from dataclasses import dataclass, field

from .entities import Asteroid, Ship
from .settings import Settings


@dataclass
class GameState:
    """Everything the simulation mutates, and everything the renderer reads"""
    settings: Settings
    ship: Ship
    level: int = 0
    lives: int = 0
    score: int = 0
    high_score: int = 0
    asteroids: List[Asteroid] = field(default_factory=list)
    roids_total: int = 0
    roids_left: int = 0
    text: str = ''
    text_alpha: float = 0.0
