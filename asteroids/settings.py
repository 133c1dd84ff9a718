from typing import Any, Dict, Optional, Union
from dataclasses import dataclass, fields, replace
from pathlib import Path
import json
import logging
import math

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
FPS = 30
SAVE_KEY_SCORE = 'highscore'


@dataclass(frozen=True)
class Settings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    fps: int = FPS
    friction: float = 0.7  # 0 = no friction, 1 = max friction
    game_lives: int = 3
    laser_dist: float = 0.6  # fraction of field width
    laser_explode_dur: float = 0.1
    laser_max: int = 10
    laser_spd: float = 500  # pixels per second
    roids_jag: float = 0.25  # 0 = none, 1 = lots
    roids_pts_lge: int = 20
    roids_pts_med: int = 50
    roids_pts_sml: int = 100
    roid_num: int = 1
    roid_size: int = 100
    roids_spd: float = 50  # max starting speed, pixels per second
    roids_vert: int = 10
    ship_size: int = 30
    ship_blink_dur: float = 0.1
    ship_explode_dur: float = 0.3
    ship_inv_dur: float = 3
    ship_thrust: float = 5  # pixels per second per second
    turn_speed: float = 360  # degrees per second
    text_fade_time: float = 2.5
    sound_on: bool = True
    music_on: bool = True
    show_bounding: bool = False

    def __post_init__(self) -> None:
        for name in ('width', 'height', 'fps', 'laser_max'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        # New asteroids must fit somewhere this far from the centred ship
        clearance = self.roid_large * 2 + self.ship_size / 2
        if math.hypot(self.width / 2, self.height / 2) < clearance:
            raise ValueError(f"{self.width}x{self.height} field is too small to spawn asteroids "
                             f"{clearance:g} px clear of the ship")

    @property
    def roid_large(self) -> int:
        return math.ceil(self.roid_size / 2)

    @property
    def roid_medium(self) -> int:
        return math.ceil(self.roid_size / 4)

    @property
    def roid_small(self) -> int:
        return math.ceil(self.roid_size / 8)

    def with_overrides(self, overrides: Dict[str, Any]) -> 'Settings':
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(unknown)}")
        return replace(self, **overrides)

    @classmethod
    def load(cls, path: Optional[Union[str, Path]]) -> 'Settings':
        """Load settings from a JSON object of overrides; a missing file means defaults"""
        settings = cls()
        if path is None:
            return settings
        path = Path(path)
        if not path.exists():
            return settings
        with open(path, 'r') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a JSON object")
        logger.info("Loaded %d setting override(s) from %s", len(data), path)
        return settings.with_overrides(data)


def frames(seconds: float, fps: float) -> int:
    """Whole number of frames covering a duration.

    The product is rounded before taking the ceiling so that float noise
    (0.1 * 30 == 3.0000000000000004) does not add a spurious frame.
    """
    return math.ceil(round(seconds * fps, 9))
