import math

from pygame import Vector2


def dist_between_points(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)


def wrap_with_margin(pos: Vector2, width: float, height: float, margin: float) -> None:
    """Wrap a position in place so it re-enters from the opposite edge.

    An entity is relocated once it is a full `margin` past an edge, which
    lets bodies with a radius slide completely off screen before reappearing.
    """
    if pos.x < -margin:
        pos.x = width + margin
    elif pos.x >= width + margin:
        pos.x = -margin
    if pos.y < -margin:
        pos.y = height + margin
    elif pos.y >= height + margin:
        pos.y = -margin


def wrap_point(pos: Vector2, width: float, height: float) -> None:
    # Zero margin wrap used by lasers
    if pos.x < 0:
        pos.x = width
    elif pos.x > width:
        pos.x = 0
    if pos.y < 0:
        pos.y = height
    elif pos.y > height:
        pos.y = 0
