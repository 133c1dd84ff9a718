from typing import Dict, Tuple
import math

import pygame
from pygame import Surface

from .entities import Ship
from .state import GameState

# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
DARK_RED = (139, 0, 0)
ORANGE = (255, 165, 0)
ORANGE_RED = (255, 69, 0)
YELLOW = (255, 255, 0)
SALMON = (250, 128, 114)
PINK = (255, 192, 203)
SLATE_GRAY = (112, 128, 144)
LIME = (0, 255, 0)

TEXT_SIZE = 40

_fonts: Dict[int, pygame.font.Font] = {}


def get_font(size: int) -> pygame.font.Font:
    if size not in _fonts:
        if not pygame.font.get_init():
            pygame.font.init()
        _fonts[size] = pygame.font.SysFont('dejavusansmono', size)
    return _fonts[size]


def draw_ship(surface: Surface, x: float, y: float, a: float, r: float,
              size: int, color: Tuple[int, int, int] = WHITE) -> None:
    points = [
        (x + 2 * r * math.cos(a), y - 2 * r * math.sin(a)),  # nose
        (x - r * (2 / 3 * math.cos(a) + math.sin(a)),
         y + r * (2 / 3 * math.sin(a) - math.cos(a))),  # rear left
        (x - r * (2 / 3 * math.cos(a) - math.sin(a)),
         y + r * (2 / 3 * math.sin(a) + math.cos(a))),  # rear right
    ]
    pygame.draw.polygon(surface, color, points, max(1, round(size / 20)))


def draw_thruster(surface: Surface, ship: Ship, size: int) -> None:
    x, y, a, r = ship.pos.x, ship.pos.y, ship.a, ship.r
    points = [
        (x - r * (2 / 3 * math.cos(a) + 0.5 * math.sin(a)),
         y + r * (2 / 3 * math.sin(a) - 0.5 * math.cos(a))),
        (x - r * 2 * math.cos(a), y + r * 2 * math.sin(a)),
        (x - r * (2 / 3 * math.cos(a) - 0.5 * math.sin(a)),
         y + r * (2 / 3 * math.sin(a) + 0.5 * math.cos(a))),
    ]
    pygame.draw.polygon(surface, RED, points)
    pygame.draw.polygon(surface, YELLOW, points, max(1, round(size / 10)))


def draw_explosion(surface: Surface, pos: Tuple[float, float], r: float) -> None:
    for color, scale in ((DARK_RED, 1.7), (RED, 1.4), (ORANGE, 1.1), (YELLOW, 0.8), (WHITE, 0.5)):
        pygame.draw.circle(surface, color, pos, r * scale)


def draw_text(surface: Surface, text: str, alpha: float) -> None:
    rendered = get_font(TEXT_SIZE).render(text, True, WHITE)
    rendered.set_alpha(int(255 * max(0.0, min(alpha, 1.0))))
    rect = rendered.get_rect(center=(surface.get_width() / 2, surface.get_height() * 0.75))
    surface.blit(rendered, rect)


def draw_ui(surface: Surface, state: GameState) -> None:
    size = state.settings.ship_size
    exploding = state.ship.exploding

    # Lives, the one being lost shown in red
    for i in range(state.lives):
        color = RED if exploding and i == state.lives - 1 else WHITE
        draw_ship(surface, size + i * size * 1.2, size, 0.5 * math.pi, size / 2, size, color)

    score_text = get_font(TEXT_SIZE).render(str(state.score), True, WHITE)
    score_rect = score_text.get_rect(midright=(surface.get_width() - size / 2, size * 1.2))
    surface.blit(score_text, score_rect)

    high_text = get_font(int(TEXT_SIZE * 0.75)).render(f"TOP: {state.high_score}", True, WHITE)
    high_rect = high_text.get_rect(center=(surface.get_width() / 2, size * 1.2))
    surface.blit(high_text, high_rect)


def draw_game(surface: Surface, state: GameState) -> None:
    settings = state.settings
    ship = state.ship
    size = settings.ship_size
    surface.fill(BLACK)

    if not ship.exploding:
        if ship.blink_on and not ship.dead:
            if ship.thrusting:
                draw_thruster(surface, ship, size)
            draw_ship(surface, ship.pos.x, ship.pos.y, ship.a, ship.r, size)
    else:
        draw_explosion(surface, ship.pos, ship.r)

    if settings.show_bounding:
        pygame.draw.circle(surface, LIME, ship.pos, ship.r, 1)

    for roid in state.asteroids:
        pygame.draw.polygon(surface, SLATE_GRAY, roid.polygon(), max(1, round(size / 20)))
        if settings.show_bounding:
            pygame.draw.circle(surface, LIME, roid.pos, roid.r, 1)

    for laser in ship.lasers:
        if not laser.exploding:
            pygame.draw.circle(surface, SALMON, laser.pos, size / 15)
        else:
            pygame.draw.circle(surface, ORANGE_RED, laser.pos, ship.r * 0.75)
            pygame.draw.circle(surface, SALMON, laser.pos, ship.r * 0.5)
            pygame.draw.circle(surface, PINK, laser.pos, ship.r * 0.25)

    if state.text_alpha >= 0:
        draw_text(surface, state.text, state.text_alpha)

    draw_ui(surface, state)
