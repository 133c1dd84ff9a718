from pygame import Vector2
import pytest

from asteroids.collisions import resolve_collisions, resolve_laser_hits, resolve_ship_collision
from asteroids.entities import Laser, new_asteroid


def still_asteroid(game, x, y, r):
    roid = new_asteroid(x, y, r, 0, game.settings, game.rng)
    roid.velocity = Vector2(0, 0)
    return roid


def test_laser_splits_large_asteroid(game):
    state = game.state
    state.asteroids = [still_asteroid(game, 100, 100, 50)]
    laser = Laser(Vector2(100, 100), Vector2(0, 0))
    state.ship.lasers = [laser]

    resolve_laser_hits(game)

    assert len(state.asteroids) == 2
    for child in state.asteroids:
        assert child.r == 25
        assert child.pos == Vector2(100, 100)
        assert child.velocity != Vector2(0, 0)
    assert state.score == 20
    assert laser.explode_time > 0


def test_asteroid_destroyed_once_per_frame(game):
    state = game.state
    state.asteroids = [still_asteroid(game, 100, 100, 50)]
    state.ship.lasers = [Laser(Vector2(100 + dx, 100), Vector2(0, 0)) for dx in (0, 5, 10)]

    resolve_laser_hits(game)

    assert len(state.asteroids) == 2
    assert state.score == 20
    assert [laser.exploding for laser in state.ship.lasers] == [False, False, True]


def test_laser_is_spent_after_first_hit(game):
    # The exploding laser no longer counts against the remaining asteroids
    state = game.state
    state.asteroids = [still_asteroid(game, 100, 100, 13), still_asteroid(game, 105, 100, 13),
                       still_asteroid(game, 500, 500, 50)]
    state.ship.lasers = [Laser(Vector2(102, 100), Vector2(0, 0))]

    resolve_laser_hits(game)

    assert len(state.asteroids) == 2
    assert state.score == 100


def test_exploding_laser_does_not_hit(game):
    state = game.state
    state.asteroids = [still_asteroid(game, 100, 100, 50)]
    state.ship.lasers = [Laser(Vector2(100, 100), Vector2(0, 0), explode_time=2)]
    resolve_laser_hits(game)
    assert len(state.asteroids) == 1
    assert state.score == 0


def test_hit_needs_strictly_inside_radius(game):
    state = game.state
    state.asteroids = [still_asteroid(game, 100, 100, 50)]
    state.ship.lasers = [Laser(Vector2(150, 100), Vector2(0, 0))]
    resolve_laser_hits(game)
    assert len(state.asteroids) == 1


def test_clearing_belt_starts_next_level(game):
    state = game.state
    state.asteroids = [still_asteroid(game, 100, 100, 13)]
    state.ship.lasers = [Laser(Vector2(100, 100), Vector2(0, 0))]

    resolve_laser_hits(game)

    assert state.level == 1
    assert state.text == "Level 2"
    assert len(state.asteroids) == game.settings.roid_num + 1


def test_invincible_ship_ignores_asteroids(game):
    state = game.state
    state.asteroids = [still_asteroid(game, state.ship.pos.x, state.ship.pos.y, 50)]
    assert state.ship.invincible
    assert not resolve_ship_collision(game)
    assert not state.ship.exploding
    assert len(state.asteroids) == 1


def test_ship_collision_explodes_ship_and_destroys_first_asteroid(game, sound_effects):
    state = game.state
    ship = state.ship
    ship.blink_num = 0
    first = still_asteroid(game, ship.pos.x + 40, ship.pos.y, 50)
    second = still_asteroid(game, ship.pos.x - 40, ship.pos.y, 50)
    state.asteroids = [first, second]

    assert resolve_ship_collision(game)

    assert ship.exploding
    assert first not in state.asteroids
    assert second in state.asteroids
    # One large destroyed: two medium pieces added
    assert len(state.asteroids) == 3
    assert 'explode' in sound_effects.played


def test_ship_collision_uses_sum_of_radii(game):
    state = game.state
    ship = state.ship
    ship.blink_num = 0
    state.asteroids = [still_asteroid(game, ship.pos.x + ship.r + 50, ship.pos.y, 50)]
    assert not resolve_ship_collision(game)


@pytest.mark.parametrize("flag", ["exploding", "dead"])
def test_no_ship_collision_when_exploding_or_dead(game, flag):
    state = game.state
    ship = state.ship
    ship.blink_num = 0
    if flag == "exploding":
        ship.explode_time = 5
    else:
        ship.dead = True
    state.asteroids = [still_asteroid(game, ship.pos.x, ship.pos.y, 50)]
    assert not resolve_ship_collision(game)
    assert len(state.asteroids) == 1


def test_lasers_resolved_before_ship(game):
    state = game.state
    ship = state.ship
    ship.blink_num = 0
    state.asteroids = [still_asteroid(game, ship.pos.x, ship.pos.y, 13)]
    ship.lasers = [Laser(Vector2(ship.pos), Vector2(0, 0))]

    resolve_collisions(game)

    # The only asteroid was shot, so the ship survives and a new level begins
    assert not ship.exploding
    assert state.level == 1
