from pygame import Vector2
import pytest

from asteroids.entities import Laser, new_ship
from asteroids.lasers import shoot_laser, update_lasers


@pytest.fixture
def ship(settings):
    return new_ship(settings)


def test_shoot_from_nose(ship, settings):
    assert shoot_laser(ship, settings)
    assert len(ship.lasers) == 1
    laser = ship.lasers[0]
    assert laser.pos.x == pytest.approx(400)
    assert laser.pos.y == pytest.approx(270)
    assert laser.velocity.x == pytest.approx(0, abs=1e-9)
    assert laser.velocity.y == pytest.approx(-settings.laser_spd / settings.fps)
    assert laser.dist == 0 and laser.explode_time == 0
    assert not ship.can_shoot


def test_shoot_needs_release_between_shots(ship, settings):
    shoot_laser(ship, settings)
    assert not shoot_laser(ship, settings)
    assert len(ship.lasers) == 1
    ship.can_shoot = True
    assert shoot_laser(ship, settings)
    assert len(ship.lasers) == 2


def test_laser_cap(ship, settings):
    for _ in range(settings.laser_max + 5):
        ship.can_shoot = True
        shoot_laser(ship, settings)
    assert len(ship.lasers) == settings.laser_max
    # A refused shot still needs a release
    assert not ship.can_shoot


def test_flying_laser_moves_and_tracks_distance(ship, settings):
    shoot_laser(ship, settings)
    laser = ship.lasers[0]
    speed = laser.velocity.length()
    last = 0.0
    for frame in range(1, 6):
        update_lasers(ship, settings)
        assert laser.dist == pytest.approx(frame * speed)
        assert laser.dist > last
        last = laser.dist
    assert laser.pos.y == pytest.approx(270 - 5 * speed)


def test_laser_removed_once_past_max_distance(ship, settings):
    max_dist = settings.laser_dist * settings.width
    at_limit = Laser(Vector2(100, 100), Vector2(10, 0), dist=max_dist)
    past_limit = Laser(Vector2(100, 100), Vector2(10, 0), dist=max_dist + 0.01)
    ship.lasers = [at_limit, past_limit]
    update_lasers(ship, settings)
    assert ship.lasers == [at_limit]
    assert at_limit.pos == Vector2(110, 100)


def test_laser_lives_until_distance_exceeded(ship, settings):
    shoot_laser(ship, settings)
    laser = ship.lasers[0]
    max_dist = settings.laser_dist * settings.width
    while ship.lasers:
        update_lasers(ship, settings)
    assert laser.dist > max_dist
    assert laser.dist - laser.velocity.length() <= max_dist


def test_exploding_laser_stays_put_then_disappears(ship, settings):
    laser = Laser(Vector2(50, 60), Vector2(10, 0), explode_time=3)
    ship.lasers = [laser]
    update_lasers(ship, settings)
    update_lasers(ship, settings)
    assert ship.lasers == [laser]
    assert laser.pos == Vector2(50, 60)
    assert laser.dist == 0
    update_lasers(ship, settings)
    assert ship.lasers == []


def test_laser_wraps_without_margin(ship, settings):
    laser = Laser(Vector2(settings.width - 1, 10), Vector2(5, -20))
    ship.lasers = [laser]
    update_lasers(ship, settings)
    assert laser.pos == Vector2(0, settings.height)
