import pytest

from asteroids import entities
from asteroids.entities import (
    Asteroid,
    BodyType,
    GameEvent,
    Saucer,
    Spaceship,
    SpaceshipDebris,
    Torpedo,
)
from asteroids.game import Game
from asteroids.physics import BoundingVolumeCircle


@pytest.fixture
def game():
    entities.rng.seed(12345)
    return Game()


@pytest.fixture
def started_game(game):
    game.tick(0.05)
    return game


def test_initial_score(game):
    assert game.score == 0


def test_no_initial_objects_created(game):
    assert len(game.physics.bodies) == 0


def test_initial_objects_created(game):
    game.tick(0.05)
    game.tick(0.05)
    assert len(game.physics.bodies) == 5


def test_ship_shoots(game):
    game.tick(0.05)
    game.ship_shoots()
    game.tick(0.15)
    game.ship_shoots()
    game.tick(0.15)
    game.ship_shoots()
    game.tick(0.15)
    game.ship_shoots()
    game.tick(0.05)
    assert len(game.physics.bodies) == 9


def test_first_tick_starts_level_and_spawns_ship(started_game):
    assert started_game.no_of_asteroids == 4
    assert GameEvent.NEXT_LEVEL_STARTED in started_game.game_events
    assert GameEvent.NEW_SHIP_SPAWNED in started_game.game_events
    assert started_game.ship_exists()
    assert isinstance(started_game.ship, Spaceship)


def test_ship_shoots_records_event(started_game):
    started_game.game_events.clear()
    started_game.ship_shoots()
    assert started_game.game_events == [GameEvent.TORPEDO_FIRED]


def test_accelerate_ship(started_game):
    started_game.game_events.clear()
    started_game.accelerate_ship(0.05)
    assert started_game.game_events == [GameEvent.SHIP_THRUST]
    assert started_game.ship.is_accelerating()


def test_accelerate_without_ship_does_nothing(game):
    game.accelerate_ship(0.05)
    assert game.game_events == []


def test_destroy_spaceship(started_game):
    started_game.game_events.clear()
    started_game.destroy_spaceship()
    assert started_game.ship is None
    assert not started_game.ship_exists()
    assert started_game.no_of_ships == 2
    assert started_game.game_events == [GameEvent.SHIP_DESTROYED]
    started_game.tick(0.01)
    assert any(isinstance(b, SpaceshipDebris) for b in started_game.physics.bodies)


def test_area_free_of_asteroids(started_game):
    started_game.tick(0.01)
    asteroid = next(b for b in started_game.physics.bodies if b.type is BodyType.ASTEROID)
    assert not started_game.area_free_of_asteroids(BoundingVolumeCircle(asteroid.position, 5.0))
    assert started_game.area_free_of_asteroids(BoundingVolumeCircle((512.0, 368.0), 5.0))


def test_asteroid_hits_spaceship(started_game):
    started_game.physics.add_body(Asteroid(3, (512.0, 368.0)))
    started_game.tick(0.01)
    assert not started_game.ship_exists()
    assert started_game.no_of_ships == 2
    assert GameEvent.SHIP_DESTROYED in started_game.game_events
    assert GameEvent.LARGE_ASTEROID_DESTROYED in started_game.game_events
    assert started_game.no_of_asteroids == 5


def test_torpedo_of_ship_hits_small_asteroid(started_game):
    ship = started_game.ship
    started_game.physics.add_body(Torpedo((500.0, 500.0), 0.0, (0.0, 0.0), ship))
    started_game.physics.add_body(Asteroid(1, (514.0, 500.0)))
    started_game.tick(0.01)
    assert started_game.score == 100
    assert GameEvent.SMALL_ASTEROID_DESTROYED in started_game.game_events
    assert started_game.no_of_asteroids == 3


def test_torpedo_hits_big_saucer(started_game):
    saucer = Saucer(1, (514.0, 500.0))
    started_game.physics.add_body(Torpedo((500.0, 500.0), 0.0, (0.0, 0.0), started_game.ship))
    started_game.physics.add_body(saucer)
    started_game.tick(0.01)
    assert started_game.score == 200
    assert saucer.is_marked_for_deletion()
    assert GameEvent.BIG_SAUCER_DESTROYED in started_game.game_events


def test_hyperspace_stops_ship(started_game):
    started_game.tick(0.01)
    ship = started_game.ship
    started_game.hyperspace()
    assert ship.velocity == ship.velocity * 0.0
    assert ship.in_hyperspace or not started_game.ship_exists()


def test_saucer_exists_false_initially(game):
    assert game.saucer_exists() is False
    assert game.ship_exists() is False