"""The game facade holding and driving all objects of a round of Asteroids."""

from __future__ import annotations

from asteroids.entities import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Asteroid,
    BodyType,
    Debris,
    GameEvent,
    Saucer,
    Spaceship,
    SpaceshipDebris,
    Torpedo,
    TypedBody,
    _dis,
    displacement_fix,
)
from asteroids.physics import Body, BoundingVolumeCircle, Physics
from asteroids.vector import Vector


class Game:
    """Stores all game objects, applies the rules and records game events."""

    POINTS_SMALL_SAUCER = 1000
    POINTS_LARGE_SAUCER = 200
    POINTS_SMALL_ASTEROID = 100
    POINTS_MEDIUM_ASTEROID = 50
    POINTS_LARGE_ASTEROID = 20
    POINTS_EXTRA_SHIP = 10000

    SAUCER_SPAWN_TIME = 12.0
    SHIP_SPAWN_TIME = 4.0
    ASTEROID_SPAWN_TIME = 3.0

    NO_OF_SHIPS_AT_START = 3
    NO_OF_ASTEROIDS_AT_START = 4
    MAXIMUM_ASTEROIDS_SPAWNING = 11

    def __init__(self) -> None:
        self.physics = Physics(self._check_collision, self._resolve_collision, self._resolve_deleted_body)
        self.ship: Spaceship | None = None
        self.saucer: Saucer | None = None
        self.game_events: list[GameEvent] = []
        self.no_of_ships = self.NO_OF_SHIPS_AT_START
        self.current_no_of_asteroids = self.NO_OF_ASTEROIDS_AT_START
        self.no_of_asteroids = 0
        self.score = 0
        self.time_since_start_of_level = 0.0
        self.saucer_timer = self.SHIP_SPAWN_TIME
        self.ship_spawn_timer = 0.0
        self.new_asteroids_spawn_timer = 0.0

    # -- public interface -------------------------------------------------

    def tick(self, tick_time: float) -> None:
        """Advance the game by ``tick_time`` seconds."""
        self.physics.tick(tick_time)  # collisions are handled during the physics tick

        self.time_since_start_of_level += tick_time
        self.saucer_timer -= tick_time

        if self.ship_exists() and self.ship.in_hyperspace:
            self.ship.jump_out_of_hyperspace(self)

        if self.ship_spawn_timer > 0:
            self.ship_spawn_timer -= tick_time

        if self.no_of_asteroids == 0 and not self.saucer_exists():
            if self.new_asteroids_spawn_timer == self.ASTEROID_SPAWN_TIME:
                self.game_events.append(GameEvent.END_OF_LEVEL)
            if self.new_asteroids_spawn_timer > 0.0:
                self.new_asteroids_spawn_timer -= tick_time
            else:
                self._spawn_asteroids()

        if self.saucer_timer < 0.0 and not self.saucer_exists() and self.no_of_asteroids > 0:
            self._new_saucer()
        if self.no_of_ships > 0 and not self.ship_exists() and self.ship_spawn_timer <= 0.0:
            self._spawn_ship()

        if self.ship_exists():
            self.ship.deaccelerate(tick_time)

    def ship_shoots(self) -> None:
        if self.ship_exists() and self.ship.shoot(self.physics):
            self.game_events.append(GameEvent.TORPEDO_FIRED)

    def hyperspace(self) -> None:
        if self.ship_exists():
            self.ship.jump_into_hyperspace(self)

    def accelerate_ship(self, tick_time: float) -> None:
        if self.ship_exists() and self.ship.can_accelerate(tick_time):
            self.game_events.append(GameEvent.SHIP_THRUST)
            self.ship.accelerate(tick_time)

    def ship_exists(self) -> bool:
        return self.ship is not None and not self.ship.is_marked_for_deletion()

    def saucer_exists(self) -> bool:
        return self.saucer is not None and not self.saucer.is_marked_for_deletion()

    def destroy_spaceship(self) -> None:
        """Blow up the ship, leaving debris and starting the respawn delay."""
        if self.ship_exists():
            self.physics.add_body(SpaceshipDebris(self.ship.position))
            self.ship.mark_for_deletion()
            self.no_of_ships -= 1
            self.ship_spawn_timer = self.SHIP_SPAWN_TIME
            self.ship = None
            self.game_events.append(GameEvent.SHIP_DESTROYED)

    def area_free_of_asteroids(self, bounding: BoundingVolumeCircle) -> bool:
        """True if no asteroid still in play overlaps ``bounding``."""
        return self.physics.is_area_free_of_bodies(
            bounding,
            lambda body: not body.is_marked_for_deletion() and body.type is BodyType.ASTEROID,
        )

    # -- spawning ---------------------------------------------------------

    def _spawn_asteroids(self) -> None:
        self.no_of_asteroids = self.current_no_of_asteroids
        for _ in range(self.no_of_asteroids):
            chance = _dis()
            if chance < 0.25:
                position = (128.0 * _dis(), 768.0 * _dis())
            elif chance < 0.5:
                position = (1024.0 - 128.0 * _dis(), 768.0 * _dis())
            elif chance < 0.75:
                position = (1024.0 * _dis(), 98.0 * _dis())
            else:
                position = (1024.0 * _dis(), 768.0 - 98.0 * _dis())
            self.physics.add_body(Asteroid(3, position))
        if self.current_no_of_asteroids < self.MAXIMUM_ASTEROIDS_SPAWNING - 1:
            self.current_no_of_asteroids += 2
        elif self.current_no_of_asteroids == self.MAXIMUM_ASTEROIDS_SPAWNING - 1:
            self.current_no_of_asteroids = self.MAXIMUM_ASTEROIDS_SPAWNING
        self.new_asteroids_spawn_timer = self.ASTEROID_SPAWN_TIME
        self.saucer_timer = self.SAUCER_SPAWN_TIME
        self.time_since_start_of_level = 0.0
        self.game_events.append(GameEvent.NEXT_LEVEL_STARTED)

    def _spawn_ship(self) -> None:
        if self.saucer_exists():
            self._remove_saucer(self.saucer)
        bounding = BoundingVolumeCircle((512.0, 368.0), 75.0)
        if self.area_free_of_asteroids(bounding):
            self.ship = Spaceship((512.0, 368.0))
            self.physics.add_body(self.ship)
        self.game_events.append(GameEvent.NEW_SHIP_SPAWNED)

    def _new_saucer(self) -> None:
        if self.saucer_exists():
            return
        size = 1
        if self.time_since_start_of_level > 35.0 or self.score >= 30000:
            size = 0
        position = Vector(10.0, _dis() * (SCREEN_HEIGHT // 10 + (6 * SCREEN_HEIGHT) // 8))
        velocity = Vector(1024.0 / 8.0, 0.0)
        if self.area_free_of_asteroids(BoundingVolumeCircle(position, 10.0)):
            if _dis() > 0.5:
                position[0] = SCREEN_WIDTH - 10.0
                velocity[0] = -velocity[0]
            saucer = Saucer(size, position, self._saucer_fix)
            saucer.velocity = velocity
            self.saucer = saucer
            self.physics.add_body(saucer)
            self.saucer_timer = 5.0

    def _saucer_fix(self, body: Body, seconds: float) -> None:
        x = body.position[0]
        if x > SCREEN_WIDTH or x < 0.0:
            self._remove_saucer(body)
        else:
            displacement_fix(body, seconds)
            body.pass_time(seconds, self)

    def _remove_saucer(self, saucer: Saucer) -> None:
        saucer.mark_for_deletion()
        self.saucer = None
        self.saucer_timer = self.SAUCER_SPAWN_TIME

    # -- rules --------------------------------------------------------------

    def _add_score(self, points: int) -> None:
        if (self.score + points) // self.POINTS_EXTRA_SHIP > self.score // self.POINTS_EXTRA_SHIP:
            self.no_of_ships += 1
            self.game_events.append(GameEvent.EXTRA_SHIP_GAINED)
        self.score += points

    def _destroy_asteroid(self, asteroid: Asteroid) -> None:
        self.physics.add_body(Debris(asteroid.position))
        event = {
            1: GameEvent.SMALL_ASTEROID_DESTROYED,
            2: GameEvent.MEDIUM_ASTEROID_DESTROYED,
            3: GameEvent.LARGE_ASTEROID_DESTROYED,
        }.get(asteroid.size)
        if event is not None:
            self.game_events.append(event)
        if asteroid.size > 1:
            if self.no_of_asteroids < 26:
                self.no_of_asteroids += 1
                self.physics.add_body(Asteroid(asteroid.size - 1, asteroid.position))
            asteroid.mark_for_deletion()
            self.physics.add_body(Asteroid(asteroid.size - 1, asteroid.position))
        else:
            asteroid.mark_for_deletion()
            self.no_of_asteroids -= 1

    def _asteroid_hits_spaceship(self, asteroid: Asteroid) -> None:
        if self.ship_exists() and not self.ship.in_hyperspace:
            self.destroy_spaceship()
            self._destroy_asteroid(asteroid)

    def _torpedo_hits_asteroid(self, torpedo: Torpedo, asteroid: Asteroid) -> None:
        self._destroy_asteroid(asteroid)
        torpedo.mark_for_deletion()
        if self.ship is torpedo.origin:
            points = {
                1: self.POINTS_SMALL_ASTEROID,
                2: self.POINTS_MEDIUM_ASTEROID,
                3: self.POINTS_LARGE_ASTEROID,
            }.get(asteroid.size)
            if points is not None:
                self._add_score(points)

    def _destroy_saucer(self, saucer: Saucer) -> None:
        if saucer.size == 0:
            self.game_events.append(GameEvent.SMALL_SAUCER_DESTROYED)
        elif saucer.size == 1:
            self.game_events.append(GameEvent.BIG_SAUCER_DESTROYED)
        self.physics.add_body(Debris(saucer.position))
        self._remove_saucer(saucer)

    def _spaceship_hits_saucer(self, saucer: Saucer) -> None:
        self.destroy_spaceship()
        self._destroy_saucer(saucer)

    def _torpedo_hits_saucer(self, torpedo: Torpedo, saucer: Saucer) -> None:
        torpedo.mark_for_deletion()
        if saucer.size == 1:
            self._add_score(self.POINTS_LARGE_SAUCER)
        else:
            self._add_score(self.POINTS_SMALL_SAUCER)
        self._destroy_saucer(saucer)

    # -- physics callbacks --------------------------------------------------

    @staticmethod
    def _check_collision(first: TypedBody, second: TypedBody) -> bool:
        types = {first.type, second.type}
        torpedo = BodyType.TORPEDO in types
        asteroid = BodyType.ASTEROID in types
        spaceship = BodyType.SPACESHIP in types
        saucer = BodyType.SAUCER in types
        return (
            (torpedo and (asteroid or spaceship or saucer))
            or (asteroid and (saucer or spaceship))
            or (saucer and spaceship)
        )

    def _resolve_collision(self, first: TypedBody, second: TypedBody) -> None:
        body1, body2 = first, second
        if body2.type is BodyType.SPACESHIP:
            body1, body2 = body2, body1
        t1, t2 = body1.type, body2.type

        if t1 is BodyType.SPACESHIP:
            if t2 is BodyType.ASTEROID:
                self._asteroid_hits_spaceship(body2)
            elif t2 is BodyType.SAUCER:
                self._spaceship_hits_saucer(body2)

        if t2 is BodyType.TORPEDO:
            body1, body2 = body2, body1
            t1, t2 = t2, t1

        if t1 is BodyType.TORPEDO:
            if t2 is BodyType.ASTEROID:
                self._torpedo_hits_asteroid(body1, body2)
            elif t2 is BodyType.SPACESHIP:
                if not body2.in_hyperspace:
                    body1.mark_for_deletion()
                    self.destroy_spaceship()
            elif t2 is BodyType.SAUCER:
                self._torpedo_hits_saucer(body1, body2)

        if t2 is BodyType.SAUCER:
            body1, body2 = body2, body1
            t1, t2 = t2, t1

        if t1 is BodyType.SAUCER and t2 is BodyType.ASTEROID:
            self._destroy_saucer(body1)
            self._destroy_asteroid(body2)

    @staticmethod
    def _resolve_deleted_body(body: TypedBody) -> None:
        if body.type is BodyType.TORPEDO:
            origin = body.origin
            if origin is not None and origin.type in (BodyType.SAUCER, BodyType.SPACESHIP):
                origin.remove(body)