"""The typed game objects: spaceship, asteroids, torpedos, saucers and debris."""

from __future__ import annotations

import math
import random
from collections.abc import Callable, Iterable
from enum import Enum

from asteroids.physics import Body, BoundingVolumeCircle, Physics
from asteroids.timer import Counter
from asteroids.vector import Vector

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = (SCREEN_WIDTH * 3) // 4

rng = random.Random()


def _dis() -> float:
    """A random number in [0, 0.99)."""
    return rng.uniform(0.0, 0.99)


class BodyType(Enum):
    """All kinds of objects in the game."""

    SPACESHIP = 0
    ASTEROID = 1
    TORPEDO = 2
    SAUCER = 3
    SPACESHIP_DEBRIS = 4
    DEBRIS = 5


class GameEvent(Enum):
    """Events produced during a tick, used for sound and view effects."""

    SMALL_ASTEROID_DESTROYED = 0
    MEDIUM_ASTEROID_DESTROYED = 1
    LARGE_ASTEROID_DESTROYED = 2
    EXTRA_SHIP_GAINED = 3
    SHIP_DESTROYED = 4
    SHIP_THRUST = 5
    SMALL_SAUCER_DESTROYED = 6
    BIG_SAUCER_DESTROYED = 7
    END_OF_LEVEL = 8
    NEXT_LEVEL_STARTED = 9
    NEW_SHIP_SPAWNED = 10
    TORPEDO_FIRED = 11


def displacement_fix(body: Body, seconds: float = 1.0) -> None:
    """Wrap a body that left the screen around to the opposite edge."""
    x, y = body.position
    new_position = body.position
    if x < 0:
        new_position[0] = SCREEN_WIDTH
    if x > SCREEN_WIDTH:
        new_position[0] = 0
    if y < 0:
        new_position[1] = SCREEN_HEIGHT
    if y > SCREEN_HEIGHT:
        new_position[1] = 0
    body.position = new_position


class TypedBody(Body):
    """A physical body that knows which kind of game object it is."""

    def __init__(
        self,
        body_type: BodyType,
        bounding,
        velocity: Iterable[float],
        max_velocity: float = 1.0,
        min_velocity: float = 0.0,
        angle: float = 0.0,
        fix: Callable[[Body, float], None] | None = None,
    ) -> None:
        super().__init__(bounding, velocity, max_velocity, min_velocity, angle, fix)
        self.type = body_type


class Asteroid(TypedBody):
    """A rock of size 3 (big), 2 (medium) or 1 (small) in one of four shapes."""

    def __init__(self, size: int = 3, position: Iterable[float] | None = None) -> None:
        start = (128.0 + 768.0 * _dis(), 64.0 + 640.0 * _dis())
        velocity = (0.5 - _dis(), 0.5 - _dis())
        super().__init__(
            BodyType.ASTEROID,
            BoundingVolumeCircle(start, size * 11.0),
            velocity,
            348.0,
            0.0,
            0.0,
            displacement_fix,
        )
        self.size = size
        self.rock_type = math.trunc(4 * _dis())
        length = self.velocity.length()
        if length > 0.0:
            self.velocity /= length
        else:
            self.velocity = Vector(1.0, 0.0)
        if size == 3:  # 5 - 10 s to cross the screen
            self.velocity *= 768.0 / 10.0 + 768.0 / 10.0 * _dis()
        elif size == 2:  # 4 - 8 s
            self.velocity *= 768.0 / 8.0 + 768.0 / 8.0 * _dis()
        elif size == 1:  # 3 - 6 s
            self.velocity *= 768.0 / 6.0 + 768.0 / 6.0 * _dis()
        if position is not None:
            self.position = position


class Torpedo(TypedBody):
    """A shot that lives for 1.2 seconds and remembers who fired it."""

    MAX_SPEED = 768.0

    def __init__(
        self,
        position: Iterable[float] = (0.0, 0.0),
        angle: float = 0.0,
        velocity: Iterable[float] = (1.0, 1.0),
        origin: TypedBody | None = None,
    ) -> None:
        direction = Vector.from_angle(angle)
        super().__init__(
            BodyType.TORPEDO,
            BoundingVolumeCircle(Vector(*position) + 14.0 * direction, 1.0),
            Vector(*velocity) + (1.1 * self.MAX_SPEED / 2.0) * direction,
            self.MAX_SPEED,
            0.0,
            angle,
            displacement_fix,
        )
        self.set_time_to_delete(1.2)
        self.origin = origin


class Spaceship(TypedBody):
    """The player's ship."""

    HYPERSPACE_DELAY = 1.0
    MAX_SPEED = 384.0

    def __init__(self, position: Iterable[float]) -> None:
        super().__init__(
            BodyType.SPACESHIP,
            BoundingVolumeCircle(position, 10.0),
            (0.0, 0.0),
            self.MAX_SPEED,
            0.0,
            0.0,
            Spaceship.spaceship_fix,
        )
        self.shoot_cooldown = Counter()
        self.accelerate_timer = 0.0
        self.turn_timer = 0.0
        self.hyperspace_delay = 0.0
        self.in_hyperspace = False
        self.no_of_torpedos = 0

    @staticmethod
    def spaceship_fix(body: Body, seconds: float) -> None:
        displacement_fix(body, seconds)
        body.pass_time(seconds)

    def _active(self) -> bool:
        return not self.is_marked_for_deletion() and not self.in_hyperspace

    def shoot(self, physics: Physics) -> bool:
        """Fire a torpedo unless cooling down or four torpedos are already flying."""
        if self.shoot_cooldown.time <= 0.0 and self._active() and self.no_of_torpedos < 4:
            physics.add_body(Torpedo(self.position, self.angle, self.velocity, self))
            self.shoot_cooldown.time = 0.1
            self.no_of_torpedos += 1
            return True
        return False

    def contains_torpedo(self, torpedo: Torpedo) -> bool:
        return torpedo.origin is self

    def can_accelerate(self, seconds: float) -> bool:
        return self.accelerate_timer <= 0.0 and self._active()

    def accelerate(self, seconds: float) -> None:
        """Start a thrust of a quarter second."""
        if self.can_accelerate(seconds):
            self.accelerate_timer = 0.25 - seconds
            super().accelerate(self.MAX_SPEED, min(0.25, seconds))

    def deaccelerate(self, seconds: float) -> None:
        """Slow down by a sixteenth of the maximum speed per second while not thrusting."""
        if not self.is_accelerating() and self._active():
            speed = self.MAX_SPEED / 16.0
            current_speed = self.velocity.length()
            if current_speed > 0.0:
                factor = seconds * speed
                self.velocity = self.velocity - (factor * (1.0 / current_speed)) * self.velocity

    def is_accelerating(self) -> bool:
        return self._active() and self.accelerate_timer > 0.0

    def turn_left(self, seconds: float) -> None:
        if self._active():
            self.turn(-math.pi / 0.6, seconds)  # a full turn takes 1.2 s

    def turn_right(self, seconds: float) -> None:
        if self._active():
            self.turn(math.pi / 0.6, seconds)

    def pass_time(self, seconds: float) -> None:
        if self.hyperspace_delay > 0.0 and self.in_hyperspace:
            self.hyperspace_delay -= seconds
        self.shoot_cooldown.tick(seconds)
        if self.accelerate_timer > 0.0:
            super().accelerate(self.MAX_SPEED, seconds)
            self.accelerate_timer -= seconds
        if self.turn_timer > 0.0:
            self.turn_timer -= seconds

    def jump_into_hyperspace(self, game) -> None:
        """Vanish to a random place; the jump may destroy the ship."""
        if not self.in_hyperspace and not self.is_marked_for_deletion():
            self.velocity = Vector(0.0, 0.0)
            self.position = (512.0 + 348.0 * (0.5 - _dis()), 368.0 + 256.0 * (0.5 - _dis()))
            if _dis() < 0.25 or game.no_of_asteroids > (_dis() * 15.0 + 4.0):
                game.destroy_spaceship()
            else:
                self.in_hyperspace = True
                self.hyperspace_delay = self.HYPERSPACE_DELAY

    def jump_out_of_hyperspace(self, game) -> None:
        """Reappear once the delay is over and no asteroid is close."""
        if self.in_hyperspace and self.hyperspace_delay <= 0.0 and not self.is_marked_for_deletion():
            bounding = BoundingVolumeCircle(self.position, 50.0)
            if game.area_free_of_asteroids(bounding):
                self.in_hyperspace = False

    def remove(self, torpedo: Torpedo) -> None:
        """Forget a torpedo of this ship that left the game."""
        if torpedo.origin is self:
            self.no_of_torpedos -= 1
            torpedo.origin = None


class SpaceshipDebris(TypedBody):
    """The remains of a destroyed spaceship."""

    TIME_TO_DELETE = 3.0

    def __init__(self, position: Iterable[float] = (0.0, 0.0), angle: float = 0.0) -> None:
        super().__init__(
            BodyType.SPACESHIP_DEBRIS,
            BoundingVolumeCircle(position, 0.0),
            (0.0, 0.0),
            384.0,
            0.0,
            angle,
            displacement_fix,
        )
        self.set_time_to_delete(self.TIME_TO_DELETE)


class Saucer(TypedBody):
    """An enemy saucer of size 1 (big) or 0 (small)."""

    def __init__(
        self,
        size: int = 1,
        position: Iterable[float] = (0.0, 0.0),
        fix: Callable[[Body, float], None] = displacement_fix,
    ) -> None:
        super().__init__(
            BodyType.SAUCER,
            BoundingVolumeCircle(position, 15.0 if size == 1 else 7.0),
            (0.0, 0.0),
            200.0,
            0.0,
            0.0,
            fix,
        )
        self.size = size
        self.shoot_cooldown = Counter(1.0)
        self.change_direction_cooldown = Counter(4.0)
        # every sixth torpedo of a small saucer aims at the spaceship
        self.precise_shoot_counter = 0
        self.no_of_torpedos = 0
        if size == 0:
            self.shoot_cooldown.time = 0.6

    def shoot(self, game) -> bool:
        """Fire a torpedo, aimed or in a random direction."""
        if self.shoot_cooldown.time <= 0.0 and not self.is_marked_for_deletion() and self.no_of_torpedos < 2:
            if self.size == 0 and self.precise_shoot_counter <= 0 and game.ship_exists():
                direct_shot = game.ship.position - self.position
                direct_shot *= 1.0 / direct_shot.length()
                torpedo = Torpedo(self.position, direct_shot.angle(0, 1), self.velocity, self)
                self.precise_shoot_counter = 6
            else:
                direction_angle = math.pi * (1.0 - 2.0 * _dis())
                torpedo = Torpedo(self.position, direction_angle, self.velocity, self)
                self.precise_shoot_counter -= 1
            self.no_of_torpedos += 1
            game.physics.add_body(torpedo)
            self.shoot_cooldown.time = 0.75
            return True
        return False

    def change_direction(self) -> None:
        """Pick a new vertical movement: none, down or up."""
        if self.change_direction_cooldown.time < 0.0 and not self.is_marked_for_deletion():
            chance = _dis()
            if chance < 0.33:
                self.velocity[1] = 0.0
            elif chance < 0.66:
                self.velocity[1] = 768.0 / 8.0
            else:
                self.velocity[1] = -768.0 / 8.0
            self.change_direction_cooldown.time = 1.0

    def pass_time(self, seconds: float, game) -> None:
        if self.shoot_cooldown.time > 0.0:
            self.shoot_cooldown.tick(seconds)
        elif self.shoot(game):
            game.game_events.append(GameEvent.TORPEDO_FIRED)
        self.change_direction_cooldown.tick(seconds)
        if self.change_direction_cooldown.time < 0.0:
            self.change_direction()

    def remove(self, torpedo: Torpedo) -> None:
        """Forget a torpedo of this saucer that left the game."""
        if torpedo.origin is self:
            self.no_of_torpedos -= 1
            torpedo.origin = None


class Debris(TypedBody):
    """The remains of an asteroid or a saucer."""

    TIME_TO_DELETE = 0.6

    def __init__(self, position: Iterable[float] = (0.0, 0.0), angle: float = 0.0) -> None:
        super().__init__(
            BodyType.DEBRIS,
            BoundingVolumeCircle(position, 0.0),
            (0.0, 0.0),
            0.0,
            0.0,
            angle,
            displacement_fix,
        )
        self.set_time_to_delete(self.TIME_TO_DELETE)