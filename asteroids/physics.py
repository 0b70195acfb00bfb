"""A small physics engine moving bodies and resolving their collisions."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable

from asteroids.geometry import Sphere
from asteroids.timer import Counter
from asteroids.vector import Vector


class BoundingVolumeCircle(Sphere):
    """A bounding volume shaped as a circle (a sphere in higher dimensions)."""

    def __init__(self, position: Iterable[float], radius: float) -> None:
        super().__init__(position, radius)

    @property
    def position(self) -> Vector:
        return self.center.copy()

    @position.setter
    def position(self, position: Iterable[float]) -> None:
        self.center = Vector(*position)

    def collides(self, volume: BoundingVolumeCircle) -> bool:
        return self.intersects(volume)


class BoundingVolumeHyperRectangle:
    """An axis aligned bounding box around a central position."""

    def __init__(self, position: Iterable[float], edge_lengths: Iterable[float]) -> None:
        self._position = Vector(*position)
        self.edge_lengths = Vector(*edge_lengths)
        if len(self._position) != len(self.edge_lengths):
            raise ValueError("position and edge lengths must have the same dimension")

    def __repr__(self) -> str:
        return f"BoundingVolumeHyperRectangle({self._position!r}, {self.edge_lengths!r})"

    @property
    def position(self) -> Vector:
        return self._position.copy()

    @position.setter
    def position(self, position: Iterable[float]) -> None:
        self._position = Vector(*position)

    def edge_length(self, edge: int) -> float:
        return self.edge_lengths.at(edge)

    def collides(self, volume: BoundingVolumeHyperRectangle) -> bool:
        return all(
            abs(a - b) <= (ea + eb) / 2.0
            for a, b, ea, eb in zip(self._position, volume._position, self.edge_lengths, volume.edge_lengths)
        )


class Body:
    """A moving body with a bounding volume, velocity limits and an orientation angle.

    ``fix(body, seconds)``, when given, is called after every move to correct the body's values.
    """

    def __init__(
        self,
        bounding,
        velocity: Iterable[float],
        max_velocity: float = 1.0,
        min_velocity: float = 0.0,
        angle: float = 0.0,
        fix: Callable[[Body, float], None] | None = None,
    ) -> None:
        self.bounding = bounding
        self.velocity = Vector(*velocity)
        self.max_velocity = float(max_velocity)
        self.min_velocity = float(min_velocity)
        self.angle = float(angle)
        self.fix = fix
        self.delete_counter = Counter()
        self._deletable = False

    @property
    def position(self) -> Vector:
        return self.bounding.position

    @position.setter
    def position(self, position: Iterable[float]) -> None:
        self.bounding.position = position

    @property
    def time_to_delete(self) -> float:
        return self.delete_counter.time

    def move(self, seconds: float = 1.0) -> None:
        self.bounding.position = self.bounding.position + seconds * self.velocity
        if self.delete_counter.time > 0.0:
            self.delete_counter.tick(seconds)
            if self.delete_counter.time <= 0.0:
                self.mark_for_deletion()
        if self.fix is not None:
            self.fix(self, seconds)

    def turn(self, angle: float, seconds: float = 1.0) -> None:
        """Turn in the x/y plane by ``angle`` radians per second."""
        self.angle += angle * seconds

    def accelerate(self, acceleration: float, seconds: float = 1.0) -> None:
        """Accelerate in the direction of the body's angle, keeping the speed limits."""
        self.velocity = self.velocity + (acceleration * seconds) * Vector.from_angle(self.angle, len(self.velocity))
        speed = self.velocity.length()
        if speed > self.max_velocity:
            self.velocity *= self.max_velocity / speed
        elif 0.0 < speed < self.min_velocity:
            self.velocity *= self.min_velocity / speed

    def bounce(self, coordinate: int) -> None:
        self.velocity[coordinate] = -self.velocity[coordinate]

    def mark_for_deletion(self) -> None:
        """Have this body removed at the next tick of the physics."""
        self._deletable = True

    def is_marked_for_deletion(self) -> bool:
        return self._deletable

    def set_time_to_delete(self, time_to_delete: float) -> None:
        """Mark this body for deletion once it has moved for ``time_to_delete`` seconds."""
        self.delete_counter.time = float(time_to_delete)


def _not_deleted(body: Body) -> bool:
    return not body.is_marked_for_deletion()


class Physics:
    """Moves its bodies every tick and hands collisions to callbacks.

    Without ``check_collision`` every overlapping pair counts as a collision;
    missing resolve callbacks are simply not called.
    """

    def __init__(
        self,
        check_collision: Callable[[Body, Body], bool] | None = None,
        resolve_collision: Callable[[Body, Body], None] | None = None,
        resolve_deleted_body: Callable[[Body], None] | None = None,
    ) -> None:
        self.check_collision = check_collision
        self.resolve_collision = resolve_collision
        self.resolve_deleted_body = resolve_deleted_body
        self._bodies: list[Body] = []
        self._bodies_to_add: list[Body] = []
        self.recently_added_bodies: list[Body] = []
        self.tick_time = 1.0

    @property
    def bodies(self) -> tuple[Body, ...]:
        return tuple(self._bodies)

    def add_body(self, body: Body) -> None:
        """Queue a body; it joins the engine at the next tick."""
        self._bodies_to_add.append(body)

    def _remove_deleted(self) -> None:
        deleted = [body for body in self._bodies if body.is_marked_for_deletion()]
        if not deleted:
            return
        self._bodies = [body for body in self._bodies if not body.is_marked_for_deletion()]
        if self.resolve_deleted_body is not None:
            for body in deleted:
                self.resolve_deleted_body(body)

    def _is_collision(self, first: Body, second: Body) -> bool:
        if self.check_collision is not None and not self.check_collision(first, second):
            return False
        return first.bounding.collides(second.bounding)

    def tick(self, tick_time: float | None = None) -> None:
        """Add queued bodies, drop deleted ones, move, resolve collisions, drop deleted ones."""
        if tick_time is not None:
            self.tick_time = tick_time
        self.recently_added_bodies, self._bodies_to_add = self._bodies_to_add, []
        self._bodies.extend(self.recently_added_bodies)
        self._remove_deleted()
        for body in self._bodies:
            body.move(self.tick_time)
        for first, second in itertools.combinations(self._bodies, 2):
            if first.is_marked_for_deletion() or second.is_marked_for_deletion():
                continue
            if self._is_collision(first, second) and self.resolve_collision is not None:
                self.resolve_collision(first, second)
        self._remove_deleted()

    def is_area_free_of_bodies(self, area, check_body: Callable[[Body], bool] | None = None) -> bool:
        """True if no body accepted by ``check_body`` overlaps ``area``."""
        check = check_body if check_body is not None else _not_deleted
        return not any(check(body) and area.collides(body.bounding) for body in self._bodies)