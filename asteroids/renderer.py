"""Renderers drawing the game objects, the free ships and the score."""

from __future__ import annotations

import math
import os
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from asteroids.entities import BodyType, Debris, SpaceshipDebris  # noqa: E402

Point = tuple[float, float]

BLACK = (0x00, 0x00, 0x00, 0xFF)
WHITE = (0xFF, 0xFF, 0xFF, 0xFF)

FREE_SHIP_X = 128.0
FREE_SHIP_Y = 64.0
SCORE_X = 128.0 - 48.0
SCORE_Y = 48.0 - 4.0

SHIP_POINTS: tuple[Point, ...] = ((-6, 3), (-6, -3), (-10, -6), (14, 0), (-10, 6), (-6, 3))
FLAME_POINTS: tuple[Point, ...] = ((-6, 3), (-12, 0), (-6, -3))
SAUCER_POINTS: tuple[Point, ...] = (
    (-16, -6), (16, -6), (40, 6), (-40, 6), (-16, 18), (16, 18),
    (40, 6), (16, -6), (8, -18), (-8, -18), (-16, -6), (-40, 6),
)
ASTEROID_SHAPES: tuple[tuple[Point, ...], ...] = (
    ((0, -12), (16, -24), (32, -12), (24, 0), (32, 12), (8, 24), (-16, 24),
     (-32, 12), (-32, -12), (-16, -24), (0, -12)),
    ((16, -6), (32, -12), (16, -24), (0, -16), (-16, -24), (-24, -12), (-16, 0),
     (-32, 12), (-16, 24), (-8, 16), (16, 24), (32, 6), (16, -6)),
    ((-16, 0), (-32, 6), (-16, 24), (0, 6), (0, 24), (16, 24), (32, 6), (32, 6),
     (16, -24), (-8, -24), (-32, -6), (-16, 0)),
    ((8, 0), (32, -6), (32, -12), (8, -24), (-16, -24), (-8, -12), (-32, -12),
     (-32, 12), (-16, 24), (8, 16), (16, 24), (32, 12), (8, 0)),
)
SPACESHIP_DEBRIS_LINES: tuple[tuple[Point, Point], ...] = (
    ((-2, -1), (-10, 7)),
    ((3, 1), (7, 8)),
    ((0, 3), (6, 1)),
    ((3, -1), (-5, -7)),
    ((0, -4), (-6, -6)),
    ((-2, 2), (2, 5)),
)
SPACESHIP_DEBRIS_DIRECTIONS: tuple[Point, ...] = (
    (-40, -23), (50, 15), (0, 45), (60, -15), (10, -52), (-40, 30),
)
DEBRIS_POINTS: tuple[Point, ...] = (
    (-32, 32), (-32, -16), (-16, 0), (-16, -32), (-8, 24),
    (8, -24), (24, 32), (24, -24), (24, -32), (32, -8),
)
DIGITS: tuple[tuple[Point, ...], ...] = (
    ((0, -8), (4, -8), (4, 0), (0, 0), (0, -8)),
    ((4, 0), (4, -8)),
    ((0, -8), (4, -8), (4, -4), (0, -4), (0, 0), (4, 0)),
    ((0, 0), (4, 0), (4, -4), (0, -4), (4, -4), (4, -8), (0, -8)),
    ((4, 0), (4, -8), (4, -4), (0, -4), (0, -8)),
    ((0, 0), (4, 0), (4, -4), (0, -4), (0, -8), (4, -8)),
    ((0, -8), (0, 0), (4, 0), (4, -4), (0, -4)),
    ((0, -8), (4, -8), (4, 0)),
    ((0, -8), (4, -8), (4, 0), (0, 0), (0, -8), (0, -4), (4, -4)),
    ((4, 0), (4, -8), (0, -8), (0, -4), (4, -4)),
)


def transform_points(
    points: Iterable[Point], angle: float = 0.0, position: Sequence[float] = (0.0, 0.0)
) -> list[Point]:
    """Rotate points by ``angle`` radians around the origin, then move them to ``position``."""
    cos_angle = math.cos(angle)
    sin_angle = math.sin(angle)
    px, py = position[0], position[1]
    return [
        (cos_angle * x - sin_angle * y + px, sin_angle * x + cos_angle * y + py)
        for x, y in points
    ]


def _scaled(points: Iterable[Point], scale: float, position: Sequence[float]) -> list[Point]:
    return [(scale * x + position[0], scale * y + position[1]) for x, y in points]


def score_digits(score: int) -> list[int]:
    """Decimal digits of ``score`` in drawing order, least significant first."""
    if score < 0:
        raise ValueError("the score cannot be negative")
    digits = []
    while True:
        score, digit = divmod(score, 10)
        digits.append(digit)
        if score == 0:
            return digits


class Renderer(ABC):
    """The minimal interface of a game renderer."""

    def __init__(self, game) -> None:
        self.game = game

    @abstractmethod
    def init(self) -> bool:
        """Open the output; True on success."""

    @abstractmethod
    def render(self) -> None:
        """Draw one frame."""

    @abstractmethod
    def exit(self) -> None:
        """Release the output."""


class PygameRenderer(Renderer):
    """Draws the game as white vector lines on a black pygame window."""

    def __init__(self, game, title: str, window_width: int = 1024, window_height: int = 768) -> None:
        super().__init__(game)
        self.title = title
        self.window_width = window_width
        self.window_height = window_height
        self.screen: pygame.Surface | None = None
        self._draw_by_type = {
            BodyType.SPACESHIP: self._draw_spaceship,
            BodyType.TORPEDO: self._draw_torpedo,
            BodyType.ASTEROID: self._draw_asteroid,
            BodyType.SPACESHIP_DEBRIS: self._draw_spaceship_debris,
            BodyType.DEBRIS: self._draw_debris,
            BodyType.SAUCER: self._draw_saucer,
        }

    def init(self) -> bool:
        try:
            pygame.display.init()
        except pygame.error as exc:
            print(f"pygame could not initialize! Error: {exc}", file=sys.stdout)
            return False
        try:
            self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        except pygame.error as exc:
            print(f"Window could not be created! Error: {exc}", file=sys.stdout)
            return False
        pygame.display.set_caption(self.title)
        return True

    def render(self) -> None:
        if self.screen is None:
            raise RuntimeError("the renderer has not been initialized")
        self.screen.fill(BLACK)
        for body in self.game.physics.bodies:
            draw = self._draw_by_type.get(body.type)
            if draw is not None:
                draw(body)
        self._draw_free_ships()
        self._draw_score()
        pygame.display.flip()

    def exit(self) -> None:
        self.screen = None
        pygame.display.quit()

    def _lines(self, points: Sequence[Point]) -> None:
        pygame.draw.lines(self.screen, WHITE, False, points)

    def _point(self, x: float, y: float) -> None:
        self.screen.set_at((int(x), int(y)), WHITE)

    def _draw_ship_shape(self, position: Sequence[float], angle: float) -> None:
        self._lines(transform_points(SHIP_POINTS, angle, position))

    def _draw_spaceship(self, ship) -> None:
        if ship.in_hyperspace:
            return
        if ship.is_accelerating():
            self._lines(transform_points(FLAME_POINTS, ship.angle, ship.position))
        self._draw_ship_shape(ship.position, ship.angle)

    def _draw_saucer(self, saucer) -> None:
        scale = 0.25 if saucer.size == 0 else 0.5
        self._lines(_scaled(SAUCER_POINTS, scale, saucer.position))

    def _draw_torpedo(self, torpedo) -> None:
        x, y = torpedo.position
        for dx, dy in ((0, 0), (1, 0), (0, -1), (0, 1), (-1, 0)):
            self._point(x + dx, y + dy)

    def _draw_asteroid(self, asteroid) -> None:
        scale = 1.0 if asteroid.size == 3 else (0.5 if asteroid.size == 2 else 0.25)
        shape = ASTEROID_SHAPES[asteroid.rock_type]
        self._lines(_scaled(shape, scale, asteroid.position))

    def _draw_spaceship_debris(self, debris) -> None:
        px, py = debris.position
        remaining = debris.time_to_delete
        scale = 0.2 * (SpaceshipDebris.TIME_TO_DELETE - remaining)
        for i, ((start, end), (dx, dy)) in enumerate(
            zip(SPACESHIP_DEBRIS_LINES, SPACESHIP_DEBRIS_DIRECTIONS)
        ):
            if remaining >= 0.5 * i:
                shift_x, shift_y = scale * dx + px, scale * dy + py
                pygame.draw.line(
                    self.screen,
                    WHITE,
                    (start[0] + shift_x, start[1] + shift_y),
                    (end[0] + shift_x, end[1] + shift_y),
                )

    def _draw_debris(self, debris) -> None:
        spread = Debris.TIME_TO_DELETE - debris.time_to_delete
        for x, y in _scaled(DEBRIS_POINTS, spread, debris.position):
            self._point(x, y)

    def _draw_free_ships(self) -> None:
        for i in range(int(self.game.no_of_ships)):
            self._draw_ship_shape((FREE_SHIP_X + 20.0 * i, FREE_SHIP_Y), -math.pi / 2.0)

    def _draw_score(self) -> None:
        score = self.game.score
        digits = score_digits(score)
        no_of_digits = len(digits) if score > 0 else 0
        x = SCORE_X + 20.0 * no_of_digits
        for digit in digits:
            self._lines(_scaled(DIGITS[digit], 4.0, (x, SCORE_Y)))
            x -= 20.0