import math

import pytest

from asteroids.game import Game
from asteroids.renderer import (
    DIGITS,
    SHIP_POINTS,
    PygameRenderer,
    Renderer,
    score_digits,
    transform_points,
)


def test_transform_without_rotation_only_translates():
    points = [(1.0, 2.0), (-3.0, 4.0)]
    result = transform_points(points, 0.0, (10.0, 20.0))
    assert result == [(11.0, 22.0), (7.0, 24.0)]


def test_transform_rotates_quarter_turn():
    (x, y), = transform_points([(1.0, 0.0)], math.pi / 2.0, (0.0, 0.0))
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(1.0)


@pytest.mark.parametrize("angle", [0.3, 1.7, -2.5])
def test_transform_preserves_distances_to_position(angle):
    position = (100.0, 50.0)
    result = transform_points(SHIP_POINTS, angle, position)
    for (x, y), (tx, ty) in zip(SHIP_POINTS, result):
        assert math.hypot(tx - position[0], ty - position[1]) == pytest.approx(math.hypot(x, y))


def test_score_digits_of_zero_is_single_zero():
    assert score_digits(0) == [0]


def test_score_digits_least_significant_first():
    assert score_digits(1234) == [4, 3, 2, 1]


@pytest.mark.parametrize("score", [5, 10, 907, 30000])
def test_score_digits_round_trip(score):
    digits = score_digits(score)
    assert int("".join(str(d) for d in reversed(digits))) == score
    assert all(0 <= d < len(DIGITS) for d in digits)


def test_score_digits_rejects_negative_score():
    with pytest.raises(ValueError):
        score_digits(-1)


def test_renderer_is_abstract():
    with pytest.raises(TypeError):
        Renderer(Game())


def test_render_before_init_raises():
    renderer = PygameRenderer(Game(), "Asteroids")
    with pytest.raises(RuntimeError):
        renderer.render()


def test_render_draws_spaceship(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    game = Game()
    game.tick(0.05)
    game.tick(0.05)
    renderer = PygameRenderer(game, "Asteroids", 1024, 768)
    assert renderer.init() is True
    try:
        renderer.render()
        nose = renderer.screen.get_at((512 + 14, 368))
        center = renderer.screen.get_at((512, 368))
        assert tuple(nose) == (0xFF, 0xFF, 0xFF, 0xFF)
        assert tuple(center)[:3] == (0x00, 0x00, 0x00)
    finally:
        renderer.exit()
    assert renderer.screen is None