# asteroids

A classic vector-graphics Asteroids game drawn with pygame as white lines on a
black 1024 x 768 window. The game model does not depend on the window. It is
built on a small 2D physics engine and on vector, matrix and geometry helpers
that also work on their own.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
asteroids
```

The game runs at 60 ticks per second. Use `asteroids --sound-dir DIR` to say
where the sound files are. The default is `../sound`, relative to the current
directory. The directory should hold `fire.wav`, `extraShip.wav`,
`bangSmall.wav`, `bangMedium.wav`, `bangLarge.wav`, `beat1.wav`, `beat2.wav`,
`saucerSmall.wav`, `saucerBig.wav` and `thrust.wav`.

Controls:

| Key          | Action                |
|--------------|-----------------------|
| Left / Right | turn the ship         |
| Up           | thrust                |
| D            | fire a torpedo        |
| Space        | jump into hyperspace  |

Close the window to quit.

### How the game plays

- Each level starts with 4 large asteroids. Every new level adds 2 more, up to
  a limit of 11.
- Large asteroids break into medium ones, and medium ones into small ones.
- Points per hit:

  | Target          | Points |
  |-----------------|--------|
  | large asteroid  | 20     |
  | medium asteroid | 50     |
  | small asteroid  | 100    |
  | big saucer      | 200    |
  | small saucer    | 1000   |

- You get an extra ship every 10,000 points.
- Saucers come in from the left or right edge and fire back. After 35 seconds
  in a level, or once your score reaches 30,000, the saucers are small. Small
  saucers aim every sixth shot straight at your ship.
- A hyperspace jump moves the ship to a random place. The jump can destroy the
  ship, and the risk goes up when there are many asteroids.
- A background beat plays during a level and gets faster after 15, 30 and 40
  seconds.

## Using the pieces

The modules below work without opening a window:

- `asteroids.vector`: `Vector`, a mutable vector of floats. It has
  `+`, `-`, scaling with `*`, the dot product with `vector * vector`,
  `cross_product`, `get_reflective`, `normalize`, `length` and `angle`.
  `Vector.filled(size, values)` pads short input with the last value given.
  `Vector.from_angle(angle)` gives the unit vector at that angle.
- `asteroids.matrix`: `SquareMatrix`, stored as columns. It has `zeros`,
  `identity`, `at(row, column)` and `set_at`, and multiplies by vectors and by
  other matrices.
- `asteroids.geometry`: `Ray`, `IntersectionContext`,
  `AxisAlignedBoundingBox`, `Sphere`, `Triangle` and `refract`.
  - Boxes can be tested against other boxes, against rays and against moving
    boxes. `sweep_intersects` also returns the normal of the face that is hit.
  - `Sphere.intersects_ray` and `Triangle.intersects_ray` return an
    `IntersectionContext`, or `None` when the ray misses.
  - `refract` returns the transmitted direction, or `None` on total internal
    reflection.
- `asteroids.physics`: the bounding volumes `BoundingVolumeCircle` and
  `BoundingVolumeHyperRectangle`, plus `Body` and `Physics`.
  - `Physics.add_body` queues a body, and the body joins on the next `tick`.
  - Each `tick` moves the bodies, passes colliding pairs to the
    `resolve_collision` callback and drops bodies marked for deletion.
- `asteroids.timer`: `Counter`, a countdown, and `Timer`, which paces the main
  loop.
- `asteroids.entities`: the game objects `Spaceship`, `Asteroid`, `Torpedo`,
  `Saucer`, `Debris` and `SpaceshipDebris`, and the enums `BodyType` and
  `GameEvent`.
- `asteroids.game`: `Game`, the model that applies the rules. It collects
  `GameEvent`s in `game_events`.

A short session without a window:

```python
from asteroids.game import Game

game = Game()
game.tick(0.05)   # starts the first level and spawns the ship
game.tick(0.05)   # the queued asteroids and the ship join the physics
game.ship_shoots()
game.tick(0.05)
print(game.ship_exists(), game.score, len(game.physics.bodies))
```

The interactive parts use pygame:

- `asteroids.sound`: `Sound`, `Effect` and `SoundId`.
- `asteroids.controller`: `GameController` and `PygameGameController`.
- `asteroids.renderer`: `Renderer` and `PygameRenderer`, plus the helpers
  `transform_points` and `score_digits`.
- `asteroids.app`: `run` and `main`.

## What it does not do

- No sound files are included. If a file is missing, a message goes to stderr
  and that sound does not play.
- There is no title screen, game-over screen or high-score storage. The round
  ends when you close the window.
- The view is fixed on the whole playing field. It does not follow the ship.