"""Controllers turning keyboard input and game events into game actions and sounds."""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from asteroids.entities import GameEvent  # noqa: E402
from asteroids.sound import Effect, Sound, SoundId  # noqa: E402


class GameController(ABC):
    """Feeds user input into a game and reacts to the events the game produced."""

    def __init__(self, game) -> None:
        self.game = game
        self.quit = False

    @abstractmethod
    def do_user_interactions(self) -> None:
        """Read the user's input and advance the game."""

    @abstractmethod
    def do_game_events(self) -> None:
        """React to the events of the last tick."""

    def exit_game(self) -> bool:
        return self.quit


_IMMEDIATE_SOUNDS = {
    GameEvent.TORPEDO_FIRED: SoundId.FIRE,
    GameEvent.SMALL_ASTEROID_DESTROYED: SoundId.BANG_SMALL,
    GameEvent.MEDIUM_ASTEROID_DESTROYED: SoundId.BANG_MEDIUM,
    GameEvent.LARGE_ASTEROID_DESTROYED: SoundId.BANG_LARGE,
    GameEvent.BIG_SAUCER_DESTROYED: SoundId.BANG_LARGE,
    GameEvent.SMALL_SAUCER_DESTROYED: SoundId.BANG_LARGE,
    GameEvent.SHIP_THRUST: SoundId.THRUST,
}


class PygameGameController(GameController):
    """Keyboard control via pygame with a background beat that speeds up during a level."""

    MAX_DISTANCE_BETWEEN_BEATS = 10.0 / 12.0

    def __init__(self, game, sound: Sound | None = None) -> None:
        super().__init__(game)
        try:
            pygame.display.init()
        except pygame.error as exc:
            print(f"Could not init the event subsystem: {exc}", file=sys.stderr)
        if sound is None:
            sound = Sound()
            sound.init()
        self.sound = sound
        self.tick_time = 1.0 / 60
        self.fps = 60
        self.set_fps(60)
        self.background_sound = Effect(
            (SoundId.BEAT1, SoundId.BEAT2), self.MAX_DISTANCE_BETWEEN_BEATS, 10.0
        )
        self.sound.add_effect(self.background_sound)

    def set_fps(self, fps: int) -> None:
        self.tick_time = 1.0 / fps
        self.fps = fps

    def do_user_interactions(self) -> None:
        keys = pygame.key.get_pressed()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit = True
        if self.quit:
            return

        self.game.tick(self.tick_time)
        self.sound.tick(self.tick_time)

        if self.game.ship_exists():
            if keys[pygame.K_LEFT]:
                self.game.ship.turn_left(self.tick_time)
            if keys[pygame.K_RIGHT]:
                self.game.ship.turn_right(self.tick_time)
            if keys[pygame.K_UP]:
                self.game.accelerate_ship(self.tick_time)
            if keys[pygame.K_d]:
                self.game.ship_shoots()
            if keys[pygame.K_SPACE]:
                self.game.hyperspace()

    def do_game_events(self) -> None:
        if self.quit:
            return
        beat = self.background_sound
        for event in self.game.game_events:
            if event is GameEvent.NEW_SHIP_SPAWNED:
                beat.switch_on()
            elif event is GameEvent.END_OF_LEVEL:
                beat.switch_off()
            elif event is GameEvent.NEXT_LEVEL_STARTED:
                beat.interval_between_sounds = self.MAX_DISTANCE_BETWEEN_BEATS
                beat.switch_on()
            elif event is GameEvent.SHIP_DESTROYED:
                beat.switch_off()
                self.sound.play_immediate(SoundId.BANG_MEDIUM)
            elif event is GameEvent.EXTRA_SHIP_GAINED:
                self.sound.play_looped(SoundId.EXTRA_SHIP, 10)
            elif event in _IMMEDIATE_SOUNDS:
                self.sound.play_immediate(_IMMEDIATE_SOUNDS[event])

        level_time = self.game.time_since_start_of_level
        if level_time > 40.0:
            beat.interval_between_sounds = 0.25 * self.MAX_DISTANCE_BETWEEN_BEATS
        elif level_time > 30.0:
            beat.interval_between_sounds = 0.5 * self.MAX_DISTANCE_BETWEEN_BEATS
        elif level_time > 15.0:
            beat.interval_between_sounds = 0.75 * self.MAX_DISTANCE_BETWEEN_BEATS
        self.game.game_events.clear()