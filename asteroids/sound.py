"""Sound effects: single sounds, looped sounds and repeating beat effects."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from enum import IntEnum
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


class SoundId(IntEnum):
    """The sounds known to the game."""

    FIRE = 0
    EXTRA_SHIP = 1
    BANG_SMALL = 2
    BANG_MEDIUM = 3
    BANG_LARGE = 4
    BEAT1 = 5
    BEAT2 = 6
    SAUCER_SMALL = 7
    SAUCER_BIG = 8
    THRUST = 9


FILE_NAMES = {
    SoundId.FIRE: "fire.wav",
    SoundId.EXTRA_SHIP: "extraShip.wav",
    SoundId.BANG_SMALL: "bangSmall.wav",
    SoundId.BANG_MEDIUM: "bangMedium.wav",
    SoundId.BANG_LARGE: "bangLarge.wav",
    SoundId.BEAT1: "beat1.wav",
    SoundId.BEAT2: "beat2.wav",
    SoundId.SAUCER_SMALL: "saucerSmall.wav",
    SoundId.SAUCER_BIG: "saucerBig.wav",
    SoundId.THRUST: "thrust.wav",
}

DEFAULT_SOUND_DIR = Path("..") / "sound"


class Effect:
    """A sequence of sounds played one after another at a fixed interval while switched on."""

    def __init__(
        self,
        wave_ids: Iterable[SoundId],
        interval_between_sounds: float,
        duration: float,
    ) -> None:
        self.waves = [SoundId(wave) for wave in wave_ids]
        if not self.waves:
            raise ValueError("an effect needs at least one sound")
        self.interval_between_sounds = float(interval_between_sounds)
        self.duration = float(duration)
        self.current_wave = 0
        self.current_interval = 0.0
        self.current_duration = 0.0
        self.on = False

    def cancel(self) -> None:
        self.duration = -1.0

    def switch_on(self) -> None:
        self.on = True

    def switch_off(self) -> None:
        self.on = False


class Sound:
    """Loads the game's sound files and plays them, driving the registered effects."""

    def __init__(self, sound_dir: str | os.PathLike[str] = DEFAULT_SOUND_DIR) -> None:
        self.sound_dir = Path(sound_dir)
        self._sounds: dict[SoundId, pygame.mixer.Sound] = {}
        self.effects: list[Effect] = []

    def init(self) -> None:
        """Open the audio device and load every sound file; failures are reported on stderr."""
        try:
            pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=512)
        except pygame.error as exc:
            print(f"Unable to open audio: {exc}", file=sys.stderr)
        else:
            try:
                pygame.mixer.set_num_channels(8)
            except pygame.error as exc:
                print(f"Unable to allocate mixing channels: {exc}", file=sys.stderr)
        for sound_id, name in FILE_NAMES.items():
            path = self.sound_dir / name
            try:
                self._sounds[sound_id] = pygame.mixer.Sound(str(path))
            except (pygame.error, OSError) as exc:
                print(f"Unable to load '{path}' : {exc}", file=sys.stderr)

    def play_immediate(self, sound_id: SoundId) -> bool:
        """Play a sound once on a free channel; False if it is not loaded."""
        chunk = self._sounds.get(SoundId(sound_id))
        if chunk is None:
            return False
        chunk.play()
        return True

    def play_looped(self, sound_id: SoundId, loops: int) -> bool:
        """Play a sound repeated ``loops`` more times; False if it is not loaded."""
        chunk = self._sounds.get(SoundId(sound_id))
        if chunk is None:
            return False
        chunk.play(loops=loops)
        return True

    def add_effect(self, effect: Effect) -> None:
        self.effects.append(effect)

    def erase_effect(self, effect: Effect) -> None:
        self.effects = [registered for registered in self.effects if registered is not effect]

    def tick(self, seconds: float) -> list[SoundId]:
        """Advance all effects by ``seconds``; returns the ids of the sounds they triggered."""
        triggered = []
        for effect in self.effects:
            effect.current_duration += seconds
            effect.current_interval += seconds
            if effect.on and effect.current_interval > effect.interval_between_sounds:
                effect.current_interval = 0.0
                effect.current_wave = (effect.current_wave + 1) % len(effect.waves)
                wave = effect.waves[effect.current_wave]
                self.play_immediate(wave)
                triggered.append(wave)
        return triggered