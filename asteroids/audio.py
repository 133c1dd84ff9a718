from typing import Dict
import logging
import math

import numpy as np
import pygame

from .settings import Settings

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


def _tone(freq: float, duration: float, volume: float, decay: float = 0.0) -> np.ndarray:
    t = np.linspace(0, duration, int(SAMPLE_RATE * duration), endpoint=False)
    return volume * np.exp(-decay * t) * np.sin(2 * np.pi * freq * t)


def _noise(duration: float, volume: float, decay: float, rng: np.random.Generator) -> np.ndarray:
    n = int(SAMPLE_RATE * duration)
    t = np.arange(n) / SAMPLE_RATE
    noise = rng.uniform(-1, 1, n)
    # Moving average takes the hiss out
    noise = np.convolve(noise, np.ones(8) / 8, mode='same')
    return volume * np.exp(-decay * t) * noise


def _make_sound(wave: np.ndarray) -> pygame.mixer.Sound:
    """Convert a mono float wave in [-1, 1] to a stereo 16-bit Sound"""
    wave = np.clip(wave * 32767, -32768, 32767).astype(np.int16)
    stereo = np.ascontiguousarray(np.column_stack((wave, wave)))
    return pygame.sndarray.make_sound(stereo)


class Music:
    """Background heartbeat that speeds up as the belt empties"""

    def __init__(self, sound_effects: 'SoundEffects', fps: int, music_on: bool = True) -> None:
        self.sound_effects = sound_effects
        self.fps = fps
        self.music_on = music_on
        self.low = True
        self.tempo = 1.0  # seconds per beat
        self.beat_time = 0  # frames until the next beat

    def play(self) -> None:
        if self.music_on:
            self.sound_effects.play_beat('beat_low' if self.low else 'beat_high')
            self.low = not self.low

    def set_asteroid_ratio(self, ratio: float) -> None:
        self.tempo = 1.0 - 0.75 * (1.0 - ratio)

    def tick(self) -> None:
        if self.beat_time == 0:
            self.play()
            self.beat_time = math.ceil(self.tempo * self.fps)
        else:
            self.beat_time -= 1

    def toggle(self) -> bool:
        self.music_on = not self.music_on
        logger.info("Music %s", "on" if self.music_on else "off")
        return self.music_on


class SoundEffects:
    def __init__(self, settings: Settings, synthesize: bool = True) -> None:
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self.sound_on = settings.sound_on
        self.thrust_playing = False
        self.music = Music(self, settings.fps, settings.music_on)
        if synthesize and self._init_mixer():
            self._create_sounds()

    def _init_mixer(self) -> bool:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(SAMPLE_RATE, -16, 2, 1024)
        except pygame.error as e:
            logger.warning("Audio unavailable, running silent: %s", e)
            return False
        return True

    def _create_sounds(self) -> None:
        rng = np.random.default_rng()

        # Laser: short downward chirp
        duration = 0.12
        t = np.linspace(0, duration, int(SAMPLE_RATE * duration), endpoint=False)
        freq = 1200 - 5000 * t
        laser = 0.25 * np.exp(-20 * t) * np.sign(np.sin(2 * np.pi * freq * t))
        self.sounds['laser'] = _make_sound(laser)
        self.sounds['laser'].set_volume(0.5)

        # Ship explosion: long rumble
        explode = _noise(0.9, 0.8, 3.0, rng) + _tone(55, 0.9, 0.4, 3.0)
        self.sounds['explode'] = _make_sound(explode)

        # Asteroid hit: shorter, brighter crack
        hit = _noise(0.35, 0.7, 9.0, rng) + _tone(110, 0.35, 0.3, 9.0)
        self.sounds['hit'] = _make_sound(hit)
        self.sounds['hit'].set_volume(0.5)

        # Thrust: looping filtered noise, kept flat so the loop has no seam
        thrust = _noise(1.0, 0.5, 0.0, rng) + _tone(40, 1.0, 0.2)
        self.sounds['thrust'] = _make_sound(thrust)
        self.sounds['thrust'].set_volume(0.4)

        # Heartbeat notes
        self.sounds['beat_low'] = _make_sound(_tone(55, 0.15, 0.6, 12.0))
        self.sounds['beat_high'] = _make_sound(_tone(65, 0.15, 0.6, 12.0))

        logger.debug("Synthesized %d sounds", len(self.sounds))

    def _play(self, sound_name: str) -> None:
        if sound_name in self.sounds:
            self.sounds[sound_name].play()

    def play(self, sound_name: str) -> None:
        if self.sound_on:
            self._play(sound_name)

    def play_beat(self, sound_name: str) -> None:
        # Music has its own switch
        self._play(sound_name)

    def play_laser(self) -> None:
        self.play('laser')

    def play_explosion(self) -> None:
        self.play('explode')

    def play_hit(self) -> None:
        self.play('hit')

    def start_thrust(self) -> None:
        if not self.thrust_playing and self.sound_on:
            if 'thrust' in self.sounds:
                self.sounds['thrust'].play(-1)  # Loop indefinitely
            self.thrust_playing = True

    def stop_thrust(self) -> None:
        if self.thrust_playing:
            if 'thrust' in self.sounds:
                self.sounds['thrust'].stop()
            self.thrust_playing = False

    def toggle_sound(self) -> bool:
        self.sound_on = not self.sound_on
        if not self.sound_on:
            self.stop_thrust()
        logger.info("Sound %s", "on" if self.sound_on else "off")
        return self.sound_on

    def stop_all_sounds(self) -> None:
        for sound in self.sounds.values():
            sound.stop()
        self.thrust_playing = False
