"""
Sound Generator
===============
Procedural sound generation for the duel.
No external audio files needed.
"""

import pygame
import numpy as np
from typing import Dict, Optional
from dataclasses import dataclass
from enum import Enum

from stick_duel.config import AUDIO_SAMPLE_RATE, AUDIO_CHANNELS


class WaveType(Enum):
    """Waveforms available for synthesis"""
    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"
    NOISE = "noise"


@dataclass(frozen=True)
class SoundParams:
    """Parameters for one generated sound"""
    frequency: float = 440.0
    duration: float = 0.2
    volume: float = 0.5
    wave_type: WaveType = WaveType.SINE

    # Envelope (ADSR)
    attack: float = 0.01
    decay: float = 0.05
    sustain: float = 0.7
    release: float = 0.1

    # Effects
    pitch_bend: float = 0.0  # Semitones per second
    vibrato_freq: float = 0.0
    vibrato_depth: float = 0.0
    noise_mix: float = 0.0


# Periodic waveforms as functions of the position inside one cycle (0..1)
WAVEFORMS = {
    WaveType.SINE: lambda cycle: np.sin(2 * np.pi * cycle),
    WaveType.SQUARE: lambda cycle: np.where(cycle < 0.5, 1.0, -1.0),
    WaveType.SAWTOOTH: lambda cycle: 2 * cycle - 1,
    WaveType.TRIANGLE: lambda cycle: 1 - 4 * np.abs(cycle - 0.5),
}


class SoundGenerator:
    """
    Turns SoundParams into samples, then into mixer sounds.

    Pitch is tracked in semitones: bend and vibrato add offsets, and the
    oscillator integrates the resulting frequency so sweeps stay continuous.
    """

    def __init__(self, sample_rate: int = AUDIO_SAMPLE_RATE, seed: Optional[int] = None):
        self.sample_rate = sample_rate
        self._noise = np.random.default_rng(seed)
        self._cache: Dict[SoundParams, pygame.mixer.Sound] = {}

    def synthesize(self, params: SoundParams) -> np.ndarray:
        """Mono float32 samples in [-1, 1]"""
        num_samples = int(params.duration * self.sample_rate)
        t = np.arange(num_samples) / self.sample_rate

        tone = self._oscillate(self._frequency_contour(params, t), params.wave_type)
        if params.noise_mix > 0:
            hiss = self._noise.uniform(-1, 1, num_samples)
            tone = params.noise_mix * hiss + (1 - params.noise_mix) * tone

        shaped = tone * self._envelope(params, num_samples) * params.volume
        return np.clip(shaped, -1, 1).astype(np.float32)

    def generate(self, params: SoundParams) -> pygame.mixer.Sound:
        """Build (or fetch cached) mixer sound. Requires an initialized mixer."""
        if params not in self._cache:
            pcm = (self.synthesize(params) * 32767).astype(np.int16)
            if AUDIO_CHANNELS == 2:
                pcm = np.repeat(pcm[:, np.newaxis], 2, axis=1)
            self._cache[params] = pygame.sndarray.make_sound(pcm)
        return self._cache[params]

    def _frequency_contour(self, params: SoundParams, t: np.ndarray) -> np.ndarray:
        """Instantaneous frequency (Hz) at every sample time"""
        semitones = params.pitch_bend * t
        if params.vibrato_freq > 0 and params.vibrato_depth > 0:
            semitones = semitones + params.vibrato_depth * np.sin(2 * np.pi * params.vibrato_freq * t)
        return params.frequency * np.exp2(semitones / 12)

    def _oscillate(self, frequency: np.ndarray, wave_type: WaveType) -> np.ndarray:
        if wave_type == WaveType.NOISE:
            return self._noise.uniform(-1, 1, len(frequency))

        cycle = np.cumsum(frequency / self.sample_rate) % 1.0
        return WAVEFORMS[wave_type](cycle)

    def _envelope(self, params: SoundParams, num_samples: int) -> np.ndarray:
        """
        Piecewise-linear ADSR over sample indices. Attack, decay and release
        shrink together when they do not fit; the first and last samples
        are always silent.
        """
        if num_samples == 0:
            return np.zeros(0)

        stages = np.array([params.attack, params.decay, params.release]) * self.sample_rate
        if stages.sum() > num_samples:
            stages *= num_samples / stages.sum()
        attack, decay, release = stages

        last = num_samples - 1
        knots = np.clip([0, attack, attack + decay, last - release, last], 0, last)
        knots = np.maximum.accumulate(knots)
        levels = [0, 1, params.sustain, params.sustain, 0]
        return np.interp(np.arange(num_samples), knots, levels)


# Named effects used by the game
SOUND_PRESETS: Dict[str, SoundParams] = {
    # Shot - short rising zap
    'shot': SoundParams(
        frequency=520,
        duration=0.09,
        volume=0.35,
        wave_type=WaveType.SQUARE,
        attack=0.002,
        decay=0.02,
        sustain=0.4,
        release=0.06,
        pitch_bend=40
    ),
    # Hit - body thump
    'hit': SoundParams(
        frequency=120,
        duration=0.18,
        volume=0.6,
        wave_type=WaveType.NOISE,
        attack=0.001,
        decay=0.03,
        sustain=0.5,
        release=0.12,
        pitch_bend=-40,
        noise_mix=0.4
    ),
    # Reflect - bright metallic ping
    'reflect': SoundParams(
        frequency=880,
        duration=0.15,
        volume=0.45,
        wave_type=WaveType.TRIANGLE,
        attack=0.002,
        decay=0.03,
        sustain=0.5,
        release=0.1,
        vibrato_freq=30,
        vibrato_depth=0.5
    ),
    # KO - dramatic ending
    'ko': SoundParams(
        frequency=150,
        duration=0.6,
        volume=0.8,
        wave_type=WaveType.SAWTOOTH,
        attack=0.01,
        decay=0.1,
        sustain=0.6,
        release=0.4,
        pitch_bend=-30,
        vibrato_freq=5,
        vibrato_depth=2,
        noise_mix=0.3
    ),
}


class ProceduralSFX:
    """
    Pre-built sound effects, one per preset.
    """

    def __init__(self, generator: Optional[SoundGenerator] = None):
        self.generator = generator or SoundGenerator()
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._generate_all()

    def _generate_all(self):
        for name, params in SOUND_PRESETS.items():
            self._sounds[name] = self.generator.generate(params)

    def get(self, name: str) -> Optional[pygame.mixer.Sound]:
        """Get sound by name"""
        return self._sounds.get(name)
