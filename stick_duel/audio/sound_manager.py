"""
Sound Manager
=============
Plays the duel's procedural effects through a small pool of mixer channels.
"""

import pygame
from typing import List, Optional

from stick_duel.config import (
    AUDIO_ENABLED, AUDIO_SAMPLE_RATE, AUDIO_CHANNELS,
    AUDIO_BUFFER_SIZE, MASTER_VOLUME, SFX_VOLUME
)
from stick_duel.audio.generator import ProceduralSFX


class SoundManager:
    """
    Manager for all in-game audio.
    Every public method is a no-op once initialization has failed.
    """

    SFX_CHANNEL_COUNT = 8

    def __init__(self, enabled: bool = AUDIO_ENABLED):
        self.enabled = enabled
        self.initialized = False

        self.master_volume = MASTER_VOLUME
        self.sfx_volume = SFX_VOLUME

        self._channels: List[pygame.mixer.Channel] = []
        self._channel_index = 0
        self._sfx: Optional[ProceduralSFX] = None

        if self.enabled:
            self._init_audio()

    def _init_audio(self):
        """Initialize pygame audio"""
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.pre_init(
                    frequency=AUDIO_SAMPLE_RATE,
                    size=-16,
                    channels=AUDIO_CHANNELS,
                    buffer=AUDIO_BUFFER_SIZE
                )
                pygame.mixer.init()

            pygame.mixer.set_num_channels(self.SFX_CHANNEL_COUNT)
            self._channels = [pygame.mixer.Channel(i)
                              for i in range(self.SFX_CHANNEL_COUNT)]

            self._sfx = ProceduralSFX()

            self.initialized = True
            print("[Audio] Sound manager initialized")

        except (pygame.error, ValueError) as e:
            print(f"[Audio] Failed to initialize: {e}")
            self.enabled = False
            self.initialized = False

    def play(self, sound_name: str, volume: float = 1.0) -> Optional[pygame.mixer.Channel]:
        """
        Play a sound effect.

        Args:
            sound_name: Name from ProceduralSFX ('shot', 'hit', 'reflect', 'ko')
            volume: Volume multiplier (0.0 - 1.0)

        Returns:
            Channel used, or None
        """
        if not self.enabled or not self.initialized:
            return None

        sound = self._sfx.get(sound_name)
        if not sound:
            return None

        channel = self._next_channel()
        sound.set_volume(self.master_volume * self.sfx_volume * volume)
        channel.play(sound)
        return channel

    def _next_channel(self) -> pygame.mixer.Channel:
        """Round-robin selection"""
        channel = self._channels[self._channel_index % len(self._channels)]
        self._channel_index += 1
        return channel

    def pause(self):
        if self.initialized:
            pygame.mixer.pause()

    def unpause(self):
        if self.initialized:
            pygame.mixer.unpause()

    def stop_all(self):
        if self.initialized:
            pygame.mixer.stop()

    def cleanup(self):
        """Cleanup audio resources"""
        if self.initialized:
            self.stop_all()
            pygame.mixer.quit()
            self.initialized = False
            print("[Audio] Sound manager cleaned up")
