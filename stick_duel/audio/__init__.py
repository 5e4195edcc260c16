"""
Audio System
============
Sound manager and procedural sound generation.
"""

from stick_duel.audio.sound_manager import SoundManager
from stick_duel.audio.generator import SoundGenerator, ProceduralSFX

__all__ = [
    'SoundManager',
    'SoundGenerator',
    'ProceduralSFX',
]
