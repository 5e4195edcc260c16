"""
Graphics System Module
"""

from stick_duel.graphics.renderer import Renderer
from stick_duel.graphics.particles import ParticleSystem, Particle

__all__ = ['Renderer', 'ParticleSystem', 'Particle']
