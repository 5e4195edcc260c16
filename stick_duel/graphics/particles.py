"""
Particle System
===============
Sparks for hits, guard reflections and knockouts.
"""

import pygame
import random
import math
from typing import List, Tuple
from dataclasses import dataclass

from stick_duel.config import (
    MAX_PARTICLES, PARTICLE_GRAVITY,
    WHITE, YELLOW, ORANGE, RED, CYAN
)


@dataclass
class Particle:
    """Single particle"""
    x: float
    y: float
    vx: float
    vy: float
    size: float
    color: Tuple[int, int, int]
    lifetime: float
    max_lifetime: float
    gravity: float = PARTICLE_GRAVITY

    def update(self, dt: float) -> bool:
        """
        Update particle.
        Return True if still alive.
        """
        self.lifetime -= dt
        if self.lifetime <= 0:
            return False

        self.x += self.vx * dt
        self.y += self.vy * dt
        self.vy += self.gravity * dt

        life_ratio = self.lifetime / self.max_lifetime
        self.size *= 0.95 + 0.05 * life_ratio

        return True

    def get_alpha(self) -> int:
        """Get current alpha based on lifetime"""
        return int(255 * self.lifetime / self.max_lifetime)


class ParticleSystem:
    """
    Manages all particles in the game.
    Uses its own random source so effects never disturb the simulation's.
    """

    def __init__(self, rng: random.Random = None):
        self.rng = rng or random.Random()
        self.particles: List[Particle] = []

    def update(self, dt: float):
        self.particles = [p for p in self.particles if p.update(dt)]

        overflow = len(self.particles) - MAX_PARTICLES
        if overflow > 0:
            # Oldest first
            del self.particles[:overflow]

    def emit(self, position: Tuple[float, float], count: int, config: dict):
        """Emit particles with randomized values inside the config ranges"""
        for _ in range(count):
            angle = math.radians(self.rng.uniform(
                config.get('angle_min', 0), config.get('angle_max', 360)))
            speed = self.rng.uniform(config.get('speed_min', 50),
                                     config.get('speed_max', 150))
            lifetime = self.rng.uniform(config.get('lifetime_min', 0.2),
                                        config.get('lifetime_max', 0.5))

            self.particles.append(Particle(
                x=position[0],
                y=position[1],
                vx=math.cos(angle) * speed,
                vy=math.sin(angle) * speed,
                size=self.rng.uniform(config.get('size_min', 2),
                                      config.get('size_max', 5)),
                color=self.rng.choice(config.get('colors', [WHITE])),
                lifetime=lifetime,
                max_lifetime=lifetime,
                gravity=config.get('gravity', PARTICLE_GRAVITY)
            ))

    def spawn_hit_effect(self, position: Tuple[float, float]):
        """Spawn hit impact particles"""
        self.emit(position, 14, {
            'speed_min': 80, 'speed_max': 220,
            'size_min': 2, 'size_max': 6,
            'lifetime_min': 0.25, 'lifetime_max': 0.6,
            'colors': [RED, ORANGE, YELLOW, WHITE],
        })

    def spawn_reflect_effect(self, position: Tuple[float, float]):
        """Spawn guard spark effect"""
        self.emit(position, 10, {
            'speed_min': 80, 'speed_max': 200,
            'size_min': 2, 'size_max': 4,
            'lifetime_min': 0.15, 'lifetime_max': 0.35,
            'colors': [CYAN, (150, 200, 255), WHITE],
            'gravity': 0,
        })

    def spawn_ko_effect(self, position: Tuple[float, float]):
        """Spawn knockout burst"""
        self.emit(position, 40, {
            'speed_min': 150, 'speed_max': 400,
            'size_min': 4, 'size_max': 10,
            'lifetime_min': 0.6, 'lifetime_max': 1.2,
            'colors': [RED, ORANGE, YELLOW, WHITE],
            'gravity': PARTICLE_GRAVITY * 0.3,
        })

    def render(self, surface: pygame.Surface):
        """Render all particles"""
        for particle in self.particles:
            size = max(1, int(particle.size))
            temp_surface = pygame.Surface((size * 2, size * 2), pygame.SRCALPHA)
            pygame.draw.circle(temp_surface, (*particle.color, particle.get_alpha()),
                               (size, size), size)
            surface.blit(temp_surface, (int(particle.x) - size, int(particle.y) - size))

    def clear(self):
        self.particles.clear()

    @property
    def particle_count(self) -> int:
        return len(self.particles)
