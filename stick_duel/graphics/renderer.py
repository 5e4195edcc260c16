"""
Main Renderer
=============
Draws the arena, the two stick figures and every live projectile
from simulation state. Reads only; never mutates the simulation.
"""

import os
import pygame
from typing import Optional

from stick_duel.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, BACKGROUND_IMAGE,
    HEAD_RADIUS, BODY_LENGTH, ARM_LENGTH, LEG_LENGTH,
    GUARD_AURA_PADDING, BULLET_RADIUS, HALF_SIZE,
    WHITE, CYAN, RED, SKY_TOP, SKY_BOTTOM, GRID_COLOR,
    DEBUG_HITBOXES
)
from stick_duel.fighters.hitbox import HEAD, BODY


class Renderer:
    """
    Main renderer for the game.
    """

    def __init__(self, background_path: Optional[str] = BACKGROUND_IMAGE):
        self._background = self._create_background(background_path)
        self.debug_hitboxes = DEBUG_HITBOXES

    def _create_background(self, path: Optional[str]) -> pygame.Surface:
        """Load the background image if there is one, else draw a gradient"""
        if path and os.path.exists(path):
            image = pygame.image.load(path)
            return pygame.transform.scale(image, (SCREEN_WIDTH, SCREEN_HEIGHT))
        if path:
            print(f"[Graphics] Background '{path}' not found, using gradient")
        return self._create_gradient_surface(SCREEN_WIDTH, SCREEN_HEIGHT)

    @staticmethod
    def _create_gradient_surface(width: int, height: int) -> pygame.Surface:
        surface = pygame.Surface((width, height))
        for y in range(height):
            t = y / max(1, height - 1)
            color = tuple(int(SKY_TOP[i] + (SKY_BOTTOM[i] - SKY_TOP[i]) * t)
                          for i in range(3))
            pygame.draw.line(surface, color, (0, y), (width, y))

        # Faint arena grid
        for x in range(0, width, 50):
            pygame.draw.line(surface, GRID_COLOR, (x, 0), (x, height), 1)
        for y in range(0, height, 50):
            pygame.draw.line(surface, GRID_COLOR, (0, y), (width, y), 1)
        return surface

    def render(self, surface: pygame.Surface, simulation, particle_system=None):
        """
        Render complete game frame.
        """
        surface.blit(self._background, (0, 0))

        for fighter in simulation.fighters:
            self._render_fighter(surface, fighter)

        for projectile in simulation.projectiles:
            pygame.draw.circle(surface, WHITE,
                               (int(projectile.x), int(projectile.y)),
                               BULLET_RADIUS)

        if particle_system:
            particle_system.render(surface)

        if self.debug_hitboxes:
            self._render_debug_hitboxes(surface, simulation.fighters)

    def _render_fighter(self, surface: pygame.Surface, fighter):
        """Stick figure: head circle, body line, arms, two legs"""
        color = fighter.color
        x, y = fighter.x, fighter.y

        head_x = x
        head_y = y - BODY_LENGTH - HEAD_RADIUS

        # Head
        pygame.draw.circle(surface, color, (int(head_x), int(head_y)),
                           HEAD_RADIUS, 2)

        # Body
        pygame.draw.line(surface, color, (x, head_y + HEAD_RADIUS), (x, y), 2)

        # Arms
        pygame.draw.line(surface, color,
                         (x - ARM_LENGTH, y - BODY_LENGTH / 2),
                         (x + ARM_LENGTH, y - BODY_LENGTH / 2), 2)

        # Legs
        pygame.draw.line(surface, color, (x, y), (x - LEG_LENGTH, y + LEG_LENGTH), 2)
        pygame.draw.line(surface, color, (x, y), (x + LEG_LENGTH, y + LEG_LENGTH), 2)

        # Guard aura
        if fighter.is_blocking:
            pygame.draw.circle(surface, CYAN, (int(head_x), int(head_y)),
                               HEAD_RADIUS + GUARD_AURA_PADDING, 3)

    def _render_debug_hitboxes(self, surface: pygame.Surface, fighters):
        """Hit region overlay"""
        for fighter in fighters:
            cx, cy = HEAD.get_center(fighter.x, fighter.y)
            pygame.draw.circle(surface, RED, (int(cx), int(cy)),
                               int(HEAD.radius + BULLET_RADIUS), 1)
            rect = BODY.get_rect(fighter.x, fighter.y)
            pygame.draw.rect(surface, RED, rect, 1)

            # Facing
            fx, fy = fighter.facing
            pygame.draw.line(surface, WHITE, (fighter.x, fighter.y),
                             (fighter.x + fx * HALF_SIZE, fighter.y + fy * HALF_SIZE), 1)
