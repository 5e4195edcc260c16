"""
HUD System
==========
Hit point readouts, control hint, pause overlay and the winner banner.
"""

import pygame
from typing import Optional

from stick_duel.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT,
    WHITE, LIGHT_GRAY, YELLOW, RED,
    GameState
)

CONTROL_HINT = "Player A: W/A/S/D = Move, F = Shoot, G = Block"
RESTART_HINT = "Press R to restart"


class HitPointReadout:
    """
    "<name> HP: n" text for one fighter.
    Anchored left or right so the right-hand readout hugs the screen edge.
    """

    def __init__(self, x: int, y: int, align_right: bool = False):
        self.x = x
        self.y = y
        self.align_right = align_right

    def format(self, fighter) -> str:
        return f"{fighter.name} HP: {fighter.hit_points}"

    def render(self, surface: pygame.Surface, font: pygame.font.Font, fighter):
        color = WHITE if fighter.is_alive else RED
        text = font.render(self.format(fighter), True, color)
        if self.align_right:
            surface.blit(text, (self.x - text.get_width(), self.y))
        else:
            surface.blit(text, (self.x, self.y))


class HUD:
    """
    Main HUD class combining all elements.
    """

    def __init__(self):
        self.readouts = [
            HitPointReadout(20, 20),
            HitPointReadout(SCREEN_WIDTH - 20, 20, align_right=True),
        ]

        self.small_font: Optional[pygame.font.Font] = None
        self.banner_font: Optional[pygame.font.Font] = None
        self.title_font: Optional[pygame.font.Font] = None

    def _init_fonts(self):
        if self.small_font is None:
            self.small_font = pygame.font.Font(None, 24)
            self.banner_font = pygame.font.Font(None, 48)
            self.title_font = pygame.font.Font(None, 72)

    def render(self, surface: pygame.Surface, simulation, game_state: GameState):
        """Render entire HUD"""
        self._init_fonts()

        for readout, fighter in zip(self.readouts, simulation.fighters):
            readout.render(surface, self.small_font, fighter)

        hint = self.small_font.render(CONTROL_HINT, True, LIGHT_GRAY)
        surface.blit(hint, (20, SCREEN_HEIGHT - 40))

        if game_state == GameState.PAUSED:
            self._render_paused(surface)
        elif game_state == GameState.MATCH_END:
            self._render_banner(surface, simulation.describe_result())

    def _render_paused(self, surface: pygame.Surface):
        overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))
        surface.blit(overlay, (0, 0))

        title = self.title_font.render("PAUSED", True, WHITE)
        surface.blit(title, title.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 - 20)))

        sub = self.small_font.render("ESC = Resume | R = Restart", True, LIGHT_GRAY)
        surface.blit(sub, sub.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 + 30)))

    def _render_banner(self, surface: pygame.Surface, message: str):
        """Winner banner near the centre"""
        text = self.banner_font.render(message, True, YELLOW)
        rect = text.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2))

        # Backing strip
        strip = pygame.Surface((rect.width + 40, rect.height + 20), pygame.SRCALPHA)
        strip.fill((0, 0, 0, 160))
        surface.blit(strip, (rect.x - 20, rect.y - 10))
        surface.blit(text, rect)

        sub = self.small_font.render(RESTART_HINT, True, LIGHT_GRAY)
        surface.blit(sub, sub.get_rect(center=(SCREEN_WIDTH // 2, rect.bottom + 30)))
