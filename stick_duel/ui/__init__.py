"""
UI System Module
"""

from stick_duel.ui.hud import HUD, HitPointReadout

__all__ = ['HUD', 'HitPointReadout']
