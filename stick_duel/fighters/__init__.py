"""
Fighter System Module
"""

from stick_duel.fighters.fighter import Fighter
from stick_duel.fighters.stats import FighterStats
from stick_duel.fighters.hitbox import HeadRegion, BodyRegion, get_hit_region, check_collision
from stick_duel.fighters.movement import MovementController

__all__ = [
    'Fighter', 'FighterStats', 'HeadRegion', 'BodyRegion',
    'get_hit_region', 'check_collision', 'MovementController'
]
