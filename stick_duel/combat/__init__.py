"""
Combat System Module
"""

from stick_duel.combat.projectile import Projectile
from stick_duel.combat.engine import CombatEngine, CombatEvent

__all__ = ['Projectile', 'CombatEngine', 'CombatEvent']
