"""
Core game engine modules

Only the headless pieces are exported here. The pygame-facing Game and
InputHandler are imported from their own modules.
"""

from stick_duel.core.simulation import Simulation, Arena, Intent, MatchResult
from stick_duel.core.state_machine import StateMachine

__all__ = ['Simulation', 'Arena', 'Intent', 'MatchResult', 'StateMachine']
