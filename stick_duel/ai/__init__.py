"""
AI System Module
"""

from stick_duel.ai.opponent import OpponentAI, AIDecision

__all__ = ['OpponentAI', 'AIDecision']
