"""
STICK DUEL
==========
Two stick figures, one arena, three hit points each.
"""

__version__ = "1.0.0"
