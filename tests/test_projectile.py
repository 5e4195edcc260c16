"""
Unit tests for projectile motion and reflection.
"""

import pytest

from stick_duel.config import BULLET_SPEED, BULLET_RADIUS
from stick_duel.combat.projectile import Projectile


class TestProjectile:
    """Tests for Projectile."""

    def test_defaults(self):
        projectile = Projectile(10, 20, 1, 0, owner=0)
        assert projectile.speed == BULLET_SPEED == 5
        assert projectile.radius == BULLET_RADIUS == 5

    def test_advance(self):
        projectile = Projectile(100, 300, 1, 0, owner=0)

        projectile.advance()
        projectile.advance()

        assert projectile.position == (110, 300)

    def test_diagonal_advances_on_both_axes(self):
        projectile = Projectile(100, 100, 1, 1, owner=0)

        projectile.advance()

        assert projectile.position == (105, 105)

    @pytest.mark.parametrize("x,y,outside", [
        (0, 0, False),
        (800, 600, False),
        (400, 300, False),
        (-1, 300, True),
        (801, 300, True),
        (400, -0.5, True),
        (400, 601, True),
    ])
    def test_is_out_of_bounds(self, x, y, outside):
        projectile = Projectile(x, y, 1, 0, owner=0)
        assert projectile.is_out_of_bounds(800, 600) is outside

    def test_reflect_negates_and_changes_owner(self):
        projectile = Projectile(300, 300, 0.6, -0.8, owner=1)

        projectile.reflect(0)

        assert projectile.direction == (-0.6, 0.8)
        assert projectile.owner == 0
        assert projectile.position == (300, 300)
