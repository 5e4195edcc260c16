"""
Unit tests for the rule-based opponent.

Every test scripts the exact random draws the opponent makes, in order.
"""

import math

import pytest

from stick_duel.ai.opponent import OpponentAI
from stick_duel.combat.projectile import Projectile
from stick_duel.fighters.fighter import Fighter
from tests.conftest import ScriptedRandom


@pytest.fixture
def me() -> Fighter:
    return Fighter("Player B", 1, 700, 300)


@pytest.fixture
def far_enemy() -> Fighter:
    return Fighter("Player A", 0, 100, 300)


@pytest.fixture
def near_enemy() -> Fighter:
    return Fighter("Player A", 0, 500, 300)


def enemy_shot(x, y) -> Projectile:
    return Projectile(x, y, 1, 0, owner=0)


class TestEvasion:
    """Tests for dodging incoming shots."""

    def test_evades_away_from_shot(self, me, far_enemy):
        rng = ScriptedRandom([0.5])          # fire roll only
        ai = OpponentAI(rng)

        decision = ai.act(me, far_enemy, [enemy_shot(640, 300)], now=0.0)

        # Shot is left of me and level with me: move right and up
        assert (decision.dx, decision.dy) == (1, -1)
        assert me.position == (705, 295)
        assert decision.threatened
        assert not decision.blocked
        assert rng.calls == 1

    def test_evades_down_from_shot_above(self, me, far_enemy):
        ai = OpponentAI(ScriptedRandom([0.5]))

        decision = ai.act(me, far_enemy, [enemy_shot(760, 250)], now=0.0)

        assert (decision.dx, decision.dy) == (-1, 1)

    def test_last_threat_decides(self, me, far_enemy):
        ai = OpponentAI(ScriptedRandom([0.5]))
        shots = [enemy_shot(640, 320), enemy_shot(760, 280)]

        decision = ai.act(me, far_enemy, shots, now=0.0)

        assert (decision.dx, decision.dy) == (-1, 1)

    def test_ignores_own_shots(self, me, far_enemy):
        rng = ScriptedRandom([0.5, 0.5])     # wander roll, fire roll
        ai = OpponentAI(rng)
        own = Projectile(690, 300, -1, 0, owner=1)

        decision = ai.act(me, far_enemy, [own], now=0.0)

        assert not decision.threatened
        assert me.position == (700, 300)
        assert rng.calls == 2

    def test_distant_shot_is_not_a_threat(self, me, far_enemy):
        ai = OpponentAI(ScriptedRandom([0.5, 0.5]))

        decision = ai.act(me, far_enemy, [enemy_shot(590, 300)], now=0.0)

        assert not decision.threatened
        assert (decision.dx, decision.dy) == (0, 0)


class TestPanicBlock:
    """Tests for raising the guard against very close shots."""

    def test_blocks_on_low_roll(self, me, far_enemy):
        ai = OpponentAI(ScriptedRandom([0.3, 0.5]))

        decision = ai.act(me, far_enemy, [enemy_shot(680, 300)], now=2.0)

        assert decision.blocked
        assert me.is_blocking
        assert me.block_started_at == 2.0
        assert ai.panic_blocks == 1

    def test_no_block_on_high_roll(self, me, far_enemy):
        ai = OpponentAI(ScriptedRandom([0.5, 0.5]))

        decision = ai.act(me, far_enemy, [enemy_shot(680, 300)], now=2.0)

        assert not decision.blocked
        assert not me.is_blocking
        assert decision.threatened

    def test_panic_block_restarts_running_guard(self, me, far_enemy):
        me.force_block(1.95)
        ai = OpponentAI(ScriptedRandom([0.1, 0.5]))

        ai.act(me, far_enemy, [enemy_shot(680, 300)], now=2.0)

        assert me.block_started_at == 2.0

    def test_one_roll_per_close_threat(self, me, far_enemy):
        rng = ScriptedRandom([0.9, 0.9, 0.5])
        ai = OpponentAI(rng)
        shots = [enemy_shot(680, 300), enemy_shot(690, 310)]

        ai.act(me, far_enemy, shots, now=0.0)

        assert rng.calls == 3

    @pytest.mark.parametrize("now,still_blocking", [(0.15, True), (0.25, False)])
    def test_own_guard_expiry(self, me, far_enemy, now, still_blocking):
        me.force_block(0.0)
        ai = OpponentAI(ScriptedRandom([0.5, 0.5]))

        ai.act(me, far_enemy, [], now=now)

        assert me.is_blocking is still_blocking


class TestWander:
    """Tests for idle movement."""

    @pytest.mark.parametrize("draws,expected", [
        ([0.05, 0.7, 0.2, 0.5], (1, -1)),
        ([0.05, 0.3, 0.8, 0.5], (-1, 1)),
        ([0.05, 0.5, 0.5, 0.5], (-1, -1)),
    ])
    def test_wander_direction(self, me, far_enemy, draws, expected):
        ai = OpponentAI(ScriptedRandom(draws))

        decision = ai.act(me, far_enemy, [], now=0.0)

        assert (decision.dx, decision.dy) == expected

    def test_stays_put_on_high_roll(self, me, far_enemy):
        ai = OpponentAI(ScriptedRandom([0.1, 0.5]))

        decision = ai.act(me, far_enemy, [], now=0.0)

        assert (decision.dx, decision.dy) == (0, 0)
        assert decision.reasoning == "Holding position"


class TestFiring:
    """Tests for opportunistic shots."""

    def test_fires_at_near_enemy(self, me, near_enemy):
        ai = OpponentAI(ScriptedRandom([0.5, 0.95]))

        decision = ai.act(me, near_enemy, [], now=0.0)

        shot = decision.projectile
        assert shot is not None
        assert shot.owner == 1
        assert shot.dx == pytest.approx(-1.0)
        assert shot.dy == pytest.approx(0.0, abs=1e-9)
        assert ai.shots == 1

    def test_fired_direction_is_unit_length(self, me):
        enemy = Fighter("Player A", 0, 550, 180)
        ai = OpponentAI(ScriptedRandom([0.5, 0.99]))

        shot = ai.act(me, enemy, [], now=0.0).projectile

        assert math.hypot(shot.dx, shot.dy) == pytest.approx(1.0)
        assert shot.dx < 0 and shot.dy < 0

    def test_aims_from_position_after_moving(self, me, near_enemy):
        ai = OpponentAI(ScriptedRandom([0.05, 0.7, 0.7, 0.95]))

        decision = ai.act(me, near_enemy, [], now=0.0)

        assert decision.projectile.position == (705, 305)
        expected = math.atan2(300 - 305, 500 - 705)
        assert decision.projectile.dx == pytest.approx(math.cos(expected))
        assert decision.projectile.dy == pytest.approx(math.sin(expected))

    @pytest.mark.parametrize("roll", [0.5, 0.9])
    def test_no_fire_without_high_roll(self, me, near_enemy, roll):
        ai = OpponentAI(ScriptedRandom([0.5, roll]))
        assert ai.act(me, near_enemy, [], now=0.0).projectile is None

    def test_no_fire_out_of_range(self, me, far_enemy):
        ai = OpponentAI(ScriptedRandom([0.5, 0.99]))
        assert ai.act(me, far_enemy, [], now=0.0).projectile is None

    def test_fired_shot_is_not_added_anywhere(self, me, near_enemy):
        projectiles = []
        ai = OpponentAI(ScriptedRandom([0.5, 0.95]))

        ai.act(me, near_enemy, projectiles, now=0.0)

        assert projectiles == []
        assert me.stats.shots_fired == 1
