"""
Unit tests for projectile resolution: hits, guard reflections,
owner immunity and arena exits.

Run with: python -m pytest tests/test_combat_engine.py -v
"""

import pytest

from stick_duel.config import CombatEventType
from stick_duel.combat.engine import CombatEngine
from stick_duel.combat.projectile import Projectile
from stick_duel.fighters.fighter import Fighter


@pytest.fixture
def engine() -> CombatEngine:
    return CombatEngine(800, 600)


class TestHits:
    """Tests for unblocked hits."""

    def test_straight_shot_lands_on_step_117(self, engine, fighters):
        """
        A shot from (100, 300) reaches the body box of a fighter at x=700.
        The hit lands on step 117 (x=685, |685 - 700| < 20), before step 120.
        """
        player_a, player_b = fighters
        projectiles = [Projectile(100, 300, 1, 0, owner=0)]

        for step in range(1, 121):
            projectiles = engine.resolve(fighters, projectiles)
            if step == 116:
                assert projectiles[0].x == 680
                assert player_b.hit_points == 3
            if step == 117:
                assert projectiles == []
                assert player_b.hit_points == 2
                hit = engine.get_events(CombatEventType.HIT)[0]
                assert hit.target == 1
                assert hit.owner == 0
                assert hit.hit_region == 'body'

        assert player_b.hit_points == 2
        assert player_a.hit_points == 3
        assert projectiles == []

    def test_hit_is_credited_to_owner(self, engine, fighters):
        player_a, player_b = fighters

        engine.resolve(fighters, [Projectile(680, 300, 1, 0, owner=0)])

        assert player_a.stats.hits_landed == 1
        assert player_b.stats.hits_taken == 1

    def test_two_shots_in_one_frame_each_count(self, engine, fighters):
        _, player_b = fighters
        projectiles = [
            Projectile(680, 300, 1, 0, owner=0),
            Projectile(690, 310, 1, 0, owner=0),
        ]

        survivors = engine.resolve(fighters, projectiles)

        assert survivors == []
        assert player_b.hit_points == 1

    def test_no_hit_on_owner(self, engine, fighters):
        """A fresh shot starts inside its owner and must not hurt it."""
        player_a, _ = fighters
        projectiles = [Projectile(player_a.x, player_a.y, 1, 0, owner=0)]

        survivors = engine.resolve(fighters, projectiles)

        assert len(survivors) == 1
        assert player_a.hit_points == 3
        assert engine.events == []


class TestReflection:
    """Tests for shots meeting a raised guard."""

    def test_guard_reflects_shot(self, engine, fighters):
        _, player_b = fighters
        player_b.force_block(0.0)
        projectile = Projectile(680, 300, 1, 0, owner=0)

        survivors = engine.resolve(fighters, [projectile])

        assert survivors == [projectile]
        assert projectile.owner == 1
        assert projectile.direction == (-1, 0)
        assert player_b.hit_points == 3
        assert player_b.stats.reflections == 1
        reflect = engine.get_events(CombatEventType.REFLECT)[0]
        assert reflect.owner == 0
        assert reflect.target == 1

    def test_reflected_shot_does_not_hit_reflector(self, engine, fighters):
        """On the following frames the shot overlaps its new owner and is ignored."""
        _, player_b = fighters
        player_b.force_block(0.0)
        projectiles = engine.resolve(fighters, [Projectile(680, 300, 1, 0, owner=0)])
        player_b.end_block()

        for _ in range(5):
            projectiles = engine.resolve(fighters, projectiles)

        assert player_b.hit_points == 3
        assert len(projectiles) == 1

    def test_reflected_shot_travels_back_and_hits(self, engine, fighters):
        player_a, player_b = fighters
        player_b.force_block(0.0)
        projectiles = engine.resolve(fighters, [Projectile(680, 300, 1, 0, owner=0)])

        for _ in range(200):
            projectiles = engine.resolve(fighters, projectiles)
            if not projectiles:
                break

        assert player_a.hit_points == 2
        assert player_b.stats.hits_landed == 1

    def test_reflection_has_precedence_over_hit(self, engine, fighters):
        _, player_b = fighters
        player_b.force_block(0.0)

        engine.resolve(fighters, [Projectile(700, 290, 0, 1, owner=0)])

        assert player_b.hit_points == 3
        assert engine.get_events(CombatEventType.HIT) == []


class TestBoundsAndOrder:
    """Tests for arena exits and survivor ordering."""

    def test_out_of_bounds_removed(self, engine, fighters):
        survivors = engine.resolve(fighters, [Projectile(798, 100, 1, 0, owner=0)])

        assert survivors == []
        expired = engine.get_events(CombatEventType.EXPIRED)
        assert len(expired) == 1
        assert expired[0].position == (803, 100)

    def test_on_the_edge_stays(self, engine, fighters):
        survivors = engine.resolve(fighters, [Projectile(795, 100, 1, 0, owner=0)])
        assert len(survivors) == 1

    def test_survivors_keep_order(self, engine, fighters):
        first = Projectile(400, 100, 1, 0, owner=0)
        hitting = Projectile(680, 300, 1, 0, owner=0)
        leaving = Projectile(2, 500, -1, 0, owner=1)
        last = Projectile(400, 500, 0, -1, owner=1)

        survivors = engine.resolve(fighters, [first, hitting, leaving, last])

        assert survivors == [first, last]
        assert survivors[0] is first
        assert survivors[1] is last

    def test_events_reset_each_frame(self, engine, fighters):
        engine.resolve(fighters, [Projectile(680, 300, 1, 0, owner=0)])
        assert len(engine.events) == 1

        engine.resolve(fighters, [])

        assert engine.events == []
        assert engine.frame == 2


class TestOutOfBoundsWithContact:
    """Tests for shots that touch a fighter while already outside the arena."""

    @pytest.fixture
    def top_edge_fighters(self):
        shooter = Fighter("Player A", 0, 400, 500)
        blocker = Fighter("Player B", 1, 400, 20)
        return [shooter, blocker]

    def test_reflection_outside_arena_is_removed(self, engine, top_edge_fighters):
        """Head circle pokes above y=0; a shot reflected there still leaves play."""
        _, blocker = top_edge_fighters
        blocker.force_block(0.0)
        projectile = Projectile(400, 3, 0, -1, owner=0)

        survivors = engine.resolve(top_edge_fighters, [projectile])

        assert survivors == []
        assert [e.event_type for e in engine.events] == [
            CombatEventType.REFLECT, CombatEventType.EXPIRED
        ]
        assert blocker.hit_points == 3
        assert blocker.stats.reflections == 1

    def test_unblocked_hit_outside_arena_counts_once(self, engine, top_edge_fighters):
        _, target = top_edge_fighters

        survivors = engine.resolve(top_edge_fighters, [Projectile(400, 3, 0, -1, owner=0)])

        assert survivors == []
        assert target.hit_points == 2
        assert [e.event_type for e in engine.events] == [CombatEventType.HIT]

    def test_owner_overlap_outside_arena_is_removed(self, engine, top_edge_fighters):
        """A fresh shot fired upward from the top edge overlaps its owner's head."""
        _, owner = top_edge_fighters
        projectile = Projectile(400, 3, 0, -1, owner=1)

        survivors = engine.resolve(top_edge_fighters, [projectile])

        assert survivors == []
        assert owner.hit_points == 3
        assert engine.get_events(CombatEventType.EXPIRED)[0].position == (400, -2)
