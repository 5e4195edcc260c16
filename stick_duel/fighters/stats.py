"""
Fighter Statistics System
=========================
Hit points, guard state and per-match counters for one fighter.
"""

from dataclasses import dataclass, field
from typing import Optional

from stick_duel.config import MAX_HIT_POINTS


@dataclass
class FighterStats:
    """
    Hit points only ever go down. The guard is a timed flag:
    is_blocking together with block_started_at (clock seconds).
    """
    max_hit_points: int = MAX_HIT_POINTS

    # Current values
    hit_points: int = field(default=0, init=False)

    # Guard state
    is_blocking: bool = field(default=False, init=False)
    block_started_at: Optional[float] = field(default=None, init=False)

    # Combat stats tracking
    shots_fired: int = field(default=0, init=False)
    hits_landed: int = field(default=0, init=False)
    hits_taken: int = field(default=0, init=False)
    reflections: int = field(default=0, init=False)

    def __post_init__(self):
        """Initialize current values to max"""
        self.hit_points = self.max_hit_points

    def start_block(self, now: float) -> bool:
        """
        Raise the guard if it is down. Holding the guard does not
        restart the timer. Return True if the guard was raised.
        """
        if self.is_blocking:
            return False
        self.is_blocking = True
        self.block_started_at = now
        return True

    def force_block(self, now: float):
        """Raise the guard and restart the timer regardless of state"""
        self.is_blocking = True
        self.block_started_at = now

    def end_block(self):
        self.is_blocking = False
        self.block_started_at = None

    def expire_block(self, now: float, duration: float) -> bool:
        """Drop the guard once it has been up longer than duration"""
        if self.is_blocking and now - self.block_started_at > duration:
            self.end_block()
            return True
        return False

    def take_hit(self):
        """Unblocked hit: exactly one hit point"""
        self.hit_points -= 1
        self.hits_taken += 1

    def record_shot(self):
        self.shots_fired += 1

    def record_hit(self):
        self.hits_landed += 1

    def record_reflection(self):
        self.reflections += 1

    @property
    def health_percent(self) -> float:
        """Hit points as a fraction of max (0.0 - 1.0)"""
        return max(0, self.hit_points) / self.max_hit_points

    @property
    def is_alive(self) -> bool:
        return self.hit_points > 0
