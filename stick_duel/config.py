"""
Stick Duel - Configuration & Constants
======================================
All game settings, colors, tuning values and enums in one place.
"""

from enum import Enum, auto
from typing import Optional

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FPS = 60
GAME_TITLE = "STICK DUEL"

# Optional background image, scaled to the window. None = procedural gradient.
BACKGROUND_IMAGE: Optional[str] = None

# =============================================================================
# COLORS
# =============================================================================

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
LIGHT_GRAY = (211, 211, 211)

RED = (220, 50, 50)
CYAN = (0, 255, 255)
YELLOW = (255, 255, 0)
CHARTREUSE = (127, 255, 0)
ORANGE = (230, 150, 50)

# Background gradient
SKY_TOP = (18, 22, 40)
SKY_BOTTOM = (52, 40, 70)
GRID_COLOR = (70, 60, 95)

# =============================================================================
# ARENA SETTINGS
# =============================================================================

ARENA_WIDTH = SCREEN_WIDTH
ARENA_HEIGHT = SCREEN_HEIGHT

# =============================================================================
# FIGHTER SETTINGS
# =============================================================================

PLAYER_SIZE = 40
HALF_SIZE = PLAYER_SIZE / 2
PLAYER_SPEED = 5          # pixels per frame per axis
MAX_HIT_POINTS = 3

# Starting positions (distance from the side walls, vertically centred)
START_OFFSET_X = 100
DEFAULT_FACING = (1, 0)

# Stick figure proportions, also used by the head hit region
HEAD_RADIUS = 8
BODY_LENGTH = 20
ARM_LENGTH = 15
LEG_LENGTH = 15
GUARD_AURA_PADDING = 4

# =============================================================================
# PROJECTILE SETTINGS
# =============================================================================

BULLET_SPEED = 5          # pixels per frame
BULLET_RADIUS = 5

# =============================================================================
# GUARD TIMING (seconds)
# =============================================================================

# Checked every frame for both fighters after input and AI have run.
BLOCK_DURATION = 0.1
# Checked by the opponent AI before it evaluates threats. Longer than
# BLOCK_DURATION, so the per-frame check almost always fires first.
AI_BLOCK_DURATION = 0.2

# =============================================================================
# OPPONENT AI SETTINGS
# =============================================================================

THREAT_RANGE = 100        # per-axis distance that triggers evasion
PANIC_RANGE = 50          # per-axis distance that may trigger a guard
BLOCK_CHANCE = 0.5
WANDER_CHANCE = 0.1
FIRE_RANGE = 300          # per-axis distance for opening fire
FIRE_THRESHOLD = 0.9      # fire when the draw exceeds this

# =============================================================================
# VISUAL EFFECTS SETTINGS
# =============================================================================

MAX_PARTICLES = 300
PARTICLE_GRAVITY = 300

# =============================================================================
# GAME STATE ENUMS
# =============================================================================


class GameState(Enum):
    FIGHTING = auto()
    PAUSED = auto()
    MATCH_END = auto()


class CombatEventType(Enum):
    """Outcomes of a projectile update"""
    HIT = "hit"
    REFLECT = "reflect"
    EXPIRED = "expired"


# =============================================================================
# AUDIO SETTINGS
# =============================================================================

AUDIO_ENABLED = True
AUDIO_SAMPLE_RATE = 44100
AUDIO_CHANNELS = 2
AUDIO_BUFFER_SIZE = 512

MASTER_VOLUME = 0.8
SFX_VOLUME = 0.7

# =============================================================================
# DEBUG FLAGS
# =============================================================================

DEBUG_HITBOXES = False
DEBUG_FRAMERATE = False
DEBUG_AI_DECISIONS = False
