"""
Central configuration constants for the fishbowl simulation.

Defines default values, thresholds, and rates used across
creature, control, and loop modules.
"""

# ============================================================================
# Health Configuration
# ============================================================================

HEALTH_MAX = 100.0      # Upper bound for every health meter
HEALTH_INITIAL = 50.0   # Starting health for spawned fish

# Passive regeneration while resting (per second)
REST_REGEN_PER_SECOND = 0.8
REST_REGEN_CEILING = 50.0   # Regen only applies at or below this value

# Health costs (per second)
BURST_COST_PER_SECOND = 1.0
MOVE_COST_PER_SECOND = 0.25
IDLE_COST_PER_SECOND = 0.01

# Health gained per food item eaten
FOOD_HEALTH_GAIN = 1.0


# ============================================================================
# Movement Configuration
# ============================================================================

DEFAULT_MAX_SPEED = 1.0       # Units per tick
BURST_SPEED_MULTIPLIER = 2.0
INITIAL_SPEED = 2.0           # Spawn drift speed (may exceed max_speed until steered)

# Foraging step added to velocity toward nearest food
FORAGE_STEP = 0.1


# ============================================================================
# Boundary Avoidance Configuration
# ============================================================================

BOUNDARY_THRESHOLD = 50.0     # Distance from an edge where steering starts
STEERING_RATE = 0.05          # Fraction of angular gap closed per tick
STEERING_JITTER = 0.1         # Max random offset on target angle (radians)


# ============================================================================
# Collision Configuration
# ============================================================================

COLLISION_DAMPING = 0.05      # Velocity push per unit of overlap


# ============================================================================
# Food Defaults
# ============================================================================

FOOD_DEFAULT_RADIUS = 5.0
FOOD_DEFAULT_COLOR = "orange"


# ============================================================================
# Tank Defaults
# ============================================================================

DEFAULT_BOUNDS = (800.0, 600.0)
DEFAULT_FISH_WIDTH = 60.0
DEFAULT_FISH_HEIGHT = 30.0


# ============================================================================
# Performance Configuration
# ============================================================================

# Tick timing window for rolling average
TICK_TIME_WINDOW = 100  # Number of ticks to average

# Default tick summary interval (print every N ticks)
TICK_SUMMARY_INTERVAL = 100
