"""Shared constants for the gravity sandbox."""

# Gravitational constant; "gravity" is a per-body strength knob, not SI mass
G = 6.67430e-11

# Spawn defaults (matching the editing panel)
DEFAULT_GRAVITY = 10.0
DEFAULT_RADIUS = 100.0
MAX_GRAVITY = 100.0
MAX_RADIUS = 1000.0

# Integration step per tick; 0.1 gives smooth preview curves
STEPSIZE = 0.1

# Fixed-update cadence (Hz) and its editable bounds
DEFAULT_SPEED = 64.0
MIN_SPEED = 30.0
MAX_SPEED = 1000.0

# Look-ahead length of the trajectory preview
PREDICTION_STEPS = 5000

# Below this separation the force magnitude is clamped
MIN_SEPARATION = 1.0
