"""
Simulation tuning knobs.
"""

# Network shape
GRID_W, GRID_H = 16, 12
NUM_NEURONS = GRID_W * GRID_H

# Neuron construction (half-open ranges)
THRESHOLD_RANGE = (50, 150)
RESET_POTENTIAL_RANGE = (0, 50)

# Neuron construction (inclusive ranges)
DECAY_RANGE = (1, 5)
SYNAPSES_PER_NEURON = (1, 3)
WEIGHT_RANGE = (1, 50)

# Dynamics
INPUT_RANGE = (0, 2)  # random drive per integrating tick, inclusive
REFRACTORY_TICKS = 20

# "clamp" keeps potential >= 0; "wrap" keeps it modulo 2**POTENTIAL_BITS
POTENTIAL_UNDERFLOW = "clamp"
POTENTIAL_BITS = 16

# Layout rectangle neurons are spread over
LAYOUT_W, LAYOUT_H = 800, 600
LAYOUT_MARGIN = 50

# Window
SCREEN_W, SCREEN_H = 900, 700
TARGET_FPS = 60
NEURON_RADIUS = 5

# None seeds from the OS
SEED = None

LOG_LEVEL = "INFO"
