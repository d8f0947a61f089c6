"""
spikegrid module: render/colors.py

Central color palette.
"""

BG = (0, 0, 0)
SYNAPSE = (100, 100, 100)

FIRING = (255, 0, 0)
RESTING = (0, 255, 0)

HUD_TEXT = (235, 235, 235)
