"""Headless drawing smoke tests (no display needed for plain Surfaces)."""

import os
import sys

import pytest

pygame = pytest.importorskip("pygame")

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from neural.network import Network
from neural.neuron import Neuron
from neural.synapse import Synapse
from render import colors
from render.renderer import draw_network


def test_neurons_coloured_by_firing_state():
    a = Neuron(threshold=10, reset_potential=0, potential_decay=1, position=(20.0, 20.0), synapses=[Synapse(1, 3)])
    b = Neuron(threshold=10, reset_potential=0, potential_decay=1, position=(70.0, 70.0))
    a.is_firing = True
    screen = pygame.Surface((100, 100))
    screen.fill(colors.BG)

    draw_network(screen, Network(neurons=[a, b]))

    assert tuple(screen.get_at((20, 20)))[:3] == colors.FIRING
    assert tuple(screen.get_at((70, 70)))[:3] == colors.RESTING
    assert tuple(screen.get_at((45, 45)))[:3] == colors.SYNAPSE
