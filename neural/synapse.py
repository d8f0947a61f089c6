"""
spikegrid module: neural/synapse.py

Weighted directed connection to a neuron, addressed by its index in the network.
"""

from __future__ import annotations
from dataclasses import dataclass
import random
from typing import List

import config


@dataclass(frozen=True)
class Synapse:
    post_synaptic_neuron: int  # index into Network.neurons
    weight: int


def make_synapses(network_size: int, rng: random.Random) -> List[Synapse]:
    lo, hi = config.SYNAPSES_PER_NEURON
    w_lo, w_hi = config.WEIGHT_RANGE
    return [
        Synapse(post_synaptic_neuron=rng.randrange(network_size), weight=rng.randint(w_lo, w_hi))
        for _ in range(rng.randint(lo, hi))
    ]
