"""
spikegrid module: neural/neuron.py

Leaky integrate-and-fire neuron.

Per tick, when not refractory:
  potential += drive
  potential -= potential_decay
  potential >= threshold -> fire: reset, start refractory timer
The network owns the synapse targets, so propagation happens there.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import random
from typing import List, Tuple

import config
from errors import ConfigError
from neural.synapse import Synapse, make_synapses

POTENTIAL_MODULUS = 1 << config.POTENTIAL_BITS


class NeuronState(Enum):
    INTEGRATING = 0
    REFRACTORY = 1


class UnderflowPolicy(Enum):
    """What happens when decay takes potential below zero."""
    CLAMP = "clamp"  # stop at zero
    WRAP = "wrap"    # unsigned arithmetic modulo POTENTIAL_MODULUS

    @classmethod
    def parse(cls, value: "UnderflowPolicy | str") -> "UnderflowPolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ConfigError(f"Unknown underflow policy {value!r}") from None

    def apply(self, potential: int) -> int:
        if self is UnderflowPolicy.WRAP:
            return potential % POTENTIAL_MODULUS
        return max(0, potential)


@dataclass
class Neuron:
    threshold: int
    reset_potential: int
    potential_decay: int
    synapses: List[Synapse] = field(default_factory=list)
    potential: int = 0
    position: Tuple[float, float] = (0.0, 0.0)
    is_firing: bool = False
    refractory_timer: int = 0

    @staticmethod
    def randomized(network_size: int, rng: random.Random) -> "Neuron":
        """Fresh neuron with randomized parameters and 1-3 outgoing synapses."""
        return Neuron(
            threshold=rng.randrange(*config.THRESHOLD_RANGE),
            reset_potential=rng.randrange(*config.RESET_POTENTIAL_RANGE),
            potential_decay=rng.randint(*config.DECAY_RANGE),
            synapses=make_synapses(network_size, rng),
        )

    @property
    def state(self) -> NeuronState:
        return NeuronState.REFRACTORY if self.refractory_timer > 0 else NeuronState.INTEGRATING

    def step(self, drive: int, policy: UnderflowPolicy = UnderflowPolicy.CLAMP) -> bool:
        """
        Advance one tick. Returns True if the neuron fired.

        A refractory neuron only counts its timer down; is_firing keeps the
        value from its last evaluated tick.
        """
        if self.refractory_timer > 0:
            self.refractory_timer -= 1
            return False

        self.potential = policy.apply(self.potential + drive)
        self.potential = policy.apply(self.potential - self.potential_decay)

        if self.potential >= self.threshold:
            self.is_firing = True
            self.potential = self.reset_potential
            self.refractory_timer = config.REFRACTORY_TICKS
            return True

        self.is_firing = False
        return False

    def receive(self, weight: int, policy: UnderflowPolicy = UnderflowPolicy.CLAMP) -> None:
        # no upper clamp; WRAP still folds into the unsigned range
        self.potential = policy.apply(self.potential + weight)
