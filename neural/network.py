"""
spikegrid module: neural/network.py

Fixed-size spiking network:
- neurons live in one list; indices are stable for the network's lifetime
- synapses address their target by index, validated on construction
- tick() advances every neuron once, in index order

Update order is part of the behaviour: a neuron that fires pushes its weights
into the targets immediately, so a target later in the list can cross its
threshold within the same tick. Targets earlier in the list see the input on
their next tick.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import random
from typing import Iterator, List, NamedTuple, Optional, Tuple

import config
from errors import ConfigError
from neural.layout import LayoutFn, grid_layout
from neural.neuron import Neuron, UnderflowPolicy
from neural.synapse import Synapse

logger = logging.getLogger(__name__)


class NeuronView(NamedTuple):
    """Read-only per-neuron state for rendering."""
    potential: int
    threshold: int
    is_firing: bool
    position: Tuple[float, float]


@dataclass
class Network:
    neurons: List[Neuron] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random)
    underflow: UnderflowPolicy = UnderflowPolicy.CLAMP
    tick_count: int = 0

    def __post_init__(self) -> None:
        self.underflow = UnderflowPolicy.parse(self.underflow)
        for i, neuron in enumerate(self.neurons):
            for syn in neuron.synapses:
                self._check_target(syn, i)

    def __len__(self) -> int:
        return len(self.neurons)

    @staticmethod
    def initialize(
        size: int,
        grid_w: int,
        grid_h: int,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        layout: LayoutFn = grid_layout,
        underflow: UnderflowPolicy | str | None = None,
    ) -> "Network":
        """
        Build ``size`` random neurons laid out on a grid_w x grid_h grid.

        Pass ``rng`` (or ``seed``) for reproducible runs; the same generator
        drives every later tick. Raises ConfigError when the grid does not hold
        exactly ``size`` neurons.
        """
        if size <= 0 or grid_w <= 0 or grid_h <= 0:
            raise ConfigError(f"Network size and grid must be positive (size={size}, grid={grid_w}x{grid_h})")
        if grid_w * grid_h != size:
            raise ConfigError(f"Grid {grid_w}x{grid_h} holds {grid_w * grid_h} neurons, expected {size}")

        if rng is None:
            rng = random.Random(seed)
        if underflow is None:
            underflow = config.POTENTIAL_UNDERFLOW

        neurons = [Neuron.randomized(size, rng) for _ in range(size)]
        for i, neuron in enumerate(neurons):
            neuron.position = layout(i, grid_w, grid_h)

        net = Network(neurons=neurons, rng=rng, underflow=underflow)
        logger.info(
            "Initialized network: %d neurons on %dx%d grid, %d synapses, underflow=%s",
            size,
            grid_w,
            grid_h,
            sum(len(n.synapses) for n in neurons),
            net.underflow.value,
        )
        return net

    def _check_target(self, syn: Synapse, source: Optional[int] = None) -> int:
        idx = syn.post_synaptic_neuron
        if not 0 <= idx < len(self.neurons):
            src = f"neuron {source}" if source is not None else "synapse"
            raise IndexError(
                f"{src} targets neuron {idx}, network has {len(self.neurons)} neurons"
            )
        return idx

    def target_of(self, syn: Synapse, source: Optional[int] = None) -> Neuron:
        return self.neurons[self._check_target(syn, source)]

    def tick(self) -> None:
        lo, hi = config.INPUT_RANGE
        fired = 0

        for i, neuron in enumerate(self.neurons):
            drive = 0 if neuron.refractory_timer > 0 else self.rng.randint(lo, hi)
            if not neuron.step(drive, self.underflow):
                continue
            fired += 1
            for syn in neuron.synapses:
                self.target_of(syn, i).receive(syn.weight, self.underflow)

        self.tick_count += 1
        logger.debug("tick %d: %d neurons fired", self.tick_count, fired)

    @property
    def firing_count(self) -> int:
        return sum(1 for n in self.neurons if n.is_firing)

    def snapshot(self) -> List[NeuronView]:
        return [NeuronView(n.potential, n.threshold, n.is_firing, n.position) for n in self.neurons]

    def connections(self) -> Iterator[Tuple[int, int, int]]:
        """(pre_index, post_index, weight) for every synapse."""
        for i, neuron in enumerate(self.neurons):
            for syn in neuron.synapses:
                yield i, self._check_target(syn, i), syn.weight
