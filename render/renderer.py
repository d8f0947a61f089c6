"""
spikegrid module: render/renderer.py

Pygame rendering of the network (synapse lines under neuron dots).
"""

from __future__ import annotations
import pygame

import config
from neural.network import Network
from render import colors


def draw_network(screen: pygame.Surface, network: Network) -> None:
    # synapses first so neurons sit on top
    views = network.snapshot()
    for pre, post, _ in network.connections():
        pygame.draw.line(screen, colors.SYNAPSE, views[pre].position, views[post].position, 1)

    for v in views:
        col = colors.FIRING if v.is_firing else colors.RESTING
        x, y = v.position
        pygame.draw.circle(screen, col, (int(x), int(y)), config.NEURON_RADIUS)


def draw_hud(screen: pygame.Surface, stats: dict) -> None:
    font = pygame.font.Font(None, 22)

    lines = [
        f"TPS: {stats.get('tps', 0.0):.2f}",
        f"Tick: {stats.get('ticks', 0)}",
        f"Firing: {stats.get('firing', 0)} / {stats.get('neurons', 0)}",
    ]

    y = 6
    for line in lines:
        txt = font.render(line, True, colors.HUD_TEXT)
        screen.blit(txt, (8, y))
        y += 18
