"""
Live spiking network view: one network tick per rendered frame.
"""

from __future__ import annotations
import logging

import pygame

import config
from neural.network import Network
from render import colors
from render.renderer import draw_hud, draw_network

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    network = Network.initialize(
        config.NUM_NEURONS,
        config.GRID_W,
        config.GRID_H,
        seed=config.SEED,
        underflow=config.POTENTIAL_UNDERFLOW,
    )

    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
    pygame.display.set_caption("Spiking Neural Network Visualization")
    clock = pygame.time.Clock()

    debug = True
    running = True

    while running:
        clock.tick(config.TARGET_FPS)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_TAB:
                debug = not debug

        network.tick()

        # Render
        screen.fill(colors.BG)
        draw_network(screen, network)
        if debug:
            stats = {
                "tps": clock.get_fps(),
                "ticks": network.tick_count,
                "firing": network.firing_count,
                "neurons": len(network),
            }
            draw_hud(screen, stats)

        pygame.display.flip()

    logger.info("Stopped after %d ticks", network.tick_count)
    pygame.quit()


if __name__ == "__main__":
    main()
