#!/usr/bin/env python3
"""
Main view class: combines all UI mixins into one runnable Pygame window.

Module layout
─────────────
    ui/
    ├── types.py           – ColorRGB, ColorRGBA, Medal
    ├── constants.py       – ViewConstants mixin (all class-level constants)
    ├── helpers.py         – input mapping, medals, alpha / text utilities
    ├── draw_scene.py      – SceneRenderer mixin (sky, pipes, ground)
    ├── draw_actor.py      – ActorRenderer mixin (bird sprite)
    ├── hud.py             – HudRenderer mixin  (score, title, game over, flash)
    └── pygame_view.py     – FlappyView (this file – main loop)

The world is drawn on a canvas-sized surface and scaled to the window,
so every renderer works in canvas coordinates.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import pygame

from sim.world import Phase, World

from .constants import ViewConstants
from .draw_actor import ActorRenderer
from .draw_scene import SceneRenderer
from .helpers import is_flap_event
from .hud import HudRenderer

log = logging.getLogger(__name__)


class FlappyView(
    ViewConstants,
    SceneRenderer,
    ActorRenderer,
    HudRenderer,
):
    """Frame-loop host for a :class:`~sim.world.World`.

    Calls :meth:`World.advance` once per frame and forwards every
    recognised tap to :meth:`World.apply_input`; the simulation speed is
    therefore tied to *fps*.
    """

    def __init__(
        self,
        world: World,
        relay: Optional[Any] = None,
        scale: int = 1,
        fps: int = 60,
    ) -> None:
        self.world = world
        self.relay = relay
        self.scale = max(1, int(scale))
        self.fps = fps

        self.screen: Optional[pygame.Surface] = None
        self.canvas: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.font_score: Optional[pygame.font.Font] = None
        self.font_title: Optional[pygame.font.Font] = None
        self.font_small: Optional[pygame.font.Font] = None
        self.font_tiny: Optional[pygame.font.Font] = None
        self.font_debug: Optional[pygame.font.Font] = None

        self.show_debug = False

    @staticmethod
    def _load_font(size: int, bold: bool = False) -> pygame.font.Font:
        font = pygame.font.Font(None, size)
        font.set_bold(bold)
        return font

    # ------------------------------------------------------------------ #
    #  Frame                                                               #
    # ------------------------------------------------------------------ #
    def draw(self, surface: pygame.Surface) -> None:
        self.draw_sky(surface)
        for obstacle in self.world.obstacles:
            self.draw_obstacle(surface, obstacle)
        self.draw_ground(surface)
        self.draw_actor(surface)

        phase = self.world.phase
        if phase is Phase.TITLE:
            self.draw_title_screen(surface)
        elif phase is Phase.PLAYING:
            self.draw_score(surface)
        else:
            self.draw_flash(surface)
            self.draw_game_over(surface)

        if self.show_debug:
            self._draw_debug_overlay(surface)

    # ------------------------------------------------------------------ #
    #  Main loop                                                           #
    # ------------------------------------------------------------------ #
    def run(self) -> None:
        p = self.world.policy
        canvas_size = (int(p.canvas_width), int(p.canvas_height))

        pygame.init()
        pygame.display.set_caption("Flappy Bird")
        self.screen = pygame.display.set_mode(
            (canvas_size[0] * self.scale, canvas_size[1] * self.scale)
        )
        self.canvas = pygame.Surface(canvas_size)
        self.clock = pygame.time.Clock()
        self.font_score = self._load_font(52, bold=True)
        self.font_title = self._load_font(44, bold=True)
        self.font_small = self._load_font(26, bold=True)
        self.font_tiny = self._load_font(22, bold=True)
        self.font_debug = self._load_font(14)
        log.info("view started %dx%d @ %d fps", *self.screen.get_size(), self.fps)

        running = True
        while running:
            self.clock.tick(self.fps)

            # ---- events ------------------------------------------------- #
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F3:
                    self.show_debug = not self.show_debug
                elif is_flap_event(event):
                    self.world.apply_input()

            # ---- simulation tick ---------------------------------------- #
            self.world.advance()

            # ---- render ------------------------------------------------- #
            self.draw(self.canvas)
            if self.scale == 1:
                self.screen.blit(self.canvas, (0, 0))
            else:
                pygame.transform.scale(self.canvas, self.screen.get_size(), self.screen)
            pygame.display.flip()

        pygame.quit()
        log.info("view closed")


# ---------------------------------------------------------------------- #
#  Convenience entry point                                                 #
# ---------------------------------------------------------------------- #
def run_pygame_view(
    world: World, relay: Optional[Any] = None, scale: int = 1, fps: int = 60
) -> None:
    view = FlappyView(world=world, relay=relay, scale=scale, fps=fps)
    view.run()


if __name__ == "__main__":
    raise SystemExit(
        "pygame_view.py needs a world. Run `python main.py` "
        "or call run_pygame_view(your_world)."
    )
