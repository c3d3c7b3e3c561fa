#!/usr/bin/env python3
"""Sky, obstacles and scrolling ground (mixin)."""

from __future__ import annotations

import pygame

from sim.world import Obstacle


class SceneRenderer:
    """Mixin that draws the static backdrop and the obstacle pipes."""

    # ------------------------------------------------------------------ #
    #  Sky                                                                 #
    # ------------------------------------------------------------------ #

    def draw_sky(self, surface: pygame.Surface) -> None:
        p = self.world.policy
        surface.fill(self.SKY_COLOR, pygame.Rect(0, 0, int(p.canvas_width), int(p.play_height)))

    # ------------------------------------------------------------------ #
    #  Obstacles                                                           #
    # ------------------------------------------------------------------ #

    def draw_obstacle(self, surface: pygame.Surface, obstacle: Obstacle) -> None:
        p = self.world.policy
        x = int(obstacle.x)
        w = int(p.obstacle_width)
        cap_h = self.PIPE_CAP_HEIGHT
        over = self.PIPE_CAP_OVERHANG
        gap_top = int(obstacle.gap_top(p))
        gap_bottom = int(obstacle.gap_bottom(p))
        ground = int(p.play_height)

        # Upper pipe body + cap
        upper = pygame.Rect(x, 0, w, max(0, gap_top - cap_h))
        self._draw_pipe_part(surface, upper, self.PIPE_COLOR)
        self._draw_pipe_part(
            surface,
            pygame.Rect(x - over, gap_top - cap_h, w + over * 2, cap_h),
            self.PIPE_CAP_COLOR,
        )

        # Lower pipe body + cap
        lower = pygame.Rect(x, gap_bottom + cap_h, w, max(0, ground - gap_bottom - cap_h))
        self._draw_pipe_part(surface, lower, self.PIPE_COLOR)
        self._draw_pipe_part(
            surface,
            pygame.Rect(x - over, gap_bottom, w + over * 2, cap_h),
            self.PIPE_CAP_COLOR,
        )

    def _draw_pipe_part(self, surface: pygame.Surface, rect: pygame.Rect, color) -> None:
        if rect.h <= 0:
            return
        pygame.draw.rect(surface, color, rect)
        pygame.draw.rect(surface, self.PIPE_BORDER, rect.inflate(-2, 0), width=2)

    # ------------------------------------------------------------------ #
    #  Ground                                                              #
    # ------------------------------------------------------------------ #

    def draw_ground(self, surface: pygame.Surface) -> None:
        p = self.world.policy
        top = int(p.play_height)
        width = int(p.canvas_width)
        tile = int(p.ground_tile)
        half = tile // 2

        surface.fill(self.GROUND_COLOR, pygame.Rect(0, top, width, int(p.ground_height)))
        surface.fill(self.GROUND_STRIPE, pygame.Rect(0, top, width, self.GROUND_STRIPE_HEIGHT))

        x = -int(self.world.ground_offset)
        while x < width + tile:
            surface.fill(self.GROUND_STRIPE, pygame.Rect(x, top + 6, half, 4))
            surface.fill(self.GROUND_STRIPE, pygame.Rect(x + half, top + 14, half, 4))
            x += tile
