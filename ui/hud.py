#!/usr/bin/env python3
"""Score, title screen, game-over panel, death flash and debug overlay (mixin)."""

from __future__ import annotations

import pygame

from .helpers import draw_alpha_rect, medal_for_score, pulse_alpha, render_shadowed


class HudRenderer:
    """Mixin that draws every overlay / HUD element."""

    # ------------------------------------------------------------------ #
    #  Running score                                                       #
    # ------------------------------------------------------------------ #

    def draw_score(self, surface: pygame.Surface) -> None:
        if self.font_score is None:
            return
        width = int(self.world.policy.canvas_width)
        render_shadowed(
            surface, self.font_score, str(self.world.score),
            (width // 2, 20), self.TEXT_COLOR, self.TEXT_SHADOW, anchor="midtop",
        )

    # ------------------------------------------------------------------ #
    #  Title screen                                                        #
    # ------------------------------------------------------------------ #

    def draw_title_screen(self, surface: pygame.Surface) -> None:
        if self.font_title is None or self.font_small is None:
            return
        cx = int(self.world.policy.canvas_width) // 2
        render_shadowed(
            surface, self.font_title, self.TITLE_TEXT, (cx, 100), self.TEXT_COLOR, self.TEXT_SHADOW,
        )
        render_shadowed(
            surface, self.font_small, self.START_PROMPT, (cx, 360),
            self.TEXT_COLOR, self.TEXT_SHADOW, offset=1, alpha=pulse_alpha(self.world.frame_count),
        )
        best = self.world.best_score
        if best > 0 and self.font_tiny is not None:
            render_shadowed(
                surface, self.font_tiny, f"Best: {best}", (cx, 400),
                self.MEDAL_GOLD, self.TEXT_SHADOW, offset=1,
            )

    # ------------------------------------------------------------------ #
    #  Game over                                                           #
    # ------------------------------------------------------------------ #

    def draw_game_over(self, surface: pygame.Surface) -> None:
        if self.font_title is None or self.font_small is None:
            return
        p = self.world.policy
        width, height = int(p.canvas_width), int(p.canvas_height)
        draw_alpha_rect(
            surface, (0, 0, 0, self.GAME_OVER_DIM_ALPHA), pygame.Rect(0, 0, width, height)
        )

        panel = pygame.Rect(
            (width - self.PANEL_WIDTH) // 2, self.PANEL_Y, self.PANEL_WIDTH, self.PANEL_HEIGHT
        )
        pygame.draw.rect(surface, self.PANEL_COLOR, panel)
        pygame.draw.rect(surface, self.PANEL_BORDER, panel, width=3)
        pygame.draw.rect(surface, self.PANEL_INNER_BORDER, panel.inflate(-12, -12), width=2)

        render_shadowed(
            surface, self.font_title, "Game Over", (width // 2, panel.y - 20), self.TEXT_COLOR,
            self.TEXT_SHADOW,
        )

        rows = (("Score", self.world.score, 35), ("Best", self.world.best_score, 70))
        for label, value, dy in rows:
            text = self.font_small.render(label, True, self.PANEL_TEXT)
            surface.blit(text, text.get_rect(midleft=(panel.x + 20, panel.y + dy)))
            text = self.font_small.render(str(value), True, self.PANEL_TEXT)
            surface.blit(text, text.get_rect(midright=(panel.right - 20, panel.y + dy)))

        medal = medal_for_score(self.world.score, self.MEDALS)
        if medal is not None:
            centre = (panel.x + 40, panel.y + 110)
            pygame.draw.circle(surface, medal.color, centre, 18)
            pygame.draw.circle(surface, self.PANEL_BORDER, centre, 18, width=2)
            star = self.font_tiny.render("*", True, self.TEXT_COLOR)
            surface.blit(star, star.get_rect(center=centre))

        render_shadowed(
            surface, self.font_tiny, self.RESTART_PROMPT,
            (width // 2, panel.bottom + 40), self.TEXT_COLOR, self.TEXT_SHADOW,
            offset=1, alpha=pulse_alpha(self.world.frame_count),
        )

    def draw_flash(self, surface: pygame.Surface) -> None:
        flash = self.world.death_flash
        if flash <= 0:
            return
        p = self.world.policy
        draw_alpha_rect(
            surface,
            (255, 255, 255, int(min(1.0, flash) * 255)),
            pygame.Rect(0, 0, int(p.canvas_width), int(p.canvas_height)),
        )

    # ------------------------------------------------------------------ #
    #  Debug / FPS overlay                                                 #
    # ------------------------------------------------------------------ #

    def _draw_debug_overlay(self, surface: pygame.Surface) -> None:
        if self.font_debug is None:
            return
        fps = self.clock.get_fps() if self.clock else 0.0
        snap = self.world.snapshot()
        lines = [
            f"FPS   {fps:.1f}",
            f"PHASE {snap['phase']}",
            f"TICK  {snap['frame_count']}",
            f"Y     {snap['actor']['y']:.1f}",
            f"VEL   {snap['actor']['velocity']:.2f}",
            f"OBST  {len(snap['obstacles'])}",
        ]
        if self.relay is not None:
            m = self.relay.metrics.report()
            lines.append(f"RELAY ok={m['submitted']} fail={m['failed']}")
        x, y = 6, 6
        for line in lines:
            text = self.font_debug.render(line, True, self.DEBUG_COLOR)
            surface.blit(text, (x, y))
            y += 10
