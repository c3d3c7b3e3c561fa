#!/usr/bin/env python3
"""
Headless tests for the UI helpers and HUD (no window is opened).
"""

import unittest

import pygame

from sim.world import World
from ui.constants import ViewConstants
from ui.helpers import (
    draw_alpha_rect,
    is_flap_event,
    medal_for_score,
    pulse_alpha,
    render_shadowed,
)
from ui.hud import HudRenderer


class InputMappingTests(unittest.TestCase):
    def test_flap_keys_and_mouse(self):
        for key in (pygame.K_SPACE, pygame.K_UP, pygame.K_w):
            with self.subTest(key=key):
                self.assertTrue(is_flap_event(pygame.event.Event(pygame.KEYDOWN, key=key)))
        click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10))
        self.assertTrue(is_flap_event(click))

    def test_other_events_ignored(self):
        events = [
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
            pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE),
            pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(0, 0)),
            pygame.event.Event(pygame.QUIT),
        ]
        for event in events:
            with self.subTest(event=event):
                self.assertFalse(is_flap_event(event))


class MedalTests(unittest.TestCase):
    def test_thresholds(self):
        medals = ViewConstants.MEDALS
        cases = {0: None, 9: None, 10: "bronze", 19: "bronze", 20: "silver",
                 39: "silver", 40: "gold", 250: "gold"}
        for score, name in cases.items():
            with self.subTest(score=score):
                medal = medal_for_score(score, medals)
                self.assertEqual(medal.name if medal else None, name)


class DrawingHelperTests(unittest.TestCase):
    def test_pulse_alpha_range(self):
        values = [pulse_alpha(n) for n in range(200)]
        self.assertAlmostEqual(pulse_alpha(0), 0.7)
        self.assertGreaterEqual(min(values), 0.4 - 1e-9)
        self.assertLessEqual(max(values), 1.0 + 1e-9)

    def test_alpha_rect_blends(self):
        target = pygame.Surface((4, 4))
        target.fill((255, 255, 255))
        draw_alpha_rect(target, (0, 0, 0, 128), pygame.Rect(0, 0, 2, 4))
        shaded = target.get_at((0, 0))
        self.assertTrue(120 <= shaded.r <= 135)
        self.assertEqual(target.get_at((3, 0)).r, 255)

    def test_render_shadowed_anchor(self):
        pygame.font.init()
        try:
            font = pygame.font.Font(None, 20)
            surface = pygame.Surface((200, 100))
            rect = render_shadowed(surface, font, "12", (100, 10), (255, 255, 255),
                                   anchor="midtop")
            self.assertEqual(rect.midtop, (100, 10))
        finally:
            pygame.font.quit()


class _RedShadowHud(ViewConstants, HudRenderer):
    TEXT_SHADOW = (255, 0, 0)

    def __init__(self, world, font):
        self.world = world
        self.font_score = font


class HudShadowTests(unittest.TestCase):
    def test_score_shadow_uses_view_constant(self):
        pygame.font.init()
        try:
            world = World(seed=1)
            world.score = 88
            hud = _RedShadowHud(world, pygame.font.Font(None, 52))
            surface = pygame.Surface((int(world.policy.canvas_width), 100))
            surface.fill((0, 0, 0))

            hud.draw_score(surface)

            shadow_pixels = [
                (x, y)
                for x in range(surface.get_width())
                for y in range(surface.get_height())
                if tuple(surface.get_at((x, y)))[:3] == (255, 0, 0)
            ]
            self.assertTrue(shadow_pixels)
        finally:
            pygame.font.quit()


if __name__ == "__main__":
    unittest.main()
