#!/usr/bin/env python3
"""Bird sprite with flapping wing and tilt (mixin)."""

from __future__ import annotations

import math

import pygame


class ActorRenderer:
    """Mixin that draws the actor, rotated by its tilt."""

    # Sprite canvas is larger than the body so the beak and wing fit.
    _SPRITE_W = 60
    _SPRITE_H = 44

    def _build_actor_sprite(self, wing_up: bool) -> pygame.Surface:
        p = self.world.policy
        sprite = pygame.Surface((self._SPRITE_W, self._SPRITE_H), pygame.SRCALPHA)
        cx, cy = self._SPRITE_W // 2, self._SPRITE_H // 2
        bw, bh = int(p.actor_width), int(p.actor_height)

        body = pygame.Rect(cx - bw // 2, cy - bh // 2, bw, bh)
        pygame.draw.ellipse(sprite, self.BIRD_BODY, body)
        pygame.draw.ellipse(sprite, self.BIRD_OUTLINE, body, width=1)

        wing_y = -4 if wing_up else 3
        pygame.draw.ellipse(sprite, self.BIRD_WING, pygame.Rect(cx - 14, cy + wing_y - 6, 20, 12))

        pygame.draw.circle(sprite, self.BIRD_EYE_WHITE, (cx + 8, cy - 4), 6)
        pygame.draw.circle(sprite, self.BIRD_EYE, (cx + 10, cy - 4), 3)

        pygame.draw.polygon(
            sprite,
            self.BIRD_BEAK,
            [(cx + 12, cy), (cx + 22, cy + 2), (cx + 12, cy + 6)],
        )
        return sprite

    def draw_actor(self, surface: pygame.Surface) -> None:
        p = self.world.policy
        actor = self.world.actor
        sprite = self._build_actor_sprite(self.world.wing_up)
        # pygame rotates counter-clockwise; positive tilt is nose-down.
        rotated = pygame.transform.rotate(sprite, -math.degrees(actor.tilt))
        surface.blit(rotated, rotated.get_rect(center=(int(p.actor_x), int(actor.y))))
