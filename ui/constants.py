#!/usr/bin/env python3
"""Visual constants shared across all renderers."""

from __future__ import annotations

from typing import Sequence

from .types import ColorRGB, Medal


class ViewConstants:
    """Mixin providing every visual / layout constant."""

    SKY_COLOR: ColorRGB = (78, 192, 202)
    GROUND_COLOR: ColorRGB = (222, 216, 149)
    GROUND_STRIPE: ColorRGB = (210, 176, 76)
    PIPE_COLOR: ColorRGB = (115, 191, 46)
    PIPE_BORDER: ColorRGB = (85, 139, 27)
    PIPE_CAP_COLOR: ColorRGB = (139, 212, 58)
    BIRD_BODY: ColorRGB = (247, 220, 111)
    BIRD_OUTLINE: ColorRGB = (192, 150, 46)
    BIRD_WING: ColorRGB = (230, 126, 34)
    BIRD_EYE_WHITE: ColorRGB = (255, 255, 255)
    BIRD_EYE: ColorRGB = (0, 0, 0)
    BIRD_BEAK: ColorRGB = (231, 76, 60)
    TEXT_COLOR: ColorRGB = (255, 255, 255)
    TEXT_SHADOW: ColorRGB = (0, 0, 0)
    PANEL_COLOR: ColorRGB = (222, 184, 100)
    PANEL_BORDER: ColorRGB = (139, 105, 20)
    PANEL_INNER_BORDER: ColorRGB = (245, 230, 163)
    PANEL_TEXT: ColorRGB = (90, 58, 26)
    DEBUG_COLOR: ColorRGB = (0, 255, 127)

    MEDAL_GOLD: ColorRGB = (241, 196, 15)
    MEDAL_SILVER: ColorRGB = (189, 195, 199)
    MEDAL_BRONZE: ColorRGB = (205, 127, 50)

    # Highest threshold first.
    MEDALS: Sequence[Medal] = (
        Medal("gold", 40, MEDAL_GOLD),
        Medal("silver", 20, MEDAL_SILVER),
        Medal("bronze", 10, MEDAL_BRONZE),
    )

    PIPE_CAP_HEIGHT = 24
    PIPE_CAP_OVERHANG = 4
    GROUND_STRIPE_HEIGHT = 4

    GAME_OVER_DIM_ALPHA = 76
    PANEL_WIDTH = 220
    PANEL_HEIGHT = 160
    PANEL_Y = 140

    TITLE_TEXT = "Flappy Bird"
    START_PROMPT = "Tap or Press Space"
    RESTART_PROMPT = "Tap to Restart"
