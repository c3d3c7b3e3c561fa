#!/usr/bin/env python3

from .types import ColorRGB, ColorRGBA, Medal
from .constants import ViewConstants
from .draw_scene import SceneRenderer
from .draw_actor import ActorRenderer
from .hud import HudRenderer
from .pygame_view import FlappyView, run_pygame_view

__all__ = [
    "ColorRGB",
    "ColorRGBA",
    "Medal",
    "ViewConstants",
    "SceneRenderer",
    "ActorRenderer",
    "HudRenderer",
    "FlappyView",
    "run_pygame_view",
]
