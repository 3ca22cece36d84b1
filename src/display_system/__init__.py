#!/usr/bin/env python3
"""
Display System - pygame presentation of the button panel

- Pixel: Zero-overhead color class that extends int
- PanelRenderer: IPresentation that draws the buttons and the score
- GameWindow: Frame loop stepping the game manager

Usage:
    renderer = PanelRenderer(config.display, logger)
    game_manager.add_presentation(renderer)
    GameWindow(config, screen, game_manager, renderer, logger).run_game_loop()
"""

from .pixel import Pixel
from .panel_renderer import PanelRenderer, ButtonView
from .game_window import GameWindow

__all__ = ['Pixel', 'PanelRenderer', 'ButtonView', 'GameWindow']
