"""
Panel renderer - draws the four buttons and the score with pygame
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, TYPE_CHECKING

import pygame

from button_system.animation_state import AnimationCategory
from button_system.buttons import ALL_BUTTONS, Button
from button_system.interfaces import IButtonHitTester
from game_system.events import IPresentation, Score
from .pixel import Pixel

if TYPE_CHECKING:
    from game_system.config import DisplayConfig
    from utils import ClassLogger


SCORE_BANNER_PX = 64
MARGIN_PX = 24
GAP_PX = 16


@dataclass
class ButtonView:
    """What the renderer currently shows for one button"""
    rect: pygame.Rect
    rest: Pixel
    glow: Pixel
    category: AnimationCategory = AnimationCategory.INACTIVE
    emissive: bool = False
    pressed_in: bool = False


class PanelRenderer(IPresentation, IButtonHitTester):
    """
    Presentation layer for the button panel.

    Button looks change only when the core reports a category change:
    - → PRESSED: glow, sink by the press offset
    - PRESSED → INACTIVE: stop glowing, pop back out
    - → LIT: glow
    - LIT → INACTIVE: stop glowing

    A button overwritten PRESSED → LIT keeps its sunk position until it is
    next pressed and released (see RoundTransitionPolicy).

    The score text surface is rebuilt only when the score changes.
    """

    def __init__(self, config: 'DisplayConfig', logger: 'ClassLogger'):
        """
        Create the button layout. Requires pygame.init() to have run.

        Args:
            config: Display configuration
            logger: ClassLogger instance for logging
        """
        self.config = config
        self.logger = logger
        self.offset_px = config.press_offset_px
        self.background = Pixel.from_tuple(config.background)

        self.views: Dict[Button, ButtonView] = {}
        for button, rect in zip(ALL_BUTTONS, self._layout(config.width, config.height)):
            rest, glow = config.button_colors[button]
            self.views[button] = ButtonView(rect=rect, rest=Pixel.from_tuple(rest), glow=Pixel.from_tuple(glow))

        self._font = pygame.font.Font(None, config.font_size)
        self._score_surface: Optional[pygame.Surface] = None

    @staticmethod
    def _layout(width: int, height: int):
        """2x2 grid under the score banner, in catalog order"""
        cell_w = (width - 2 * MARGIN_PX - GAP_PX) // 2
        cell_h = (height - SCORE_BANNER_PX - 2 * MARGIN_PX - GAP_PX) // 2
        for index in range(len(ALL_BUTTONS)):
            row, col = divmod(index, 2)
            x = MARGIN_PX + col * (cell_w + GAP_PX)
            y = SCORE_BANNER_PX + MARGIN_PX + row * (cell_h + GAP_PX)
            yield pygame.Rect(x, y, cell_w, cell_h)

    def on_button_category_changed(self, button: Button, category: AnimationCategory) -> None:
        view = self.views[button]
        previous = view.category
        view.category = category

        if category is AnimationCategory.PRESSED:
            view.emissive = True
            view.pressed_in = True
        elif category is AnimationCategory.LIT:
            view.emissive = True
        else:
            view.emissive = False
            if previous is AnimationCategory.PRESSED:
                view.pressed_in = False

    def on_score_changed(self, score: Score) -> None:
        self._score_surface = self._font.render(str(score), True, (235, 235, 235))

    def button_at(self, position: Tuple[int, int]) -> Optional[Button]:
        for button, view in self.views.items():
            if view.rect.collidepoint(position):
                return button
        return None

    def render(self, surface: pygame.Surface) -> None:
        """Draw the whole panel onto the surface"""
        surface.fill(self.background.as_tuple())

        for view in self.views.values():
            color = view.glow if view.emissive else view.rest
            rect = view.rect.move(0, self.offset_px) if view.pressed_in else view.rect
            pygame.draw.rect(surface, color.as_tuple(), rect, border_radius=18)
            if view.emissive:
                pygame.draw.rect(surface, color.blend(Pixel(255, 255, 255), 0.5).as_tuple(),
                                 rect, width=4, border_radius=18)

        if self._score_surface is not None:
            x = (surface.get_width() - self._score_surface.get_width()) // 2
            y = (SCORE_BANNER_PX - self._score_surface.get_height()) // 2
            surface.blit(self._score_surface, (x, y))
