"""
Input mapper - translates pygame keyboard and mouse events into button presses
"""

from typing import Dict, Optional, TYPE_CHECKING

import pygame

from .buttons import Button
from .interfaces import IButtonHitTester, IButtonPressHandler

if TYPE_CHECKING:
    from utils import ClassLogger


# Letter keys and the 1-4 row, in catalog order
DEFAULT_KEY_BINDINGS: Dict[int, Button] = {
    pygame.K_r: Button.RED,
    pygame.K_g: Button.GREEN,
    pygame.K_b: Button.BLUE,
    pygame.K_y: Button.YELLOW,
    pygame.K_1: Button.RED,
    pygame.K_2: Button.GREEN,
    pygame.K_3: Button.BLUE,
    pygame.K_4: Button.YELLOW,
}

RESET_KEY = pygame.K_SPACE


class InputMapper:
    """
    Maps raw pygame events to calls on an IButtonPressHandler.

    One KEYDOWN or left MOUSEBUTTONDOWN produces at most one press; key repeat
    and button release events are ignored so a held key never counts twice.

    Example:
        mapper = InputMapper(game_manager, logger, hit_tester=renderer)
        for event in pygame.event.get():
            mapper.handle_event(event)
    """

    def __init__(self,
                 handler: IButtonPressHandler,
                 logger: 'ClassLogger',
                 hit_tester: Optional[IButtonHitTester] = None,
                 key_bindings: Optional[Dict[int, Button]] = None):
        """
        Args:
            handler: Receiver of presses and reset requests
            logger: ClassLogger instance for logging
            hit_tester: Resolves mouse clicks to buttons (mouse ignored when None)
            key_bindings: pygame key code → Button, defaults to DEFAULT_KEY_BINDINGS
        """
        self._handler = handler
        self._logger = logger
        self._hit_tester = hit_tester
        self._key_bindings = dict(DEFAULT_KEY_BINDINGS if key_bindings is None else key_bindings)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Forward one pygame event.

        Returns:
            True if the event was consumed as a press or reset, False otherwise
        """
        if event.type == pygame.KEYDOWN:
            if event.key == RESET_KEY:
                self._logger.info("Reset requested")
                self._handler.reset()
                return True
            button = self._key_bindings.get(event.key)
            if button is not None:
                self._press(button, "key")
                return True

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and self._hit_tester:
            button = self._hit_tester.button_at(event.pos)
            if button is not None:
                self._press(button, "mouse")
                return True

        return False

    def _press(self, button: Button, source: str) -> None:
        self._logger.debug(f"{button} pressed ({source})")
        self._handler.queue_press(button)
