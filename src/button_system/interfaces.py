"""
Abstract interfaces between the input layer and the game core
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .buttons import Button


class IButtonPressHandler(ABC):
    """
    Receiver of player input.

    The input layer calls this at most once per physical click/tap/key press.
    Implementations queue the press; the game core decides during its next
    step whether the press counts (it is ignored outside the input phase).
    """

    @abstractmethod
    def queue_press(self, button: Button) -> None:
        """
        Queue a press of one button for the next simulation step.

        Args:
            button: The button the player pressed
        """
        pass

    @abstractmethod
    def reset(self) -> None:
        """Abandon the current game and start a new one"""
        pass


class IButtonHitTester(ABC):
    """
    Translates a pointer position to the button under it.

    Implemented by the presentation layer, which owns the button geometry.
    """

    @abstractmethod
    def button_at(self, position: Tuple[int, int]) -> Optional[Button]:
        """
        Args:
            position: Pointer position in window coordinates

        Returns:
            The button under the pointer, or None
        """
        pass
