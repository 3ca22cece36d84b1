"""
Input validator - checks player presses against the remembered pattern
"""

from typing import TYPE_CHECKING

from .events import RoundOutcome

if TYPE_CHECKING:
    from button_system.button_animator import ButtonAnimator
    from button_system.buttons import Button
    from utils import ClassLogger
    from .pattern_store import PatternStore


class InputValidator:
    """Classifies each player press during the AwaitInput phase"""

    def __init__(self, pattern: 'PatternStore', animator: 'ButtonAnimator', logger: 'ClassLogger'):
        self.pattern = pattern
        self.animator = animator
        self.logger = logger

    def restart(self) -> None:
        """Start a new input pass at the first pattern entry"""
        self.pattern.reset_progress()

    def handle_press(self, button: 'Button') -> RoundOutcome:
        """
        Give press feedback and compare the press with the expected entry.

        The button is pressed visually whether or not it is correct. The cursor
        only moves on CONTINUE; COMPLETE and MISTAKE end the round.

        Returns:
            RoundOutcome for this press
        """
        self.animator.press(button)

        expected = self.pattern.current()
        if button is not expected:
            self.logger.debug(f"Expected {expected}, got {button} at position {self.pattern.progress + 1}")
            return RoundOutcome.MISTAKE

        if self.pattern.is_last():
            return RoundOutcome.COMPLETE

        self.pattern.advance()
        return RoundOutcome.CONTINUE
