"""
Mock Sound Controller - No-op implementation for running without audio hardware
"""

from typing import List, Tuple

from button_system.animation_state import AnimationCategory
from button_system.buttons import Button
from game_system.events import ISoundPlayer


class MockSoundController(ISoundPlayer):
    """
    Mock implementation of SoundController that performs no audio operations.

    Every requested cue is recorded in `played` so headless runs and tests
    can check what would have been heard.
    """

    def __init__(self, logger):
        """
        Args:
            logger: ClassLogger instance for logging
        """
        self.logger = logger
        self.played: List[Tuple[Button, AnimationCategory]] = []

        self.logger.info("🔇 MockSoundController initialized (audio disabled)")

    def play_cue(self, button: Button, category: AnimationCategory) -> None:
        """Mock: record the cue instead of playing it"""
        self.played.append((button, category))
        self.logger.debug(f"Mock: cue {button} ({category.value})")

    def cleanup(self) -> None:
        """Mock: forget recorded cues"""
        self.played.clear()
