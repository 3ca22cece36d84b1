"""
Pattern store - the remembered button sequence and a cursor into it
"""

import random
from typing import List, Optional, TYPE_CHECKING

from button_system.buttons import ALL_BUTTONS, Button
from .errors import OutOfRangeError

if TYPE_CHECKING:
    from utils import ClassLogger


class PatternStore:
    """
    Append-only pattern of buttons plus a progress cursor.

    The pattern only ever grows by one at a time or is cleared completely.
    The cursor is reused by both phases: the reveal pass during ShowPattern
    and the validation pass during AwaitInput. Each phase resets it on entry,
    and the phases never overlap, so the two uses never see each other's position.

    Example:
        store = PatternStore(logger)
        store.append_random()        # pattern = [Red]
        store.current()              # Red
        store.advance()
        store.current()              # None (exhausted)
    """

    def __init__(self, logger: 'ClassLogger', rng: Optional[random.Random] = None):
        """
        Args:
            logger: ClassLogger instance for logging
            rng: Random source (seed it for reproducible patterns)
        """
        self.logger = logger
        self._rng = rng if rng is not None else random.Random()
        self._pattern: List[Button] = []
        self.progress: int = 0

    @property
    def pattern(self) -> List[Button]:
        """Copy of the remembered sequence"""
        return list(self._pattern)

    def __len__(self) -> int:
        return len(self._pattern)

    def append_random(self) -> Button:
        """
        Append one button drawn uniformly from the four identities.

        Returns:
            The appended button
        """
        button = self._rng.choice(ALL_BUTTONS)
        self._pattern.append(button)
        self.logger.debug(f"Pattern grew to {len(self._pattern)}: appended {button}")
        return button

    def clear(self) -> None:
        """Forget the whole pattern and rewind the cursor"""
        self._pattern.clear()
        self.progress = 0

    def reset_progress(self) -> None:
        """Rewind the cursor to the start of the pattern"""
        self.progress = 0

    def advance(self) -> None:
        """
        Move the cursor forward by one.

        Raises:
            OutOfRangeError: If the cursor is already at the end of the pattern.
                Under `python -O` the cursor is clamped and the error is logged instead.
        """
        if self.progress >= len(self._pattern):
            if __debug__:
                raise OutOfRangeError(self.progress, len(self._pattern))
            self.logger.error(
                f"Cursor clamped at pattern end: progress={self.progress}, length={len(self._pattern)}"
            )
            self.progress = len(self._pattern)
            return
        self.progress += 1

    def current(self) -> Optional[Button]:
        """Button under the cursor, or None when the cursor is past the last entry"""
        if self.progress < len(self._pattern):
            return self._pattern[self.progress]
        return None

    def is_last(self) -> bool:
        """True when the cursor is on the final entry"""
        return len(self._pattern) > 0 and self.progress == len(self._pattern) - 1

    def __str__(self) -> str:
        entries = ", ".join(str(button) for button in self._pattern)
        return f"PatternStore([{entries}], progress={self.progress})"
