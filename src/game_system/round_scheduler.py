"""
Round scheduler - reveals the pattern on a fixed cadence
"""

import enum
from typing import TYPE_CHECKING

from utils import IntervalTimer

if TYPE_CHECKING:
    from button_system.button_animator import ButtonAnimator
    from utils import ClassLogger
    from .pattern_store import PatternStore


class RevealResult(enum.Enum):
    """What one scheduler update did"""
    WAITING = "waiting"       # Interval not yet elapsed
    REVEALED = "revealed"     # Lit the next pattern entry
    EXHAUSTED = "exhausted"   # Every entry shown, reveal pass is over


class RoundScheduler:
    """
    Drives the reveal pass of the ShowPattern phase.

    Every `reveal_interval_s` of simulated time it lights the button under the
    pattern cursor and advances the cursor. The first tick after the last entry
    rewinds the cursor and reports EXHAUSTED so the phase machine can move on.
    """

    def __init__(self,
                 pattern: 'PatternStore',
                 animator: 'ButtonAnimator',
                 reveal_interval_s: float,
                 logger: 'ClassLogger'):
        self.pattern = pattern
        self.animator = animator
        self.logger = logger
        self._timer = IntervalTimer(reveal_interval_s)

    def restart(self) -> None:
        """Start a new reveal pass: cursor to the first entry, full interval until the first reveal"""
        self.pattern.reset_progress()
        self._timer.reset()

    def update(self, dt: float) -> RevealResult:
        """
        Advance the cadence by dt seconds and reveal if a tick is due.

        Returns:
            RevealResult describing what happened this update
        """
        if not self._timer.advance(dt):
            return RevealResult.WAITING

        button = self.pattern.current()
        if button is None:
            self.pattern.reset_progress()
            self.logger.debug("Reveal pass finished")
            return RevealResult.EXHAUSTED

        self.logger.debug(f"Revealing {button} ({self.pattern.progress + 1}/{len(self.pattern)})")
        self.animator.light(button)
        self.pattern.advance()
        return RevealResult.REVEALED
