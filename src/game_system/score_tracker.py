"""
Score tracker - current and high score bookkeeping
"""

from typing import Callable, List, TYPE_CHECKING

from .events import Score

if TYPE_CHECKING:
    from utils import ClassLogger


class ScoreTracker:
    """
    Keeps the current and high score and notifies listeners on change.

    The high score never decreases: after every update high = max(high, current).
    """

    def __init__(self, logger: 'ClassLogger'):
        self.logger = logger
        self._score = Score()
        self._listeners: List[Callable[[Score], None]] = []

    @property
    def score(self) -> Score:
        return self._score

    @property
    def current(self) -> int:
        return self._score.current

    @property
    def high(self) -> int:
        return self._score.high

    def add_listener(self, listener: Callable[[Score], None]) -> None:
        """Register a callback invoked with the new Score whenever it changes"""
        self._listeners.append(listener)

    def record_success(self) -> None:
        """A pattern was reproduced completely"""
        current = self._score.current + 1
        if current > self._score.high:
            self.logger.info(f"New high score: {current} 👑")
        self._update(Score(current=current, high=max(self._score.high, current)))

    def record_failure(self) -> None:
        """The player made a mistake; the high score is kept"""
        self._update(Score(current=0, high=self._score.high))

    def _update(self, score: Score) -> None:
        if score == self._score:
            return
        self._score = score
        self.logger.debug(f"{score}")
        for listener in self._listeners:
            listener(score)
