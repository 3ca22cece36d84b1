"""
Game phase base class and the two concrete phases of a round
"""

from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING

from .config import RoundTransitionPolicy
from .errors import OutOfRangeError
from .events import GamePhase, RoundOutcome
from .round_scheduler import RevealResult

if TYPE_CHECKING:
    from button_system.buttons import Button
    from game_system.game_manager import GameManager


class GameState(ABC):
    """
    Abstract base class for the game phases.

    Each phase owns its own:
    - Input handling (presses are either validated or ignored)
    - Timer-driven behaviour
    - Transition conditions

    Phases never keep game data themselves; everything lives in the
    manager's SimulationState so a phase object can be thrown away on exit.
    """

    phase: GamePhase

    def __init__(self, game_manager: 'GameManager'):
        self.game_manager: 'GameManager' = game_manager
        self.state = game_manager.state

    @abstractmethod
    def update(self, dt: float, presses: List['Button']) -> Optional['GameState']:
        """
        Run one frame of this phase.

        Args:
            dt: Seconds since the previous step
            presses: Presses queued since the previous step, oldest first

        Returns:
            New GameState instance if transition needed, None to stay
        """
        pass

    def on_enter(self) -> None:
        """Called when entering this phase (override if needed)"""
        pass

    def on_exit(self) -> None:
        """Called when exiting this phase (override if needed)"""
        pass


class ShowPatternState(GameState):
    """
    "Monkey see" - grows the pattern by one and reveals it entry by entry.

    Transitions:
    - Reveal pass exhausted → AwaitInputState
    """

    phase = GamePhase.SHOW_PATTERN

    def __init__(self, game_manager: 'GameManager'):
        super().__init__(game_manager)
        self.logger = game_manager.logger.create_class_logger("ShowPatternState")
        self.scheduler = game_manager.scheduler
        self._holding_for_animations = False

    def on_enter(self) -> None:
        self.state.pattern.append_random()
        self.scheduler.restart()

        policy = self.game_manager.config.round_transition_policy
        self._holding_for_animations = (
            policy is RoundTransitionPolicy.WAIT_FOR_ANIMATIONS and not self.state.animator.is_idle()
        )
        if self._holding_for_animations:
            busy = ", ".join(str(b) for b in self.state.animator.active_buttons())
            self.logger.debug(f"Holding reveal until animations finish: {busy}")

        self.logger.info(f"Showing pattern of length {len(self.state.pattern)}")

    def update(self, dt: float, presses: List['Button']) -> Optional['GameState']:
        if presses:
            # The player may not pre-empt the reveal
            self.logger.debug(f"Ignored {len(presses)} press(es) while showing pattern")

        if self._holding_for_animations:
            if not self.state.animator.is_idle():
                return None
            self._holding_for_animations = False
            self.logger.debug("Animations finished, starting reveal")

        if self.scheduler.update(dt) is RevealResult.EXHAUSTED:
            return AwaitInputState(self.game_manager)

        return None


class AwaitInputState(GameState):
    """
    "Monkey do" - the player reproduces the pattern.

    Transitions:
    - Whole pattern reproduced → ShowPatternState (score +1, pattern grows)
    - Wrong button → ShowPatternState (score reset, new pattern)
    """

    phase = GamePhase.AWAIT_INPUT

    def __init__(self, game_manager: 'GameManager'):
        super().__init__(game_manager)
        self.logger = game_manager.logger.create_class_logger("AwaitInputState")
        self.validator = game_manager.validator

    def on_enter(self) -> None:
        if not len(self.state.pattern):
            if __debug__:
                raise OutOfRangeError(self.state.pattern.progress, 0)
            self.logger.error("Awaiting input for an empty pattern")
        self.validator.restart()
        self.logger.info(f"Waiting for {len(self.state.pattern)} press(es)")

    def update(self, dt: float, presses: List['Button']) -> Optional['GameState']:
        for index, button in enumerate(presses):
            outcome = self.validator.handle_press(button)
            self.game_manager.last_outcome = outcome

            if not outcome.ends_round:
                self.logger.debug(f"{button} correct, {len(self.state.pattern) - self.state.pattern.progress} to go")
                continue

            dropped = len(presses) - index - 1
            if dropped:
                self.logger.debug(f"Dropped {dropped} press(es) queued after the round ended")

            if outcome is RoundOutcome.COMPLETE:
                self.state.score.record_success()
                self.logger.info(f"Pattern of length {len(self.state.pattern)} completed ✅")
            else:
                length = len(self.state.pattern)
                self.state.score.record_failure()
                self.state.pattern.clear()
                self.logger.info(f"Mistake on pattern of length {length} ❌ - starting over")

            return ShowPatternState(self.game_manager)

        return None
