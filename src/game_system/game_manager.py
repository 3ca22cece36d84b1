"""
Main game manager - owns the simulation state and steps the phase machine
"""

import random
from dataclasses import dataclass
from typing import List, Optional, TYPE_CHECKING

from button_system.button_animator import ButtonAnimator
from button_system.interfaces import IButtonPressHandler
from .events import GamePhase, IPresentation, RoundOutcome, Score
from .input_validator import InputValidator
from .pattern_store import PatternStore
from .round_scheduler import RoundScheduler
from .score_tracker import ScoreTracker
from .states import GameState, ShowPatternState

if TYPE_CHECKING:
    from button_system.buttons import Button
    from utils import ClassLogger
    from .config import GameConfig
    from .events import ISoundPlayer


@dataclass
class SimulationState:
    """All mutable game state, owned by the GameManager"""
    pattern: PatternStore
    animator: ButtonAnimator
    score: ScoreTracker
    phase: GamePhase = GamePhase.SHOW_PATTERN


class GameManager(IButtonPressHandler):
    """
    Main game manager that orchestrates the simulation.

    Responsibilities:
    - Own the simulation state (pattern, animations, score, phase)
    - Queue player presses between frames
    - Step the phase machine once per frame in a fixed order
    - Publish button transitions, sound cues and score changes

    Step order (see step()):
    1. Count down button animations
    2. Run the current phase: reveal cadence, then queued presses
    3. Publish transitions, cues and score changes
    4. Apply the phase transition, if any
    """

    def __init__(self,
                 config: 'GameConfig',
                 logger: 'ClassLogger',
                 sound_player: 'ISoundPlayer',
                 presentations: Optional[List[IPresentation]] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the game manager and enter the first ShowPattern phase.

        Args:
            config: Validated game configuration
            logger: Logger for debugging and monitoring
            sound_player: Audio collaborator for press/lit cues
            presentations: Observers for button transitions and score changes
            rng: Random source for the pattern, defaults to one seeded with config.random_seed
        """
        self.config = config
        self.logger = logger
        self.sound_player = sound_player
        self.presentations: List[IPresentation] = []

        timing = config.timing
        self.state = SimulationState(
            pattern=PatternStore(logger.create_class_logger("PatternStore"),
                                 rng=rng if rng is not None else random.Random(config.random_seed)),
            animator=ButtonAnimator(timing.press_duration_s, timing.lit_duration_s,
                                    logger.create_class_logger("ButtonAnimator")),
            score=ScoreTracker(logger.create_class_logger("ScoreTracker")),
        )
        self.scheduler = RoundScheduler(self.state.pattern, self.state.animator,
                                        timing.reveal_interval_s,
                                        logger.create_class_logger("RoundScheduler"))
        self.validator = InputValidator(self.state.pattern, self.state.animator,
                                        logger.create_class_logger("InputValidator"))

        self.last_outcome: Optional[RoundOutcome] = None
        self._pending_presses: List['Button'] = []
        self._pending_score: Optional[Score] = None
        self.state.score.add_listener(self._on_score_changed)

        for presentation in presentations or []:
            self.add_presentation(presentation)

        # State management - create initial ShowPatternState
        self.current_state: GameState = ShowPatternState(self)
        self.state.phase = self.current_state.phase
        self.current_state.on_enter()

        self.logger.info(
            f"GameManager initialized: reveal every {timing.reveal_interval_s}s, "
            f"press {timing.press_duration_s}s, lit {timing.lit_duration_s}s, "
            f"policy {config.round_transition_policy.value}"
        )

    def add_presentation(self, presentation: IPresentation) -> None:
        """Register an observer and send it the current score"""
        self.presentations.append(presentation)
        presentation.on_score_changed(self.state.score.score)

    def queue_press(self, button: 'Button') -> None:
        """Queue a player press for the next step"""
        self._pending_presses.append(button)

    def step(self, dt: float) -> None:
        """
        Advance the simulation by one frame.

        Timer-driven effects run before player presses, so a press and a
        timeout landing in the same frame always resolve the same way:
        the timeout applies first and the press wins visually.

        Args:
            dt: Seconds since the previous step
        """
        # 1. Timers
        self.state.animator.tick(dt)

        # 2. Phase logic (reveal cadence, then presses)
        presses = self._pending_presses
        self._pending_presses = []
        new_state = self.current_state.update(dt, presses)

        # 3. Notify collaborators
        self._publish()

        # 4. Phase transition
        if new_state:
            self._transition_to_state(new_state)

    def reset(self) -> None:
        """Abandon the current game: empty pattern, zero score (high kept), new ShowPattern phase"""
        self.logger.info("Game reset")
        self._pending_presses.clear()
        self.state.pattern.clear()
        self.state.score.record_failure()
        self.state.animator.reset_all()
        self.last_outcome = None
        self._transition_to_state(ShowPatternState(self))

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    @property
    def score(self) -> Score:
        return self.state.score.score

    def _on_score_changed(self, score: Score) -> None:
        self._pending_score = score

    def _publish(self) -> None:
        """Send this step's animation transitions, sound cues and score change"""
        for button, category in self.state.animator.drain_transitions():
            for presentation in self.presentations:
                presentation.on_button_category_changed(button, category)

        for button, category in self.state.animator.drain_triggers():
            self.sound_player.play_cue(button, category)

        if self._pending_score is not None:
            score = self._pending_score
            self._pending_score = None
            for presentation in self.presentations:
                presentation.on_score_changed(score)

    def _transition_to_state(self, new_state: GameState) -> None:
        """
        Handle transition to a new game phase.

        Args:
            new_state: The new phase to transition to
        """
        self.current_state.on_exit()

        old_state_name = self.current_state.__class__.__name__
        new_state_name = new_state.__class__.__name__
        self.logger.info(f"State transition: {old_state_name} → {new_state_name}")

        self.current_state = new_state
        self.state.phase = new_state.phase

        self.current_state.on_enter()
