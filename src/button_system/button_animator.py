"""
ButtonAnimator - per-button feedback state machine with countdown timers
"""

from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

from .animation_state import AnimationCategory, ButtonAnimationState
from .buttons import ALL_BUTTONS, Button

if TYPE_CHECKING:
    from utils import ClassLogger


class ButtonAnimator:
    """
    Owns the animation state of every button and reports category changes.

    State machine per button (no terminal state):
        Inactive --press()--> Pressed --timeout--> Inactive
        Inactive --light()--> Lit     --timeout--> Inactive
        Pressed  --light()--> Lit,  Lit --press()--> Pressed   (overwrite)
        Pressed  --press()--> Pressed                         (timer restart)

    Presentation code never diffs states itself: every change of category is
    recorded as it happens and handed out once per step by drain_transitions().
    Every press()/light() trigger, including a timer restart, is also recorded
    for the audio collaborator and handed out by drain_triggers().
    """

    def __init__(self, press_duration: float, lit_duration: float,
                 logger: Optional['ClassLogger'] = None):
        """
        Args:
            press_duration: Seconds a button stays Pressed after press()
            lit_duration: Seconds a button stays Lit after light()
            logger: Optional ClassLogger for debug tracing
        """
        if press_duration <= 0 or lit_duration <= 0:
            raise ValueError(
                f"Animation durations must be positive: press={press_duration}, lit={lit_duration}"
            )
        self.press_duration = press_duration
        self.lit_duration = lit_duration
        self.logger = logger

        self._states: Dict[Button, ButtonAnimationState] = {
            button: ButtonAnimationState.inactive() for button in ALL_BUTTONS
        }
        # Category of each button as of the last drain_transitions() call
        self._reported: Dict[Button, AnimationCategory] = {
            button: AnimationCategory.INACTIVE for button in ALL_BUTTONS
        }
        # Buttons touched since the last drain, in first-touch order
        self._touched: Dict[Button, None] = {}
        self._triggers: List[Tuple[Button, AnimationCategory]] = []

    def press(self, button: Button) -> None:
        """Force the button into Pressed, overwriting any running timer"""
        self._set(button, ButtonAnimationState.pressed(self.press_duration))
        self._triggers.append((button, AnimationCategory.PRESSED))

    def light(self, button: Button) -> None:
        """Force the button into Lit, overwriting any running timer"""
        self._set(button, ButtonAnimationState.lit(self.lit_duration))
        self._triggers.append((button, AnimationCategory.LIT))

    def tick(self, elapsed: float) -> None:
        """Count down every running timer; buttons whose timer runs out become Inactive"""
        if elapsed < 0:
            raise ValueError(f"Elapsed time cannot be negative, got {elapsed}")
        for button, state in self._states.items():
            if state.is_active:
                self._set(button, state.counted_down(elapsed))

    def reset_all(self) -> None:
        """Return every button to Inactive (used by an explicit game reset)"""
        for button, state in self._states.items():
            if state.is_active:
                self._set(button, ButtonAnimationState.inactive())

    def drain_transitions(self) -> List[Tuple[Button, AnimationCategory]]:
        """
        Return the buttons whose category changed since the previous call.

        A button that left a category and came back within the same step
        (for example Lit overwritten by Lit) is not reported.

        Returns:
            List of (button, new category) pairs, in the order the buttons changed
        """
        transitions = []
        for button in self._touched:
            category = self._states[button].category
            if category is not self._reported[button]:
                transitions.append((button, category))
                self._reported[button] = category
        self._touched.clear()
        return transitions

    def drain_triggers(self) -> List[Tuple[Button, AnimationCategory]]:
        """Return every press()/light() trigger since the previous call"""
        triggers = self._triggers
        self._triggers = []
        return triggers

    def state_of(self, button: Button) -> ButtonAnimationState:
        return self._states[button]

    def category_of(self, button: Button) -> AnimationCategory:
        return self._states[button].category

    def active_buttons(self) -> List[Button]:
        """Buttons currently Pressed or Lit"""
        return [button for button, state in self._states.items() if state.is_active]

    def is_idle(self) -> bool:
        """True when no button animation is running"""
        return not self.active_buttons()

    def _set(self, button: Button, state: ButtonAnimationState) -> None:
        previous = self._states[button]
        self._states[button] = state
        self._touched[button] = None
        # Countdown ticks are not traced, only triggers and timeouts
        if self.logger and (previous.category is not state.category or state.is_active and
                            state.remaining > previous.remaining):
            self.logger.debug(f"{button}: {previous} → {state}")

    def __str__(self) -> str:
        states = ", ".join(f"{button}={state}" for button, state in self._states.items())
        return f"ButtonAnimator({states})"
