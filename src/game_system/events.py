"""
Values and observer interfaces the game core emits to its collaborators
"""

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass

from button_system.animation_state import AnimationCategory
from button_system.buttons import Button


class GamePhase(enum.Enum):
    """The two phases of a round"""
    SHOW_PATTERN = "show_pattern"   # "Monkey see"
    AWAIT_INPUT = "await_input"     # "Monkey do"


class RoundOutcome(enum.Enum):
    """Classification of one validated player press"""
    CONTINUE = "continue"   # Correct, more entries remain
    COMPLETE = "complete"   # Correct, pattern finished
    MISTAKE = "mistake"     # Wrong button

    @property
    def ends_round(self) -> bool:
        return self is not RoundOutcome.CONTINUE


@dataclass(frozen=True)
class Score:
    """Current and best score"""
    current: int = 0
    high: int = 0

    def __str__(self) -> str:
        return f"Score: {self.current}  High: {self.high}"


class IPresentation(ABC):
    """
    Observer for everything the player should see.

    The core calls these after its step; implementations must not call
    back into the core from them.
    """

    @abstractmethod
    def on_button_category_changed(self, button: Button, category: AnimationCategory) -> None:
        """
        A button entered a new animation category.

        PRESSED: press the button in and glow; INACTIVE: pop it back out / stop glowing;
        LIT: glow.
        """
        pass

    @abstractmethod
    def on_score_changed(self, score: Score) -> None:
        """The score changed (never called for unchanged values)"""
        pass


class ISoundPlayer(ABC):
    """Audio collaborator that owns and plays the per-button cues"""

    @abstractmethod
    def play_cue(self, button: Button, category: AnimationCategory) -> None:
        """
        Play the cue for a button that was just pressed or lit.

        Args:
            button: Button whose cue to play
            category: PRESSED for a player press, LIT for a pattern reveal
        """
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Release audio resources"""
        pass
