"""
ButtonAnimationState - immutable per-button animation state
"""

import enum
from dataclasses import dataclass


class AnimationCategory(enum.Enum):
    """Categorical animation state of a button, ignoring timer value"""
    INACTIVE = "inactive"
    PRESSED = "pressed"
    LIT = "lit"


@dataclass(frozen=True)
class ButtonAnimationState:
    """
    Immutable snapshot of one button's animation.

    Usage:
        state = ButtonAnimationState.pressed(0.5)
        state = state.counted_down(0.2)   # PRESSED, remaining=0.3
        state = state.counted_down(0.4)   # INACTIVE
    """
    category: AnimationCategory
    remaining: float = 0.0

    def __post_init__(self):
        """Validate that only timed categories carry a timer"""
        if self.category is AnimationCategory.INACTIVE and self.remaining != 0.0:
            raise ValueError(f"Inactive state cannot have a timer, got remaining={self.remaining}")
        if self.category is not AnimationCategory.INACTIVE and self.remaining <= 0.0:
            raise ValueError(
                f"{self.category.name} state needs a positive duration, got remaining={self.remaining}"
            )

    @classmethod
    def inactive(cls) -> 'ButtonAnimationState':
        return cls(AnimationCategory.INACTIVE)

    @classmethod
    def pressed(cls, duration: float) -> 'ButtonAnimationState':
        return cls(AnimationCategory.PRESSED, duration)

    @classmethod
    def lit(cls, duration: float) -> 'ButtonAnimationState':
        return cls(AnimationCategory.LIT, duration)

    @property
    def is_active(self) -> bool:
        return self.category is not AnimationCategory.INACTIVE

    def counted_down(self, elapsed: float) -> 'ButtonAnimationState':
        """
        Return the state after `elapsed` seconds.

        Inactive is unchanged; a timer reaching zero or below becomes Inactive.
        """
        if not self.is_active:
            return self
        remaining = self.remaining - elapsed
        if remaining <= 0.0:
            return ButtonAnimationState.inactive()
        return ButtonAnimationState(self.category, remaining)

    def __str__(self) -> str:
        if not self.is_active:
            return "Inactive"
        return f"{self.category.name.capitalize()}(remaining={self.remaining:.3f}s)"
