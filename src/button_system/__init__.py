"""
Button System Package

The four button identities, their press/lit feedback state machine,
and the mapping from raw input events to button presses.
"""

from .buttons import Button, ALL_BUTTONS
from .animation_state import AnimationCategory, ButtonAnimationState
from .button_animator import ButtonAnimator
from .interfaces import IButtonPressHandler, IButtonHitTester

__all__ = [
    "Button",
    "ALL_BUTTONS",
    "AnimationCategory",
    "ButtonAnimationState",
    "ButtonAnimator",
    "IButtonPressHandler",
    "IButtonHitTester"
]
