"""
Button catalog - the four fixed button identities of the game
"""

import enum


class Button(enum.Enum):
    """
    One of the four colored buttons.

    Members compare and hash by identity, so they are used directly as
    dictionary keys and as pattern elements.
    """
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"

    def __str__(self) -> str:
        return self.name.capitalize()


# Fixed catalog order (panel layout and key bindings follow it)
ALL_BUTTONS = tuple(Button)
