"""
Audio System Module

Plays the per-button cues requested by the game core.
"""

from .sound_controller import SoundController, ButtonSounds
from .mock_sound_controller import MockSoundController

__all__ = [
    'SoundController',
    'ButtonSounds',
    'MockSoundController'
]
