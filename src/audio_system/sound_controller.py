"""
Sound Controller - Plays the per-button cues for the game system
"""

import array
import enum
import math
import os
import pygame
from typing import Dict, Optional

from button_system.animation_state import AnimationCategory
from button_system.buttons import Button
from game_system.events import ISoundPlayer


# Constants
SAMPLE_RATE = 44100
FADE_S = 0.01  # Attack/release ramp, avoids clicks


class ButtonSounds(enum.Enum):
    """Per-button cue: file name inside the sounds folder and fallback tone (Hz)"""
    RED = ("red.wav", 310.0)
    GREEN = ("green.wav", 415.0)
    BLUE = ("blue.wav", 209.0)
    YELLOW = ("yellow.wav", 252.0)

    def __init__(self, file_name: str, frequency_hz: float):
        self.file_name = file_name
        self.frequency_hz = frequency_hz

    @classmethod
    def for_button(cls, button: Button) -> 'ButtonSounds':
        return cls[button.name]

    def get_sound_path(self, sounds_folder: str) -> str:
        """Get the full path to the cue file"""
        return os.path.join(sounds_folder, self.file_name)


class SoundController(ISoundPlayer):
    """
    Plays the cue of a button whenever it is pressed or lit.

    Cues are loaded from `sounds_folder` (one file per button, all required)
    or, when no folder is configured, synthesized as the classic four Simon tones.
    """

    def __init__(self, logger, sounds_folder: Optional[str] = None,
                 volume: float = 0.6, tone_duration_s: float = 0.35):
        """
        Initialize sound controller with pygame mixer and prepare the cues.

        Args:
            logger: ClassLogger instance for logging
            sounds_folder: Folder with red/green/blue/yellow cue files, None to synthesize
            volume: Cue volume (0.0 to 1.0)
            tone_duration_s: Length of synthesized tones

        Raises:
            FileNotFoundError: If the sounds folder lacks any cue file
            pygame.error: If the mixer cannot start or a cue fails to load
        """
        self.logger = logger
        self.volume = volume
        self.tone_duration_s = tone_duration_s

        self.mixer = pygame.mixer
        self.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)

        self._sound_objects: Dict[ButtonSounds, pygame.mixer.Sound] = {}
        if sounds_folder:
            self._load_and_validate_sounds(sounds_folder)
        else:
            self._synthesize_tones()

        self.set_volume(volume)

        self.logger.info(f"SoundController initialized ({'files from ' + sounds_folder if sounds_folder else 'synthesized tones'})")

    def _load_and_validate_sounds(self, sounds_folder: str) -> None:
        """
        Load and validate all cue files in one step.

        Raises:
            FileNotFoundError: If any cue files are missing
            pygame.error: If cue files fail to load
        """
        missing_files = [
            sound_enum.get_sound_path(sounds_folder)
            for sound_enum in ButtonSounds
            if not os.path.exists(sound_enum.get_sound_path(sounds_folder))
        ]
        if missing_files:
            raise FileNotFoundError(f"Required sound files not found: {missing_files}")

        for sound_enum in ButtonSounds:
            sound_path = sound_enum.get_sound_path(sounds_folder)
            try:
                self._sound_objects[sound_enum] = pygame.mixer.Sound(sound_path)
            except pygame.error as e:
                raise pygame.error(f"Failed to load sound {sound_enum.name} from {sound_path}: {e}")

    def _synthesize_tones(self) -> None:
        """Build one sine tone per button matching the mixer's actual format"""
        frequency, _size, channels = self.mixer.get_init()
        for sound_enum in ButtonSounds:
            samples = _sine_wave(sound_enum.frequency_hz, self.tone_duration_s, frequency, channels)
            self._sound_objects[sound_enum] = pygame.mixer.Sound(buffer=samples.tobytes())

    def play_cue(self, button: Button, category: AnimationCategory) -> None:
        """Play the button's cue, restarting it if it is still sounding"""
        sound_obj = self._sound_objects[ButtonSounds.for_button(button)]
        sound_obj.stop()
        sound_obj.play()
        self.logger.debug(f"Cue {button} ({category.value})")

    def set_volume(self, volume: float) -> None:
        """
        Set cue volume.

        Args:
            volume: Volume level (0.0 to 1.0)
        """
        self.volume = volume
        for sound_obj in self._sound_objects.values():
            sound_obj.set_volume(volume)

    def cleanup(self) -> None:
        """Stop all cues and release the audio device"""
        self.mixer.stop()
        self._sound_objects.clear()
        self.mixer.quit()
        self.logger.info("SoundController cleaned up")


def _sine_wave(frequency_hz: float, duration_s: float, sample_rate: int, channels: int) -> array.array:
    """Signed 16-bit sine samples, interleaved for `channels`, with a short linear fade in/out"""
    total = int(duration_s * sample_rate)
    fade = max(1, int(FADE_S * sample_rate))
    amplitude = 0.5 * 32767
    samples = array.array('h')
    for i in range(total):
        envelope = min(1.0, i / fade, (total - 1 - i) / fade)
        value = int(amplitude * envelope * math.sin(2.0 * math.pi * frequency_hz * i / sample_rate))
        samples.extend([value] * channels)
    return samples
