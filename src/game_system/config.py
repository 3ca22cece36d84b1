"""
Game system configuration
"""

import enum
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from button_system.buttons import Button


class RoundTransitionPolicy(enum.Enum):
    """
    What happens to button animations still running when a round ends.

    OVERWRITE: the next ShowPattern phase starts its reveal cadence right away;
        a reveal may overwrite a button that is still Pressed, skipping its pop-out.
    WAIT_FOR_ANIMATIONS: the next ShowPattern phase holds its reveal cadence
        until every Pressed/Lit animation from the previous round has ended.
    """
    OVERWRITE = "overwrite"
    WAIT_FOR_ANIMATIONS = "wait_for_animations"


@dataclass
class TimingConfig:
    """Per-phase and per-button timers (seconds)"""
    reveal_interval_s: float = 1.0
    press_duration_s: float = 0.5
    lit_duration_s: float = 0.8


# Rest color and emissive glow color per button
DEFAULT_BUTTON_COLORS: Dict[Button, Tuple[Tuple[int, int, int], Tuple[int, int, int]]] = {
    Button.RED: ((120, 20, 20), (255, 70, 70)),
    Button.GREEN: ((20, 110, 30), (90, 255, 110)),
    Button.BLUE: ((20, 40, 130), (90, 140, 255)),
    Button.YELLOW: ((130, 120, 20), (255, 240, 90)),
}


@dataclass
class DisplayConfig:
    """Presentation window configuration"""
    width: int = 640
    height: int = 640
    press_offset: float = 0.02      # Scene units a pressed button sinks by
    pixels_per_unit: float = 400.0  # Scene units → screen pixels
    font_size: int = 32
    background: Tuple[int, int, int] = (18, 18, 24)
    button_colors: Dict[Button, Tuple[Tuple[int, int, int], Tuple[int, int, int]]] = field(
        default_factory=lambda: dict(DEFAULT_BUTTON_COLORS)
    )

    @property
    def press_offset_px(self) -> int:
        """Press-in offset converted to screen pixels"""
        return round(self.press_offset * self.pixels_per_unit)


@dataclass
class AudioConfig:
    """Audio cue configuration"""
    sounds_folder: Optional[str] = None  # None → synthesized tones
    volume: float = 0.6
    tone_duration_s: float = 0.35


@dataclass
class GameConfig:
    """Main game configuration"""

    timing: TimingConfig = field(default_factory=TimingConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)

    # Timing configuration
    frame_duration_ms: float = 16.67  # ~60 FPS

    round_transition_policy: RoundTransitionPolicy = RoundTransitionPolicy.OVERWRITE

    # Fixed seed for reproducible patterns (None → system randomness)
    random_seed: Optional[int] = None

    @property
    def target_fps(self) -> float:
        """Target FPS derived from frame duration"""
        return 1000.0 / self.frame_duration_ms

    def validate(self) -> None:
        """Basic validation of configuration"""
        if self.frame_duration_ms <= 0:
            raise ValueError("Frame duration must be positive")

        timing = self.timing
        if timing.reveal_interval_s <= 0:
            raise ValueError(f"Reveal interval must be positive, got {timing.reveal_interval_s}")
        if timing.press_duration_s <= 0:
            raise ValueError(f"Press duration must be positive, got {timing.press_duration_s}")
        if timing.lit_duration_s <= 0:
            raise ValueError(f"Lit duration must be positive, got {timing.lit_duration_s}")

        display = self.display
        if display.width <= 0 or display.height <= 0:
            raise ValueError(f"Window size must be positive, got {display.width}x{display.height}")
        if display.press_offset < 0:
            raise ValueError(f"Press offset cannot be negative, got {display.press_offset}")
        missing = set(Button) - set(display.button_colors)
        if missing:
            raise ValueError(f"Missing colors for buttons: {sorted(str(b) for b in missing)}")

        audio = self.audio
        if not (0.0 <= audio.volume <= 1.0):
            raise ValueError(f"Volume must be 0.0-1.0, got {audio.volume}")
        if audio.tone_duration_s <= 0:
            raise ValueError(f"Tone duration must be positive, got {audio.tone_duration_s}")
