"""
Game System - phase state machine for the Simon memory game

This module provides the simulation core: the remembered pattern, the
reveal cadence, validation of player presses, score bookkeeping and the
two-phase state machine that ties them together. It never renders or
plays anything itself; collaborators observe it through IPresentation
and ISoundPlayer.
"""

from .errors import OutOfRangeError
from .events import GamePhase, RoundOutcome, Score, IPresentation, ISoundPlayer
from .pattern_store import PatternStore
from .round_scheduler import RoundScheduler, RevealResult
from .input_validator import InputValidator
from .score_tracker import ScoreTracker
from .states import GameState, ShowPatternState, AwaitInputState
from .game_manager import GameManager, SimulationState
from .config import GameConfig, TimingConfig, DisplayConfig, AudioConfig, RoundTransitionPolicy

__all__ = [
    # Errors
    "OutOfRangeError",
    # Events
    "GamePhase",
    "RoundOutcome",
    "Score",
    "IPresentation",
    "ISoundPlayer",
    # Components
    "PatternStore",
    "RoundScheduler",
    "RevealResult",
    "InputValidator",
    "ScoreTracker",
    # States
    "GameState",
    "ShowPatternState",
    "AwaitInputState",
    "GameManager",
    "SimulationState",
    # Configuration
    "GameConfig",
    "TimingConfig",
    "DisplayConfig",
    "AudioConfig",
    "RoundTransitionPolicy"
]
