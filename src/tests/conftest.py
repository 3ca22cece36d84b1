"""
Shared fixtures for the game system tests
"""

import logging
from typing import List, Tuple

import pytest

from audio_system.mock_sound_controller import MockSoundController
from button_system import AnimationCategory, Button
from game_system import GameConfig, GameManager, GamePhase, IPresentation, Score
from utils import HybridLogger


class ScriptedRandom:
    """Stand-in random source whose choice() returns a fixed script of buttons, then Red forever"""

    def __init__(self, script: List[Button]):
        self.script = list(script)

    def choice(self, seq):
        return self.script.pop(0) if self.script else Button.RED


class RecordingPresentation(IPresentation):
    """Presentation that just remembers what it was told"""

    def __init__(self):
        self.transitions: List[Tuple[Button, AnimationCategory]] = []
        self.scores: List[Score] = []

    def on_button_category_changed(self, button: Button, category: AnimationCategory) -> None:
        self.transitions.append((button, category))

    def on_score_changed(self, score: Score) -> None:
        self.scores.append(score)


@pytest.fixture
def hybrid_logger():
    main_logger = HybridLogger("SimonTest", log_to_file=False)
    yield main_logger
    main_logger.cleanup()


@pytest.fixture
def logger(hybrid_logger):
    return hybrid_logger.get_class_logger("Test", logging.DEBUG)


@pytest.fixture
def config():
    config = GameConfig(random_seed=1234)
    config.validate()
    return config


@pytest.fixture
def sound(logger):
    return MockSoundController(logger)


@pytest.fixture
def presentation():
    return RecordingPresentation()


@pytest.fixture
def make_manager(config, logger, sound, presentation):
    """Factory: GameManager whose pattern follows the given script of buttons"""
    def factory(script=None, game_config=None):
        rng = ScriptedRandom(script) if script is not None else None
        return GameManager(game_config or config, logger, sound, presentations=[presentation], rng=rng)
    return factory


# Frame time that sums exactly in binary floating point
DT = 0.25


def run_until_phase(manager: GameManager, phase: GamePhase, dt: float = DT, max_steps: int = 400) -> int:
    """Step until the manager is in `phase`; returns the number of steps taken"""
    for steps in range(1, max_steps + 1):
        manager.step(dt)
        if manager.phase is phase:
            return steps
    raise AssertionError(f"Phase {phase} not reached after {max_steps} steps")
