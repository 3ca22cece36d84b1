import argparse
import logging
import os

import pygame

from audio_system import MockSoundController, SoundController
from display_system import GameWindow, PanelRenderer
from game_system import AudioConfig, GameConfig, GameManager, RoundTransitionPolicy
from utils import HybridLogger


def create_config(args: argparse.Namespace) -> GameConfig:
    """Build and validate the game configuration from command line arguments"""
    config = GameConfig(
        audio=AudioConfig(sounds_folder=args.sounds),
        round_transition_policy=(
            RoundTransitionPolicy.WAIT_FOR_ANIMATIONS if args.wait_for_animations
            else RoundTransitionPolicy.OVERWRITE
        ),
        random_seed=args.seed,
    )
    config.validate()
    return config


def create_sound_player(config: GameConfig, mute: bool, main_logger: HybridLogger):
    """Real pygame cues, or the mock when muted or when no audio device is available"""
    audio_logger = main_logger.get_class_logger("SoundController", logging.INFO)
    if mute:
        return MockSoundController(audio_logger)
    try:
        return SoundController(audio_logger,
                               sounds_folder=config.audio.sounds_folder,
                               volume=config.audio.volume,
                               tone_duration_s=config.audio.tone_duration_s)
    except pygame.error as e:
        audio_logger.warning(f"Audio unavailable ({e}) - continuing without sound")
        return MockSoundController(audio_logger)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simon memory game")
    parser.add_argument("--mute", action="store_true", help="run without audio")
    parser.add_argument("--sounds", default=None, help="folder with red/green/blue/yellow.wav cues")
    parser.add_argument("--seed", type=int, default=None, help="fixed seed for reproducible patterns")
    parser.add_argument("--wait-for-animations", action="store_true",
                        help="let press animations finish before the next reveal")
    parser.add_argument("--debug", action="store_true", help="debug level logging")
    return parser.parse_args()


def runMain():
    args = parse_args()
    main_logger = HybridLogger("Simon")
    level = logging.DEBUG if args.debug else logging.INFO
    logger = main_logger.get_main_logger(level)

    try:
        logger.info("Simon started")
        config = create_config(args)

        os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
        pygame.init()
        screen = pygame.display.set_mode((config.display.width, config.display.height))

        sound_player = create_sound_player(config, args.mute, main_logger)
        renderer = PanelRenderer(config.display, main_logger.get_class_logger("PanelRenderer", level))
        game_manager = GameManager(config,
                                   main_logger.get_class_logger("GameManager", level),
                                   sound_player,
                                   presentations=[renderer])

        GameWindow(config, screen, game_manager, renderer,
                   main_logger.get_class_logger("GameWindow", level)).run_game_loop()

    except KeyboardInterrupt:
        logger.info("Received shutdown signal (Ctrl+C)")

    finally:
        pygame.quit()
        logger.info("Simon stopped")
        main_logger.cleanup()


if __name__ == "__main__":
    runMain()
