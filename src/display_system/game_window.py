"""
Game window - pygame frame loop driving the game manager
"""

from typing import TYPE_CHECKING

import psutil
import pygame

from button_system.input_mapper import InputMapper
from game_system.events import GamePhase
from utils import IntervalTimer

if TYPE_CHECKING:
    from game_system.config import GameConfig
    from game_system.game_manager import GameManager
    from utils import ClassLogger
    from .panel_renderer import PanelRenderer


MEMORY_LOG_INTERVAL_S = 60.0

PHASE_CAPTIONS = {
    GamePhase.SHOW_PATTERN: "Simon - watch...",
    GamePhase.AWAIT_INPUT: "Simon - your turn",
}


class GameWindow:
    """
    Runs the frame loop: events → game step → render, at the configured frame rate.

    The game manager is stepped with the measured frame time, so slow frames
    never make the game run slower in game time.
    """

    def __init__(self,
                 config: 'GameConfig',
                 surface: pygame.Surface,
                 game_manager: 'GameManager',
                 renderer: 'PanelRenderer',
                 logger: 'ClassLogger'):
        """
        Args:
            config: Game configuration (frame rate)
            surface: Display surface from pygame.display.set_mode()
            game_manager: Simulation to step every frame
            renderer: Presentation registered with the game manager
            logger: Logger for debugging and monitoring
        """
        self.config = config
        self.surface = surface
        self.game_manager = game_manager
        self.renderer = renderer
        self.logger = logger
        self.input_mapper = InputMapper(game_manager, logger.create_class_logger("InputMapper"),
                                        hit_tester=renderer)
        self.running = True

        self._clock = pygame.time.Clock()
        self._memory_monitor = IntervalTimer(MEMORY_LOG_INTERVAL_S)
        self._process = psutil.Process()
        self._shown_phase = None

    def run_game_loop(self) -> None:
        """
        Run the game loop until the window is closed or Escape is pressed.

        Call this from your main() function for automatic frame management.
        """
        self.logger.info(f"Starting game loop at {self.config.target_fps:.0f} FPS")

        try:
            while self.running:
                dt = self._clock.tick(self.config.target_fps) / 1000.0
                self.update(dt)
        except KeyboardInterrupt:
            self.logger.info("Game stopped by user (Ctrl+C)")
        except Exception as e:
            self.logger.error(f"Game loop error: {e}", exception=e)
            self.logger.flush()
            raise
        finally:
            self.stop()

    def update(self, dt: float) -> None:
        """One frame: input, simulation step, caption, render"""
        # 1. Input
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                self.running = False
                return
            self.input_mapper.handle_event(event)

        # 2. Simulation
        self.game_manager.step(dt)

        # 3. Window caption follows the phase
        if self.game_manager.phase is not self._shown_phase:
            self._shown_phase = self.game_manager.phase
            pygame.display.set_caption(PHASE_CAPTIONS[self._shown_phase])

        # 4. Render
        self.renderer.render(self.surface)
        pygame.display.flip()

        if self._memory_monitor.advance(dt):
            self._log_memory_usage()

    def stop(self) -> None:
        """Stop the loop and release the audio collaborator"""
        self.running = False
        self.game_manager.sound_player.cleanup()
        self.logger.info(f"Game stopped - final {self.game_manager.score}")

    def _log_memory_usage(self) -> None:
        """Log current memory and CPU usage of the process"""
        try:
            process_mb = self._process.memory_info().rss / 1024 / 1024
            process_cpu_percent = self._process.cpu_percent(interval=None)
            sys_mem = psutil.virtual_memory()
            self.logger.info(
                f"💾 Memory - Process: {process_mb:.1f}MB | "
                f"System: {sys_mem.percent:.1f}% used | "
                f"⚙️  CPU - Process: {process_cpu_percent:.1f}%"
            )
        except psutil.Error as e:
            self.logger.warning(f"Failed to log system usage: {e}")
