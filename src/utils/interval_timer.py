"""
Frame-driven timing utility for periodic work in the game loop
"""


class IntervalTimer:
    """
    Fires at most once per interval, counting simulated time passed in by the caller.

    The game loop runs every frame; use this to do something on a fixed cadence
    (reveal the next pattern entry, log memory usage) without reading the wall clock,
    so the same sequence of dt values always produces the same firings.

    Example:
        # In __init__:
        self.reveal_timer = IntervalTimer(1.0)

        # In update loop (runs every frame):
        if self.reveal_timer.advance(dt):
            self.reveal_next()
    """

    def __init__(self, interval_s: float):
        """
        Args:
            interval_s: Seconds between firings (must be positive)
        """
        if interval_s <= 0:
            raise ValueError(f"Interval must be positive, got {interval_s}")
        self.interval_s = interval_s
        self.elapsed_s = 0.0

    def advance(self, dt: float) -> bool:
        """
        Add dt to the accumulated time and fire if a full interval has passed.

        At most one firing is reported per call; leftover time carries over
        so the cadence does not drift with frame jitter.

        Returns:
            True if the interval elapsed during this call, False otherwise
        """
        self.elapsed_s += dt
        if self.elapsed_s >= self.interval_s:
            self.elapsed_s -= self.interval_s
            # A long stall must not cause a burst of firings on the next frames
            if self.elapsed_s >= self.interval_s:
                self.elapsed_s = 0.0
            return True
        return False

    def reset(self) -> None:
        """Restart the interval from zero"""
        self.elapsed_s = 0.0
