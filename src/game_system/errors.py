"""
Game system errors

A wrong button press is a game outcome, not an error. The only error in the
core is a cursor running past the end of the pattern, which means the phase
state machine is broken.
"""


class OutOfRangeError(IndexError):
    """Pattern cursor would move past the end of the pattern"""

    def __init__(self, progress: int, length: int):
        self.progress = progress
        self.length = length
        super().__init__(f"Cannot advance cursor past pattern end: progress={progress}, length={length}")
