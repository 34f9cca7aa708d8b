"""Wall-clock stopwatch with millisecond readings."""

import time


class Timer:
    """Measures time elapsed since creation or the last reset."""

    def __init__(self) -> None:
        self._start = 0.0
        self.reset()

    def reset(self) -> None:
        """Restart the measurement from now."""
        self._start = time.perf_counter()

    def elapsed_milliseconds(self) -> float:
        """Return milliseconds elapsed since the last reset."""
        return (time.perf_counter() - self._start) * 1000.0