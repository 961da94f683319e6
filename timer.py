class UpdateTimer:
    """
    Repeating gate for simulation steps, fed with frame deltas by the caller.

    `tick(delta)` returns True exactly once each time the accumulated time
    reaches `interval`; the accumulator then restarts from zero, so time past
    the interval is dropped rather than carried into the next period.
    """

    def __init__(self, interval: float = 0.6):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self.elapsed = 0.0
        self.finished = False

    def tick(self, delta: float) -> bool:
        if delta < 0:
            raise ValueError(f"delta must not be negative, got {delta}")
        self.elapsed += delta
        self.finished = self.elapsed >= self.interval
        if self.finished:
            self.elapsed = 0.0
        return self.finished

    def reset(self) -> None:
        self.elapsed = 0.0
        self.finished = False
