"""Tick-driven countdowns for the per-round and match-wide timers.

A countdown never schedules anything itself. The host delivers elapsed
time through ``tick`` and the countdown reports when it runs out.
"""


class Countdown:
    """A countdown over a fixed number of seconds."""

    def __init__(self, seconds: float):
        if seconds <= 0:
            raise ValueError(f"countdown needs a positive duration, got {seconds}")
        self.seconds = seconds
        self.remaining = seconds

    @property
    def expired(self) -> bool:
        return self.remaining <= 0

    def reset(self) -> None:
        self.remaining = self.seconds

    def tick(self, elapsed: float = 1) -> bool:
        """Consume ``elapsed`` seconds.

        Returns True only on the tick that takes the countdown to zero, so a
        single expiry is reported once.
        """
        if self.expired or elapsed <= 0:
            return False
        self.remaining = max(0.0, self.remaining - elapsed)
        return self.expired

    def __repr__(self) -> str:
        return f"Countdown(remaining={self.remaining}/{self.seconds})"
