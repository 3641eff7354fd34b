"""Externally clocked day/hour advancement.

Animation loops live outside the engine: a caller measures elapsed time,
advances a :class:`Stepper` and re-queries the engine with the new value.
"""
from .config import InvalidParameterError
from .orbits import DAYS_PER_YEAR


class Stepper(object):
    """Advance a value at a fixed rate, wrapping into ``[lower, upper)``.

    Parameters
    ----------
    value : float
        Starting value
    rate : float
        Units per unit of elapsed time (e.g. days per second)
    lower, upper : float
        Wrap interval
    whole_steps : bool
        Accumulate fractional progress and only move by whole units
    """

    def __init__(self, value=0.0, rate=1.0, lower=0.0, upper=DAYS_PER_YEAR,
                 whole_steps=False):
        if not upper > lower:
            raise InvalidParameterError(
                f"upper={upper} must be greater than lower={lower}"
            )
        self.lower = lower
        self.upper = upper
        self.rate = rate
        self.whole_steps = whole_steps
        self.accumulator = 0.0
        self.value = self._wrap(value)

    @classmethod
    def days(cls, rate=30.0, start=0.0, whole_steps=False):
        """Day-of-year stepper; the default rate runs a year in ~12 s."""
        return cls(start, rate, 0.0, DAYS_PER_YEAR, whole_steps)

    @classmethod
    def hours(cls, rate=1.0, start=12.0, lower=4.0, upper=20.0):
        """Clock-hour stepper looping over the daylight window."""
        return cls(start, rate, lower, upper)

    def _wrap(self, value):
        span = self.upper - self.lower
        return self.lower + (value - self.lower) % span

    def advance(self, elapsed):
        """Advance by `elapsed` time units and return the new value."""
        delta = elapsed * self.rate
        if self.whole_steps:
            self.accumulator += delta
            whole = int(self.accumulator)
            self.accumulator -= whole
            delta = whole
        self.value = self._wrap(self.value + delta)
        return self.value

    def reset(self, value=None):
        self.accumulator = 0.0
        self.value = self._wrap(self.lower if value is None else value)
