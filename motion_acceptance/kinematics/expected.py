# motion_acceptance/kinematics/expected.py
"""
Expected-value functions.

An expected-value function maps a timestamp (ms) to the sensor reading the
kinematic model predicts for one axis. The variants are small immutable
values rather than closures, so they compare equal and print their
parameters.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass


class ExpectedFunction(ABC):
    """
    Abstract base class for expected-value functions of time.
    """

    @abstractmethod
    def evaluate(self, timestamp: float) -> float:
        """
        Return the expected value at `timestamp`.

        Args:
            timestamp: Time in milliseconds on the normalized time base.

        Returns:
            The expected sensor value.
        """
        pass

    def __call__(self, timestamp: float) -> float:
        return self.evaluate(timestamp)


@dataclass(frozen=True)
class ZeroFunction(ExpectedFunction):
    """Constant zero. Models an axis, or a window, without commanded motion."""

    def evaluate(self, timestamp: float) -> float:
        return 0


@dataclass(frozen=True)
class LinearRamp(ExpectedFunction):
    """
    Average-velocity model of a move of `distance` over `duration` ms
    starting at `start_time` ms.

    Not clamped: values before the start are negative and values after the
    end keep growing.
    """
    start_time: float
    duration: float
    distance: float

    @property
    def average_velocity(self) -> float:
        return self.distance / self.duration

    @property
    def end_time(self) -> float:
        return self.start_time + self.duration

    def evaluate(self, timestamp: float) -> float:
        # f(start) == 0 and f(start + duration) == distance, exactly.
        if timestamp == self.end_time:
            return self.distance
        return self.distance * ((timestamp - self.start_time) / self.duration)


@dataclass(frozen=True)
class ConstantAt(ExpectedFunction):
    """Holds a fixed value, e.g. the move's final position after it completes."""
    value: float

    def evaluate(self, timestamp: float) -> float:
        return self.value
