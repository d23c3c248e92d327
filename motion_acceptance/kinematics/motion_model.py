# motion_acceptance/kinematics/motion_model.py
"""
Kinematic motion model for one axis of a commanded move.
"""

import logging

from ..constants import PORTION_POST, PORTION_PRE, PORTION_TEST
from ..exceptions import KinematicsError
from .expected import ConstantAt, ExpectedFunction, LinearRamp, ZeroFunction

logger = logging.getLogger(__name__)


def generate(start_time: float, duration: float, distance: float) -> ExpectedFunction:
    """
    Return the expected-value function for a move during its window.

    Args:
        start_time: Move start in milliseconds.
        duration: Move duration in milliseconds.
        distance: Commanded distance in device-native units.

    Returns:
        ZeroFunction if `distance` is 0, otherwise a LinearRamp at the
        average velocity distance / duration.

    Raises:
        KinematicsError: If a non-zero distance is commanded with a
                         non-positive duration.
    """
    if distance == 0:
        return ZeroFunction()
    if duration <= 0:
        raise KinematicsError(
            f"Duration must be positive for a move of {distance}, got {duration}."
        )
    return LinearRamp(start_time=start_time, duration=duration, distance=distance)


class MotionModel:
    """
    Expected values of one axis before, during and after a commanded move.

    The during-move function is `generate(...)`. Before the move the axis is
    expected at rest (zero); after the move it is held at the value reached
    at the end of the move.
    """

    def __init__(self, start_time: float, duration: float, distance: float):
        """
        Initialize the motion model.

        Args:
            start_time: Move start in milliseconds.
            duration: Move duration in milliseconds.
            distance: Commanded distance; 0 for an axis that does not move.
        """
        self.start_time = start_time
        self.duration = duration
        self.distance = distance
        self._during = generate(start_time, duration, distance)
        logger.debug(f"Motion model: {self._during!r}")

    @property
    def end_time(self) -> float:
        return self.start_time + self.duration

    def pre_window(self) -> ExpectedFunction:
        return ZeroFunction()

    def test_window(self) -> ExpectedFunction:
        return self._during

    def post_window(self) -> ExpectedFunction:
        if isinstance(self._during, ZeroFunction):
            return ZeroFunction()
        return ConstantAt(self.distance)

    def for_portion(self, portion: str) -> ExpectedFunction:
        """Return the expected-value function for `portion` ("pre", "test" or "post")."""
        builders = {
            PORTION_PRE: self.pre_window,
            PORTION_TEST: self.test_window,
            PORTION_POST: self.post_window,
        }
        if portion not in builders:
            raise KinematicsError(f"Unknown portion '{portion}'.")
        return builders[portion]()

    def get_parameters(self) -> dict:
        """Return the parameters of this motion model."""
        return {
            "start_time": self.start_time,
            "duration": self.duration,
            "distance": self.distance,
        }

    def __repr__(self) -> str:
        params = self.get_parameters()
        param_str = ", ".join(f"{k}={v}" for k, v in params.items())
        return f"{self.__class__.__name__}({param_str})"
