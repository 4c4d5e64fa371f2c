"""
Mapper - Transforms two-axis stick input into left/right power goals.

This is safety-critical code. The Mapper provides:
- Intensity shaping (signed quadratic) for fine control near center
- A circular dead zone to prevent drift
- Simple (forward or turn-in-place) and advanced (continuous turn) mixing
- The power range guard used at every checkpoint of the control cycle
"""

import logging
import math

from .types import (
    AxisInput,
    DriveMode,
    DriveTrainConfig,
    PowerGoal,
    POWERLEVEL_MAX,
    POWERLEVEL_MIN,
)


logger = logging.getLogger(__name__)


class PowerLevelRangeError(RuntimeError):
    """
    A power value left the legal actuator range.

    This is a defect in the mixing constants or the PID tuning, never a
    user error, and must not be caught and ignored.
    """

    def __init__(self, label: str, value: float, problem: str) -> None:
        self.label = label
        self.value = value
        super().__init__(f"{label} power level {problem}! ({value:+.4f})")


def adjust_intensity(value: float) -> float:
    """
    Apply sign-preserving quadratic scaling to an axis value.

    Small deflections are attenuated while full deflection still maps
    to full scale: shape(v) = sign(v) * v^2.

    Args:
        value: Axis value (-1.0 to 1.0)

    Returns:
        Shaped value (-1.0 to 1.0)
    """
    if value < 0:
        return -value * value
    return value * value


def assert_power_level_range(
    value: float,
    label: str,
    minimum: float = POWERLEVEL_MIN,
    maximum: float = POWERLEVEL_MAX,
) -> None:
    """
    Fail if a power value is outside [minimum, maximum].

    Values exactly on the boundary pass.

    Raises:
        PowerLevelRangeError: value is NaN, below minimum or above maximum
    """
    if math.isnan(value):
        logger.critical(f"{label} power level is not a number")
        raise PowerLevelRangeError(label, value, "not a number")

    if value < minimum:
        logger.critical(f"{label} power level too low: {value:+.4f}")
        raise PowerLevelRangeError(label, value, "too low")

    if value > maximum:
        logger.critical(f"{label} power level too high: {value:+.4f}")
        raise PowerLevelRangeError(label, value, "too high")


class DriveTrainMapper:
    """
    Converts AxisInput into a PowerGoal.

    Stateless apart from its configuration; the same input always gives
    the same goal.
    """

    def __init__(self, config: DriveTrainConfig) -> None:
        """
        Initialize mapper with configuration.

        Args:
            config: Drivetrain configuration (dead zone, A/B shape constants)
        """
        self.config = config

    def map(self, axis: AxisInput) -> PowerGoal:
        """
        Shape, mix and validate one cycle of stick input.

        Args:
            axis: Raw stick input for this cycle

        Returns:
            PowerGoal with both sides in range

        Raises:
            PowerLevelRangeError: mixer produced an out-of-range goal
        """
        x = adjust_intensity(axis.x)
        y = adjust_intensity(axis.y)

        goal = self.mix(x, y, axis.mode)

        self.assert_in_range(goal.left, "left (goal)")
        self.assert_in_range(goal.right, "right (goal)")

        return goal

    def mix(self, x: float, y: float, mode: DriveMode) -> PowerGoal:
        """
        Compute unchecked power goals from shaped stick values.

        Args:
            x: Shaped turn axis (-1.0 to 1.0)
            y: Shaped drive axis (-1.0 to 1.0)
            mode: Mixer geometry to use

        Returns:
            PowerGoal (not range checked)
        """
        radius = math.sqrt(x * x + y * y)
        if radius <= self.config.dead_zone:
            return PowerGoal(0.0, 0.0)

        if mode == DriveMode.SIMPLE:
            return self._mix_simple(x, y)

        return self._mix_advanced(x, y)

    def assert_in_range(self, value: float, label: str) -> None:
        """Range guard using this mapper's configured power limits"""
        assert_power_level_range(
            value,
            label,
            self.config.power_level_min,
            self.config.power_level_max,
        )

    def _mix_simple(self, x: float, y: float) -> PowerGoal:
        """
        Simple drive: either straight forward/back or an in-place turn.

                          forward
                      ---------------
                      |      |      |
        In-place left |-------------| In-place right
                      |      |      |
                      ---------------
                         backward
        """
        if abs(y) < abs(x):
            return PowerGoal(x, -x)

        return PowerGoal(y, y)

    def _mix_advanced(self, x: float, y: float) -> PowerGoal:
        """
        Advanced drive: bilinear interpolation between fixed corner powers.

        Corner and axis powers as (left, right):

             a,1       1,1       1,a
              ---------------------
              |   Q2    |   Q1    |
         -b,b |-------------------| b,-b
              |   Q3    |   Q4    |
              ---------------------
            -a,-1     -1,-1     -1,-a

        Along x:  p(x)   = p(0) + |x| * (p(1) - p(0))
        Along y:  p(x,y) = p(x,0) + |y| * (p(x,1) - p(x,0))
        """
        a = self.config.a
        b = self.config.b

        if x >= 0:
            if y >= 0:
                # Q1: y=0 -> (x*b, -x*b); y=1 -> (1, 1 + x*(a - 1))
                left = x * b + y * (1 - x * b)
                right = -x * b + y * (1 + x * (a - 1) + x * b)
            else:
                # Q4: y=0 -> (x*b, -x*b); y=-1 -> (-1, -1 + x*(1 - a))
                left = x * b - y * (-1 - x * b)
                right = -x * b - y * (-1 + x * (1 - a) + x * b)
        else:
            if y >= 0:
                # Q2: y=0 -> (x*b, -x*b); y=1 -> (1 - x*(a - 1), 1)
                left = x * b + y * (1 - x * (a - 1) - x * b)
                right = -x * b + y * (1 + x * b)
            else:
                # Q3: y=0 -> (x*b, -x*b); y=-1 -> (-1 - x*(1 - a), -1)
                left = x * b - y * (-1 - x * (1 - a) - x * b)
                right = -x * b - y * (-1 + x * b)

        return PowerGoal(left, right)
