"""
PID - Velocity loop closed around one side of the drivetrain.

output = kp*error + ki*integral(error) + kd*d(error)/dt + kf*setpoint

The output is deliberately not clamped here; the caller checks it
with the power range guard.
"""

import logging
import math

from .types import PIDConfig


logger = logging.getLogger(__name__)


class PIDHandler:
    """
    Proportional-integral-derivative controller with feedforward.

    Integral and derivative history live for the lifetime of the
    instance. To reset, build a new handler.
    """

    def __init__(self, kp: float, ki: float, kd: float, kf: float, period: float = 0.02) -> None:
        """
        Initialize PID handler.

        Args:
            kp: Proportional gain
            ki: Integral gain (may be 0)
            kd: Derivative gain (may be 0)
            kf: Feedforward gain, applied to the setpoint
            period: Fixed control period in seconds
        """
        if not 0.0 < period < math.inf:
            raise ValueError(f"period must be positive and finite, got {period}")

        self.kp = kp
        self.ki = ki
        self.kd = kd
        self.kf = kf
        self.period = period

        self._integral = 0.0
        self._previous_error = 0.0
        self._output = 0.0

    @classmethod
    def from_config(cls, config: PIDConfig) -> "PIDHandler":
        return cls(config.kp, config.ki, config.kd, config.kf, config.period)

    def calculate(self, setpoint: float, measured: float) -> None:
        """
        Advance the loop by one control period.

        Args:
            setpoint: Desired value (power goal)
            measured: Feedback value (encoder velocity)
        """
        error = setpoint - measured

        self._integral += error * self.period
        derivative = (error - self._previous_error) / self.period

        self._output = (
            self.kp * error
            + self.ki * self._integral
            + self.kd * derivative
            + self.kf * setpoint
        )
        self._previous_error = error

        logger.debug(
            f"PID setpoint={setpoint:+.3f} measured={measured:+.3f} "
            f"error={error:+.3f} output={self._output:+.3f}"
        )

    @property
    def output(self) -> float:
        """Output computed by the most recent calculate()"""
        return self._output

    @property
    def integral(self) -> float:
        return self._integral

    @property
    def previous_error(self) -> float:
        return self._previous_error
