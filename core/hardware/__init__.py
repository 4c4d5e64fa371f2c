"""
Mock hardware - For running the control core without a robot.

Records actuator commands instead of driving motors and simulates
encoder feedback for the drivetrain.
"""

import logging
from typing import List, Optional, Tuple

from core.types import PowerCommand, ShooterSolenoids


logger = logging.getLogger(__name__)


class MockDriveTrain:
    """
    Mock drivetrain with simulated encoders.

    Each side's encoder velocity follows the commanded power as a
    first-order lag: v += response * (power - v) per command.
    """

    def __init__(self, response: float = 0.5) -> None:
        """
        Initialize mock drivetrain.

        Args:
            response: Fraction of the velocity error closed per command (0-1)
        """
        self._response = response
        self._last_command: Optional[PowerCommand] = None
        self._command_count = 0

        self._left_velocity = 0.0
        self._right_velocity = 0.0

    def set_drive_train_power(self, left: float, right: float) -> None:
        """Log command instead of driving motors"""
        self._last_command = PowerCommand(left=left, right=right)
        self._command_count += 1

        self._left_velocity += self._response * (left - self._left_velocity)
        self._right_velocity += self._response * (right - self._right_velocity)

        logger.debug(
            f"[MOCK] Drive #{self._command_count}: "
            f"L={left:+.3f} R={right:+.3f} "
            f"-> v=({self._left_velocity:+.3f}, {self._right_velocity:+.3f})"
        )

    def get_left_encoder_velocity(self) -> float:
        return self._left_velocity

    def get_right_encoder_velocity(self) -> float:
        return self._right_velocity

    @property
    def last_command(self) -> Optional[PowerCommand]:
        """Get last command sent (for testing)"""
        return self._last_command

    @property
    def command_count(self) -> int:
        """Get total commands sent (for testing)"""
        return self._command_count


class MockShooter:
    """Records shooter solenoid commands."""

    def __init__(self) -> None:
        self.shots: List[ShooterSolenoids] = []

    def set_shooter_solenoids(self, middle: bool, inner_left: bool, inner_right: bool,
                              outer_left: bool, outer_right: bool) -> None:
        solenoids = ShooterSolenoids(middle, inner_left, inner_right, outer_left, outer_right)
        self.shots.append(solenoids)
        logger.info(f"[MOCK] Shooter fired {solenoids.count} piston(s)")


class MockCollector:
    """Records collector arm and roller commands."""

    def __init__(self) -> None:
        self.extended: Optional[bool] = None
        self.roller_power = 0.0
        self.history: List[Tuple[str, object]] = []

    def set_collector_solenoid(self, extend: bool) -> None:
        if extend != self.extended:
            logger.info(f"[MOCK] Collector {'extended' if extend else 'retracted'}")
        self.extended = extend
        self.history.append(("solenoid", extend))

    def set_collector_roller_power(self, power: float) -> None:
        self.roller_power = power
        self.history.append(("roller", power))


class MockCompressor:
    """Counts compressor start requests."""

    def __init__(self) -> None:
        self.start_count = 0

    def start(self) -> None:
        logger.info("[MOCK] Compressor started")
        self.start_count += 1

    @property
    def is_running(self) -> bool:
        return self.start_count > 0
