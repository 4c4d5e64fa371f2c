"""
Core interfaces (protocols) for injected capabilities.

Controllers receive these at construction time and never reach for
global hardware handles. Anything with the right methods satisfies
the protocol - no inheritance required.
"""

from typing import Protocol


class InputSource(Protocol):
    """
    Interface for operator input (gamepad, scripted, etc.).

    `update()` is called once at the start of every control period;
    all getters then return the values captured by that update, so
    input is stable for the whole cycle.
    """

    def update(self) -> None:
        """Capture a fresh snapshot of the operator controls."""
        ...

    def get_drive_train_x_axis(self) -> float:
        """Turn axis, -1.0 (left) to 1.0 (right)"""
        ...

    def get_drive_train_y_axis(self) -> float:
        """Drive axis, -1.0 (backward) to 1.0 (forward)"""
        ...

    def get_drive_train_simple_mode(self) -> bool:
        """True while the simple drive mode toggle is held"""
        ...

    def get_shooter_shoot(self) -> bool:
        ...

    def get_shooter_mode(self) -> int:
        """Current shooter mode selector (see ShooterMode)"""
        ...

    def get_collector_extend(self) -> bool:
        ...

    def get_collector_retract(self) -> bool:
        ...

    def get_collector_collect(self) -> bool:
        ...

    def get_collector_expel(self) -> bool:
        ...


class DriveTrainActuator(Protocol):
    """Interface for the drivetrain motor controllers."""

    def set_drive_train_power(self, left: float, right: float) -> None:
        """
        Apply power to the drivetrain.

        Args:
            left: Left side power, -1.0 to 1.0
            right: Right side power, -1.0 to 1.0
        """
        ...


class FeedbackSource(Protocol):
    """Interface for drivetrain encoder feedback (PID path only)."""

    def get_left_encoder_velocity(self) -> float:
        ...

    def get_right_encoder_velocity(self) -> float:
        ...


class ShooterActuator(Protocol):
    """Interface for the shooter piston solenoids."""

    def set_shooter_solenoids(self, middle: bool, inner_left: bool, inner_right: bool,
                              outer_left: bool, outer_right: bool) -> None:
        ...


class CollectorActuator(Protocol):
    """Interface for the collector arm solenoid and roller motor."""

    def set_collector_solenoid(self, extend: bool) -> None:
        """Extend (True) or retract (False) the collector arm"""
        ...

    def set_collector_roller_power(self, power: float) -> None:
        """Drive the roller, 1.0 collects and -1.0 expels"""
        ...


class CompressorActuator(Protocol):
    """Interface for the pneumatic compressor."""

    def start(self) -> None:
        ...


class Controller(Protocol):
    """
    A periodic controller.

    `run()` is invoked once per control period by the Supervisor and
    reads all of its state through the capabilities it was built with.
    """

    def run(self) -> None:
        ...
