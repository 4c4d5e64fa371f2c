"""
Drivetrain Core - Clean, typed, testable robot drivetrain control.

This package contains the control core that turns operator stick input
into bounded left/right motor power:
- Types: Data classes for axis input, power goals/commands, configuration
- Interfaces: Protocols for injected capabilities (input, actuators, feedback)
- Mapper: Intensity shaping, quadrant mixing and the power range guard
- PID: Optional per-side velocity loop
- Controllers: Drivetrain plus shooter/collector/compressor
- Supervisor: Periodic driver loop and failsafe handling
"""

from .types import (
    AxisInput,
    DriveMode,
    DriveTrainConfig,
    JoystickState,
    PIDConfig,
    PowerCommand,
    PowerGoal,
    ShooterMode,
    ShooterSolenoids,
    SupervisorConfig,
    SupervisorState,
)
from .interfaces import (
    CollectorActuator,
    CompressorActuator,
    Controller,
    DriveTrainActuator,
    FeedbackSource,
    InputSource,
    ShooterActuator,
)
from .mapper import (
    DriveTrainMapper,
    PowerLevelRangeError,
    adjust_intensity,
    assert_power_level_range,
)
from .pid import PIDHandler

__all__ = [
    "AxisInput",
    "DriveMode",
    "DriveTrainConfig",
    "JoystickState",
    "PIDConfig",
    "PowerCommand",
    "PowerGoal",
    "ShooterMode",
    "ShooterSolenoids",
    "SupervisorConfig",
    "SupervisorState",
    "CollectorActuator",
    "CompressorActuator",
    "Controller",
    "DriveTrainActuator",
    "FeedbackSource",
    "InputSource",
    "ShooterActuator",
    "DriveTrainMapper",
    "PowerLevelRangeError",
    "adjust_intensity",
    "assert_power_level_range",
    "PIDHandler",
]
