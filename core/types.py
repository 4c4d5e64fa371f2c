"""
Core data types for the drivetrain control core.

All the data structures that flow through the control loop, fully typed.
"""

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List


POWERLEVEL_MIN = -1.0
POWERLEVEL_MAX = 1.0


class DriveMode(Enum):
    """Drive mode selection - affects only the mixer geometry"""
    SIMPLE = "simple"        # Forward/backward or in-place turn only
    ADVANCED = "advanced"    # Continuous turns by quadrant interpolation


class ShooterMode(IntEnum):
    """Shooter mode selector - number of pistons fired per shot"""
    THREE = 3
    FOUR = 4
    FIVE = 5


class SupervisorState(Enum):
    """Supervisor state machine states"""
    DISABLED = "disabled"    # Loop idle, no controllers run
    ENABLED = "enabled"      # Controllers run once per period
    FAILSAFE = "failsafe"    # Invariant violated, drivetrain held at zero


@dataclass(frozen=True)
class AxisInput:
    """
    Raw two-axis input for one control cycle.

    Read once per period and immutable for the duration of the cycle.
    """
    x: float                     # Turn: -1.0 (left) to 1.0 (right)
    y: float                     # Drive: -1.0 (backward) to 1.0 (forward)
    simple_mode: bool = False    # Simple drive toggle held

    def __post_init__(self) -> None:
        """Validate ranges"""
        assert -1.0 <= self.x <= 1.0, f"x out of range: {self.x}"
        assert -1.0 <= self.y <= 1.0, f"y out of range: {self.y}"

    @property
    def mode(self) -> DriveMode:
        return DriveMode.SIMPLE if self.simple_mode else DriveMode.ADVANCED


@dataclass(frozen=True)
class JoystickState:
    """
    Snapshot of every operator control for one period.

    This is what InputSource implementations capture on update().
    """
    x: float = 0.0
    y: float = 0.0
    simple_mode: bool = False
    shoot: bool = False
    shooter_mode: int = ShooterMode.THREE
    collector_extend: bool = False
    collector_retract: bool = False
    collector_collect: bool = False
    collector_expel: bool = False

    def __post_init__(self) -> None:
        """Validate ranges"""
        assert -1.0 <= self.x <= 1.0, f"x out of range: {self.x}"
        assert -1.0 <= self.y <= 1.0, f"y out of range: {self.y}"

    @property
    def is_neutral(self) -> bool:
        """Check if the stick is centered"""
        return abs(self.x) < 0.01 and abs(self.y) < 0.01


@dataclass
class PowerGoal:
    """
    Left/right power goal produced by the mixer.

    Pre-PID and pre-speed-scale; both sides lie in [-1, 1].
    """
    left: float = 0.0
    right: float = 0.0

    @property
    def is_stop(self) -> bool:
        return self.left == 0.0 and self.right == 0.0


@dataclass
class PowerCommand:
    """Final left/right power sent to the drivetrain actuators"""
    left: float = 0.0
    right: float = 0.0

    @property
    def is_stop(self) -> bool:
        """Check if this is a stop command"""
        return self.left == 0.0 and self.right == 0.0

    @classmethod
    def stop(cls) -> "PowerCommand":
        """Create a stop command"""
        return cls(left=0.0, right=0.0)


@dataclass(frozen=True)
class ShooterSolenoids:
    """Which of the five shooter pistons to fire"""
    middle: bool = False
    inner_left: bool = False
    inner_right: bool = False
    outer_left: bool = False
    outer_right: bool = False

    @classmethod
    def for_mode(cls, mode: int) -> "ShooterSolenoids":
        """
        Select the piston set for a shooter mode.

        Unknown modes fire nothing.
        """
        if mode == ShooterMode.THREE:
            return cls(middle=True, outer_left=True, outer_right=True)
        if mode == ShooterMode.FOUR:
            return cls(inner_left=True, inner_right=True,
                       outer_left=True, outer_right=True)
        if mode == ShooterMode.FIVE:
            return cls(middle=True, inner_left=True, inner_right=True,
                       outer_left=True, outer_right=True)
        return cls()

    @property
    def count(self) -> int:
        return sum([self.middle, self.inner_left, self.inner_right,
                    self.outer_left, self.outer_right])


@dataclass
class PIDConfig:
    """Gains for one velocity PID loop"""
    kp: float = 0.0
    ki: float = 0.0
    kd: float = 0.0
    kf: float = 0.0
    period: float = 0.02         # Control period in seconds (derivative/integral step)


@dataclass
class DriveTrainConfig:
    """Configuration for the drivetrain controller"""
    dead_zone: float = 0.1               # Radius around stick center treated as zero
    max_speed: float = 0.8               # Final power scale, 0 < max_speed <= 1
    a: float = 0.2                       # Outer-wheel power at full forward-turn deflection
    b: float = 1.0                       # In-place turn sharpness
    power_level_min: float = POWERLEVEL_MIN
    power_level_max: float = POWERLEVEL_MAX
    use_pid: bool = False
    left_pid: PIDConfig = field(default_factory=lambda: PIDConfig(kp=0.1, kf=1.0))
    right_pid: PIDConfig = field(default_factory=lambda: PIDConfig(kp=0.1, kf=1.0))

    def validate(self) -> tuple[bool, List[str]]:
        """
        Check the tuning constants.

        With a and b inside [0, 1] every quadrant corner of the mixer lies
        in [-1, 1], so the mixed goal cannot leave range.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []
        if not 0.0 < self.max_speed <= 1.0:
            errors.append(f"max_speed must be in (0, 1], got {self.max_speed}")
        if not 0.0 <= self.a <= 1.0:
            errors.append(f"a must be in [0, 1], got {self.a}")
        if not 0.0 <= self.b <= 1.0:
            errors.append(f"b must be in [0, 1], got {self.b}")
        if not 0.0 <= self.dead_zone < 1.0:
            errors.append(f"dead_zone must be in [0, 1), got {self.dead_zone}")
        for side, pid in (("left", self.left_pid), ("right", self.right_pid)):
            if not pid.period > 0.0 or not math.isfinite(pid.period):
                errors.append(f"{side} PID period must be positive and finite, got {pid.period}")
            for gain in ("kp", "ki", "kd", "kf"):
                value = getattr(pid, gain)
                if not math.isfinite(value):
                    errors.append(f"{side} PID {gain} must be finite, got {value}")
        return len(errors) == 0, errors


@dataclass
class SupervisorConfig:
    """Configuration for the Supervisor"""
    loop_interval: float = 0.02          # Control period (50Hz)
    overrun_warning: bool = True         # Log a warning when a cycle exceeds the period
