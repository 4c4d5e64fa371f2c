#!/usr/bin/env python3
"""
Robot Environment Configuration Helper

Provides access to .env tuning constants for the control core.
Loads the .env file once and falls back to the built-in defaults.
"""

import math
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from core.types import DriveTrainConfig, PIDConfig, SupervisorConfig


_DRIVE_DEFAULTS = DriveTrainConfig()
_SUPERVISOR_DEFAULTS = SupervisorConfig()


class RobotConfig:
    """Configuration manager for the robot control core"""

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize configuration

        Args:
            env_file: Path to .env file (default: .env in current directory)
        """
        self._loaded = False
        self._errors: list[str] = []

        env_path = Path(".env") if env_file is None else Path(env_file)
        if env_path.exists():
            load_dotenv(env_path)
            self._loaded = True

    def _float(self, name: str, default: float) -> float:
        raw = os.getenv(name)
        if raw is None or raw == "":
            return default
        try:
            value = float(raw)
        except ValueError:
            self._errors.append(f"{name} is not a number: {raw!r}")
            return default
        if not math.isfinite(value):
            self._errors.append(f"{name} must be finite, got {raw!r}")
            return default
        return value

    def _bool(self, name: str, default: bool) -> bool:
        raw = os.getenv(name)
        if raw is None or raw == "":
            return default
        value = raw.strip().lower()
        if value in ("1", "true", "yes", "on"):
            return True
        if value in ("0", "false", "no", "off"):
            return False
        self._errors.append(f"{name} is not a boolean: {raw!r}")
        return default

    @property
    def dead_zone(self) -> float:
        """Stick dead zone radius (default: 0.1)"""
        return self._float("ROBOT_DEAD_ZONE", _DRIVE_DEFAULTS.dead_zone)

    @property
    def max_speed(self) -> float:
        """Drivetrain power scale (default: 0.8)"""
        return self._float("ROBOT_MAX_SPEED", _DRIVE_DEFAULTS.max_speed)

    @property
    def a(self) -> float:
        """Outer wheel power at full forward turn (default: 0.2)"""
        return self._float("ROBOT_A", _DRIVE_DEFAULTS.a)

    @property
    def b(self) -> float:
        """In-place turn sharpness (default: 1.0)"""
        return self._float("ROBOT_B", _DRIVE_DEFAULTS.b)

    @property
    def use_pid(self) -> bool:
        """Close the drivetrain velocity loop (default: off)"""
        return self._bool("ROBOT_USE_PID", _DRIVE_DEFAULTS.use_pid)

    @property
    def loop_interval(self) -> float:
        """Control period in seconds (default: 0.02)"""
        return self._float("ROBOT_LOOP_INTERVAL", _SUPERVISOR_DEFAULTS.loop_interval)

    def pid_config(self, side: str) -> PIDConfig:
        """
        PID gains for one side.

        Args:
            side: "left" or "right"
        """
        default = _DRIVE_DEFAULTS.left_pid if side == "left" else _DRIVE_DEFAULTS.right_pid
        prefix = f"ROBOT_{side.upper()}"
        return PIDConfig(
            kp=self._float(f"{prefix}_KP", default.kp),
            ki=self._float(f"{prefix}_KI", default.ki),
            kd=self._float(f"{prefix}_KD", default.kd),
            kf=self._float(f"{prefix}_KF", default.kf),
            period=self.loop_interval,
        )

    def drivetrain_config(self) -> DriveTrainConfig:
        """Build the typed drivetrain configuration"""
        return DriveTrainConfig(
            dead_zone=self.dead_zone,
            max_speed=self.max_speed,
            a=self.a,
            b=self.b,
            use_pid=self.use_pid,
            left_pid=self.pid_config("left"),
            right_pid=self.pid_config("right"),
        )

    def supervisor_config(self) -> SupervisorConfig:
        """Build the typed supervisor configuration"""
        return SupervisorConfig(loop_interval=self.loop_interval)

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate configuration

        Returns:
            (is_valid, list_of_errors)
        """
        self._errors = []
        drive = self.drivetrain_config()
        interval = self.loop_interval

        errors = list(self._errors)
        _, drive_errors = drive.validate()
        errors.extend(drive_errors)
        if not interval > 0:
            errors.append(f"ROBOT_LOOP_INTERVAL must be positive, got {interval}")

        return len(errors) == 0, errors

    def print_status(self):
        """Print configuration status"""
        print("Robot Configuration Status:")
        print(f"  .env loaded:   {'Yes' if self._loaded else 'No'}")
        print(f"  Dead zone:     {self.dead_zone}")
        print(f"  Max speed:     {self.max_speed}")
        print(f"  A / B:         {self.a} / {self.b}")
        print(f"  Use PID:       {'Yes' if self.use_pid else 'No'}")
        for side in ("left", "right"):
            pid = self.pid_config(side)
            print(f"  {side.capitalize():5s} PID:     kp={pid.kp} ki={pid.ki} kd={pid.kd} kf={pid.kf}")
        print(f"  Loop interval: {self.loop_interval}s")

        is_valid, errors = self.validate()
        if is_valid:
            print("\n  Status: Configuration is valid")
        else:
            print("\n  Status: Configuration has errors:")
            for error in errors:
                print(f"    - {error}")


# Global config instance
_config = None

def get_config(reload: bool = False) -> RobotConfig:
    """
    Get the global configuration instance

    Args:
        reload: Force reload of .env file

    Returns:
        RobotConfig instance
    """
    global _config
    if _config is None or reload:
        _config = RobotConfig()
    return _config


def main():
    """Command-line utility to check configuration"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Robot Configuration Utility",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Check current configuration:
    python robot_config.py

  Validate configuration:
    python robot_config.py --validate

  Use custom .env file:
    python robot_config.py --env-file /path/to/.env
        """
    )

    parser.add_argument("--env-file", help="Path to .env file")
    parser.add_argument("--validate", action="store_true",
                       help="Validate configuration and exit with error if invalid")

    args = parser.parse_args()

    config = RobotConfig(args.env_file)
    config.print_status()

    if args.validate:
        is_valid, errors = config.validate()
        if not is_valid:
            print("\nValidation failed!")
            import sys
            sys.exit(1)
        else:
            print("\nValidation passed!")


if __name__ == "__main__":
    main()
