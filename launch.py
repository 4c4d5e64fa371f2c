#!/usr/bin/env python3
"""
Robot Launcher - Easy start for the drivetrain control core

Usage:
    python launch.py                # Run with gamepad input and mock hardware
    python launch.py --pid          # Close the velocity loop on the drivetrain
    python launch.py --demo         # Run scripted core demo
"""

import sys
import argparse
import asyncio
import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure logging"""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )


def launch_gamepad(use_pid: bool = False, env_file: str = None) -> None:
    """Launch gamepad control with mock hardware"""
    print("Starting gamepad control mode...")
    print("Use the stick to drive, hold button 3 for simple mode")

    from input.gamepad_input import GamepadInput, HAS_PYGAME
    if not HAS_PYGAME:
        print("\nERROR: pygame not installed")
        print("Install with: pip install pygame")
        sys.exit(1)

    from robot_config import RobotConfig
    from core.auxiliary import CollectorController, CompressorController, ShooterController
    from core.drivetrain import DriveTrainController
    from core.hardware import MockCollector, MockCompressor, MockDriveTrain, MockShooter
    from core.supervisor import Supervisor

    config = RobotConfig(env_file)
    is_valid, errors = config.validate()
    if not is_valid:
        for error in errors:
            print(f"Config error: {error}")
        sys.exit(1)

    drive_config = config.drivetrain_config()
    if use_pid:
        drive_config.use_pid = True

    input_source = GamepadInput()
    drivetrain = MockDriveTrain()

    drivetrain_controller = DriveTrainController(
        input_source=input_source,
        drivetrain=drivetrain,
        config=drive_config,
        feedback=drivetrain,
    )
    supervisor = Supervisor(
        input_source=input_source,
        drivetrain=drivetrain_controller,
        config=config.supervisor_config(),
        controllers=[
            ShooterController(input_source, MockShooter()),
            CollectorController(input_source, MockCollector()),
            CompressorController(MockCompressor()),
        ],
    )

    try:
        input_source.start()
    except RuntimeError as e:
        print(f"Error: {e}")
        sys.exit(1)

    supervisor.enable()
    try:
        asyncio.run(supervisor.run())
    except KeyboardInterrupt:
        print("\nShutting down...")
    finally:
        input_source.stop()


def launch_demo(script: str, use_pid: bool, env_file: str = None) -> None:
    """Launch scripted core demo"""
    print("Starting core demo...")
    from demo_core import main
    main(script, use_pid, env_file)


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description="Robot drivetrain control core",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python launch.py                      Drive with a gamepad (mock hardware)
  python launch.py --pid                Same, with velocity PID
  python launch.py --demo --script turn Run scripted turn demo
        """
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run scripted demo instead of reading a gamepad"
    )
    parser.add_argument(
        "--script",
        default="forward",
        choices=["forward", "turn", "simple", "shoot"],
        help="Demo script to play"
    )
    parser.add_argument(
        "--pid",
        action="store_true",
        help="Enable drivetrain velocity PID"
    )
    parser.add_argument("--env-file", help="Path to .env file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level"
    )

    args = parser.parse_args()

    setup_logging(args.log_level)

    if args.demo:
        launch_demo(args.script, args.pid, env_file=args.env_file)
    else:
        launch_gamepad(use_pid=args.pid, env_file=args.env_file)


if __name__ == "__main__":
    main()
