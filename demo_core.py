#!/usr/bin/env python3
"""
Robot Core Demo - Simple example application.

Plays a scripted input sequence through the control core with mock hardware.
"""

import asyncio
import logging
import sys
from typing import Optional

from core.auxiliary import CollectorController, CompressorController, ShooterController
from core.drivetrain import DriveTrainController
from core.hardware import MockCollector, MockCompressor, MockDriveTrain, MockShooter
from core.supervisor import Supervisor
from core.types import DriveTrainConfig, SupervisorConfig, SupervisorState
from input import MockInput
from robot_config import RobotConfig


logger = logging.getLogger(__name__)


async def run_demo(
    script: str = "forward",
    use_pid: bool = False,
    drive_config: Optional[DriveTrainConfig] = None,
    supervisor_config: Optional[SupervisorConfig] = None,
) -> None:
    """Run a scripted demo with mock components"""
    if drive_config is None:
        drive_config = DriveTrainConfig(use_pid=use_pid)
    if supervisor_config is None:
        supervisor_config = SupervisorConfig(loop_interval=0.1)  # 10 Hz for demo

    logger.info("=" * 60)
    logger.info(f"Robot Core Demo - script '{script}'")
    logger.info("=" * 60)

    input_source = MockInput()
    input_source.load_script(script)

    drivetrain = MockDriveTrain()
    shooter = MockShooter()
    collector = MockCollector()
    compressor = MockCompressor()

    drivetrain_controller = DriveTrainController(
        input_source=input_source,
        drivetrain=drivetrain,
        config=drive_config,
        feedback=drivetrain,
    )

    supervisor = Supervisor(
        input_source=input_source,
        drivetrain=drivetrain_controller,
        config=supervisor_config,
        controllers=[
            ShooterController(input_source, shooter),
            CollectorController(input_source, collector),
            CompressorController(compressor),
        ],
    )

    def on_state_change(old_state: SupervisorState, new_state: SupervisorState):
        logger.info(f"STATE CHANGE: {old_state.value} -> {new_state.value}")

    supervisor.add_state_callback(on_state_change)
    supervisor.enable()

    supervisor_task = asyncio.create_task(supervisor.run())

    logger.info("-" * 60)
    while not input_source.is_finished and supervisor.state == SupervisorState.ENABLED:
        await asyncio.sleep(0.1)
        command = drivetrain_controller.last_command
        if command is not None:
            logger.info(
                f"Drive: L={command.left:+.3f} R={command.right:+.3f} | "
                f"Encoders: L={drivetrain.get_left_encoder_velocity():+.3f} "
                f"R={drivetrain.get_right_encoder_velocity():+.3f}"
            )
    logger.info("-" * 60)

    supervisor.stop()
    await supervisor_task

    logger.info(f"Cycles: {supervisor.cycle_count}, shots: {len(shooter.shots)}")
    logger.info("Demo finished")


def main(script: str = "forward", use_pid: bool = False, env_file: Optional[str] = None):
    """Main entry point, tuned from .env (or env_file) like the gamepad mode"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )

    config = RobotConfig(env_file)
    is_valid, errors = config.validate()
    if not is_valid:
        for error in errors:
            logger.error(f"Config error: {error}")
        sys.exit(1)

    drive_config = config.drivetrain_config()
    if use_pid:
        drive_config.use_pid = True

    try:
        asyncio.run(run_demo(script, drive_config=drive_config,
                             supervisor_config=config.supervisor_config()))
    except KeyboardInterrupt:
        logger.info("\nDemo interrupted by user")
    except Exception as e:
        logger.error(f"Demo failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
