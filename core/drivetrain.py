"""
DriveTrainController - One control cycle from stick input to motor power.

Per cycle:
    read input -> shape -> mix -> validate goal -> scale by max speed
    -> [velocity PID] -> validate final -> set drivetrain power

Nothing is written to the actuators if either validation fails.
"""

import logging
from typing import Optional

from .interfaces import DriveTrainActuator, FeedbackSource, InputSource
from .mapper import DriveTrainMapper
from .pid import PIDHandler
from .types import AxisInput, DriveTrainConfig, PowerCommand, PowerGoal


logger = logging.getLogger(__name__)


class DriveTrainController:
    """
    Drives the left/right motors from operator input.

    Without PID there is no state carried between cycles. With PID the
    two per-side handlers keep their own integral/derivative history.
    """

    def __init__(
        self,
        input_source: InputSource,
        drivetrain: DriveTrainActuator,
        config: DriveTrainConfig,
        feedback: Optional[FeedbackSource] = None,
    ) -> None:
        """
        Initialize drivetrain controller.

        Args:
            input_source: Operator input
            drivetrain: Motor power sink
            config: Drivetrain configuration
            feedback: Encoder velocities, required when config.use_pid is set
        """
        if config.use_pid and feedback is None:
            raise ValueError("PID drive requires a feedback source")

        self.input = input_source
        self.drivetrain = drivetrain
        self.feedback = feedback
        self.config = config
        self.mapper = DriveTrainMapper(config)

        self.left_pid: Optional[PIDHandler] = None
        self.right_pid: Optional[PIDHandler] = None
        if config.use_pid:
            self.left_pid = PIDHandler.from_config(config.left_pid)
            self.right_pid = PIDHandler.from_config(config.right_pid)
            logger.info("Drivetrain velocity PID enabled")

        self._last_goal: Optional[PowerGoal] = None
        self._last_command: Optional[PowerCommand] = None

    @property
    def use_pid(self) -> bool:
        return self.left_pid is not None

    def run(self) -> None:
        """Single control cycle"""
        axis = AxisInput(
            x=self.input.get_drive_train_x_axis(),
            y=self.input.get_drive_train_y_axis(),
            simple_mode=self.input.get_drive_train_simple_mode(),
        )

        # Mapper validates the goal before returning it
        goal = self.mapper.map(axis)
        self._last_goal = goal

        # Scaling only shrinks magnitude since 0 < max_speed <= 1
        left_goal = goal.left * self.config.max_speed
        right_goal = goal.right * self.config.max_speed

        if self.use_pid:
            self.left_pid.calculate(left_goal, self.feedback.get_left_encoder_velocity())
            self.right_pid.calculate(right_goal, self.feedback.get_right_encoder_velocity())

            left_power = self.left_pid.output
            right_power = self.right_pid.output
        else:
            left_power = left_goal
            right_power = right_goal

        self.mapper.assert_in_range(left_power, "left")
        self.mapper.assert_in_range(right_power, "right")

        command = PowerCommand(left=left_power, right=right_power)
        self.drivetrain.set_drive_train_power(command.left, command.right)
        self._last_command = command

        logger.debug(
            f"x={axis.x:+.2f} y={axis.y:+.2f} mode={axis.mode.value} "
            f"goal=({goal.left:+.3f}, {goal.right:+.3f}) "
            f"power=({command.left:+.3f}, {command.right:+.3f})"
        )

    def stop(self) -> None:
        """Command zero power, bypassing the input pipeline"""
        command = PowerCommand.stop()
        self.drivetrain.set_drive_train_power(command.left, command.right)
        self._last_command = command

    @property
    def last_goal(self) -> Optional[PowerGoal]:
        """Goal from the most recent cycle that passed validation"""
        return self._last_goal

    @property
    def last_command(self) -> Optional[PowerCommand]:
        """Command most recently sent to the drivetrain"""
        return self._last_command
