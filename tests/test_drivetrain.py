"""Tests for DriveTrainController"""

import pytest

from core.drivetrain import DriveTrainController
from core.hardware import MockDriveTrain
from core.mapper import PowerLevelRangeError
from core.types import DriveTrainConfig, JoystickState, PIDConfig
from input.mock_input import MockInput


class FixedFeedback:
    """Encoder feedback with constant velocities"""

    def __init__(self, left: float, right: float) -> None:
        self.left = left
        self.right = right

    def get_left_encoder_velocity(self) -> float:
        return self.left

    def get_right_encoder_velocity(self) -> float:
        return self.right


@pytest.fixture
def input_source():
    return MockInput()


@pytest.fixture
def drivetrain():
    return MockDriveTrain()


def make_controller(input_source, drivetrain, feedback=None, **kwargs):
    return DriveTrainController(
        input_source=input_source,
        drivetrain=drivetrain,
        config=DriveTrainConfig(**kwargs),
        feedback=feedback,
    )


def test_neutral_stick_sends_stop(input_source, drivetrain):
    controller = make_controller(input_source, drivetrain)
    controller.run()

    assert drivetrain.command_count == 1
    assert drivetrain.last_command.is_stop is True


def test_full_forward_scaled_by_max_speed(input_source, drivetrain):
    controller = make_controller(input_source, drivetrain)
    input_source.set_state(JoystickState(y=1.0))
    controller.run()

    assert controller.last_goal.left == pytest.approx(1.0)
    assert controller.last_goal.right == pytest.approx(1.0)
    assert drivetrain.last_command.left == pytest.approx(0.8)
    assert drivetrain.last_command.right == pytest.approx(0.8)


def test_full_reverse(input_source, drivetrain):
    controller = make_controller(input_source, drivetrain, max_speed=0.5)
    input_source.set_state(JoystickState(y=-1.0))
    controller.run()

    assert drivetrain.last_command.left == pytest.approx(-0.5)
    assert drivetrain.last_command.right == pytest.approx(-0.5)


def test_advanced_turn_in_place(input_source, drivetrain):
    controller = make_controller(input_source, drivetrain, b=0.5)
    input_source.set_state(JoystickState(x=1.0))
    controller.run()

    assert drivetrain.last_command.left == pytest.approx(0.5 * 0.8)
    assert drivetrain.last_command.right == pytest.approx(-0.5 * 0.8)


def test_input_is_shaped_before_mixing(input_source, drivetrain):
    controller = make_controller(input_source, drivetrain)
    input_source.set_state(JoystickState(y=0.5))
    controller.run()

    assert controller.last_goal.left == pytest.approx(0.25)
    assert drivetrain.last_command.left == pytest.approx(0.25 * 0.8)


def test_simple_mode_from_input(input_source, drivetrain):
    controller = make_controller(input_source, drivetrain)
    input_source.set_state(JoystickState(x=-0.9, y=0.2, simple_mode=True))
    controller.run()

    assert controller.last_goal.left == pytest.approx(-0.81)
    assert controller.last_goal.right == pytest.approx(0.81)


def test_no_state_between_cycles_without_pid(input_source, drivetrain):
    controller = make_controller(input_source, drivetrain)

    input_source.set_state(JoystickState(x=0.4, y=0.7))
    controller.run()
    first = drivetrain.last_command

    input_source.set_state(JoystickState(x=-1.0, y=-1.0))
    controller.run()

    input_source.set_state(JoystickState(x=0.4, y=0.7))
    controller.run()

    assert drivetrain.last_command == first


def test_goal_violation_blocks_actuator_write(input_source, drivetrain):
    controller = make_controller(input_source, drivetrain, a=1.5)
    input_source.set_state(JoystickState(x=1.0, y=1.0))

    with pytest.raises(PowerLevelRangeError, match="goal"):
        controller.run()

    assert drivetrain.command_count == 0
    assert controller.last_command is None


def test_pid_requires_feedback(input_source, drivetrain):
    with pytest.raises(ValueError):
        make_controller(input_source, drivetrain, use_pid=True)


def test_pid_disabled_by_default(input_source, drivetrain):
    controller = make_controller(input_source, drivetrain)
    assert controller.use_pid is False
    assert controller.left_pid is None
    assert controller.right_pid is None


def test_pid_uses_each_sides_encoder(input_source, drivetrain):
    """Left loop reads the left encoder, right loop the right encoder"""
    feedback = FixedFeedback(left=0.5, right=-0.5)
    controller = make_controller(
        input_source, drivetrain, feedback=feedback,
        use_pid=True,
        left_pid=PIDConfig(kp=1.0),
        right_pid=PIDConfig(kp=1.0),
    )
    controller.run()

    assert drivetrain.last_command.left == pytest.approx(-0.5)
    assert drivetrain.last_command.right == pytest.approx(0.5)


def test_pid_setpoint_is_scaled_goal(input_source, drivetrain):
    feedback = FixedFeedback(left=0.0, right=0.0)
    controller = make_controller(
        input_source, drivetrain, feedback=feedback,
        use_pid=True,
        left_pid=PIDConfig(kf=1.0),
        right_pid=PIDConfig(kf=0.5),
    )
    input_source.set_state(JoystickState(y=1.0))
    controller.run()

    assert drivetrain.last_command.left == pytest.approx(0.8)
    assert drivetrain.last_command.right == pytest.approx(0.4)


def test_pid_sides_tuned_independently(input_source, drivetrain):
    feedback = FixedFeedback(left=0.0, right=0.0)
    controller = make_controller(
        input_source, drivetrain, feedback=feedback,
        use_pid=True,
        left_pid=PIDConfig(ki=1.0, period=0.1),
        right_pid=PIDConfig(ki=0.0, period=0.1),
    )
    input_source.set_state(JoystickState(y=1.0))
    controller.run()
    controller.run()

    assert controller.left_pid.integral == pytest.approx(0.16)
    assert drivetrain.last_command.left == pytest.approx(0.16)
    assert drivetrain.last_command.right == pytest.approx(0.0)


def test_pid_output_violation_blocks_actuator_write(input_source, drivetrain):
    feedback = FixedFeedback(left=0.0, right=0.0)
    controller = make_controller(
        input_source, drivetrain, feedback=feedback,
        use_pid=True,
        left_pid=PIDConfig(kf=2.0),
        right_pid=PIDConfig(kf=1.0),
    )
    input_source.set_state(JoystickState(y=1.0))

    with pytest.raises(PowerLevelRangeError, match="left power level too high"):
        controller.run()

    assert drivetrain.command_count == 0


def test_nan_pid_output_blocks_actuator_write(input_source, drivetrain):
    feedback = FixedFeedback(left=0.0, right=0.0)
    controller = make_controller(
        input_source, drivetrain, feedback=feedback,
        use_pid=True,
        left_pid=PIDConfig(kp=float("nan")),
    )
    input_source.set_state(JoystickState(y=0.5))

    with pytest.raises(PowerLevelRangeError, match="left power level not a number"):
        controller.run()

    assert drivetrain.command_count == 0


def test_nan_encoder_reading_blocks_actuator_write(input_source, drivetrain):
    feedback = FixedFeedback(left=0.0, right=float("nan"))
    controller = make_controller(input_source, drivetrain, feedback=feedback, use_pid=True)
    input_source.set_state(JoystickState(y=0.5))

    with pytest.raises(PowerLevelRangeError, match="right power level not a number"):
        controller.run()

    assert drivetrain.command_count == 0


def test_pid_closes_loop_on_mock_drivetrain(input_source, drivetrain):
    """Default gains settle the simulated encoders near the setpoint"""
    controller = make_controller(input_source, drivetrain, feedback=drivetrain, use_pid=True)
    input_source.set_state(JoystickState(y=1.0))

    for _ in range(50):
        controller.run()

    assert drivetrain.get_left_encoder_velocity() == pytest.approx(0.8, abs=0.05)
    assert drivetrain.get_right_encoder_velocity() == pytest.approx(0.8, abs=0.05)


def test_stop(input_source, drivetrain):
    controller = make_controller(input_source, drivetrain)
    input_source.set_state(JoystickState(y=1.0))
    controller.run()
    controller.stop()

    assert drivetrain.last_command.is_stop is True
    assert controller.last_command.is_stop is True
