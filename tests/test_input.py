"""Tests for input sources"""

import pytest

from core.types import JoystickState, ShooterMode
from input import gamepad_input
from input.gamepad_input import GamepadInput
from input.mock_input import MockInput, TestScripts


def test_mock_input_neutral_by_default():
    source = MockInput()
    source.update()

    assert source.get_drive_train_x_axis() == 0.0
    assert source.get_drive_train_y_axis() == 0.0
    assert source.get_drive_train_simple_mode() is False
    assert source.get_shooter_shoot() is False
    assert source.get_shooter_mode() == ShooterMode.THREE


def test_mock_input_advances_once_per_update():
    source = MockInput(states=[JoystickState(y=0.2), JoystickState(y=0.4)])

    source.update()
    assert source.get_drive_train_y_axis() == 0.2
    # Getters do not advance the script
    assert source.get_drive_train_y_axis() == 0.2

    source.update()
    assert source.get_drive_train_y_axis() == 0.4
    assert source.is_finished is True


def test_mock_input_holds_last_state():
    source = MockInput(states=[JoystickState(x=0.3), JoystickState(x=-0.3)])
    for _ in range(5):
        source.update()

    assert source.get_drive_train_x_axis() == -0.3


def test_mock_input_collector_getters():
    source = MockInput()
    source.set_state(JoystickState(collector_extend=True, collector_expel=True))

    assert source.get_collector_extend() is True
    assert source.get_collector_retract() is False
    assert source.get_collector_collect() is False
    assert source.get_collector_expel() is True


def test_mock_input_reset():
    source = MockInput(states=[JoystickState(y=1.0)])
    source.update()
    source.reset()

    assert source.current == JoystickState()
    assert source.is_finished is False


@pytest.mark.parametrize("name", MockInput.script_names())
def test_load_script(name):
    source = MockInput()
    source.load_script(name)

    assert source.is_finished is False
    source.update()
    assert isinstance(source.current, JoystickState)


def test_load_unknown_script_keeps_states():
    source = MockInput(states=[JoystickState(y=0.5)])
    source.load_script("does-not-exist")
    source.update()

    assert source.get_drive_train_y_axis() == 0.5


def test_scripts_stay_in_range():
    for script in (TestScripts.forward_drive(), TestScripts.turn_test(),
                   TestScripts.simple_drive(), TestScripts.collect_and_shoot()):
        for state in script:
            assert -1.0 <= state.x <= 1.0
            assert -1.0 <= state.y <= 1.0


def test_gamepad_requires_pygame(monkeypatch):
    monkeypatch.setattr(gamepad_input, "HAS_PYGAME", False)
    with pytest.raises(RuntimeError, match="pygame"):
        GamepadInput()


class FakeJoystick:
    """Stands in for pygame.joystick.Joystick"""

    def __init__(self, axes, buttons=()):
        self.axes = list(axes)
        self.buttons = set(buttons)

    def get_axis(self, index):
        return self.axes[index]

    def get_button(self, index):
        return 1 if index in self.buttons else 0

    def get_numbuttons(self):
        return 12


@pytest.fixture
def gamepad(monkeypatch):
    pygame = pytest.importorskip("pygame")
    monkeypatch.setattr(pygame.event, "pump", lambda: None)
    source = GamepadInput()
    source._joystick = FakeJoystick(axes=[0.0, 0.0])
    return source


def test_gamepad_update_reads_axes_and_buttons(gamepad):
    # Buttons are 1-based: 3 -> index 2, 9 -> index 8
    gamepad._joystick = FakeJoystick(axes=[0.5, -1.0], buttons={2, 8})
    gamepad.update()

    assert gamepad.get_drive_train_x_axis() == 0.5
    assert gamepad.get_drive_train_y_axis() == 1.0
    assert gamepad.get_drive_train_simple_mode() is True
    assert gamepad.get_shooter_shoot() is True
    assert gamepad.get_collector_extend() is False


def test_gamepad_clamps_axes(gamepad):
    gamepad._joystick = FakeJoystick(axes=[1.00003, 1.00003])
    gamepad.update()

    assert gamepad.get_drive_train_x_axis() == 1.0
    assert gamepad.get_drive_train_y_axis() == -1.0


def test_gamepad_shooter_mode_toggles_on_press(gamepad):
    toggle = gamepad_input.SHOOTER_MODE_TOGGLE_BUTTON - 1

    gamepad._joystick = FakeJoystick(axes=[0.0, 0.0], buttons={toggle})
    gamepad.update()
    gamepad.update()
    assert gamepad.get_shooter_mode() == ShooterMode.FOUR

    gamepad._joystick = FakeJoystick(axes=[0.0, 0.0])
    gamepad.update()
    gamepad._joystick = FakeJoystick(axes=[0.0, 0.0], buttons={toggle})
    gamepad.update()
    assert gamepad.get_shooter_mode() == ShooterMode.FIVE

    gamepad._joystick = FakeJoystick(axes=[0.0, 0.0])
    gamepad.update()
    gamepad._joystick = FakeJoystick(axes=[0.0, 0.0], buttons={toggle})
    gamepad.update()
    assert gamepad.get_shooter_mode() == ShooterMode.THREE
