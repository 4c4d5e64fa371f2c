"""
Gamepad Input Provider

Reads operator input from a USB game controller or flight stick.
Button numbers follow the driver station numbering (1-based).
"""

import logging
from typing import Optional

try:
    import pygame
    HAS_PYGAME = True
except ImportError:
    HAS_PYGAME = False

from core.types import JoystickState, ShooterMode


logger = logging.getLogger(__name__)


# Driver station button numbers
DRIVETRAIN_SIMPLE_BUTTON = 3
COLLECTOR_EXTEND_BUTTON = 5
COLLECTOR_RETRACT_BUTTON = 6
COLLECTOR_COLLECT_BUTTON = 7
COLLECTOR_EXPEL_BUTTON = 8
SHOOTER_SHOOT_BUTTON = 9
SHOOTER_MODE_TOGGLE_BUTTON = 11

SHOOTER_MODES = [ShooterMode.THREE, ShooterMode.FOUR, ShooterMode.FIVE]


class GamepadInput:
    """
    Game controller input source.

    Maps controls to the robot:
    - Stick X/Y: Drivetrain turn/drive (forward is positive Y)
    - Button 3: Simple drive mode (hold)
    - Buttons 5/6: Collector extend/retract
    - Buttons 7/8: Collector collect/expel
    - Button 9: Shoot
    - Button 11: Cycle shooter mode 3 -> 4 -> 5 -> 3
    """

    def __init__(self, joystick_index: int = 0, invert_y: bool = True) -> None:
        """
        Initialize gamepad input.

        Args:
            joystick_index: Which attached controller to use
            invert_y: Invert Y-axis (most controllers report up as negative)
        """
        if not HAS_PYGAME:
            raise RuntimeError(
                "pygame not installed. Install with: pip install pygame"
            )

        self._joystick_index = joystick_index
        self._invert_y = invert_y

        self._joystick: Optional[pygame.joystick.Joystick] = None
        self._state = JoystickState()
        self._shooter_mode = ShooterMode.THREE
        self._mode_toggle_was_pressed = False

        self._axis_x = 0
        self._axis_y = 1

    def start(self) -> None:
        """Initialize pygame and connect to controller"""
        if self._joystick is not None:
            return

        logger.info("Initializing gamepad input...")

        pygame.init()
        pygame.joystick.init()

        joystick_count = pygame.joystick.get_count()
        logger.info(f"Found {joystick_count} game controller(s)")

        if joystick_count <= self._joystick_index:
            raise RuntimeError("No game controllers found")

        self._joystick = pygame.joystick.Joystick(self._joystick_index)
        self._joystick.init()
        logger.info(f"Selected: {self._joystick.get_name()}")
        logger.info(f"Axes: {self._joystick.get_numaxes()}")
        logger.info(f"Buttons: {self._joystick.get_numbuttons()}")

    def stop(self) -> None:
        """Disconnect from controller"""
        logger.info("Stopping gamepad input")

        if self._joystick:
            self._joystick.quit()
            self._joystick = None

        pygame.joystick.quit()
        pygame.quit()

    def update(self) -> None:
        """Read the current controller state"""
        if not self._joystick:
            self._state = JoystickState(shooter_mode=self._shooter_mode)
            return

        # Process pygame events (required to update joystick state)
        pygame.event.pump()

        x = self._clamp(self._joystick.get_axis(self._axis_x))
        y = self._clamp(self._joystick.get_axis(self._axis_y))
        if self._invert_y:
            y = -y

        toggle = self._button(SHOOTER_MODE_TOGGLE_BUTTON)
        if toggle and not self._mode_toggle_was_pressed:
            self._cycle_shooter_mode()
        self._mode_toggle_was_pressed = toggle

        self._state = JoystickState(
            x=x,
            y=y,
            simple_mode=self._button(DRIVETRAIN_SIMPLE_BUTTON),
            shoot=self._button(SHOOTER_SHOOT_BUTTON),
            shooter_mode=self._shooter_mode,
            collector_extend=self._button(COLLECTOR_EXTEND_BUTTON),
            collector_retract=self._button(COLLECTOR_RETRACT_BUTTON),
            collector_collect=self._button(COLLECTOR_COLLECT_BUTTON),
            collector_expel=self._button(COLLECTOR_EXPEL_BUTTON),
        )

        logger.debug(
            f"Stick: X={x:+.2f} Y={y:+.2f} simple={self._state.simple_mode} "
            f"shoot={self._state.shoot} mode={int(self._shooter_mode)}"
        )

    def get_drive_train_x_axis(self) -> float:
        return self._state.x

    def get_drive_train_y_axis(self) -> float:
        return self._state.y

    def get_drive_train_simple_mode(self) -> bool:
        return self._state.simple_mode

    def get_shooter_shoot(self) -> bool:
        return self._state.shoot

    def get_shooter_mode(self) -> int:
        return self._state.shooter_mode

    def get_collector_extend(self) -> bool:
        return self._state.collector_extend

    def get_collector_retract(self) -> bool:
        return self._state.collector_retract

    def get_collector_collect(self) -> bool:
        return self._state.collector_collect

    def get_collector_expel(self) -> bool:
        return self._state.collector_expel

    def _button(self, number: int) -> bool:
        """Read a button by its 1-based driver station number"""
        index = number - 1
        if index >= self._joystick.get_numbuttons():
            return False
        return bool(self._joystick.get_button(index))

    def _cycle_shooter_mode(self) -> None:
        idx = SHOOTER_MODES.index(self._shooter_mode)
        self._shooter_mode = SHOOTER_MODES[(idx + 1) % len(SHOOTER_MODES)]
        logger.info(f"Shooter mode: {int(self._shooter_mode)}")

    @staticmethod
    def _clamp(value: float) -> float:
        return max(-1.0, min(1.0, value))
