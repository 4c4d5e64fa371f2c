"""
Mock (test) input provider.

Provides scripted operator input for running the control core without a joystick.
"""

import logging
from typing import List, Optional

from core.types import JoystickState, ShooterMode


logger = logging.getLogger(__name__)


class MockInput:
    """
    Scripted input source.

    Each update() advances to the next JoystickState in the script;
    after the last one the final state is held.
    """

    def __init__(self, states: Optional[List[JoystickState]] = None) -> None:
        """
        Initialize mock input.

        Args:
            states: Joystick states to return in sequence.
                   If None, the stick stays centered.
        """
        self._states = states or []
        self._index = 0
        self._current = JoystickState()

    def update(self) -> None:
        """Advance to the next scripted state"""
        if not self._states:
            return

        if self._index < len(self._states):
            self._current = self._states[self._index]
            self._index += 1
        else:
            self._current = self._states[-1]

    def set_state(self, state: JoystickState) -> None:
        """Override the current state directly (for tests)"""
        self._current = state

    @property
    def current(self) -> JoystickState:
        return self._current

    @property
    def is_finished(self) -> bool:
        """True once the whole script has been played"""
        return self._index >= len(self._states)

    def get_drive_train_x_axis(self) -> float:
        return self._current.x

    def get_drive_train_y_axis(self) -> float:
        return self._current.y

    def get_drive_train_simple_mode(self) -> bool:
        return self._current.simple_mode

    def get_shooter_shoot(self) -> bool:
        return self._current.shoot

    def get_shooter_mode(self) -> int:
        return self._current.shooter_mode

    def get_collector_extend(self) -> bool:
        return self._current.collector_extend

    def get_collector_retract(self) -> bool:
        return self._current.collector_retract

    def get_collector_collect(self) -> bool:
        return self._current.collector_collect

    def get_collector_expel(self) -> bool:
        return self._current.collector_expel

    def reset(self) -> None:
        """Reset to beginning of script"""
        self._index = 0
        self._current = JoystickState()

    def load_script(self, script_name: str) -> None:
        """
        Load a predefined test script.

        Args:
            script_name: Name of script to load from TestScripts
        """
        script_map = {
            "forward": TestScripts.forward_drive,
            "turn": TestScripts.turn_test,
            "simple": TestScripts.simple_drive,
            "shoot": TestScripts.collect_and_shoot,
        }

        if script_name in script_map:
            self._states = script_map[script_name]()
            self.reset()
            logger.info(f"Loaded script '{script_name}' with {len(self._states)} states")
        else:
            logger.warning(f"Unknown script '{script_name}'")

    @staticmethod
    def script_names() -> List[str]:
        return ["forward", "turn", "simple", "shoot"]


class TestScripts:
    """Pre-defined test scripts"""

    # Not a test class
    __test__ = False

    @staticmethod
    def forward_drive() -> List[JoystickState]:
        """Accelerate forward, hold, then stop"""
        return [
            JoystickState(),
            JoystickState(y=0.3),
            JoystickState(y=0.6),
            JoystickState(y=1.0),
            JoystickState(y=1.0),
            JoystickState(y=1.0),
            JoystickState(y=0.5),
            JoystickState(y=0.2),
            JoystickState(),
        ]

    @staticmethod
    def turn_test() -> List[JoystickState]:
        """Advanced-mode turns in all four quadrants"""
        return [
            JoystickState(x=0.5, y=0.8),
            JoystickState(x=0.5, y=0.8),
            JoystickState(x=-0.5, y=0.8),
            JoystickState(x=-0.5, y=0.8),
            JoystickState(x=1.0, y=0.0),
            JoystickState(x=0.5, y=-0.8),
            JoystickState(x=-0.5, y=-0.8),
            JoystickState(),
        ]

    @staticmethod
    def simple_drive() -> List[JoystickState]:
        """Simple mode: straight, spin right, spin left"""
        return [
            JoystickState(x=0.1, y=0.8, simple_mode=True),
            JoystickState(x=0.1, y=0.8, simple_mode=True),
            JoystickState(x=0.8, y=0.1, simple_mode=True),
            JoystickState(x=-0.8, y=0.1, simple_mode=True),
            JoystickState(simple_mode=True),
        ]

    @staticmethod
    def collect_and_shoot() -> List[JoystickState]:
        """Extend collector, collect, retract, fire in each shooter mode"""
        return [
            JoystickState(collector_extend=True),
            JoystickState(collector_collect=True),
            JoystickState(collector_collect=True),
            JoystickState(collector_retract=True),
            JoystickState(shoot=True, shooter_mode=ShooterMode.THREE),
            JoystickState(shoot=True, shooter_mode=ShooterMode.FOUR),
            JoystickState(shoot=True, shooter_mode=ShooterMode.FIVE),
            JoystickState(),
        ]
