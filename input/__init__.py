"""Input source module"""

from input.mock_input import MockInput, TestScripts
from input.gamepad_input import GamepadInput, HAS_PYGAME

__all__ = ["MockInput", "TestScripts", "GamepadInput", "HAS_PYGAME"]
