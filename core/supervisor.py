"""
Supervisor - Periodic driver loop and safety orchestration.

The Supervisor is the external scheduler for the controllers. It:
- Polls the input source once at the start of every period
- Runs every registered controller exactly once per period
- Warns when a cycle overruns the control period
- Enters FAILSAFE on a power range violation and holds the drivetrain at zero

This is safety-critical code.
"""

import asyncio
import logging
import time
from typing import Any, Callable, List, Optional, Sequence

from .drivetrain import DriveTrainController
from .interfaces import Controller, InputSource
from .mapper import PowerLevelRangeError
from .types import SupervisorConfig, SupervisorState


logger = logging.getLogger(__name__)


class Supervisor:
    """
    Main control loop and safety supervisor.

    FAILSAFE is terminal: once entered, no more cycles run until a new
    Supervisor (and new controllers) are created.
    """

    def __init__(
        self,
        input_source: InputSource,
        drivetrain: DriveTrainController,
        config: SupervisorConfig,
        controllers: Optional[Sequence[Controller]] = None,
    ) -> None:
        """
        Initialize supervisor.

        Args:
            input_source: Operator input, updated once per period
            drivetrain: Drivetrain controller, always run first
            config: Supervisor configuration
            controllers: Additional controllers, run in order after the drivetrain
        """
        self.input = input_source
        self.drivetrain = drivetrain
        self.config = config
        self.controllers: List[Controller] = [drivetrain, *(controllers or [])]

        self.state = SupervisorState.DISABLED
        self._running = False

        self._cycle_count = 0
        self._overrun_count = 0
        self._failsafe_reason: Optional[str] = None

        # State change callbacks
        self._state_callbacks: list[Callable[[SupervisorState, SupervisorState], Any]] = []

    def add_state_callback(self, callback: Callable[[SupervisorState, SupervisorState], Any]) -> None:
        """
        Register callback for state changes.

        Callback signature: callback(old_state, new_state)
        """
        self._state_callbacks.append(callback)

    def enable(self) -> None:
        """Start running controllers on the next period"""
        if self.state == SupervisorState.FAILSAFE:
            logger.warning("Cannot enable from FAILSAFE, re-create the supervisor")
            return
        self._transition_to(SupervisorState.ENABLED)

    def disable(self) -> None:
        """Stop running controllers and command zero drivetrain power"""
        if self.state == SupervisorState.ENABLED:
            self.drivetrain.stop()
            self._transition_to(SupervisorState.DISABLED)

    def run_once(self) -> bool:
        """
        Single control period.

        Returns:
            True if every controller ran, False if disabled or the cycle failed
        """
        if self.state != SupervisorState.ENABLED:
            return False

        try:
            self.input.update()
            for controller in self.controllers:
                controller.run()
        except PowerLevelRangeError as e:
            self._enter_failsafe(f"Power range violation: {e}")
            return False
        except Exception as e:
            logger.error(f"Error in control cycle: {e}", exc_info=True)
            self._enter_failsafe(f"Cycle error: {e}")
            return False

        self._cycle_count += 1
        return True

    async def run(self) -> None:
        """
        Main control loop - runs until stopped.

        Call this from an async context.
        """
        logger.info(f"Supervisor starting ({1.0 / self.config.loop_interval:.0f}Hz)")
        self._running = True

        try:
            while self._running:
                started = time.monotonic()
                self.run_once()
                elapsed = time.monotonic() - started

                if elapsed > self.config.loop_interval:
                    self._overrun_count += 1
                    if self.config.overrun_warning:
                        logger.warning(
                            f"Cycle overran period: {elapsed * 1000:.1f}ms > "
                            f"{self.config.loop_interval * 1000:.1f}ms"
                        )

                await asyncio.sleep(max(0.0, self.config.loop_interval - elapsed))

        finally:
            logger.info("Supervisor stopping")
            self._cleanup()

    def stop(self) -> None:
        """Stop the loop after the current period"""
        self._running = False

    def _enter_failsafe(self, reason: str) -> None:
        """Enter FAILSAFE state"""
        logger.critical(f"Entering FAILSAFE: {reason}")
        self._failsafe_reason = reason
        self._transition_to(SupervisorState.FAILSAFE)
        try:
            self.drivetrain.stop()
        except Exception as e:
            logger.error(f"Failed to stop drivetrain: {e}", exc_info=True)

    def _transition_to(self, new_state: SupervisorState) -> None:
        """
        Transition to new state.

        Args:
            new_state: State to transition to
        """
        if new_state == self.state:
            return

        old_state = self.state
        logger.info(f"State transition: {old_state.value} -> {new_state.value}")
        self.state = new_state

        # Notify callbacks
        for callback in self._state_callbacks:
            try:
                callback(old_state, new_state)
            except Exception as e:
                logger.error(f"Error in state callback: {e}", exc_info=True)

    def _cleanup(self) -> None:
        """Cleanup on shutdown"""
        try:
            # Send final stop
            self.drivetrain.stop()
        except Exception as e:
            logger.error(f"Error during cleanup: {e}", exc_info=True)

    # Public properties for UI/monitoring

    @property
    def cycle_count(self) -> int:
        """Number of completed control periods"""
        return self._cycle_count

    @property
    def overrun_count(self) -> int:
        return self._overrun_count

    @property
    def failsafe_reason(self) -> Optional[str]:
        return self._failsafe_reason

    @property
    def is_running(self) -> bool:
        return self._running
