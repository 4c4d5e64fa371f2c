"""
Auxiliary mechanism controllers - shooter, collector and compressor.

Each is a thin periodic controller: poll the operator buttons it cares
about and forward the matching solenoid/motor commands.
"""

import logging

from .interfaces import CollectorActuator, CompressorActuator, InputSource, ShooterActuator
from .types import ShooterSolenoids


logger = logging.getLogger(__name__)


class ShooterController:
    """Fires the shooter pistons for the selected mode while shoot is held."""

    def __init__(self, input_source: InputSource, shooter: ShooterActuator) -> None:
        self.input = input_source
        self.shooter = shooter

    def run(self) -> None:
        if not self.input.get_shooter_shoot():
            return

        mode = self.input.get_shooter_mode()
        solenoids = ShooterSolenoids.for_mode(mode)
        if solenoids.count == 0:
            logger.warning(f"Unknown shooter mode {mode}, firing no pistons")

        self.shooter.set_shooter_solenoids(
            solenoids.middle,
            solenoids.inner_left,
            solenoids.inner_right,
            solenoids.outer_left,
            solenoids.outer_right,
        )


class CollectorController:
    """
    Extends/retracts the collector arm and runs its roller.

    Extend takes priority over retract. With neither held the arm
    solenoid is left as it is.
    """

    def __init__(self, input_source: InputSource, collector: CollectorActuator) -> None:
        self.input = input_source
        self.collector = collector

    def run(self) -> None:
        if self.input.get_collector_extend():
            self.collector.set_collector_solenoid(True)
        elif self.input.get_collector_retract():
            self.collector.set_collector_solenoid(False)

        collect = self.input.get_collector_collect()
        expel = self.input.get_collector_expel()

        power = 0.0
        if collect and not expel:
            power = 1.0
        elif expel and not collect:
            power = -1.0

        self.collector.set_collector_roller_power(power)


class CompressorController:
    """Starts the compressor on the first cycle, then never again."""

    def __init__(self, compressor: CompressorActuator) -> None:
        self.compressor = compressor
        self._started = False

    def run(self) -> None:
        if not self._started:
            logger.info("Starting compressor")
            self.compressor.start()
            self._started = True

    @property
    def is_started(self) -> bool:
        return self._started
