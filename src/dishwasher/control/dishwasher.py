"""
Dishwasher Controller
=====================

Runs one wash cycle against injected hardware collaborators.

Cycle sequence:
    1. Door closed check           -> DOOR_OPEN on failure
    2. Dirt filter capacity check  -> ERROR_FILTER on failure
    3. Lock door
    4. Pour water                  -> ERROR_PUMP on PumpError
    5. Run program                 -> ERROR_PROGRAM on EngineError
    6. Drain water                 -> ERROR_PUMP on PumpError
    7. Unlock door

Once locked, the door is always unlocked before start() returns, including
after a pump or engine fault.

The controller assumes exclusive access to its collaborators for the
duration of a run. Serializing concurrent runs is up to the caller.
"""

import logging

from ..configuration import ProgramConfiguration
from ..hardware.errors import EngineError, PumpError
from ..hardware.interfaces import DirtFilter, Door, Engine, WaterPump
from .result import RunResult, Status

logger = logging.getLogger(__name__)

# Filter capacity at or below this value means the filter needs service
MAXIMAL_FILTER_CAPACITY = 50.0


class DishWasher:
    """
    Wash cycle controller.

    Collaborators are owned by the caller's hardware layer and outlive the
    controller.
    """

    MAXIMAL_FILTER_CAPACITY = MAXIMAL_FILTER_CAPACITY

    def __init__(self, water_pump: WaterPump, engine: Engine,
                 dirt_filter: DirtFilter, door: Door):
        """
        Initialize controller.

        Args:
            water_pump: Pump used to fill and drain the tub
            engine: Engine that runs the washing program
            dirt_filter: Filter sensor checked before every run
            door: Door latch and closed sensor
        """
        self._water_pump = water_pump
        self._engine = engine
        self._dirt_filter = dirt_filter
        self._door = door

    def start(self, config: ProgramConfiguration) -> RunResult:
        """
        Run one wash cycle.

        Args:
            config: Fully built program configuration

        Returns:
            RunResult with the program duration on success, 0 minutes otherwise

        Raises:
            ValueError: If config is None
        """
        if config is None:
            raise ValueError("Program configuration is required")

        logger.info(
            f"Starting {config.program.name} cycle, fill={config.fill_level}, "
            f"tablets={config.tablets_used}"
        )

        if not self._door.closed():
            logger.warning("Door is open, cycle not started")
            return RunResult.error(Status.DOOR_OPEN)

        capacity = self._dirt_filter.capacity()
        if capacity <= self.MAXIMAL_FILTER_CAPACITY:
            logger.warning(
                f"Dirt filter needs service (capacity {capacity} <= "
                f"{self.MAXIMAL_FILTER_CAPACITY})"
            )
            return RunResult.error(Status.ERROR_FILTER)

        self._door.lock()
        try:
            self._wash(config)
        except PumpError as e:
            logger.error(f"Pump fault: {e}")
            return RunResult.error(Status.ERROR_PUMP)
        except EngineError as e:
            logger.error(f"Engine fault: {e}")
            return RunResult.error(Status.ERROR_PROGRAM)
        finally:
            self._door.unlock()

        minutes = config.program.time_in_minutes
        logger.info(f"{config.program.name} cycle finished in {minutes} min")
        return RunResult.success(minutes)

    def _wash(self, config: ProgramConfiguration):
        """Pour, run and drain. Door must already be locked."""
        logger.debug(f"Pouring water ({config.fill_level})")
        self._water_pump.pour(config.fill_level)

        logger.debug(f"Running program {config.program.name}")
        self._engine.run_program(config.program)

        logger.debug("Draining water")
        self._water_pump.drain()
