"""
Simulated Appliance
===================

Software stand-ins for the dishwasher hardware, exposing the same
capabilities as the physical devices so the controller can run end to end
without an appliance attached.

Every simulated device appends "<device>.<operation>" to a shared
CallJournal, giving an ordered trace of one cycle.

Fault injection:
    pump_fault_on="pour" or "drain"  -> PumpError on that operation
    engine_fault=True                -> EngineError on run_program
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from ..control.dishwasher import DishWasher
from ..hardware.errors import EngineError, PumpError
from ..programs import FillLevel, WashingProgram

logger = logging.getLogger(__name__)

PUMP_OPERATIONS = ("pour", "drain")


@dataclass
class ApplianceSimConfig:
    """Configuration for the simulated appliance."""
    door_closed: bool = True

    # Dirt filter sensor
    filter_capacity: float = 100.0     # Nominal reading
    filter_noise_std: float = 0.0      # Gaussian noise per sample
    filter_samples: int = 5            # Samples per reading (median)

    # Fault injection
    pump_fault_on: Optional[str] = None
    engine_fault: bool = False

    seed: Optional[int] = None

    def __post_init__(self):
        if self.pump_fault_on is not None and self.pump_fault_on not in PUMP_OPERATIONS:
            raise ValueError(
                f"pump_fault_on must be one of {PUMP_OPERATIONS}, got {self.pump_fault_on!r}"
            )
        if self.filter_samples < 1:
            raise ValueError("filter_samples must be at least 1")


class CallJournal:
    """Ordered record of simulated hardware operations."""

    def __init__(self):
        self._entries: List[str] = []

    def record(self, device: str, operation: str):
        entry = f"{device}.{operation}"
        self._entries.append(entry)
        logger.debug(f"Hardware call: {entry}")

    def clear(self):
        self._entries.clear()

    @property
    def entries(self) -> List[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class SimulatedDoor:
    """Door with a closed sensor and a latch."""

    def __init__(self, journal: CallJournal, closed: bool = True):
        self._journal = journal
        self._closed = closed
        self.is_locked = False

    def closed(self) -> bool:
        self._journal.record("door", "closed")
        return self._closed

    def lock(self):
        self._journal.record("door", "lock")
        if not self._closed:
            logger.warning("Lock requested with door open, ignoring")
            return
        self.is_locked = True

    def unlock(self):
        self._journal.record("door", "unlock")
        self.is_locked = False

    def open(self):
        """Open the door (unlocks first, like the physical handle)."""
        self.is_locked = False
        self._closed = False

    def close(self):
        self._closed = True


class SimulatedDirtFilter:
    """
    Dirt filter sensor with optional measurement noise.

    Each reading draws `samples` gaussian values around the nominal
    capacity and returns their median.
    """

    def __init__(self, journal: CallJournal, capacity: float = 100.0,
                 noise_std: float = 0.0, samples: int = 5,
                 seed: Optional[int] = None):
        self._journal = journal
        self.nominal_capacity = capacity
        self.noise_std = noise_std
        self.samples = samples
        self._rng = np.random.default_rng(seed)

    def capacity(self) -> float:
        self._journal.record("dirt_filter", "capacity")
        if self.noise_std <= 0:
            return float(self.nominal_capacity)
        readings = self._rng.normal(self.nominal_capacity, self.noise_std, self.samples)
        return float(np.median(readings))


class SimulatedWaterPump:
    """Water pump tracking the current tub fill."""

    def __init__(self, journal: CallJournal, fault_on: Optional[str] = None):
        self._journal = journal
        self.fault_on = fault_on
        self.water_level: Optional[FillLevel] = None

    def pour(self, level: FillLevel):
        self._journal.record("water_pump", "pour")
        if self.fault_on == "pour":
            raise PumpError("simulated inlet valve failure")
        self.water_level = level

    def drain(self):
        self._journal.record("water_pump", "drain")
        if self.fault_on == "drain":
            raise PumpError("simulated drain blockage")
        self.water_level = None


class SimulatedEngine:
    """Wash engine recording the programs it ran."""

    def __init__(self, journal: CallJournal, fault: bool = False):
        self._journal = journal
        self.fault = fault
        self.programs_run: List[WashingProgram] = []

    def run_program(self, program: WashingProgram):
        self._journal.record("engine", "run_program")
        if self.fault:
            raise EngineError(f"simulated motor stall during {program.name}")
        self.programs_run.append(program)


class SimulatedAppliance:
    """
    Complete simulated appliance.

    Wires the four simulated devices to one shared journal.
    """

    def __init__(self, config: Optional[ApplianceSimConfig] = None):
        self.config = config or ApplianceSimConfig()
        self.journal = CallJournal()

        self.door = SimulatedDoor(self.journal, closed=self.config.door_closed)
        self.dirt_filter = SimulatedDirtFilter(
            self.journal,
            capacity=self.config.filter_capacity,
            noise_std=self.config.filter_noise_std,
            samples=self.config.filter_samples,
            seed=self.config.seed,
        )
        self.water_pump = SimulatedWaterPump(self.journal, fault_on=self.config.pump_fault_on)
        self.engine = SimulatedEngine(self.journal, fault=self.config.engine_fault)

        logger.info(
            f"Simulated appliance ready: door_closed={self.config.door_closed}, "
            f"filter={self.config.filter_capacity:.1f}, "
            f"pump_fault={self.config.pump_fault_on}, engine_fault={self.config.engine_fault}"
        )

    def build_controller(self) -> DishWasher:
        """Create a controller driving this appliance."""
        return DishWasher(self.water_pump, self.engine, self.dirt_filter, self.door)
