"""
Dishwasher Controller
=====================

Wash cycle control for an automated dishwasher: precondition checks,
ordered actuation of door, pump and engine, and fault-to-status mapping.

Primary Components:
    - DishWasher: Cycle controller (control)
    - ProgramConfiguration: Immutable run settings with staged builder
    - WashingProgram, FillLevel: Program and fill enumerations
    - RunResult, Status: Cycle outcome
    - Door, DirtFilter, WaterPump, Engine: Hardware capability protocols
    - SimulatedAppliance: Simulated hardware (simulation)
"""

from .programs import WashingProgram, FillLevel
from .configuration import (
    ProgramConfiguration,
    ProgramConfigurationBuilder,
    ConfigurationError,
)
from .control import DishWasher, MAXIMAL_FILTER_CAPACITY, RunResult, Status
from .hardware import (
    Door,
    DirtFilter,
    WaterPump,
    Engine,
    HardwareError,
    PumpError,
    EngineError,
)

__version__ = "0.1.0"

__all__ = [
    'WashingProgram',
    'FillLevel',
    'ProgramConfiguration',
    'ProgramConfigurationBuilder',
    'ConfigurationError',
    'DishWasher',
    'MAXIMAL_FILTER_CAPACITY',
    'RunResult',
    'Status',
    'Door',
    'DirtFilter',
    'WaterPump',
    'Engine',
    'HardwareError',
    'PumpError',
    'EngineError',
]
