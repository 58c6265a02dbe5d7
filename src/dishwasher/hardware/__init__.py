"""
Hardware Boundary
=================

Capability protocols for the appliance hardware and the faults they raise.
"""

from .interfaces import Door, DirtFilter, WaterPump, Engine
from .errors import HardwareError, PumpError, EngineError

__all__ = [
    'Door',
    'DirtFilter',
    'WaterPump',
    'Engine',
    'HardwareError',
    'PumpError',
    'EngineError',
]
