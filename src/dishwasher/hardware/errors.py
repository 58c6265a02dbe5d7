"""
Hardware Faults
===============

Exceptions raised by hardware collaborators. The controller converts these
into run statuses; they never leave a cycle run.
"""

from typing import Optional


class HardwareError(Exception):
    """Base class for faults reported by appliance hardware."""

    device = "hardware"

    def __init__(self, reason: Optional[str] = None):
        self.reason = reason or f"{self.device} fault"
        super().__init__(self.reason)


class PumpError(HardwareError):
    """Water pump failed to pour or drain."""
    device = "pump"


class EngineError(HardwareError):
    """Wash engine failed while running a program."""
    device = "engine"
