"""
Hardware Capability Interfaces
==============================

Narrow capability sets the controller depends on. These are structural
protocols: any object exposing the methods can be injected, whether it
drives physical hardware, a simulator, or a test mock.

Capabilities:
    Door:        closed(), lock(), unlock()
    DirtFilter:  capacity()
    WaterPump:   pour(level), drain()        - raise PumpError
    Engine:      run_program(program)        - raises EngineError
"""

from typing import Protocol, runtime_checkable

from ..programs import FillLevel, WashingProgram


@runtime_checkable
class Door(Protocol):
    """Door latch and closed-state sensor."""

    def closed(self) -> bool:
        """Return True if the door is shut."""
        ...

    def lock(self) -> None:
        ...

    def unlock(self) -> None:
        ...


@runtime_checkable
class DirtFilter(Protocol):
    """Dirt filter sensor."""

    def capacity(self) -> float:
        """
        Remaining filter capacity.

        Larger values mean a cleaner filter. Readings at or below the
        controller threshold mean the filter must be serviced.
        """
        ...


@runtime_checkable
class WaterPump(Protocol):
    """Water inlet and drain pump."""

    def pour(self, level: FillLevel) -> None:
        """
        Fill the tub to the given level.

        Raises:
            PumpError: On hardware failure
        """
        ...

    def drain(self) -> None:
        """
        Empty the tub.

        Raises:
            PumpError: On hardware failure
        """
        ...


@runtime_checkable
class Engine(Protocol):
    """Wash engine (spray arms, heater, circulation)."""

    def run_program(self, program: WashingProgram) -> None:
        """
        Run a washing program to completion.

        Raises:
            EngineError: On hardware failure
        """
        ...
