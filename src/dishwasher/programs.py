"""
Washing Programs
================

Enumerations of the wash profiles and water fill levels the appliance
supports. Both are closed sets; the controller treats them as opaque tokens
and only reads the fixed duration bound to each program.
"""

from enum import Enum


class WashingProgram(Enum):
    """Wash profiles with their fixed duration in minutes."""
    ECO = ("eco", 120)
    INTENSIVE = ("intensive", 180)
    NIGHT = ("night", 240)
    RINSE = ("rinse", 12)

    def __init__(self, label: str, minutes: int):
        self.label = label
        self._minutes = minutes

    @property
    def time_in_minutes(self) -> int:
        """Fixed program duration in minutes."""
        return self._minutes

    @classmethod
    def from_label(cls, label: str) -> "WashingProgram":
        """
        Look up a program by its lowercase label.

        Raises:
            ValueError: If no program carries the label
        """
        for program in cls:
            if program.label == label.lower():
                return program
        raise ValueError(f"Unknown washing program: {label!r}")


class FillLevel(Enum):
    """Water fill levels passed through to the pump."""
    HALF = "half"
    FULL = "full"
