"""
Run Results
===========

Outcome classification and the result record returned by every cycle run.
"""

from dataclasses import dataclass
from enum import Enum


class Status(Enum):
    """Outcome of one cycle run. Exactly one per run."""
    SUCCESS = "success"
    DOOR_OPEN = "door_open"
    ERROR_FILTER = "error_filter"
    ERROR_PROGRAM = "error_program"
    ERROR_PUMP = "error_pump"


@dataclass(frozen=True)
class RunResult:
    """
    Result of one cycle run.

    run_minutes is the program duration on success and 0 for every other
    status.
    """
    status: Status
    run_minutes: int = 0

    def __post_init__(self):
        if self.status is Status.SUCCESS and self.run_minutes <= 0:
            raise ValueError(f"Successful run needs positive minutes, got {self.run_minutes}")
        if self.status is not Status.SUCCESS and self.run_minutes != 0:
            raise ValueError(f"{self.status.name} run cannot report {self.run_minutes} minutes")

    @classmethod
    def success(cls, minutes: int) -> "RunResult":
        return cls(Status.SUCCESS, minutes)

    @classmethod
    def error(cls, status: Status) -> "RunResult":
        return cls(status, 0)

    @property
    def is_success(self) -> bool:
        return self.status is Status.SUCCESS
