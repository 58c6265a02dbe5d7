"""
Program Configuration
=====================

Immutable run configuration and its staged builder.

Usage:
    config = (ProgramConfiguration.builder()
              .with_program(WashingProgram.ECO)
              .with_fill_level(FillLevel.FULL)
              .with_tablets_used(True)
              .build())
"""

from dataclasses import dataclass, fields, replace
from typing import Optional

from .programs import FillLevel, WashingProgram


class ConfigurationError(ValueError):
    """Raised when a configuration is finalized with missing fields."""

    def __init__(self, missing: list):
        self.missing = list(missing)
        super().__init__(f"Missing configuration fields: {', '.join(self.missing)}")


@dataclass(frozen=True)
class ProgramConfiguration:
    """Settings for one wash cycle."""
    program: WashingProgram
    fill_level: FillLevel
    tablets_used: bool

    def __post_init__(self):
        missing = [f.name for f in fields(self) if getattr(self, f.name) is None]
        if missing:
            raise ConfigurationError(missing)

    @staticmethod
    def builder() -> "ProgramConfigurationBuilder":
        """Start a new staged builder."""
        return ProgramConfigurationBuilder()


@dataclass(frozen=True)
class ProgramConfigurationBuilder:
    """
    Staged builder for ProgramConfiguration.

    Every with_* call returns a new builder, so a partially filled builder
    can be shared and extended without side effects.
    """
    program: Optional[WashingProgram] = None
    fill_level: Optional[FillLevel] = None
    tablets_used: Optional[bool] = None

    def with_program(self, program: WashingProgram) -> "ProgramConfigurationBuilder":
        return replace(self, program=program)

    def with_fill_level(self, fill_level: FillLevel) -> "ProgramConfigurationBuilder":
        return replace(self, fill_level=fill_level)

    def with_tablets_used(self, tablets_used: bool) -> "ProgramConfigurationBuilder":
        return replace(self, tablets_used=tablets_used)

    def build(self) -> ProgramConfiguration:
        """
        Finalize the configuration.

        Raises:
            ConfigurationError: If any field was never set
        """
        return ProgramConfiguration(
            program=self.program,
            fill_level=self.fill_level,
            tablets_used=self.tablets_used,
        )
