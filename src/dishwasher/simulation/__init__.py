"""
Simulation
==========

Simulated dishwasher hardware for running cycles without a physical
appliance.

Usage:
    from dishwasher.simulation import SimulatedAppliance, ApplianceSimConfig

    appliance = SimulatedAppliance(ApplianceSimConfig(engine_fault=True))
    result = appliance.build_controller().start(config)
    print(appliance.journal.entries)
"""

from .appliance import (
    ApplianceSimConfig,
    CallJournal,
    SimulatedAppliance,
    SimulatedDirtFilter,
    SimulatedDoor,
    SimulatedEngine,
    SimulatedWaterPump,
)

__all__ = [
    'ApplianceSimConfig',
    'CallJournal',
    'SimulatedAppliance',
    'SimulatedDirtFilter',
    'SimulatedDoor',
    'SimulatedEngine',
    'SimulatedWaterPump',
]
