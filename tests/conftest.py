"""
Shared test fixtures for dishwasher unit tests.
"""

import pytest
from unittest.mock import Mock

from dishwasher.configuration import ProgramConfiguration
from dishwasher.control.dishwasher import DishWasher
from dishwasher.hardware.interfaces import Door, DirtFilter, WaterPump, Engine
from dishwasher.programs import FillLevel, WashingProgram
from dishwasher.simulation import ApplianceSimConfig, SimulatedAppliance


@pytest.fixture
def hardware():
    """
    Mocked collaborators attached to one parent mock.

    The parent's mock_calls records calls across all four devices in order.
    """
    parent = Mock()
    door = Mock(spec=Door)
    dirt_filter = Mock(spec=DirtFilter)
    water_pump = Mock(spec=WaterPump)
    engine = Mock(spec=Engine)

    parent.attach_mock(door, "door")
    parent.attach_mock(dirt_filter, "dirt_filter")
    parent.attach_mock(water_pump, "water_pump")
    parent.attach_mock(engine, "engine")

    door.closed.return_value = True
    dirt_filter.capacity.return_value = DishWasher.MAXIMAL_FILTER_CAPACITY + 1
    return parent


@pytest.fixture
def dish_washer(hardware):
    """Controller wired to the mocked collaborators."""
    return DishWasher(hardware.water_pump, hardware.engine, hardware.dirt_filter, hardware.door)


@pytest.fixture
def rinse_config():
    """Rinse program, full fill, tablets used."""
    return (ProgramConfiguration.builder()
            .with_program(WashingProgram.RINSE)
            .with_fill_level(FillLevel.FULL)
            .with_tablets_used(True)
            .build())


@pytest.fixture
def eco_config():
    """Eco program, half fill, no tablets."""
    return (ProgramConfiguration.builder()
            .with_program(WashingProgram.ECO)
            .with_fill_level(FillLevel.HALF)
            .with_tablets_used(False)
            .build())


@pytest.fixture
def appliance():
    """Fault-free simulated appliance."""
    return SimulatedAppliance(ApplianceSimConfig(seed=42))
