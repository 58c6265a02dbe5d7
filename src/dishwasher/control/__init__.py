"""
Control Modules
===============

Primary Components:
    - DishWasher: Wash cycle controller
    - RunResult, Status: Cycle outcome
"""

from .dishwasher import DishWasher, MAXIMAL_FILTER_CAPACITY
from .result import RunResult, Status

__all__ = [
    'DishWasher',
    'MAXIMAL_FILTER_CAPACITY',
    'RunResult',
    'Status',
]
