"""
Builder: step-by-step assembly of car specifications.
"""

from .car import Car, CAR_ATTRIBUTES
from .builder import CarBuilder, SedanCarBuilder
from .director import CarDirector

__all__ = [
    'Car',
    'CAR_ATTRIBUTES',
    'CarBuilder',
    'SedanCarBuilder',
    'CarDirector',
]
