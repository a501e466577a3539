"""
Core module providing foundational components for the application.

Includes interfaces, exceptions, results and logging helpers.
"""

from .interfaces import IParserFactory, ICarBuilder
from .exceptions import (
    CreationalError,
    UnknownParserTypeError,
    UnknownRegionError,
    SingletonConstructionError,
)
from .results import Result

__all__ = [
    'IParserFactory',
    'ICarBuilder',
    'CreationalError',
    'UnknownParserTypeError',
    'UnknownRegionError',
    'SingletonConstructionError',
    'Result',
]
