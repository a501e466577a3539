"""
Abstract factory: interchangeable parser factories, one per region.
"""

from .factory import ParserFactory, CLParserFactory, NYParserFactory
from .registry import ParserFactoryRegistry, create_default_registry, get_registry, set_registry

__all__ = [
    'ParserFactory',
    'CLParserFactory',
    'NYParserFactory',
    'ParserFactoryRegistry',
    'create_default_registry',
    'get_registry',
    'set_registry',
]
