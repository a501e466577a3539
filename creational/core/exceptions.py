"""
Custom exception hierarchy for the application.

Provides specific exception types for the typed creation paths.
String-keyed lookups never raise; they return None instead.
"""

from typing import Any, Optional


class CreationalError(Exception):
    """Base exception for all object-creation errors."""
    pass


class UnknownParserTypeError(CreationalError):
    """Raised when a factory has no product registered for a parser type."""
    
    def __init__(self, message: str, parser_type: Any = None, region: Optional[str] = None):
        super().__init__(message)
        self.parser_type = parser_type
        self.region = region


class UnknownRegionError(CreationalError):
    """Raised when no parser family is registered for a region."""
    
    def __init__(self, message: str, region: Any = None):
        super().__init__(message)
        self.region = region


class SingletonConstructionError(CreationalError):
    """Raised when a singleton is constructed outside its accessor."""
    pass
