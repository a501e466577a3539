"""
Enumerated tags for parser selection.

Raw string tags are parsed into these enums at the boundary. Parsing is
exact and case-sensitive, and reports unrecognized input through a failed
Result instead of raising.
"""

from enum import Enum
from typing import Any

from ..core.results import Result


class _TagEnum(Enum):
    """Enum whose members are looked up by their exact string value."""
    
    @classmethod
    def parse(cls, tag: Any) -> Result:
        """
        Parse a raw tag into an enum member.
        
        Args:
            tag: Raw tag, usually a string coming from a caller or the CLI
            
        Returns:
            Success result holding the member, or a failure result
        """
        if isinstance(tag, cls):
            return Result.success_result(tag)
        
        if not isinstance(tag, str):
            return Result.failure_result(
                f"{cls.__name__} tag must be a string, got {type(tag).__name__}"
            )
        
        for member in cls:
            if member.value == tag:
                return Result.success_result(member)
        
        return Result.failure_result(f"Unrecognized {cls.__name__} tag: {tag!r}")
    
    @classmethod
    def values(cls):
        return [member.value for member in cls]
    
    def __str__(self) -> str:
        return self.value


class ParserType(_TagEnum):
    """Kind of XML document a parser handles."""
    
    ORDER = 'ORDER'
    FEEDBACK = 'FEEDBACK'
    ERROR = 'ERROR'


class Region(_TagEnum):
    """Region a parser family belongs to."""
    
    CL = 'CL'
    NY = 'NY'
