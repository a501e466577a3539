"""
Interface definitions using Python Protocols.

This module defines the structural contracts shared by the creational
patterns. Protocols allow any object with the right methods to stand in for
a factory or a builder without inheriting from a common base class.

Example usage:
    class StaticFactory:
        def get_parser(self, tag: str):
            return OrderXMLParser() if tag == 'ORDER' else None
    
    # StaticFactory automatically satisfies IParserFactory
    factory: IParserFactory = StaticFactory()
"""

from typing import Protocol, Any, Optional, runtime_checkable


@runtime_checkable
class IParserFactory(Protocol):
    """
    Protocol defining the contract for parser factories.
    
    Both the family-bound factories of the abstract factory and the fixed
    factory of the factory method satisfy this Protocol, so callers can be
    written against either one.
    
    Implementations:
    - ParserFactory: one instance per region (CL, NY, ...)
    - XMLParserFactory: the fixed, region-less factory
    """
    
    def get_parser(self, tag: str) -> Optional[Any]:
        """
        Create the parser matching a raw type tag.
        
        Args:
            tag: Parser type tag, matched exactly and case-sensitively
            
        Returns:
            A fresh parser instance, or None if the tag is unrecognized
            
        Raises:
            No exceptions should be raised. Unknown tags return None.
        """
        ...


@runtime_checkable
class ICarBuilder(Protocol):
    """Protocol for step-by-step car builders."""
    
    def build_body_style(self) -> None: ...
    
    def build_power(self) -> None: ...
    
    def build_engine(self) -> None: ...
    
    def build_brakes(self) -> None: ...
    
    def build_seats(self) -> None: ...
    
    def build_windows(self) -> None: ...
    
    def build_fuel_type(self) -> None: ...
    
    def get_car(self) -> Any:
        """Return the car assembled so far."""
        ...
