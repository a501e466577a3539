"""
Car value object.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

# Attributes set by the builder steps, in canonical build order
CAR_ATTRIBUTES = (
    'body_style',
    'power',
    'engine',
    'brakes',
    'seats',
    'windows',
    'fuel_type',
)


@dataclass(frozen=True)
class Car:
    """
    Car specification.
    
    Every attribute except ``style`` stays None until the matching builder
    step has run. Instances are immutable; builders produce new snapshots.
    """
    
    style: str
    body_style: Optional[str] = None
    power: Optional[str] = None
    engine: Optional[str] = None
    brakes: Optional[str] = None
    seats: Optional[str] = None
    windows: Optional[str] = None
    fuel_type: Optional[str] = None
    
    def is_complete(self) -> bool:
        """Whether all seven builder steps have set their attribute."""
        return all(getattr(self, name) is not None for name in CAR_ATTRIBUTES)
    
    def missing_attributes(self):
        return [name for name in CAR_ATTRIBUTES if getattr(self, name) is None]
    
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
