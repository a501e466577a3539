"""
Director running the canonical build sequence.
"""

from ..core.interfaces import ICarBuilder
from ..core.logging_config import get_logger
from .car import Car

logger = get_logger(__name__)


class CarDirector:
    """Drives a builder through every step once, in canonical order."""
    
    def construct(self, builder: ICarBuilder) -> Car:
        """
        Build a complete car.
        
        Args:
            builder: Any object satisfying ICarBuilder
            
        Returns:
            The car returned by the builder after the last step
        """
        builder.build_body_style()
        builder.build_power()
        builder.build_engine()
        builder.build_brakes()
        builder.build_seats()
        builder.build_windows()
        builder.build_fuel_type()
        
        car = builder.get_car()
        logger.info(f"Constructed {car.style} with {type(builder).__name__}")
        return car
