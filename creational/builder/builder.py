"""
Car builders.

A builder exposes one step per car attribute plus ``get_car``. Each step
overwrites exactly one attribute, so steps are idempotent and may run in
any order; no completeness check is made before the car is returned.
"""

from abc import ABC, abstractmethod
from dataclasses import replace

from ..core.logging_config import get_logger
from .car import Car


class CarBuilder(ABC):
    """
    Abstract base class for car builders.
    
    Subclasses decide the values; this class holds the in-progress car and
    hands out immutable snapshots of it.
    """
    
    style: str = ''
    
    def __init__(self):
        self._car = Car(self.style)
        self.logger = get_logger(self.__class__.__name__)
    
    def _set(self, attribute: str, value: str) -> None:
        self._car = replace(self._car, **{attribute: value})
        self.logger.debug(f"Set {attribute} on {self._car.style}")
    
    @abstractmethod
    def build_body_style(self) -> None:
        pass
    
    @abstractmethod
    def build_power(self) -> None:
        pass
    
    @abstractmethod
    def build_engine(self) -> None:
        pass
    
    @abstractmethod
    def build_brakes(self) -> None:
        pass
    
    @abstractmethod
    def build_seats(self) -> None:
        pass
    
    @abstractmethod
    def build_windows(self) -> None:
        pass
    
    @abstractmethod
    def build_fuel_type(self) -> None:
        pass
    
    def get_car(self) -> Car:
        """
        Return the car built so far.
        
        The returned value is an immutable snapshot: steps run after this
        call do not change it.
        
        Returns:
            Car, possibly with attributes still unset
        """
        return self._car


class SedanCarBuilder(CarBuilder):
    """Builds the specification of a mid-size sedan."""
    
    style = 'Sedan'
    
    BODY_STYLE = (
        'External dimensions: overall length (inches): 202.9, overall width (inches): 76.2, '
        'overall height (inches): 60.7, wheelbase (inches): 112.9, front track (inches): 65.3, '
        'rear track (inches): 65.5 and curb to curb turning circle (feet): 39.5'
    )
    POWER = '285 hp @ 6,500 rpm; 253 ft lb of torque @ 4,000 rpm'
    ENGINE = '3.5L Duramax V 6 DOHC'
    BRAKES = 'Breaks: Four-wheel disc brakes: two ventilated. Electronic brake distribution'
    SEATS = 'Front seat center armrest.Rear seat center armrest.Split-folding rear seats'
    WINDOWS = 'Laminated side windows.Fixed rear window with defroster'
    FUEL_TYPE = 'Gasoline 19 MPG city, 29 MPG highway, 23 MPG combined and 437 mi. range'
    
    def build_body_style(self) -> None:
        self._set('body_style', self.BODY_STYLE)
    
    def build_power(self) -> None:
        self._set('power', self.POWER)
    
    def build_engine(self) -> None:
        self._set('engine', self.ENGINE)
    
    def build_brakes(self) -> None:
        self._set('brakes', self.BRAKES)
    
    def build_seats(self) -> None:
        self._set('seats', self.SEATS)
    
    def build_windows(self) -> None:
        self._set('windows', self.WINDOWS)
    
    def build_fuel_type(self) -> None:
        self._set('fuel_type', self.FUEL_TYPE)
