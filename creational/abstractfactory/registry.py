"""
Registry of parser families.

Maps each region to its ParserFactory, so adding a family is a matter of
registering one more dispatch table.
"""

from typing import Any, Dict, List, Mapping, Optional, Type

from ..core.exceptions import UnknownRegionError
from ..core.logging_config import get_logger
from ..parsers.products import XMLParser
from ..parsers.types import ParserType, Region
from .factory import ParserFactory, CL_PRODUCTS, NY_PRODUCTS

logger = get_logger(__name__)


class ParserFactoryRegistry:
    """
    Registry of family-bound parser factories.
    
    Supports registering new regions or replacing the products of an
    existing one.
    """
    
    def __init__(self):
        """Initialize an empty registry."""
        self._factories: Dict[Region, ParserFactory] = {}
    
    def register(self, region: Region, products: Mapping[ParserType, Type[XMLParser]]) -> ParserFactory:
        """
        Register the product table of a region.
        
        Args:
            region: Region to register
            products: Product class for each supported parser type
            
        Returns:
            The factory created for the region
        """
        factory = ParserFactory(region, products)
        if region in self._factories:
            logger.info(f"Replacing parser family for region {region}")
        self._factories[region] = factory
        return factory
    
    def get_factory(self, region: Any) -> Optional[ParserFactory]:
        """
        Get the factory of a region.
        
        Args:
            region: Region member or raw region tag ('CL', 'NY')
            
        Returns:
            The region's factory, or None if the region is unknown
        """
        result = Region.parse(region)
        if result.is_failure():
            logger.warning(result.get_error())
            return None
        
        factory = self._factories.get(result.get_value())
        if factory is None:
            logger.warning(f"No parser family registered for region {region}")
        return factory
    
    def require_factory(self, region: Region) -> ParserFactory:
        """
        Get the factory of a region, raising if it is not registered.
        
        Raises:
            UnknownRegionError: If no family is registered for the region
        """
        factory = self._factories.get(region)
        if factory is None:
            raise UnknownRegionError(f"No parser family registered for region {region}", region=region)
        return factory
    
    def get_parser(self, region: Any, tag: str) -> Optional[XMLParser]:
        """
        Create a parser from raw region and type tags.
        
        Returns:
            A fresh parser instance, or None if either tag is unrecognized
        """
        factory = self.get_factory(region)
        if factory is None:
            return None
        return factory.get_parser(tag)
    
    def regions(self) -> List[Region]:
        """Regions with a registered family."""
        return list(self._factories)
    
    def clear(self):
        """Remove all registered families."""
        self._factories.clear()


def create_default_registry() -> ParserFactoryRegistry:
    """Build a registry holding the CL and NY families."""
    registry = ParserFactoryRegistry()
    registry.register(Region.CL, CL_PRODUCTS)
    registry.register(Region.NY, NY_PRODUCTS)
    return registry


# Global registry instance (can be replaced for testing)
_default_registry: Optional[ParserFactoryRegistry] = None


def get_registry() -> ParserFactoryRegistry:
    """Get the default registry instance."""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry


def set_registry(registry: Optional[ParserFactoryRegistry]):
    """Set the default registry instance (useful for testing)."""
    global _default_registry
    _default_registry = registry
