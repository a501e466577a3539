"""
Family-bound parser factories.

A ParserFactory is a dispatch table from parser type to product class,
bound to one region. Selecting a family means selecting which factory
value to use; no class per family is needed.
"""

from typing import Dict, List, Mapping, Optional, Type

from ..core.exceptions import UnknownParserTypeError
from ..core.logging_config import get_logger
from ..parsers.products import (
    XMLParser,
    CLOrderXMLParser,
    CLFeedbackXMLParser,
    CLErrorXMLParser,
    NYOrderXMLParser,
    NYFeedbackXMLParser,
    NYErrorXMLParser,
)
from ..parsers.types import ParserType, Region

logger = get_logger(__name__)


class ParserFactory:
    """
    Factory producing the parsers of a single region.
    
    Satisfies the IParserFactory Protocol.
    """
    
    def __init__(self, region: Region, products: Mapping[ParserType, Type[XMLParser]]):
        """
        Initialize the factory with its dispatch table.
        
        Args:
            region: Region the products belong to
            products: Product class for each supported parser type
        """
        self.region = region
        self._products: Dict[ParserType, Type[XMLParser]] = dict(products)
    
    def get_parser(self, tag: str) -> Optional[XMLParser]:
        """
        Create the parser matching a raw type tag.
        
        Args:
            tag: Parser type tag ('ORDER', 'FEEDBACK', 'ERROR')
            
        Returns:
            A fresh parser instance, or None if the tag is unrecognized
        """
        result = ParserType.parse(tag)
        if result.is_failure():
            logger.warning(f"{self.region} factory: {result.get_error()}")
            return None
        
        product = self._products.get(result.get_value())
        if product is None:
            logger.warning(f"{self.region} factory has no parser for {tag!r}")
            return None
        
        return self._instantiate(product)
    
    def create(self, parser_type: ParserType) -> XMLParser:
        """
        Create the parser for an already parsed type.
        
        Args:
            parser_type: Parser type to create
            
        Returns:
            A fresh parser instance
            
        Raises:
            UnknownParserTypeError: If this family has no such parser
        """
        product = self._products.get(parser_type)
        if product is None:
            raise UnknownParserTypeError(
                f"No {parser_type} parser registered for region {self.region}",
                parser_type=parser_type,
                region=str(self.region),
            )
        return self._instantiate(product)
    
    def supported_types(self) -> List[ParserType]:
        """Parser types this factory can create."""
        return list(self._products)
    
    def _instantiate(self, product: Type[XMLParser]) -> XMLParser:
        parser = product()
        logger.debug(f"{self.region} factory created {product.__name__}")
        return parser
    
    def __repr__(self) -> str:
        types = ', '.join(t.value for t in self._products)
        return f"ParserFactory(region={self.region}, types=[{types}])"


CL_PRODUCTS: Dict[ParserType, Type[XMLParser]] = {
    ParserType.ORDER: CLOrderXMLParser,
    ParserType.FEEDBACK: CLFeedbackXMLParser,
    ParserType.ERROR: CLErrorXMLParser,
}

NY_PRODUCTS: Dict[ParserType, Type[XMLParser]] = {
    ParserType.ORDER: NYOrderXMLParser,
    ParserType.FEEDBACK: NYFeedbackXMLParser,
    ParserType.ERROR: NYErrorXMLParser,
}


def CLParserFactory() -> ParserFactory:
    """Factory for the CL parser family."""
    return ParserFactory(Region.CL, CL_PRODUCTS)


def NYParserFactory() -> ParserFactory:
    """Factory for the NY parser family."""
    return ParserFactory(Region.NY, NY_PRODUCTS)
