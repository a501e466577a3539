"""
Factory method for XML parsers.

A single fixed factory that dispatches straight to the generic parsers,
with no family-selection step.
"""

from typing import Dict, Optional, Type

from ..core.exceptions import UnknownParserTypeError
from ..core.logging_config import get_logger
from ..parsers.products import XMLParser, OrderXMLParser, FeedbackXMLParser, ErrorXMLParser
from ..parsers.types import ParserType

logger = get_logger(__name__)


class XMLParserFactory:
    """Creates generic XML parsers by type."""
    
    _products: Dict[ParserType, Type[XMLParser]] = {
        ParserType.ORDER: OrderXMLParser,
        ParserType.FEEDBACK: FeedbackXMLParser,
        ParserType.ERROR: ErrorXMLParser,
    }
    
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
            logger.warning(result.get_error())
            return None
        return self.create(result.get_value())
    
    def create(self, parser_type: ParserType) -> XMLParser:
        """
        Create the parser for an already parsed type.
        
        Raises:
            UnknownParserTypeError: If parser_type is not a ParserType
        """
        product = self._products.get(parser_type)
        if product is None:
            raise UnknownParserTypeError(f"No parser for type {parser_type!r}", parser_type=parser_type)
        logger.debug(f"Created {product.__name__}")
        return product()
