"""
XML parser products.

The parsers are placeholders: they carry their (region, type) identity but
do not read any XML. The generic parsers are produced by the factory
method; the regional parsers are produced by the abstract factory.
"""

from abc import ABC
from typing import Optional

from .types import ParserType, Region


class XMLParser(ABC):
    """
    Base class for all XML parsers.
    
    Subclasses set ``parser_type`` and, for regional variants, ``region``.
    """
    
    parser_type: ParserType
    region: Optional[Region] = None
    
    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if not getattr(cls, 'parser_type', None):
            raise TypeError(f"{cls.__name__} must define parser_type")
    
    def __repr__(self) -> str:
        region = self.region.value if self.region else '-'
        return f"{self.__class__.__name__}(region={region}, type={self.parser_type.value})"


# Generic parsers (factory method)

class OrderXMLParser(XMLParser):
    parser_type = ParserType.ORDER


class FeedbackXMLParser(XMLParser):
    parser_type = ParserType.FEEDBACK


class ErrorXMLParser(XMLParser):
    parser_type = ParserType.ERROR


# CL family (abstract factory)

class CLOrderXMLParser(XMLParser):
    parser_type = ParserType.ORDER
    region = Region.CL


class CLFeedbackXMLParser(XMLParser):
    parser_type = ParserType.FEEDBACK
    region = Region.CL


class CLErrorXMLParser(XMLParser):
    parser_type = ParserType.ERROR
    region = Region.CL


# NY family (abstract factory)

class NYOrderXMLParser(XMLParser):
    parser_type = ParserType.ORDER
    region = Region.NY


class NYFeedbackXMLParser(XMLParser):
    parser_type = ParserType.FEEDBACK
    region = Region.NY


class NYErrorXMLParser(XMLParser):
    parser_type = ParserType.ERROR
    region = Region.NY
