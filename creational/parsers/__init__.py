"""
Parser products and the tags used to select them.
"""

from .types import ParserType, Region
from .products import (
    XMLParser,
    OrderXMLParser,
    FeedbackXMLParser,
    ErrorXMLParser,
    CLOrderXMLParser,
    CLFeedbackXMLParser,
    CLErrorXMLParser,
    NYOrderXMLParser,
    NYFeedbackXMLParser,
    NYErrorXMLParser,
)

__all__ = [
    'ParserType',
    'Region',
    'XMLParser',
    'OrderXMLParser',
    'FeedbackXMLParser',
    'ErrorXMLParser',
    'CLOrderXMLParser',
    'CLFeedbackXMLParser',
    'CLErrorXMLParser',
    'NYOrderXMLParser',
    'NYFeedbackXMLParser',
    'NYErrorXMLParser',
]
