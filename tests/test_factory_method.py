"""
Tests for the factory method.
"""

import pytest
from creational.core.exceptions import UnknownParserTypeError
from creational.core.interfaces import IParserFactory
from creational.factorymethod import XMLParserFactory
from creational.parsers import (
    ParserType,
    OrderXMLParser,
    FeedbackXMLParser,
    ErrorXMLParser,
)


class TestXMLParserFactory:
    """Test the fixed XML parser factory."""
    
    def setup_method(self):
        """Set up test fixtures."""
        self.factory = XMLParserFactory()
    
    @pytest.mark.parametrize('tag,expected', [
        ('ORDER', OrderXMLParser),
        ('FEEDBACK', FeedbackXMLParser),
        ('ERROR', ErrorXMLParser),
    ])
    def test_get_parser(self, tag, expected):
        parser = self.factory.get_parser(tag)
        
        assert type(parser) is expected
        assert parser.region is None
    
    @pytest.mark.parametrize('tag', ['UNKNOWN', '', 'Feedback'])
    def test_get_parser_unknown_tag_returns_none(self, tag):
        assert self.factory.get_parser(tag) is None
    
    def test_fresh_instances(self):
        assert self.factory.get_parser('ERROR') is not self.factory.get_parser('ERROR')
    
    def test_create(self):
        assert isinstance(self.factory.create(ParserType.ORDER), OrderXMLParser)
    
    def test_create_rejects_raw_string(self):
        """Test the typed path only accepts parsed types."""
        with pytest.raises(UnknownParserTypeError):
            self.factory.create('ORDER')
    
    def test_repr(self):
        assert repr(self.factory.get_parser('ORDER')) == 'OrderXMLParser(region=-, type=ORDER)'
    
    def test_satisfies_protocol(self):
        assert isinstance(self.factory, IParserFactory)
