"""
Tests for parser type and region tags.
"""

import pytest
from creational.parsers.types import ParserType, Region
from creational.core.results import Result


class TestParserTypeParse:
    """Test boundary parsing of raw type tags."""
    
    @pytest.mark.parametrize('tag', ['ORDER', 'FEEDBACK', 'ERROR'])
    def test_recognized_tags(self, tag):
        """Test every recognized tag parses to its member."""
        result = ParserType.parse(tag)
        
        assert result.is_success()
        assert result.get_value() is ParserType[tag]
    
    @pytest.mark.parametrize('tag', ['UNKNOWN', '', 'order', ' ORDER', 'Error'])
    def test_unrecognized_tags(self, tag):
        """Test unknown or differently cased tags fail without raising."""
        result = ParserType.parse(tag)
        
        assert result.is_failure()
        assert 'Unrecognized ParserType tag' in result.get_error()
    
    def test_non_string_tag(self):
        """Test non-string input is rejected."""
        result = ParserType.parse(None)
        
        assert result.is_failure()
        assert 'must be a string' in result.get_error()
    
    def test_member_passes_through(self):
        """Test an enum member parses to itself."""
        assert ParserType.parse(ParserType.ERROR).get_value() is ParserType.ERROR
    
    def test_values(self):
        assert ParserType.values() == ['ORDER', 'FEEDBACK', 'ERROR']
        assert str(ParserType.FEEDBACK) == 'FEEDBACK'


class TestRegionParse:
    """Test boundary parsing of raw region tags."""
    
    def test_recognized_regions(self):
        assert Region.parse('CL').get_value() is Region.CL
        assert Region.parse('NY').get_value() is Region.NY
    
    def test_unrecognized_region(self):
        result = Region.parse('LA')
        
        assert result.is_failure()
        assert result.get_value_or() is None


class TestResult:
    """Test Result objects."""
    
    def test_result_success(self):
        """Test success result."""
        result = Result.success_result("test_value")
        
        assert result.is_success()
        assert result.get_value() == "test_value"
        assert result.get_error() is None
    
    def test_result_failure(self):
        """Test failure result."""
        result = Result.failure_result("test_error")
        
        assert result.is_failure()
        assert result.get_error() == "test_error"
        assert result.get_value_or("fallback") == "fallback"
        
        with pytest.raises(ValueError):
            result.get_value()
