"""
Tests for the command-line interface.
"""

import json
import pytest
from unittest.mock import patch
from creational import cli
from creational.config.settings import Settings, set_settings


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch('creational.cli.setup_logging') as setup:
        yield setup


class TestCli:
    """Test CLI commands."""
    
    def test_parser_with_region(self, capsys):
        assert cli.main(['parser', '--type', 'ORDER', '--region', 'CL']) == 0
        
        assert capsys.readouterr().out.strip() == 'CLOrderXMLParser'
    
    def test_parser_default_region(self, capsys, monkeypatch):
        monkeypatch.setenv('DEFAULT_REGION', 'NY')
        set_settings(Settings())
        
        assert cli.main(['parser', '--type', 'ERROR']) == 0
        assert capsys.readouterr().out.strip() == 'NYErrorXMLParser'
    
    def test_parser_factory_method(self, capsys):
        assert cli.main(['parser', '--type', 'FEEDBACK', '--method']) == 0
        
        assert capsys.readouterr().out.strip() == 'FeedbackXMLParser'
    
    def test_parser_unknown_type(self, capsys):
        assert cli.main(['parser', '--type', 'UNKNOWN', '--region', 'CL']) == 1
        
        assert capsys.readouterr().out == ''
    
    def test_parser_unknown_region(self):
        assert cli.main(['parser', '--type', 'ORDER', '--region', 'LA']) == 1
    
    def test_car(self, capsys):
        assert cli.main(['car']) == 0
        
        data = json.loads(capsys.readouterr().out)
        assert data['style'] == 'Sedan'
        assert data['engine'] == '3.5L Duramax V 6 DOHC'
    
    def test_singleton(self, capsys):
        assert cli.main(['singleton']) == 0
        
        assert capsys.readouterr().out.startswith('SingletonProtected 0x')
    
    def test_log_level_override(self, no_logging_setup):
        cli.main(['--log-level', 'DEBUG', 'car'])
        
        assert no_logging_setup.call_args.kwargs['level'] == 'DEBUG'
    
    def test_missing_command(self):
        with pytest.raises(SystemExit):
            cli.main([])
