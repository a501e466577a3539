"""
Application settings and configuration.

Centralizes all configurable values.
"""

import os
from typing import Optional, Dict, Any
from dotenv import load_dotenv

from ..core.logging_config import DEFAULT_FORMAT

# Load environment variables
load_dotenv()

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class Settings:
    """
    Application settings.
    
    Values are read from the environment (and a local .env file, if any)
    when the object is created.
    """
    
    def __init__(self):
        """Initialize settings from environment and defaults."""
        # Logging Settings
        self.log_level = os.getenv('LOG_LEVEL', 'INFO')
        self.log_format = os.getenv('LOG_FORMAT', DEFAULT_FORMAT)
        self.log_file = os.getenv('LOG_FILE') or None
        
        # Factory Settings
        self.default_region = os.getenv('DEFAULT_REGION', 'NY')
    
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.
        
        Args:
            key: Configuration key (supports dot notation)
            default: Default value if not found
            
        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self
        
        for k in keys:
            if hasattr(value, k):
                value = getattr(value, k)
            else:
                return default
        
        return value if value is not None else default
    
    def validate(self) -> bool:
        """
        Validate that settings hold recognized values.
        
        Returns:
            True if valid, False otherwise
        """
        # Imported here: parsers.types has no dependency on config
        from ..parsers.types import Region
        
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            return False
        
        if Region.parse(self.default_region).is_failure():
            return False
        
        return True
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            'log_level': self.log_level,
            'log_format': self.log_format,
            'log_file': self.log_file,
            'default_region': self.default_region,
        }


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Optional[Settings]):
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
