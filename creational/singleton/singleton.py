"""
Lazily created, process-wide singleton.

The instance is created on the first call to ``get_instance`` and lives for
the rest of the process. First-time creation holds a lock, so concurrent
first calls still produce a single instance.
"""

import threading
from typing import Optional

from ..core.exceptions import SingletonConstructionError
from ..core.logging_config import get_logger

logger = get_logger(__name__)

_CONSTRUCTION_KEY = object()


class SingletonProtected:
    """
    Singleton whose construction is restricted to ``get_instance``.
    
    Example:
        first = SingletonProtected.get_instance()
        assert SingletonProtected.get_instance() is first
    """
    
    _instance: Optional['SingletonProtected'] = None
    _lock = threading.Lock()
    
    def __init__(self, _key: object = None):
        if _key is not _CONSTRUCTION_KEY:
            raise SingletonConstructionError(
                f"{self.__class__.__name__} must be obtained through get_instance()"
            )
    
    @classmethod
    def get_instance(cls) -> 'SingletonProtected':
        """
        Get the process-wide instance, creating it on first access.
        
        Returns:
            The single SingletonProtected instance
        """
        if cls._instance is None:
            with cls._lock:
                # Re-check: another thread may have created it while we waited
                if cls._instance is None:
                    cls._instance = cls(_CONSTRUCTION_KEY)
                    logger.debug(f"Created {cls.__name__} instance {id(cls._instance):#x}")
        return cls._instance
    
    @classmethod
    def reset_instance(cls):
        """Drop the current instance (useful for testing)."""
        with cls._lock:
            cls._instance = None
