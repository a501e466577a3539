"""
Tests for the lazily created singleton.
"""

import threading
import pytest
from unittest.mock import patch
from creational.core.exceptions import SingletonConstructionError
from creational.singleton import SingletonProtected


class TestSingletonProtected:
    """Test SingletonProtected accessor."""
    
    def test_same_instance(self):
        """Test sequential calls return the same object."""
        first = SingletonProtected.get_instance()
        second = SingletonProtected.get_instance()
        
        assert first is second
    
    def test_created_lazily_once(self):
        """Test the instance is created on first access only."""
        assert SingletonProtected._instance is None
        
        with patch.object(SingletonProtected, '__init__', autospec=True, return_value=None) as init:
            SingletonProtected.get_instance()
            SingletonProtected.get_instance()
            SingletonProtected.get_instance()
        
        assert init.call_count == 1
    
    def test_direct_construction_rejected(self):
        with pytest.raises(SingletonConstructionError):
            SingletonProtected()
    
    def test_reset_instance(self):
        first = SingletonProtected.get_instance()
        SingletonProtected.reset_instance()
        
        assert SingletonProtected.get_instance() is not first
    
    def test_concurrent_first_access(self):
        """Test threads racing on first access all see one instance."""
        barrier = threading.Barrier(8)
        seen = []
        
        def worker():
            barrier.wait()
            seen.append(SingletonProtected.get_instance())
        
        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        
        assert len(seen) == 8
        assert all(instance is seen[0] for instance in seen)
