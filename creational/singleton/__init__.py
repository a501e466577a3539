"""
Singleton: a single lazily created instance per process.
"""

from .singleton import SingletonProtected

__all__ = ['SingletonProtected']
