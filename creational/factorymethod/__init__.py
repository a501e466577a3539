"""
Factory method: one fixed factory, varying product.
"""

from .factory import XMLParserFactory

__all__ = ['XMLParserFactory']
