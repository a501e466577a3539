"""
Object-creation design patterns.

- abstractfactory: parser factories selected per region
- factorymethod: a fixed parser factory
- builder: step-by-step car specifications
- singleton: a lazily created process-wide instance
"""

__version__ = '1.0.0'
