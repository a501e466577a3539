"""
Shared pytest fixtures.

Resets the process-wide accessors so every test starts from defaults.
"""

import pytest

from creational.abstractfactory.registry import set_registry
from creational.config.settings import set_settings
from creational.singleton.singleton import SingletonProtected


@pytest.fixture(autouse=True)
def reset_globals():
    set_settings(None)
    set_registry(None)
    SingletonProtected.reset_instance()
    yield
    set_settings(None)
    set_registry(None)
    SingletonProtected.reset_instance()
