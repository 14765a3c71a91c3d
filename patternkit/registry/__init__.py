"""
Registries - Singleton and Registry Pattern implementations.
"""

from .instance_registry import InstanceRegistry, singleton
from .factory_registry import (
    FactoryRegistry,
    build_default_registry,
    get_registry,
    get_factory,
    reset_registry,
)

__all__ = [
    'InstanceRegistry',
    'singleton',
    'FactoryRegistry',
    'build_default_registry',
    'get_registry',
    'get_factory',
    'reset_registry',
]
