"""
Component registry for clustering algorithms and weighting functions.

Allows plug-and-play registration of new components.
"""

from typing import Dict, Any, Callable


class Registry:
    """
    Generic registry of named factories.

    Names are case-insensitive and stored lower-cased.

    Usage:
        registry = Registry("algorithms")
        registry.register("components", components_builder)
        builder = registry.create("Components", params=params)
    """

    def __init__(self, name: str):
        self.name = name
        self._factories: Dict[str, Callable] = {}

    def register(self, name: str, factory: Callable) -> Callable:
        """Register a factory under a name."""
        self._factories[name.lower()] = factory
        return factory

    def get(self, name: str) -> Callable:
        """Get a registered factory by name."""
        key = name.lower()
        if key in self._factories:
            return self._factories[key]
        raise KeyError(f"'{name}' not found in {self.name} registry. "
                       f"Available: {self.list()}")

    def create(self, name: str, **kwargs) -> Any:
        """Call the factory registered under a name."""
        return self.get(name)(**kwargs)

    def list(self) -> list:
        """List all registered component names."""
        return list(self._factories.keys())

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._factories


# Global registries
_registries: Dict[str, Registry] = {}


def get_registry(name: str) -> Registry:
    """Get or create a named registry."""
    if name not in _registries:
        _registries[name] = Registry(name)
    return _registries[name]
