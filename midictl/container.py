"""A small dependency-injection container keyed by type (or any hashable key)."""

from __future__ import annotations

from typing import Any, Callable, Hashable


class DependencyContainer:
    """Holds shared instances and lazy factories, looked up by key.

    Keys are usually classes, so that ``resolve(SomeClass)`` returns the
    instance registered for that class.
    """

    def __init__(self) -> None:
        self._instances: dict[Hashable, Any] = {}
        self._factories: dict[Hashable, Callable[[], Any]] = {}

    def register(self, key: Hashable, instance: Any) -> None:
        """Register ``instance`` under ``key``, replacing any previous one."""
        self._instances[key] = instance

    def register_implementation(self, interface: type, instance: Any) -> None:
        """Register ``instance`` as the implementation of ``interface``.

        Raises TypeError if the instance does not implement the interface.
        """
        if not isinstance(interface, type):
            raise TypeError(f"interface must be a class, got {interface!r}")
        if not isinstance(instance, interface):
            raise TypeError(
                f"{type(instance).__name__} does not implement {interface.__name__}"
            )
        self._instances[interface] = instance

    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        """Register a factory called on first resolution of ``key``."""
        if not callable(factory):
            raise TypeError("factory must be callable")
        self._factories[key] = factory

    def resolve(self, key: Hashable) -> Any | None:
        """Return the instance for ``key``, or None if nothing is registered.

        An instance built by a factory is cached as a registered instance.
        """
        if key in self._instances:
            return self._instances[key]
        factory = self._factories.get(key)
        if factory is None:
            return None
        instance = factory()
        self.register(key, instance)
        return instance

    def has(self, key: Hashable) -> bool:
        """Whether an instance or a factory is registered for ``key``."""
        return key in self._instances or key in self._factories

    def remove(self, key: Hashable) -> bool:
        """Remove the instance and factory for ``key``; True if any was removed."""
        removed_instance = self._instances.pop(key, _MISSING) is not _MISSING
        removed_factory = self._factories.pop(key, _MISSING) is not _MISSING
        return removed_instance or removed_factory

    def clear(self) -> None:
        """Remove every registered instance and factory."""
        self._instances.clear()
        self._factories.clear()


_MISSING = object()