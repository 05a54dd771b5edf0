"""Generic plugin factory base class.

Provides a registry of named implementation types. Subclasses specify the
protocol type, default type, and how to register defaults.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from ryandata_addressinput.models.errors import PACKAGE_NAME, RyanDataAddressError

T = TypeVar("T")


class PluginFactory(ABC, Generic[T]):
    """Generic factory for creating plugin instances from a registry.

    Subclasses should define:
        - _registry: Class-level dict mapping type names to implementation classes
        - _default_type: The default type name to use when none specified
        - _entity_name: Human-readable name for error messages (e.g., "region data source")
        - _ensure_defaults_registered(): Method to register default implementations
    """

    _registry: ClassVar[dict[str, type[Any]]]
    _default_type: ClassVar[str]
    _entity_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def _ensure_defaults_registered(cls) -> None:
        """Lazily register the default implementations."""
        ...

    @classmethod
    def register(cls, name: str, impl_class: type[T]) -> None:
        """Register an implementation type under a name."""
        cls._registry[name] = impl_class

    @classmethod
    def unregister(cls, name: str) -> None:
        """Unregister an implementation type."""
        cls._registry.pop(name, None)

    @classmethod
    def create(cls, name: str | None = None, **kwargs: Any) -> T:
        """Create an instance of the specified type.

        Args:
            name: Type name to create. If None, uses the default type.
            **kwargs: Arguments to pass to the constructor.

        Returns:
            Instance of the requested type.

        Raises:
            RyanDataAddressError: If the type name is not registered (a ValueError).
        """
        cls._ensure_defaults_registered()

        type_name = name if name is not None else cls._default_type

        if type_name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise RyanDataAddressError(
                "unknown_plugin",
                f"Unknown {cls._entity_name} type: {type_name}. Available types: {available}",
                {"package": PACKAGE_NAME, "value": type_name},
            )

        impl_class = cls._registry[type_name]
        return impl_class(**kwargs)  # type: ignore[no-any-return]

    @classmethod
    def available_types(cls) -> list[str]:
        """Get the sorted list of registered type names."""
        cls._ensure_defaults_registered()
        return sorted(cls._registry.keys())
