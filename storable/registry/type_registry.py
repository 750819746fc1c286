"""Explicit storable type registry resolved at startup."""

from __future__ import annotations

from collections.abc import Callable

from storable.domain import DuplicateStorableTypeError, StorableObjectPort, UnknownStorableTypeError

StorableFactory = Callable[[], StorableObjectPort]


class StorableTypeRegistry:
    """Map storable type names to zero-argument factories.

    Types are registered once during startup wiring and only read afterwards.
    """

    def __init__(self) -> None:
        self._factories: dict[str, StorableFactory] = {}

    def registry_register(self, type_name: str, factory: StorableFactory) -> None:
        """Register one factory under a unique type name.

        Args:
            type_name: Non-blank type identifier.
            factory: Zero-argument callable returning a new storable instance.

        Returns:
            None: Factory is stored as side effect.

        Raises:
            ValueError: Raised when type_name is blank.
            DuplicateStorableTypeError: Raised when type_name is already registered.
        """

        normalized_type_name = type_name.strip()
        if not normalized_type_name:
            raise ValueError("type_name must not be blank")
        if normalized_type_name in self._factories:
            raise DuplicateStorableTypeError(f"Storable type already registered. type={normalized_type_name}")
        self._factories[normalized_type_name] = factory

    def registry_register_class(self, storable_class: type) -> type:
        """Register a storable class under its own class name.

        Usable as a decorator on `StorableObject` subclasses.

        Args:
            storable_class: Class constructible with no arguments.

        Returns:
            type: The same class, unchanged.

        Raises:
            DuplicateStorableTypeError: Raised when the class name is already registered.
        """

        self.registry_register(storable_class.__name__, storable_class)
        return storable_class

    def registry_create(self, type_name: str) -> StorableObjectPort:
        """Create a new instance of one registered type with no constructor arguments.

        Args:
            type_name: Registered type identifier.

        Returns:
            StorableObjectPort: Fresh storable instance.

        Raises:
            UnknownStorableTypeError: Raised when type_name is not registered.
        """

        factory = self._factories.get(type_name)
        if factory is None:
            raise UnknownStorableTypeError(
                f"Storable type is not registered. type={type_name}",
                type_name=type_name,
            )
        return factory()

    def registry_has(self, type_name: str) -> bool:
        return type_name in self._factories

    def registry_type_names(self) -> tuple[str, ...]:
        return tuple(sorted(self._factories))

    def __len__(self) -> int:
        return len(self._factories)
