import logging
from typing import Any, Callable, Dict, Iterator, List, Type

from miraveja_installers.domain import IServiceCollection, Lifetime, ServiceDescriptor, against_none

logger = logging.getLogger(__name__)


class ServiceCollection(IServiceCollection):
    """Default append-only collection of service bindings.

    Installers populate it during bootstrap; the registry never reads or
    removes entries. Registering the same type twice keeps both bindings,
    the last one being the effective registration for consumers that
    resolve a single instance.

    Attributes:
        _descriptors: Bindings in registration order.
    """

    def __init__(self) -> None:
        """Initialize an empty collection."""
        self._descriptors: List[ServiceDescriptor] = []

    def add(self, descriptor: ServiceDescriptor) -> None:
        """Append a single service binding.

        Args:
            descriptor: The binding to append.

        Raises:
            ArgumentNullError: If descriptor is None.
        """
        self._descriptors.append(against_none(descriptor, "descriptor"))
        logger.debug(
            f"Registered {descriptor.lifetime.value} service: {descriptor.service_type.__name__}"
        )

    def _register_all(
        self,
        services: Dict[Type, Callable[[IServiceCollection], Any]],
        lifetime: Lifetime,
    ) -> None:
        for service_type, builder in against_none(services, "services").items():
            self.add(ServiceDescriptor(service_type=service_type, builder=builder, lifetime=lifetime))

    def register_singletons(self, services: Dict[Type, Callable[[IServiceCollection], Any]]) -> None:
        """Register multiple singleton services at once.

        Args:
            services: Dictionary mapping service types to builder functions.

        Example:
            >>> services.register_singletons({
            ...     DatabaseConfig: lambda s: DatabaseConfig.from_env(),
            ... })
        """
        self._register_all(services, Lifetime.SINGLETON)

    def register_scoped(self, services: Dict[Type, Callable[[IServiceCollection], Any]]) -> None:
        """Register multiple scoped services at once.

        Args:
            services: Dictionary mapping service types to builder functions.
        """
        self._register_all(services, Lifetime.SCOPED)

    def register_transients(self, services: Dict[Type, Callable[[IServiceCollection], Any]]) -> None:
        """Register multiple transient services at once.

        Args:
            services: Dictionary mapping service types to builder functions.
        """
        self._register_all(services, Lifetime.TRANSIENT)

    def get_descriptors(self, service_type: Type) -> List[ServiceDescriptor]:
        return [descriptor for descriptor in self._descriptors if descriptor.service_type is service_type]

    def __contains__(self, service_type: object) -> bool:
        return any(descriptor.service_type is service_type for descriptor in self._descriptors)

    def __iter__(self) -> Iterator[ServiceDescriptor]:
        return iter(list(self._descriptors))

    def __len__(self) -> int:
        return len(self._descriptors)
