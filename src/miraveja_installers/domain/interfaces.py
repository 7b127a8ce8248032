from abc import ABC, abstractmethod
from types import ModuleType
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Type

from miraveja_installers.domain.models import CreationResult, ErrorCallback, ServiceDescriptor


class IServiceCollection(ABC):
    """Abstract interface for the shared, append-only collection of service bindings."""

    @abstractmethod
    def add(self, descriptor: ServiceDescriptor) -> None:
        """Append a single service binding.

        Args:
            descriptor: The binding to append.
        """

    @abstractmethod
    def register_singletons(self, services: Dict[Type, Callable[["IServiceCollection"], Any]]) -> None:
        """Register multiple singleton services at once.

        Args:
            services: A dictionary mapping types to their builder functions.
        """

    @abstractmethod
    def register_scoped(self, services: Dict[Type, Callable[["IServiceCollection"], Any]]) -> None:
        """Register multiple scoped services at once.

        Args:
            services: A dictionary mapping types to their builder functions.
        """

    @abstractmethod
    def register_transients(self, services: Dict[Type, Callable[["IServiceCollection"], Any]]) -> None:
        """Register multiple transient services at once.

        Args:
            services: A dictionary mapping types to their builder functions.
        """

    @abstractmethod
    def get_descriptors(self, service_type: Type) -> List[ServiceDescriptor]:
        """Return every binding registered for ``service_type``, in registration order."""

    @abstractmethod
    def __iter__(self) -> Iterator[ServiceDescriptor]:
        """Iterate over all bindings in registration order."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of bindings registered."""


class IServiceInstaller(ABC):
    """Contract for modular service registration.

    Concrete subclasses with a parameterless constructor are discovered and
    invoked automatically by the installer registry.
    """

    @abstractmethod
    def install(self, services: IServiceCollection, configuration: Mapping[str, Any]) -> None:
        """Register this module's services into the shared collection.

        Args:
            services: The shared service collection.
            configuration: Read-only application configuration.
        """


class IInstallerTypeFilter(ABC):
    """Abstract interface deciding whether a class is a legal installer."""

    @abstractmethod
    def is_valid_installer(self, installer_type: Type) -> bool:
        """Check whether a class is a valid installer.

        Args:
            installer_type: The class to check.

        Returns:
            True if the class should be instantiated and invoked.
        """


class IInstallerDiscovery(ABC):
    """Abstract interface for finding installer classes in a code unit."""

    @abstractmethod
    def discover_installers(
        self,
        code_unit: ModuleType,
        type_filter: Optional[IInstallerTypeFilter] = None,
    ) -> Iterable[Type]:
        """Find all installer classes declared in a module or package.

        Args:
            code_unit: The module or package to scan.
            type_filter: Optional filter; a default filter is used when omitted.

        Returns:
            Lazy iterable of installer classes in declaration order.
        """


class IInstallerCreationStrategy(ABC):
    """Abstract interface for instantiating installer classes."""

    @abstractmethod
    def attempt(self, installer_type: Type) -> CreationResult:
        """Try to instantiate ``installer_type`` and describe the outcome.

        Args:
            installer_type: The installer class.

        Returns:
            A successful or failed CreationResult.

        Raises:
            InstallerContractError: If the created object is not an installer.
        """

    def try_create(
        self,
        installer_type: Type,
        on_error: Optional[ErrorCallback] = None,
    ) -> Optional[IServiceInstaller]:
        """Create an installer instance or report why it could not be created.

        Args:
            installer_type: The installer class.
            on_error: Callback receiving ``(installer_type, error)`` on a recoverable failure.

        Returns:
            The installer instance, or None if creation failed.
        """
        result = self.attempt(installer_type)
        if result.succeeded:
            return result.instance
        if on_error is not None:
            on_error(installer_type, result.error)
        return None
