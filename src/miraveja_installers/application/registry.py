import logging
from types import ModuleType
from typing import Any, Iterable, Mapping, Optional, Type

from miraveja_installers.application.factory import InstallerFactory
from miraveja_installers.application.type_filters import ConfigurableInstallerTypeFilter
from miraveja_installers.domain import (
    ErrorCallback,
    IInstallerDiscovery,
    IInstallerTypeFilter,
    InstallerOptions,
    IServiceCollection,
    IServiceInstaller,
    against_none,
)

logger = logging.getLogger(__name__)


class InstallerRegistry:
    """Orchestrates discovery, creation and invocation of installers.

    Installers are invoked one at a time, in discovery order. A failure raised
    by an installer's own ``install`` is not caught and aborts the remaining
    installers.

    Attributes:
        _discovery: Component finding installer classes in a code unit.
        _factory: Component turning classes into installer instances.
    """

    def __init__(self, discovery: IInstallerDiscovery, factory: InstallerFactory) -> None:
        """Initialize the registry.

        Args:
            discovery: Component finding installer classes in a code unit.
            factory: Component turning classes into installer instances.

        Raises:
            ArgumentNullError: If discovery or factory is None.
        """
        self._discovery = against_none(discovery, "discovery")
        self._factory = against_none(factory, "factory")

    def register_installers(
        self,
        services: IServiceCollection,
        configuration: Mapping[str, Any],
        code_unit: ModuleType,
        options: Optional[InstallerOptions] = None,
    ) -> int:
        """Discover every installer in ``code_unit`` and invoke it.

        Args:
            services: The shared service collection passed to each installer.
            configuration: Read-only configuration passed to each installer.
            code_unit: The module or package to scan.
            options: Registration options; defaults to InstallerOptions().

        Returns:
            Number of installers invoked.

        Raises:
            ArgumentNullError: If services, configuration or code_unit is None.

        Example:
            >>> registry = InstallerRegistry(ModuleInstallerDiscovery(), InstallerFactory(strategy))
            >>> registry.register_installers(services, {"db": {"url": "sqlite://"}}, myapp)
            3
        """
        against_none(services, "services")
        against_none(configuration, "configuration")
        against_none(code_unit, "code_unit")
        if options is None:
            options = InstallerOptions()

        installers = self._resolve_installers(code_unit, options)
        count = _install_all(installers, services, configuration)
        logger.info(f"Invoked {count} installer(s) from {code_unit.__name__}")
        return count

    def _resolve_installers(self, code_unit: ModuleType, options: InstallerOptions) -> Iterable[IServiceInstaller]:
        type_filter = _create_type_filter(options)
        installer_types = self._discovery.discover_installers(code_unit, type_filter)
        on_error = _create_error_handler(options)
        return self._factory.create_installers(installer_types, on_error)


def _install_all(
    installers: Iterable[IServiceInstaller],
    services: IServiceCollection,
    configuration: Mapping[str, Any],
) -> int:
    count = 0
    for installer in installers:
        logger.debug(f"Installing services from {type(installer).__name__}")
        installer.install(services, configuration)
        count += 1
    return count


def _create_error_handler(options: InstallerOptions) -> Optional[ErrorCallback]:
    if options.on_error is not None:
        return options.on_error
    if options.log_errors:
        return _log_creation_failure
    return None


def _log_creation_failure(installer_type: Type, error: Exception) -> None:
    logger.warning(f"Skipped installer {installer_type.__module__}.{installer_type.__name__}: {error}")


def _create_type_filter(options: InstallerOptions) -> Optional[IInstallerTypeFilter]:
    if not options.has_exclusions:
        return None
    return ConfigurableInstallerTypeFilter(options)
