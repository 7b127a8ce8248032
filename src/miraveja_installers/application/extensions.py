"""Public entry points for installing services from a code unit."""

import importlib
import sys
from types import ModuleType
from typing import Any, Mapping, Optional

from miraveja_installers.application.creation_strategy import DefaultConstructorCreationStrategy
from miraveja_installers.application.discovery import ModuleInstallerDiscovery
from miraveja_installers.application.factory import InstallerFactory
from miraveja_installers.application.registry import InstallerRegistry
from miraveja_installers.domain import (
    IInstallerCreationStrategy,
    IInstallerDiscovery,
    InstallerOptions,
    IServiceCollection,
    against_none,
)


def resolve_code_unit(marker: Any) -> ModuleType:
    """Return the top-level package containing ``marker``.

    Scanning the returned package imports every one of its submodules
    (``__main__`` modules excepted), not only the marker's own module.

    Args:
        marker: A class, function or module living in the code unit.

    Returns:
        The top-level module or package of the marker's module path.

    Raises:
        ArgumentNullError: If marker is None.
        ModuleNotFoundError: If the marker's package cannot be imported.

    Example:
        >>> from myapp.web.installers import WebInstaller
        >>> resolve_code_unit(WebInstaller).__name__
        'myapp'
    """
    against_none(marker, "marker")
    module_name = marker.__name__ if isinstance(marker, ModuleType) else marker.__module__
    root_name = module_name.partition(".")[0]
    if root_name in sys.modules:
        return sys.modules[root_name]
    return importlib.import_module(root_name)


def install_services_from_unit(
    code_unit: ModuleType,
    services: IServiceCollection,
    configuration: Mapping[str, Any],
    options: Optional[InstallerOptions] = None,
) -> IServiceCollection:
    """Install services from every installer declared in ``code_unit``.

    Args:
        code_unit: The module or package to scan.
        services: The shared service collection.
        configuration: Read-only configuration passed to installers.
        options: Registration options.

    Returns:
        ``services``, for chaining.
    """
    against_none(services, "services")
    against_none(configuration, "configuration")
    registry = _create_registry()
    registry.register_installers(services, configuration, code_unit, options)
    return services


def install_services_from_unit_containing(
    marker: Any,
    services: IServiceCollection,
    configuration: Mapping[str, Any],
    options: Optional[InstallerOptions] = None,
) -> IServiceCollection:
    """Install services from every installer in the package containing ``marker``.

    Uses module discovery and parameterless-constructor creation.

    Args:
        marker: A class, function or module living in the code unit.
        services: The shared service collection.
        configuration: Read-only configuration passed to installers.
        options: Registration options.

    Returns:
        ``services``, for chaining.

    Example:
        >>> services = ServiceCollection()
        >>> install_services_from_unit_containing(Application, services, settings)
    """
    against_none(services, "services")
    against_none(configuration, "configuration")
    return install_services_from_unit(resolve_code_unit(marker), services, configuration, options)


def install_services_from_unit_containing_using(
    marker: Any,
    services: IServiceCollection,
    configuration: Mapping[str, Any],
    discovery: IInstallerDiscovery,
    strategy: IInstallerCreationStrategy,
    options: Optional[InstallerOptions] = None,
) -> IServiceCollection:
    """Install services from the package containing ``marker`` with custom strategies.

    Args:
        marker: A class, function or module living in the code unit.
        services: The shared service collection.
        configuration: Read-only configuration passed to installers.
        discovery: Component finding installer classes.
        strategy: Component instantiating installer classes.
        options: Registration options.

    Returns:
        ``services``, for chaining.

    Raises:
        ArgumentNullError: If any required argument is None.
    """
    against_none(services, "services")
    against_none(configuration, "configuration")
    against_none(discovery, "discovery")
    against_none(strategy, "strategy")
    registry = _create_registry(discovery, strategy)
    registry.register_installers(services, configuration, resolve_code_unit(marker), options)
    return services


def _create_registry(
    discovery: Optional[IInstallerDiscovery] = None,
    strategy: Optional[IInstallerCreationStrategy] = None,
) -> InstallerRegistry:
    actual_discovery = discovery or ModuleInstallerDiscovery()
    actual_strategy = strategy or DefaultConstructorCreationStrategy()
    return InstallerRegistry(actual_discovery, InstallerFactory(actual_strategy))
