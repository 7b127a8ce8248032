"""
Application layer - Discovery, creation and registration pipeline.

This layer contains the components that find, instantiate and invoke
installers. It depends only on the Domain layer.
"""

from .creation_strategy import DefaultConstructorCreationStrategy
from .discovery import ModuleInstallerDiscovery, iter_declared_types
from .extensions import (
    install_services_from_unit,
    install_services_from_unit_containing,
    install_services_from_unit_containing_using,
    resolve_code_unit,
)
from .factory import InstallerFactory
from .registry import InstallerRegistry
from .service_collection import ServiceCollection
from .type_filters import ConfigurableInstallerTypeFilter, DefaultInstallerTypeFilter

__all__ = [
    "ServiceCollection",
    "DefaultInstallerTypeFilter",
    "ConfigurableInstallerTypeFilter",
    "ModuleInstallerDiscovery",
    "iter_declared_types",
    "DefaultConstructorCreationStrategy",
    "InstallerFactory",
    "InstallerRegistry",
    "resolve_code_unit",
    "install_services_from_unit",
    "install_services_from_unit_containing",
    "install_services_from_unit_containing_using",
]
