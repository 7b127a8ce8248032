"""
miraveja-installers: Convention-based discovery and registration of service installers.

Public API exports for the miraveja-installers package.
"""

# Application exports
from miraveja_installers.application import (
    ServiceCollection,
    install_services_from_unit,
    install_services_from_unit_containing,
    install_services_from_unit_containing_using,
    resolve_code_unit,
)

# Domain exports
from miraveja_installers.domain.enums import CreationFailureReason, Lifetime
from miraveja_installers.domain.exceptions import (
    ArgumentNullError,
    InstallerContractError,
    InstallerException,
)
from miraveja_installers.domain.interfaces import (
    IInstallerCreationStrategy,
    IInstallerDiscovery,
    IInstallerTypeFilter,
    IServiceCollection,
    IServiceInstaller,
)
from miraveja_installers.domain.models import InstallerOptions

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "install_services_from_unit",
    "install_services_from_unit_containing",
    "install_services_from_unit_containing_using",
    "resolve_code_unit",
    # Collection
    "ServiceCollection",
    # Contracts
    "IServiceInstaller",
    "IServiceCollection",
    "IInstallerTypeFilter",
    "IInstallerDiscovery",
    "IInstallerCreationStrategy",
    # Options
    "InstallerOptions",
    # Enums
    "Lifetime",
    "CreationFailureReason",
    # Exceptions
    "InstallerException",
    "ArgumentNullError",
    "InstallerContractError",
]
