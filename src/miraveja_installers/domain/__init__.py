"""
Domain layer - Core contracts and models.

This layer contains the installer contract, the strategy interfaces and the
value objects exchanged between them. It has no dependencies on other layers.
"""

from .enums import CreationFailureReason, Lifetime
from .exceptions import (
    ArgumentNullError,
    InstallerContractError,
    InstallerException,
)
from .guards import against_none
from .interfaces import (
    IInstallerCreationStrategy,
    IInstallerDiscovery,
    IInstallerTypeFilter,
    IServiceCollection,
    IServiceInstaller,
)
from .models import CreationResult, ErrorCallback, InstallerOptions, ServiceDescriptor

# Rebuild Pydantic models to resolve forward references
ServiceDescriptor.model_rebuild()

__all__ = [
    # Enums
    "Lifetime",
    "CreationFailureReason",
    # Exceptions
    "InstallerException",
    "ArgumentNullError",
    "InstallerContractError",
    # Guards
    "against_none",
    # Interfaces
    "IServiceCollection",
    "IServiceInstaller",
    "IInstallerTypeFilter",
    "IInstallerDiscovery",
    "IInstallerCreationStrategy",
    # Models
    "ServiceDescriptor",
    "InstallerOptions",
    "CreationResult",
    "ErrorCallback",
]
