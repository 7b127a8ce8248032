"""Application layer - Installer type filters."""

import inspect
import logging
from typing import Tuple, Type

from miraveja_installers.domain import IInstallerTypeFilter, InstallerOptions, IServiceInstaller, against_none

logger = logging.getLogger(__name__)


class DefaultInstallerTypeFilter(IInstallerTypeFilter):
    """Accepts concrete classes implementing IServiceInstaller.

    Abstract classes, including interface-like ABCs that still declare
    abstract methods, are rejected even when they subclass IServiceInstaller.
    """

    def is_valid_installer(self, installer_type: Type) -> bool:
        against_none(installer_type, "installer_type")
        return (
            inspect.isclass(installer_type)
            and not inspect.isabstract(installer_type)
            and issubclass(installer_type, IServiceInstaller)
        )


class ConfigurableInstallerTypeFilter(IInstallerTypeFilter):
    """Default filter narrowed by namespace and class name exclusions.

    A class is excluded when its module path starts with any excluded
    namespace, or its name starts with any excluded prefix. Matching is a
    plain case-sensitive ``str.startswith``, so ``"app.foo"`` also excludes
    ``"app.foobar"``.

    Attributes:
        _options: Options holding the exclusion lists.
        _default_filter: The filter every accepted class must also pass.

    Example:
        >>> type_filter = ConfigurableInstallerTypeFilter(
        ...     InstallerOptions(excluded_type_name_prefixes=("Legacy",))
        ... )
        >>> type_filter.is_valid_installer(LegacyCacheInstaller)
        False
    """

    def __init__(self, options: InstallerOptions) -> None:
        """Initialize the filter.

        Args:
            options: Options holding the exclusion lists.

        Raises:
            ArgumentNullError: If options is None.
        """
        self._options = against_none(options, "options")
        self._default_filter = DefaultInstallerTypeFilter()

    def is_valid_installer(self, installer_type: Type) -> bool:
        against_none(installer_type, "installer_type")
        if not self._default_filter.is_valid_installer(installer_type):
            return False

        if self._is_excluded(installer_type):
            logger.debug(f"Excluded installer by options: {installer_type.__module__}.{installer_type.__name__}")
            return False
        return True

    def _is_excluded(self, installer_type: Type) -> bool:
        return self._is_excluded_by_namespace(installer_type) or self._is_excluded_by_prefix(installer_type)

    def _is_excluded_by_namespace(self, installer_type: Type) -> bool:
        if self._options.excluded_namespaces is None:
            return False
        namespace = getattr(installer_type, "__module__", None) or ""
        return _starts_with_any(namespace, self._options.excluded_namespaces)

    def _is_excluded_by_prefix(self, installer_type: Type) -> bool:
        if self._options.excluded_type_name_prefixes is None:
            return False
        return _starts_with_any(installer_type.__name__, self._options.excluded_type_name_prefixes)


def _starts_with_any(value: str, prefixes: Tuple[str, ...]) -> bool:
    return any(value.startswith(prefix) for prefix in prefixes)
