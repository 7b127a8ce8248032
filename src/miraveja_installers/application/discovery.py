"""Application layer - Installer discovery over modules and packages."""

import importlib
import inspect
import logging
import pkgutil
from types import ModuleType
from typing import Iterator, Optional, Type

from miraveja_installers.application.type_filters import DefaultInstallerTypeFilter
from miraveja_installers.domain import IInstallerDiscovery, IInstallerTypeFilter, against_none

logger = logging.getLogger(__name__)


class ModuleInstallerDiscovery(IInstallerDiscovery):
    """Discovers installer classes declared in a module or package.

    Only classes whose ``__module__`` is the scanned module are considered,
    so re-exported classes are reported once, by the module that declares
    them. Packages are walked recursively and every submodule is imported.

    Attributes:
        _default_filter: Filter used when the caller does not supply one.
    """

    def __init__(self, default_filter: Optional[IInstallerTypeFilter] = None) -> None:
        """Initialize the discovery.

        Args:
            default_filter: Filter used when discover_installers receives none.
                Defaults to DefaultInstallerTypeFilter.
        """
        self._default_filter = default_filter or DefaultInstallerTypeFilter()

    def discover_installers(
        self,
        code_unit: ModuleType,
        type_filter: Optional[IInstallerTypeFilter] = None,
    ) -> Iterator[Type]:
        """Find all installer classes declared in a module or package.

        The scan is lazy and single-pass: submodules are imported while the
        returned iterator is consumed. Import errors propagate unmodified.

        Args:
            code_unit: The module or package to scan.
            type_filter: Optional filter; the default filter is used when omitted.

        Returns:
            Iterator over accepted classes, in declaration order.

        Raises:
            ArgumentNullError: If code_unit is None.

        Example:
            >>> import myapp
            >>> discovery = ModuleInstallerDiscovery()
            >>> list(discovery.discover_installers(myapp))
            [<class 'myapp.database.DatabaseInstaller'>, <class 'myapp.web.WebInstaller'>]
        """
        against_none(code_unit, "code_unit")
        active_filter = type_filter or self._default_filter
        return self._scan(code_unit, active_filter)

    def _scan(self, code_unit: ModuleType, type_filter: IInstallerTypeFilter) -> Iterator[Type]:
        for candidate in iter_declared_types(code_unit):
            if type_filter.is_valid_installer(candidate):
                logger.debug(f"Discovered installer: {candidate.__module__}.{candidate.__qualname__}")
                yield candidate


def iter_declared_types(code_unit: ModuleType) -> Iterator[Type]:
    """Yield every class declared in a module and, for packages, in its submodules.

    Classes are yielded in attribute definition order; submodules follow in
    ``pkgutil.walk_packages`` order, which is sorted by name per directory.
    Every submodule is imported, except ``__main__`` modules, which are
    entry-point scripts and are never run by a scan.

    Args:
        code_unit: The module or package to enumerate.
    """
    yield from _declared_in(code_unit)

    package_path = getattr(code_unit, "__path__", None)
    if package_path is None:
        return

    for module_info in pkgutil.walk_packages(package_path, prefix=f"{code_unit.__name__}.", onerror=_reraise):
        if module_info.name.rpartition(".")[2] == "__main__":
            continue
        module = importlib.import_module(module_info.name)
        yield from _declared_in(module)


def _declared_in(module: ModuleType) -> Iterator[Type]:
    for value in list(vars(module).values()):
        if inspect.isclass(value) and value.__module__ == module.__name__:
            yield value


def _reraise(module_name: str) -> None:
    # Called by pkgutil from inside its except block.
    raise
