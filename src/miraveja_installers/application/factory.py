from typing import Iterable, Iterator, Optional, Type

from miraveja_installers.domain import (
    ErrorCallback,
    IInstallerCreationStrategy,
    IServiceInstaller,
    against_none,
)


class InstallerFactory:
    """Turns installer classes into installer instances using a creation strategy.

    Attributes:
        _strategy: Strategy used to instantiate each class.
    """

    def __init__(self, strategy: IInstallerCreationStrategy) -> None:
        """Initialize the factory.

        Args:
            strategy: Strategy used to instantiate each class.

        Raises:
            ArgumentNullError: If strategy is None.
        """
        self._strategy = against_none(strategy, "strategy")

    def create_installers(
        self,
        installer_types: Iterable[Type],
        on_error: Optional[ErrorCallback] = None,
    ) -> Iterator[IServiceInstaller]:
        """Lazily create installers, skipping classes that could not be instantiated.

        Classes are instantiated one at a time as the iterator is consumed,
        in input order. Failures are reported through ``on_error`` by the
        strategy and dropped from the output.

        Args:
            installer_types: Installer classes to instantiate.
            on_error: Callback receiving ``(installer_type, error)`` on a recoverable failure.

        Returns:
            Iterator over created installers.

        Raises:
            ArgumentNullError: If installer_types is None.
        """
        against_none(installer_types, "installer_types")
        return self._create(installer_types, on_error)

    def _create(
        self,
        installer_types: Iterable[Type],
        on_error: Optional[ErrorCallback],
    ) -> Iterator[IServiceInstaller]:
        for installer_type in installer_types:
            installer = self._strategy.try_create(installer_type, on_error)
            if installer is not None:
                yield installer
