import inspect
import logging
from typing import Optional, Type

from miraveja_installers.domain import (
    CreationFailureReason,
    CreationResult,
    IInstallerCreationStrategy,
    InstallerContractError,
    IServiceInstaller,
    against_none,
)

logger = logging.getLogger(__name__)


class DefaultConstructorCreationStrategy(IInstallerCreationStrategy):
    """Creates installers by calling their parameterless constructor.

    Two failures are recoverable and reported as a failed CreationResult:
    the class cannot be called without arguments, or its constructor raises.
    An object that is not an IServiceInstaller raises InstallerContractError.
    """

    def attempt(self, installer_type: Type) -> CreationResult:
        """Try to instantiate ``installer_type`` with no arguments.

        Args:
            installer_type: The installer class.

        Returns:
            A successful or failed CreationResult.

        Raises:
            ArgumentNullError: If installer_type is None.
            InstallerContractError: If the created object is not an installer.

        Example:
            >>> class NeedsDatabase(IServiceInstaller):
            ...     def __init__(self, db): ...
            ...     def install(self, services, configuration): ...
            >>> DefaultConstructorCreationStrategy().attempt(NeedsDatabase).reason
            <CreationFailureReason.MISSING_DEFAULT_CONSTRUCTOR: 'missing_default_constructor'>
        """
        against_none(installer_type, "installer_type")

        signature_error = _check_parameterless(installer_type)
        if signature_error is not None:
            logger.debug(f"No parameterless constructor on {installer_type.__name__}: {signature_error}")
            return CreationResult.failure(
                installer_type, CreationFailureReason.MISSING_DEFAULT_CONSTRUCTOR, signature_error
            )

        try:
            instance = installer_type()
        except Exception as e:
            logger.debug(f"Constructor of {installer_type.__name__} raised: {e!r}")
            return CreationResult.failure(installer_type, CreationFailureReason.CONSTRUCTOR_RAISED, e)

        if not isinstance(instance, IServiceInstaller):
            raise InstallerContractError(
                installer_type,
                f"constructor returned {type(instance).__name__}",
            )

        logger.debug(f"Created installer: {installer_type.__name__}")
        return CreationResult.success(installer_type, instance)


def _check_parameterless(installer_type: Type) -> Optional[Exception]:
    """Return the binding error if the class cannot be called without arguments."""
    try:
        signature = inspect.signature(installer_type)
    except (TypeError, ValueError):
        # Some builtin-backed classes expose no signature; let the call decide.
        return None

    try:
        signature.bind()
    except TypeError as e:
        return e
    return None
