from typing import Optional, Type


class InstallerException(Exception):
    """Base exception for installer discovery and registration errors."""


class ArgumentNullError(InstallerException, ValueError):
    """Raised when a required argument is None.

    Attributes:
        argument_name: Name of the missing argument.
    """

    def __init__(self, argument_name: str) -> None:
        self.argument_name = argument_name
        super().__init__(f"Required argument '{argument_name}' cannot be None")


class InstallerContractError(InstallerException, TypeError):
    """Raised when a created object does not satisfy the installer contract.

    This signals a bug in the type filter or in the scanned code unit, so it
    is never absorbed by the creation strategy.

    Attributes:
        installer_type: The class that produced the offending object.
    """

    def __init__(self, installer_type: Type, reason: Optional[str] = None) -> None:
        self.installer_type = installer_type
        self.reason = reason
        message = f"Type {installer_type.__name__} does not implement IServiceInstaller"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)

