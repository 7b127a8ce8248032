from typing import Optional, TypeVar

from miraveja_installers.domain.exceptions import ArgumentNullError

T = TypeVar("T")


def against_none(value: Optional[T], argument_name: str) -> T:
    """Return ``value`` or raise ArgumentNullError when it is None.

    Example:
        >>> self._strategy = against_none(strategy, "strategy")
    """
    if value is None:
        raise ArgumentNullError(argument_name)
    return value
