from enum import Enum


class Lifetime(str, Enum):
    """Lifetime an installer declares for a service binding.

    The collection only records the value; honouring it is up to the
    container that is later built from the collected descriptors.

    Attributes:
        SINGLETON: One instance for the whole application.
        SCOPED: One instance per scope opened by the consuming container.
        TRANSIENT: A new instance for every request of the service.
    """

    SINGLETON = "singleton"
    SCOPED = "scoped"
    TRANSIENT = "transient"

    def __str__(self) -> str:
        return self.value


class CreationFailureReason(str, Enum):
    """Recoverable reasons an installer class could not be instantiated.

    Attributes:
        MISSING_DEFAULT_CONSTRUCTOR: The class cannot be called without arguments.
        CONSTRUCTOR_RAISED: The constructor raised while running.
    """

    MISSING_DEFAULT_CONSTRUCTOR = "missing_default_constructor"
    CONSTRUCTOR_RAISED = "constructor_raised"

    def __str__(self) -> str:
        return self.value
