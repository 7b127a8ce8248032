from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field

from miraveja_installers.domain.enums import CreationFailureReason, Lifetime

if TYPE_CHECKING:
    from miraveja_installers.domain.interfaces import IServiceCollection

ErrorCallback = Callable[[Type, Exception], None]


class ServiceDescriptor(BaseModel):
    """Value object describing one service binding added by an installer.

    Attributes:
        service_type: The type being registered.
        builder: Factory function that receives the collection and returns an instance.
        lifetime: How long the instance should live.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    service_type: Type = Field(..., description="The service type to be registered.")
    builder: Callable[["IServiceCollection"], Any] = Field(
        ..., description="The builder function to create an instance of the service."
    )
    lifetime: Lifetime = Field(..., description="The lifetime of the registered service.")


class InstallerOptions(BaseModel):
    """Options controlling a single installer registration call.

    Attributes:
        log_errors: Log recoverable creation failures when no callback is set.
        on_error: Callback receiving ``(installer_type, error)`` for each recoverable failure.
        excluded_namespaces: Module path prefixes whose installers are skipped.
        excluded_type_name_prefixes: Class name prefixes whose installers are skipped.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    log_errors: bool = Field(
        default=True,
        description="Log recoverable creation failures when no explicit callback is set.",
    )
    on_error: Optional[ErrorCallback] = Field(
        default=None,
        description="Callback invoked with the installer type and the failure.",
    )
    excluded_namespaces: Optional[Tuple[str, ...]] = Field(
        default=None,
        description="Module path prefixes excluded from discovery.",
    )
    excluded_type_name_prefixes: Optional[Tuple[str, ...]] = Field(
        default=None,
        description="Class name prefixes excluded from discovery.",
    )

    @property
    def has_exclusions(self) -> bool:
        """Whether any exclusion list is configured, even an empty one."""
        return self.excluded_namespaces is not None or self.excluded_type_name_prefixes is not None

    @classmethod
    def from_configuration(
        cls,
        configuration: Mapping[str, Any],
        section: str = "installers",
    ) -> "InstallerOptions":
        """Build options from a section of the configuration view.

        Only ``log_errors``, ``excluded_namespaces`` and ``excluded_type_name_prefixes``
        are read. A missing section yields the default options.

        Args:
            configuration: The configuration view passed to installers.
            section: Key of the section holding the installer options.

        Returns:
            The parsed options.

        Raises:
            pydantic.ValidationError: If a value has the wrong shape.

        Example:
            >>> InstallerOptions.from_configuration(
            ...     {"installers": {"excluded_namespaces": ["app.legacy"]}}
            ... ).excluded_namespaces
            ('app.legacy',)
        """
        values = configuration.get(section)
        if values is None:
            return cls()
        if not isinstance(values, Mapping):
            raise TypeError(f"Configuration section '{section}' must be a mapping, got {type(values).__name__}")
        recognized = ("log_errors", "excluded_namespaces", "excluded_type_name_prefixes")
        return cls.model_validate({key: values[key] for key in recognized if key in values})


class CreationResult(BaseModel):
    """Outcome of a single attempt to instantiate an installer class.

    Exactly one of ``instance`` or ``reason``/``error`` is set.

    Attributes:
        installer_type: The class that was instantiated.
        instance: The created installer, on success.
        reason: Why creation failed, on failure.
        error: The underlying exception, on failure.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    installer_type: Type = Field(..., description="The installer class that was instantiated.")
    instance: Optional[Any] = Field(default=None, description="The created installer instance.")
    reason: Optional[CreationFailureReason] = Field(default=None, description="The failure reason.")
    error: Optional[Exception] = Field(default=None, description="The underlying failure.")

    @classmethod
    def success(cls, installer_type: Type, instance: Any) -> "CreationResult":
        return cls(installer_type=installer_type, instance=instance)

    @classmethod
    def failure(cls, installer_type: Type, reason: CreationFailureReason, error: Exception) -> "CreationResult":
        return cls(installer_type=installer_type, reason=reason, error=error)

    @property
    def succeeded(self) -> bool:
        return self.reason is None

