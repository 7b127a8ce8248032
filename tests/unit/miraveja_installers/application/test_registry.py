"""Unit tests for InstallerRegistry."""

import logging
from types import MappingProxyType, ModuleType
from unittest.mock import MagicMock

import pytest

from miraveja_installers.application.creation_strategy import DefaultConstructorCreationStrategy
from miraveja_installers.application.discovery import ModuleInstallerDiscovery
from miraveja_installers.application.factory import InstallerFactory
from miraveja_installers.application.registry import InstallerRegistry
from miraveja_installers.application.service_collection import ServiceCollection
from miraveja_installers.application.type_filters import ConfigurableInstallerTypeFilter
from miraveja_installers.domain import ArgumentNullError, InstallerOptions, IServiceInstaller
from miraveja_installers.infrastructure.testing import create_code_unit


def _make_unit(*classes):
    return create_code_unit("registry_unit", *classes)


def _registry(discovery=None):
    return InstallerRegistry(
        discovery or ModuleInstallerDiscovery(),
        InstallerFactory(DefaultConstructorCreationStrategy()),
    )


class TestRegistryInitialization:
    """Test cases for InstallerRegistry initialization."""

    def test_requires_discovery(self):
        """Test that None discovery is a usage error."""
        with pytest.raises(ArgumentNullError):
            InstallerRegistry(None, InstallerFactory(DefaultConstructorCreationStrategy()))

    def test_requires_factory(self):
        """Test that None factory is a usage error."""
        with pytest.raises(ArgumentNullError):
            InstallerRegistry(ModuleInstallerDiscovery(), None)


class TestArgumentValidation:
    """Test cases for register_installers argument validation."""

    @pytest.mark.parametrize("missing", ["services", "configuration", "code_unit"])
    def test_missing_argument_raises(self, missing):
        """Test that each required argument is checked before scanning."""
        discovery = MagicMock()
        arguments = {"services": ServiceCollection(), "configuration": {}, "code_unit": ModuleType("unit")}
        arguments[missing] = None

        with pytest.raises(ArgumentNullError) as exc_info:
            _registry(discovery).register_installers(**arguments)

        assert exc_info.value.argument_name == missing
        discovery.discover_installers.assert_not_called()


class TestRegisterInstallers:
    """Test cases for register_installers."""

    def test_invokes_installers_in_discovery_order(self):
        """Test that installers run sequentially in discovery order."""
        order = []

        class AlphaInstaller(IServiceInstaller):
            def install(self, services, configuration):
                order.append("alpha")

        class BetaInstaller(IServiceInstaller):
            def install(self, services, configuration):
                order.append("beta")

        count = _registry().register_installers(ServiceCollection(), {}, _make_unit(BetaInstaller, AlphaInstaller))

        assert order == ["beta", "alpha"]
        assert count == 2

    def test_passes_same_services_and_configuration(self):
        """Test that each installer receives the caller's objects."""
        received = []

        class AlphaInstaller(IServiceInstaller):
            def install(self, services, configuration):
                received.append((services, configuration))

        class BetaInstaller(IServiceInstaller):
            def install(self, services, configuration):
                received.append((services, configuration))

        services = ServiceCollection()
        configuration = MappingProxyType({"feature": "on"})

        _registry().register_installers(services, configuration, _make_unit(AlphaInstaller, BetaInstaller))

        assert len(received) == 2
        assert all(s is services and c is configuration for s, c in received)

    def test_install_failure_propagates_and_aborts_batch(self):
        """Test that an exception from install stops the remaining installers."""
        order = []

        class FailingInstaller(IServiceInstaller):
            def install(self, services, configuration):
                order.append("failing")
                raise RuntimeError("install failed")

        class LaterInstaller(IServiceInstaller):
            def install(self, services, configuration):
                order.append("later")

        with pytest.raises(RuntimeError, match="install failed"):
            _registry().register_installers(ServiceCollection(), {}, _make_unit(FailingInstaller, LaterInstaller))

        assert order == ["failing"]

    def test_install_completes_before_next_is_created(self):
        """Test that creation and invocation interleave one installer at a time."""
        events = []

        class FirstInstaller(IServiceInstaller):
            def __init__(self):
                events.append("create first")

            def install(self, services, configuration):
                events.append("install first")

        class SecondInstaller(IServiceInstaller):
            def __init__(self):
                events.append("create second")

            def install(self, services, configuration):
                events.append("install second")

        _registry().register_installers(ServiceCollection(), {}, _make_unit(FirstInstaller, SecondInstaller))

        assert events == ["create first", "install first", "create second", "install second"]

    def test_empty_unit_invokes_nothing(self):
        """Test that a unit without installers returns zero."""
        assert _registry().register_installers(ServiceCollection(), {}, ModuleType("empty")) == 0


class TestErrorHandler:
    """Test cases for error handler selection."""

    def _unit_with_broken_installer(self):
        class NeedsArgsInstaller(IServiceInstaller):
            def __init__(self, dependency):
                self.dependency = dependency

            def install(self, services, configuration):
                pass

        return NeedsArgsInstaller, _make_unit(NeedsArgsInstaller)

    def test_custom_callback_takes_precedence(self, caplog):
        """Test that on_error receives failures and nothing is logged."""
        installer_type, unit = self._unit_with_broken_installer()
        on_error = MagicMock()

        with caplog.at_level(logging.WARNING):
            _registry().register_installers(ServiceCollection(), {}, unit, InstallerOptions(on_error=on_error))

        on_error.assert_called_once()
        assert on_error.call_args.args[0] is installer_type
        assert caplog.records == []

    def test_default_handler_logs_warning(self, caplog):
        """Test that the default handler logs a warning naming the installer."""
        _, unit = self._unit_with_broken_installer()

        with caplog.at_level(logging.WARNING, logger="miraveja_installers"):
            count = _registry().register_installers(ServiceCollection(), {}, unit)

        assert count == 0
        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING
        assert "registry_unit.NeedsArgsInstaller" in caplog.records[0].getMessage()

    def test_log_errors_disabled_is_silent(self, caplog):
        """Test that disabling log_errors without a callback suppresses reporting."""
        _, unit = self._unit_with_broken_installer()

        with caplog.at_level(logging.WARNING):
            count = _registry().register_installers(
                ServiceCollection(), {}, unit, InstallerOptions(log_errors=False)
            )

        assert count == 0
        assert caplog.records == []

    def test_no_callback_passed_when_logging_disabled(self):
        """Test that the factory receives None when logging is disabled."""
        factory = MagicMock()
        factory.create_installers.return_value = iter([])
        registry = InstallerRegistry(ModuleInstallerDiscovery(), factory)

        registry.register_installers(ServiceCollection(), {}, ModuleType("unit"), InstallerOptions(log_errors=False))

        assert factory.create_installers.call_args.args[1] is None


class TestTypeFilterSelection:
    """Test cases for type filter selection."""

    def test_no_exclusions_passes_no_filter(self):
        """Test that discovery falls back to its own default filter."""
        discovery = MagicMock()
        discovery.discover_installers.return_value = iter([])
        unit = ModuleType("unit")

        _registry(discovery).register_installers(ServiceCollection(), {}, unit)

        discovery.discover_installers.assert_called_once_with(unit, None)

    def test_exclusions_pass_configurable_filter(self):
        """Test that exclusions produce a configurable filter."""
        discovery = MagicMock()
        discovery.discover_installers.return_value = iter([])

        _registry(discovery).register_installers(
            ServiceCollection(), {}, ModuleType("unit"), InstallerOptions(excluded_namespaces=["legacy"])
        )

        assert isinstance(discovery.discover_installers.call_args.args[1], ConfigurableInstallerTypeFilter)

    def test_excluded_installer_is_not_invoked(self):
        """Test end to end that a name-prefixed installer is skipped."""
        invoked = []

        class LegacyInstaller(IServiceInstaller):
            def install(self, services, configuration):
                invoked.append("legacy")

        class CurrentInstaller(IServiceInstaller):
            def install(self, services, configuration):
                invoked.append("current")

        _registry().register_installers(
            ServiceCollection(),
            {},
            _make_unit(LegacyInstaller, CurrentInstaller),
            InstallerOptions(excluded_type_name_prefixes=["Legacy"]),
        )

        assert invoked == ["current"]
