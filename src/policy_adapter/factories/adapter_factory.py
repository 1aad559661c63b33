import logging

from policy_adapter.factories.adapters.file_adapter import CasbinFileAdapterBuilder
from policy_adapter.factories.adapters.sqlalchemy_adapter import SQLAlchemyAdapterBuilder
from policy_adapter.utils.config import resolve_request
from policy_adapter.utils.constants import SUPPORTED_DRIVERS
from policy_adapter.utils.exceptions import UnsupportedDriverError
from policy_adapter.utils.models import DelegatedDriver, FileDriver, classify_driver


class AdapterFactory:
    """Factory to create policy persistence adapters.

    Resolves the request against the local connection config, then builds
    a file adapter for the 'file' driver or delegates to the ORM builder
    for any whitelisted SQL driver.
    """

    def __init__(self, file_builder=None, orm_builder=None, lookup=None,
                 supported_drivers=SUPPORTED_DRIVERS, config_path=None):
        self.file_builder = file_builder or CasbinFileAdapterBuilder()
        self.orm_builder = orm_builder or SQLAlchemyAdapterBuilder()
        self.lookup = lookup
        self.supported_drivers = tuple(supported_drivers)
        self.config_path = config_path

    def resolve(self, request):
        """Return the effective request after merging the local connection config."""
        return resolve_request(request, lookup=self.lookup, config_path=self.config_path)

    def new_adapter(self, request):
        """Resolve the request and build its adapter.

        Raises:
            ConfigReadError: Connection config exists but cannot be read
            ConfigParseError: Connection config is not valid
            UnsupportedDriverError: Driver is not in supported_drivers
        Builder errors propagate unchanged.
        """
        resolved = self.resolve(request)
        return self.create_adapter(classify_driver(resolved))

    def create_adapter(self, choice):
        if isinstance(choice, FileDriver):
            logging.debug("Using file driver")
            return self.file_builder.build(choice.path)

        if isinstance(choice, DelegatedDriver):
            if choice.name not in self.supported_drivers:
                raise UnsupportedDriverError(choice.name, self.supported_drivers)
            logging.debug("Delegating to ORM builder for driver %s", choice.name)
            return self.orm_builder.build(choice.name, choice.connection, choice.db_specified)

        raise TypeError(f"Unknown driver choice: {choice!r}")


def new_adapter(request, **kwargs):
    """Build an adapter for request with a default AdapterFactory."""
    return AdapterFactory(**kwargs).new_adapter(request)
