"""Custom exceptions for policy_adapter.

Errors raised while resolving connection settings and building adapters.
Every error is surfaced to the caller; none are logged-and-ignored.
"""

from policy_adapter.utils.constants import SUPPORTED_DRIVERS


class PolicyAdapterError(Exception):
    """Base exception for all policy_adapter errors.

    All custom exceptions in the project should inherit from this base class.
    """
    pass


class ConfigurationError(PolicyAdapterError):
    """Connection configuration file error.

    Base class for problems with the local connection config. A missing
    config file is not an error and never raises this.
    """
    pass


class ConfigReadError(ConfigurationError):
    """Configuration file exists but cannot be read.

    Raised when:
    - The file cannot be opened (permissions)
    - The path is a directory
    - An I/O error occurs while reading
    """

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read connection config {path}: {reason}")


class ConfigParseError(ConfigurationError):
    """Configuration file content is invalid.

    Raised when:
    - The content is not valid JSON
    - The top-level value is not an object
    - A field has the wrong JSON type
    """

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid connection config {path}: {reason}")


class ValidationError(PolicyAdapterError):
    """Adapter request validation error.

    Raised when:
    - A request field has the wrong type (e.g. a string for DbSpecified)
    """
    pass


class UnsupportedDriverError(PolicyAdapterError):
    """Resolved driver name is not one of the supported drivers."""

    def __init__(self, driver, supported=SUPPORTED_DRIVERS):
        self.driver = driver
        self.supported = tuple(supported)
        super().__init__(f"currently supported DriverName: {' | '.join(self.supported)}")


class AdapterConstructionError(PolicyAdapterError):
    """A bundled adapter builder could not prepare the adapter.

    Raised when:
    - The connection string cannot be turned into a database URL
    - The driver name has no known SQL dialect

    Failures raised by the underlying database or adapter libraries are
    not converted into this error; they reach the caller unchanged.
    """
    pass


__all__ = [
    'PolicyAdapterError',
    'ConfigurationError',
    'ConfigReadError',
    'ConfigParseError',
    'ValidationError',
    'UnsupportedDriverError',
    'AdapterConstructionError',
]
