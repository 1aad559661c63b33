"""
Policy Adapter Factory - storage adapter selection for a Casbin policy engine.

Typical use::

    from policy_adapter import AdapterRequest, new_adapter

    adapter = new_adapter(AdapterRequest(driver_name="file", connect_string="policy.csv"))

An empty request falls back to the JSON connection config named by
CONNECTION_CONFIG_PATH (default: config/connection_config.json), with
``$NAME`` placeholders expanded from the environment.
"""

import importlib.metadata

from policy_adapter.factories.adapter_factory import AdapterFactory, new_adapter
from policy_adapter.utils.config import load_configuration, resolve_request
from policy_adapter.utils.constants import SUPPORTED_DRIVERS
from policy_adapter.utils.exceptions import (
    AdapterConstructionError,
    ConfigParseError,
    ConfigReadError,
    ConfigurationError,
    PolicyAdapterError,
    UnsupportedDriverError,
    ValidationError,
)
from policy_adapter.utils.models import AdapterRequest, Configuration

try:
    __version__ = importlib.metadata.version("policy-adapter-factory")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout without an install
    __version__ = "0.0.0+unknown"

__all__ = [
    '__version__',
    'AdapterFactory',
    'AdapterRequest',
    'Configuration',
    'SUPPORTED_DRIVERS',
    'load_configuration',
    'new_adapter',
    'resolve_request',
    'PolicyAdapterError',
    'ConfigurationError',
    'ConfigReadError',
    'ConfigParseError',
    'ValidationError',
    'UnsupportedDriverError',
    'AdapterConstructionError',
]
