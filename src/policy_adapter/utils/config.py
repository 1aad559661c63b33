"""Connection config loading, placeholder expansion and request resolution."""
import dataclasses
import json
import logging
import os
import re
from typing import Callable, Optional

import yaml

from policy_adapter.utils.constants import (
    CONFIG_FILE_DEFAULT_PATH,
    CONFIG_FILE_PATH_ENV_VAR,
    SETTINGS_FILE_DEFAULT_PATH,
)
from policy_adapter.utils.exceptions import ConfigParseError, ConfigReadError, ConfigurationError
from policy_adapter.utils.models import AdapterRequest, Configuration

logger = logging.getLogger(__name__)

EnvLookup = Callable[[str], Optional[str]]

# "$" followed by a (possibly empty) run of ASCII word characters
PLACEHOLDER_PATTERN = re.compile(r'\$([A-Za-z0-9_]*)')


def interpolate_env(text: str, lookup: Optional[EnvLookup] = None) -> str:
    """Replace every ``$NAME`` placeholder in text with the value of NAME.

    Single pass: substituted values are not scanned again. Unset names
    become the empty string.

    Args:
        text: String that may contain placeholders
        lookup: Function mapping a variable name to its value or None (default: os.environ.get)

    Returns:
        The expanded string
    """
    lookup = lookup or os.environ.get
    return PLACEHOLDER_PATTERN.sub(lambda match: lookup(match.group(1)) or "", text)


def get_local_config_path(lookup: Optional[EnvLookup] = None) -> str:
    """Return the connection config path, honouring CONNECTION_CONFIG_PATH."""
    lookup = lookup or os.environ.get
    return lookup(CONFIG_FILE_PATH_ENV_VAR) or CONFIG_FILE_DEFAULT_PATH


def load_configuration(path: str, lookup: Optional[EnvLookup] = None) -> Configuration:
    """Load the connection config file.

    A missing file yields an empty Configuration; callers then keep their
    own values. Only the Connection field has placeholders expanded.

    Args:
        path: Path to the JSON config file
        lookup: Environment lookup used for placeholder expansion

    Returns:
        Configuration instance

    Raises:
        ConfigReadError: If the file exists but cannot be read
        ConfigParseError: If the file is not valid JSON or has mistyped fields
    """
    try:
        with open(path, 'rb') as config_file:
            raw = config_file.read()
    except FileNotFoundError:
        logger.debug("Connection config %s not found, using request values", path)
        return Configuration()
    except OSError as e:
        raise ConfigReadError(path, e) from e

    # Invalid UTF-8 becomes U+FFFD; only the first JSON value is decoded
    content = raw.decode('utf-8', errors='replace').lstrip()
    try:
        data, _ = json.JSONDecoder().raw_decode(content)
    except json.JSONDecodeError as e:
        raise ConfigParseError(path, e) from e

    config = Configuration.from_dict(data, source=path)
    config.connection = interpolate_env(config.connection, lookup)
    logger.debug("Loaded connection config %s (driver=%r)", path, config.driver)
    return config


def resolve_request(request: AdapterRequest, lookup: Optional[EnvLookup] = None,
                    config_path: Optional[str] = None) -> AdapterRequest:
    """Fill in driver, connection and db flag from the local config when the caller gave neither.

    The three values are replaced together or not at all; a request that
    names a driver or a connection string is returned as given. The config
    file is read on every call.

    Args:
        request: Caller-supplied request (not modified)
        lookup: Environment lookup for the config path and placeholders
        config_path: Explicit config path (default: from get_local_config_path)

    Returns:
        The effective AdapterRequest

    Raises:
        ConfigReadError: Propagated from load_configuration
        ConfigParseError: Propagated from load_configuration
    """
    path = config_path or get_local_config_path(lookup)
    config = load_configuration(path, lookup)

    if not request.is_empty():
        return dataclasses.replace(request)

    return dataclasses.replace(
        request,
        driver_name=config.driver,
        connect_string=config.connection,
        db_specified=config.db_specified,
    )


def _load_settings_defaults(settings):
    # Ensure we have a dict to work with
    if not isinstance(settings, dict):
        settings = {}

    # Logging defaults
    settings.setdefault('logging', {})
    log = settings['logging']
    log['file'] = log.get('file', 'logs/policy_adapter.log')
    log['level'] = str(log.get('level', 'INFO')).upper()

    return settings


def read_settings_from_yaml(settings_file=SETTINGS_FILE_DEFAULT_PATH):
    """Read application settings (logging) from YAML, applying defaults.

    A missing settings file gives the defaults.

    Raises:
        ConfigurationError: If the file exists but is not readable YAML
    """
    try:
        with open(settings_file, 'r', encoding='utf-8') as file:
            settings = yaml.safe_load(file) or {}
    except FileNotFoundError:
        settings = {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Error reading settings from {settings_file}: {e}") from e
    return _load_settings_defaults(settings)
