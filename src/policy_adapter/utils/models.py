"""Domain models for connection settings and adapter requests."""
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from policy_adapter.utils.constants import FILE_DRIVER
from policy_adapter.utils.exceptions import ConfigParseError, ValidationError


@dataclass
class Configuration:
    """Connection settings loaded from the local JSON config file.

    Attributes:
        driver: Storage backend name ('file', 'mysql', 'postgres', 'mssql')
        connection: Connection string or file path, placeholders already expanded
        enforcer: Enforcer identifier, passed through untouched
        db_specified: Whether the connection string already names a database
    """
    driver: str = ""
    connection: str = ""
    enforcer: str = ""
    db_specified: bool = False

    # JSON key (lowercased) -> (attribute, expected type)
    _FIELDS = {
        'driver': ('driver', str),
        'connection': ('connection', str),
        'enforcer': ('enforcer', str),
        'dbspecified': ('db_specified', bool),
    }

    @classmethod
    def from_dict(cls, data: Any, source: str = "<config>") -> "Configuration":
        """Build a Configuration from decoded JSON.

        Keys are matched case-insensitively and unknown keys are ignored.
        A null document or null field keeps the zero value.

        Args:
            data: Decoded JSON value
            source: Name of the file the data came from (for error messages)

        Returns:
            Configuration instance

        Raises:
            ConfigParseError: If the document is not an object or a field has the wrong type
        """
        config = cls()
        if data is None:
            return config
        if not isinstance(data, dict):
            raise ConfigParseError(source, f"expected a JSON object, got {type(data).__name__}")

        for key, value in data.items():
            field = cls._FIELDS.get(key.lower())
            if field is None or value is None:
                continue
            attr, expected = field
            if not isinstance(value, expected):
                raise ConfigParseError(
                    source,
                    f"field '{key}' must be a {expected.__name__}, got {type(value).__name__}"
                )
            setattr(config, attr, value)
        return config


@dataclass
class AdapterRequest:
    """Caller-supplied adapter parameters, before the config merge.

    Attributes:
        driver_name: Requested driver name, may be empty
        connect_string: Requested connection string, may be empty
        db_specified: Whether connect_string already names a database
        enforcer: Enforcer identifier, passed through untouched
    """
    driver_name: str = ""
    connect_string: str = ""
    db_specified: bool = False
    enforcer: str = ""

    # Normalized key -> (attribute, expected type)
    _ALIASES = {
        'drivername': ('driver_name', str),
        'connectstring': ('connect_string', str),
        'dbspecified': ('db_specified', bool),
        'enforcer': ('enforcer', str),
    }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AdapterRequest":
        """Build a request from wire names (DriverName, ConnectString, DbSpecified) or snake_case.

        Raises:
            ValidationError: If a field has the wrong type; values are never coerced
        """
        values = {}
        for key, value in (data or {}).items():
            field = cls._ALIASES.get(key.replace('_', '').lower())
            if field is None or value is None:
                continue
            attr, expected = field
            if not isinstance(value, expected):
                raise ValidationError(
                    f"Request field '{key}' must be a {expected.__name__}, got {type(value).__name__}"
                )
            values[attr] = value
        return cls(**values)

    def is_empty(self) -> bool:
        """True when neither a driver name nor a connection string was supplied."""
        return not self.driver_name and not self.connect_string


@dataclass(frozen=True)
class FileDriver:
    """Policy file backend; the connection string is the file path."""
    path: str


@dataclass(frozen=True)
class DelegatedDriver:
    """SQL backend built by the ORM adapter; name is subject to the whitelist."""
    name: str
    connection: str
    db_specified: bool = False


DriverChoice = Union[FileDriver, DelegatedDriver]


def classify_driver(request: AdapterRequest) -> DriverChoice:
    """Split a resolved request into the file branch or the delegated branch."""
    if request.driver_name == FILE_DRIVER:
        return FileDriver(path=request.connect_string)
    return DelegatedDriver(
        name=request.driver_name,
        connection=request.connect_string,
        db_specified=request.db_specified,
    )


def mask_connection(connection: Optional[str]) -> str:
    """Hide the password portion of a connection string for logs and display.

    Handles URL userinfo (``user:secret@host``) and key/value DSNs
    (``password=secret``).
    """
    if not connection:
        return ""
    masked = re.sub(r'(://[^:/@]*:)[^@]*@', r'\1***@', connection)
    masked = re.sub(r'^([^:/@]+:)[^@/]*@', r'\1***@', masked)
    masked = re.sub(r'(?i)\b(password|pwd)=[^;\s]*', r'\1=***', masked)
    return masked
