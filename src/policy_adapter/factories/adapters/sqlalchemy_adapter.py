import logging

from casbin_sqlalchemy_adapter import Adapter
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from policy_adapter.factories.adapters.persistence_adapter import OrmAdapterBuilder
from policy_adapter.utils.constants import (
    DEFAULT_DATABASE_NAME,
    MAINTENANCE_DATABASES,
    SQLALCHEMY_DIALECTS,
)
from policy_adapter.utils.exceptions import AdapterConstructionError
from policy_adapter.utils.models import mask_connection

# Existence check per SQLAlchemy backend name
DATABASE_EXISTS_QUERIES = {
    'mysql': "SELECT SCHEMA_NAME FROM INFORMATION_SCHEMA.SCHEMATA WHERE SCHEMA_NAME = :name",
    'postgresql': "SELECT 1 FROM pg_database WHERE datname = :name",
    'mssql': "SELECT 1 FROM sys.databases WHERE name = :name",
}


def build_database_url(driver_name, connection, db_specified):
    """Turn a driver name and connection string into a SQLAlchemy URL.

    Args:
        driver_name: Driver name ('mysql', 'postgres', 'mssql')
        connection: Full URL (``scheme://...``) or the part after ``scheme://``
        db_specified: When False the database is set to DEFAULT_DATABASE_NAME

    Returns:
        sqlalchemy.engine.URL

    Raises:
        AdapterConstructionError: If no dialect is known or the URL cannot be parsed
    """
    if '://' in connection:
        raw_url = connection
    else:
        dialect = SQLALCHEMY_DIALECTS.get(driver_name)
        if dialect is None:
            raise AdapterConstructionError(f"No SQL dialect known for driver '{driver_name}'")
        raw_url = f"{dialect}://{connection}"

    try:
        url = make_url(raw_url)
    except ArgumentError as e:
        raise AdapterConstructionError(
            f"Cannot parse connection string for driver '{driver_name}': {mask_connection(connection)}"
        ) from e

    if not db_specified:
        url = url.set(database=DEFAULT_DATABASE_NAME)
    return url


def ensure_database(url, engine_factory=create_engine):
    """Create url.database on the server if it does not exist yet.

    Backends without a maintenance database entry (e.g. sqlite) are skipped.
    """
    backend = url.get_backend_name()
    if backend not in MAINTENANCE_DATABASES:
        logging.debug("Skipping database creation for backend %s", backend)
        return False

    server_engine = engine_factory(
        url.set(database=MAINTENANCE_DATABASES[backend]),
        isolation_level="AUTOCOMMIT",
    )
    try:
        with server_engine.connect() as conn:
            exists = conn.execute(
                text(DATABASE_EXISTS_QUERIES[backend]), {"name": url.database}
            ).first() is not None
            if exists:
                return False
            logging.info("Creating database %s", url.database)
            quoted = conn.dialect.identifier_preparer.quote(url.database)
            conn.execute(text(f"CREATE DATABASE {quoted}"))
            return True
    finally:
        server_engine.dispose()


class SQLAlchemyAdapterBuilder(OrmAdapterBuilder):
    """Builds casbin's SQLAlchemy adapter for mysql, postgres and mssql."""

    def __init__(self, engine_factory=None, adapter_class=None):
        self.engine_factory = engine_factory or create_engine
        self.adapter_class = adapter_class or Adapter

    def build(self, driver_name, connection, db_specified):
        url = build_database_url(driver_name, connection, db_specified)
        logging.debug("Building %s adapter for %s", driver_name,
                      url.render_as_string(hide_password=True))

        if not db_specified:
            ensure_database(url, self.engine_factory)

        engine = self.engine_factory(url)
        try:
            return self.adapter_class(engine)
        except Exception:
            engine.dispose()
            raise
