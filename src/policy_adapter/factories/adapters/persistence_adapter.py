from abc import ABC, abstractmethod


class FileAdapterBuilder(ABC):
    """Builds a policy adapter backed by a policy file."""

    @abstractmethod
    def build(self, path):
        """Return an adapter that loads and saves policy rules at path."""
        pass


class OrmAdapterBuilder(ABC):
    """Builds a policy adapter backed by a SQL database."""

    @abstractmethod
    def build(self, driver_name, connection, db_specified):
        """Return an adapter for the database described by connection.

        Args:
            driver_name: Driver name ('mysql', 'postgres', 'mssql')
            connection: Connection string for the driver
            db_specified: Whether connection already names the database to use

        Errors raised while connecting propagate unchanged.
        """
        pass
