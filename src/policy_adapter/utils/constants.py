"""Shared constants for the adapter factory.

Constants used across the factory, config resolution and CLI modules.
"""

# Connection config file location
CONFIG_FILE_DEFAULT_PATH = 'config/connection_config.json'
CONFIG_FILE_PATH_ENV_VAR = 'CONNECTION_CONFIG_PATH'

# Application settings (logging) location
SETTINGS_FILE_DEFAULT_PATH = 'config/settings.yaml'

# Driver names
FILE_DRIVER = 'file'
SUPPORTED_DRIVERS = ('file', 'mysql', 'postgres', 'mssql')

# SQLAlchemy dialect+driver used for each delegated driver name
SQLALCHEMY_DIALECTS = {
    'mysql': 'mysql+pymysql',
    'postgres': 'postgresql+psycopg2',
    'mssql': 'mssql+pyodbc',
}

# Database used when the connection string does not name one
DEFAULT_DATABASE_NAME = 'casbin'

# Database to connect to while creating DEFAULT_DATABASE_NAME
MAINTENANCE_DATABASES = {
    'mysql': 'information_schema',
    'postgresql': 'postgres',
    'mssql': 'master',
}


# Rich styles (used by CLI formatters)
class Style:  # pylint: disable=too-few-public-methods
    """Rich markup style constants."""
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    DIM = "dim"
    CYAN = "cyan"
    BOLD = "bold"
