"""CLI setup and initialization functions."""
import argparse

from dotenv import load_dotenv
from rich.console import Console

from policy_adapter.cli.context import CliContext
from policy_adapter.utils.config import read_settings_from_yaml
from policy_adapter.utils.constants import SETTINGS_FILE_DEFAULT_PATH
from policy_adapter.utils.logger import setup_logging
from policy_adapter.utils.models import AdapterRequest


def _add_request_arguments(parser: argparse.ArgumentParser):
    """Add the adapter request options shared by resolve and check."""
    parser.add_argument(
        '-d', '--driver',
        dest='driver_name',
        default='',
        help='Driver name: file, mysql, postgres or mssql (default: from connection config)'
    )
    parser.add_argument(
        '--connect',
        dest='connect_string',
        default='',
        help='Connection string or policy file path (default: from connection config)'
    )
    parser.add_argument(
        '--db-specified',
        action='store_true',
        help='The connection string already names the database to use'
    )
    parser.add_argument(
        '--connection-config',
        help='Path to the JSON connection config (default: $CONNECTION_CONFIG_PATH or config/connection_config.json)'
    )


def parse_arguments(argv=None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='policy-adapter',
        description="Policy adapter factory - resolve connection settings and build storage adapters",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "-s", "--settings",
        default=SETTINGS_FILE_DEFAULT_PATH,
        help=f"Path to settings YAML file (default: {SETTINGS_FILE_DEFAULT_PATH})"
    )
    parser.add_argument(
        "--output-format",
        choices=['text', 'json'],
        default='text',
        help="Output format (default: text)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Subcommand: resolve
    resolve_parser = subparsers.add_parser(
        'resolve',
        help='Show the effective adapter settings',
        description='Merge the request options with the local connection config and show the result'
    )
    _add_request_arguments(resolve_parser)

    # Subcommand: check
    check_parser = subparsers.add_parser(
        'check',
        help='Build the adapter to verify the settings',
        description='Resolve the settings and construct the adapter, reporting success or the error'
    )
    _add_request_arguments(check_parser)

    # Subcommand: drivers
    subparsers.add_parser(
        'drivers',
        help='List supported driver names',
        description='List the driver names accepted by the adapter factory'
    )

    return parser.parse_args(argv)


def build_request(args) -> AdapterRequest:
    """Build an AdapterRequest from parsed arguments."""
    return AdapterRequest(
        driver_name=getattr(args, 'driver_name', '') or '',
        connect_string=getattr(args, 'connect_string', '') or '',
        db_specified=bool(getattr(args, 'db_specified', False)),
    )


def setup_environment(args) -> CliContext:
    """Load .env and settings, configure logging and return the CLI context.

    Raises:
        ConfigurationError: If the settings file is unreadable
    """
    # Placeholders in the connection config may come from .env
    load_dotenv()

    ctx = CliContext(
        console=Console(),
        verbose=args.verbose,
        json_output_mode=(args.output_format == 'json'),
        connection_config=getattr(args, 'connection_config', None),
    )
    ctx.log_verbose(f"Loading settings from {args.settings}")
    ctx.settings = read_settings_from_yaml(args.settings)
    setup_logging(ctx.settings)
    return ctx
