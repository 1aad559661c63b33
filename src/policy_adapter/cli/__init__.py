"""CLI module for the policy-adapter tool."""

from policy_adapter.cli.cli_setup import parse_arguments, setup_environment
from policy_adapter.cli.context import CliContext
from policy_adapter.cli.operations import handle_check, handle_drivers, handle_resolve

__all__ = [
    'parse_arguments',
    'setup_environment',
    'CliContext',
    'handle_check',
    'handle_drivers',
    'handle_resolve',
]
