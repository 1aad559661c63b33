#!/usr/bin/env python3
"""
Policy Adapter CLI Tool

Resolves the effective storage adapter settings for the policy engine
and builds the adapter to verify them.
"""

import json
import sys

from rich.console import Console

from policy_adapter.cli.cli_setup import parse_arguments, setup_environment
from policy_adapter.cli.context import CliContext
from policy_adapter.cli.operations import handle_check, handle_drivers, handle_resolve
from policy_adapter.utils.exceptions import (
    AdapterConstructionError,
    ConfigurationError,
    PolicyAdapterError,
    UnsupportedDriverError,
)

COMMAND_HANDLERS = {
    'resolve': handle_resolve,
    'check': handle_check,
    'drivers': handle_drivers,
}


def _handle_error(error, error_type, ctx, exit_code=1):
    """Handle error reporting for both JSON and console output modes."""
    if ctx.json_output_mode:
        print(json.dumps({"error": error_type, "message": str(error)}))
    else:
        ctx.console.print(f"[bold red]{error_type}:[/bold red] {error}")
        if ctx.verbose and hasattr(error, '__traceback__'):
            import traceback
            ctx.console.print(traceback.format_exc())
    sys.exit(exit_code)


def _handle_keyboard_interrupt(ctx):
    """Handle KeyboardInterrupt (Ctrl+C) gracefully."""
    if not ctx.json_output_mode:
        ctx.console.print("\n[yellow]Operation cancelled by user[/yellow]")
    sys.exit(130)


def main(argv=None):
    """Main CLI entry point."""
    args = parse_arguments(argv)

    # Minimal context for errors raised before setup completes
    ctx = CliContext(
        console=Console(),
        verbose=args.verbose,
        json_output_mode=(args.output_format == 'json')
    )

    handler = COMMAND_HANDLERS.get(args.command)
    if handler is None:
        ctx.console.print("[bold red]Error:[/bold red] No command given. Use one of: "
                          + ", ".join(COMMAND_HANDLERS))
        sys.exit(1)

    try:
        ctx = setup_environment(args)
        handler(args, ctx)

    except ConfigurationError as e:
        _handle_error(e, "Configuration Error", ctx)

    except UnsupportedDriverError as e:
        _handle_error(e, "Unsupported Driver", ctx)

    except AdapterConstructionError as e:
        _handle_error(e, "Adapter Error", ctx)

    except PolicyAdapterError as e:
        _handle_error(e, "Error", ctx)

    except KeyboardInterrupt:
        _handle_keyboard_interrupt(ctx)

    except Exception as e:  # pylint: disable=broad-exception-caught
        _handle_error(e, "Adapter Error", ctx)


if __name__ == "__main__":
    main()
