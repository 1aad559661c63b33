"""Operation handlers for the CLI subcommands."""
from policy_adapter.cli.cli_setup import build_request
from policy_adapter.cli.formatters import (
    build_drivers_table, build_request_table, print_json, request_to_dict
)
from policy_adapter.utils.constants import Style


def handle_resolve(args, ctx, factory=None):
    """Show the effective settings for the request given on the command line.

    Returns:
        The resolved AdapterRequest
    """
    factory = factory or ctx.get_factory()
    resolved = factory.resolve(build_request(args))

    if ctx.json_output_mode:
        print_json(request_to_dict(resolved))
    else:
        ctx.console.print(build_request_table(resolved))
    return resolved


def handle_check(args, ctx, factory=None):
    """Build the adapter and report its type.

    Errors from resolution or construction propagate to the caller.

    Returns:
        The constructed adapter
    """
    factory = factory or ctx.get_factory()
    request = build_request(args)
    adapter = factory.new_adapter(request)
    # Re-resolve for display; new_adapter does not return the settings it used
    resolved = factory.resolve(request)
    ctx.log_verbose(f"Built adapter for driver '{resolved.driver_name}'")
    adapter_name = type(adapter).__name__

    if ctx.json_output_mode:
        data = request_to_dict(resolved)
        data['adapter'] = adapter_name
        data['status'] = 'ok'
        print_json(data)
    else:
        ctx.console.print(build_request_table(resolved))
        ctx.console.print(f"[{Style.GREEN}]✓ Adapter ready:[/{Style.GREEN}] {adapter_name}")
    return adapter


def handle_drivers(args, ctx, factory=None):
    """List the supported driver names."""
    factory = factory or ctx.get_factory()
    drivers = list(factory.supported_drivers)

    if ctx.json_output_mode:
        print_json({'drivers': drivers})
    else:
        ctx.console.print(build_drivers_table(drivers))
    return drivers
