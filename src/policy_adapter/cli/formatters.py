"""Formatters for displaying resolved adapter settings."""
import json
from typing import Dict, Iterable

from rich.markup import escape
from rich.table import Table

from policy_adapter.utils.constants import Style
from policy_adapter.utils.models import AdapterRequest, mask_connection


def request_to_dict(request: AdapterRequest) -> Dict:
    """Convert a resolved request to a display dict with the connection masked."""
    return {
        'driver': request.driver_name,
        'connection': mask_connection(request.connect_string),
        'db_specified': request.db_specified,
        'enforcer': request.enforcer,
    }


def build_request_table(request: AdapterRequest, title: str = "Effective Adapter Settings") -> Table:
    """Build a two-column Rich table for a resolved request."""
    table = Table(title=title, show_header=True, header_style=Style.BOLD)
    table.add_column("Setting", style=Style.CYAN)
    table.add_column("Value")

    for key, value in request_to_dict(request).items():
        if value == "":
            value = f"[{Style.DIM}](empty)[/{Style.DIM}]"
        else:
            value = escape(str(value))
        table.add_row(key, value)
    return table


def build_drivers_table(drivers: Iterable[str]) -> Table:
    """Build a Rich table listing supported driver names."""
    table = Table(title="Supported Drivers", show_header=True, header_style=Style.BOLD)
    table.add_column("Driver", style=Style.CYAN)
    table.add_column("Adapter")
    for driver in drivers:
        table.add_row(driver, "policy file" if driver == 'file' else "SQLAlchemy")
    return table


def print_json(data: Dict) -> None:
    """Print data as indented JSON on stdout."""
    print(json.dumps(data, indent=2))
