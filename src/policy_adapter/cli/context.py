"""CLI context: console, output mode and the adapter factory settings."""
from dataclasses import dataclass, field
from typing import Dict, Optional

from rich.console import Console

from policy_adapter.factories.adapter_factory import AdapterFactory


@dataclass
class CliContext:
    """State shared by the CLI command handlers.

    Attributes:
        console: Rich Console instance for output
        verbose: Whether verbose output is enabled
        json_output_mode: Whether JSON output mode is active
        settings: Application settings loaded from YAML
        connection_config: Explicit connection config path, None to use
            CONNECTION_CONFIG_PATH or the default
        factory: AdapterFactory used by the handlers, built on first use
    """
    console: Console
    verbose: bool = False
    json_output_mode: bool = False
    settings: Dict = field(default_factory=dict)
    connection_config: Optional[str] = None
    factory: Optional[AdapterFactory] = None

    def get_factory(self) -> AdapterFactory:
        """Return the adapter factory, creating one for connection_config if needed."""
        if self.factory is None:
            self.factory = AdapterFactory(config_path=self.connection_config)
        return self.factory

    def log_verbose(self, message: str):
        """Print a dimmed message when verbose text output is on."""
        if self.verbose and not self.json_output_mode:
            self.console.print(f"[dim]{message}[/dim]")
