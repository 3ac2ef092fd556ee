"""Command-line interface for MCP Soul."""

import asyncio
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console

from .config.settings import Settings
from .core.server import SoulServer
from .models.memory import DEFAULT_MEMORY_FILENAME

app = typer.Typer(
    name="mcp-soul",
    help="MCP Soul - persistent markdown memory for MCP clients",
    add_completion=False,
)
# stdout belongs to the stdio transport
console = Console(stderr=True)

STARTER_SOUL = """# soul.md

## About the human

## Ongoing projects

## Conversation log
"""


@app.command("server")
def run_server(
    transport: str = typer.Option(
        "stdio", "--transport", "-t", help="Transport: stdio, sse or streamable-http"
    ),
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Host to bind to (HTTP transports)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to bind to (HTTP transports)"),
    memory_dir: Optional[Path] = typer.Option(
        None, "--memory-dir", "-m", help="Memory directory (overrides CLAUDE_MEMORY_DIR)"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Start the MCP Soul server."""
    overrides: Dict[str, Any] = {"MCP_TRANSPORT": transport}
    if host is not None:
        overrides["SERVER_HOST"] = host
    if port is not None:
        overrides["SERVER_PORT"] = port
    if memory_dir is not None:
        overrides["MEMORY_DIR"] = memory_dir
    if debug:
        overrides["DEBUG"] = True
        overrides["LOG_LEVEL"] = "DEBUG"

    try:
        settings = Settings(**overrides)
        console.print(
            f"[green]Starting MCP Soul server ({settings.MCP_TRANSPORT}), "
            f"memory directory {settings.MEMORY_DIR}[/green]"
        )

        server = SoulServer(settings)
        asyncio.run(server.run())

    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped by user[/yellow]")
    except Exception as e:
        console.print(f"[red]Error starting server: {e}[/red]")
        sys.exit(1)


@app.command("init")
def init_memory(
    directory: Optional[Path] = typer.Argument(
        None, help="Memory directory to initialize (default: CLAUDE_MEMORY_DIR or ~/.claude-memory)"
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing soul.md"),
) -> None:
    """Create the memory directory and a starter soul.md."""
    directory = (directory or Settings().MEMORY_DIR).expanduser().resolve()

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        console.print(f"[red]Cannot create memory directory {directory}: {e}[/red]")
        sys.exit(1)

    soul_file = directory / DEFAULT_MEMORY_FILENAME
    if soul_file.exists() and not force:
        console.print(f"[yellow]Memory file already exists: {soul_file}[/yellow]")
        console.print("Use --force to overwrite")
        return

    soul_file.write_text(STARTER_SOUL, encoding="utf-8")
    console.print(f"[green]Initialized memory directory {directory}[/green]")
    console.print(f"Memory file: {soul_file}")


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"MCP Soul version {__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
