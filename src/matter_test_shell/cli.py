"""CLI entry point using typer."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from matter_test_shell import __version__
from matter_test_shell.completion import candidates, complete as complete_keyword
from matter_test_shell.config import CONFIG_FILE, LOG_LEVELS, AppConfig, get_config, load_config, save_config
from matter_test_shell.grammar.parser import try_parse
from matter_test_shell.utils.formatting import describe_command, format_error, usage_text

app = typer.Typer(
    name="matter-test-shell",
    help="Parse and check Matter BLE test shell commands.",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)

COMMAND_SURFACE: list[tuple[str, str, str]] = [
    ("scan", "<N> seconds", "Scan for advertising devices"),
    ("exit", "", "Leave the shell"),
    ("quit", "", "Same as exit"),
    ("help", "", "Show available commands"),
    ("list", "", "List discovered devices"),
    ("test", "<N> index", "Run a connection test against a listed device"),
]


def _setup_logging(config: AppConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.logging.level.upper(), logging.WARNING)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    if config.logging.file:
        log_path = Path(config.logging.file).expanduser().resolve()
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(str(log_path)))
        except OSError as e:
            file_error = e
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )
    if file_error is not None:
        logger.warning("Cannot open log file %s: %s", config.logging.file, file_error)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Parse and check Matter BLE test shell commands."""
    _setup_logging(get_config(), verbose)


@app.command(context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False})
def parse(
    words: List[str] = typer.Argument(..., help="Command line to parse, e.g. 'scan 10'"),
    json_output: Optional[bool] = typer.Option(None, "--json/--text", help="Output format"),
) -> None:
    """Parse one command line."""
    config = get_config()
    line = " ".join(words)
    result = try_parse(line)

    if result.error is not None:
        console.print(f"[red]{escape(format_error(result.error))}[/red]", soft_wrap=True)
        if config.output.show_usage_on_error:
            console.print()
            console.print(escape(usage_text()))
        raise typer.Exit(1)

    command = result.command
    assert command is not None
    as_json = config.output.json if json_output is None else json_output
    if as_json:
        console.print_json(
            data={"command": command.keyword, "argument": command.argument, "text": command.to_text()}
        )
        return

    console.print(f"[green]{escape(command.to_text())}[/green]  {escape(describe_command(command))}", soft_wrap=True)


@app.command()
def check(
    path: str = typer.Argument(..., help="File with one command per line, or '-' for stdin"),
) -> None:
    """Check every line of a command file."""
    if path == "-":
        data = typer.get_binary_stream("stdin").read()
    else:
        file_path = Path(path).expanduser()
        if not file_path.is_file():
            console.print(f"[red]File not found: {escape(str(file_path))}[/red]")
            raise typer.Exit(1)
        try:
            data = file_path.read_bytes()
        except OSError as e:
            console.print(f"[red]Cannot read {escape(str(file_path))}: {escape(str(e))}[/red]")
            raise typer.Exit(1)
    content = data.decode("utf-8", errors="replace")

    table = Table(title="Command check")
    table.add_column("Line", justify="right", style="cyan")
    table.add_column("Input")
    table.add_column("Result")

    checked = 0
    failed = 0
    for lineno, raw in enumerate(content.splitlines(), start=1):
        stripped = raw.strip()
        if not stripped or stripped.startswith("#"):
            continue
        checked += 1
        result = try_parse(raw)
        if result.error is not None:
            failed += 1
            table.add_row(str(lineno), escape(stripped), f"[red]{result.error.kind}: {escape(result.error.message)}[/red]")
        else:
            assert result.command is not None
            table.add_row(str(lineno), escape(stripped), f"[green]{escape(describe_command(result.command))}[/green]")

    console.print(table)
    console.print(f"{checked} commands checked, {failed} failed")
    if failed:
        raise typer.Exit(1)


@app.command()
def commands() -> None:
    """Show the command surface."""
    table = Table(title="Commands")
    table.add_column("Keyword", style="cyan")
    table.add_column("Argument", style="green")
    table.add_column("Description")

    for keyword, argument, description in COMMAND_SURFACE:
        table.add_row(keyword, escape(argument), description)

    console.print(table)


@app.command()
def complete(
    prefix: str = typer.Argument("", help="Partial keyword"),
) -> None:
    """Complete a partial command keyword."""
    match = complete_keyword(prefix)
    if match is not None:
        console.print(match)
        return

    options = candidates(prefix)
    if not options:
        console.print(f"[yellow]No command starts with '{escape(prefix)}'.[/yellow]")
        raise typer.Exit(1)
    console.print(" ".join(options))


@app.command()
def config(
    key: str = typer.Argument(None, help="Config key (e.g., logging.level)"),
    value: str = typer.Argument(None, help="New value"),
) -> None:
    """View or modify configuration."""
    cfg = load_config()

    if key is None:
        table = Table(title="Configuration")
        table.add_column("Key", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("logging.level", cfg.logging.level)
        table.add_row("logging.file", cfg.logging.file or "(none)")
        table.add_row("output.json", str(cfg.output.json))
        table.add_row("output.show_usage_on_error", str(cfg.output.show_usage_on_error))

        console.print(table)
        if not CONFIG_FILE.exists():
            console.print("[dim]No config file, showing defaults.[/dim]")
        return

    if value is None:
        console.print("[red]Usage: matter-test-shell config <key> <value>[/red]")
        raise typer.Exit(1)

    parts = key.split(".")
    if len(parts) != 2:
        console.print("[red]Key format: section.key (e.g., logging.level)[/red]")
        raise typer.Exit(1)

    section, attr = parts
    section_map = {"logging": cfg.logging, "output": cfg.output}

    if section not in section_map:
        console.print(f"[red]Unknown section: {escape(section)}[/red]")
        raise typer.Exit(1)

    obj = section_map[section]
    if not hasattr(obj, attr):
        console.print(f"[red]Unknown key: {escape(key)}[/red]")
        raise typer.Exit(1)

    # Type coercion
    current = getattr(obj, attr)
    if isinstance(current, bool):
        typed_value: object = value.lower() in ("true", "1", "yes")
    elif key == "logging.level":
        if value.upper() not in LOG_LEVELS:
            console.print(f"[red]Invalid log level: {escape(value)} (one of {', '.join(LOG_LEVELS)})[/red]")
            raise typer.Exit(1)
        typed_value = value.upper()
    else:
        typed_value = value

    setattr(obj, attr, typed_value)
    save_config(cfg)
    logger.info("Config updated: %s = %s", key, typed_value)
    console.print(f"[green]{escape(key)} = {escape(str(typed_value))}[/green]")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"matter-test-shell v{__version__}")
    console.print(f"Python: {sys.version.split()[0]}")
    console.print(f"Config: {CONFIG_FILE}")


if __name__ == "__main__":
    app()
