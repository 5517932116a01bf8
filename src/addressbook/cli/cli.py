"""Typer CLI entrypoint for the address book."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import click
import typer
from rich.console import Console

from addressbook.cli.bootstrap import (
    build_model,
    configure_logging,
    load_config,
    persist_model,
)
from addressbook.cli.rendering import CliRenderer
from addressbook.commands.registry import CommandRegistry
from addressbook.commands.types import CommandStatus
from addressbook.model import ModelManager
from addressbook.storage import AddressBookStorage

app = typer.Typer(help="Address book CLI")
_CONSOLE = Console()
_RENDERER = CliRenderer(console=_CONSOLE)

ConfigFileOption = Annotated[
    Path | None,
    typer.Option(
        file_okay=True,
        dir_okay=False,
        help="Path to address book config YAML/JSON file.",
    ),
]
DataFileOption = Annotated[
    Path | None,
    typer.Option(
        file_okay=True,
        dir_okay=False,
        help="Path to address book JSON data file.",
    ),
]


def _prepare(
    config_file: Path | None, data_file: Path | None
) -> tuple[ModelManager, AddressBookStorage]:
    """Load config, configure logging, and build the model.

    Args:
        config_file: Optional config path override.
        data_file: Optional data file override.

    Returns:
        Loaded model and the storage it was read from.
    """
    config = load_config(config_file, console=_CONSOLE)
    configure_logging(config.log_level)
    storage = AddressBookStorage(data_file or Path(config.data_file))
    model = build_model(storage, seed=config.seed_sample_data, console=_CONSOLE)
    return model, storage


def _execute_line(
    text: str,
    *,
    registry: CommandRegistry,
    model: ModelManager,
    storage: AddressBookStorage,
) -> int:
    """Execute one input line, persist on success, and render the result.

    Args:
        text: Raw input line.
        registry: Command registry.
        model: Model to run against.
        storage: Storage receiving the model after a successful command.

    Returns:
        Process exit code.
    """
    result = registry.execute(text, model)
    if result.status == CommandStatus.OK:
        persist_model(model, storage, console=_CONSOLE)
    _RENDERER.render(result)
    return 0 if result.status == CommandStatus.OK else 1


@app.command("run")
def run_command(
    text: Annotated[str, typer.Argument(help="Single command line to execute.")],
    config_file: ConfigFileOption = None,
    data_file: DataFileOption = None,
) -> None:
    """Execute one command line, e.g. `delete 2 1`.

    Args:
        text: Raw command line.
        config_file: Optional config file path override.
        data_file: Optional data file path override.

    Raises:
        Exit: Raised with command status code for shell integration.
    """
    model, storage = _prepare(config_file, data_file)
    exit_code = _execute_line(
        text,
        registry=CommandRegistry(),
        model=model,
        storage=storage,
    )
    raise typer.Exit(code=exit_code)


@app.command("list")
def list_command(
    config_file: ConfigFileOption = None,
    data_file: DataFileOption = None,
) -> None:
    """Show displayed persons with the indices `delete` refers to.

    Args:
        config_file: Optional config file path override.
        data_file: Optional data file path override.
    """
    model, _ = _prepare(config_file, data_file)
    _RENDERER.render_persons(model.get_filtered_person_list())


@app.command("repl")
def repl_command(
    config_file: ConfigFileOption = None,
    data_file: DataFileOption = None,
) -> None:
    """Run an interactive session against the address book.

    Args:
        config_file: Optional config file path override.
        data_file: Optional data file path override.
    """
    model, storage = _prepare(config_file, data_file)
    registry = CommandRegistry()
    _CONSOLE.print(
        "Address book REPL. Type delete INDEX [EMERGENCY_CONTACT_INDEX], "
        "list, or 'exit'.",
        style="cyan",
    )
    while True:
        try:
            raw = typer.prompt("addressbook")
        except (EOFError, KeyboardInterrupt, click.Abort):
            _CONSOLE.print("\nbye", style="yellow")
            break

        text = raw.strip()
        if text.lower() in {"exit", "quit"}:
            _CONSOLE.print("bye", style="yellow")
            break
        if not text:
            continue
        if text.lower() == "list":
            _RENDERER.render_persons(model.get_filtered_person_list())
            continue
        _execute_line(
            text,
            registry=registry,
            model=model,
            storage=storage,
        )


def main() -> None:
    """Console script entrypoint."""
    app()
