"""CLI bootstrap helpers: logging, config, and model loading."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from addressbook.config import (
    AddressBookConfig,
    GlobalConfigError,
    LogLevel,
    load_global_config,
)
from addressbook.model import AddressBook, ModelManager, sample_address_book
from addressbook.storage import AddressBookStorage, AddressBookStorageError

_LOGGING_CONFIGURED = False


def configure_logging(level: LogLevel = LogLevel.INFO) -> None:
    """Configure Rich-backed logging once for CLI commands.

    Args:
        level: Root logging level.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=level.to_logging(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
    )
    _LOGGING_CONFIGURED = True


def default_config_file() -> Path:
    """Return default config path, preferring YAML over JSON.

    Returns:
        Config file path under the current working directory.
    """
    root = Path.cwd() / ".addressbook"
    yaml_path = root / "config.yaml"
    json_path = root / "config.json"
    if not yaml_path.exists() and json_path.exists():
        return json_path
    return yaml_path


def load_config(config_file: Path | None, *, console: Console) -> AddressBookConfig:
    """Load config, falling back to defaults when the file is invalid.

    Args:
        config_file: Optional config path override.
        console: Console for user-visible warnings.

    Returns:
        Effective config.
    """
    effective_config_file = config_file or default_config_file()
    try:
        return load_global_config(effective_config_file)
    except GlobalConfigError as exc:
        console.print(
            f"[yellow]Config at {effective_config_file} is invalid; "
            "falling back to defaults.[/yellow]"
        )
        console.print(f"[yellow]Reason: {exc}[/yellow]")
        return AddressBookConfig()


def build_model(
    storage: AddressBookStorage, *, seed: bool, console: Console
) -> ModelManager:
    """Build model from stored data, seeding or recovering as needed.

    Args:
        storage: Storage bound to the address book data file.
        seed: Whether a missing file starts from sample data.
        console: Console for user-visible warnings.

    Returns:
        Model over the loaded address book.
    """
    try:
        return ModelManager(storage.read())
    except FileNotFoundError:
        address_book = sample_address_book() if seed else AddressBook()
    except AddressBookStorageError as exc:
        backup = storage.quarantine()
        if backup is not None:
            console.print(
                f"[yellow]Address book file was invalid. Moved to {backup}.[/yellow]"
            )
        console.print(f"[yellow]Reason: {exc}[/yellow]")
        address_book = AddressBook()
    model = ModelManager(address_book)
    persist_model(model, storage, console=console)
    return model


def persist_model(
    model: ModelManager, storage: AddressBookStorage, *, console: Console
) -> None:
    """Persist model with best-effort user-visible error reporting.

    Args:
        model: Model to persist.
        storage: Storage bound to the address book data file.
        console: Console for user-visible errors.
    """
    try:
        storage.write(model.address_book)
    except OSError as exc:
        console.print(
            "[bold red]Failed to save address book to "
            f"{storage.data_file}: {exc}[/bold red]"
        )
