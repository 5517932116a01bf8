"""CLI result rendering and Rich views."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from addressbook.commands.types import CommandResult, CommandStatus
from addressbook.messages import format_emergency_contact
from addressbook.model.person import Person


class CliRenderer:
    """Render command results and person lists with Rich structures."""

    def __init__(self, *, console: Console) -> None:
        """Store console used for rendering.

        Args:
            console: Rich console used for output rendering.
        """
        self._console = console

    def render(self, result: CommandResult) -> None:
        """Render one command result.

        Args:
            result: Structured command result.
        """
        if result.status == CommandStatus.OK:
            self._console.print(
                Panel(
                    result.message,
                    title=f"Address Book [{result.code}]",
                    border_style="green",
                    expand=True,
                )
            )
            return
        self._console.print(
            Panel(
                result.message,
                title=f"Error [{result.code}]",
                border_style="bold red",
                expand=True,
            )
        )

    def render_persons(self, persons: tuple[Person, ...]) -> None:
        """Render displayed persons with one-based indices.

        Args:
            persons: Persons in display order.
        """
        if not persons:
            self._console.print("[yellow]No persons to display.[/yellow]")
            return
        table = Table(title="Persons", show_header=True, header_style="bold cyan")
        table.add_column("#", style="green", no_wrap=True)
        table.add_column("Name", style="bold", no_wrap=True)
        table.add_column("Phone", no_wrap=True)
        table.add_column("Email")
        table.add_column("Tags", style="magenta")
        table.add_column("Emergency Contacts")
        for number, person in enumerate(persons, start=1):
            contacts = "\n".join(
                f"{position}. {format_emergency_contact(contact)}"
                for position, contact in enumerate(person.emergency_contacts, start=1)
            )
            table.add_row(
                str(number),
                person.name,
                person.phone,
                person.email,
                ", ".join(person.tags),
                contacts,
            )
        self._console.print(table)
