"""User-facing message templates and entity formatting."""

from __future__ import annotations

from addressbook.model.person import EmergencyContact, Person

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_INVALID_EMERGENCY_CONTACT_DISPLAYED_INDEX = (
    "The emergency contact index provided is invalid"
)
MESSAGE_LAST_EMERGENCY_CONTACT_INDEX = (
    "Cannot delete the last emergency contact of a person"
)


def format_emergency_contact(contact: EmergencyContact) -> str:
    """Render one emergency contact for display.

    Args:
        contact: Emergency contact to render.

    Returns:
        Single-line rendering.
    """
    rendered = f"{contact.name}; Phone: {contact.phone}"
    if contact.relationship:
        rendered += f"; Relationship: {contact.relationship}"
    return rendered


def format_person(person: Person) -> str:
    """Render one person for display.

    Args:
        person: Person to render.

    Returns:
        Single-line rendering with every user-visible field.
    """
    tags = "".join(f"[{tag}]" for tag in person.tags)
    contacts = ", ".join(
        format_emergency_contact(contact) for contact in person.emergency_contacts
    )
    return (
        f"{person.name}; Phone: {person.phone}; Email: {person.email}; "
        f"Address: {person.address}; Tags: {tags}; "
        f"Emergency Contacts: {contacts}"
    )
