"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.memory_repository import FilteredView, InMemoryAddressBook
from contactbook.infrastructure.snapshot import (
    AddressBookSnapshot,
    PersonPayload,
    dump_snapshot,
    load_snapshot,
)

__all__ = [
    "AddressBookSnapshot",
    "FilteredView",
    "InMemoryAddressBook",
    "PersonPayload",
    "dump_snapshot",
    "load_snapshot",
]
