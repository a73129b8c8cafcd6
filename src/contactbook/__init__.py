"""
Contactbook core: clean-architecture layout.

- domain: Person, modifications, predicates, closeness scoring. No outer dependencies.
- application: model (context object), modification history, use cases (ContactService), ports, results.
- infrastructure: adapters (InMemoryAddressBook, snapshot validation).
"""

from contactbook.application import (
    ContactAdded,
    ContactBookModel,
    ContactDeleted,
    ContactEdited,
    ContactsCleared,
    ContactsListed,
    ContactService,
    DuplicateEmail,
    DuplicatePerson,
    DuplicatePhone,
    HistoryReplayed,
    InvalidArgument,
    InvariantViolation,
    ModificationHistory,
    NoRedoAvailable,
    NoUndoAvailable,
    RecordNotFound,
)
from contactbook.domain import (
    AddPerson,
    ClosenessRanked,
    DeletePerson,
    EmailEquals,
    NameEquals,
    Person,
    PhoneEquals,
    ReplaceAll,
    ReplacePerson,
    ShowAll,
    compute_closeness,
    edit_distance,
)
from contactbook.infrastructure import InMemoryAddressBook, load_snapshot

__all__ = [
    "AddPerson",
    "ClosenessRanked",
    "ContactAdded",
    "ContactBookModel",
    "ContactDeleted",
    "ContactEdited",
    "ContactService",
    "ContactsCleared",
    "ContactsListed",
    "DeletePerson",
    "DuplicateEmail",
    "DuplicatePerson",
    "DuplicatePhone",
    "EmailEquals",
    "HistoryReplayed",
    "InMemoryAddressBook",
    "InvalidArgument",
    "InvariantViolation",
    "ModificationHistory",
    "NameEquals",
    "NoRedoAvailable",
    "NoUndoAvailable",
    "Person",
    "PhoneEquals",
    "RecordNotFound",
    "ReplaceAll",
    "ReplacePerson",
    "ShowAll",
    "compute_closeness",
    "edit_distance",
    "load_snapshot",
]
