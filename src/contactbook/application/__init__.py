"""Application layer: model, history, use cases, ports and result types. Depends only on domain."""

from contactbook.application.contact_service import ContactService
from contactbook.application.dto import (
    ContactAdded,
    ContactDeleted,
    ContactEdited,
    ContactsCleared,
    ContactsListed,
    DuplicateEmail,
    DuplicatePerson,
    DuplicatePhone,
    HistoryReplayed,
    InvalidArgument,
    InvariantViolation,
    NoRedoAvailable,
    NoUndoAvailable,
    RecordNotFound,
    ReplayBatch,
)
from contactbook.application.history import DEFAULT_HISTORY_LIMIT, ModificationHistory
from contactbook.application.model import ContactBookModel
from contactbook.application.ports import AddressBookStore

__all__ = [
    "AddressBookStore",
    "ContactAdded",
    "ContactBookModel",
    "ContactDeleted",
    "ContactEdited",
    "ContactService",
    "ContactsCleared",
    "ContactsListed",
    "DEFAULT_HISTORY_LIMIT",
    "DuplicateEmail",
    "DuplicatePerson",
    "DuplicatePhone",
    "HistoryReplayed",
    "InvalidArgument",
    "InvariantViolation",
    "ModificationHistory",
    "NoRedoAvailable",
    "NoUndoAvailable",
    "RecordNotFound",
    "ReplayBatch",
]
