"""Result types. Failures are returned to the caller, never raised."""

from dataclasses import dataclass, field

from contactbook.domain import Modification, Person

# --- failures (store, history, model) ---


@dataclass(frozen=True)
class DuplicatePerson:
    """A contact considered the same person already exists."""

    existing: Person


@dataclass(frozen=True)
class DuplicatePhone:
    """Another contact already has this phone number."""

    existing: Person


@dataclass(frozen=True)
class DuplicateEmail:
    """Another contact already has this email address."""

    existing: Person


@dataclass(frozen=True)
class RecordNotFound:
    person: Person


@dataclass(frozen=True)
class InvariantViolation:
    """A mutation would break phone, email or same-person uniqueness.

    Reaching this means the caller skipped its duplicate checks.
    """

    reason: str
    conflicting: Person | None = None


@dataclass(frozen=True)
class NoUndoAvailable:
    pass


@dataclass(frozen=True)
class NoRedoAvailable:
    pass


@dataclass(frozen=True)
class InvalidArgument:
    """Missing or empty input (e.g. None person, negative count)."""

    reason: str


StoreError = DuplicatePerson | RecordNotFound | InvariantViolation | InvalidArgument


@dataclass(frozen=True)
class ReplayBatch:
    """Outcome of a bulk undo or redo.

    stopped_by is the store failure that ended the batch early, or None when
    the batch ran to n steps or ran out of history.
    """

    modifications: tuple[Modification, ...] = field(default_factory=tuple)
    stopped_by: StoreError | None = None


# --- contact service results ---


@dataclass(frozen=True)
class ContactAdded:
    person: Person


@dataclass(frozen=True)
class ContactDeleted:
    person: Person


@dataclass(frozen=True)
class ContactEdited:
    target: Person
    edited: Person


@dataclass(frozen=True)
class ContactsCleared:
    removed: int


@dataclass(frozen=True)
class ContactsListed:
    """The filtered list after a list, find or search."""

    persons: tuple[Person, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class HistoryReplayed:
    """Modifications undone or redone, in the order they were replayed."""

    modifications: tuple[Modification, ...] = field(default_factory=tuple)
    requested: int = 1
    stopped_by: StoreError | None = None
