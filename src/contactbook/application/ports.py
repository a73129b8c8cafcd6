"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable, Iterable, Sequence
from typing import Protocol

from contactbook.application.dto import InvalidArgument, InvariantViolation, StoreError
from contactbook.domain import (
    AddPerson,
    DeletePerson,
    Modification,
    Person,
    PersonPredicate,
    ReplaceAll,
    ReplacePerson,
)


class AddressBookStore(Protocol):
    """Ordered set of contacts that keeps phone, email and same-person uniqueness."""

    def contains(self, person: Person) -> bool:
        """True if a stored contact is the same person."""
        ...

    def find_duplicate_phone(self, person: Person) -> Person | None:
        """Return another contact with the same normalized phone, or None."""
        ...

    def find_duplicate_email(self, person: Person) -> Person | None:
        """Return another contact with the same normalized email, or None."""
        ...

    def add(self, person: Person, index: int | None = None) -> AddPerson | StoreError:
        ...

    def delete(self, person: Person, index: int | None = None) -> DeletePerson | StoreError:
        ...

    def replace(self, target: Person, replacement: Person) -> ReplacePerson | StoreError:
        ...

    def replace_all(
        self, records: Iterable[Person]
    ) -> ReplaceAll | InvariantViolation | InvalidArgument:
        ...

    def apply(self, modification: Modification) -> Modification | StoreError:
        """Apply a modification (forward) and return the one actually applied."""
        ...

    def filtered_view(
        self,
        predicate: PersonPredicate,
        *,
        key: Callable[[Person], object] | None = None,
    ) -> Sequence[Person]:
        ...

    @property
    def persons(self) -> tuple[Person, ...]:
        ...
