"""ContactBookModel: the context object command handlers work against.

One instance owns one store, its modification history and the current
filtered view. It is built at the composition point and passed down;
nothing here is global.
"""

from collections.abc import Iterable, Sequence

from contactbook.application.dto import (
    InvalidArgument,
    InvariantViolation,
    NoRedoAvailable,
    NoUndoAvailable,
    ReplayBatch,
    StoreError,
)
from contactbook.application.history import DEFAULT_HISTORY_LIMIT, ModificationHistory
from contactbook.application.ports import AddressBookStore
from contactbook.domain import (
    AddPerson,
    ClosenessRanked,
    DeletePerson,
    Modification,
    Person,
    PersonPredicate,
    ReplaceAll,
    ReplacePerson,
    ShowAll,
)


class ContactBookModel:
    def __init__(
        self,
        store: AddressBookStore,
        *,
        history_limit: int | None = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self._store = store
        self._history = ModificationHistory(store, max_size=history_limit)
        self._filtered = store.filtered_view(ShowAll())

    @property
    def history(self) -> ModificationHistory:
        return self._history

    # --- mutators ---

    def add_person(self, person: Person) -> AddPerson | StoreError:
        return self._store.add(person)

    def delete_person(self, person: Person) -> DeletePerson | StoreError:
        return self._store.delete(person)

    def set_person(self, target: Person, edited: Person) -> ReplacePerson | StoreError:
        return self._store.replace(target, edited)

    def set_address_book(
        self, snapshot: Iterable[Person]
    ) -> ReplaceAll | InvariantViolation | InvalidArgument:
        return self._store.replace_all(snapshot)

    # --- queries ---

    def has_person(self, person: Person) -> bool:
        return self._store.contains(person)

    def find_person_with_same_phone_number(self, person: Person) -> Person | None:
        return self._store.find_duplicate_phone(person)

    def find_person_with_same_email(self, person: Person) -> Person | None:
        return self._store.find_duplicate_email(person)

    def get_filtered_person_list(self) -> Sequence[Person]:
        return self._filtered

    def update_filtered_person_list(
        self, predicate: PersonPredicate
    ) -> InvalidArgument | None:
        """Show only contacts matching predicate; closeness searches are ordered best first."""
        if predicate is None:
            return InvalidArgument("predicate is required")
        key = predicate.score if isinstance(predicate, ClosenessRanked) else None
        self._filtered = self._store.filtered_view(predicate, key=key)
        return None

    def get_address_book(self) -> tuple[Person, ...]:
        return self._store.persons

    # --- history ---

    def commit_address_book(self, modification: Modification) -> InvalidArgument | None:
        return self._history.commit(modification)

    def undo_address_book(self) -> Modification | NoUndoAvailable | StoreError:
        return self._history.undo()

    def redo_address_book(self) -> Modification | NoRedoAvailable | StoreError:
        return self._history.redo()

    def undo_address_book_multiple(self, n: int) -> list[Modification] | InvalidArgument:
        return self._history.undo_multiple(n)

    def redo_address_book_multiple(self, n: int) -> list[Modification] | InvalidArgument:
        return self._history.redo_multiple(n)

    def undo_address_book_batch(self, n: int) -> ReplayBatch | InvalidArgument:
        return self._history.undo_batch(n)

    def redo_address_book_batch(self, n: int) -> ReplayBatch | InvalidArgument:
        return self._history.redo_batch(n)
