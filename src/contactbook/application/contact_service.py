"""Contact use cases: add, delete, edit, find, search, list, clear, undo and redo."""

import logging

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
    NoRedoAvailable,
    NoUndoAvailable,
    RecordNotFound,
    StoreError,
)
from contactbook.application.model import ContactBookModel
from contactbook.domain import (
    AddPerson,
    ClosenessRanked,
    DeletePerson,
    Person,
    PersonPredicate,
    ReplaceAll,
    ReplacePerson,
    ShowAll,
)
from contactbook.domain.predicates import SearchField

logger = logging.getLogger(__name__)


class ContactService:
    """Runs each contact command against the model and records it in history."""

    def __init__(self, model: ContactBookModel) -> None:
        self._model = model

    @property
    def model(self) -> ContactBookModel:
        return self._model

    def _same_person(self, person: Person) -> Person | None:
        for existing in self._model.get_address_book():
            if existing.is_same_person(person):
                return existing
        return None

    def add_contact(
        self, person: Person
    ) -> ContactAdded | DuplicatePerson | DuplicatePhone | DuplicateEmail | StoreError:
        """Check same person, then phone, then email; only then add and commit."""
        if person is None:
            return InvalidArgument("person is required")

        if self._model.has_person(person):
            return DuplicatePerson(existing=self._same_person(person))

        existing = self._model.find_person_with_same_phone_number(person)
        if existing is not None:
            return DuplicatePhone(existing=existing)

        existing = self._model.find_person_with_same_email(person)
        if existing is not None:
            return DuplicateEmail(existing=existing)

        result = self._model.add_person(person)
        if not isinstance(result, AddPerson):
            return result
        self._model.commit_address_book(result)
        logger.info("Added contact %s", person.name)
        return ContactAdded(person=person)

    def delete_contact(self, person: Person) -> ContactDeleted | StoreError:
        result = self._model.delete_person(person)
        if not isinstance(result, DeletePerson):
            return result
        self._model.commit_address_book(result)
        logger.info("Deleted contact %s", person.name)
        return ContactDeleted(person=person)

    def edit_contact(
        self, target: Person, edited: Person
    ) -> ContactEdited | DuplicatePerson | DuplicatePhone | DuplicateEmail | StoreError:
        """Replace target with edited. Conflicts with target itself are not conflicts."""
        if target is None or edited is None:
            return InvalidArgument("target and edited contact are required")
        if target not in self._model.get_address_book():
            return RecordNotFound(person=target)

        existing = self._same_person(edited)
        if existing is not None and existing != target:
            return DuplicatePerson(existing=existing)

        existing = self._model.find_person_with_same_phone_number(edited)
        if existing is not None and existing != target:
            return DuplicatePhone(existing=existing)

        existing = self._model.find_person_with_same_email(edited)
        if existing is not None and existing != target:
            return DuplicateEmail(existing=existing)

        result = self._model.set_person(target, edited)
        if not isinstance(result, ReplacePerson):
            return result
        self._model.commit_address_book(result)
        logger.info("Edited contact %s", target.name)
        return ContactEdited(target=target, edited=edited)

    def clear_contacts(self) -> ContactsCleared | StoreError:
        """Remove every contact as one undoable step."""
        result = self._model.set_address_book(())
        if not isinstance(result, ReplaceAll):
            return result
        self._model.commit_address_book(result)
        logger.info("Cleared %d contacts", len(result.previous))
        return ContactsCleared(removed=len(result.previous))

    def find_contacts(self, predicate: PersonPredicate) -> ContactsListed | InvalidArgument:
        invalid = self._model.update_filtered_person_list(predicate)
        if invalid is not None:
            return invalid
        return ContactsListed(persons=tuple(self._model.get_filtered_person_list()))

    def search_contacts(
        self,
        keyword: str,
        field: SearchField = "name",
        max_closeness: int | None = None,
    ) -> ContactsListed | InvalidArgument:
        """Fuzzy search on one field, best matches first."""
        try:
            predicate = ClosenessRanked(
                keyword=(keyword or "").strip(),
                field=field,
                max_closeness=max_closeness,
            )
        except ValueError as e:
            return InvalidArgument(reason=str(e))
        return self.find_contacts(predicate)

    def list_contacts(self) -> ContactsListed:
        return self.find_contacts(ShowAll())

    def undo(
        self, n: int = 1
    ) -> HistoryReplayed | NoUndoAvailable | InvalidArgument | StoreError:
        """Undo up to n commands.

        Fails if nothing at all could be undone: with the store's failure when
        the store rejected the replay, else NoUndoAvailable.
        """
        batch = self._model.undo_address_book_batch(n)
        return self._replayed(batch, n, NoUndoAvailable)

    def redo(
        self, n: int = 1
    ) -> HistoryReplayed | NoRedoAvailable | InvalidArgument | StoreError:
        """Redo up to n commands. Fails the same way undo does."""
        batch = self._model.redo_address_book_batch(n)
        return self._replayed(batch, n, NoRedoAvailable)

    def _replayed(self, batch, n: int, exhausted):
        if isinstance(batch, InvalidArgument):
            return batch
        if n > 0 and not batch.modifications:
            return batch.stopped_by if batch.stopped_by is not None else exhausted()
        self._model.update_filtered_person_list(ShowAll())
        return HistoryReplayed(
            modifications=batch.modifications,
            requested=n,
            stopped_by=batch.stopped_by,
        )
