"""In-memory address book store. Order preserved by insertion."""

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence

from contactbook.application.dto import (
    DuplicatePerson,
    InvalidArgument,
    InvariantViolation,
    RecordNotFound,
    StoreError,
)
from contactbook.domain import (
    AddPerson,
    DeletePerson,
    Modification,
    Person,
    PersonPredicate,
    ReplaceAll,
    ReplacePerson,
)

logger = logging.getLogger(__name__)


class FilteredView(Sequence):
    """Read-only view over the contacts matching a predicate.

    Re-evaluated on every pass, so it follows later mutations of the store.
    With key set, contacts are stably sorted by it (ties keep insertion order).
    """

    def __init__(
        self,
        source: Callable[[], Sequence[Person]],
        predicate: PersonPredicate,
        key: Callable[[Person], object] | None = None,
    ) -> None:
        self._source = source
        self._predicate = predicate
        self._key = key

    @property
    def predicate(self) -> PersonPredicate:
        return self._predicate

    def __iter__(self) -> Iterator[Person]:
        if self._key is None:
            return (p for p in tuple(self._source()) if self._predicate.matches(p))
        return iter(self._materialize())

    def _materialize(self) -> list[Person]:
        matching = [p for p in self._source() if self._predicate.matches(p)]
        if self._key is not None:
            matching.sort(key=self._key)
        return matching

    def __getitem__(self, index):
        return self._materialize()[index]

    def __len__(self) -> int:
        return len(self._materialize())

    def __repr__(self) -> str:
        return f"FilteredView({self._predicate!r}, {len(self)} contacts)"


class InMemoryAddressBook:
    """Stores contacts in memory and keeps phone, email and same-person uniqueness.

    Every mutation either fully succeeds, returning the Modification that
    describes it, or returns a failure and leaves the book unchanged.
    default_region is used when normalizing phone numbers for comparison.
    """

    def __init__(
        self,
        persons: Iterable[Person] = (),
        *,
        default_region: str | None = None,
    ) -> None:
        self._persons: list[Person] = []
        self._default_region = default_region
        result = self.replace_all(persons)
        if not isinstance(result, ReplaceAll):
            raise ValueError(f"Initial contacts are inconsistent: {result}")

    @property
    def persons(self) -> tuple[Person, ...]:
        return tuple(self._persons)

    def __len__(self) -> int:
        return len(self._persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(tuple(self._persons))

    # --- queries ---

    def contains(self, person: Person) -> bool:
        if person is None:
            return False
        return any(p.is_same_person(person) for p in self._persons)

    def find_duplicate_phone(self, person: Person) -> Person | None:
        if person is None:
            return None
        for existing in self._persons:
            if existing is not person and existing.has_same_phone_number(
                person, self._default_region
            ):
                return existing
        return None

    def find_duplicate_email(self, person: Person) -> Person | None:
        if person is None:
            return None
        for existing in self._persons:
            if existing is not person and existing.has_same_email(person):
                return existing
        return None

    def filtered_view(
        self,
        predicate: PersonPredicate,
        *,
        key: Callable[[Person], object] | None = None,
    ) -> FilteredView:
        return FilteredView(lambda: self._persons, predicate, key)

    # --- mutations ---

    def _conflict(
        self, candidate: Person, others: Iterable[Person]
    ) -> InvariantViolation | None:
        """First uniqueness rule candidate breaks against others, or None."""
        for other in others:
            if other.is_same_person(candidate):
                return InvariantViolation("same person already stored", other)
            if other.has_same_phone_number(candidate, self._default_region):
                return InvariantViolation("phone number already in use", other)
            if other.has_same_email(candidate):
                return InvariantViolation("email already in use", other)
        return None

    def _position(self, person: Person, hint: int | None) -> int | None:
        if hint is not None and 0 <= hint < len(self._persons):
            if self._persons[hint] == person:
                return hint
        for i, existing in enumerate(self._persons):
            if existing == person:
                return i
        return None

    def add(self, person: Person, index: int | None = None) -> AddPerson | StoreError:
        """Insert person (at index if given, else at the end)."""
        if person is None:
            return InvalidArgument("person is required")
        for existing in self._persons:
            if existing.is_same_person(person):
                logger.info("Rejected add of %s: same person exists", person.name)
                return DuplicatePerson(existing)
        conflict = self._conflict(person, self._persons)
        if conflict is not None:
            logger.info("Rejected add of %s: %s", person.name, conflict.reason)
            return conflict

        if index is None or not 0 <= index <= len(self._persons):
            index = len(self._persons)
        self._persons.insert(index, person)
        logger.debug("Added %s at %d", person.name, index)
        return AddPerson(person=person, index=index)

    def delete(
        self, person: Person, index: int | None = None
    ) -> DeletePerson | StoreError:
        """Remove exactly one contact equal to person."""
        if person is None:
            return InvalidArgument("person is required")
        position = self._position(person, index)
        if position is None:
            return RecordNotFound(person)
        del self._persons[position]
        logger.debug("Deleted %s from %d", person.name, position)
        return DeletePerson(person=person, index=position)

    def replace(
        self, target: Person, replacement: Person
    ) -> ReplacePerson | StoreError:
        """Swap target for replacement in place; uniqueness is checked against everyone else."""
        if target is None or replacement is None:
            return InvalidArgument("target and replacement are required")
        position = self._position(target, None)
        if position is None:
            return RecordNotFound(target)
        others = self._persons[:position] + self._persons[position + 1 :]
        conflict = self._conflict(replacement, others)
        if conflict is not None:
            logger.info("Rejected edit of %s: %s", target.name, conflict.reason)
            return conflict
        self._persons[position] = replacement
        logger.debug("Replaced %s with %s", target.name, replacement.name)
        return ReplacePerson(target=target, replacement=replacement)

    def replace_all(
        self, records: Iterable[Person]
    ) -> ReplaceAll | InvariantViolation | InvalidArgument:
        """Overwrite the whole book. The incoming set is validated before anything changes."""
        if records is None:
            return InvalidArgument("records are required")
        incoming: list[Person] = []
        for person in records:
            if person is None:
                return InvalidArgument("records must not contain None")
            conflict = self._conflict(person, incoming)
            if conflict is not None:
                logger.info("Rejected bulk replace: %s", conflict.reason)
                return conflict
            incoming.append(person)
        previous = tuple(self._persons)
        self._persons = incoming
        logger.debug("Replaced all contacts: %d -> %d", len(previous), len(incoming))
        return ReplaceAll(previous=previous, records=tuple(incoming))

    def apply(self, modification: Modification) -> Modification | StoreError:
        if isinstance(modification, AddPerson):
            return self.add(modification.person, modification.index)
        if isinstance(modification, DeletePerson):
            return self.delete(modification.person, modification.index)
        if isinstance(modification, ReplacePerson):
            return self.replace(modification.target, modification.replacement)
        if isinstance(modification, ReplaceAll):
            return self.replace_all(modification.records)
        return InvalidArgument(f"unknown modification: {modification!r}")
