"""Filter predicates for the contact list.

A closed set of variants sharing one capability, ``matches(person)``.
Only one predicate is active on a view at a time.
"""

from dataclasses import dataclass
from typing import Literal, Union

from contactbook.domain.closeness import compute_closeness
from contactbook.domain.entities import Person
from contactbook.domain.phone import normalize_email, normalize_phone

SearchField = Literal["name", "email", "address", "tags"]


@dataclass(frozen=True)
class ShowAll:
    """Matches every contact. Default filter of the model."""

    def matches(self, person: Person) -> bool:
        return True


@dataclass(frozen=True)
class NameEquals:
    """Full name equality, ignoring case. Not fuzzy."""

    name: str

    def matches(self, person: Person) -> bool:
        return person.name.casefold() == " ".join(self.name.split()).casefold()


@dataclass(frozen=True)
class PhoneEquals:
    phone: str
    default_region: str | None = None

    def matches(self, person: Person) -> bool:
        wanted = normalize_phone(self.phone, self.default_region)
        return wanted is not None and person.normalized_phone(
            self.default_region
        ) == wanted


@dataclass(frozen=True)
class EmailEquals:
    email: str

    def matches(self, person: Person) -> bool:
        wanted = normalize_email(self.email)
        return wanted is not None and person.normalized_email == wanted


def _field_text(person: Person, search_field: SearchField) -> str:
    if search_field == "tags":
        return " ".join(sorted(person.tags))
    return getattr(person, search_field)


@dataclass(frozen=True)
class ClosenessRanked:
    """
    Fuzzy search on one field. Contacts are ordered by closeness (best first);
    with max_closeness set, contacts scoring above it are filtered out.
    """

    keyword: str
    field: SearchField = "name"
    max_closeness: int | None = None

    def __post_init__(self):
        if not self.keyword or not self.keyword.strip():
            raise ValueError("Search keyword must be non-empty.")
        if self.field not in ("name", "email", "address", "tags"):
            raise ValueError(f"Unknown search field: {self.field!r}")
        if self.max_closeness is not None and self.max_closeness < 0:
            raise ValueError("max_closeness must be >= 0.")

    def score(self, person: Person) -> int:
        return compute_closeness(_field_text(person, self.field), self.keyword)

    def matches(self, person: Person) -> bool:
        if self.max_closeness is None:
            return True
        return self.score(person) <= self.max_closeness


PersonPredicate = Union[ShowAll, NameEquals, PhoneEquals, EmailEquals, ClosenessRanked]
