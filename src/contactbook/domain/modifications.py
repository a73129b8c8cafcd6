"""Modifications: immutable, reversible records of one accepted address book mutation.

Each variant carries what it needs to compute its own inverse. Positions are
recorded so that undoing a delete puts the contact back where it was.
"""

from dataclasses import dataclass
from typing import Union

from contactbook.domain.entities import Person


@dataclass(frozen=True)
class AddPerson:
    person: Person
    index: int | None = None

    def inverse(self) -> "DeletePerson":
        return DeletePerson(person=self.person, index=self.index)

    def describe(self) -> str:
        return f"add {self.person.name}"


@dataclass(frozen=True)
class DeletePerson:
    person: Person
    index: int | None = None

    def inverse(self) -> AddPerson:
        return AddPerson(person=self.person, index=self.index)

    def describe(self) -> str:
        return f"delete {self.person.name}"


@dataclass(frozen=True)
class ReplacePerson:
    target: Person
    replacement: Person

    def inverse(self) -> "ReplacePerson":
        return ReplacePerson(target=self.replacement, replacement=self.target)

    def describe(self) -> str:
        return f"edit {self.target.name}"


@dataclass(frozen=True)
class ReplaceAll:
    """Whole-book overwrite (clear, snapshot load). previous is the book before."""

    previous: tuple[Person, ...]
    records: tuple[Person, ...]

    def inverse(self) -> "ReplaceAll":
        return ReplaceAll(previous=self.records, records=self.previous)

    def describe(self) -> str:
        return f"replace all contacts ({len(self.records)} now)"


Modification = Union[AddPerson, DeletePerson, ReplacePerson, ReplaceAll]
