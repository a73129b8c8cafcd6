"""Validate externally supplied address book snapshots into Person records.

The persistence layer owns the file format; it hands over plain data
shaped like {"persons": [{"name": ..., "phone": ..., ...}]}.
"""

from collections.abc import Mapping

from pydantic import BaseModel, Field

from contactbook.domain import Person


class PersonPayload(BaseModel):
    name: str
    phone: str
    email: str
    address: str = ""
    tags: list[str] = Field(default_factory=list)

    def to_person(self) -> Person:
        return Person(
            name=self.name,
            phone=self.phone,
            email=self.email,
            address=self.address,
            tags=frozenset(self.tags),
        )


class AddressBookSnapshot(BaseModel):
    persons: list[PersonPayload] = Field(default_factory=list)


def load_snapshot(data: Mapping) -> tuple[Person, ...]:
    """Return the snapshot's contacts in order.

    Raises pydantic.ValidationError for a malformed payload and ValueError
    for a contact the domain refuses (e.g. an email without "@").
    """
    snapshot = AddressBookSnapshot.model_validate(data)
    return tuple(payload.to_person() for payload in snapshot.persons)


def dump_snapshot(persons) -> dict:
    """Inverse of load_snapshot, for handing the current book back to persistence."""
    snapshot = AddressBookSnapshot(
        persons=[
            PersonPayload(
                name=p.name,
                phone=p.phone,
                email=p.email,
                address=p.address,
                tags=sorted(p.tags),
            )
            for p in persons
        ]
    )
    return snapshot.model_dump()
