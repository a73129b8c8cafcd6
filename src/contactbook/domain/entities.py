"""Domain entity: Person (one contact record)."""

from dataclasses import dataclass, field

from contactbook.domain.phone import normalize_email, normalize_phone


def _collapse(value: str) -> str:
    return " ".join(value.split())


@dataclass(frozen=True)
class Person:
    """
    A contact record. Value object: two Persons with equal fields are equal.
    Name keeps its case for display but compares case-insensitively.
    """

    name: str = field(default="")
    phone: str = field(default="")
    email: str = field(default="")
    address: str = field(default="")
    tags: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        name = _collapse(self.name or "")
        if not name:
            raise ValueError("Person name must be non-empty.")
        object.__setattr__(self, "name", name)

        phone = (self.phone or "").strip()
        if normalize_phone(phone) is None:
            raise ValueError("Person phone must contain at least one digit.")
        object.__setattr__(self, "phone", phone)

        email = (self.email or "").strip()
        local, sep, domain = email.partition("@")
        if not sep or not local or not domain or "@" in domain:
            raise ValueError("Person email must look like local@domain.")
        object.__setattr__(self, "email", email)

        object.__setattr__(self, "address", (self.address or "").strip())

        tags = frozenset(tag.strip() for tag in (self.tags or ()))
        for tag in tags:
            if not tag or len(tag.split()) != 1:
                raise ValueError("Person tags must be single, non-empty words.")
        object.__setattr__(self, "tags", tags)

    def normalized_phone(self, default_region: str | None = None) -> str | None:
        return normalize_phone(self.phone, default_region)

    @property
    def normalized_email(self) -> str | None:
        return normalize_email(self.email)

    def is_same_person(self, other: "Person") -> bool:
        """Same contact: names equal ignoring case."""
        if other is self:
            return True
        return other is not None and self.name.casefold() == other.name.casefold()

    def has_same_phone_number(
        self, other: "Person", default_region: str | None = None
    ) -> bool:
        if other is None:
            return False
        return self.normalized_phone(default_region) == other.normalized_phone(
            default_region
        )

    def has_same_email(self, other: "Person") -> bool:
        return other is not None and self.normalized_email == other.normalized_email
