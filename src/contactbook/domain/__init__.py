"""Domain layer: entities, modifications, predicates and scoring. No dependencies on outer layers."""

from contactbook.domain.closeness import compute_closeness, edit_distance
from contactbook.domain.entities import Person
from contactbook.domain.modifications import (
    AddPerson,
    DeletePerson,
    Modification,
    ReplaceAll,
    ReplacePerson,
)
from contactbook.domain.predicates import (
    ClosenessRanked,
    EmailEquals,
    NameEquals,
    PersonPredicate,
    PhoneEquals,
    ShowAll,
)

__all__ = [
    "AddPerson",
    "ClosenessRanked",
    "DeletePerson",
    "EmailEquals",
    "Modification",
    "NameEquals",
    "Person",
    "PersonPredicate",
    "PhoneEquals",
    "ReplaceAll",
    "ReplacePerson",
    "ShowAll",
    "compute_closeness",
    "edit_distance",
]
