"""Unit tests for ContactService and ContactBookModel. In-memory store only."""

from contactbook.application import (
    ContactAdded,
    ContactBookModel,
    ContactDeleted,
    ContactEdited,
    ContactsCleared,
    ContactsListed,
    ContactService,
    DuplicateEmail,
    DuplicatePerson,
    DuplicatePhone,
    HistoryReplayed,
    InvalidArgument,
    InvariantViolation,
    NoRedoAvailable,
    NoUndoAvailable,
    RecordNotFound,
)
from contactbook.domain import AddPerson, EmailEquals, NameEquals, Person, PhoneEquals
from contactbook.infrastructure import InMemoryAddressBook


def _service() -> ContactService:
    return ContactService(ContactBookModel(InMemoryAddressBook()))


def _person(name: str, phone: str, email: str | None = None) -> Person:
    email = email or f"{name.split()[0].lower()}@example.com"
    return Person(name=name, phone=phone, email=email)


ALICE = _person("Alice Pauline", "94351253")
BOB = _person("Bob Choo", "22222222")
CARL = _person("Carl Kurz", "95352563")


def test_add_then_list() -> None:
    service = _service()
    assert service.add_contact(ALICE) == ContactAdded(person=ALICE)
    assert service.list_contacts() == ContactsListed(persons=(ALICE,))


def test_duplicate_phone_scenario_with_undo_and_redo() -> None:
    service = _service()
    a = _person("A", "111", "a@example.com")
    b = _person("B", "111", "b@example.com")

    assert isinstance(service.add_contact(a), ContactAdded)
    result = service.add_contact(b)
    assert result == DuplicatePhone(existing=a)
    assert service.model.get_address_book() == (a,)

    assert isinstance(service.undo(), HistoryReplayed)
    assert service.model.get_address_book() == ()
    assert isinstance(service.redo(), HistoryReplayed)
    assert service.model.get_address_book() == (a,)


def test_duplicate_email_reports_conflicting_contact() -> None:
    service = _service()
    service.add_contact(ALICE)
    result = service.add_contact(_person("Someone Else", "1234", "Alice@Example.com"))
    assert result == DuplicateEmail(existing=ALICE)
    assert service.model.get_address_book() == (ALICE,)


def test_same_person_checked_before_phone_and_email() -> None:
    service = _service()
    service.add_contact(ALICE)
    clone = _person("alice pauline", "94351253")
    assert service.add_contact(clone) == DuplicatePerson(existing=ALICE)


def test_phone_checked_before_email() -> None:
    service = _service()
    service.add_contact(ALICE)
    both = _person("Zed", "94351253", "alice@example.com")
    assert service.add_contact(both) == DuplicatePhone(existing=ALICE)


def test_rejected_add_is_not_recorded_in_history() -> None:
    service = _service()
    service.add_contact(ALICE)
    service.add_contact(_person("Zed", "94351253"))
    assert service.model.history.undo_depth == 1


def test_add_none_is_invalid() -> None:
    assert isinstance(_service().add_contact(None), InvalidArgument)


def test_delete_and_undo_restores_order() -> None:
    service = _service()
    for p in (ALICE, BOB, CARL):
        service.add_contact(p)
    assert service.delete_contact(BOB) == ContactDeleted(person=BOB)
    assert service.model.get_address_book() == (ALICE, CARL)

    service.undo()
    assert service.model.get_address_book() == (ALICE, BOB, CARL)


def test_delete_unknown_is_not_found() -> None:
    service = _service()
    assert service.delete_contact(BOB) == RecordNotFound(person=BOB)


def test_edit_keeping_own_phone_and_email_is_allowed() -> None:
    service = _service()
    service.add_contact(ALICE)
    service.add_contact(BOB)
    edited = Person(
        name="Alice Pauline",
        phone=ALICE.phone,
        email=ALICE.email,
        address="123, Jurong West Ave 6",
    )
    assert service.edit_contact(ALICE, edited) == ContactEdited(target=ALICE, edited=edited)
    assert service.model.get_address_book() == (edited, BOB)

    service.undo()
    assert service.model.get_address_book() == (ALICE, BOB)


def test_edit_conflicts_with_other_contacts() -> None:
    service = _service()
    service.add_contact(ALICE)
    service.add_contact(BOB)
    assert service.edit_contact(ALICE, _person("Bob Choo", "1")) == DuplicatePerson(existing=BOB)
    assert service.edit_contact(ALICE, _person("Alice", "22222222")) == DuplicatePhone(existing=BOB)
    assert service.edit_contact(ALICE, _person("Alice", "1", "bob@example.com")) == DuplicateEmail(
        existing=BOB
    )
    assert service.model.get_address_book() == (ALICE, BOB)


def test_edit_missing_target_is_not_found() -> None:
    service = _service()
    assert service.edit_contact(ALICE, BOB) == RecordNotFound(person=ALICE)


def test_find_by_exact_fields() -> None:
    service = _service()
    for p in (ALICE, BOB, CARL):
        service.add_contact(p)
    assert service.find_contacts(NameEquals("bob choo")).persons == (BOB,)
    assert service.find_contacts(PhoneEquals("9535 2563")).persons == (CARL,)
    assert service.find_contacts(EmailEquals("ALICE@example.com")).persons == (ALICE,)
    assert service.find_contacts(NameEquals("bob")).persons == ()
    assert isinstance(service.find_contacts(None), InvalidArgument)


def test_search_orders_by_closeness() -> None:
    service = _service()
    for p in (ALICE, BOB, CARL):
        service.add_contact(p)
    result = service.search_contacts("Karl")
    assert result.persons[0] == CARL
    assert len(result.persons) == 3

    close_only = service.search_contacts("Karl", max_closeness=1)
    assert close_only.persons == (CARL,)


def test_search_empty_keyword_is_invalid() -> None:
    service = _service()
    assert isinstance(service.search_contacts("   "), InvalidArgument)


def test_filtered_list_is_live_view() -> None:
    service = _service()
    service.add_contact(ALICE)
    service.find_contacts(NameEquals("Bob Choo"))
    view = service.model.get_filtered_person_list()
    assert list(view) == []
    service.add_contact(BOB)
    assert list(view) == [BOB]


def test_undo_resets_filter_to_show_all() -> None:
    service = _service()
    service.add_contact(ALICE)
    service.add_contact(BOB)
    service.find_contacts(NameEquals("Bob Choo"))
    service.undo()
    assert list(service.model.get_filtered_person_list()) == [ALICE]


def test_clear_is_undoable() -> None:
    service = _service()
    service.add_contact(ALICE)
    service.add_contact(BOB)
    assert service.clear_contacts() == ContactsCleared(removed=2)
    assert service.model.get_address_book() == ()
    service.undo()
    assert service.model.get_address_book() == (ALICE, BOB)


def test_undo_and_redo_many() -> None:
    service = _service()
    for p in (ALICE, BOB, CARL):
        service.add_contact(p)

    result = service.undo(5)
    assert isinstance(result, HistoryReplayed)
    assert len(result.modifications) == 3
    assert result.requested == 5
    assert service.model.get_address_book() == ()

    result = service.redo(2)
    assert [m.person for m in result.modifications] == [ALICE, BOB]
    assert service.model.get_address_book() == (ALICE, BOB)


def test_undo_redo_with_empty_history() -> None:
    service = _service()
    assert service.undo() == NoUndoAvailable()
    assert service.redo() == NoRedoAvailable()
    assert service.undo(0) == HistoryReplayed(modifications=(), requested=0)
    assert isinstance(service.undo(-1), InvalidArgument)


def test_new_command_after_undo_discards_redo() -> None:
    service = _service()
    service.add_contact(ALICE)
    service.undo()
    service.add_contact(BOB)
    assert service.redo() == NoRedoAvailable()
    assert service.model.get_address_book() == (BOB,)


def test_model_surface_add_then_commit() -> None:
    model = ContactBookModel(InMemoryAddressBook())
    assert not model.has_person(ALICE)
    result = model.add_person(ALICE)
    assert isinstance(result, AddPerson)
    model.commit_address_book(result)
    assert model.has_person(ALICE)
    assert model.find_person_with_same_phone_number(_person("X", "94351253")) == ALICE
    assert model.find_person_with_same_email(_person("X", "1", "alice@example.com")) == ALICE

    assert model.undo_address_book() == result
    assert model.redo_address_book() == result
    assert model.undo_address_book_multiple(3) == [result]
    assert model.redo_address_book_multiple(3) == [result]
    assert model.get_address_book() == (ALICE,)


def test_model_set_address_book_validates_snapshot() -> None:
    model = ContactBookModel(InMemoryAddressBook([ALICE]))
    bad = [BOB, _person("Bobby", "22222222")]
    assert isinstance(model.set_address_book(bad), InvariantViolation)
    assert model.get_address_book() == (ALICE,)


def test_undo_rejected_by_store_reports_store_failure() -> None:
    service = _service()
    service.add_contact(ALICE)
    # removed directly, so the history still holds the add
    service.model.delete_person(ALICE)

    result = service.undo()
    assert result == RecordNotFound(person=ALICE)
    assert service.model.history.undo_depth == 1


def test_partial_undo_carries_store_failure() -> None:
    service = _service()
    service.add_contact(ALICE)
    service.add_contact(BOB)
    service.model.delete_person(ALICE)

    result = service.undo(2)
    assert isinstance(result, HistoryReplayed)
    assert [m.person for m in result.modifications] == [BOB]
    assert result.stopped_by == RecordNotFound(person=ALICE)
    assert service.model.get_address_book() == ()


def test_redo_rejected_by_store_reports_store_failure() -> None:
    service = _service()
    service.add_contact(ALICE)
    service.undo()
    # same phone as ALICE, added without going through history
    service.model.add_person(_person("Zed", "94351253"))

    result = service.redo()
    assert isinstance(result, InvariantViolation)
    assert service.model.history.redo_depth == 1
