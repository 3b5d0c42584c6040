import pytest

from tracker.core.errors import Forbidden, NotFound, ValidationError
from tracker.database import utcnow
from tracker.models.assignment import AssignmentStatus
from tracker.schemas.assignment import AssignmentCreate, AssignmentUpdate
from tracker.services.assignment_service import AssignmentService


def test_create_stamps_requester_as_owner(db_session, student_a, student_b, subject) -> None:
    payload = AssignmentCreate.model_validate(
        {'title': 'HW1', 'subject': subject.id, 'dueDate': utcnow().isoformat(), 'createdBy': student_b.id}
    )

    created = AssignmentService(db_session).create(student_a, payload)

    assert created.created_by.id == student_a.id
    assert created.created_by.email == 'a@example.edu'
    assert created.subject.code == 'MATH101'
    assert created.status == AssignmentStatus.PENDING


def test_create_rejects_unknown_subject(db_session, student_a) -> None:
    payload = AssignmentCreate(title='HW1', subject=999, due_date=utcnow())

    with pytest.raises(ValidationError) as exception_info:
        AssignmentService(db_session).create(student_a, payload)

    assert exception_info.value.status_code == 400


def test_student_cannot_read_or_update_others_assignment(db_session, student_a, student_b, add_assignment) -> None:
    assignment = add_assignment(student_a)
    service = AssignmentService(db_session)

    with pytest.raises(Forbidden):
        service.get(student_b, assignment.id)
    with pytest.raises(Forbidden):
        service.update(student_b, assignment.id, AssignmentUpdate(title='stolen'))

    assert service.get(student_a, assignment.id).title == 'HW'


def test_admin_can_read_and_update_any_assignment(db_session, admin, student_a, add_assignment) -> None:
    assignment = add_assignment(student_a)
    service = AssignmentService(db_session)

    updated = service.update(admin, assignment.id, AssignmentUpdate(status='completed'))

    assert updated.status == AssignmentStatus.COMPLETED
    assert updated.created_by.id == student_a.id
    assert service.get(admin, assignment.id).status == AssignmentStatus.COMPLETED


def test_owner_update_keeps_owner_and_unsent_fields(db_session, student_a, add_assignment) -> None:
    assignment = add_assignment(student_a, title='Essay')

    updated = AssignmentService(db_session).update(student_a, assignment.id, AssignmentUpdate(priority='high'))

    assert updated.title == 'Essay'
    assert updated.priority == 'high'
    assert updated.created_by.id == student_a.id


def test_update_rejects_clearing_required_field(db_session, student_a, add_assignment) -> None:
    assignment = add_assignment(student_a)

    with pytest.raises(ValidationError):
        AssignmentService(db_session).update(student_a, assignment.id, AssignmentUpdate(title=None))


def test_update_missing_assignment_is_not_found(db_session, student_a) -> None:
    with pytest.raises(NotFound):
        AssignmentService(db_session).update(student_a, 999, AssignmentUpdate(title='x'))


def test_conditional_write_rejects_stale_ownership(
    db_session,
    student_a,
    student_b,
    add_assignment,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    assignment = add_assignment(student_a)
    intruder_id = student_b.id
    # Pretend the ownership check read a stale owner; the UPDATE itself must still refuse.
    monkeypatch.setattr(AssignmentService, 'owner_id', lambda self, record: intruder_id)

    with pytest.raises(Forbidden):
        AssignmentService(db_session).update(student_b, assignment.id, AssignmentUpdate(title='stolen'))

    monkeypatch.undo()
    assert AssignmentService(db_session).get(student_a, assignment.id).title == 'HW'


def test_delete_is_admin_only_even_for_owner(db_session, admin, student_a, add_assignment) -> None:
    assignment = add_assignment(student_a)
    service = AssignmentService(db_session)

    with pytest.raises(Forbidden):
        service.delete(student_a, assignment.id)

    service.delete(admin, assignment.id)
    with pytest.raises(NotFound):
        service.get(admin, assignment.id)


def test_list_is_scoped_for_students_and_sorted_by_due_date(
    db_session,
    admin,
    student_a,
    student_b,
    add_assignment,
) -> None:
    later = add_assignment(student_a, title='later', days_until_due=5)
    sooner = add_assignment(student_a, title='sooner', days_until_due=1)
    other = add_assignment(student_b, title='other', days_until_due=3)
    service = AssignmentService(db_session)

    assert [item.id for item in service.list(student_a)] == [sooner.id, later.id]
    assert [item.id for item in service.list(admin)] == [sooner.id, other.id, later.id]


def test_list_overdue_excludes_completed_and_future(db_session, admin, student_a, student_b, add_assignment) -> None:
    overdue_a = add_assignment(student_a, title='late', days_until_due=-2)
    add_assignment(student_a, title='done', days_until_due=-1, status=AssignmentStatus.COMPLETED)
    add_assignment(student_a, title='future', days_until_due=2)
    overdue_b = add_assignment(student_b, title='late b', days_until_due=-1)
    service = AssignmentService(db_session)

    assert [item.id for item in service.list_overdue(student_a)] == [overdue_a.id]
    assert [item.id for item in service.list_overdue(admin)] == [overdue_a.id, overdue_b.id]
