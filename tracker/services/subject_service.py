from sqlalchemy import func

from tracker.auth.policy import ResourceKind
from tracker.core.errors import Conflict
from tracker.models.assignment import Assignment
from tracker.models.exam import Exam
from tracker.models.subject import Subject
from tracker.schemas.subject import SubjectCreate, SubjectResponse
from tracker.services.base import ResourceService


class SubjectService(ResourceService):
    model = Subject
    kind = ResourceKind.SUBJECT
    label = 'Subject'
    create_schema = SubjectCreate
    response_schema = SubjectResponse
    conflict_message = 'A subject with this code already exists.'

    def order_by(self) -> list:
        return [Subject.created_at.desc(), Subject.id.desc()]

    def current_fields(self, record: Subject) -> dict:
        return {
            'name': record.name,
            'code': record.code,
            'color': record.color,
            'description': record.description,
        }

    def before_delete(self, record: Subject) -> None:
        # Subjects still referenced are kept so no assignment or exam points at a missing row.
        assignment_count = self.db.query(func.count(Assignment.id)).filter(Assignment.subject_id == record.id).scalar()
        exam_count = self.db.query(func.count(Exam.id)).filter(Exam.subject_id == record.id).scalar()
        if assignment_count or exam_count:
            raise Conflict(
                f'Subject is still referenced by {assignment_count} assignment(s) and {exam_count} exam(s).'
            )
