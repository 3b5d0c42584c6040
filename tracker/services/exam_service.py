from tracker.auth.policy import ResourceKind
from tracker.models.exam import Exam
from tracker.schemas.exam import ExamCreate, ExamResponse
from tracker.services.base import ResourceService


class ExamService(ResourceService):
    model = Exam
    kind = ResourceKind.EXAM
    label = 'Exam'
    create_schema = ExamCreate
    response_schema = ExamResponse
    reference_columns = {'subject': 'subject_id'}
    conflict_message = 'Exam conflicts with existing data.'

    def order_by(self) -> list:
        return [Exam.date.asc(), Exam.id.asc()]

    def current_fields(self, record: Exam) -> dict:
        return {
            'title': record.title,
            'subject': record.subject_id,
            'date': record.date,
            'location': record.location,
            'duration_minutes': record.duration_minutes,
            'notes': record.notes,
        }
