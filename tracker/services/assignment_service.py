from tracker.auth.policy import ResourceKind
from tracker.database import utcnow
from tracker.models.assignment import Assignment, AssignmentStatus
from tracker.models.user import User
from tracker.schemas.assignment import AssignmentCreate, AssignmentResponse
from tracker.services.base import ResourceService


class AssignmentService(ResourceService):
    model = Assignment
    kind = ResourceKind.ASSIGNMENT
    label = 'Assignment'
    create_schema = AssignmentCreate
    response_schema = AssignmentResponse
    reference_columns = {'subject': 'subject_id'}
    conflict_message = 'Assignment conflicts with existing data.'

    def order_by(self) -> list:
        return [Assignment.due_date.asc(), Assignment.id.asc()]

    def current_fields(self, record: Assignment) -> dict:
        return {
            'title': record.title,
            'description': record.description,
            'subject': record.subject_id,
            'due_date': record.due_date,
            'status': record.status,
            'priority': record.priority,
        }

    def owner_id(self, record: Assignment) -> int | None:
        return record.created_by_id

    def owner_column(self):
        return Assignment.created_by_id

    def stamp_owner(self, values: dict, user: User) -> dict:
        return {**values, 'created_by_id': user.id}

    def list_overdue(self, user: User):
        """Assignments past their due date that are not completed yet."""
        return self.list_records(
            user,
            Assignment.due_date < utcnow(),
            Assignment.status != AssignmentStatus.COMPLETED,
        )
