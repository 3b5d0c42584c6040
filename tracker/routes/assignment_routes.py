from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tracker.auth.dependencies import get_current_user
from tracker.database import get_db
from tracker.models.user import User
from tracker.routes import envelope
from tracker.schemas.assignment import AssignmentCreate, AssignmentUpdate
from tracker.services.assignment_service import AssignmentService

router = APIRouter(tags=['assignments'])


def get_assignment_service(db: Session = Depends(get_db)) -> AssignmentService:
    return AssignmentService(db)


@router.get('')
def list_assignments(
    current_user: User = Depends(get_current_user),
    service: AssignmentService = Depends(get_assignment_service),
):
    """Admins see every assignment; students only the ones they created."""
    return envelope.success_list(service.list(current_user))


@router.get('/overdue')
def list_overdue_assignments(
    current_user: User = Depends(get_current_user),
    service: AssignmentService = Depends(get_assignment_service),
):
    return envelope.success_list(service.list_overdue(current_user))


@router.get('/{assignment_id}')
def get_assignment(
    assignment_id: int,
    current_user: User = Depends(get_current_user),
    service: AssignmentService = Depends(get_assignment_service),
):
    return envelope.success(service.get(current_user, assignment_id))


@router.post('', status_code=status.HTTP_201_CREATED)
def create_assignment(
    data: AssignmentCreate,
    current_user: User = Depends(get_current_user),
    service: AssignmentService = Depends(get_assignment_service),
):
    return envelope.success(service.create(current_user, data), status_code=status.HTTP_201_CREATED)


@router.put('/{assignment_id}')
def update_assignment(
    assignment_id: int,
    data: AssignmentUpdate,
    current_user: User = Depends(get_current_user),
    service: AssignmentService = Depends(get_assignment_service),
):
    return envelope.success(service.update(current_user, assignment_id, data))


@router.delete('/{assignment_id}')
def delete_assignment(
    assignment_id: int,
    current_user: User = Depends(get_current_user),
    service: AssignmentService = Depends(get_assignment_service),
):
    service.delete(current_user, assignment_id)
    return envelope.success()
