from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tracker.auth.dependencies import get_current_user
from tracker.database import get_db
from tracker.models.user import User
from tracker.routes import envelope
from tracker.schemas.subject import SubjectCreate, SubjectUpdate
from tracker.services.subject_service import SubjectService

router = APIRouter(tags=['subjects'])


def get_subject_service(db: Session = Depends(get_db)) -> SubjectService:
    return SubjectService(db)


@router.get('')
def list_subjects(
    current_user: User = Depends(get_current_user),
    service: SubjectService = Depends(get_subject_service),
):
    return envelope.success_list(service.list(current_user))


@router.get('/{subject_id}')
def get_subject(
    subject_id: int,
    current_user: User = Depends(get_current_user),
    service: SubjectService = Depends(get_subject_service),
):
    return envelope.success(service.get(current_user, subject_id))


@router.post('', status_code=status.HTTP_201_CREATED)
def create_subject(
    data: SubjectCreate,
    current_user: User = Depends(get_current_user),
    service: SubjectService = Depends(get_subject_service),
):
    return envelope.success(service.create(current_user, data), status_code=status.HTTP_201_CREATED)


@router.put('/{subject_id}')
def update_subject(
    subject_id: int,
    data: SubjectUpdate,
    current_user: User = Depends(get_current_user),
    service: SubjectService = Depends(get_subject_service),
):
    return envelope.success(service.update(current_user, subject_id, data))


@router.delete('/{subject_id}')
def delete_subject(
    subject_id: int,
    current_user: User = Depends(get_current_user),
    service: SubjectService = Depends(get_subject_service),
):
    service.delete(current_user, subject_id)
    return envelope.success()
