from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tracker.auth.dependencies import get_current_user
from tracker.database import get_db
from tracker.models.user import User
from tracker.routes import envelope
from tracker.schemas.exam import ExamCreate, ExamUpdate
from tracker.services.exam_service import ExamService

router = APIRouter(tags=['exams'])


def get_exam_service(db: Session = Depends(get_db)) -> ExamService:
    return ExamService(db)


@router.get('')
def list_exams(
    current_user: User = Depends(get_current_user),
    service: ExamService = Depends(get_exam_service),
):
    return envelope.success_list(service.list(current_user))


@router.get('/{exam_id}')
def get_exam(
    exam_id: int,
    current_user: User = Depends(get_current_user),
    service: ExamService = Depends(get_exam_service),
):
    return envelope.success(service.get(current_user, exam_id))


@router.post('', status_code=status.HTTP_201_CREATED)
def create_exam(
    data: ExamCreate,
    current_user: User = Depends(get_current_user),
    service: ExamService = Depends(get_exam_service),
):
    return envelope.success(service.create(current_user, data), status_code=status.HTTP_201_CREATED)


@router.put('/{exam_id}')
def update_exam(
    exam_id: int,
    data: ExamUpdate,
    current_user: User = Depends(get_current_user),
    service: ExamService = Depends(get_exam_service),
):
    return envelope.success(service.update(current_user, exam_id, data))


@router.delete('/{exam_id}')
def delete_exam(
    exam_id: int,
    current_user: User = Depends(get_current_user),
    service: ExamService = Depends(get_exam_service),
):
    service.delete(current_user, exam_id)
    return envelope.success()
