from fastapi import APIRouter, Depends

from tracker.auth.dependencies import get_current_user
from tracker.auth.policy import resolve_role
from tracker.models.user import User
from tracker.routes import envelope

router = APIRouter(tags=['auth'])


@router.get('/me')
def me(current_user: User = Depends(get_current_user)):
    return envelope.success(
        {
            'id': current_user.id,
            'name': current_user.name,
            'email': current_user.email,
            'role': resolve_role(current_user).value,
        }
    )
