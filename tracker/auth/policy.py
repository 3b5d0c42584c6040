"""Authorization rules for subjects, assignments and exams.

Every decision branches on each member of ``Role`` explicitly; a role the
policy does not know about is denied instead of falling through to
unrestricted access.
"""

import enum

from tracker.core.errors import Forbidden
from tracker.models.user import Role, User


class Action(str, enum.Enum):
    LIST = 'list'
    GET = 'get'
    CREATE = 'create'
    UPDATE = 'update'
    DELETE = 'delete'


class ResourceKind(str, enum.Enum):
    SUBJECT = 'subject'
    ASSIGNMENT = 'assignment'
    EXAM = 'exam'


ACTION_VERBS = {
    Action.LIST: 'list',
    Action.GET: 'view',
    Action.CREATE: 'create',
    Action.UPDATE: 'update',
    Action.DELETE: 'delete',
}

# Actions anyone may perform regardless of ownership.
_OPEN_ACTIONS = {
    ResourceKind.SUBJECT: {Action.LIST, Action.GET},
    ResourceKind.EXAM: {Action.LIST, Action.GET},
    ResourceKind.ASSIGNMENT: {Action.LIST, Action.CREATE},
}

# Actions permitted to the owner of the record.
_OWNER_ACTIONS = {
    ResourceKind.SUBJECT: set(),
    ResourceKind.EXAM: set(),
    ResourceKind.ASSIGNMENT: {Action.GET, Action.UPDATE},
}


def resolve_role(user: User) -> Role:
    try:
        return Role(user.role)
    except ValueError as exc:
        raise Forbidden(f'Unknown role {user.role!r}.') from exc


def is_admin(user: User) -> bool:
    role = resolve_role(user)
    if role is Role.ADMIN:
        return True
    if role is Role.STUDENT:
        return False
    raise Forbidden(f'Unknown role {role!r}.')


def is_permitted(user: User, action: Action, kind: ResourceKind, owner_id: int | None = None) -> bool:
    if is_admin(user):
        return True
    if action in _OPEN_ACTIONS[kind]:
        return True
    if action in _OWNER_ACTIONS[kind]:
        return owner_id is not None and owner_id == user.id
    return False


def authorize(user: User, action: Action, kind: ResourceKind, owner_id: int | None = None) -> None:
    """Raise ``Forbidden`` unless ``user`` may perform ``action`` on ``kind``.

    ``owner_id`` is the owner stored on the target record, for resources that
    carry one.
    """
    if not is_permitted(user, action, kind, owner_id):
        raise Forbidden(f'Not authorized to {ACTION_VERBS[action]} this {kind.value}.')


def depends_on_owner(user: User, action: Action, kind: ResourceKind) -> bool:
    """True when the decision needs the stored record's owner to be settled."""
    if is_admin(user) or action in _OPEN_ACTIONS[kind]:
        return False
    return action in _OWNER_ACTIONS[kind]


def list_owner_filter(user: User, kind: ResourceKind) -> int | None:
    """Owner id a list query must be restricted to, or ``None`` for no restriction."""
    if kind is not ResourceKind.ASSIGNMENT or is_admin(user):
        return None
    return user.id
