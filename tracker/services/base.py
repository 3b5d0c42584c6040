"""Shared list/get/create/update/delete flow for the resource services.

A service is bound to one SQLAlchemy session. Each operation checks the
authorization policy, talks to the store and hands back response schemas with
references already expanded. Failures surface as ``TrackerError`` subclasses.
"""

import logging
from contextlib import contextmanager

import pydantic
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from tracker.auth import policy
from tracker.auth.policy import Action, ResourceKind
from tracker.core.errors import Conflict, Forbidden, NotFound, StoreError, ValidationError
from tracker.models.subject import Subject
from tracker.models.user import User
from tracker.schemas.common import TrackerModel, format_validation_errors

logger = logging.getLogger(__name__)


class ResourceService:
    model = None
    kind: ResourceKind = None
    label = 'Resource'
    create_schema: type[TrackerModel] = None
    response_schema: type[TrackerModel] = None
    # Input field name -> foreign key column it is stored in.
    reference_columns: dict[str, str] = {}
    conflict_message = 'Resource already exists.'

    def __init__(self, db: Session):
        self.db = db

    # Hooks overridden per resource.

    def order_by(self) -> list:
        return [self.model.id.asc()]

    def current_fields(self, record) -> dict:
        raise NotImplementedError

    def owner_id(self, record) -> int | None:
        return None

    def owner_column(self):
        return None

    def stamp_owner(self, values: dict, user: User) -> dict:
        return values

    def before_delete(self, record) -> None:
        return None

    # Shared flow.

    @contextmanager
    def store(self, operation: str):
        try:
            yield
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning('Integrity error while trying to %s %s: %s', operation, self.kind.value, exc.orig)
            raise Conflict(self.conflict_message) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception('Store failure while trying to %s %s.', operation, self.kind.value)
            raise StoreError() from exc

    def expand(self, record) -> TrackerModel:
        return self.response_schema.model_validate(record)

    def find(self, record_id: int):
        return self.db.query(self.model).filter(self.model.id == record_id).first()

    def load(self, record_id: int):
        record = self.find(record_id)
        if record is None:
            raise NotFound(f'{self.label} not found')
        return record

    def precheck(self, user: User, action: Action) -> None:
        # Role gates that do not need the stored record are settled before any lookup.
        if not policy.depends_on_owner(user, action, self.kind):
            policy.authorize(user, action, self.kind)

    def validate(self, data: dict) -> TrackerModel:
        try:
            return self.create_schema.model_validate(data)
        except pydantic.ValidationError as exc:
            raise ValidationError(format_validation_errors(exc.errors())) from exc

    def check_references(self, payload: TrackerModel) -> None:
        for field_name in self.reference_columns:
            subject_id = getattr(payload, field_name)
            exists = self.db.query(Subject.id).filter(Subject.id == subject_id).first()
            if exists is None:
                raise ValidationError(f'Subject {subject_id} does not exist.')

    def column_values(self, payload: TrackerModel) -> dict:
        values = payload.model_dump()
        for field_name, column_name in self.reference_columns.items():
            values[column_name] = values.pop(field_name)
        return values

    def list_records(self, user: User, *criteria) -> list[TrackerModel]:
        policy.authorize(user, Action.LIST, self.kind)

        with self.store('list'):
            query = self.db.query(self.model)
            owner_id = policy.list_owner_filter(user, self.kind)
            if owner_id is not None:
                query = query.filter(self.owner_column() == owner_id)
            if criteria:
                query = query.filter(*criteria)
            records = query.order_by(*self.order_by()).all()
            return [self.expand(record) for record in records]

    def list(self, user: User) -> list[TrackerModel]:
        return self.list_records(user)

    def get(self, user: User, record_id: int) -> TrackerModel:
        self.precheck(user, Action.GET)

        with self.store('read'):
            record = self.load(record_id)
            policy.authorize(user, Action.GET, self.kind, owner_id=self.owner_id(record))
            return self.expand(record)

    def create(self, user: User, payload: TrackerModel) -> TrackerModel:
        policy.authorize(user, Action.CREATE, self.kind)

        with self.store('create'):
            self.check_references(payload)
            record = self.model(**self.stamp_owner(self.column_values(payload), user))
            self.db.add(record)
            self.db.commit()
            record_id = record.id
            logger.info('%s %s created by user %s.', self.label, record_id, user.id)
            return self.expand(self.load(record_id))

    def update(self, user: User, record_id: int, payload: TrackerModel) -> TrackerModel:
        self.precheck(user, Action.UPDATE)

        with self.store('update'):
            record = self.load(record_id)
            policy.authorize(user, Action.UPDATE, self.kind, owner_id=self.owner_id(record))

            merged = {**self.current_fields(record), **payload.model_dump(exclude_unset=True)}
            validated = self.validate(merged)
            self.check_references(validated)

            # Ownership is re-asserted inside the UPDATE so a concurrent owner change cannot slip in.
            statement = update(self.model).where(self.model.id == record_id)
            if policy.depends_on_owner(user, Action.UPDATE, self.kind):
                statement = statement.where(self.owner_column() == user.id)
            result = self.db.execute(
                statement.values(**self.column_values(validated)).execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                self.db.rollback()
                if self.find(record_id) is None:
                    raise NotFound(f'{self.label} not found')
                raise Forbidden(f'Not authorized to update this {self.kind.value}.')
            self.db.commit()
            return self.expand(self.load(record_id))

    def delete(self, user: User, record_id: int) -> None:
        self.precheck(user, Action.DELETE)

        with self.store('delete'):
            record = self.load(record_id)
            policy.authorize(user, Action.DELETE, self.kind, owner_id=self.owner_id(record))
            self.before_delete(record)
            self.db.delete(record)
            self.db.commit()
            logger.info('%s %s deleted by user %s.', self.label, record_id, user.id)
