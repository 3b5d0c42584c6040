import os
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault('DATABASE_URL', 'sqlite:///./test.db')

from tracker.auth.jwt_handler import create_access_token  # noqa: E402
from tracker.database import Base, get_db, utcnow  # noqa: E402
from tracker.main import app  # noqa: E402
from tracker.models.assignment import Assignment, AssignmentStatus  # noqa: E402
from tracker.models.exam import Exam  # noqa: E402
from tracker.models.subject import Subject  # noqa: E402
from tracker.models.user import Role, User  # noqa: E402


@pytest.fixture
def db_session():
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    tables = [User.__table__, Subject.__table__, Assignment.__table__, Exam.__table__]
    Base.metadata.create_all(bind=engine, tables=tables)

    db = testing_session_local()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine, tables=list(reversed(tables)))
        engine.dispose()


def _add_user(db, name: str, email: str, role: Role) -> User:
    user = User(name=name, email=email, hashed_password='', role=role.value)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin(db_session) -> User:
    return _add_user(db_session, 'Ada Admin', 'admin@example.edu', Role.ADMIN)


@pytest.fixture
def student_a(db_session) -> User:
    return _add_user(db_session, 'Student A', 'a@example.edu', Role.STUDENT)


@pytest.fixture
def student_b(db_session) -> User:
    return _add_user(db_session, 'Student B', 'b@example.edu', Role.STUDENT)


@pytest.fixture
def subject(db_session) -> Subject:
    record = Subject(name='Math', code='MATH101', color='#ff0000')
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record


@pytest.fixture
def add_assignment(db_session, subject):
    def _add(
        owner: User,
        *,
        title: str = 'HW',
        days_until_due: int = 1,
        status: AssignmentStatus = AssignmentStatus.PENDING,
    ) -> Assignment:
        record = Assignment(
            title=title,
            subject_id=subject.id,
            created_by_id=owner.id,
            due_date=utcnow() + timedelta(days=days_until_due),
            status=status,
        )
        db_session.add(record)
        db_session.commit()
        db_session.refresh(record)
        return record

    return _add


@pytest.fixture
def client(db_session):
    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _headers(user: User) -> dict:
        return {'Authorization': f'Bearer {create_access_token(user.email)}'}

    return _headers
