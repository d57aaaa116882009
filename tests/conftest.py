from datetime import datetime, timezone

import pytest

from school_clearance import create_app
from school_clearance.models import db, SQLAlchemyRecordStore
from school_clearance.services import ClearanceService

FIXED_NOW = datetime(2025, 3, 14, 9, 30, tzinfo=timezone.utc)
ADMIN = {"email": "admin@school.test", "password": "admin-password"}


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def store(app):
    return SQLAlchemyRecordStore(db)


@pytest.fixture
def service(store):
    return ClearanceService(store, clock=lambda: FIXED_NOW)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    response = client.post('/api/auth/login', json=ADMIN)
    assert response.status_code == 200
    return client


@pytest.fixture
def student_id(store):
    return store.insert('students', {
        'first_name': 'Ada',
        'last_name': 'Mensah',
        'grade': 'JHS 3',
        'email': 'ada@school.test',
    })


@pytest.fixture
def library_and_finance(service):
    library = service.create_department('Library', 'Grace Owusu', 'Head Librarian')
    finance = service.create_department('Finance', 'Kofi Boateng', 'Bursar')
    return library, finance
