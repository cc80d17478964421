import os

os.environ.setdefault('DATABASE_URL', 'sqlite:///./test.db')
os.environ.setdefault('JWT_SECRET_KEY', 'test-secret-key-that-is-long-enough-for-hs256')

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from hospital_booking.database import Base  # noqa: E402
from hospital_booking.models.appointment import Appointment  # noqa: E402
from hospital_booking.models.user import User  # noqa: E402
from hospital_booking.services.appointment_store import AppointmentInput, Caller  # noqa: E402


@pytest.fixture
def appointment_db():
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine, tables=[User.__table__, Appointment.__table__])

    db = testing_session_local()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine, tables=[Appointment.__table__, User.__table__])
        engine.dispose()


@pytest.fixture
def patient() -> Caller:
    return Caller(id='p1', role='patient')


@pytest.fixture
def other_patient() -> Caller:
    return Caller(id='q1', role='patient')


@pytest.fixture
def doctor() -> Caller:
    return Caller(id='d1', role='doctor')


@pytest.fixture
def booking_input() -> AppointmentInput:
    return AppointmentInput(
        department='Cardiology',
        doctor_name='Dr. Smith',
        patient_name='Alice',
        date='2024-06-01',
        time_slot='09:00',
    )
