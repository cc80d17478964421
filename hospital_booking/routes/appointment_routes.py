from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hospital_booking.auth.dependencies import get_caller
from hospital_booking.core.errors import (
    AppointmentError,
    AuthorizationError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from hospital_booking.database import ensure_appointment_schema, get_db
from hospital_booking.services.appointment_store import AppointmentInput, AppointmentStore, Caller

router = APIRouter(tags=['appointments'])

ERROR_STATUS_CODES = {
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    StorageError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


class CreateAppointmentRequest(BaseModel):
    department: str | None = None
    doctor_name: str | None = None
    patient_name: str | None = None
    date: str | None = None
    time_slot: str | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator('department', 'doctor_name', 'patient_name', 'date', 'time_slot', mode='before')
    @classmethod
    def coerce_numbers(cls, value):
        # Numbers are kept in their string form.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def to_input(self) -> AppointmentInput:
        return AppointmentInput(
            department=self.department,
            doctor_name=self.doctor_name,
            patient_name=self.patient_name,
            date=self.date,
            time_slot=self.time_slot,
        )


class UpdateStatusRequest(BaseModel):
    status: str | None = None


class AppointmentResponse(BaseModel):
    id: int
    department: str
    doctor_name: str
    patient_name: str
    patient_id: str
    date: str
    time_slot: str
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class AppointmentSummaryResponse(BaseModel):
    pending: int
    approved: int
    rejected: int
    total: int


def to_http_exception(exc: AppointmentError) -> HTTPException:
    status_code = ERROR_STATUS_CODES.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=status_code, detail=exc.message)


def ensure_database_ready() -> None:
    try:
        ensure_appointment_schema()
    except SQLAlchemyError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail='Database unavailable. Verify DATABASE_URL and database credentials.',
        ) from exc


@router.post('', response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
def create_appointment(
    data: CreateAppointmentRequest | None = None,
    caller: Caller = Depends(get_caller),
    db: Session = Depends(get_db),
):
    ensure_database_ready()
    request = data or CreateAppointmentRequest()

    try:
        return AppointmentStore(db).create(caller, request.to_input())
    except AppointmentError as exc:
        raise to_http_exception(exc) from exc


@router.get('', response_model=list[AppointmentResponse])
def list_appointments(
    status_filter: str | None = Query(default=None, alias='status'),
    caller: Caller = Depends(get_caller),
    db: Session = Depends(get_db),
):
    ensure_database_ready()

    try:
        return AppointmentStore(db).list(caller, status=status_filter)
    except AppointmentError as exc:
        raise to_http_exception(exc) from exc


@router.get('/summary', response_model=AppointmentSummaryResponse)
def summarize_appointments(
    caller: Caller = Depends(get_caller),
    db: Session = Depends(get_db),
):
    ensure_database_ready()

    try:
        return AppointmentStore(db).summary(caller)
    except AppointmentError as exc:
        raise to_http_exception(exc) from exc


@router.put('/{appointment_id}', response_model=AppointmentResponse)
def update_appointment_status(
    appointment_id: str,
    data: UpdateStatusRequest | None = None,
    caller: Caller = Depends(get_caller),
    db: Session = Depends(get_db),
):
    ensure_database_ready()
    new_status = data.status if data else None

    try:
        return AppointmentStore(db).update_status(caller, appointment_id, new_status)
    except AppointmentError as exc:
        raise to_http_exception(exc) from exc
