"""Appointment lifecycle and the role rules around it.

Patients book and see their own requests. Doctors see every request and
set the status of any of them; the store does not scope doctors by the
name on the record, and it does not stop an appointment from being
transitioned more than once.
"""

import logging
from dataclasses import dataclass

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hospital_booking.core.errors import AuthorizationError, NotFoundError, StorageError, ValidationError
from hospital_booking.models.appointment import STATUS_VALUES, Appointment, AppointmentStatus, utcnow

logger = logging.getLogger(__name__)

PATIENT_ROLE = 'patient'
DOCTOR_ROLE = 'doctor'
REQUIRED_FIELDS = ('department', 'doctor_name', 'patient_name', 'date', 'time_slot')
STORAGE_ERROR_MESSAGE = 'Database unavailable. Verify DATABASE_URL and database credentials.'
MAX_APPOINTMENT_ID = 2**63 - 1


@dataclass(frozen=True)
class Caller:
    """Authenticated identity an operation runs on behalf of."""
    id: str
    role: str


@dataclass
class AppointmentInput:
    department: str | None = None
    doctor_name: str | None = None
    patient_name: str | None = None
    date: str | None = None
    time_slot: str | None = None

    def missing_fields(self) -> list[str]:
        return [field for field in REQUIRED_FIELDS if not getattr(self, field)]


class AppointmentStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, caller: Caller, data: AppointmentInput) -> Appointment:
        if caller.role != PATIENT_ROLE:
            raise AuthorizationError('Only patients can book')

        missing = data.missing_fields()
        if missing:
            raise ValidationError('Please provide all appointment details', fields=missing)

        appointment = Appointment(
            department=data.department,
            doctor_name=data.doctor_name,
            patient_name=data.patient_name,
            patient_id=caller.id,
            date=data.date,
            time_slot=data.time_slot,
            status=AppointmentStatus.pending,
        )

        try:
            self.db.add(appointment)
            self.db.commit()
            self.db.refresh(appointment)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception('Failed to create appointment for patient %s', caller.id)
            raise StorageError(STORAGE_ERROR_MESSAGE) from exc

        logger.info('Appointment %s created by patient %s', appointment.id, caller.id)
        return appointment

    def list(self, caller: Caller, status: str | None = None) -> list[Appointment]:
        if status is not None and status not in STATUS_VALUES:
            raise ValidationError(f'Invalid status filter {status!r}.', fields=['status'])

        try:
            query = self._scoped(self.db.query(Appointment), caller)
            if status is not None:
                query = query.filter(Appointment.status == status)
            return query.order_by(Appointment.id.asc()).all()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception('Failed to list appointments for %s %s', caller.role, caller.id)
            raise StorageError(STORAGE_ERROR_MESSAGE) from exc

    def summary(self, caller: Caller) -> dict[str, int]:
        try:
            query = self._scoped(
                self.db.query(Appointment.status, func.count(Appointment.id)),
                caller,
            )
            rows = query.group_by(Appointment.status).all()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception('Failed to summarize appointments for %s %s', caller.role, caller.id)
            raise StorageError(STORAGE_ERROR_MESSAGE) from exc

        counts = {value: 0 for value in STATUS_VALUES}
        for status, count in rows:
            counts[status] = count
        counts['total'] = sum(counts[value] for value in STATUS_VALUES)
        return counts

    def update_status(self, caller: Caller, appointment_id, new_status) -> Appointment:
        if caller.role != DOCTOR_ROLE:
            raise AuthorizationError('Only doctors can update')

        appointment = self._get(appointment_id)

        try:
            appointment.status = new_status
        except ValueError as exc:
            raise ValidationError(str(exc), fields=['status']) from exc
        appointment.updated_at = utcnow()

        try:
            self.db.commit()
            self.db.refresh(appointment)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception('Failed to update appointment %s', appointment_id)
            raise StorageError(STORAGE_ERROR_MESSAGE) from exc

        logger.info('Appointment %s set to %s by doctor %s', appointment.id, appointment.status, caller.id)
        return appointment

    def _scoped(self, query, caller: Caller):
        if caller.role == DOCTOR_ROLE:
            return query
        return query.filter(Appointment.patient_id == caller.id)

    def _get(self, appointment_id) -> Appointment:
        try:
            key = int(appointment_id)
        except (TypeError, ValueError):
            raise NotFoundError('Appointment not found') from None
        if not 0 < key <= MAX_APPOINTMENT_ID:
            raise NotFoundError('Appointment not found')

        try:
            appointment = self.db.query(Appointment).filter(Appointment.id == key).first()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception('Failed to load appointment %s', appointment_id)
            raise StorageError(STORAGE_ERROR_MESSAGE) from exc

        if appointment is None:
            raise NotFoundError('Appointment not found')
        return appointment
