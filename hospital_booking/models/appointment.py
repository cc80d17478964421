"""Appointment model definitions."""

import enum
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import validates

from hospital_booking.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AppointmentStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


STATUS_VALUES = tuple(member.value for member in AppointmentStatus)


class Appointment(Base):
    """Represents an appointment request from a patient to a doctor."""
    __tablename__ = "appointments"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')",
            name="ck_appointments_status",
        ),
    )

    id = Column(Integer, primary_key=True)
    department = Column(String, nullable=False)
    doctor_name = Column(String, nullable=False)
    patient_name = Column(String, nullable=False)
    patient_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    date = Column(String, nullable=False)
    time_slot = Column(String, nullable=False)
    status = Column(String, nullable=False, default=AppointmentStatus.pending.value)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    @validates("status")
    def validate_status(self, key: str, value) -> str:
        if isinstance(value, AppointmentStatus):
            return value.value
        if value not in STATUS_VALUES:
            raise ValueError(f"Invalid status {value!r}; expected one of {', '.join(STATUS_VALUES)}.")
        return value
