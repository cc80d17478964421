from fastapi import APIRouter
from pydantic import BaseModel

from hospital_booking.services import catalog

router = APIRouter(tags=['catalog'])


class DepartmentOptionResponse(BaseModel):
    department: str
    doctors: list[str]


class TimeSlotGroupResponse(BaseModel):
    period: str
    slots: list[str]


@router.get('/departments', response_model=list[DepartmentOptionResponse])
def list_departments():
    return catalog.list_departments()


@router.get('/time-slots', response_model=list[TimeSlotGroupResponse])
def list_time_slots():
    return catalog.list_time_slots()
