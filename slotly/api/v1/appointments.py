from fastapi import APIRouter, Depends, Response, status
from typing import List

from ...api.deps import get_current_identity, get_appointment_service
from ...core.security import IdentityClaim
from ...services.appointment_service import AppointmentService
from ...schemas.appointment import (
    AppointmentCreate, AppointmentStatusUpdate, AppointmentResponse
)

router = APIRouter(tags=["Appointments"])

@router.get("/appointments", response_model=List[AppointmentResponse])
async def list_appointments(
    service: AppointmentService = Depends(get_appointment_service)
):
    """List every appointment. Public."""
    return service.list_all()

@router.get("/my-appointments", response_model=List[AppointmentResponse])
async def list_my_appointments(
    identity: IdentityClaim = Depends(get_current_identity),
    service: AppointmentService = Depends(get_appointment_service)
):
    """List appointments booked by the current user."""
    return service.list_for_owner(identity)

@router.post(
    "/appointments",
    response_model=AppointmentResponse,
    status_code=status.HTTP_201_CREATED
)
async def create_appointment(
    appointment_data: AppointmentCreate,
    identity: IdentityClaim = Depends(get_current_identity),
    service: AppointmentService = Depends(get_appointment_service)
):
    return service.create(appointment_data.time, identity)

@router.put("/appointments/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment_status(
    appointment_id: str,
    update: AppointmentStatusUpdate,
    identity: IdentityClaim = Depends(get_current_identity),
    service: AppointmentService = Depends(get_appointment_service)
):
    """Accept, reject or cancel an appointment."""
    return service.transition(appointment_id, update.status, identity)

@router.delete(
    "/appointments/{appointment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response
)
async def delete_appointment(
    appointment_id: str,
    identity: IdentityClaim = Depends(get_current_identity),
    service: AppointmentService = Depends(get_appointment_service)
):
    service.remove(appointment_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
