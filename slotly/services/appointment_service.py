from typing import List, Optional
import logging

from ..core.database import InMemoryDatabase
from ..core.exceptions import (
    ValidationError, SlotConflictError, NotFoundError, AuthorizationError
)
from ..core.security import IdentityClaim
from ..models.appointment import Appointment, ACTIVE_STATUSES
from .state_machine import check_transition, can_remove

logger = logging.getLogger(__name__)

class AppointmentService:
    def __init__(self, db: InMemoryDatabase):
        self.db = db

    def list_all(self) -> List[Appointment]:
        """All appointments in booking order, any status."""
        return list(self.db.appointments)

    def list_for_owner(self, identity: IdentityClaim) -> List[Appointment]:
        return [a for a in self.db.appointments if a.is_owned_by(identity.id)]

    def get(self, appointment_id: str) -> Appointment:
        appointment = self.db.find_appointment(appointment_id)
        if appointment is None:
            raise NotFoundError("Appointment not found.")
        return appointment

    def is_slot_taken(self, time: str, exclude_id: Optional[str] = None) -> bool:
        return any(
            a.time == time and a.is_active and a.id != exclude_id
            for a in self.db.appointments
        )

    def create(self, time: Optional[str], identity: IdentityClaim) -> Appointment:
        """Book a slot for the caller."""
        if not time:
            raise ValidationError("Time is required.")

        if self.is_slot_taken(time):
            raise SlotConflictError()

        appointment = Appointment(
            time=time,
            requester_id=identity.id,
            requester_name=identity.username
        )
        self.db.appointments.append(appointment)
        logger.info(f"New appointment {appointment.id} at {time} for {identity.username}")

        return appointment

    def transition(
        self,
        appointment_id: str,
        requested_status: Optional[str],
        identity: IdentityClaim
    ) -> Appointment:
        """Apply one status change allowed for the caller's role."""
        appointment = self.get(appointment_id)
        target = check_transition(appointment, requested_status, identity)

        # Reactivating a rejected or cancelled booking must not double-book its slot
        if (
            target in ACTIVE_STATUSES
            and not appointment.is_active
            and self.is_slot_taken(appointment.time, exclude_id=appointment.id)
        ):
            raise SlotConflictError()

        appointment.status = target
        logger.info(
            f"Appointment {appointment_id} updated to status: {target.value} "
            f"by {identity.role.value} {identity.username}"
        )

        return appointment

    def remove(self, appointment_id: str, identity: IdentityClaim) -> None:
        appointment = self.get(appointment_id)

        if not can_remove(appointment, identity):
            raise AuthorizationError("Not authorized to delete this appointment.")

        self.db.appointments.remove(appointment)
        logger.info(f"Appointment {appointment_id} deleted by {identity.username}")
