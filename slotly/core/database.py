from typing import List, Optional
import logging

from ..models.user import User
from ..models.appointment import Appointment, AppointmentStatus

logger = logging.getLogger(__name__)

class InMemoryDatabase:
    """Process-local storage for users and appointments.

    Both collections keep insertion order and are lost on restart. Callers
    go through the services; nothing here enforces business rules.
    """

    def __init__(self):
        self.users: List[User] = []
        self.appointments: List[Appointment] = []

    def find_user(self, username: str) -> Optional[User]:
        return next((u for u in self.users if u.username == username), None)

    def find_appointment(self, appointment_id: str) -> Optional[Appointment]:
        return next((a for a in self.appointments if a.id == appointment_id), None)

    def reset(self):
        self.users.clear()
        self.appointments.clear()

db = InMemoryDatabase()

# Database dependency
def get_db() -> InMemoryDatabase:
    """Get the process-wide store."""
    return db

def seed_demo_appointments(database: InMemoryDatabase) -> int:
    """Load the legacy demo bookings into an empty ledger."""
    if database.appointments:
        return 0

    database.appointments.extend([
        Appointment(time="09:00", requester_name="Alice"),
        Appointment(time="10:00", requester_name="Bob", status=AppointmentStatus.ACCEPTED),
        Appointment(time="14:00", requester_name="Charlie"),
    ])
    logger.info(f"Seeded {len(database.appointments)} demo appointments")
    return len(database.appointments)
