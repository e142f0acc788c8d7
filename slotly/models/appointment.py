from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
import enum

from .user import generate_id

class AppointmentStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    CANCELLED = "cancelled"

# Statuses that hold a slot
ACTIVE_STATUSES = (AppointmentStatus.PENDING, AppointmentStatus.ACCEPTED)

@dataclass
class Appointment:
    time: str
    requester_name: str
    requester_id: Optional[str] = None  # None only for seeded legacy bookings
    status: AppointmentStatus = AppointmentStatus.PENDING
    created_at: datetime = field(default_factory=datetime.utcnow)
    id: str = field(default_factory=generate_id)

    def __setattr__(self, name, value):
        if name == "requester_id" and "requester_id" in self.__dict__:
            raise AttributeError("requester_id cannot be changed once set")
        super().__setattr__(name, value)

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES

    def is_owned_by(self, user_id: str) -> bool:
        return self.requester_id is not None and self.requester_id == user_id

    def __repr__(self):
        return f"<Appointment(id={self.id}, time='{self.time}', status='{self.status.value}')>"
