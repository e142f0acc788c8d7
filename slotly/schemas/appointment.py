from datetime import datetime
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional

from ..models.appointment import AppointmentStatus

class AppointmentCreate(BaseModel):
    time: Optional[str] = None

class AppointmentStatusUpdate(BaseModel):
    # Kept as a raw string; unknown values are refused by the transition rules.
    status: Optional[str] = None

class AppointmentResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    time: str
    requester_id: Optional[str] = None
    requester_name: str
    status: AppointmentStatus
    created_at: datetime
