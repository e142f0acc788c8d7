"""
Appointment status rules.

Every booking starts ``pending``. Providers move it to ``accepted`` or
``rejected``; the requester who owns it may move it to ``cancelled``.
Any other combination of role, ownership and target status is refused.
"""
from typing import Dict, FrozenSet, Optional

from ..core.exceptions import AuthorizationError
from ..core.security import IdentityClaim, UserRole
from ..models.appointment import Appointment, AppointmentStatus

# Target statuses each role may request
ALLOWED_TRANSITIONS: Dict[UserRole, FrozenSet[AppointmentStatus]] = {
    UserRole.PROVIDER: frozenset({AppointmentStatus.ACCEPTED, AppointmentStatus.REJECTED}),
    UserRole.REQUESTER: frozenset({AppointmentStatus.CANCELLED}),
}

# Roles that may only act on their own appointments
OWNER_ONLY_ROLES = frozenset({UserRole.REQUESTER})

def parse_status(value: Optional[str]) -> Optional[AppointmentStatus]:
    try:
        return AppointmentStatus(value)
    except ValueError:
        return None

def can_transition(
    appointment: Appointment,
    requested_status: Optional[str],
    identity: IdentityClaim
) -> bool:
    target = parse_status(requested_status)
    if target is None:
        return False

    if target not in ALLOWED_TRANSITIONS.get(identity.role, frozenset()):
        return False

    if identity.role in OWNER_ONLY_ROLES and not appointment.is_owned_by(identity.id):
        return False

    return True

def check_transition(
    appointment: Appointment,
    requested_status: Optional[str],
    identity: IdentityClaim
) -> AppointmentStatus:
    """Return the target status or raise AuthorizationError."""
    if not can_transition(appointment, requested_status, identity):
        raise AuthorizationError("Unauthorized update attempt or invalid status.")
    return AppointmentStatus(requested_status)

def can_remove(appointment: Appointment, identity: IdentityClaim) -> bool:
    if identity.role in OWNER_ONLY_ROLES:
        return appointment.is_owned_by(identity.id)
    return True
