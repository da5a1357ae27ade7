"""Access policy

Allowed roles per operation. ``None`` admits any authenticated user.
"""

from typing import Dict, Optional, Tuple
from src.domain.user import UserRole

OWNERS = (UserRole.OWNER, UserRole.OWNER_ASSISTANT)
PARTNERS = (UserRole.PARTNER, UserRole.PARTNER_CONTROLLER)
MANAGERS = (UserRole.MANAGER,)
OWNER_ONLY = (UserRole.OWNER,)

ACCESS_POLICY: Dict[str, Optional[Tuple[UserRole, ...]]] = {
    "ticket_ranges.list": OWNERS,
    "ticket_ranges.create": OWNERS,
    "ticket_ranges.check_manager": OWNERS,
    "ticket_ranges.my": MANAGERS,
    "ticket_ranges.my_available": MANAGERS,
    "tickets.issue": MANAGERS,
    "tickets.check_number": PARTNERS,
    "tickets.confirm": PARTNERS,
    "tickets.cancel": OWNER_ONLY,
    "users.reset_balance": OWNER_ONLY,
    "users.reset_debt": OWNER_ONLY,
    "users.managers": OWNER_ONLY,
    "users.promoters": OWNER_ONLY,
    "users.balance_history": OWNER_ONLY,
    "users.my_balance_history": None,
}


def is_allowed(operation: str, role: UserRole) -> bool:
    allowed = ACCESS_POLICY[operation]
    return allowed is None or role in allowed
