"""FindManager Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.user_repository import UserRepository
from src.domain.user import UserRole
from .dtos import ManagerLookupDTO


class FindManager:
    """Looks a manager up by email before a range is handed over"""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def execute(self, email: str) -> Result[ManagerLookupDTO]:
        email = (email or "").strip().lower()
        if not email:
            return Return.err(Error(code="EMAIL_REQUIRED", message="Email is required"))

        manager = await self.user_repo.get_by_email(email, role=UserRole.MANAGER)
        if not manager:
            return Return.ok(ManagerLookupDTO(found=False, manager=None))

        return Return.ok(
            ManagerLookupDTO(
                found=True,
                manager={
                    "id": manager.id,
                    "email": manager.email,
                    "full_name": manager.full_name,
                    "is_active": manager.is_active,
                },
            )
        )
