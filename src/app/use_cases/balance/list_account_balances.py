"""
List Account Balances Use Case

Owner overview of what each manager or promoter is owed and owes,
read before paying them out.
"""
from libs.result import Result, Return, Error
from src.app.repositories.user_repository import UserRepository
from src.domain.user import UserRole
from .dtos import AccountBalanceDTO

LISTABLE_ROLES = (UserRole.MANAGER, UserRole.PROMOTER)


class ListAccountBalances:
    """
    Use case: List managers or promoters with their balance fields

    Accounts are ordered newest first; inactive accounts are included so
    their remaining balance can still be settled.
    """

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def execute(self, role: UserRole) -> Result[list[AccountBalanceDTO]]:
        if role not in LISTABLE_ROLES:
            return Return.err(
                Error(
                    code="ROLE_NOT_ALLOWED",
                    message="Only managers and promoters carry balances",
                    reason=f"role={getattr(role, 'value', role)}",
                )
            )

        users = await self.user_repo.list_by_role(role)
        return Return.ok([AccountBalanceDTO.from_entity(user) for user in users])
