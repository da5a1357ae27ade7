"""Ticket Settlement Service

Turns ticket lifecycle events into balance ledger entries.
"""

import logging
from decimal import Decimal
from typing import List, Optional
from src.app.repositories.sale_repository import SaleRepository
from src.app.repositories.user_repository import UserRepository
from src.app.services.balance_ledger import BalanceLedger
from src.domain.balance_history import BalanceHistory, BalanceType, TransactionType
from src.domain.sale import PaymentMethod, Sale
from src.domain.ticket import Ticket
from src.domain.user import UserRole

logger = logging.getLogger(__name__)


class TicketSettlement:
    """
    Ledger side effects of confirming and cancelling tickets

    Rules:
    - Confirmation credits the commission of the tour to the seller: the
      promoter when the sale has one, the selling user otherwise
    - A cash or acquiring sale registered by a manager credits the sale
      total to that manager's debt_to_company, on confirmation and on
      cancellation alike
    - Entries are flushed only; the calling use case commits
    """

    def __init__(self, ledger: BalanceLedger, user_repo: UserRepository, sale_repo: SaleRepository):
        self.ledger = ledger
        self.user_repo = user_repo
        self.sale_repo = sale_repo

    async def settle_confirmation(
        self, ticket: Ticket, sale: Sale, performed_by_user_id: Optional[str]
    ) -> List[BalanceHistory]:
        entries: List[BalanceHistory] = []

        tour = await self.sale_repo.get_tour(sale.tour_id)
        commission = tour.commission_for(sale.total_amount) if tour else Decimal("0")
        earner_id = sale.promoter_user_id or sale.seller_user_id

        if commission > 0:
            entries.append(
                await self.ledger.apply_delta(
                    user_id=earner_id,
                    balance_type=BalanceType.BALANCE,
                    transaction_type=TransactionType.CREDIT,
                    amount=commission,
                    description=(
                        f"Credit from sale of ticket #{ticket.id}, "
                        f"sale amount: {sale.total_amount}, commission: {commission}"
                    ),
                    performed_by_user_id=performed_by_user_id,
                    ticket_id=ticket.id,
                    sale_id=sale.id,
                )
            )

        debt_entry = await self._credit_manager_debt(
            ticket, sale, performed_by_user_id, event="ticket"
        )
        if debt_entry:
            entries.append(debt_entry)
        return entries

    async def settle_cancellation(
        self, ticket: Ticket, sale: Sale, performed_by_user_id: Optional[str]
    ) -> List[BalanceHistory]:
        entry = await self._credit_manager_debt(
            ticket, sale, performed_by_user_id, event="cancelled ticket"
        )
        return [entry] if entry else []

    async def _credit_manager_debt(
        self, ticket: Ticket, sale: Sale, performed_by_user_id: Optional[str], event: str
    ) -> Optional[BalanceHistory]:
        if not sale.is_cash_payment:
            return None

        seller = await self.user_repo.get_by_id(sale.seller_user_id)
        if not seller or seller.role != UserRole.MANAGER:
            return None

        on_behalf = " for a promoter" if sale.promoter_user_id else ""
        return await self.ledger.apply_delta(
            user_id=seller.id,
            balance_type=BalanceType.DEBT_TO_COMPANY,
            transaction_type=TransactionType.CREDIT,
            amount=Decimal(sale.total_amount),
            description=(
                f"Debt increase from {event} #{ticket.id} sold{on_behalf} "
                f"for {PaymentMethod(sale.payment_method).value}, amount: {sale.total_amount}"
            ),
            performed_by_user_id=performed_by_user_id,
            ticket_id=ticket.id,
            sale_id=sale.id,
        )
