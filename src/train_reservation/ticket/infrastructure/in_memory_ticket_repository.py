from train_reservation.shared.domain.exception import (
    DuplicateResourceException,
    TicketNotFoundException,
)
from train_reservation.ticket.domain.entity import Ticket
from train_reservation.ticket.domain.repository import TicketRepository
from train_reservation.ticket.domain.value_object import TicketId


class InMemoryTicketRepository(TicketRepository):
    """dict を使用した TicketRepository の具象実装"""

    def __init__(self) -> None:
        self._tickets: dict[TicketId, Ticket] = {}

    def save(self, ticket: Ticket) -> None:
        """チケットを保存する"""
        if ticket.id in self._tickets:
            raise DuplicateResourceException(f"Ticket already exists: {ticket.id}")
        self._tickets[ticket.id] = ticket

    def find_by_id(self, ticket_id: TicketId) -> Ticket | None:
        """チケットIDで検索"""
        return self._tickets.get(ticket_id)

    def delete(self, ticket_id: TicketId) -> None:
        """チケットを削除する"""
        if self._tickets.pop(ticket_id, None) is None:
            raise TicketNotFoundException(ticket_id.value)

    def find_all(self) -> list[Ticket]:
        """ID順に全件返す"""
        return sorted(self._tickets.values(), key=lambda ticket: ticket.id)

    def __len__(self) -> int:
        return len(self._tickets)
