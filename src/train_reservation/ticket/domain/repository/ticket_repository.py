from abc import abstractmethod
from typing import Optional

from train_reservation.shared.domain import Repository
from train_reservation.ticket.domain.entity import Ticket
from train_reservation.ticket.domain.value_object import TicketId


class TicketRepository(Repository[Ticket, TicketId]):
    """有効なチケットのレポジトリ"""

    @abstractmethod
    def save(self, ticket: Ticket) -> None:
        """保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, ticket_id: TicketId) -> Optional[Ticket]:
        """チケットIDで検索"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, ticket_id: TicketId) -> None:
        """削除する（アーカイブはしない）"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Ticket]:
        """ID順に全件返す"""
        raise NotImplementedError
