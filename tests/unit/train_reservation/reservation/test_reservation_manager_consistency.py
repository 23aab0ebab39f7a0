import pytest

from train_reservation.reservation.applications import ReservationManager
from train_reservation.shared.domain.exception import (
    DuplicateResourceException,
    InconsistentStateException,
)
from train_reservation.ticket.domain.entity import Ticket
from train_reservation.ticket.domain.factory import TicketFactory
from train_reservation.ticket.domain.value_object import PassengerName, TicketId
from train_reservation.ticket.infrastructure import InMemoryTicketRepository
from train_reservation.train.domain.value_object import TrainNumber
from train_reservation.train.infrastructure import (
    InMemoryTrainRepository,
    build_catalog,
)


def _orphan_ticket(train_number: int = 101, seat_number: int = 5) -> Ticket:
    return Ticket(
        id=TicketId(1001),
        train_number=TrainNumber(train_number),
        passenger_name=PassengerName("Alice"),
        seat_number=seat_number,
    )


class TestReservationManagerConsistency:
    """不整合状態の検出と、失敗時に状態が残らないことのテスト"""

    def test_cancel_with_missing_train_raises_inconsistent_state(
        self, mock_repository
    ):
        """チケットの列車が見つからない場合"""
        mock_repository.find_by_id.return_value = None
        tickets = InMemoryTicketRepository()
        tickets.save(_orphan_ticket())
        manager = ReservationManager(
            train_repository=mock_repository,
            ticket_repository=tickets,
            ticket_factory=TicketFactory(),
        )

        with pytest.raises(InconsistentStateException):
            manager.cancel_ticket(1001)

        mock_repository.find_by_id.assert_called_once_with(TrainNumber(101))
        assert tickets.find_by_id(TicketId(1001)) is not None

    def test_cancel_with_unbooked_seat_raises_inconsistent_state(self):
        """チケットの座席が予約済みになっていない場合"""
        trains = InMemoryTrainRepository(build_catalog())
        tickets = InMemoryTicketRepository()
        tickets.save(_orphan_ticket(seat_number=5))
        manager = ReservationManager(
            train_repository=trains,
            ticket_repository=tickets,
            ticket_factory=TicketFactory(),
        )

        with pytest.raises(InconsistentStateException):
            manager.cancel_ticket(1001)

        assert tickets.find_by_id(TicketId(1001)) is not None
        assert trains.find_by_id(TrainNumber(101)).available_seats() == 50

    def test_failed_save_releases_seat(self, mock_repository):
        """チケットの保存に失敗した場合は座席を解放する"""
        mock_repository.save.side_effect = DuplicateResourceException("duplicate")
        trains = InMemoryTrainRepository(build_catalog())
        manager = ReservationManager(
            train_repository=trains,
            ticket_repository=mock_repository,
            ticket_factory=TicketFactory(),
        )

        with pytest.raises(DuplicateResourceException):
            manager.book_ticket(101, "Alice", 5)

        mock_repository.save.assert_called_once()
        assert trains.find_by_id(TrainNumber(101)).booked_seats == frozenset()
