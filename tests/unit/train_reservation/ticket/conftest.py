import pytest

from train_reservation.ticket.domain.entity import Ticket
from train_reservation.ticket.domain.value_object import PassengerName, TicketId
from train_reservation.train.domain.value_object import TrainNumber


@pytest.fixture
def create_ticket():
    """Ticket を生成する Factory fixture"""

    def _factory(
        ticket_id: int = 1001,
        train_number: int = 101,
        passenger_name: str = "Alice",
        seat_number: int = 5,
    ) -> Ticket:
        return Ticket(
            id=TicketId(ticket_id),
            train_number=TrainNumber(train_number),
            passenger_name=PassengerName(passenger_name),
            seat_number=seat_number,
        )

    return _factory
