from train_reservation.shared.domain import Entity
from train_reservation.ticket.domain.value_object import PassengerName, TicketId
from train_reservation.train.domain.value_object import TrainNumber


class Ticket(Entity[TicketId]):
    """乗車券

    予約1件の記録。生成後は変更しない。列車は番号でのみ参照する。
    """

    def __init__(
        self,
        id: TicketId,
        train_number: TrainNumber,
        passenger_name: PassengerName,
        seat_number: int,
    ) -> None:
        super().__init__(id)

        self._train_number = train_number
        self._passenger_name = passenger_name
        self._seat_number = seat_number

    @property
    def train_number(self) -> TrainNumber:
        return self._train_number

    @property
    def passenger_name(self) -> PassengerName:
        return self._passenger_name

    @property
    def seat_number(self) -> int:
        return self._seat_number

    def __str__(self) -> str:
        return (
            f"Ticket ID: {self._id}, Train No: {self._train_number}, "
            f"Passenger: {self._passenger_name}, Seat: {self._seat_number}"
        )

    def __repr__(self) -> str:
        return (
            f"Ticket(id={self._id.value}, train_number={self._train_number.value}, "
            f"passenger_name={self._passenger_name.value!r}, "
            f"seat_number={self._seat_number})"
        )
