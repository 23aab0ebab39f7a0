from train_reservation.shared.domain import Entity
from train_reservation.shared.domain.exception import (
    BusinessRuleViolationException,
    SeatUnavailableException,
)
from train_reservation.train.domain.value_object import Route, TrainNumber


class Train(Entity[TrainNumber]):
    """列車

    座席番号は 1 から capacity まで。予約済み座席の集合だけが可変。
    """

    def __init__(
        self,
        number: TrainNumber,
        name: str,
        route: Route,
        capacity: int,
    ) -> None:
        super().__init__(number)

        if not name or not name.strip():
            raise ValueError("Train name cannot be empty")

        self._name = name
        self._route = route
        self._capacity = capacity
        self._booked_seats: set[int] = set()

        self._validate_capacity()

    def _validate_capacity(self) -> None:
        """定員は正の整数"""
        if self._capacity <= 0:
            raise BusinessRuleViolationException(
                f"Capacity must be positive: {self._capacity}"
            )

    @property
    def number(self) -> TrainNumber:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def route(self) -> Route:
        return self._route

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def booked_seats(self) -> frozenset[int]:
        return frozenset(self._booked_seats)

    def available_seats(self) -> int:
        """空席数"""
        return self._capacity - len(self._booked_seats)

    def is_full(self) -> bool:
        return self.available_seats() == 0

    def is_valid_seat(self, seat_number: int) -> bool:
        return 1 <= seat_number <= self._capacity

    def book_seat(self, seat_number: int) -> None:
        """座席を予約する

        範囲外または予約済みの場合は SeatUnavailableException。
        """
        if not self.is_valid_seat(seat_number) or seat_number in self._booked_seats:
            raise SeatUnavailableException(seat_number)
        self._booked_seats.add(seat_number)

    def cancel_seat(self, seat_number: int) -> bool:
        """座席の予約を解除する。解除できたかどうかを返す"""
        if seat_number not in self._booked_seats:
            return False
        self._booked_seats.remove(seat_number)
        return True
