from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from threading import RLock

from train_reservation.shared.domain.exception import (
    InconsistentStateException,
    NoSeatsAvailableException,
    TicketNotFoundException,
    TrainNotFoundException,
)
from train_reservation.shared.utils import get_logger
from train_reservation.shared.utils.settings import DEFAULT_FIRST_TICKET_ID
from train_reservation.ticket.domain.entity import Ticket
from train_reservation.ticket.domain.factory import TicketFactory
from train_reservation.ticket.domain.repository import TicketRepository
from train_reservation.ticket.domain.value_object import PassengerName, TicketId
from train_reservation.ticket.infrastructure import InMemoryTicketRepository
from train_reservation.train.domain.entity import Train
from train_reservation.train.domain.repository import TrainRepository
from train_reservation.train.domain.value_object import TrainNumber
from train_reservation.train.infrastructure import (
    DEFAULT_CATALOG,
    InMemoryTrainRepository,
    TrainSpec,
    build_catalog,
)

logger = get_logger()


@dataclass(frozen=True)
class TrainSummary:
    """列車一覧の1行分"""

    number: int
    name: str
    source: str
    destination: str
    available: int
    total: int

    @classmethod
    def from_train(cls, train: Train) -> TrainSummary:
        return cls(
            number=train.number.value,
            name=train.name,
            source=train.route.source,
            destination=train.route.destination,
            available=train.available_seats(),
            total=train.capacity,
        )

    def __str__(self) -> str:
        return (
            f"Train No: {self.number}, Name: {self.name}, "
            f"Route: {self.source} to {self.destination}, "
            f"Available Seats: {self.available}/{self.total}"
        )


class ReservationManager:
    """予約管理サービス（集約ルート）

    列車と有効なチケットを保持し、予約・キャンセル・照会を提供する。
    座席集合とチケットの対応は、各操作の完了後に常に1対1となる。
    """

    def __init__(
        self,
        train_repository: TrainRepository,
        ticket_repository: TicketRepository,
        ticket_factory: TicketFactory,
    ) -> None:
        self._trains = train_repository
        self._tickets = ticket_repository
        self._factory = ticket_factory
        # 座席集合とチケットの更新を1つのクリティカルセクションにまとめる
        self._lock = RLock()

    @classmethod
    def with_default_catalog(
        cls,
        first_ticket_id: int = DEFAULT_FIRST_TICKET_ID,
        catalog: Iterable[TrainSpec] = DEFAULT_CATALOG,
    ) -> ReservationManager:
        """インメモリのレポジトリとカタログで組み立てる"""
        return cls(
            train_repository=InMemoryTrainRepository(build_catalog(catalog)),
            ticket_repository=InMemoryTicketRepository(),
            ticket_factory=TicketFactory(first_id=first_ticket_id),
        )

    def list_trains(self) -> Iterator[TrainSummary]:
        """カタログ順に列車の概要を返す（呼び出しごとに先頭から）"""
        for train in self._trains.find_all():
            yield TrainSummary.from_train(train)

    def find_train(self, number: int) -> Train | None:
        """列車番号で検索"""
        return self._trains.find_by_id(TrainNumber(number))

    def ticket_details(self, ticket_id: int) -> Ticket | None:
        """有効なチケットを検索"""
        return self._tickets.find_by_id(TicketId(ticket_id))

    def active_tickets(self) -> tuple[Ticket, ...]:
        """有効なチケットをID順に返す"""
        return tuple(self._tickets.find_all())

    def book_ticket(
        self, train_number: int, passenger_name: str, seat_number: int
    ) -> Ticket:
        """座席を予約し、発行したチケットを返す

        Raises:
            TrainNotFoundException: 列車が存在しない
            NoSeatsAvailableException: 満席
            SeatUnavailableException: 座席が範囲外または予約済み
            ValueError: 乗客名が空
        """
        with self._lock:
            train = self.find_train(train_number)
            if train is None:
                raise TrainNotFoundException(train_number)

            if train.is_full():
                raise NoSeatsAvailableException(train_number)

            # 座席を確保する前に検証し、失敗時に座席だけが残らないようにする
            PassengerName(passenger_name)

            train.book_seat(seat_number)
            try:
                ticket = self._factory.create(
                    {
                        "train_number": train_number,
                        "passenger_name": passenger_name,
                        "seat_number": seat_number,
                    }
                )
                self._tickets.save(ticket)
            except Exception:
                train.cancel_seat(seat_number)
                raise

        logger.info(
            "Ticket booked",
            extra={
                "ticket_id": ticket.id.value,
                "train_number": train_number,
                "seat_number": seat_number,
            },
        )
        return ticket

    def cancel_ticket(self, ticket_id: int) -> Ticket:
        """チケットをキャンセルし、キャンセルしたチケットを返す

        Raises:
            TicketNotFoundException: 有効なチケットが存在しない
            InconsistentStateException: 列車または座席の予約が見つからない
        """
        with self._lock:
            ticket = self.ticket_details(ticket_id)
            if ticket is None:
                raise TicketNotFoundException(ticket_id)

            train = self._trains.find_by_id(ticket.train_number)
            if train is None:
                logger.error(
                    "Train for active ticket is missing",
                    extra={
                        "ticket_id": ticket_id,
                        "train_number": ticket.train_number.value,
                    },
                )
                raise InconsistentStateException(
                    f"Train {ticket.train_number} for ticket {ticket_id} not found"
                )

            if not train.cancel_seat(ticket.seat_number):
                logger.error(
                    "Seat for active ticket is not booked",
                    extra={
                        "ticket_id": ticket_id,
                        "train_number": ticket.train_number.value,
                        "seat_number": ticket.seat_number,
                    },
                )
                raise InconsistentStateException(
                    f"Seat {ticket.seat_number} on train {ticket.train_number} "
                    f"is not booked for ticket {ticket_id}"
                )

            self._tickets.delete(ticket.id)

        logger.info(
            "Ticket cancelled",
            extra={
                "ticket_id": ticket_id,
                "train_number": ticket.train_number.value,
                "seat_number": ticket.seat_number,
            },
        )
        return ticket
