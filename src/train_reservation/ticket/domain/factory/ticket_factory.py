from typing import TypedDict

from train_reservation.shared.utils.settings import DEFAULT_FIRST_TICKET_ID
from train_reservation.ticket.domain.entity import Ticket
from train_reservation.ticket.domain.value_object import PassengerName, TicketId
from train_reservation.train.domain.value_object import TrainNumber


class TicketDetails(TypedDict):
    """チケットの入力データ構造"""

    train_number: int
    passenger_name: str
    seat_number: int


class TicketFactory:
    """チケットエンティティのファクトリ

    - チケットIDの採番（インスタンスごとのカウンタ、再利用しない）
    - プリミティブ型から Value Object への変換
    """

    def __init__(self, first_id: int = DEFAULT_FIRST_TICKET_ID) -> None:
        self._next_id = TicketId(first_id)

    def peek_next_id(self) -> TicketId:
        """次に採番されるIDを消費せずに返す"""
        return self._next_id

    def create(self, ticket_details: TicketDetails) -> Ticket:
        """新規チケットを生成する

        生成のたびにカウンタを進める。後でキャンセルされても番号は戻さない。
        """
        # 採番より先に変換し、不正な入力でカウンタを消費しない
        train_number = TrainNumber(ticket_details["train_number"])
        passenger_name = PassengerName(ticket_details["passenger_name"])

        ticket_id = self._next_id
        self._next_id = ticket_id.next()

        return Ticket(
            id=ticket_id,
            train_number=train_number,
            passenger_name=passenger_name,
            seat_number=ticket_details["seat_number"],
        )
