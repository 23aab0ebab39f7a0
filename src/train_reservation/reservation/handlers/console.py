from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from train_reservation.reservation.applications import ReservationManager
from train_reservation.reservation.handlers.request_models import (
    BookTicketRequest,
    TicketIdRequest,
    TrainSelectionRequest,
)
from train_reservation.shared.domain.exception import (
    DomainException,
    InconsistentStateException,
    NoSeatsAvailableException,
    SeatUnavailableException,
    TicketNotFoundException,
    TrainNotFoundException,
)
from train_reservation.shared.utils import first_ticket_id, get_logger

logger = get_logger()

RequestT = TypeVar("RequestT", bound=BaseModel)

MENU = (
    "\n--- Train Reservation System Menu ---\n"
    "1. Display Available Trains\n"
    "2. Book Ticket\n"
    "3. Cancel Ticket\n"
    "4. View Ticket Details\n"
    "5. Exit"
)
EXIT_CHOICE = "5"

# 例外の属性で埋めるメッセージテンプレート
_ERROR_MESSAGES: dict[type[DomainException], str] = {
    TrainNotFoundException: "Invalid Train Number.",
    NoSeatsAvailableException: "No seats available on this train.",
    SeatUnavailableException: "Seat {seat_number} is already booked or invalid.",
    TicketNotFoundException: "Invalid Ticket ID.",
    InconsistentStateException: (
        "Error cancelling ticket. Seat might not be marked as booked."
    ),
}


def error_message(error: DomainException) -> str:
    """ドメイン例外を利用者向けメッセージに変換する"""
    template = _ERROR_MESSAGES.get(type(error))
    if template is None:
        return str(error)
    return template.format(**vars(error))


class ReservationConsole:
    """対話メニューのディスパッチャ

    入力を検証して ReservationManager の操作を1つ呼び出し、結果を表示する。
    失敗はすべてメッセージ表示で終わり、ループは継続する。
    """

    def __init__(
        self,
        manager: ReservationManager,
        read: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
    ) -> None:
        self._manager = manager
        self._read = read if read is not None else input
        self._write = write if write is not None else print
        self._commands: dict[str, Callable[[], None]] = {
            "1": self.display_trains,
            "2": self.book_ticket,
            "3": self.cancel_ticket,
            "4": self.display_ticket_details,
        }

    def run(self) -> None:
        """終了が選ばれるか入力が尽きるまでメニューを繰り返す"""
        while True:
            self._write(MENU)
            try:
                choice = self._read("Enter your choice: ").strip()
                if not self.dispatch(choice):
                    return
            except EOFError:
                logger.info("Input closed, exiting")
                self._write("Exiting system. Goodbye!")
                return

    def dispatch(self, choice: str) -> bool:
        """メニュー番号に対応する操作を実行する。継続するかどうかを返す"""
        if choice == EXIT_CHOICE:
            self._write("Exiting system. Goodbye!")
            return False

        command = self._commands.get(choice)
        if command is None:
            self._write("Invalid choice. Please try again.")
            return True

        command()
        return True

    def display_trains(self) -> None:
        logger.info("Received list trains request")
        self._write("\n--- Available Trains ---")
        for summary in self._manager.list_trains():
            self._write(str(summary))

    def book_ticket(self) -> None:
        """列車を確認してから乗客名と座席番号を尋ねる"""
        logger.info("Received book ticket request")

        selection = self._parse(
            TrainSelectionRequest, train_number=self._read("Enter Train Number: ")
        )
        if selection is None:
            return

        train = self._manager.find_train(selection.train_number)
        if train is None:
            self._reject(TrainNotFoundException(selection.train_number))
            return
        if train.is_full():
            self._reject(NoSeatsAvailableException(selection.train_number))
            return

        passenger_name = self._read("Enter Passenger Name: ")
        seat_number = self._read(
            f"Enter desired Seat Number (1-{train.capacity}): "
        )
        request = self._parse(
            BookTicketRequest,
            train_number=selection.train_number,
            passenger_name=passenger_name,
            seat_number=seat_number,
        )
        if request is None:
            return

        try:
            ticket = self._manager.book_ticket(
                request.train_number, request.passenger_name, request.seat_number
            )
        except DomainException as e:
            self._reject(e)
            return

        self._write(f"Ticket booked successfully! {ticket}")

    def cancel_ticket(self) -> None:
        logger.info("Received cancel ticket request")

        request = self._parse(
            TicketIdRequest, ticket_id=self._read("Enter Ticket ID to cancel: ")
        )
        if request is None:
            return

        try:
            self._manager.cancel_ticket(request.ticket_id)
        except DomainException as e:
            self._reject(e)
            return

        self._write(f"Ticket {request.ticket_id} cancelled successfully.")

    def display_ticket_details(self) -> None:
        logger.info("Received ticket details request")

        request = self._parse(
            TicketIdRequest, ticket_id=self._read("Enter Ticket ID to view details: ")
        )
        if request is None:
            return

        ticket = self._manager.ticket_details(request.ticket_id)
        if ticket is None:
            self._write("Ticket not found.")
            return

        self._write("\n--- Ticket Details ---")
        self._write(str(ticket))

    def _parse(self, model: type[RequestT], **raw: object) -> RequestT | None:
        """入力を検証する。不正な場合はメッセージを表示して None を返す"""
        try:
            return model.model_validate(
                {k: v.strip() if isinstance(v, str) else v for k, v in raw.items()}
            )
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            logger.warning(
                "Invalid console input", extra={"field": field, "reason": error["msg"]}
            )
            self._write(f"Invalid input: {field} {error['msg']}")
            return None

    def _reject(self, error: DomainException) -> None:
        logger.warning(
            "Reservation command rejected",
            extra={"error": type(error).__name__, "detail": str(error)},
        )
        self._write(error_message(error))


def main() -> None:
    """対話コンソールを起動する"""
    manager = ReservationManager.with_default_catalog(first_ticket_id=first_ticket_id())
    ReservationConsole(manager).run()


if __name__ == "__main__":
    main()
