import pytest

from train_reservation.reservation.handlers.console import (
    MENU,
    ReservationConsole,
    error_message,
    main,
)
from train_reservation.shared.domain.exception import (
    InconsistentStateException,
    SeatUnavailableException,
    TrainNotFoundException,
)


@pytest.fixture
def run_console(manager):
    """入力を順に与えてコンソールを実行し、(出力, プロンプト) を返す"""

    def _run(*answers: str) -> tuple[list[str], list[str]]:
        remaining = iter(answers)
        output: list[str] = []
        prompts: list[str] = []

        def read(prompt: str) -> str:
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        ReservationConsole(manager, read=read, write=output.append).run()
        return output, prompts

    return _run


class TestReservationConsole:
    """ReservationConsole のテスト"""

    def test_exit(self, run_console):
        output, prompts = run_console("5")

        assert output == [MENU, "Exiting system. Goodbye!"]
        assert prompts == ["Enter your choice: "]

    def test_end_of_input_exits(self, run_console):
        output, _ = run_console()
        assert output[-1] == "Exiting system. Goodbye!"

    @pytest.mark.parametrize("choice", ["0", "6", "abc", ""])
    def test_invalid_choice(self, run_console, choice):
        output, _ = run_console(choice, "5")
        assert "Invalid choice. Please try again." in output

    def test_display_trains(self, run_console):
        output, _ = run_console("1", "5")

        start = output.index("\n--- Available Trains ---")
        assert output[start + 1 : start + 3] == [
            "Train No: 101, Name: Express 101, Route: CityA to CityB, "
            "Available Seats: 50/50",
            "Train No: 202, Name: Superfast 202, Route: CityB to CityC, "
            "Available Seats: 75/75",
        ]

    def test_book_ticket(self, run_console, manager):
        output, prompts = run_console("2", "101", "Alice", "5", "5")

        assert (
            "Ticket booked successfully! "
            "Ticket ID: 1001, Train No: 101, Passenger: Alice, Seat: 5"
        ) in output
        assert "Enter desired Seat Number (1-50): " in prompts
        assert manager.find_train(101).available_seats() == 49

    def test_book_unknown_train_stops_before_name(self, run_console):
        """存在しない列車では乗客名を尋ねない"""
        output, prompts = run_console("2", "999", "5")

        assert "Invalid Train Number." in output
        assert "Enter Passenger Name: " not in prompts

    def test_book_full_train(self, manager):
        for seat in range(1, 51):
            manager.book_ticket(101, f"P{seat}", seat)
        output: list[str] = []
        answers = iter(["2", "101", "5"])

        ReservationConsole(
            manager, read=lambda _: next(answers), write=output.append
        ).run()

        assert "No seats available on this train." in output

    def test_book_taken_seat(self, run_console):
        output, _ = run_console("2", "101", "Alice", "5", "2", "101", "Bob", "5", "5")
        assert "Seat 5 is already booked or invalid." in output

    def test_book_seat_zero(self, run_console):
        output, _ = run_console("2", "202", "Alice", "0", "5")
        assert "Seat 0 is already booked or invalid." in output

    def test_book_non_numeric_seat(self, run_console, manager):
        """数値でない入力はメッセージを表示してループを続ける"""
        output, _ = run_console("2", "101", "Alice", "five", "1", "5")

        assert any(line.startswith("Invalid input: seat_number") for line in output)
        assert "\n--- Available Trains ---" in output
        assert manager.active_tickets() == ()

    def test_book_blank_name(self, run_console, manager):
        output, _ = run_console("2", "101", "   ", "5", "5")

        assert any(line.startswith("Invalid input: passenger_name") for line in output)
        assert manager.find_train(101).available_seats() == 50

    def test_book_non_numeric_train(self, run_console):
        output, prompts = run_console("2", "Express", "5")

        assert any(line.startswith("Invalid input: train_number") for line in output)
        assert "Enter Passenger Name: " not in prompts

    def test_cancel_ticket(self, run_console, manager):
        output, _ = run_console("2", "101", "Alice", "5", "3", "1001", "5")

        assert "Ticket 1001 cancelled successfully." in output
        assert manager.find_train(101).available_seats() == 50

    def test_cancel_unknown_ticket(self, run_console):
        output, _ = run_console("3", "1001", "5")
        assert "Invalid Ticket ID." in output

    def test_view_ticket_details(self, run_console):
        output, _ = run_console("2", "202", "Bob", "7", "4", "1001", "5")

        start = output.index("\n--- Ticket Details ---")
        assert output[start + 1] == (
            "Ticket ID: 1001, Train No: 202, Passenger: Bob, Seat: 7"
        )

    def test_view_unknown_ticket(self, run_console):
        output, _ = run_console("4", "1234", "5")
        assert "Ticket not found." in output

    def test_main_runs_with_default_catalog(self, monkeypatch, capsys):
        answers = iter(["2", "101", "Alice", "5", "5"])
        monkeypatch.setenv("FIRST_TICKET_ID", "3000")
        monkeypatch.setattr("builtins.input", lambda _: next(answers))

        main()

        assert "Ticket ID: 3000" in capsys.readouterr().out


class TestErrorMessage:
    def test_seat_message_includes_seat_number(self):
        assert (
            error_message(SeatUnavailableException(12))
            == "Seat 12 is already booked or invalid."
        )

    def test_train_not_found(self):
        assert error_message(TrainNotFoundException(999)) == "Invalid Train Number."

    def test_inconsistent_state(self):
        assert error_message(InconsistentStateException("broken")) == (
            "Error cancelling ticket. Seat might not be marked as booked."
        )
