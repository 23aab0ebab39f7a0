from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class TicketId:
    """チケットID

    採番順に単調増加する整数。例: 1001
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Ticket ID must be an integer: {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)

    def next(self) -> TicketId:
        """次のチケットID"""
        return TicketId(self.value + 1)
