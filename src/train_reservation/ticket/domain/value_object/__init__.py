from .passenger_name import PassengerName
from .ticket_id import TicketId

__all__ = ["PassengerName", "TicketId"]
