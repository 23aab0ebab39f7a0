from .ticket_factory import TicketDetails, TicketFactory

__all__ = ["TicketDetails", "TicketFactory"]
