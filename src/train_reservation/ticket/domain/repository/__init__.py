from .ticket_repository import TicketRepository

__all__ = ["TicketRepository"]
