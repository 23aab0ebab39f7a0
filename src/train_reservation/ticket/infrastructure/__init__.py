from .in_memory_ticket_repository import InMemoryTicketRepository

__all__ = ["InMemoryTicketRepository"]
