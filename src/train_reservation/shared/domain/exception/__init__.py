from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    InconsistentStateException,
    NoSeatsAvailableException,
    ResourceNotFoundException,
    SeatUnavailableException,
    TicketNotFoundException,
    TrainNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "InconsistentStateException",
    "TrainNotFoundException",
    "TicketNotFoundException",
    "NoSeatsAvailableException",
    "SeatUnavailableException",
]
