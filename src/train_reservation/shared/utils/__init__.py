from .logger import get_logger
from .settings import first_ticket_id

__all__ = ["get_logger", "first_ticket_id"]
