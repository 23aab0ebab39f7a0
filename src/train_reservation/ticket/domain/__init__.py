from .entity import Ticket as Ticket
from .factory import TicketFactory as TicketFactory
from .repository import TicketRepository as TicketRepository
from .value_object import PassengerName as PassengerName
from .value_object import TicketId as TicketId
