from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    InconsistentStateException as InconsistentStateException,
)
from .exception import (
    NoSeatsAvailableException as NoSeatsAvailableException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    SeatUnavailableException as SeatUnavailableException,
)
from .exception import (
    TicketNotFoundException as TicketNotFoundException,
)
from .exception import (
    TrainNotFoundException as TrainNotFoundException,
)
from .repository import Repository as Repository
