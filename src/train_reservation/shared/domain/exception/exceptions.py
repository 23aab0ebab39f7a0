class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー"""

    pass


class InconsistentStateException(DomainException):
    """座席とチケットの対応関係が崩れている場合（通常は発生しない）"""

    pass


class TrainNotFoundException(ResourceNotFoundException):
    """指定された列車番号がカタログに存在しない"""

    def __init__(self, train_number: int) -> None:
        super().__init__(f"Train not found: {train_number}")
        self.train_number = train_number


class TicketNotFoundException(ResourceNotFoundException):
    """指定されたチケットIDが有効なチケットに存在しない"""

    def __init__(self, ticket_id: int) -> None:
        super().__init__(f"Ticket not found: {ticket_id}")
        self.ticket_id = ticket_id


class NoSeatsAvailableException(BusinessRuleViolationException):
    """列車が満席"""

    def __init__(self, train_number: int) -> None:
        super().__init__(f"No seats available on train {train_number}")
        self.train_number = train_number


class SeatUnavailableException(BusinessRuleViolationException):
    """座席番号が範囲外、または予約済み

    範囲外と予約済みは区別しない。
    """

    def __init__(self, seat_number: int) -> None:
        super().__init__(f"Seat {seat_number} is already booked or invalid")
        self.seat_number = seat_number
