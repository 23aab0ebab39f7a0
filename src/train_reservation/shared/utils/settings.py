import os

DEFAULT_FIRST_TICKET_ID = 1001


def first_ticket_id() -> int:
    """チケットIDの採番開始値（環境変数 FIRST_TICKET_ID）"""
    raw = os.getenv("FIRST_TICKET_ID")
    if raw is None or not raw.strip():
        return DEFAULT_FIRST_TICKET_ID
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"Invalid FIRST_TICKET_ID: {raw}") from e
