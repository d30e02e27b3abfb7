from datetime import datetime
from dateutil import tz


def get_local_now(tz_name: str = "Europe/London") -> datetime:
    return datetime.now(tz=tz.gettz(tz_name))


def format_money(amount: float, symbol: str = "£") -> str:
    return f"{symbol}{amount:.2f}"
