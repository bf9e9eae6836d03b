# utils.py
from datetime import date, datetime, timezone


def utc_now():
    # DB timestamps are stored as naive UTC (consistent across dialects)
    return datetime.now(timezone.utc).replace(tzinfo=None)


def server_today() -> date:
    # Attendance is dated by the server's local calendar
    return date.today()
