"""
Time helpers

Instants are stored as epoch milliseconds; report windows are computed in
the server's local time.
"""
import time
from datetime import date, datetime, timedelta
from typing import Optional, Tuple


def now_ms() -> int:
    return int(time.time() * 1000)


def to_ms(dt: datetime) -> int:
    """Epoch millis of a datetime; naive values are taken as local time"""
    return int(round(dt.timestamp() * 1000))


def local_from_ms(ms: int) -> datetime:
    return datetime.fromtimestamp(ms / 1000)


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, datetime.min.time())


def end_of_day(day: date, with_millis: bool = False) -> datetime:
    end = datetime.combine(day, datetime.min.time()).replace(hour=23, minute=59, second=59)
    if with_millis:
        end = end.replace(microsecond=999000)
    return end


def last_sunday(day: date) -> date:
    """Most recent Sunday on or before day"""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def months_ago(moment: datetime, months: int) -> datetime:
    """Same wall-clock moment N calendar months earlier, clamped to month end"""
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    next_month = date(year + (month // 12), (month % 12) + 1, 1)
    last_day = (next_month - timedelta(days=1)).day
    return moment.replace(year=year, month=month, day=min(moment.day, last_day))


def resolve_period(
    period: str,
    start: Optional[date] = None,
    end: Optional[date] = None,
    now: Optional[datetime] = None,
) -> Tuple[datetime, datetime]:
    """Report window for daily/weekly/monthly or an explicit date range"""
    if start and end:
        return start_of_day(start), end_of_day(end, with_millis=True)

    now = now or datetime.now()
    today = now.date()
    if period == "weekly":
        range_start = start_of_day(last_sunday(today))
    elif period == "monthly":
        range_start = start_of_day(today.replace(day=1))
    else:
        range_start = start_of_day(today)
    return range_start, end_of_day(today)


def hhmm(moment: datetime) -> str:
    return moment.strftime("%H:%M")
