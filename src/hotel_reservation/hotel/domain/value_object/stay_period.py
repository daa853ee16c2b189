from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from hotel_reservation.hotel.domain.exception import InvalidDateRangeException


def _parse_date(value: date | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        raise ValueError(f"Invalid date format: {value!r}. Use YYYY-MM-DD") from e


@dataclass(frozen=True)
class StayPeriod:
    """Stay period (check-in date + check-out date)"""

    check_in: date
    check_out: date

    def __post_init__(self) -> None:
        if self.check_out <= self.check_in:
            raise InvalidDateRangeException()

    @classmethod
    def parse(cls, check_in: date | str, check_out: date | str) -> StayPeriod:
        """Build from dates, datetimes or YYYY-MM-DD strings"""
        return cls(check_in=_parse_date(check_in), check_out=_parse_date(check_out))

    def nights(self) -> int:
        """Number of nights in the stay"""
        return (self.check_out - self.check_in).days
