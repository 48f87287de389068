"""NBER-dated US recessions, used to shade charts."""

from __future__ import annotations

from datetime import date

from econdash.domain.models.base import ValueObject


class RecessionPeriod(ValueObject):
    id: str
    name: str
    country_code: str = "US"
    start_date: date
    end_date: date


# Source: https://www.nber.org/research/data/us-business-cycle-expansions-and-contractions
US_RECESSION_PERIODS: tuple[RecessionPeriod, ...] = (
    RecessionPeriod(id="early_90s", name="Early 1990s Recession",
                    start_date=date(1990, 7, 1), end_date=date(1991, 3, 1)),
    RecessionPeriod(id="dotcom", name="Dot-com Bust Recession",
                    start_date=date(2001, 3, 1), end_date=date(2001, 11, 1)),
    RecessionPeriod(id="gfc", name="Great Financial Crisis",
                    start_date=date(2007, 12, 1), end_date=date(2009, 6, 1)),
    RecessionPeriod(id="covid19", name="COVID-19 Recession",
                    start_date=date(2020, 2, 1), end_date=date(2020, 4, 1)),
)


def recessions_in_window(
    start: date | None,
    end: date | None,
    periods: tuple[RecessionPeriod, ...] = US_RECESSION_PERIODS,
) -> list[RecessionPeriod]:
    """Recessions overlapping the closed window [start, end]; open bounds are unbounded."""
    return [
        p
        for p in periods
        if (end is None or p.start_date <= end) and (start is None or p.end_date >= start)
    ]
