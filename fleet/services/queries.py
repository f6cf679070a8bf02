"""Pure query and aggregation helpers over in-memory collections.

Every function takes a sequence and returns a new list or dict; none of
them mutate their input.  All of them are full linear scans.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Callable, Hashable, Iterable, Protocol, Sequence, TypeVar

from fleet.contracts.aircraft import Aircraft
from fleet.contracts.enums import AircraftStatus
from fleet.contracts.flight import FlightSchedule

# "Match everything" sentinel for the fleet view filters
ALL = "Всі"
_ALL_ALIASES = {ALL, "All"}

# User-facing labels for aircraft statuses
STATUS_LABELS: dict[str, str] = {
    AircraftStatus.ACTIVE.value: "Активні",
    AircraftStatus.MAINTENANCE.value: "На обслуговуванні",
    AircraftStatus.GROUNDED.value: "На землі",
    AircraftStatus.RESERVED.value: "Зарезервовані",
    AircraftStatus.RETIRED.value: "Списані",
}
_LABEL_TO_STATUS: dict[str, str] = {label: status for status, label in STATUS_LABELS.items()}


class HasId(Protocol):
    id: int


E = TypeVar("E", bound=HasId)
T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


# ------------------------------------------------------------------
# Identity
# ------------------------------------------------------------------


def find_by_id(items: Iterable[E], entity_id: int) -> E | None:
    """First entity with a matching id, or ``None``."""
    return next((item for item in items if item.id == entity_id), None)


def index_of_id(items: Sequence[E], entity_id: int) -> int | None:
    """Position of the first entity with a matching id, or ``None``."""
    for position, item in enumerate(items):
        if item.id == entity_id:
            return position
    return None


def next_id(items: Iterable[E]) -> int:
    """``max(existing ids) + 1``, or ``1`` for an empty collection.

    Not a counter: deleting the highest id frees it for reuse.
    """
    return max((item.id for item in items), default=0) + 1


# ------------------------------------------------------------------
# Dates
# ------------------------------------------------------------------


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def same_day(a: date | datetime | None, b: date | datetime | None) -> bool:
    """Calendar-day equality, ignoring time of day."""
    if a is None or b is None:
        return False
    return _as_date(a) == _as_date(b)


def schedules_on(
    schedules: Iterable[FlightSchedule], day: date | datetime
) -> list[FlightSchedule]:
    """Flights whose ``flight_date`` falls on *day*.

    ``departure_time`` is deliberately ignored; its date part may drift.
    """
    return [s for s in schedules if same_day(s.flight_date, day)]


def upcoming_maintenance(
    aircraft: Iterable[Aircraft],
    now: datetime,
    within_days: int = 30,
    limit: int = 10,
) -> list[Aircraft]:
    """Aircraft due for maintenance by ``now + within_days``, soonest first."""
    horizon = now + timedelta(days=within_days)
    due = [
        a for a in aircraft
        if a.next_maintenance_date is not None and a.next_maintenance_date <= horizon
    ]
    due.sort(key=lambda a: a.next_maintenance_date)
    return due[:limit]


# ------------------------------------------------------------------
# Grouping
# ------------------------------------------------------------------


def group_count(items: Iterable[T], key: Callable[[T], K]) -> dict[K, int]:
    """Count items per key, keys in order of first occurrence."""
    counts: dict[K, int] = {}
    for item in items:
        k = key(item)
        counts[k] = counts.get(k, 0) + 1
    return counts


def translate_status(status: str) -> str:
    """User-facing label for a status; unknown values pass through."""
    return STATUS_LABELS.get(status, status)


# ------------------------------------------------------------------
# Fleet view filter
# ------------------------------------------------------------------


def _is_all(value: str | None) -> bool:
    return value is None or value in _ALL_ALIASES


def matches_search(aircraft: Aircraft, search_text: str | None) -> bool:
    """Case-insensitive substring match on registration, model or manufacturer."""
    if not search_text or not search_text.strip():
        return True
    needle = search_text.lower()
    return (
        needle in aircraft.registration_number.lower()
        or needle in aircraft.model.lower()
        or needle in aircraft.manufacturer.lower()
    )


def matches_status(aircraft: Aircraft, status_filter: str | None) -> bool:
    """Match on a status value ("Active") or its label ("Активні").

    A filter value that is neither is ignored.
    """
    if _is_all(status_filter):
        return True
    wanted = _LABEL_TO_STATUS.get(status_filter, status_filter)
    if wanted not in STATUS_LABELS:
        return True
    return aircraft.status == wanted


def matches_manufacturer(aircraft: Aircraft, manufacturer_filter: str | None) -> bool:
    if _is_all(manufacturer_filter):
        return True
    return aircraft.manufacturer.casefold() == manufacturer_filter.casefold()


def filter_aircraft(
    aircraft: Iterable[Aircraft],
    search_text: str | None = "",
    status_filter: str | None = ALL,
    manufacturer_filter: str | None = ALL,
) -> list[Aircraft]:
    """Apply the fleet view's search, status and manufacturer filters (ANDed)."""
    return [
        a for a in aircraft
        if matches_search(a, search_text)
        and matches_status(a, status_filter)
        and matches_manufacturer(a, manufacturer_filter)
    ]


def status_filter_options() -> list[str]:
    return [ALL, *STATUS_LABELS.values()]


def manufacturer_filter_options(aircraft: Iterable[Aircraft]) -> list[str]:
    """Sentinel followed by distinct manufacturers in first-seen order."""
    return [ALL, *group_count(aircraft, lambda a: a.manufacturer)]
