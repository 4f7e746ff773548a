import datetime
import decimal
import threading
import typing

from .common import TimeEntry


PROJECT_OPTIONS = (
    'Viso Internal',
    'Client A',
    'Client B',
    'Personal Development',
    'Research',
)


class InvalidInput(ValueError):
    pass


class DailyEntries(typing.NamedTuple):
    date: datetime.date
    entries: tuple[TimeEntry, ...]


class DailyTotal(typing.NamedTuple):
    date: datetime.date
    hours: decimal.Decimal


def sum_hours(entries: typing.Iterable[TimeEntry]) -> decimal.Decimal:
    return sum((entry.hours for entry in entries), decimal.Decimal(0))


class TimeLedger:
    """
    In-memory, append-only collection of time entries.

    Appends are serialized with a lock; reads copy the current entries
    under the same lock and compute over that snapshot.
    """

    def __init__(self):
        self._entries: list[TimeEntry] = []
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._entries)

    @property
    def entries(self) -> tuple[TimeEntry, ...]:
        return self._snapshot()

    @staticmethod
    def project_options() -> tuple[str, ...]:
        return PROJECT_OPTIONS

    def add(self, entry: TimeEntry):
        if entry is None:
            raise InvalidInput('entry is required')
        with self._lock:
            self._entries.append(entry)

    def extend(self, entries: typing.Iterable[TimeEntry]):
        for entry in entries:
            self.add(entry)

    def entries_grouped_by_date(self) -> list[DailyEntries]:
        groups: dict[datetime.date, list[TimeEntry]] = {}
        for entry in self._snapshot():
            groups.setdefault(entry.date, []).append(entry)
        return [DailyEntries(date, tuple(groups[date])) for date in sorted(groups, reverse=True)]

    def daily_total(self, date: datetime.date) -> decimal.Decimal:
        return sum_hours(entry for entry in self._snapshot() if entry.date == date)

    def daily_totals(self) -> list[DailyTotal]:
        return [DailyTotal(group.date, sum_hours(group.entries)) for group in self.entries_grouped_by_date()]

    def grand_total(self) -> decimal.Decimal:
        return sum_hours(self._snapshot())

    def _snapshot(self) -> tuple[TimeEntry, ...]:
        with self._lock:
            return tuple(self._entries)
