from ..common import CsvWriter, TimeEntry, format_hours
from ..ledger import DailyEntries, sum_hours


ENTRIES_HEADER = [
    'date',
    'project',
    'hours',
    'description',
    'id',
]


class EntriesAppender(CsvWriter):
    """Appends entry rows; the header goes in only when the file is missing or empty."""

    def __init__(self, filepath, with_header=True, delimiter=','):
        super().__init__(filepath, header=ENTRIES_HEADER if with_header else None, mode='a', delimiter=delimiter)

    def write(self, entry: TimeEntry):
        super().write(entry.to_row())


class DetailedWriter(CsvWriter):

    def __init__(self, filepath):
        super().__init__(filepath, header=[
            'id',
            'date',
            'project',
            'hours',
            'description'
        ])

    def write(self, entry: TimeEntry):
        super().write([
            str(entry.id),
            entry.date.strftime('%Y-%m-%d'),
            entry.project,
            format_hours(entry.hours),
            entry.description
        ])


class DailyTotalsWriter(CsvWriter):

    def __init__(self, filepath):
        super().__init__(filepath, header=[
            'date',
            'hours',
            'entries'
        ])

    def write(self, group: DailyEntries):
        super().write([
            group.date.strftime('%Y-%m-%d'),
            format_hours(sum_hours(group.entries)),
            len(group.entries)
        ])
