import csv
import datetime
import decimal
import os
import re
import typing
import uuid

import dateutil.parser

# calendar date, optionally followed by an ISO time part
FULL_DATE = re.compile(r'\d{4}-\d{2}-\d{2}(T.*)?')


def as_decimal(value) -> decimal.Decimal:
    if isinstance(value, decimal.Decimal):
        return value
    if isinstance(value, float):
        value = str(value)
    try:
        return decimal.Decimal(str(value).strip().replace(",", "."))
    except decimal.InvalidOperation as e:
        raise ValueError(f'not a decimal value: {value!r}') from e


def parse_date(value) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    value = value.strip()
    if not FULL_DATE.fullmatch(value):
        raise ValueError(f'not a YYYY-mm-dd date: {value!r}')
    return dateutil.parser.isoparse(value).date()


def format_hours(value: decimal.Decimal) -> str:
    return f'{value:.2f}'


class TimeEntry:
    """A single logged unit of work."""

    def __init__(self, date, hours, project: str = '', description: str = '', id: uuid.UUID = None):
        self._id = id if id is not None else uuid.uuid4()
        self._date = parse_date(date)
        self._project = project or ''
        self._hours = as_decimal(hours)
        self._description = description or ''

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def date(self) -> datetime.date:
        return self._date

    @property
    def project(self) -> str:
        return self._project

    @property
    def hours(self) -> decimal.Decimal:
        return self._hours

    @property
    def description(self) -> str:
        return self._description

    def __eq__(self, other):
        if not isinstance(other, TimeEntry):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def __repr__(self):
        return (f'TimeEntry(id={self.id}, date={self.date.isoformat()}, project={self.project!r}, '
                f'hours={self.hours}, description={self.description!r})')

    def as_tuple(self) -> tuple:
        return self.id, self.date, self.project, self.hours, self.description

    def to_row(self) -> list[str]:
        return [
            self.date.strftime('%Y-%m-%d'),
            self.project,
            str(self.hours),
            self.description,
            str(self.id),
        ]

    @classmethod
    def from_row(cls, row: typing.Sequence[str]):
        if len(row) < 4:
            raise ValueError(f'expected at least 4 columns (date, project, hours, description), got {len(row)}')
        entry_id = uuid.UUID(row[4].strip()) if len(row) > 4 and row[4].strip() else None
        return cls(parse_date(row[0]), as_decimal(row[2]), project=row[1], description=row[3], id=entry_id)


class CsvReader:

    def __init__(self, path, delimiter=',', skip_header=True, header_lines=1):
        self._path = path
        self._delimiter = delimiter
        self._skip_header = skip_header
        self._header_lines = header_lines

    def __enter__(self):
        self._file = open(self._path, newline='').__enter__()
        self._reader = csv.reader(self._file, delimiter=self._delimiter)
        if self._skip_header:
            for _ in range(0, self._header_lines):
                next(self._reader, None)
        return self

    def __iter__(self):
        for row in self._reader:
            yield row

    @property
    def line_num(self) -> int:
        return self._reader.line_num

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._file.__exit__(exc_type, exc_val, exc_tb)


def has_content(path) -> bool:
    return os.path.isfile(path) and os.path.getsize(path) > 0


def ends_with_newline(path) -> bool:
    with open(path, 'rb') as f:
        f.seek(-1, os.SEEK_END)
        return f.read(1) in (b'\n', b'\r')


class CsvWriter:

    def __init__(self, filepath, header=None, mode='w', delimiter=','):
        self._filepath = filepath
        self._header = header
        self._mode = mode
        self._delimiter = delimiter

    def __enter__(self):
        appending = self._mode == 'a' and has_content(self._filepath)
        missing_newline = appending and not ends_with_newline(self._filepath)
        self._file = open(self._filepath, self._mode, newline='')
        if missing_newline:
            self._file.write('\r\n')
        self._writer = csv.writer(self._file, delimiter=self._delimiter)
        if self._header and not appending:
            self._writer.writerow(self._header)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._file.close()

    def write(self, row: list[str]):
        self._writer.writerow(row)
