import typing

from ..common import CsvReader, TimeEntry


class TimeEntryCsvReader(CsvReader):

    def __iter__(self) -> typing.Iterator[TimeEntry]:
        for row in super().__iter__():
            if not any(cell.strip() for cell in row):
                continue
            try:
                yield TimeEntry.from_row(row)
            except ValueError as e:
                raise ValueError(f'{self._path}:{self.line_num}: {e}') from e
