import typing

from openpyxl.styles import Font, PatternFill
from openpyxl.styles.colors import Color
from openpyxl.utils import get_column_letter


class Column(typing.NamedTuple):
    title: str
    width: int
    number_format: str = None


class BaseSheet:
    """
    Row-oriented sheet: a styled header row built from ``_columns``,
    then one ``append`` per data row with per-column number formats.
    """

    _title = ''
    _columns: typing.Sequence[Column] = ()
    _header_font = Font(color='FF000000', bold=True)
    _header_fill = PatternFill("solid", fgColor=Color(indexed=22))

    def __init__(self, sheet, title=None):
        self._sheet = sheet
        sheet.title = title or self._title
        for idx, column in enumerate(self._columns, start=1):
            letter = get_column_letter(idx)
            sheet.column_dimensions[letter].width = column.width
            self.set_header(f'{letter}1', column.title)
        self._row = 1

    @property
    def sheet(self):
        return self._sheet

    @property
    def last_row(self) -> int:
        return self._row

    def set_header(self, cell, value):
        self._sheet[cell] = value
        self._sheet[cell].font = self._header_font
        self._sheet[cell].fill = self._header_fill

    def set_value(self, cell, value, number_format=None):
        self._sheet[cell] = value
        if number_format:
            self._sheet[cell].number_format = number_format

    def append(self, *values):
        self._row += 1
        for idx, (column, value) in enumerate(zip(self._columns, values), start=1):
            self.set_value(f'{get_column_letter(idx)}{self._row}', value, column.number_format)
