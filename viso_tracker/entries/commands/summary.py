import os

import click
from openpyxl.workbook import Workbook

from ...common import TimeEntry, format_hours
from ...context import pass_tracker, TrackerContext
from ...ledger import DailyEntries, sum_hours
from ...model.excel import BaseSheet, Column
from ..writers import DailyTotalsWriter, DetailedWriter

HOURS_FORMAT = '0.00'
DATE_FORMAT = 'yyyy-mm-dd'


class SummarySheet(BaseSheet):
    _title = 'Summary'
    _columns = (
        Column('Date', 15, DATE_FORMAT),
        Column('Hours', 10, HOURS_FORMAT),
        Column('Entries', 10),
    )

    def write(self, group: DailyEntries):
        self.append(group.date, sum_hours(group.entries), len(group.entries))

    def close(self):
        total_row = self.last_row + 2
        self.set_header(f'A{total_row}', 'Grand total')
        self.set_value(f'B{total_row}', f'=SUM(B2:B{max(self.last_row, 2)})', number_format=HOURS_FORMAT)


class EntriesSheet(BaseSheet):
    _title = 'Entries'
    _columns = (
        Column('Date', 15, DATE_FORMAT),
        Column('Project', 25),
        Column('Hours', 10, HOURS_FORMAT),
        Column('Description', 60),
    )

    def write(self, entry: TimeEntry):
        self.append(entry.date, entry.project, entry.hours, entry.description)


class LedgerSummaryWriter:

    def __init__(self, path):
        self._path = path

    def __enter__(self):
        self._workbook = Workbook()
        self._summary_sheet = SummarySheet(self._workbook.active)
        self._entries_sheet = EntriesSheet(self._workbook.create_sheet())
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self._summary_sheet.close()
            self._workbook.save(filename=self._path)

    def write(self, group: DailyEntries):
        self._summary_sheet.write(group)
        for entry in group.entries:
            self._entries_sheet.write(entry)


@click.option('--output', '-o',
              help='Summary output path, without extension',
              required=True,
              default='reports/summary',
              type=click.Path(exists=False, file_okay=True, dir_okay=False),
              prompt="Output path")
@click.argument('files', nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.command()
@pass_tracker
def summary(tracker: TrackerContext, files, output):
    click.echo(f'loaded {tracker.load_entries(files)} entries')
    directory = os.path.dirname(output)
    if directory:
        os.makedirs(directory, exist_ok=True)
    groups = tracker.ledger.entries_grouped_by_date()
    with (LedgerSummaryWriter(f'{output}.xlsx') as workbook,
          DailyTotalsWriter(f'{output}-daily.csv') as daily_writer,
          DetailedWriter(f'{output}-detailed.csv') as detailed_writer):
        for group in groups:
            workbook.write(group)
            daily_writer.write(group)
            for entry in group.entries:
                detailed_writer.write(entry)
    click.echo(f'grand total: {format_hours(tracker.ledger.grand_total())}')
    click.echo(f'summary written to {output}.xlsx')
