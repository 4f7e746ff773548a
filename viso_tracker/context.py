import typing
from pathlib import Path

import click

from .entries.readers import TimeEntryCsvReader
from .ledger import TimeLedger


class TrackerContext:

    def __init__(self, config=None):
        self._config = config or {}
        self._ledger = TimeLedger()

    @property
    def ledger(self) -> TimeLedger:
        return self._ledger

    @property
    def delimiter(self) -> str:
        return self._config.get('csv', {}).get('delimiter', ',')

    @property
    def header_lines(self) -> int:
        return int(self._config.get('csv', {}).get('header_lines', 1))

    def load_entries(self, paths: typing.Iterable[str], quiet=False) -> int:
        loaded = 0
        for path in map(Path, paths):
            if not path.is_file():
                if not quiet:
                    click.echo(f'entries file {path} not found')
                continue
            with TimeEntryCsvReader(path, delimiter=self.delimiter, header_lines=self.header_lines) as reader:
                try:
                    for entry in reader:
                        self._ledger.add(entry)
                        loaded += 1
                except ValueError as e:
                    raise click.ClickException(str(e)) from e
        return loaded


pass_tracker = click.make_pass_decorator(TrackerContext, ensure=True)
