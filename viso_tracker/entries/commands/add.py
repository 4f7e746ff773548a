import click

from ...common import TimeEntry, as_decimal, format_hours
from ...context import pass_tracker, TrackerContext
from ...ledger import PROJECT_OPTIONS
from ..writers import EntriesAppender
from .listing import validate_date


def validate_hours(ctx, param, value):
    try:
        return as_decimal(value)
    except ValueError:
        raise click.BadParameter(f'{value} is not a decimal number')


@click.option('--date', '-d', help="Day of work in YYYY-mm-dd format", required=True, callback=validate_date, prompt="Date (YYYY-mm-dd)")
@click.option('--project', '-p', help="Project name", required=False, default=PROJECT_OPTIONS[0], prompt="Project",
              type=click.Choice(PROJECT_OPTIONS), show_choices=True)
@click.option('--hours', '-h', help="Hours spent", required=True, callback=validate_hours, prompt="Hours")
@click.option('--description', help="What was done", required=False, default='', prompt="Description")
@click.argument('file', type=click.Path(dir_okay=False))
@click.command()
@pass_tracker
def add(tracker: TrackerContext, file, date, project, hours, description):
    tracker.load_entries([file], quiet=True)
    entry = TimeEntry(date, hours, project=project, description=description)
    tracker.ledger.add(entry)
    with EntriesAppender(file, with_header=tracker.header_lines > 0, delimiter=tracker.delimiter) as writer:
        writer.write(entry)
    click.echo(f'added {entry.id}')
    click.echo(f'{date.isoformat()} total: {format_hours(tracker.ledger.daily_total(date))}')
