import click

from ...common import format_hours, parse_date
from ...context import pass_tracker, TrackerContext


def validate_date(ctx, param, value):
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError:
        raise click.BadParameter(f'{value} is not a date in YYYY-mm-dd format')


@click.option('--date', '-d', help="Only print the total for this day (YYYY-mm-dd)", required=False, callback=validate_date)
@click.argument('files', nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.command('list')
@pass_tracker
def list_entries(tracker: TrackerContext, files, date):
    tracker.load_entries(files)
    ledger = tracker.ledger
    if date is not None:
        click.echo(f'{date.isoformat()}: {format_hours(ledger.daily_total(date))}')
        return
    for group in ledger.entries_grouped_by_date():
        click.echo(group.date.strftime('%A, %Y-%m-%d'))
        for entry in group.entries:
            click.echo(f'  {format_hours(entry.hours):>6}  {entry.project or "-"}: {entry.description}')
        click.echo(f'  Total: {format_hours(ledger.daily_total(group.date))}')
    click.echo(f'Grand total: {format_hours(ledger.grand_total())}')
