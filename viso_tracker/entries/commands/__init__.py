import click
from .add import add
from .listing import list_entries
from .summary import summary


@click.group()
def entries():
    pass


entries.add_command(add)
entries.add_command(list_entries)
entries.add_command(summary)
