import os

import click
from yaml import load
try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader

from .context import TrackerContext
from .entries.commands import entries
from .ledger import TimeLedger


@click.group(context_settings={'auto_envvar_prefix': 'VISO_TRACKER'})
@click.option('--config', default='config.yaml', type=click.Path())
@click.pass_context
def entry_point(ctx, config):
    if os.path.exists(config):
        with open(config, 'r') as f:
            config = load(f.read(), Loader=Loader) or {}
        ctx.default_map = config
        ctx.obj = TrackerContext(config)


@click.command()
def projects():
    for name in TimeLedger.project_options():
        click.echo(name)


entry_point.add_command(entries)
entry_point.add_command(projects)


if __name__ == '__main__':
    entry_point()
