# pair_indexer/cli/commands/show.py

import click
import msgspec

from ...types import Pair, Token, Factory, to_address

ENTITY_KINDS = {
    'pair': Pair,
    'token': Token,
    'factory': Factory,
}


@click.command('show')
@click.argument('kind', type=click.Choice(sorted(ENTITY_KINDS)))
@click.argument('key')
@click.pass_context
def show(ctx, kind, key):
    """Print a stored pair, token or factory as JSON"""
    cli_context = ctx.obj['cli_context']

    try:
        store = cli_context.store
    except ValueError as e:
        raise click.ClickException(str(e))

    entity = store.load(ENTITY_KINDS[kind], to_address(key))
    if entity is None:
        raise click.ClickException(f"{kind} '{key}' not found")

    click.echo(msgspec.json.format(msgspec.json.encode(entity), indent=2).decode())
