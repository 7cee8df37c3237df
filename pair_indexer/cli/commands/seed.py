# pair_indexer/cli/commands/seed.py

from pathlib import Path

import click

from ...seed import load_seed_file, seed_entities


@click.command('seed')
@click.argument('file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def seed(ctx, file):
    """Create the factory, bundle, tokens and pairs listed in a seed file

    The seed file is JSON:

        {"tokens": [{"address": "0x...", "decimals": 18, "symbol": "WBNB"}],
         "pairs": [{"address": "0x...", "token0": "0x...", "token1": "0x..."}]}
    """
    cli_context = ctx.obj['cli_context']

    try:
        seed_config = load_seed_file(file)
        config = cli_context.config
        created = seed_entities(cli_context.store, seed_config,
                                config.factory_address, config.bundle_id)
    except ValueError as e:
        raise click.ClickException(str(e))

    click.echo("✅ Seed applied")
    click.echo(f"   Tokens created: {created['tokens']}")
    click.echo(f"   Pairs created: {created['pairs']}")
    if created['factory']:
        click.echo(f"   Factory created: {config.factory_address}")
