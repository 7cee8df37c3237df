# pair_indexer/cli/__main__.py

"""
Pair Indexer CLI

Usage: python -m pair_indexer.cli [command] [options]
"""

from pathlib import Path

import click

from pair_indexer.cli.context import CLIContext
from pair_indexer.core.logging import IndexerLogger


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--env-file', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Read settings from this .env file')
@click.pass_context
def cli(ctx, verbose, env_file):
    """Pair Indexer - replay pair events into liquidity, volume and price records

    Settings are read from PAIR_INDEXER_* environment variables:
    - PAIR_INDEXER_DB_URL (required)
    - PAIR_INDEXER_FACTORY_ADDRESS (required)
    - PAIR_INDEXER_REFERENCE_PAIR, PAIR_INDEXER_REFERENCE_TOKEN
    - PAIR_INDEXER_STABLECOINS, PAIR_INDEXER_WHITELIST (comma separated)
    """
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    IndexerLogger.configure(
        log_level="DEBUG" if verbose else "WARNING",
        console_enabled=True,
        file_enabled=False,
        structured_format=verbose,
        force=True
    )

    cli_context = CLIContext(env_file=env_file)
    ctx.obj['cli_context'] = cli_context
    ctx.call_on_close(cli_context.close)


from pair_indexer.cli.commands.database import init_db
from pair_indexer.cli.commands.seed import seed
from pair_indexer.cli.commands.replay import replay
from pair_indexer.cli.commands.show import show

cli.add_command(init_db)
cli.add_command(seed)
cli.add_command(replay)
cli.add_command(show)


if __name__ == '__main__':
    cli()
