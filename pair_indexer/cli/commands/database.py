# pair_indexer/cli/commands/database.py

import click


@click.command('init-db')
@click.pass_context
def init_db(ctx):
    """Create the entity tables in the configured database"""
    cli_context = ctx.obj['cli_context']

    try:
        cli_context.db_manager.create_schema()
    except ValueError as e:
        raise click.ClickException(str(e))

    click.echo("✅ Schema created")
