# pair_indexer/cli/commands/replay.py

from pathlib import Path
from typing import List

import click
import msgspec

from ...types import LedgerEvent, PairEvent, ordering_key, normalize_event


def read_events(path: Path) -> List[PairEvent]:
    """Decode newline-delimited JSON events; amounts may be given as strings"""
    decoder = msgspec.json.Decoder(LedgerEvent, strict=False)
    events = []
    with path.open('rb') as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                events.append(normalize_event(decoder.decode(line)))
            except msgspec.DecodeError as e:
                raise ValueError(f"{path}:{line_number}: {e}") from e
    return sorted(events, key=ordering_key)


@click.command('replay')
@click.argument('file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def replay(ctx, file):
    """Run the events in FILE through the handlers in ledger order

    FILE holds one JSON event per line, tagged by "event":

        {"event": "Sync", "pair": "0x...", "txHash": "0x...", "txFrom": "0x...",
         "blockNumber": 1, "timestamp": 1700000000, "logIndex": 3,
         "reserve0": "1000", "reserve1": "2000"}
    """
    cli_context = ctx.obj['cli_context']

    try:
        events = read_events(file)
        router = cli_context.router
    except ValueError as e:
        raise click.ClickException(str(e))

    stats = router.process_many(events)

    click.echo(f"✅ Replayed {stats.processed} events")
    click.echo(f"   Ok: {stats.ok}")
    click.echo(f"   Skipped (missing dependency): {stats.skipped_missing_dependency}")
    click.echo(f"   Skipped (bootstrap): {stats.skipped_bootstrap}")
    click.echo(f"   Skipped (duplicate): {stats.skipped_duplicate}")
