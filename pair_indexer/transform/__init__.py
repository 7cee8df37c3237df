# pair_indexer/transform/__init__.py

from .base import PairHandler
from .periods import PeriodAggregator, PeriodBuckets
from .assembler import TransactionAssembler
from .reserves import ReserveUpdater
from .swaps import SwapRecorder
from .router import PairEventRouter

__all__ = [
    'PairHandler',
    'PeriodAggregator',
    'PeriodBuckets',
    'TransactionAssembler',
    'ReserveUpdater',
    'SwapRecorder',
    'PairEventRouter',
]
