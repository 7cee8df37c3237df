# pair_indexer/types/__init__.py

from .constants import (
    ZERO_ADDRESS,
    MINIMUM_LIQUIDITY,
    LIQUIDITY_TOKEN_DECIMALS,
    DEFAULT_BUNDLE_ID,
    ZERO_BD,
    ONE_BD,
)

from .new import (
    EvmAddress,
    EvmHash,
    EntityId,
    to_address,
)

# Configuration Types
from .config import (
    DatabaseConfig,
    PricingConfig,
    TokenSeed,
    PairSeed,
    SeedConfig,
)

# Ledger Events
from .events import (
    PairEvent,
    TransferEvent,
    MintEvent,
    BurnEvent,
    SwapEvent,
    SyncEvent,
    LedgerEvent,
    ordering_key,
    normalize_event,
)

# Entities
from .entities import (
    Entity,
    Factory,
    Bundle,
    Token,
    Pair,
    Transaction,
    Mint,
    Burn,
    Swap,
)

# Period Buckets
from .periods import (
    PairHourData,
    PairDayData,
    TokenDayData,
    FactoryDayData,
)

# Handler Results
from .results import (
    HandlerResult,
    Ok,
    SkippedMissingDependency,
    SkippedBootstrap,
    SkippedDuplicate,
    ProcessingStats,
)
