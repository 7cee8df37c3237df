# pair_indexer/database/tables/__init__.py

from typing import Dict, Type

from ..base import DBEntityModel
from .entities import (
    DBFactory,
    DBBundle,
    DBToken,
    DBPair,
    DBTransaction,
    DBMint,
    DBBurn,
    DBSwap,
)
from .periods import (
    DBPairHourData,
    DBPairDayData,
    DBTokenDayData,
    DBFactoryDayData,
)

ENTITY_TABLES: Dict[type, Type[DBEntityModel]] = {
    table.struct_type: table
    for table in (
        DBFactory,
        DBBundle,
        DBToken,
        DBPair,
        DBTransaction,
        DBMint,
        DBBurn,
        DBSwap,
        DBPairHourData,
        DBPairDayData,
        DBTokenDayData,
        DBFactoryDayData,
    )
}
