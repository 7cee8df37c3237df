# pair_indexer/types/constants.py

from decimal import Decimal

from .new import EvmAddress

ZERO_ADDRESS = EvmAddress("0x0000000000000000000000000000000000000000")

# liquidity permanently locked by the pair contract on its first mint
MINIMUM_LIQUIDITY = 1000

LIQUIDITY_TOKEN_DECIMALS = 18

DEFAULT_BUNDLE_ID = "1"

ZERO_BD = Decimal(0)
ONE_BD = Decimal(1)
