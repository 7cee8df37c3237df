# pair_indexer/pricing/__init__.py

from .interfaces import PriceOracle, UsdPrices
from .oracle import StorePriceOracle
