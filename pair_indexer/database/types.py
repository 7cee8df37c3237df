# pair_indexer/database/types.py

from decimal import Decimal
from typing import Optional
import enum

from sqlalchemy import String, Text
from sqlalchemy.types import TypeDecorator

from ..types.new import EvmAddress, EvmHash


class EvmAddressType(TypeDecorator):
    impl = String(42)
    cache_ok = True

    def process_bind_param(self, value: Optional[EvmAddress], dialect) -> Optional[str]:
        return str(value).lower() if value else None

    def process_result_value(self, value: Optional[str], dialect) -> Optional[EvmAddress]:
        return EvmAddress(value) if value else None


class EvmHashType(TypeDecorator):
    impl = String(66)
    cache_ok = True

    def process_bind_param(self, value: Optional[EvmHash], dialect) -> Optional[str]:
        return str(value).lower() if value else None

    def process_result_value(self, value: Optional[str], dialect) -> Optional[EvmHash]:
        return EvmHash(value) if value else None


class DecimalType(TypeDecorator):
    """Exact decimal stored as text so every backend round-trips it unchanged"""
    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Optional[Decimal], dialect) -> Optional[str]:
        return str(value) if value is not None else None

    def process_result_value(self, value: Optional[str], dialect) -> Optional[Decimal]:
        return Decimal(value) if value is not None else None


class PeriodType(enum.Enum):
    ONE_HOUR = "1hr"
    ONE_DAY = "1day"

    def seconds(self) -> int:
        """Get the duration of this period type in seconds"""
        durations = {
            PeriodType.ONE_HOUR: 3600,
            PeriodType.ONE_DAY: 86400,
        }
        return durations[self]

    def period_index(self, timestamp: int) -> int:
        return timestamp // self.seconds()

    def period_start(self, timestamp: int) -> int:
        return self.period_index(timestamp) * self.seconds()
