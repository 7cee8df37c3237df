# pair_indexer/utils/amounts.py
"""
Utility functions for handling raw on-chain amounts
"""

from decimal import Context, Decimal
from typing import Union

from ..types.constants import ZERO_BD


def amount_to_int(amount: Union[str, int, None]) -> int:
    """Convert amount to int with robust type handling"""
    if amount is None:
        return 0
    if isinstance(amount, str):
        if amount.strip() == "":
            return 0
        return int(amount)
    return int(amount)


# wide enough to hold any uint256 amount exactly
SCALING_CONTEXT = Context(prec=80)


def convert_token_to_decimal(raw_amount: Union[str, int, None], decimals: int) -> Decimal:
    """Scale a raw integer token amount down by the token's decimal count, without rounding"""
    amount = Decimal(amount_to_int(raw_amount))
    if decimals == 0:
        return amount
    return amount.scaleb(-decimals, context=SCALING_CONTEXT)


def safe_div(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Divide, returning zero for a zero denominator"""
    if denominator == ZERO_BD:
        return ZERO_BD
    return numerator / denominator
