"""Rank modifier lookup."""

import numbers

import config
from models.errors import InvalidRankError


def modifier_for(rank: int) -> int:
    """Map a 1-16 rank to its scoring modifier.

    Ranks come in tiers of two: ranks 1-2 get 8, ranks 3-4 get 7, and so on
    down to ranks 15-16, which get 1.

    Raises:
        InvalidRankError: rank is not an integer from 1 to 16
    """
    if isinstance(rank, bool) or not isinstance(rank, numbers.Integral):
        raise InvalidRankError(rank)
    for (low, high), modifier in config.RANK_MODIFIERS.items():
        if low <= rank <= high:
            return modifier
    raise InvalidRankError(rank)
