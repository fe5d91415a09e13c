"""Relative Momentum Winner"""

from enum import Enum


class MomentumWinner(Enum):
    """Risky asset selected by relative momentum"""

    US = "US"  # US equities
    INTL = "INTL"  # International equities
