"""Dual Momentum Defaults

Used when the corresponding environment variable is not set
"""

US_TICKER: str = "VOO"  # US Equities (S&P 500)
INTL_TICKER: str = "VXUS"  # International Equities
BOND_TICKER: str = "BND"  # Defensive (intermediate bonds)
RISK_FREE_TICKER: str = "BIL"  # T-Bills ETF, SHV or SGOV also work

LOOKBACK_MONTHS: int = 12
SKIP_CURRENT_MONTH: bool = True

# Annual taxable account rebalance window
TAXABLE_REBALANCE_MONTH: int = 1
TAXABLE_REBALANCE_WINDOW_DAYS: int = 7

SUBJECT_TITLE: str = "Dual Momentum Rebalance"
TAXABLE_SUBJECT_PREFIX: str = "[Taxable Annual] "
TAXABLE_WINDOW_HEADLINE: str = "Annual taxable account rebalance window is open."
