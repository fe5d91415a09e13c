"""yfinance API Settings

All places calling yfinance must use these constants.
"""

# Monthly bars
YFINANCE_MONTHLY_INTERVAL: str = "1mo"

# Column names of an unadjusted download (auto_adjust=False)
YFINANCE_ADJ_CLOSE_COLUMN: str = "Adj Close"
YFINANCE_CLOSE_COLUMN: str = "Close"
