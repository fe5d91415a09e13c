"""Monthly Price Data Structure"""

from typing import TypedDict


class MonthlyPriceDTO(TypedDict):
    """Monthly price sample

    One bar of a chronological monthly price series.
    Missing or non-numeric values are None.
    """

    date: str  # YYYY-MM-DD format
    adj_close: float | None
    close: float | None
