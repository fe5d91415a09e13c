"""Insufficient Data Error"""

from libs.shared.src.errors.domain_error import DomainError


class InsufficientDataError(DomainError):
    """Insufficient price data error

    Raised when fewer than 2 usable closes remain for a ticker
    (brand-new or illiquid instruments)
    """

    def __init__(self, ticker: str, usable_samples: int) -> None:
        super().__init__(
            f"Insufficient price data for {ticker}: "
            f"{usable_samples} usable sample(s), need at least 2",
            code="INSUFFICIENT_DATA",
        )
        self.ticker = ticker
        self.usable_samples = usable_samples
