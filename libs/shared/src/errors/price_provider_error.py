"""Price Provider Error"""

from libs.shared.src.errors.domain_error import DomainError


class PriceProviderError(DomainError):
    """Price provider error

    Raised when the price-data provider cannot deliver history for a ticker
    (network failure, rate limit, unknown symbol)
    """

    def __init__(self, ticker: str, reason: str | None = None) -> None:
        message = f"Unable to fetch monthly history for {ticker}"
        if reason:
            message += f": {reason}"
        super().__init__(message, code="PRICE_PROVIDER_ERROR")
        self.ticker = ticker
        self.reason = reason
