"""Missing Configuration Error"""

from libs.shared.src.errors.domain_error import DomainError


class MissingConfigurationError(DomainError):
    """Missing configuration error

    Raised at startup when a required setting is absent or invalid,
    before any price data is fetched
    """

    def __init__(self, field: str, reason: str | None = None) -> None:
        message = f"Missing required configuration: {field}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, code="MISSING_CONFIGURATION")
        self.field = field
        self.reason = reason
