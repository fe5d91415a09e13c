"""Rebalancing Configuration

Reads environment variables once at startup and validates them into DTOs.
Every loader accepts an explicit mapping so tests never touch os.environ.
"""

import os
from collections.abc import Mapping

from libs.shared.src.constants import dual_momentum_defaults as defaults
from libs.shared.src.dtos.rebalancing.dual_momentum_config_dto import (
    DualMomentumConfigDTO,
)
from libs.shared.src.dtos.rebalancing.email_config_dto import EmailConfigDTO
from libs.shared.src.dtos.rebalancing.taxable_window_dto import TaxableWindowDTO
from libs.shared.src.errors.missing_configuration_error import (
    MissingConfigurationError,
)

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


def load_dual_momentum_config(
    env: Mapping[str, str] | None = None,
) -> DualMomentumConfigDTO:
    """Strategy tickers and lookback settings

    Raises:
        MissingConfigurationError: A ticker is blank or the lookback is not a positive integer
    """
    env = os.environ if env is None else env

    assets = {
        "us": _ticker(env, "DUAL_MOMENTUM_US_TICKER", defaults.US_TICKER),
        "intl": _ticker(env, "DUAL_MOMENTUM_INTL_TICKER", defaults.INTL_TICKER),
        "bonds": _ticker(env, "DUAL_MOMENTUM_BOND_TICKER", defaults.BOND_TICKER),
        "risk_free": _ticker(
            env, "DUAL_MOMENTUM_RISK_FREE_TICKER", defaults.RISK_FREE_TICKER
        ),
    }

    raw_lookback = env.get("DUAL_MOMENTUM_LOOKBACK_MONTHS", str(defaults.LOOKBACK_MONTHS))
    try:
        lookback_months = int(raw_lookback.strip())
    except ValueError:
        raise MissingConfigurationError(
            "DUAL_MOMENTUM_LOOKBACK_MONTHS", f"not an integer: {raw_lookback!r}"
        ) from None
    if lookback_months <= 0:
        raise MissingConfigurationError(
            "DUAL_MOMENTUM_LOOKBACK_MONTHS", "must be a positive integer"
        )

    raw_skip = env.get("DUAL_MOMENTUM_SKIP_CURRENT_MONTH", "")
    skip_current_month = _flag(
        "DUAL_MOMENTUM_SKIP_CURRENT_MONTH", raw_skip, defaults.SKIP_CURRENT_MONTH
    )

    return {
        "assets": assets,
        "lookback_months": lookback_months,
        "skip_current_month": skip_current_month,
    }


def load_taxable_window(env: Mapping[str, str] | None = None) -> TaxableWindowDTO:
    """Annual taxable window, out-of-range values fall back to defaults"""
    env = os.environ if env is None else env

    month = _int_in_range(
        env.get("TAXABLE_REBALANCE_MONTH"), 1, 12, defaults.TAXABLE_REBALANCE_MONTH
    )
    window_days = _int_in_range(
        env.get("TAXABLE_REBALANCE_WINDOW_DAYS"),
        1,
        31,
        defaults.TAXABLE_REBALANCE_WINDOW_DAYS,
    )
    return {"month": month, "window_days": window_days}


def load_email_config(env: Mapping[str, str] | None = None) -> EmailConfigDTO:
    """Mail credentials

    Raises:
        MissingConfigurationError: EMAIL_FROM, EMAIL_TO or EMAIL_PASS is missing
    """
    env = os.environ if env is None else env

    sender = _required(env, "EMAIL_FROM")
    recipients_raw = _required(env, "EMAIL_TO")
    password = _required(env, "EMAIL_PASS")

    recipients = [r.strip() for r in recipients_raw.split(",") if r.strip()]
    if not recipients:
        raise MissingConfigurationError("EMAIL_TO", "no recipient address")

    return {"sender": sender, "password": password, "recipients": recipients}


def _required(env: Mapping[str, str], name: str) -> str:
    value = env.get(name, "").strip()
    if not value:
        raise MissingConfigurationError(name)
    return value


def _ticker(env: Mapping[str, str], name: str, default: str) -> str:
    value = env.get(name)
    if value is None:
        return default
    value = value.strip().upper()
    if not value:
        raise MissingConfigurationError(name, "ticker must not be blank")
    return value


def _flag(name: str, raw: str, default: bool) -> bool:
    word = raw.strip().lower()
    if not word:
        return default
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise MissingConfigurationError(name, f"not a boolean: {raw!r}")


def _int_in_range(raw: str | None, low: int, high: int, default: int) -> int:
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return value if low <= value <= high else default
