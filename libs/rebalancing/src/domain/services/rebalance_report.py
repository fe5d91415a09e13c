"""Rebalance Report Rendering

Plain-text report, email bodies and subject lines
"""

from datetime import date

from libs.shared.src.constants.dual_momentum_defaults import (
    SUBJECT_TITLE,
    TAXABLE_WINDOW_HEADLINE,
)
from libs.shared.src.dtos.rebalancing.dual_momentum_config_dto import (
    DualMomentumAssetsDTO,
)
from libs.shared.src.dtos.rebalancing.momentum_result_dto import MomentumResultDTO
from libs.shared.src.enums.absolute_filter_status import AbsoluteFilterStatus


def format_percent(value: float, digits: int = 2) -> str:
    """0.0823 -> '8.23%'"""
    return f"{value * 100:.{digits}f}%"


def render_summary_lines(
    assets: DualMomentumAssetsDTO,
    lookback_months: int,
    us_return: float,
    intl_return: float,
    risk_free_return: float,
    absolute_filter_passed: bool,
) -> list[str]:
    """Three trailing returns plus the absolute filter label"""
    period = f"{lookback_months}m"
    status = AbsoluteFilterStatus.from_passed(absolute_filter_passed)
    return [
        f"US ({assets['us']}) {period}: {format_percent(us_return)}",
        f"INTL ({assets['intl']}) {period}: {format_percent(intl_return)}",
        f"Risk-free ({assets['risk_free']}) {period}: "
        f"{format_percent(risk_free_return)}",
        f"Absolute filter: {status.value}",
    ]


def render_report(summary_lines: list[str], recommendation: str) -> str:
    """Full report logged on every run"""
    return "\n".join([*summary_lines, f"Recommendation: {recommendation}"])


def _result_summary_lines(result: MomentumResultDTO) -> list[str]:
    return render_summary_lines(
        result["assets"],
        result["lookback_months"],
        result["us_return"],
        result["intl_return"],
        result["risk_free_return"],
        result["absolute_filter_passed"],
    )


def render_email_body(result: MomentumResultDTO) -> str:
    """Concise summary for the regular rebalance email"""
    return "\n".join(_result_summary_lines(result)) + "\n\n" + result["recommendation"]


def render_taxable_email_body(result: MomentumResultDTO) -> str:
    """Annual taxable account reminder"""
    return f"{TAXABLE_WINDOW_HEADLINE}\n\n" + render_email_body(result)


def build_subject(as_of: date, prefix: str = "") -> str:
    """'<prefix>Dual Momentum Rebalance - YYYY-MM-DD'"""
    return f"{prefix}{SUBJECT_TITLE} - {as_of.isoformat()}"
