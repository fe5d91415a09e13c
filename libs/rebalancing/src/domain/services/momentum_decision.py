"""Dual Momentum Decision

Relative momentum picks the stronger of US and international equities;
absolute momentum only keeps it when it beats the risk-free proxy,
otherwise the allocation moves to bonds.
"""

from datetime import date

from libs.rebalancing.src.domain.services.rebalance_report import (
    format_percent,
    render_report,
    render_summary_lines,
)
from libs.shared.src.dtos.rebalancing.dual_momentum_config_dto import (
    DualMomentumAssetsDTO,
)
from libs.shared.src.dtos.rebalancing.momentum_result_dto import MomentumResultDTO
from libs.shared.src.enums.momentum_winner import MomentumWinner


def select_relative_winner(us_return: float, intl_return: float) -> MomentumWinner:
    """A tie goes to US"""
    return MomentumWinner.US if us_return >= intl_return else MomentumWinner.INTL


def decide_dual_momentum(
    us_return: float,
    intl_return: float,
    risk_free_return: float,
    assets: DualMomentumAssetsDTO,
    as_of: date,
    lookback_months: int = 12,
) -> MomentumResultDTO:
    """
    Apply relative and absolute momentum to three trailing returns

    Args:
        us_return: US equity trailing return
        intl_return: International equity trailing return
        risk_free_return: Risk-free proxy trailing return
        assets: Tickers used in the recommendation
        as_of: Evaluation date
        lookback_months: Lookback period, used in labels

    Returns:
        MomentumResultDTO: Decision and rendered report
    """
    leader = select_relative_winner(us_return, intl_return)
    leader_return = max(us_return, intl_return)
    passed = leader_return > risk_free_return

    leader_ticker = assets["us"] if leader is MomentumWinner.US else assets["intl"]
    margin = leader_return - risk_free_return

    if passed:
        recommendation = (
            f"Allocate 100% to {leader.value} ({leader_ticker}). "
            f"Beats risk-free {format_percent(risk_free_return)} "
            f"by {format_percent(margin)}."
        )
    else:
        recommendation = (
            f"Move to Bonds ({assets['bonds']}). Absolute momentum failed: "
            f"{leader.value} {lookback_months}m {format_percent(leader_return)} "
            f"<= Risk-free ({format_percent(risk_free_return)}), "
            f"short by {format_percent(-margin)}."
        )

    summary_lines = render_summary_lines(
        assets, lookback_months, us_return, intl_return, risk_free_return, passed
    )

    return {
        "as_of": as_of.isoformat(),
        "lookback_months": lookback_months,
        "assets": assets,
        "us_return": us_return,
        "intl_return": intl_return,
        "risk_free_return": risk_free_return,
        "nominal_leader": leader.value,
        "winner": leader.value if passed else None,
        "absolute_filter_passed": passed,
        "recommendation": recommendation,
        "report": render_report(summary_lines, recommendation),
    }
