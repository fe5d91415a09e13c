"""Annual Taxable Rebalance Window"""

from datetime import date

from libs.shared.src.dtos.rebalancing.taxable_window_dto import TaxableWindowDTO


def is_in_taxable_window(day: date, window: TaxableWindowDTO) -> bool:
    """True during the first `window_days` days of the configured month"""
    return day.month == window["month"] and day.day <= window["window_days"]
