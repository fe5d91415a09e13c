"""Absolute Momentum Filter Status"""

from enum import Enum


class AbsoluteFilterStatus(Enum):
    """Whether the relative winner beat the risk-free proxy"""

    PASSED = "PASSED"
    FAILED = "FAILED"

    @classmethod
    def from_passed(cls, passed: bool) -> "AbsoluteFilterStatus":
        return cls.PASSED if passed else cls.FAILED
