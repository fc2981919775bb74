from datetime import date
from typing import Optional

from ..utils.logger import get_logger

logger = get_logger(__name__)


def fire_target(annual_expenses: float, withdrawal_rate: float, tax_rate: float) -> float:
    """Net worth whose `withdrawal_rate` covers `annual_expenses` plus tax."""
    target = annual_expenses / (withdrawal_rate / 100)
    return target / (1 - tax_rate / 100)


class IndependenceDetector:
    """Latches the first observation at or above the target; later months never move it."""

    def __init__(self, target: float):
        self.target = float(target)
        self.independence_date: Optional[date] = None
        self.month: Optional[int] = None

    @property
    def reached(self) -> bool:
        return self.independence_date is not None

    def observe(self, month: int, when: date, real_net_worth: float) -> bool:
        """Returns True only on the month the target is first crossed."""
        if self.reached or real_net_worth < self.target:
            return False
        self.independence_date = when
        self.month = month
        logger.info(f"Independence reached at month {month} ({when}): {real_net_worth:,.0f} >= {self.target:,.0f}")
        return True
